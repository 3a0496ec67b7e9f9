import attrs


@attrs.define(frozen=True)
class User:
    id: str
    email: str
    password: str = attrs.field(repr=False)  # Opaque credential, kept out of logs
