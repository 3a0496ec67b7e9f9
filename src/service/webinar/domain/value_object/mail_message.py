import attrs


@attrs.define(frozen=True)
class MailMessage:
    to: str
    subject: str
    body: str
