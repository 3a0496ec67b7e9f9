import attrs


@attrs.define(frozen=True)
class Participation:
    """One seat held by one user in one webinar. Equality is by (webinar_id, user_id)."""

    webinar_id: str
    user_id: str
