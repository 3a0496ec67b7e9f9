"""Book-seat DTOs."""

import attrs

from src.service.webinar.domain.entity.participation_entity import Participation
from src.service.webinar.domain.entity.user_entity import User


@attrs.define(frozen=True)
class BookSeatRequest:
    webinar_id: str
    user: User


@attrs.define(frozen=True)
class BookSeatResult:
    participation: Participation
