"""
Book-seat rule violations.

Every error raised by BookSeatUseCase for a broken booking rule derives from
BookSeatError; the platform base class (NotFoundError / DomainError /
ConflictError) carries the HTTP status the exception handlers respond with.
"""

from src.platform.exception.exceptions import (
    ConflictError,
    CustomBaseError,
    DomainError,
    NotFoundError,
)


class BookSeatError(CustomBaseError):
    """Base class for the closed set of book-seat failures"""


class WebinarNotFoundError(NotFoundError, BookSeatError):
    def __init__(self, *, webinar_id: str) -> None:
        super().__init__(f'Webinar with ID {webinar_id} not found')
        self.webinar_id = webinar_id


class WebinarDatesTooSoonError(DomainError, BookSeatError):
    def __init__(self, *, webinar_id: str) -> None:
        super().__init__(f'Webinar with ID {webinar_id} starts too soon to accept bookings')
        self.webinar_id = webinar_id


class UserAlreadyRegisteredError(ConflictError, BookSeatError):
    def __init__(self, *, webinar_id: str, user_id: str) -> None:
        super().__init__(f'User with ID {user_id} is already registered')
        self.webinar_id = webinar_id
        self.user_id = user_id


class WebinarFullyBookedError(ConflictError, BookSeatError):
    def __init__(self, *, webinar_id: str) -> None:
        super().__init__(f'No seats available for webinar with ID {webinar_id}')
        self.webinar_id = webinar_id
