from collections import defaultdict
from datetime import datetime, timezone
import time
from typing import Callable, DefaultDict, Optional

import anyio
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.webinar_metrics import BookSeatOutcome, metrics
from src.service.webinar.app.dto import BookSeatRequest, BookSeatResult
from src.service.webinar.app.interface import (
    IMailer,
    IParticipationRepo,
    IUserRepo,
    IWebinarRepo,
)
from src.service.webinar.domain.entity.participation_entity import Participation
from src.service.webinar.domain.entity.user_entity import User
from src.service.webinar.domain.entity.webinar_entity import Webinar
from src.service.webinar.domain.exception.book_seat_errors import (
    UserAlreadyRegisteredError,
    WebinarDatesTooSoonError,
    WebinarFullyBookedError,
    WebinarNotFoundError,
)
from src.service.webinar.domain.value_object.mail_message import MailMessage


NEW_PARTICIPANT_SUBJECT = 'New participant registered'

_OUTCOME_BY_ERROR: dict[type[Exception], BookSeatOutcome] = {
    WebinarNotFoundError: BookSeatOutcome.WEBINAR_NOT_FOUND,
    WebinarDatesTooSoonError: BookSeatOutcome.DATES_TOO_SOON,
    UserAlreadyRegisteredError: BookSeatOutcome.ALREADY_REGISTERED,
    WebinarFullyBookedError: BookSeatOutcome.FULLY_BOOKED,
}


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BookSeatUseCase:
    """
    Book a seat in a webinar for a user

    Flow (each step aborts the remaining ones on failure):
    1. Load webinar                          -> WebinarNotFoundError
    2. Check lead time                       -> WebinarDatesTooSoonError
    3. Load user, register it when unknown
    4. Check duplicate registration          -> UserAlreadyRegisteredError
    5. Check remaining seats                 -> WebinarFullyBookedError
    6. Persist participation
    7. Notify organizer by mail

    Steps 4-6 hold a per-webinar lock, so two requests handled by the same
    instance cannot both take the last seat or both register the same user.
    There is no cross-process guarantee. Locks are never evicted: the map
    holds one entry per webinar that has been booked, bounded by the webinars
    known to the repository since step 1 rejects unknown ids.

    Repository and mailer failures propagate unchanged. A mailer failure
    after step 6 leaves the participation persisted.
    """

    def __init__(
        self,
        *,
        participation_repo: IParticipationRepo,
        user_repo: IUserRepo,
        webinar_repo: IWebinarRepo,
        mailer: IMailer,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.participation_repo = participation_repo
        self.user_repo = user_repo
        self.webinar_repo = webinar_repo
        self.mailer = mailer
        self.clock = clock or _utc_now
        self.tracer = trace.get_tracer(__name__)
        self._webinar_locks: DefaultDict[str, anyio.Lock] = defaultdict(anyio.Lock)

    @Logger.io
    async def execute(self, request: BookSeatRequest) -> BookSeatResult:
        started_at = time.perf_counter()
        outcome = BookSeatOutcome.ERROR
        try:
            with self.tracer.start_as_current_span(
                'use_case.book_seat',
                attributes={
                    'webinar.id': request.webinar_id,
                    'user.id': request.user.id,
                },
            ):
                result = await self._book_seat(request)
            outcome = BookSeatOutcome.BOOKED
            return result
        except tuple(_OUTCOME_BY_ERROR) as e:
            outcome = next(o for cls, o in _OUTCOME_BY_ERROR.items() if isinstance(e, cls))
            raise
        finally:
            metrics.record_book_seat(outcome=outcome, duration=time.perf_counter() - started_at)

    async def _book_seat(self, request: BookSeatRequest) -> BookSeatResult:
        webinar_id = request.webinar_id
        user = request.user

        # ========== Step 1: Webinar must exist ==========
        webinar = await self.webinar_repo.find_by_id(webinar_id=webinar_id)
        if webinar is None:
            raise WebinarNotFoundError(webinar_id=webinar_id)

        # ========== Step 2: Lead time ==========
        if webinar.is_too_soon(self.clock()):
            raise WebinarDatesTooSoonError(webinar_id=webinar_id)

        # ========== Step 3: Auto-register unknown users ==========
        await self._ensure_user_registered(user)

        async with self._webinar_locks[webinar_id]:
            # ========== Step 4: One seat per user ==========
            participations = await self.participation_repo.find_by_webinar_id(
                webinar_id=webinar_id
            )
            if any(p.user_id == user.id for p in participations):
                raise UserAlreadyRegisteredError(webinar_id=webinar_id, user_id=user.id)

            # ========== Step 5: Capacity ==========
            remaining_seats = webinar.seats - len(participations)
            if remaining_seats <= 0:
                raise WebinarFullyBookedError(webinar_id=webinar_id)

            # ========== Step 6: Persist participation ==========
            participation = Participation(webinar_id=webinar_id, user_id=user.id)
            await self.participation_repo.save(participation=participation)

        Logger.base.info(
            f'[BOOK-SEAT] User {user.id} booked webinar {webinar_id} '
            f'({remaining_seats - 1}/{webinar.seats} seats left)'
        )

        # ========== Step 7: Notify organizer ==========
        await self._notify_organizer(webinar=webinar, user=user)

        return BookSeatResult(participation=participation)

    async def _ensure_user_registered(self, user: User) -> None:
        if await self.user_repo.find_by_id(user_id=user.id) is not None:
            return
        await self.user_repo.save(user=user)
        Logger.base.info(f'[BOOK-SEAT] Registered new user {user.id}')

    async def _notify_organizer(self, *, webinar: Webinar, user: User) -> None:
        await self.mailer.send(
            message=MailMessage(
                to=webinar.organizer_id,
                subject=NEW_PARTICIPANT_SUBJECT,
                body=f'User {user.id} has registered for webinar {webinar.id}',
            )
        )
        metrics.record_notification_sent()
