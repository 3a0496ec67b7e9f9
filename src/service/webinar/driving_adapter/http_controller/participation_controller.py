from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.command.book_seat_use_case import BookSeatUseCase
from src.service.webinar.app.dto import BookSeatRequest
from src.service.webinar.app.query.list_participations_use_case import ListParticipationsUseCase
from src.service.webinar.domain.entity.user_entity import User
from src.service.webinar.driving_adapter.http_controller.schema.participation_schema import (
    BookSeatHttpRequest,
    ParticipationListResponse,
    ParticipationResponse,
)


router = APIRouter()


@router.post('/{webinar_id}/participation', status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
async def book_seat(
    webinar_id: str,
    request: BookSeatHttpRequest,
    use_case: BookSeatUseCase = Depends(Provide[Container.book_seat_use_case]),
) -> ParticipationResponse:
    # Domain errors map to 404/400/409 through the registered exception handlers
    result = await use_case.execute(
        BookSeatRequest(
            webinar_id=webinar_id,
            user=User(
                id=request.user.id,
                email=request.user.email,
                password=request.user.password.get_secret_value(),
            ),
        )
    )
    return ParticipationResponse.from_entity(result.participation)


@router.get('/{webinar_id}/participation', response_model=ParticipationListResponse)
@Logger.io
async def list_participations(
    webinar_id: str,
    use_case: ListParticipationsUseCase = Depends(ListParticipationsUseCase.depends),
) -> ParticipationListResponse:
    participations = await use_case.list_participations(webinar_id=webinar_id)
    return [ParticipationResponse.from_entity(p) for p in participations]
