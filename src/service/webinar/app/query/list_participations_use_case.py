from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.interface import IParticipationRepo, IWebinarRepo
from src.service.webinar.domain.entity.participation_entity import Participation
from src.service.webinar.domain.exception.book_seat_errors import WebinarNotFoundError


class ListParticipationsUseCase:
    def __init__(
        self,
        *,
        webinar_repo: IWebinarRepo,
        participation_repo: IParticipationRepo,
    ) -> None:
        self.webinar_repo = webinar_repo
        self.participation_repo = participation_repo

    @classmethod
    @inject
    def depends(
        cls,
        webinar_repo: IWebinarRepo = Depends(Provide[Container.webinar_repo]),
        participation_repo: IParticipationRepo = Depends(Provide[Container.participation_repo]),
    ) -> Self:
        return cls(webinar_repo=webinar_repo, participation_repo=participation_repo)

    @Logger.io
    async def list_participations(self, *, webinar_id: str) -> List[Participation]:
        if await self.webinar_repo.find_by_id(webinar_id=webinar_id) is None:
            raise WebinarNotFoundError(webinar_id=webinar_id)
        return await self.participation_repo.find_by_webinar_id(webinar_id=webinar_id)
