from abc import ABC, abstractmethod
from typing import List

from src.service.webinar.domain.entity.participation_entity import Participation


class IParticipationRepo(ABC):
    """
    Participation repository interface.

    Implementations store what they are given: one seat per (webinar, user)
    is a booking rule checked by BookSeatUseCase, not a storage constraint.
    """

    @abstractmethod
    async def find_by_webinar_id(self, *, webinar_id: str) -> List[Participation]:
        """
        Args:
            webinar_id: Webinar ID

        Returns:
            Participations held for the webinar (order carries no meaning)
        """
        pass

    @abstractmethod
    async def save(self, *, participation: Participation) -> None:
        pass
