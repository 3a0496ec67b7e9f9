from abc import ABC, abstractmethod
from typing import Optional

from src.service.webinar.domain.entity.webinar_entity import Webinar


class IWebinarRepo(ABC):
    """
    Webinar repository interface.

    The booking flow only reads webinars; ``create`` is used by the
    scheduling side (seed script, tests).
    """

    @abstractmethod
    async def find_by_id(self, *, webinar_id: str) -> Optional[Webinar]:
        """
        Args:
            webinar_id: Webinar ID

        Returns:
            Webinar entity or None if not found
        """
        pass

    @abstractmethod
    async def create(self, *, webinar: Webinar) -> None:
        pass
