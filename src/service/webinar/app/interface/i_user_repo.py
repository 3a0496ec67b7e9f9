from abc import ABC, abstractmethod
from typing import Optional

from src.service.webinar.domain.entity.user_entity import User


class IUserRepo(ABC):
    @abstractmethod
    async def find_by_id(self, *, user_id: str) -> Optional[User]:
        pass

    @abstractmethod
    async def save(self, *, user: User) -> None:
        pass
