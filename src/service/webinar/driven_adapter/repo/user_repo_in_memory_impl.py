from typing import Iterable, List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.interface.i_user_repo import IUserRepo
from src.service.webinar.domain.entity.user_entity import User


class UserRepoInMemoryImpl(IUserRepo):
    def __init__(self, users: Optional[Iterable[User]] = None) -> None:
        self.database: List[User] = list(users or [])

    @Logger.io
    async def find_by_id(self, *, user_id: str) -> Optional[User]:
        return next((user for user in self.database if user.id == user_id), None)

    @Logger.io
    async def save(self, *, user: User) -> None:
        self.database.append(user)
