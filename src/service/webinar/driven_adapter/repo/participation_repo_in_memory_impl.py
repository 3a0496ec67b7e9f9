from typing import Iterable, List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.interface.i_participation_repo import IParticipationRepo
from src.service.webinar.domain.entity.participation_entity import Participation


class ParticipationRepoInMemoryImpl(IParticipationRepo):
    """List-backed store. Duplicates are stored as given."""

    def __init__(self, participations: Optional[Iterable[Participation]] = None) -> None:
        self.database: List[Participation] = list(participations or [])

    @Logger.io
    async def find_by_webinar_id(self, *, webinar_id: str) -> List[Participation]:
        return [p for p in self.database if p.webinar_id == webinar_id]

    @Logger.io
    async def save(self, *, participation: Participation) -> None:
        self.database.append(participation)
