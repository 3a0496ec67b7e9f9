from typing import Dict, Iterable, Optional

from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.interface.i_webinar_repo import IWebinarRepo
from src.service.webinar.domain.entity.webinar_entity import Webinar


class WebinarRepoInMemoryImpl(IWebinarRepo):
    def __init__(self, webinars: Optional[Iterable[Webinar]] = None) -> None:
        self.database: Dict[str, Webinar] = {webinar.id: webinar for webinar in webinars or []}

    @Logger.io
    async def find_by_id(self, *, webinar_id: str) -> Optional[Webinar]:
        return self.database.get(webinar_id)

    @Logger.io
    async def create(self, *, webinar: Webinar) -> None:
        self.database[webinar.id] = webinar
