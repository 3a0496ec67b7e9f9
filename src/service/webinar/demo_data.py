"""Demo organizer and webinar used by SEED_DEMO_DATA and script/seed_data.py."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.interface import IUserRepo, IWebinarRepo
from src.service.webinar.domain.entity.user_entity import User
from src.service.webinar.domain.entity.webinar_entity import Webinar


DEMO_ORGANIZER = User(id='organizer-1', email='organizer@example.com', password='P@ssw0rd')
DEMO_WEBINAR_ID = 'webinar-1'
DEMO_WEBINAR_SEATS = 50


@Logger.io
async def seed_demo_webinar(
    *,
    user_repo: IUserRepo,
    webinar_repo: IWebinarRepo,
    now: Optional[datetime] = None,
) -> Webinar:
    now = now or datetime.now(timezone.utc)

    if await user_repo.find_by_id(user_id=DEMO_ORGANIZER.id) is None:
        await user_repo.save(user=DEMO_ORGANIZER)

    start_date = now + timedelta(days=7)
    webinar = Webinar(
        id=DEMO_WEBINAR_ID,
        organizer_id=DEMO_ORGANIZER.id,
        title='Introduction to Clean Architecture',
        start_date=start_date,
        end_date=start_date + timedelta(hours=1),
        seats=DEMO_WEBINAR_SEATS,
    )
    await webinar_repo.create(webinar=webinar)
    return webinar
