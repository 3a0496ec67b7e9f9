from datetime import datetime, timedelta
from typing import Any

import pytest

from src.service.webinar.demo_data import (
    DEMO_ORGANIZER,
    DEMO_WEBINAR_ID,
    DEMO_WEBINAR_SEATS,
    seed_demo_webinar,
)


class TestSeedDemoWebinar:
    @pytest.mark.asyncio
    async def test_creates_organizer_and_bookable_webinar(
        self, in_memory_ports: Any, now: datetime
    ) -> None:
        webinar = await seed_demo_webinar(
            user_repo=in_memory_ports.user_repo,
            webinar_repo=in_memory_ports.webinar_repo,
            now=now,
        )

        assert webinar.id == DEMO_WEBINAR_ID
        assert webinar.seats == DEMO_WEBINAR_SEATS
        assert webinar.start_date == now + timedelta(days=7)
        assert not webinar.is_too_soon(now)
        assert await in_memory_ports.webinar_repo.find_by_id(webinar_id=DEMO_WEBINAR_ID) == webinar
        assert await in_memory_ports.user_repo.find_by_id(user_id=DEMO_ORGANIZER.id) == DEMO_ORGANIZER

    @pytest.mark.asyncio
    async def test_reseeding_keeps_a_single_organizer(
        self, in_memory_ports: Any, now: datetime
    ) -> None:
        for _ in range(2):
            await seed_demo_webinar(
                user_repo=in_memory_ports.user_repo,
                webinar_repo=in_memory_ports.webinar_repo,
                now=now,
            )

        assert in_memory_ports.user_repo.database == [DEMO_ORGANIZER]
