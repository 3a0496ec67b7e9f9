#!/usr/bin/env python3
"""
Seed Script

Creates the demo organizer + webinar through the ports and books one seat,
so the whole booking flow (auto-registration, persistence, organizer mail)
runs once end to end against the in-memory adapters.

Usage: python -m script.seed_data
"""

import asyncio

from src.platform.config.di import container
from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.dto import BookSeatRequest
from src.service.webinar.demo_data import seed_demo_webinar
from src.service.webinar.domain.entity.user_entity import User


DEMO_ATTENDEE = User(id='attendee-1', email='attendee@example.com', password='P@ssw0rd')


async def main() -> None:
    webinar = await seed_demo_webinar(
        user_repo=container.user_repo(), webinar_repo=container.webinar_repo()
    )
    Logger.base.info(f'🌱 Created webinar {webinar.id} ({webinar.seats} seats)')

    result = await container.book_seat_use_case().execute(
        BookSeatRequest(webinar_id=webinar.id, user=DEMO_ATTENDEE)
    )
    Logger.base.info(
        f'🎟️ Booked seat for {result.participation.user_id} in {result.participation.webinar_id}'
    )

    sent = container.mailer().sent_messages
    Logger.base.info(f'📧 {len(sent)} notification(s) sent to {webinar.organizer_id}')

    await Logger.base.complete()


if __name__ == '__main__':
    asyncio.run(main())
