"""
Production FastAPI Application

Run with: granian --interface asgi src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig
from src.service.webinar.demo_data import seed_demo_webinar


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Webinar Booking] Starting up...')

    tracing = TracingConfig(service_name='webinar-booking')
    tracing.setup()
    Logger.base.info('📊 [Webinar Booking] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Webinar Booking] Dependency injection wired')

    if settings.SEED_DEMO_DATA:
        webinar = await seed_demo_webinar(
            user_repo=container.user_repo(), webinar_repo=container.webinar_repo()
        )
        Logger.base.info(f'🌱 [Webinar Booking] Demo webinar {webinar.id} created')

    Logger.base.info('✅ [Webinar Booking] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Webinar Booking] Shutting down...')

    tracing.shutdown()
    container.unwire()

    Logger.base.info('👋 [Webinar Booking] Shutdown complete')


app = create_app(lifespan=lifespan)
