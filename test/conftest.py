"""
Test Configuration and Fixtures

- Environment setup that must run before application modules are imported
- Entity builders pinned to a fixed clock
- AsyncMock port doubles for use case unit tests
- In-memory adapters for scenario tests
- FastAPI TestClient backed by a test app (no tracing exporter)
"""

# =============================================================================
# Environment setup MUST happen before any application import: settings and
# the loguru sinks are configured at import time.
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DEPLOY_ENV', 'test')
    os.environ['SEED_DEMO_DATA'] = 'false'


_early_setup_test_environment()

from collections.abc import AsyncIterator, Callable, Generator  # noqa: E402
from contextlib import asynccontextmanager  # noqa: E402
from datetime import datetime, timedelta, timezone  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402

from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.app_factory import create_app  # noqa: E402
from src.platform.config.di import container  # noqa: E402
from src.platform.config.wire_modules import WIRE_MODULES  # noqa: E402
from src.platform.logging.loguru_io import Logger  # noqa: E402
from src.service.webinar.app.command.book_seat_use_case import BookSeatUseCase  # noqa: E402
from src.service.webinar.domain.entity.user_entity import User  # noqa: E402
from src.service.webinar.domain.entity.webinar_entity import Webinar  # noqa: E402
from src.service.webinar.driven_adapter.mailer.mock_mailer_impl import (  # noqa: E402
    MockMailerImpl,
)
from src.service.webinar.driven_adapter.repo.participation_repo_in_memory_impl import (  # noqa: E402
    ParticipationRepoInMemoryImpl,
)
from src.service.webinar.driven_adapter.repo.user_repo_in_memory_impl import (  # noqa: E402
    UserRepoInMemoryImpl,
)
from src.service.webinar.driven_adapter.repo.webinar_repo_in_memory_impl import (  # noqa: E402
    WebinarRepoInMemoryImpl,
)


FIXED_NOW = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
ORGANIZER_ID = 'organizer-1'
WEBINAR_ID = 'webinar-1'


# =============================================================================
# Entity builders
# =============================================================================


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def make_user() -> Callable[..., User]:
    def _make_user(user_id: str = 'user-1') -> User:
        return User(id=user_id, email=f'{user_id}@example.com', password='P@ssw0rd')

    return _make_user


@pytest.fixture
def make_webinar(now: datetime) -> Callable[..., Webinar]:
    def _make_webinar(
        *,
        webinar_id: str = WEBINAR_ID,
        starts_in: timedelta = timedelta(days=5),
        seats: int = 10,
    ) -> Webinar:
        start_date = now + starts_in
        return Webinar(
            id=webinar_id,
            organizer_id=ORGANIZER_ID,
            title='Clean Architecture in Python',
            start_date=start_date,
            end_date=start_date + timedelta(hours=1),
            seats=seats,
        )

    return _make_webinar


# =============================================================================
# Port doubles (unit tests)
# =============================================================================


class PortMocks:
    """
    AsyncMock container for the four ports BookSeatUseCase depends on

    Defaults describe the happy path: webinar found, user known, no
    participations yet. Tests override single return values.
    """

    def __init__(self, *, webinar: Webinar | None, user: User | None = None) -> None:
        self.webinar_repo = AsyncMock()
        self.webinar_repo.find_by_id = AsyncMock(return_value=webinar)

        self.user_repo = AsyncMock()
        self.user_repo.find_by_id = AsyncMock(return_value=user)
        self.user_repo.save = AsyncMock(return_value=None)

        self.participation_repo = AsyncMock()
        self.participation_repo.find_by_webinar_id = AsyncMock(return_value=[])
        self.participation_repo.save = AsyncMock(return_value=None)

        self.mailer = AsyncMock()
        self.mailer.send = AsyncMock(return_value=None)

    def build_use_case(self, *, now: datetime) -> BookSeatUseCase:
        return BookSeatUseCase(
            participation_repo=self.participation_repo,
            user_repo=self.user_repo,
            webinar_repo=self.webinar_repo,
            mailer=self.mailer,
            clock=lambda: now,
        )


@pytest.fixture
def port_mocks_factory() -> Callable[..., PortMocks]:
    return PortMocks


# =============================================================================
# In-memory adapters (scenario tests)
# =============================================================================


class InMemoryPorts:
    def __init__(self) -> None:
        self.user_repo = UserRepoInMemoryImpl()
        self.webinar_repo = WebinarRepoInMemoryImpl()
        self.participation_repo = ParticipationRepoInMemoryImpl()
        self.mailer = MockMailerImpl(debug=False)

    def build_use_case(self, *, now: datetime) -> BookSeatUseCase:
        return BookSeatUseCase(
            participation_repo=self.participation_repo,
            user_repo=self.user_repo,
            webinar_repo=self.webinar_repo,
            mailer=self.mailer,
            clock=lambda: now,
        )


@pytest.fixture
def in_memory_ports() -> InMemoryPorts:
    return InMemoryPorts()


# =============================================================================
# HTTP test app
# =============================================================================


@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    """Minimal lifespan: dependency injection only."""
    Logger.base.info('🧪 [Test App] Starting up...')
    container.wire(modules=WIRE_MODULES)

    yield

    container.unwire()
    Logger.base.info('👋 [Test App] Shutdown complete')


@pytest.fixture(scope='session')
def test_app() -> FastAPI:
    return create_app(
        lifespan=lifespan_for_tests,
        title_suffix=' (Test)',
        service_name='test-webinar-booking',
    )


@pytest.fixture
def client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    # Fresh in-memory stores for every test
    container.reset_singletons()
    with TestClient(test_app) as test_client:
        yield test_client
    container.reset_singletons()
