"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.webinar.app.command.book_seat_use_case import BookSeatUseCase
from src.service.webinar.driven_adapter.mailer.mock_mailer_impl import MockMailerImpl
from src.service.webinar.driven_adapter.repo.participation_repo_in_memory_impl import (
    ParticipationRepoInMemoryImpl,
)
from src.service.webinar.driven_adapter.repo.user_repo_in_memory_impl import UserRepoInMemoryImpl
from src.service.webinar.driven_adapter.repo.webinar_repo_in_memory_impl import (
    WebinarRepoInMemoryImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Repositories (in-memory, process-wide state)
    user_repo = providers.Singleton(UserRepoInMemoryImpl)
    webinar_repo = providers.Singleton(WebinarRepoInMemoryImpl)
    participation_repo = providers.Singleton(ParticipationRepoInMemoryImpl)

    # Mailer
    mailer = providers.Singleton(MockMailerImpl, debug=config_service.provided.MAILER_DEBUG)

    # Singleton: holds the per-webinar booking locks
    book_seat_use_case = providers.Singleton(
        BookSeatUseCase,
        participation_repo=participation_repo,
        user_repo=user_repo,
        webinar_repo=webinar_repo,
        mailer=mailer,
    )


container = Container()
