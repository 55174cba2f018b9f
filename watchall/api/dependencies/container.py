"""
Container Dependencies

FastAPI dependencies handing out the repositories and managers built by the
composition root.

The container is created once in the application lifespan and stored on
app.state; these dependencies only look it up. Nothing is constructed per
request.

Usage:
======
    from watchall.api.dependencies.container import get_show_manager

    @router.get("/{show_id}")
    async def get_show(
        show_id: str,
        show_manager: ShowManager = Depends(get_show_manager),
    ):
        return await show_manager.get_show(show_id)
"""

from typing import Annotated

from fastapi import Depends, Request

from watchall.container import Container
from watchall.shared.core.exceptions import ServiceUnavailableError
from watchall.shared.managers import ShowManager, UserManager
from watchall.shared.repositories import (
    ChannelRepository,
    EpisodeRepository,
    GenreRepository,
    SeasonRepository,
)


def get_container(request: Request) -> Container:
    """
    Return the application container.

    Raises:
        ServiceUnavailableError: If the application has not finished startup
    """
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise ServiceUnavailableError("Document store is not initialized")
    return container


AppContainer = Annotated[Container, Depends(get_container)]


# ═══════════════════════════════════════════════════════════════════════════════
# MANAGERS
# ═══════════════════════════════════════════════════════════════════════════════


def get_show_manager(container: AppContainer) -> ShowManager:
    return container.show_manager


def get_user_manager(container: AppContainer) -> UserManager:
    return container.user_manager


# ═══════════════════════════════════════════════════════════════════════════════
# REPOSITORIES (routes without a manager)
# ═══════════════════════════════════════════════════════════════════════════════


def get_season_repository(container: AppContainer) -> SeasonRepository:
    return container.season_repository


def get_episode_repository(container: AppContainer) -> EpisodeRepository:
    return container.episode_repository


def get_channel_repository(container: AppContainer) -> ChannelRepository:
    return container.channel_repository


def get_genre_repository(container: AppContainer) -> GenreRepository:
    return container.genre_repository
