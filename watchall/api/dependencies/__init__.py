"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Container: get_container(), AppContainer, get_*_manager(), get_*_repository()
- Authentication: require_bearer()

Usage:
======
    from watchall.api.dependencies import get_show_manager, require_bearer

    @router.delete("/{show_id}", dependencies=[Depends(require_bearer)])
    async def delete_show(
        show_id: str,
        show_manager: ShowManager = Depends(get_show_manager),
    ):
        ...
"""

from watchall.api.dependencies.container import (
    get_container,
    AppContainer,
    get_show_manager,
    get_user_manager,
    get_season_repository,
    get_episode_repository,
    get_channel_repository,
    get_genre_repository,
)
from watchall.api.dependencies.auth import (
    require_bearer,
)

__all__ = [
    # Container
    "get_container",
    "AppContainer",
    "get_show_manager",
    "get_user_manager",
    "get_season_repository",
    "get_episode_repository",
    "get_channel_repository",
    "get_genre_repository",
    # Authentication
    "require_bearer",
]
