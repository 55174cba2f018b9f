"""
Season Handler

Season CRUD goes straight to SeasonRepository; listing a season's episodes
goes through ShowManager.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from watchall.api.dependencies.auth import require_bearer
from watchall.api.dependencies.container import get_season_repository, get_show_manager
from watchall.shared.core.exceptions import SeasonNotFoundError
from watchall.shared.managers.show_manager import ShowManager
from watchall.shared.models.episode import Episode
from watchall.shared.models.season import Season
from watchall.shared.repositories.season_repository import SeasonRepository


router = APIRouter()


@router.get("", response_model=List[Season])
async def list_seasons(
    repo: SeasonRepository = Depends(get_season_repository),
):
    """List every season."""
    return await repo.select_all()


@router.get("/{season_id}", response_model=Season)
async def get_season(
    season_id: str,
    repo: SeasonRepository = Depends(get_season_repository),
):
    """Get a season by id."""
    season = await repo.find(season_id)
    if season is None:
        raise SeasonNotFoundError(season_id)
    return season


@router.get("/{season_id}/episodes", response_model=List[Episode])
async def list_season_episodes(
    season_id: str,
    show_manager: ShowManager = Depends(get_show_manager),
):
    """List the episodes referencing a season, by episode number."""
    return await show_manager.get_episodes(season_id)


@router.post(
    "",
    response_model=Season,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_bearer)],
)
async def create_season(
    season: Season,
    repo: SeasonRepository = Depends(get_season_repository),
):
    """Create a season. The show reference is stored as given."""
    return await repo.insert(season)


@router.put(
    "/{season_id}",
    response_model=Season,
    dependencies=[Depends(require_bearer)],
)
async def replace_season(
    season_id: str,
    season: Season,
    repo: SeasonRepository = Depends(get_season_repository),
):
    """Replace a season with a full new document."""
    return await repo.replace_by_id(season_id, season)


@router.delete(
    "/{season_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_bearer)],
)
async def delete_season(
    season_id: str,
    repo: SeasonRepository = Depends(get_season_repository),
):
    """Delete a season. Its episodes are kept."""
    if not await repo.delete_by_id(season_id):
        raise SeasonNotFoundError(season_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
