"""
Episode Handler

Episode CRUD, routed directly to EpisodeRepository.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from watchall.api.dependencies.auth import require_bearer
from watchall.api.dependencies.container import get_episode_repository
from watchall.shared.core.exceptions import EpisodeNotFoundError
from watchall.shared.models.episode import Episode
from watchall.shared.repositories.episode_repository import EpisodeRepository


router = APIRouter()


@router.get("", response_model=List[Episode])
async def list_episodes(
    repo: EpisodeRepository = Depends(get_episode_repository),
):
    return await repo.select_all()


@router.get("/{episode_id}", response_model=Episode)
async def get_episode(
    episode_id: str,
    repo: EpisodeRepository = Depends(get_episode_repository),
):
    episode = await repo.find(episode_id)
    if episode is None:
        raise EpisodeNotFoundError(episode_id)
    return episode


@router.post(
    "",
    response_model=Episode,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_bearer)],
)
async def create_episode(
    episode: Episode,
    repo: EpisodeRepository = Depends(get_episode_repository),
):
    return await repo.insert(episode)


@router.put(
    "/{episode_id}",
    response_model=Episode,
    dependencies=[Depends(require_bearer)],
)
async def replace_episode(
    episode_id: str,
    episode: Episode,
    repo: EpisodeRepository = Depends(get_episode_repository),
):
    return await repo.replace_by_id(episode_id, episode)


@router.delete(
    "/{episode_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_bearer)],
)
async def delete_episode(
    episode_id: str,
    repo: EpisodeRepository = Depends(get_episode_repository),
):
    if not await repo.delete_by_id(episode_id):
        raise EpisodeNotFoundError(episode_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
