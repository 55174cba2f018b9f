"""
Genre Handler

Genre CRUD, routed directly to GenreRepository.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from watchall.api.dependencies.auth import require_bearer
from watchall.api.dependencies.container import get_genre_repository
from watchall.shared.core.exceptions import GenreNotFoundError
from watchall.shared.models.genre import Genre
from watchall.shared.repositories.genre_repository import GenreRepository


router = APIRouter()


@router.get("", response_model=List[Genre])
async def list_genres(
    repo: GenreRepository = Depends(get_genre_repository),
):
    """List every genre."""
    return await repo.select_all()


@router.get("/{genre_id}", response_model=Genre)
async def get_genre(
    genre_id: str,
    repo: GenreRepository = Depends(get_genre_repository),
):
    """Get a genre by id."""
    genre = await repo.find(genre_id)
    if genre is None:
        raise GenreNotFoundError(genre_id)
    return genre


@router.post(
    "",
    response_model=Genre,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_bearer)],
)
async def create_genre(
    genre: Genre,
    repo: GenreRepository = Depends(get_genre_repository),
):
    """Create a genre."""
    return await repo.insert(genre)


@router.put(
    "/{genre_id}",
    response_model=Genre,
    dependencies=[Depends(require_bearer)],
)
async def replace_genre(
    genre_id: str,
    genre: Genre,
    repo: GenreRepository = Depends(get_genre_repository),
):
    """Replace a genre."""
    return await repo.replace_by_id(genre_id, genre)


@router.delete(
    "/{genre_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_bearer)],
)
async def delete_genre(
    genre_id: str,
    repo: GenreRepository = Depends(get_genre_repository),
):
    """Delete a genre. Shows referencing it are left as they are."""
    if not await repo.delete_by_id(genre_id):
        raise GenreNotFoundError(genre_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
