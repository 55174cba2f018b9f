"""
Show Handler

Handles show endpoints.

ARCHITECTURE:
=============
    Handler → ShowManager → ShowRepository / SeasonRepository → MongoDB

Handlers should ONLY:
- Parse HTTP requests
- Call manager methods
- Format HTTP responses

Reads are public. Creating, replacing and deleting require the Bearer policy.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from watchall.api.dependencies.auth import require_bearer
from watchall.api.dependencies.container import get_show_manager
from watchall.shared.core.exceptions import ShowNotFoundError
from watchall.shared.managers.show_manager import ShowManager
from watchall.shared.models.season import Season
from watchall.shared.models.show import Show


router = APIRouter()


@router.get("", response_model=List[Show])
async def list_shows(
    show_manager: ShowManager = Depends(get_show_manager),
):
    """List every show."""
    return await show_manager.get_all_shows()


@router.get("/top", response_model=List[Show])
async def top_shows(
    name: Optional[str] = Query(None, description="Substring the show name must contain"),
    count: int = Query(10, ge=1, le=100, description="Number of shows to return"),
    show_manager: ShowManager = Depends(get_show_manager),
):
    """
    Get the best rated shows.

    Returns at most `count` shows ordered by rating, best first,
    optionally restricted to names containing `name`.
    """
    return await show_manager.get_top_shows(name, count)


@router.get("/{show_id}", response_model=Show)
async def get_show(
    show_id: str,
    show_manager: ShowManager = Depends(get_show_manager),
):
    """
    Get a show by id.

    Raises:
        404: If the show does not exist
    """
    show = await show_manager.get_show(show_id)
    if show is None:
        raise ShowNotFoundError(show_id)
    return show


@router.get("/{show_id}/seasons", response_model=List[Season])
async def list_show_seasons(
    show_id: str,
    show_manager: ShowManager = Depends(get_show_manager),
):
    """List the seasons referencing a show, by season number."""
    return await show_manager.get_seasons(show_id)


@router.post(
    "",
    response_model=Show,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_bearer)],
)
async def create_show(
    show: Show,
    show_manager: ShowManager = Depends(get_show_manager),
):
    """
    Create a show.

    Raises:
        409: If a show with the same id already exists
    """
    return await show_manager.create_show(show)


@router.put(
    "/{show_id}",
    response_model=Show,
    dependencies=[Depends(require_bearer)],
)
async def replace_show(
    show_id: str,
    show: Show,
    show_manager: ShowManager = Depends(get_show_manager),
):
    """
    Replace a show with a full new document.

    Raises:
        400: If the body carries a different id
        404: If the show does not exist
    """
    return await show_manager.update_show(show_id, show)


@router.delete(
    "/{show_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_bearer)],
)
async def delete_show(
    show_id: str,
    show_manager: ShowManager = Depends(get_show_manager),
):
    """
    Delete a show. Its seasons are kept.

    Raises:
        404: If the show does not exist
    """
    if not await show_manager.delete_show(show_id):
        raise ShowNotFoundError(show_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
