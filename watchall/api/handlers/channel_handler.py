"""
Channel Handler

Channel CRUD, routed directly to ChannelRepository.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from watchall.api.dependencies.auth import require_bearer
from watchall.api.dependencies.container import get_channel_repository
from watchall.shared.core.exceptions import ChannelNotFoundError
from watchall.shared.models.channel import Channel
from watchall.shared.repositories.channel_repository import ChannelRepository


router = APIRouter()


@router.get("", response_model=List[Channel])
async def list_channels(
    repo: ChannelRepository = Depends(get_channel_repository),
):
    """List every channel."""
    return await repo.select_all()


@router.get("/{channel_id}", response_model=Channel)
async def get_channel(
    channel_id: str,
    repo: ChannelRepository = Depends(get_channel_repository),
):
    """Get a channel by id."""
    channel = await repo.find(channel_id)
    if channel is None:
        raise ChannelNotFoundError(channel_id)
    return channel


@router.post(
    "",
    response_model=Channel,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_bearer)],
)
async def create_channel(
    channel: Channel,
    repo: ChannelRepository = Depends(get_channel_repository),
):
    """Create a channel."""
    return await repo.insert(channel)


@router.put(
    "/{channel_id}",
    response_model=Channel,
    dependencies=[Depends(require_bearer)],
)
async def replace_channel(
    channel_id: str,
    channel: Channel,
    repo: ChannelRepository = Depends(get_channel_repository),
):
    """Replace a channel."""
    return await repo.replace_by_id(channel_id, channel)


@router.delete(
    "/{channel_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_bearer)],
)
async def delete_channel(
    channel_id: str,
    repo: ChannelRepository = Depends(get_channel_repository),
):
    """Delete a channel. Shows referencing it are left as they are."""
    if not await repo.delete_by_id(channel_id):
        raise ChannelNotFoundError(channel_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
