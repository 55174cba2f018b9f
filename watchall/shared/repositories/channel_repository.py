"""
Channel Repository

Channels only need the generic CRUD operations.
"""

from motor.motor_asyncio import AsyncIOMotorCollection

from watchall.shared.models.channel import Channel
from watchall.shared.repositories.base import BaseRepository


class ChannelRepository(BaseRepository[Channel]):
    """Repository for Channel documents."""

    COLLECTION_NAME = "channels"

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        super().__init__(Channel, collection)
