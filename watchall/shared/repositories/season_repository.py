"""
Season Repository

Database operations specific to the Season model.
"""

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING

from watchall.shared.models.season import Season
from watchall.shared.repositories.base import BaseRepository


class SeasonRepository(BaseRepository[Season]):
    """Repository for Season documents."""

    COLLECTION_NAME = "seasons"

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        super().__init__(Season, collection)

    async def ensure_indexes(self) -> None:
        await self.collection.create_index([("show_id", ASCENDING), ("number", ASCENDING)])

    async def find_by_show_id(self, show_id: str) -> list[Season]:
        """
        Get every season of a show, ordered by season number.

        Args:
            show_id: Id of the parent show

        Returns:
            Seasons whose show_id equals `show_id` (empty if none)
        """
        return await self._find_where(
            {"show_id": show_id},
            sort=[("number", ASCENDING), ("_id", ASCENDING)],
        )
