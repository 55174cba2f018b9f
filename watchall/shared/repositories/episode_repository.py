"""
Episode Repository

Database operations specific to the Episode model.
"""

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING

from watchall.shared.models.episode import Episode
from watchall.shared.repositories.base import BaseRepository


class EpisodeRepository(BaseRepository[Episode]):
    """Repository for Episode documents."""

    COLLECTION_NAME = "episodes"

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        super().__init__(Episode, collection)

    async def ensure_indexes(self) -> None:
        await self.collection.create_index([("season_id", ASCENDING), ("number", ASCENDING)])

    async def find_by_season_id(self, season_id: str) -> list[Episode]:
        """
        Get every episode of a season, ordered by episode number.

        Args:
            season_id: Id of the parent season

        Returns:
            Episodes whose season_id equals `season_id` (empty if none)
        """
        return await self._find_where(
            {"season_id": season_id},
            sort=[("number", ASCENDING), ("_id", ASCENDING)],
        )
