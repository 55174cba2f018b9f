"""
Show Repository

Database operations specific to the Show model.
Extends BaseRepository with the top-rated query.

Common Operations:
==================
- get_filtered()   → Top N shows by rating, optionally filtered by name

Usage Example:
==============
    repo = ShowRepository.from_db(db)
    best = await repo.get_filtered(name="Star", count=5)
"""

import re
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

from watchall.shared.models.show import Show
from watchall.shared.repositories.base import BaseRepository


class ShowRepository(BaseRepository[Show]):
    """Repository for Show documents."""

    COLLECTION_NAME = "shows"

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        super().__init__(Show, collection)

    async def ensure_indexes(self) -> None:
        await self.collection.create_index([("rating", DESCENDING)])

    async def get_filtered(self, name: Optional[str], count: int) -> list[Show]:
        """
        Get the top shows ordered by rating, best first.

        The name filter is a literal, case-sensitive substring match.
        Ties on rating are broken by id so the order is stable.

        Args:
            name: Substring the show name must contain (None or "" for all)
            count: Maximum number of shows to return

        Returns:
            At most `count` shows, rating descending

        Query:
            db.shows.find({name: {$regex: "<escaped name>"}})
                    .sort({rating: -1, _id: 1}).limit(count)
        """
        if count <= 0:
            return []

        query: dict = {}
        if name:
            query["name"] = {"$regex": re.escape(name)}

        return await self._find_where(
            query,
            sort=[("rating", DESCENDING), ("_id", ASCENDING)],
            limit=count,
        )
