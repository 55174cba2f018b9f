"""
Genre Repository

Genres only need the generic CRUD operations.
"""

from motor.motor_asyncio import AsyncIOMotorCollection

from watchall.shared.models.genre import Genre
from watchall.shared.repositories.base import BaseRepository


class GenreRepository(BaseRepository[Genre]):
    """Repository for Genre documents."""

    COLLECTION_NAME = "genres"

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        super().__init__(Genre, collection)
