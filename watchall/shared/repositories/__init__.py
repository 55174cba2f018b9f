"""
Repository Pattern Implementations

Repositories encapsulate document store queries and provide a clean API for
data access. Each one is bound to exactly one MongoDB collection.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]     ← Generic CRUD operations
         │
         ├── ShowRepository       ← shows     (top-N by rating)
         ├── SeasonRepository     ← seasons   (by show id)
         ├── EpisodeRepository    ← episodes  (by season id)
         ├── ChannelRepository    ← channels
         ├── GenreRepository      ← genres
         └── UserRepository       ← users     (by login / email)

Usage Example:
==============
    from watchall.shared.db import get_database
    from watchall.shared.repositories import SeasonRepository

    seasons = SeasonRepository.from_db(get_database())
    await seasons.find_by_show_id("s1")
"""

from watchall.shared.repositories.base import BaseRepository
from watchall.shared.repositories.show_repository import ShowRepository
from watchall.shared.repositories.season_repository import SeasonRepository
from watchall.shared.repositories.episode_repository import EpisodeRepository
from watchall.shared.repositories.channel_repository import ChannelRepository
from watchall.shared.repositories.genre_repository import GenreRepository
from watchall.shared.repositories.user_repository import UserRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "ShowRepository",
    "SeasonRepository",
    "EpisodeRepository",
    "ChannelRepository",
    "GenreRepository",
    "UserRepository",
]
