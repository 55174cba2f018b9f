"""
WatchAll Document Models

Pydantic models for every document stored in MongoDB.

Model Hierarchy:
================
    Show
       ├── channel_id → Channel
       ├── genre_ids  → Genre[]
       └── Season[] (show_id)
              └── Episode[] (season_id)

    UserProfile (standalone)

Usage:
======
    from watchall.shared.models import Show, Season

    show = Show(id="s1", name="Foo", rating=8.5)
    season = Season(id="se1", show_id=show.id, number=1)
"""

from watchall.shared.models.base import DocumentModel, new_object_id
from watchall.shared.models.show import Show
from watchall.shared.models.season import Season
from watchall.shared.models.episode import Episode
from watchall.shared.models.channel import Channel
from watchall.shared.models.genre import Genre
from watchall.shared.models.user import UserProfile

__all__ = [
    "DocumentModel",
    "new_object_id",
    "Show",
    "Season",
    "Episode",
    "Channel",
    "Genre",
    "UserProfile",
]
