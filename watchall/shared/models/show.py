"""
Show Document Model

Represents a TV show tracked by WatchAll.

Model Hierarchy:
================
    Show
       ├── channel_id  → Channel
       ├── genre_ids   → Genre[]
       └── Season[]    (seasons.show_id == show.id)

SAMPLE SHOW DOCUMENT:
┌──────────────────────────────────────────────────────────────────────────────┐
│ _id              │ "s1"                                                      │
│ name             │ "Foo"                                                     │
│ rating           │ 8.5                                                       │
│ channel_id       │ "c1"                                                      │
│ genre_ids        │ ["g1", "g2"]                                              │
└──────────────────────────────────────────────────────────────────────────────┘

References are plain ids; they are not checked against the referenced
collections.
"""

from typing import List, Optional

from pydantic import Field

from watchall.shared.models.base import DocumentModel


class Show(DocumentModel):
    """
    Show document.

    Attributes:
        name: Display name, used by the top-N name filter
        rating: Average rating; top-N queries sort on it descending
        description: Optional synopsis
        channel_id: Id of the broadcasting channel
        genre_ids: Ids of the show's genres
    """

    name: str = Field(min_length=1)
    rating: float = Field(default=0.0, ge=0)
    description: Optional[str] = None
    channel_id: Optional[str] = None
    genre_ids: List[str] = Field(default_factory=list)
