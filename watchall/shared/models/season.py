"""
Season Document Model

A season belongs to one show (show_id) and owns many episodes. The show
reference is not validated and deleting a show leaves its seasons in place.
"""

from typing import Optional

from pydantic import Field

from watchall.shared.models.base import DocumentModel


class Season(DocumentModel):
    """Season document."""

    show_id: str
    number: int = Field(ge=0, description="Season number within the show")
    title: Optional[str] = None
