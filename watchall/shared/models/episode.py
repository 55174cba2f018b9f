"""
Episode Document Model
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from watchall.shared.models.base import DocumentModel, to_store_datetime


class Episode(DocumentModel):
    """
    Episode document.

    Attributes:
        season_id: Id of the parent season (not validated)
        title: Episode title
        number: Episode number within the season
        air_date: First broadcast date, UTC with millisecond precision
    """

    season_id: str
    title: str
    number: Optional[int] = Field(default=None, ge=0)
    air_date: Optional[datetime] = None

    @field_validator("air_date")
    @classmethod
    def normalize_air_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_store_datetime(value)
