"""
Genre Document Model
"""

from watchall.shared.models.base import DocumentModel


class Genre(DocumentModel):
    """Genre referenced by shows."""

    name: str
