"""
Channel Document Model
"""

from watchall.shared.models.base import DocumentModel


class Channel(DocumentModel):
    """Broadcasting channel referenced by shows."""

    name: str
