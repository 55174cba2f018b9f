"""
Base Document Model

This module provides the foundational class for every document persisted in
MongoDB. Models are Pydantic classes; the repository layer converts them to
and from raw BSON documents.

Identifier Mapping:
===================
    Python model            MongoDB document
    ─────────────           ────────────────
    id = "s1"          ←→   _id = "s1"
    name = "Foo"       ←→   name = "Foo"

Identifiers are plain strings. They are chosen by the caller or, when
omitted, assigned on insert (str(ObjectId())). Once assigned they never
change.

Usage:
======
    from watchall.shared.models.base import DocumentModel

    class Channel(DocumentModel):
        name: str

    channel = Channel.from_document({"_id": "c1", "name": "HBO"})
    channel.to_document()  # {"_id": "c1", "name": "HBO"}
"""

from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field


def new_object_id() -> str:
    """Generate a fresh string identifier."""
    return str(ObjectId())


def to_store_datetime(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime to what the store can hold: UTC, millisecond precision.

    Naive values are taken as UTC. BSON dates carry no offset and keep
    milliseconds only.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


class DocumentModel(BaseModel):
    """
    Base class for all document models.

    Attributes:
        id: Unique string identifier, stored as "_id"
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )

    id: Optional[str] = Field(
        default=None,
        description="Unique identifier; assigned on insert when omitted",
    )

    @classmethod
    def from_document(cls, document: dict[str, Any]):
        """
        Build a model from a raw MongoDB document.

        Args:
            document: Document as returned by the driver

        Returns:
            Model instance with "_id" mapped to id
        """
        data = dict(document)
        raw_id = data.pop("_id", None)
        if raw_id is not None:
            data["id"] = str(raw_id)
        return cls.model_validate(data)

    def to_document(self) -> dict[str, Any]:
        """
        Convert the model to a raw MongoDB document.

        Returns:
            Dict with id stored under "_id" (omitted while unassigned)
        """
        data = self.model_dump(exclude={"id"})
        if self.id is not None:
            data = {"_id": self.id, **data}
        return data
