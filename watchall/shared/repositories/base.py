"""
Base Repository

This module provides a generic base repository with common CRUD operations
over one MongoDB collection. All entity-specific repositories inherit from
this class.

What This Provides:
===================
- find(id)             → Fetch single document by id (None if absent)
- select_all()         → Every document in the collection, ordered by id
- insert(doc)          → Store a new document (id assigned when missing)
- replace_by_id(id, d) → Overwrite a whole existing document
- delete_by_id(id)     → Remove a document, report whether one was removed
- exists(id)           → Check if a document exists
- ensure_indexes()     → Create collection indexes at startup

Generic Type Pattern:
=====================
The BaseRepository uses Python generics to be type-safe:

    class ShowRepository(BaseRepository[Show]):
        COLLECTION_NAME = "shows"

    repo = ShowRepository.from_db(db)
    show = await repo.find("s1")  # Returns Show, not Any!

Each concrete repository is bound to exactly one collection through its
COLLECTION_NAME class attribute.

CRUD Operations Flow:
=====================
┌─────────────────────────────────────────────────────────────────────────────┐
│                        CRUD OPERATIONS                                      │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   INSERT:   model.to_document() → insert_one()                              │
│   FIND:     find_one(id_filter(id)) → Model.from_document()                 │
│   REPLACE:  replace_one(id_filter(id), doc) (matched_count == 0 → NotFound) │
│   DELETE:   delete_one(id_filter(id))        (deleted_count → bool)         │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Error Policy:
=============
Driver errors (pymongo.errors.PyMongoError, DuplicateKeyError on insert)
are never caught here. They propagate to the API error handler.

replace_by_id is a strict replace: it never upserts. Replacing a missing
document raises NotFoundError and creates nothing.

Identifiers:
============
Ids are exposed as strings. Documents written by other clients may carry a
store-assigned ObjectId _id; id_filter() matches both forms so such
documents stay reachable by the string id select_all() reports.
"""

from typing import Any, ClassVar, Generic, Optional, Type, TypeVar

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

from watchall.shared.core.exceptions import NotFoundError, ValidationError
from watchall.shared.core.logging import get_logger
from watchall.shared.models.base import DocumentModel, new_object_id


# TypeVar bound to DocumentModel ensures we only work with document models
ModelType = TypeVar("ModelType", bound=DocumentModel)
RepositoryType = TypeVar("RepositoryType", bound="BaseRepository")

logger = get_logger(__name__)


def id_filter(record_id: str) -> dict[str, Any]:
    """
    Build the _id filter for a string id.

    A string that is a valid ObjectId hex also matches the ObjectId form.
    """
    if ObjectId.is_valid(record_id):
        return {"_id": {"$in": [record_id, ObjectId(record_id)]}}
    return {"_id": record_id}


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The document model class this repository manages

    Attributes:
        COLLECTION_NAME: Name of the collection (supplied by subclasses)
        model: The document model class
        collection: The Motor collection

    Example:
        class UserRepository(BaseRepository[UserProfile]):
            COLLECTION_NAME = "users"

            def __init__(self, collection: AsyncIOMotorCollection) -> None:
                super().__init__(UserProfile, collection)

            async def find_by_login(self, login: str) -> Optional[UserProfile]:
                ...
    """

    COLLECTION_NAME: ClassVar[str]

    def __init__(self, model: Type[ModelType], collection: AsyncIOMotorCollection) -> None:
        """
        Initialize the repository.

        Args:
            model: Document model class (e.g., Show, Season, UserProfile)
            collection: Motor collection named COLLECTION_NAME

        Raises:
            TypeError: If the subclass does not declare COLLECTION_NAME
        """
        if not getattr(type(self), "COLLECTION_NAME", None):
            raise TypeError(f"{type(self).__name__} must define COLLECTION_NAME")
        self.model = model
        self.collection = collection

    @classmethod
    def from_db(cls: Type[RepositoryType], db: AsyncIOMotorDatabase) -> RepositoryType:
        """
        Instantiate the repository on its collection of the given database.

        Usage:
            repo = ShowRepository.from_db(db)
        """
        return cls(db[cls.COLLECTION_NAME])

    # ═══════════════════════════════════════════════════════════════════════════
    # INDEX MANAGEMENT
    # ═══════════════════════════════════════════════════════════════════════════

    async def ensure_indexes(self) -> None:
        """
        Create collection indexes. Called once at startup.

        The default is a no-op. MongoDB skips indexes that already exist,
        so overrides are idempotent.
        """

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def find(self, record_id: str) -> Optional[ModelType]:
        """
        Get a single document by its id.

        Args:
            record_id: Identifier of the document

        Returns:
            The model instance if found, None otherwise

        Query:
            db.<collection>.findOne({_id: "<record_id>"})
        """
        document = await self.collection.find_one(id_filter(record_id))
        if document is None:
            return None
        return self.model.from_document(document)

    async def select_all(self) -> list[ModelType]:
        """
        Get every document of the collection.

        No pagination: this is a full scan ordered by id.

        Returns:
            List of model instances
        """
        return await self._find_where({}, sort=[("_id", 1)])

    async def exists(self, record_id: str) -> bool:
        """
        Check if a document exists without loading it.

        Args:
            record_id: The id to check

        Returns:
            True if the document exists, False otherwise
        """
        count = await self.collection.count_documents(id_filter(record_id), limit=1)
        return count > 0

    async def _find_where(
        self,
        query: dict[str, Any],
        *,
        sort: Optional[list[tuple[str, int]]] = None,
        limit: Optional[int] = None,
    ) -> list[ModelType]:
        """
        Run a filter query on the store.

        Specialized queries in subclasses go through here so filtering,
        ordering and limiting happen server-side.

        Args:
            query: MongoDB filter document
            sort: List of (field, direction) pairs
            limit: Maximum number of documents to return

        Returns:
            List of model instances
        """
        cursor = self.collection.find(query)
        if sort:
            cursor = cursor.sort(sort)
        if limit:
            cursor = cursor.limit(limit)
        documents = await cursor.to_list(length=None)
        return [self.model.from_document(document) for document in documents]

    async def _find_one_where(self, query: dict[str, Any]) -> Optional[ModelType]:
        """Return the first document matching the filter, or None."""
        document = await self.collection.find_one(query)
        if document is None:
            return None
        return self.model.from_document(document)

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def insert(self, document: ModelType) -> ModelType:
        """
        Store a new document.

        Args:
            document: Model to store; an id is generated when it has none

        Returns:
            The stored model, id included

        Raises:
            pymongo.errors.DuplicateKeyError: If the id is already taken
        """
        if document.id is None:
            document = document.model_copy(update={"id": new_object_id()})

        await self.collection.insert_one(document.to_document())

        logger.debug(
            "Document inserted",
            collection=self.COLLECTION_NAME,
            record_id=document.id,
        )
        return document

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def replace_by_id(self, record_id: str, document: ModelType) -> ModelType:
        """
        Overwrite an existing document with a full replacement.

        Args:
            record_id: Id of the document to replace
            document: Replacement; its id must be empty or equal record_id

        Returns:
            The stored replacement

        Raises:
            ValidationError: If the replacement carries a different id
            NotFoundError: If no document has that id (nothing is created)
        """
        if document.id is not None and document.id != record_id:
            raise ValidationError(
                "Document id cannot be changed",
                details={"id": record_id, "document_id": document.id},
            )

        document = document.model_copy(update={"id": record_id})
        # Without _id in the body the stored _id (string or ObjectId) is kept
        replacement = document.to_document()
        replacement.pop("_id", None)
        result = await self.collection.replace_one(id_filter(record_id), replacement)

        if result.matched_count == 0:
            raise NotFoundError(self.model.__name__, record_id)

        logger.debug(
            "Document replaced",
            collection=self.COLLECTION_NAME,
            record_id=record_id,
        )
        return document

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete_by_id(self, record_id: str) -> bool:
        """
        Hard delete a document by id.

        Nothing cascades: documents referencing this one are left untouched.

        Args:
            record_id: Id of the document to delete

        Returns:
            True if a document was removed, False if none matched
        """
        result = await self.collection.delete_one(id_filter(record_id))
        deleted = result.deleted_count > 0

        logger.debug(
            "Document delete",
            collection=self.COLLECTION_NAME,
            record_id=record_id,
            deleted=deleted,
        )
        return deleted
