"""
User Repository

Database operations specific to the UserProfile model.
Extends BaseRepository with user-specific query methods.

Common Operations:
==================
- find_by_login()  → Find user by login
- find_by_email()  → Find user by email address
- login_exists()   → Check if a login is already used
- email_exists()   → Check if an email is already used

Uniqueness:
===========
Login and email are treated as unique but no unique index enforces it.
If duplicates exist, lookups return the first match.

Usage Example:
==============
    repo = UserRepository.from_db(db)
    user = await repo.find_by_login("jdoe")
    if not user:
        raise UserNotFoundError("jdoe")
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING

from watchall.shared.models.user import UserProfile
from watchall.shared.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserProfile]):
    """
    Repository for UserProfile documents.

    Provides methods for common user queries beyond basic CRUD:
    - Looking up users by login or email
    - Checking login/email availability
    """

    COLLECTION_NAME = "users"

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        """
        Initialize UserRepository.

        Args:
            collection: Motor collection for user profiles
        """
        super().__init__(UserProfile, collection)

    async def ensure_indexes(self) -> None:
        # Non-unique on purpose: existing data may already hold duplicates
        await self.collection.create_index([("login", ASCENDING)])
        await self.collection.create_index([("email", ASCENDING)])

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def find_by_login(self, login: str) -> Optional[UserProfile]:
        """
        Get user by login.

        Args:
            login: Login to search for (exact match)

        Returns:
            UserProfile if found, None otherwise

        Query:
            db.users.findOne({login: "jdoe"})
        """
        return await self._find_one_where({"login": login})

    async def find_by_email(self, email: str) -> Optional[UserProfile]:
        """
        Get user by email address.

        Args:
            email: Email address to search for (exact match)

        Returns:
            UserProfile if found, None otherwise

        Query:
            db.users.findOne({email: "jdoe@example.com"})
        """
        return await self._find_one_where({"email": email})

    async def login_exists(self, login: str) -> bool:
        """Check if a login is already used."""
        return await self.collection.count_documents({"login": login}, limit=1) > 0

    async def email_exists(self, email: str) -> bool:
        """Check if an email is already used."""
        return await self.collection.count_documents({"email": email}, limit=1) > 0
