"""
User Manager

Use-case oriented API over the user repository.

Manager Pattern:
================
    Handler → Manager → Repository → MongoDB

Managers receive their repositories from the container; they never build
them. Store errors are not caught here.

Usage:
======
    from watchall.shared.managers.user_manager import UserManager

    manager = UserManager(user_repository)
    profile = await manager.get_by_login("jdoe")
"""

from typing import List, Optional

from watchall.shared.core.exceptions import ValidationError
from watchall.shared.models.user import UserProfile
from watchall.shared.repositories.user_repository import UserRepository


class UserManager:
    """
    Manager for user profiles.

    Attributes:
        repo: UserRepository instance
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """
        Initialize UserManager.

        Args:
            user_repository: Repository bound to the users collection
        """
        self.repo = user_repository

    async def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        """Get a profile by id, or None."""
        return await self.repo.find(user_id)

    async def get_by_login(self, login: str) -> Optional[UserProfile]:
        """Get a profile by login, or None."""
        return await self.repo.find_by_login(login)

    async def get_by_email(self, email: str) -> Optional[UserProfile]:
        """Get a profile by email, or None."""
        return await self.repo.find_by_email(email)

    async def get_all_users(self) -> List[UserProfile]:
        """Get every profile."""
        return await self.repo.select_all()

    async def insert_profile(self, profile: UserProfile) -> UserProfile:
        """
        Store a new profile.

        Returns:
            The stored profile, id included
        """
        return await self.repo.insert(profile)

    async def update_profile(self, profile: UserProfile) -> UserProfile:
        """
        Replace a profile with the given one, matched by its own id.

        Raises:
            ValidationError: If the profile has no id
            NotFoundError: If no profile has that id
        """
        if profile.id is None:
            raise ValidationError("Profile id is required for an update")
        return await self.repo.replace_by_id(profile.id, profile)

    async def delete_profile(self, user_id: str) -> bool:
        """Delete a profile; True if one was removed."""
        return await self.repo.delete_by_id(user_id)

    def validate_password(self, password: str) -> str:
        """
        Password validation hook.

        Not implemented: no password policy or hashing scheme has been
        chosen for WatchAll yet. Callers must not treat this as a
        verified capability.

        Raises:
            NotImplementedError: Always
        """
        raise NotImplementedError("Password validation is not implemented")
