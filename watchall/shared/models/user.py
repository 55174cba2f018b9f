"""
User Profile Document Model

Represents a registered WatchAll user.

SAMPLE USER DOCUMENT:
┌──────────────────────────────────────────────────────────────────────────────┐
│ _id              │ "u1"                                                      │
│ login            │ "jdoe"                                                    │
│ email            │ "jdoe@example.com"                                        │
│ password_hash    │ "<opaque hash produced by the identity provider>"         │
│ first_name       │ "John"                                                    │
│ last_name        │ "Doe"                                                     │
└──────────────────────────────────────────────────────────────────────────────┘

Login and email are looked up as if unique, but no unique index enforces it.
The password hash is stored as given; this service does not hash or verify
passwords.
"""

from typing import Optional

from pydantic import Field

from watchall.shared.models.base import DocumentModel


class UserProfile(DocumentModel):
    """
    User profile document.

    Attributes:
        login: Login name
        email: Email address
        password_hash: Opaque password hash
        first_name: Optional given name
        last_name: Optional family name
    """

    login: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password_hash: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
