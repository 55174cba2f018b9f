"""
Managers

Thin facades exposing a use-case oriented API per aggregate to the HTTP
layer. They delegate to repositories and add no business logic beyond
what each method documents.

Manager Pattern:
================
    Handler → Manager → Repository → MongoDB

Available Managers:
===================
- UserManager: User profile lookup and maintenance
- ShowManager: Shows plus their seasons and episodes
"""

from watchall.shared.managers.user_manager import UserManager
from watchall.shared.managers.show_manager import ShowManager

__all__ = [
    "UserManager",
    "ShowManager",
]
