"""
Configuration Module

Application configuration loaded from environment variables.

Usage:
======
    from watchall.config.settings import settings

    mongo_url = settings.MONGO_CONNECTION_STRING
    database = settings.MONGO_DATABASE
"""

from watchall.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
