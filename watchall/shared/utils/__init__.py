"""
Utilities Package

Contents:
=========
- security: JWT bearer token issuing and validation

Usage:
======
    from watchall.shared.utils.security import SecurityUtils
"""

from watchall.shared.utils.security import SecurityUtils

__all__ = [
    "SecurityUtils",
]
