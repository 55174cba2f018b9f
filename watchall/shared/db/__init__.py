"""
Database Module

MongoDB connectivity for WatchAll.

Architecture Overview:
======================
┌─────────────────────────────────────────────────────────────────────────────┐
│                        DATABASE LAYER                                       │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   Application startup                                                       │
│       │                                                                     │
│       │  init_db() → AsyncIOMotorDatabase                                   │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              Container (watchall.container)                 │          │
│   │                                                             │          │
│   │  - one repository per collection                            │          │
│   │  - managers receive repositories explicitly                 │          │
│   └─────────────────────────────────────────────────────────────┘          │
│       │                                                                     │
│       │  Single-document operations                                         │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              MongoDB Database                               │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘
"""

from watchall.shared.db.client import (
    get_client,
    get_database,
    init_db,
    close_db,
    ping,
)

__all__ = [
    "get_client",
    "get_database",
    "init_db",
    "close_db",
    "ping",
]
