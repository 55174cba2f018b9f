"""
Shared Module

Code used by the API layer and by tooling alike:
- Models: Pydantic document models
- Repositories: Data access layer (one per collection)
- Managers: Use-case facades over repositories
- Schemas: Pydantic request/response models
- Core: Logging, exceptions
- DB: Document store client lifecycle

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← MongoDB client management
    ├── models/         ← Document models
    ├── repositories/   ← Data access layer
    ├── managers/       ← Use-case facades
    ├── schemas/        ← API schemas
    └── utils/          ← JWT utilities

Usage:
======
    from watchall.shared.models import Show, Season
    from watchall.shared.repositories import ShowRepository
    from watchall.shared.managers import ShowManager
    from watchall.shared.core import logger, WatchAllException
"""
