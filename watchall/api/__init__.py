"""
API Module

FastAPI application and route handlers.

Package Structure:
==================
    api/
    ├── main.py           ← Application entry point
    ├── routes.py         ← Route registration
    ├── dependencies/     ← Container lookup and Bearer policy
    ├── handlers/         ← Route handlers
    └── middleware/       ← Error handling

Usage:
======
    uvicorn watchall.api.main:app --reload

    from watchall.api.main import app, create_application
"""
