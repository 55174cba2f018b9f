"""
WatchAll Backend

Media-tracking API: shows, seasons, episodes, channels, genres and user
profiles stored in MongoDB.

Package Structure:
==================
    watchall/
    ├── api/        ← FastAPI application
    ├── shared/     ← Models, repositories, managers, core utilities
    └── config/     ← Configuration

Running the Application:
========================
    uvicorn watchall.api.main:app --reload
"""
