"""
Shared pytest fixtures for the WatchAll tests.

- database: in-memory Motor-compatible database (mongomock-motor)
- repositories and managers bound to that database
- app / client: FastAPI application wired to the in-memory container
- auth_headers: Authorization header carrying a valid bearer token
"""

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from watchall.api.main import create_application
from watchall.container import Container
from watchall.shared.managers import ShowManager, UserManager
from watchall.shared.repositories import (
    ChannelRepository,
    EpisodeRepository,
    GenreRepository,
    SeasonRepository,
    ShowRepository,
    UserRepository,
)
from tests.helpers import make_token


@pytest.fixture
def database():
    """Fresh in-memory database per test."""
    client = AsyncMongoMockClient()
    return client["watchall_test"]


@pytest.fixture
def show_repository(database) -> ShowRepository:
    return ShowRepository.from_db(database)


@pytest.fixture
def season_repository(database) -> SeasonRepository:
    return SeasonRepository.from_db(database)


@pytest.fixture
def episode_repository(database) -> EpisodeRepository:
    return EpisodeRepository.from_db(database)


@pytest.fixture
def channel_repository(database) -> ChannelRepository:
    return ChannelRepository.from_db(database)


@pytest.fixture
def genre_repository(database) -> GenreRepository:
    return GenreRepository.from_db(database)


@pytest.fixture
def user_repository(database) -> UserRepository:
    return UserRepository.from_db(database)


@pytest.fixture
def show_manager(show_repository, season_repository, episode_repository) -> ShowManager:
    return ShowManager(show_repository, season_repository, episode_repository)


@pytest.fixture
def user_manager(user_repository) -> UserManager:
    return UserManager(user_repository)


# ═══════════════════════════════════════════════════════════════════════════════
# API
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def container(database) -> Container:
    return Container.from_database(database)


@pytest.fixture
def app(container):
    """
    Application wired to the in-memory container.

    The client is used without a `with` block, so the lifespan (which
    connects to a real server) never runs.
    """
    application = create_application()
    application.state.container = container
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict:
    return {"Authorization": f"Bearer {make_token()}"}
