"""Tests for the composition root."""

import pytest

from watchall.shared.models import Show


def test_managers_share_the_container_repositories(container):
    assert container.show_manager.show_repo is container.show_repository
    assert container.show_manager.season_repo is container.season_repository
    assert container.show_manager.episode_repo is container.episode_repository
    assert container.user_manager.repo is container.user_repository
    assert len(container.repositories) == 6


@pytest.mark.asyncio
async def test_ensure_indexes_is_repeatable(container):
    await container.ensure_indexes()
    await container.ensure_indexes()

    await container.show_manager.create_show(Show(id="s1", name="Foo"))
    assert await container.show_repository.find("s1") == Show(id="s1", name="Foo")
