"""Tests for the specialized queries of the entity repositories."""

import pytest
import pytest_asyncio

from watchall.shared.models import Episode, Season, Show, UserProfile


# ============================================================================
# Seasons
# ============================================================================


class TestSeasonRepository:
    @pytest.mark.asyncio
    async def test_find_by_show_id_returns_exactly_matching_seasons(self, season_repository):
        await season_repository.insert(Season(id="a2", show_id="s1", number=2))
        await season_repository.insert(Season(id="a1", show_id="s1", number=1))
        await season_repository.insert(Season(id="b1", show_id="s2", number=1))

        seasons = await season_repository.find_by_show_id("s1")

        assert [s.id for s in seasons] == ["a1", "a2"]
        assert all(s.show_id == "s1" for s in seasons)

    @pytest.mark.asyncio
    async def test_find_by_show_id_without_seasons(self, season_repository):
        await season_repository.insert(Season(id="b1", show_id="s2", number=1))

        assert await season_repository.find_by_show_id("s1") == []

    @pytest.mark.asyncio
    async def test_ensure_indexes_is_idempotent(self, season_repository):
        await season_repository.ensure_indexes()
        await season_repository.ensure_indexes()
        await season_repository.insert(Season(id="a1", show_id="s1", number=1))

        assert await season_repository.find_by_show_id("s1") == [Season(id="a1", show_id="s1", number=1)]


# ============================================================================
# Episodes
# ============================================================================


class TestEpisodeRepository:
    @pytest.mark.asyncio
    async def test_find_by_season_id_returns_exactly_matching_episodes(self, episode_repository):
        await episode_repository.insert(Episode(id="e3", season_id="se1", title="Three", number=3))
        await episode_repository.insert(Episode(id="e1", season_id="se1", title="One", number=1))
        await episode_repository.insert(Episode(id="x1", season_id="se2", title="Other", number=1))

        episodes = await episode_repository.find_by_season_id("se1")

        assert [e.id for e in episodes] == ["e1", "e3"]
        assert all(e.season_id == "se1" for e in episodes)

    @pytest.mark.asyncio
    async def test_find_by_unknown_season(self, episode_repository):
        assert await episode_repository.find_by_season_id("nope") == []


# ============================================================================
# Shows
# ============================================================================


@pytest_asyncio.fixture
async def rated_shows(show_repository):
    shows = [
        Show(id="s1", name="Star Trek", rating=8.1),
        Show(id="s2", name="Star Wars: Andor", rating=8.4),
        Show(id="s3", name="The Wire", rating=9.3),
        Show(id="s4", name="Stargate", rating=7.2),
        Show(id="s5", name="Friends", rating=8.9),
        Show(id="s6", name="a.b", rating=5.0),
    ]
    for show in shows:
        await show_repository.insert(show)
    return shows


class TestShowRepository:
    @pytest.mark.asyncio
    async def test_top_n_orders_by_rating_descending(self, show_repository, rated_shows):
        shows = await show_repository.get_filtered(None, 3)

        assert [s.id for s in shows] == ["s3", "s5", "s2"]

    @pytest.mark.asyncio
    async def test_top_n_respects_count(self, show_repository, rated_shows):
        assert len(await show_repository.get_filtered(None, 2)) == 2
        assert len(await show_repository.get_filtered(None, 100)) == len(rated_shows)

    @pytest.mark.asyncio
    async def test_name_filter_is_a_substring_match(self, show_repository, rated_shows):
        shows = await show_repository.get_filtered("Star", 10)

        assert [s.id for s in shows] == ["s2", "s1", "s4"]
        assert all("Star" in s.name for s in shows)
        ratings = [s.rating for s in shows]
        assert ratings == sorted(ratings, reverse=True)

    @pytest.mark.asyncio
    async def test_name_filter_is_literal(self, show_repository, rated_shows):
        # "." must not act as a regex wildcard
        shows = await show_repository.get_filtered(".", 10)

        assert [s.id for s in shows] == ["s6"]

    @pytest.mark.asyncio
    async def test_empty_name_means_no_filter(self, show_repository, rated_shows):
        assert len(await show_repository.get_filtered("", 10)) == len(rated_shows)

    @pytest.mark.asyncio
    async def test_non_positive_count(self, show_repository, rated_shows):
        assert await show_repository.get_filtered(None, 0) == []

    @pytest.mark.asyncio
    async def test_no_match(self, show_repository, rated_shows):
        assert await show_repository.get_filtered("Sopranos", 5) == []


# ============================================================================
# Users
# ============================================================================


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_find_by_login_and_email(self, user_repository):
        jdoe = UserProfile(id="u1", login="jdoe", email="jdoe@example.com", password_hash="h1")
        await user_repository.insert(jdoe)
        await user_repository.insert(UserProfile(id="u2", login="asmith", email="asmith@example.com", password_hash="h2"))

        assert await user_repository.find_by_login("jdoe") == jdoe
        assert await user_repository.find_by_email("jdoe@example.com") == jdoe

    @pytest.mark.asyncio
    async def test_lookups_return_none_when_absent(self, user_repository):
        assert await user_repository.find_by_login("nobody") is None
        assert await user_repository.find_by_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_exists_helpers(self, user_repository):
        await user_repository.insert(UserProfile(id="u1", login="jdoe", email="jdoe@example.com", password_hash="h"))

        assert await user_repository.login_exists("jdoe") is True
        assert await user_repository.login_exists("other") is False
        assert await user_repository.email_exists("jdoe@example.com") is True
        assert await user_repository.email_exists("other@example.com") is False

    @pytest.mark.asyncio
    async def test_login_uniqueness_is_not_enforced(self, user_repository):
        await user_repository.ensure_indexes()
        await user_repository.insert(UserProfile(id="u1", login="jdoe", email="a@example.com", password_hash="h"))
        await user_repository.insert(UserProfile(id="u2", login="jdoe", email="b@example.com", password_hash="h"))

        assert len(await user_repository.select_all()) == 2


# ============================================================================
# No cascade
# ============================================================================


@pytest.mark.asyncio
async def test_deleting_a_show_keeps_its_seasons(show_repository, season_repository):
    await show_repository.insert(Show(id="s1", name="Foo", rating=8.5))
    await season_repository.insert(Season(id="se1", show_id="s1", number=1))

    assert await season_repository.find_by_show_id("s1") == [Season(id="se1", show_id="s1", number=1)]

    assert await show_repository.delete_by_id("s1") is True

    assert await show_repository.find("s1") is None
    assert await season_repository.find("se1") == Season(id="se1", show_id="s1", number=1)
    assert await season_repository.find_by_show_id("s1") == [Season(id="se1", show_id="s1", number=1)]


@pytest.mark.asyncio
async def test_parent_references_are_not_validated(season_repository, episode_repository):
    season = await season_repository.insert(Season(id="se9", show_id="no-such-show", number=1))
    episode = await episode_repository.insert(Episode(id="e9", season_id="no-such-season", title="Orphan"))

    assert await season_repository.find("se9") == season
    assert await episode_repository.find("e9") == episode
