"""Tests for the generic CRUD operations of BaseRepository."""

from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from watchall.shared.core.exceptions import NotFoundError, ValidationError
from watchall.shared.models import Channel, Episode, Genre, Season, Show, UserProfile
from watchall.shared.repositories import BaseRepository, ChannelRepository


class TestCollectionBinding:
    """Each repository is bound to exactly one named collection."""

    def test_collection_names(
        self,
        show_repository,
        season_repository,
        episode_repository,
        channel_repository,
        genre_repository,
        user_repository,
    ):
        assert show_repository.collection.name == "shows"
        assert season_repository.collection.name == "seasons"
        assert episode_repository.collection.name == "episodes"
        assert channel_repository.collection.name == "channels"
        assert genre_repository.collection.name == "genres"
        assert user_repository.collection.name == "users"

    def test_repository_without_collection_name_is_rejected(self, database):
        class NamelessRepository(BaseRepository[Channel]):
            pass

        with pytest.raises(TypeError):
            NamelessRepository(Channel, database["whatever"])


class TestInsertAndFind:
    """insert followed by find returns an equal document."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "fixture_name, document",
        [
            ("show_repository", Show(id="s1", name="Foo", rating=8.5, channel_id="c1", genre_ids=["g1"])),
            ("season_repository", Season(id="se1", show_id="s1", number=1)),
            (
                "episode_repository",
                Episode(id="e1", season_id="se1", title="Pilot", number=1, air_date=datetime(2020, 1, 5, 21, 0)),
            ),
            ("channel_repository", Channel(id="c1", name="HBO")),
            ("genre_repository", Genre(id="g1", name="Drama")),
            (
                "user_repository",
                UserProfile(id="u1", login="jdoe", email="jdoe@example.com", password_hash="x"),
            ),
        ],
    )
    async def test_insert_then_find(self, request, fixture_name, document):
        repo = request.getfixturevalue(fixture_name)

        stored = await repo.insert(document)
        found = await repo.find(document.id)

        assert stored == document
        assert found == document

    @pytest.mark.asyncio
    async def test_insert_assigns_id_when_missing(self, channel_repository):
        stored = await channel_repository.insert(Channel(name="BBC"))

        assert stored.id
        assert await channel_repository.find(stored.id) == stored

    @pytest.mark.asyncio
    async def test_insert_duplicate_id_propagates_store_error(self, channel_repository):
        await channel_repository.insert(Channel(id="c1", name="HBO"))

        with pytest.raises(DuplicateKeyError):
            await channel_repository.insert(Channel(id="c1", name="Other"))

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, channel_repository):
        assert await channel_repository.find("missing") is None

    @pytest.mark.asyncio
    async def test_id_is_stored_as_mongo_id(self, channel_repository, database):
        await channel_repository.insert(Channel(id="c1", name="HBO"))

        raw = await database["channels"].find_one({"_id": "c1"})

        assert raw == {"_id": "c1", "name": "HBO"}


class TestSelectAll:
    @pytest.mark.asyncio
    async def test_empty_collection(self, genre_repository):
        assert await genre_repository.select_all() == []

    @pytest.mark.asyncio
    async def test_returns_every_document_ordered_by_id(self, genre_repository):
        for genre_id, name in [("g2", "Comedy"), ("g1", "Drama"), ("g3", "Horror")]:
            await genre_repository.insert(Genre(id=genre_id, name=name))

        genres = await genre_repository.select_all()

        assert [g.id for g in genres] == ["g1", "g2", "g3"]


class TestReplaceById:
    @pytest.mark.asyncio
    async def test_replace_existing(self, show_repository):
        await show_repository.insert(Show(id="s1", name="Foo", rating=8.5))
        replacement = Show(name="Foo (remastered)", rating=9.1, genre_ids=["g2"])

        stored = await show_repository.replace_by_id("s1", replacement)

        assert stored.id == "s1"
        assert await show_repository.find("s1") == stored
        assert stored.name == "Foo (remastered)"

    @pytest.mark.asyncio
    async def test_replace_is_a_full_replacement(self, show_repository):
        await show_repository.insert(Show(id="s1", name="Foo", rating=8.5, description="old", channel_id="c1"))

        await show_repository.replace_by_id("s1", Show(id="s1", name="Foo"))

        found = await show_repository.find("s1")
        assert found.description is None
        assert found.channel_id is None
        assert found.rating == 0.0

    @pytest.mark.asyncio
    async def test_replace_missing_raises_not_found_and_creates_nothing(self, show_repository):
        with pytest.raises(NotFoundError):
            await show_repository.replace_by_id("ghost", Show(name="Ghost"))

        assert await show_repository.find("ghost") is None
        assert await show_repository.select_all() == []

    @pytest.mark.asyncio
    async def test_replace_cannot_change_id(self, show_repository):
        await show_repository.insert(Show(id="s1", name="Foo"))

        with pytest.raises(ValidationError):
            await show_repository.replace_by_id("s1", Show(id="s2", name="Foo"))

        assert await show_repository.find("s1") == Show(id="s1", name="Foo")
        assert await show_repository.find("s2") is None


class TestDeleteById:
    @pytest.mark.asyncio
    async def test_delete_existing(self, channel_repository):
        await channel_repository.insert(Channel(id="c1", name="HBO"))

        assert await channel_repository.delete_by_id("c1") is True
        assert await channel_repository.find("c1") is None

    @pytest.mark.asyncio
    async def test_delete_missing_returns_false_without_change(self, channel_repository):
        await channel_repository.insert(Channel(id="c1", name="HBO"))

        assert await channel_repository.delete_by_id("ghost") is False
        assert await channel_repository.select_all() == [Channel(id="c1", name="HBO")]

    @pytest.mark.asyncio
    async def test_delete_twice(self, channel_repository):
        await channel_repository.insert(Channel(id="c1", name="HBO"))

        assert await channel_repository.delete_by_id("c1") is True
        assert await channel_repository.delete_by_id("c1") is False


class TestExists:
    @pytest.mark.asyncio
    async def test_exists(self, channel_repository):
        await channel_repository.insert(Channel(id="c1", name="HBO"))

        assert await channel_repository.exists("c1") is True
        assert await channel_repository.exists("c2") is False


@pytest.mark.asyncio
async def test_from_db_uses_collection_name(database):
    repo = ChannelRepository.from_db(database)

    await repo.insert(Channel(id="c1", name="HBO"))

    assert await database["channels"].count_documents({}) == 1


class TestDatetimeRoundTrip:
    """Dates read back equal to the dates inserted."""

    @pytest.mark.asyncio
    async def test_offset_date_is_stored_as_utc(self, episode_repository):
        paris = timezone(timedelta(hours=2))
        episode = Episode(id="e1", season_id="se1", title="Pilot", air_date=datetime(2020, 1, 5, 21, 0, tzinfo=paris))

        await episode_repository.insert(episode)
        found = await episode_repository.find("e1")

        assert found == episode
        assert found.air_date == datetime(2020, 1, 5, 19, 0, tzinfo=timezone.utc)
        assert found.air_date.utcoffset() == timedelta(0)

    @pytest.mark.asyncio
    async def test_microseconds_are_truncated_to_milliseconds(self, episode_repository):
        episode = Episode(id="e1", season_id="se1", title="Pilot", air_date=datetime(2020, 1, 5, 21, 0, 0, 123456))

        await episode_repository.insert(episode)
        found = await episode_repository.find("e1")

        assert found == episode
        assert found.air_date.microsecond == 123000

    @pytest.mark.asyncio
    async def test_naive_date_is_taken_as_utc(self, episode_repository):
        episode = Episode(id="e1", season_id="se1", title="Pilot", air_date=datetime(2020, 1, 5, 21, 0))

        await episode_repository.insert(episode)

        assert (await episode_repository.find("e1")).air_date == datetime(2020, 1, 5, 21, 0, tzinfo=timezone.utc)


class TestStoreAssignedIds:
    """Documents written with an ObjectId _id stay reachable by their string id."""

    @pytest.mark.asyncio
    async def test_find_replace_delete_by_listed_id(self, channel_repository, database):
        await database["channels"].insert_one({"name": "HBO"})

        [listed] = await channel_repository.select_all()
        assert ObjectId.is_valid(listed.id)

        assert await channel_repository.find(listed.id) == listed
        assert await channel_repository.exists(listed.id) is True

        await channel_repository.replace_by_id(listed.id, Channel(name="HBO Max"))
        assert (await channel_repository.find(listed.id)).name == "HBO Max"
        assert await database["channels"].count_documents({}) == 1
        raw = await database["channels"].find_one({})
        assert isinstance(raw["_id"], ObjectId)

        assert await channel_repository.delete_by_id(listed.id) is True
        assert await channel_repository.select_all() == []

    @pytest.mark.asyncio
    async def test_generated_string_ids_still_match(self, channel_repository, database):
        stored = await channel_repository.insert(Channel(name="BBC"))

        raw = await database["channels"].find_one({})
        assert raw["_id"] == stored.id

        assert await channel_repository.find(stored.id) == stored
        assert await channel_repository.delete_by_id(stored.id) is True
