"""
Composition Root

Builds every repository and manager once, at process start, from a single
database handle. Managers receive their repositories explicitly.

Usage:
======
    database = await init_db()
    container = Container.from_database(database)
    await container.ensure_indexes()

    show = await container.show_manager.get_show("s1")
"""

from dataclasses import dataclass

from motor.motor_asyncio import AsyncIOMotorDatabase

from watchall.shared.managers import ShowManager, UserManager
from watchall.shared.repositories import (
    BaseRepository,
    ChannelRepository,
    EpisodeRepository,
    GenreRepository,
    SeasonRepository,
    ShowRepository,
    UserRepository,
)


@dataclass
class Container:
    """Application object graph."""

    database: AsyncIOMotorDatabase
    show_repository: ShowRepository
    season_repository: SeasonRepository
    episode_repository: EpisodeRepository
    channel_repository: ChannelRepository
    genre_repository: GenreRepository
    user_repository: UserRepository
    show_manager: ShowManager
    user_manager: UserManager

    @classmethod
    def from_database(cls, database: AsyncIOMotorDatabase) -> "Container":
        """
        Construct repositories and managers for the given database.

        Args:
            database: Motor database holding every collection

        Returns:
            Fully wired container
        """
        show_repository = ShowRepository.from_db(database)
        season_repository = SeasonRepository.from_db(database)
        episode_repository = EpisodeRepository.from_db(database)
        user_repository = UserRepository.from_db(database)

        return cls(
            database=database,
            show_repository=show_repository,
            season_repository=season_repository,
            episode_repository=episode_repository,
            channel_repository=ChannelRepository.from_db(database),
            genre_repository=GenreRepository.from_db(database),
            user_repository=user_repository,
            show_manager=ShowManager(show_repository, season_repository, episode_repository),
            user_manager=UserManager(user_repository),
        )

    @property
    def repositories(self) -> list[BaseRepository]:
        return [
            self.show_repository,
            self.season_repository,
            self.episode_repository,
            self.channel_repository,
            self.genre_repository,
            self.user_repository,
        ]

    async def ensure_indexes(self) -> None:
        """Create the indexes of every collection (idempotent)."""
        for repository in self.repositories:
            await repository.ensure_indexes()
