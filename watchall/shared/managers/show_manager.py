"""
Show Manager

Use-case oriented API over the show, season and episode repositories.

Nothing here validates references or cascades deletes: deleting a show
leaves its seasons (and their episodes) in the store.
"""

from typing import List, Optional

from watchall.shared.models.episode import Episode
from watchall.shared.models.season import Season
from watchall.shared.models.show import Show
from watchall.shared.repositories.episode_repository import EpisodeRepository
from watchall.shared.repositories.season_repository import SeasonRepository
from watchall.shared.repositories.show_repository import ShowRepository


class ShowManager:
    """Manager for shows and their seasons and episodes."""

    def __init__(
        self,
        show_repository: ShowRepository,
        season_repository: SeasonRepository,
        episode_repository: EpisodeRepository,
    ) -> None:
        self.show_repo = show_repository
        self.season_repo = season_repository
        self.episode_repo = episode_repository

    # ═══════════════════════════════════════════════════════════════════════════
    # SHOWS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_show(self, show_id: str) -> Optional[Show]:
        return await self.show_repo.find(show_id)

    async def get_all_shows(self) -> List[Show]:
        return await self.show_repo.select_all()

    async def get_top_shows(self, name: Optional[str], count: int) -> List[Show]:
        """
        Get the `count` best rated shows whose name contains `name`.

        Args:
            name: Optional name substring
            count: Maximum number of shows

        Returns:
            Shows ordered by rating descending
        """
        return await self.show_repo.get_filtered(name, count)

    async def create_show(self, show: Show) -> Show:
        return await self.show_repo.insert(show)

    async def update_show(self, show_id: str, show: Show) -> Show:
        return await self.show_repo.replace_by_id(show_id, show)

    async def delete_show(self, show_id: str) -> bool:
        return await self.show_repo.delete_by_id(show_id)

    # ═══════════════════════════════════════════════════════════════════════════
    # CHILDREN
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_seasons(self, show_id: str) -> List[Season]:
        """Seasons referencing the show, by season number."""
        return await self.season_repo.find_by_show_id(show_id)

    async def get_episodes(self, season_id: str) -> List[Episode]:
        """Episodes referencing the season, by episode number."""
        return await self.episode_repo.find_by_season_id(season_id)
