"""Join of enriched repositories with local state."""

from ghstore.logger import get_logger
from ghstore.models.repository import EnrichedRepository, LocalStateSets, ReleaseFacts, RepositorySummary
from ghstore.services.local_state import FavouritesStore, InstalledAppsStore, StarredStore

logger = get_logger(__name__)


class LocalStateMerger:
    """Captures local state once per batch and merges it into each repository.

    Membership is always tested against the captured snapshot, never against
    the stores, so every item of a batch reflects the same instant.
    """

    def __init__(
        self,
        installed_store: InstalledAppsStore,
        favourites_store: FavouritesStore,
        starred_store: StarredStore | None = None,
    ) -> None:
        self.installed_store = installed_store
        self.favourites_store = favourites_store
        self.starred_store = starred_store

    async def capture(self) -> LocalStateSets:
        """Read the stores once and freeze the result."""
        installed = await self.installed_store.list_installed_repository_ids()
        favourites = await self.favourites_store.list_all()
        starred = await self.starred_store.list_starred() if self.starred_store is not None else []

        snapshot = LocalStateSets(
            installed_repo_ids=frozenset(installed),
            favorite_repo_ids=frozenset(fav.repo_id for fav in favourites),
            starred_repo_ids=frozenset(star.repo_id for star in starred),
        )
        logger.debug(
            "Captured local state",
            installed=len(snapshot.installed_repo_ids),
            favourites=len(snapshot.favorite_repo_ids),
            starred=len(snapshot.starred_repo_ids),
        )
        return snapshot

    @staticmethod
    def combine(repo: RepositorySummary, facts: ReleaseFacts, snapshot: LocalStateSets) -> EnrichedRepository:
        return EnrichedRepository(
            repository=repo,
            release_facts=facts,
            is_installed=repo.id in snapshot.installed_repo_ids,
            is_favorite=repo.id in snapshot.favorite_repo_ids,
            is_starred=repo.id in snapshot.starred_repo_ids,
        )
