"""Developer profile and repository listing."""

import asyncio

from ghstore.logger import get_logger
from ghstore.models.config import AppConfig
from ghstore.models.developer import DeveloperProfile
from ghstore.models.repository import EnrichedRepository
from ghstore.models.result import Result
from ghstore.services.enrichment import EnrichmentScheduler, LocalStateMerger
from ghstore.services.github import GitHubApiClient, ReleaseInspector, RepositoryPaginator
from ghstore.services.local_state import InMemoryLocalStateStore
from ghstore.services.platform import PlatformClassifier, detect_platform

logger = get_logger(__name__)


class DeveloperProfileService:
    """Entry point for a developer's profile and enriched repository list.

    Both operations return a Result: fetch failures become a failure value
    with a readable message, never an exception. Cancellation still propagates.
    """

    def __init__(
        self,
        client: GitHubApiClient,
        paginator: RepositoryPaginator,
        scheduler: EnrichmentScheduler,
        merger: LocalStateMerger,
    ) -> None:
        self.client = client
        self.paginator = paginator
        self.scheduler = scheduler
        self.merger = merger

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        client: GitHubApiClient,
        local_store: InMemoryLocalStateStore,
    ) -> "DeveloperProfileService":
        """
        Wire the pipeline from application configuration.

        Args:
            config: Application configuration
            client: GitHub API client
            local_store: Store providing installed apps, favourites and starred repositories

        Returns:
            Configured service
        """
        platform_type = config.platform.type or detect_platform()
        classifier = PlatformClassifier(platform_type, config.platform.installable_extensions)
        inspector = ReleaseInspector(client, classifier, per_page=config.enrichment.releases_per_page)

        return cls(
            client=client,
            paginator=RepositoryPaginator(client, page_size=config.enrichment.repos_per_page),
            scheduler=EnrichmentScheduler(
                inspector, concurrency_limit=config.enrichment.max_concurrent_release_checks
            ),
            merger=LocalStateMerger(local_store, local_store, local_store),
        )

    async def get_developer_profile(self, username: str) -> Result[DeveloperProfile]:
        try:
            return Result.success(await self.client.get_user(username))
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error("Failed to fetch developer profile", username=username, error=str(e))
            return Result.failure(f"Failed to fetch developer profile: {e}", e)

    async def get_developer_repositories(self, username: str) -> Result[list[EnrichedRepository]]:
        """
        List a developer's own repositories with release facts and local state.

        Archived repositories and forks are excluded. A failure on any page of
        the listing fails the whole operation; a failed release check only
        degrades that repository's facts.

        Args:
            username: Developer login

        Returns:
            Enriched repositories, most recently updated first, or a failure
        """
        try:
            repositories = await self.paginator.fetch_all(username)
            if not repositories:
                return Result.success([])

            snapshot = await self.merger.capture()
            enriched = await self.scheduler.enrich(repositories, snapshot)
            return Result.success(enriched)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error("Failed to fetch repositories", username=username, error=str(e), exc_info=True)
            return Result.failure(f"Failed to fetch repositories: {e}", e)
