"""Single-repository details: metadata, latest release, README and counters."""

from collections.abc import Sequence

from ghstore.exceptions import OperationalError
from ghstore.logger import get_logger
from ghstore.models.repository import ReleaseRecord, RepositorySummary, RepoStats
from ghstore.services.github.client import GitHubApiClient

logger = get_logger(__name__)


class RepositoryDetailsService:
    """Reads the details of one repository."""

    def __init__(
        self,
        client: GitHubApiClient,
        readme_branches: Sequence[str] = ("master", "main"),
        releases_per_page: int = 10,
    ) -> None:
        """
        Initialize the details service.

        Args:
            client: GitHub API client
            readme_branches: Branches tried in order when fetching README.md
            releases_per_page: Releases considered when picking the latest one
        """
        self.client = client
        self.readme_branches = list(readme_branches)
        self.releases_per_page = releases_per_page

    async def get_repository_by_id(self, repo_id: int) -> RepositorySummary:
        return await self.client.get_repository(repo_id)

    async def get_latest_published_release(self, owner: str, repo: str) -> ReleaseRecord | None:
        """
        Return the newest stable release.

        Releases are ordered by publication date (creation date when unpublished),
        so a backdated tag listed first by the host does not win.
        """
        releases = await self.client.list_releases(owner, repo, per_page=self.releases_per_page)
        stable = [release for release in releases if release.is_stable]
        if not stable:
            return None
        return max(stable, key=lambda release: release.published_at or release.created_at or "")

    async def get_readme(self, owner: str, repo: str) -> str | None:
        """Fetch README.md from the first configured branch that has one."""
        for branch in self.readme_branches:
            try:
                return await self.client.get_raw_file(owner, repo, branch, "README.md")
            except OperationalError as e:
                logger.debug("README not available", repository=f"{owner}/{repo}", branch=branch, error=str(e))
        return None

    async def get_repo_stats(self, owner: str, repo: str) -> RepoStats:
        return await self.client.get_repo_stats(owner, repo)
