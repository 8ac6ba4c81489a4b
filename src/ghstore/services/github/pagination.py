"""Full-pagination fetch of a user's repositories."""

from ghstore.exceptions import ValidationError
from ghstore.logger import get_logger
from ghstore.models.repository import RepositorySummary
from ghstore.services.github.client import GitHubApiClient

logger = get_logger(__name__)


class RepositoryPaginator:
    """Fetches every page of a user's repositories, dropping archived repos and forks."""

    def __init__(self, client: GitHubApiClient, page_size: int = 100) -> None:
        """
        Initialize the paginator.

        Args:
            client: GitHub API client
            page_size: Repositories requested per page (GitHub caps this at 100)
        """
        if page_size < 1:
            raise ValidationError("github.invalid_page_size", page_size=page_size)
        self.client = client
        self.page_size = page_size

    async def fetch_all(self, owner: str) -> list[RepositorySummary]:
        """
        Fetch all repositories owned by a user, most recently updated first.

        A page that is empty or shorter than the page size ends the listing.

        Args:
            owner: User login

        Returns:
            Non-archived, non-fork repositories in host order

        Raises:
            HostResponseError: If any page returns a non-success status
            OperationalError: If any page request fails in transport
        """
        repositories: list[RepositorySummary] = []
        page = 1

        while True:
            batch = await self.client.list_repositories(owner, page=page, page_size=self.page_size)
            if not batch:
                break

            kept = [repo for repo in batch if not repo.archived and not repo.is_fork]
            repositories.extend(kept)
            logger.debug("Fetched repository page", owner=owner, page=page, received=len(batch), kept=len(kept))

            if len(batch) < self.page_size:
                break
            page += 1

        logger.info("Fetched repositories", owner=owner, pages=page, count=len(repositories))
        return repositories
