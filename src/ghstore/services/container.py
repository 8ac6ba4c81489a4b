"""Process-wide service instances, built lazily from the global configuration."""

from ghstore.config import get_config
from ghstore.logger import get_logger
from ghstore.services.developer import DeveloperProfileService
from ghstore.services.github import GitHubApiClient, RepositoryDetailsService
from ghstore.services.local_state import JsonFileLocalStateStore

logger = get_logger(__name__)

_client: GitHubApiClient | None = None
_local_store: JsonFileLocalStateStore | None = None
_developer_service: DeveloperProfileService | None = None
_details_service: RepositoryDetailsService | None = None


def get_github_client() -> GitHubApiClient:
    global _client
    if _client is None:
        _client = GitHubApiClient(get_config().github)
    return _client


def get_local_store() -> JsonFileLocalStateStore:
    global _local_store
    if _local_store is None:
        state_file = get_config().paths.state_file
        assert state_file is not None
        _local_store = JsonFileLocalStateStore(state_file)
    return _local_store


def get_developer_service() -> DeveloperProfileService:
    global _developer_service
    if _developer_service is None:
        _developer_service = DeveloperProfileService.from_config(get_config(), get_github_client(), get_local_store())
    return _developer_service


def get_details_service() -> RepositoryDetailsService:
    global _details_service
    if _details_service is None:
        config = get_config()
        _details_service = RepositoryDetailsService(
            get_github_client(),
            readme_branches=config.details.readme_branches,
            releases_per_page=config.enrichment.releases_per_page,
        )
    return _details_service


async def close_services() -> None:
    """Close the shared HTTP client and forget every service instance."""
    global _client, _local_store, _developer_service, _details_service
    if _client is not None:
        await _client.aclose()
        logger.info("GitHub client closed")
    _client = None
    _local_store = None
    _developer_service = None
    _details_service = None
