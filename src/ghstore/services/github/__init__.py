"""GitHub services."""

from .client import GitHubApiClient
from .details import RepositoryDetailsService
from .pagination import RepositoryPaginator
from .releases import ReleaseInspector, derive_release_facts

__all__ = [
    "GitHubApiClient",
    "ReleaseInspector",
    "RepositoryDetailsService",
    "RepositoryPaginator",
    "derive_release_facts",
]
