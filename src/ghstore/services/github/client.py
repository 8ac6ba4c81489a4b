"""GitHub REST API client."""

from types import TracebackType
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PayloadValidationError

from ghstore.exceptions import HostResponseError, OperationalError
from ghstore.logger import get_logger
from ghstore.models.config import GitHubConfig
from ghstore.models.developer import DeveloperProfile
from ghstore.models.repository import ReleaseRecord, RepositorySummary, RepoStats

logger = get_logger(__name__)

M = TypeVar("M")

_REPOSITORY_LIST = TypeAdapter(list[RepositorySummary])
_RELEASE_LIST = TypeAdapter(list[ReleaseRecord])
_DEVELOPER = TypeAdapter(DeveloperProfile)
_REPOSITORY = TypeAdapter(RepositorySummary)


class GitHubApiClient:
    """Thin async wrapper over the GitHub REST endpoints ghstore reads.

    Every method raises HostResponseError on a non-success status and
    OperationalError on transport failures or malformed payloads. An empty
    list in a successful response is returned as an empty list.
    """

    def __init__(
        self,
        config: GitHubConfig | None = None,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Host configuration; defaults to public GitHub
            client: Pre-built httpx client to use instead of creating one
            transport: Transport for the created client (tests pass httpx.MockTransport)
        """
        self.config = config or GitHubConfig()
        self._owns_client = client is None

        if client is None:
            headers = {
                "Accept": "application/vnd.github+json",
                "User-Agent": self.config.user_agent,
            }
            if self.config.token:
                headers["Authorization"] = f"Bearer {self.config.token}"
            client = httpx.AsyncClient(
                base_url=self.config.api_base_url,
                headers=headers,
                timeout=self.config.timeout,
                follow_redirects=True,
                transport=transport,
            )
        self._http = client

    async def __aenter__(self) -> "GitHubApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            await self._http.aclose()

    async def _get(self, url: str, params: dict[str, Any] | None = None) -> httpx.Response:
        try:
            response = await self._http.get(url, params=params)
        except httpx.HTTPError as e:
            raise OperationalError("github.transport_failed", retriable=True, path=url, error=str(e)) from e

        if not response.is_success:
            logger.debug("Non-success response", path=url, status=response.status_code)
            raise HostResponseError(url, response.status_code, response.reason_phrase)
        return response

    async def _get_model(self, url: str, adapter: TypeAdapter[M], params: dict[str, Any] | None = None) -> M:
        response = await self._get(url, params)
        try:
            return adapter.validate_python(response.json())
        except (ValueError, PayloadValidationError) as e:
            raise OperationalError("github.invalid_payload", path=url, error=str(e)) from e

    async def list_repositories(
        self,
        owner: str,
        page: int,
        page_size: int,
        sort: str = "updated",
        direction: str = "desc",
        repo_type: str = "owner",
    ) -> list[RepositorySummary]:
        """List one page of a user's repositories."""
        params = {
            "per_page": page_size,
            "page": page,
            "type": repo_type,
            "sort": sort,
            "direction": direction,
        }
        return await self._get_model(f"/users/{owner}/repos", _REPOSITORY_LIST, params)

    async def list_releases(self, owner: str, repo: str, per_page: int) -> list[ReleaseRecord]:
        """List the most recent releases of a repository, newest first."""
        return await self._get_model(f"/repos/{owner}/{repo}/releases", _RELEASE_LIST, {"per_page": per_page})

    async def get_user(self, username: str) -> DeveloperProfile:
        """Fetch a user's public profile."""
        return await self._get_model(f"/users/{username}", _DEVELOPER)

    async def get_repository(self, repo_id: int) -> RepositorySummary:
        """Fetch a repository by its numeric id."""
        return await self._get_model(f"/repositories/{repo_id}", _REPOSITORY)

    async def get_repo_stats(self, owner: str, repo: str) -> RepoStats:
        response = await self._get(f"/repos/{owner}/{repo}")
        try:
            data = response.json()
            return RepoStats(
                stars=data.get("stargazers_count", 0),
                forks=data.get("forks_count", 0),
                open_issues=data.get("open_issues_count", 0),
            )
        except (ValueError, AttributeError, PayloadValidationError) as e:
            raise OperationalError("github.invalid_payload", path=f"/repos/{owner}/{repo}", error=str(e)) from e

    async def get_raw_file(self, owner: str, repo: str, branch: str, path: str) -> str:
        """Fetch a file's raw text from the raw-content host."""
        url = f"{self.config.raw_base_url.rstrip('/')}/{owner}/{repo}/{branch}/{path.lstrip('/')}"
        response = await self._get(url)
        return response.text
