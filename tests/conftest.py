"""Shared fixtures: an in-process fake of the GitHub REST host."""

import asyncio
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from ghstore.models.config import GitHubConfig
from ghstore.services.github import GitHubApiClient

API_URL = "https://api.example.test"
RAW_URL = "https://raw.example.test"


def make_repo(
    repo_id: int,
    name: str | None = None,
    owner: str = "octo",
    archived: bool = False,
    fork: bool = False,
) -> dict[str, Any]:
    name = name or f"repo-{repo_id}"
    return {
        "id": repo_id,
        "name": name,
        "full_name": f"{owner}/{name}",
        "archived": archived,
        "fork": fork,
        "description": f"Description of {name}",
        "html_url": f"https://github.com/{owner}/{name}",
        "stargazers_count": repo_id % 7,
        "forks_count": 0,
        "language": "Kotlin",
        "topics": None,
        "updated_at": "2024-05-01T00:00:00Z",
    }


def make_release(
    tag: str,
    assets: tuple[str, ...] = (),
    draft: bool | None = False,
    prerelease: bool | None = False,
    published_at: str | None = "2024-05-01T00:00:00Z",
    created_at: str | None = None,
) -> dict[str, Any]:
    return {
        "tag_name": tag,
        "name": tag,
        "draft": draft,
        "prerelease": prerelease,
        "published_at": published_at,
        "created_at": created_at,
        "assets": [
            {"name": asset, "size": 1024, "browser_download_url": f"https://example.test/{asset}"} for asset in assets
        ],
    }


class FakeGitHubHost:
    """Serves the subset of GitHub's REST API the client uses."""

    def __init__(self) -> None:
        self.repos: dict[str, list[dict[str, Any]]] = {}
        self.releases: dict[str, list[dict[str, Any]]] = {}
        self.users: dict[str, dict[str, Any]] = {}
        self.raw_files: dict[str, str] = {}
        # page number -> status code served instead of the page
        self.page_status: dict[int, int] = {}
        # "owner/name" -> status code served instead of the release list
        self.release_status: dict[str, int] = {}
        self.release_delay: Callable[[str], float] = lambda full_name: 0.0
        self.requests: list[httpx.Request] = []
        self.in_flight_releases = 0
        self.peak_release_concurrency = 0

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.host == "raw.example.test":
            content = self.raw_files.get(request.url.path.lstrip("/"))
            if content is None:
                return httpx.Response(404, text="404: Not Found")
            return httpx.Response(200, text=content)

        parts = request.url.path.strip("/").split("/")
        params = request.url.params

        if parts[0] == "users" and len(parts) == 3 and parts[2] == "repos":
            page = int(params.get("page", 1))
            per_page = int(params.get("per_page", 30))
            if page in self.page_status:
                return httpx.Response(self.page_status[page], json={"message": "error"})
            items = self.repos.get(parts[1], [])
            return httpx.Response(200, json=items[(page - 1) * per_page : page * per_page])

        if parts[0] == "users" and len(parts) == 2:
            user = self.users.get(parts[1])
            if user is None:
                return httpx.Response(404, json={"message": "Not Found"})
            return httpx.Response(200, json=user)

        if parts[0] == "repos" and len(parts) == 4 and parts[3] == "releases":
            full_name = f"{parts[1]}/{parts[2]}"
            self.in_flight_releases += 1
            self.peak_release_concurrency = max(self.peak_release_concurrency, self.in_flight_releases)
            try:
                await asyncio.sleep(self.release_delay(full_name))
            finally:
                self.in_flight_releases -= 1
            if full_name in self.release_status:
                return httpx.Response(self.release_status[full_name], json={"message": "error"})
            per_page = int(params.get("per_page", 30))
            return httpx.Response(200, json=self.releases.get(full_name, [])[:per_page])

        if parts[0] == "repos" and len(parts) == 3:
            for repos in self.repos.values():
                for repo in repos:
                    if repo["full_name"] == f"{parts[1]}/{parts[2]}":
                        return httpx.Response(200, json={**repo, "open_issues_count": 3})
            return httpx.Response(404, json={"message": "Not Found"})

        if parts[0] == "repositories" and len(parts) == 2:
            for repos in self.repos.values():
                for repo in repos:
                    if str(repo["id"]) == parts[1]:
                        return httpx.Response(200, json=repo)
            return httpx.Response(404, json={"message": "Not Found"})

        return httpx.Response(404, json={"message": "Not Found"})

    def client(self) -> GitHubApiClient:
        config = GitHubConfig(api_base_url=API_URL, raw_base_url=RAW_URL, token="test-token")
        return GitHubApiClient(config, transport=httpx.MockTransport(self.handler))

    def release_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/releases")]


@pytest.fixture
def host() -> FakeGitHubHost:
    return FakeGitHubHost()


@pytest.fixture
def client(host: FakeGitHubHost) -> GitHubApiClient:
    return host.client()
