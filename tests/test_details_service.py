"""Tests for single-repository details."""

import pytest
from conftest import FakeGitHubHost, make_release, make_repo

from ghstore.exceptions import HostResponseError
from ghstore.services.github import GitHubApiClient, RepositoryDetailsService


@pytest.mark.asyncio
async def test_latest_release_picks_newest_stable_by_date(host: FakeGitHubHost, client: GitHubApiClient) -> None:
    host.releases["octo/app"] = [
        make_release("v3.0-beta", prerelease=True, published_at="2024-06-01T00:00:00Z"),
        make_release("v1.9-hotfix", published_at="2024-01-10T00:00:00Z"),
        make_release("v2.0", published_at="2024-03-01T00:00:00Z"),
        make_release("v2.1-draft", draft=True, published_at=None, created_at="2024-05-01T00:00:00Z"),
    ]

    release = await RepositoryDetailsService(client).get_latest_published_release("octo", "app")

    assert release is not None
    assert release.tag_name == "v2.0"


@pytest.mark.asyncio
async def test_latest_release_falls_back_to_created_at(host: FakeGitHubHost, client: GitHubApiClient) -> None:
    host.releases["octo/app"] = [
        make_release("v1", published_at=None, created_at="2024-02-01T00:00:00Z"),
        make_release("v2", published_at=None, created_at="2024-04-01T00:00:00Z"),
    ]

    release = await RepositoryDetailsService(client).get_latest_published_release("octo", "app")

    assert release is not None and release.tag_name == "v2"


@pytest.mark.asyncio
async def test_latest_release_none_without_stable(host: FakeGitHubHost, client: GitHubApiClient) -> None:
    host.releases["octo/app"] = [make_release("v1-rc", prerelease=True)]

    assert await RepositoryDetailsService(client).get_latest_published_release("octo", "app") is None


@pytest.mark.asyncio
async def test_readme_tries_branches_in_order(host: FakeGitHubHost, client: GitHubApiClient) -> None:
    host.raw_files["octo/app/main/README.md"] = "# From main"

    content = await RepositoryDetailsService(client).get_readme("octo", "app")

    assert content == "# From main"
    raw_paths = [r.url.path for r in host.requests if r.url.host == "raw.example.test"]
    assert raw_paths == ["/octo/app/master/README.md", "/octo/app/main/README.md"]


@pytest.mark.asyncio
async def test_readme_branch_order_is_configurable(host: FakeGitHubHost, client: GitHubApiClient) -> None:
    host.raw_files["octo/app/master/README.md"] = "# From master"
    host.raw_files["octo/app/develop/README.md"] = "# From develop"

    content = await RepositoryDetailsService(client, readme_branches=["develop", "master"]).get_readme("octo", "app")

    assert content == "# From develop"


@pytest.mark.asyncio
async def test_readme_missing_everywhere(client: GitHubApiClient) -> None:
    assert await RepositoryDetailsService(client).get_readme("octo", "app") is None


@pytest.mark.asyncio
async def test_repository_by_id_and_stats(host: FakeGitHubHost, client: GitHubApiClient) -> None:
    host.repos["octo"] = [make_repo(77, "tool")]
    service = RepositoryDetailsService(client)

    repo = await service.get_repository_by_id(77)
    stats = await service.get_repo_stats("octo", "tool")

    assert repo.full_name == "octo/tool"
    assert stats.stars == 77 % 7
    assert stats.open_issues == 3

    with pytest.raises(HostResponseError):
        await service.get_repository_by_id(1)
