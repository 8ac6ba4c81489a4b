"""Repository details API endpoints."""

from fastapi import APIRouter, HTTPException

from ghstore.exceptions import AppBaseError, ResourceNotFoundError
from ghstore.logger import get_logger
from ghstore.models.repository import ReleaseRecord, RepositorySummary, RepoStats
from ghstore.routers.errors import to_http_exception
from ghstore.services import container

logger = get_logger(__name__)
router = APIRouter(prefix="/api/repositories", tags=["repositories"])


@router.get("/{repo_id}", response_model=RepositorySummary)
async def get_repository(repo_id: int) -> RepositorySummary:
    """Get a repository by its numeric id."""
    try:
        return await container.get_details_service().get_repository_by_id(repo_id)
    except AppBaseError as e:
        raise to_http_exception(e) from e


@router.get("/{owner}/{repo}/releases/latest", response_model=ReleaseRecord)
async def get_latest_release(owner: str, repo: str) -> ReleaseRecord:
    """
    Get the newest stable release of a repository.

    Raises:
        HTTPException: 404 if the repository has no stable release
    """
    try:
        release = await container.get_details_service().get_latest_published_release(owner, repo)
    except AppBaseError as e:
        raise to_http_exception(e) from e

    if release is None:
        raise HTTPException(status_code=404, detail=f"No stable release for {owner}/{repo}")
    return release


@router.get("/{owner}/{repo}/readme")
async def get_readme(owner: str, repo: str) -> dict[str, str]:
    """Get the raw README.md of a repository."""
    content = await container.get_details_service().get_readme(owner, repo)
    if content is None:
        raise to_http_exception(ResourceNotFoundError("repository.readme_not_found", repository=f"{owner}/{repo}"))
    return {"content": content}


@router.get("/{owner}/{repo}/stats", response_model=RepoStats)
async def get_repo_stats(owner: str, repo: str) -> RepoStats:
    try:
        return await container.get_details_service().get_repo_stats(owner, repo)
    except AppBaseError as e:
        raise to_http_exception(e) from e
