"""Developer profile API endpoints."""

from fastapi import APIRouter

from ghstore.logger import get_logger
from ghstore.models.developer import DeveloperProfile
from ghstore.models.repository import EnrichedRepository
from ghstore.routers.errors import to_http_exception
from ghstore.services import container

logger = get_logger(__name__)
router = APIRouter(prefix="/api/developers", tags=["developers"])


@router.get("/{username}", response_model=DeveloperProfile)
async def get_developer_profile(username: str) -> DeveloperProfile:
    """
    Get a developer's public profile.

    Returns:
        Developer profile
    """
    result = await container.get_developer_service().get_developer_profile(username)
    if not result.is_success:
        raise to_http_exception(result.cause, result.error)
    return result.unwrap()


@router.get("/{username}/repositories", response_model=list[EnrichedRepository])
async def get_developer_repositories(username: str) -> list[EnrichedRepository]:
    """
    Get a developer's repositories with release and local state information.

    Archived repositories and forks are excluded; order is most recently updated first.
    """
    result = await container.get_developer_service().get_developer_repositories(username)
    if not result.is_success:
        raise to_http_exception(result.cause, result.error)

    repositories = result.unwrap()
    logger.info("Served developer repositories", username=username, count=len(repositories))
    return repositories
