"""Per-repository release inspection."""

import asyncio
from collections.abc import Sequence

from ghstore.logger import get_logger
from ghstore.models.repository import ReleaseFacts, ReleaseRecord
from ghstore.services.github.client import GitHubApiClient
from ghstore.services.platform import PlatformClassifier

logger = get_logger(__name__)


def derive_release_facts(releases: Sequence[ReleaseRecord], classifier: PlatformClassifier) -> ReleaseFacts:
    """
    Derive release facts from a repository's releases, newest first.

    Only the first stable release is considered. Its tag becomes the
    qualifying version only when it carries an installable asset.

    Args:
        releases: Releases in host order
        classifier: Classifier for the active platform

    Returns:
        Release facts for the repository
    """
    if not releases:
        return ReleaseFacts.none()

    stable = next((release for release in releases if release.is_stable), None)
    if stable is None:
        return ReleaseFacts(has_releases=True)

    installable = any(classifier.is_installable(name) for name in stable.asset_names)
    return ReleaseFacts(
        has_releases=True,
        has_installable_assets=installable,
        latest_qualifying_version=stable.tag_name if installable else None,
    )


class ReleaseInspector:
    """Looks up release facts for one repository at a time.

    ``inspect`` never raises for an ordinary failure: a repository whose
    releases cannot be read gets ``ReleaseFacts.none()``. Cancellation is
    re-raised.
    """

    def __init__(self, client: GitHubApiClient, classifier: PlatformClassifier, per_page: int = 10) -> None:
        self.client = client
        self.classifier = classifier
        self.per_page = per_page

    async def inspect(self, owner: str, repo_name: str) -> ReleaseFacts:
        """
        Inspect a repository's most recent releases.

        Args:
            owner: Repository owner login
            repo_name: Repository name

        Returns:
            Derived release facts, or the default facts on failure
        """
        try:
            releases = await self.client.list_releases(owner, repo_name, per_page=self.per_page)
            return derive_release_facts(releases, self.classifier)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.debug("Release check failed", repository=f"{owner}/{repo_name}", error=str(e))
            return ReleaseFacts.none()
