"""Data models for ghstore."""

from ghstore.models.config import AppConfig
from ghstore.models.developer import DeveloperProfile
from ghstore.models.local_state import FavouriteRepo, InstalledApp, StarredRepo
from ghstore.models.platform import PlatformType
from ghstore.models.repository import (
    EnrichedRepository,
    LocalStateSets,
    ReleaseAsset,
    ReleaseFacts,
    ReleaseRecord,
    RepoStats,
    RepositorySummary,
)
from ghstore.models.result import Result

__all__ = [
    "AppConfig",
    "DeveloperProfile",
    "EnrichedRepository",
    "FavouriteRepo",
    "InstalledApp",
    "LocalStateSets",
    "PlatformType",
    "ReleaseAsset",
    "ReleaseFacts",
    "ReleaseRecord",
    "RepoStats",
    "RepositorySummary",
    "Result",
    "StarredRepo",
]
