"""Local state services."""

from .stores import (
    FavouritesStore,
    InMemoryLocalStateStore,
    InstalledAppsStore,
    JsonFileLocalStateStore,
    StarredStore,
)

__all__ = [
    "FavouritesStore",
    "InMemoryLocalStateStore",
    "InstalledAppsStore",
    "JsonFileLocalStateStore",
    "StarredStore",
]
