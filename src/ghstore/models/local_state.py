"""Locally persisted records: installed apps, favourites and starred repositories."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InstalledApp(BaseModel):
    """An application installed from a repository release."""

    repo_id: int
    repo_full_name: str
    package_name: str | None = None
    installed_version: str | None = None
    installed_at: datetime = Field(default_factory=_utcnow)


class FavouriteRepo(BaseModel):
    """A repository the user marked as favourite."""

    repo_id: int
    repo_full_name: str | None = None
    added_at: datetime = Field(default_factory=_utcnow)


class StarredRepo(BaseModel):
    """A repository the user starred."""

    repo_id: int
    repo_full_name: str | None = None
    starred_at: datetime = Field(default_factory=_utcnow)


class LocalStateDocument(BaseModel):
    """On-disk layout of the local state file."""

    installed: list[InstalledApp] = Field(default_factory=list)
    favourites: list[FavouriteRepo] = Field(default_factory=list)
    starred: list[StarredRepo] = Field(default_factory=list)
