"""Repository, release and enrichment models.

Network models read GitHub's JSON directly; aliases map GitHub's field names
(``fork``, ``draft``, ``browser_download_url``) onto ours.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RepositorySummary(BaseModel):
    """A repository as listed by the host. Immutable once fetched."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    full_name: str
    archived: bool = False
    is_fork: bool = Field(default=False, alias="fork")

    description: str | None = None
    html_url: str | None = None
    stargazers_count: int = 0
    forks_count: int = 0
    open_issues_count: int = 0
    language: str | None = None
    topics: tuple[str, ...] = ()
    updated_at: str | None = None

    @field_validator("topics", mode="before")
    @classmethod
    def none_topics_to_empty(cls, v: list[str] | None) -> list[str]:
        """GitHub sends null topics for some repositories."""
        return v or []

    @property
    def owner(self) -> str:
        """Owner login, taken from ``full_name``."""
        return self.full_name.split("/", 1)[0]


class ReleaseAsset(BaseModel):
    """A downloadable file attached to a release."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    content_type: str | None = None
    size: int = 0
    download_url: str | None = Field(default=None, alias="browser_download_url")


class ReleaseRecord(BaseModel):
    """A release as listed by the host."""

    model_config = ConfigDict(populate_by_name=True)

    tag_name: str
    name: str | None = None
    is_draft: bool = Field(default=False, alias="draft")
    is_prerelease: bool = Field(default=False, alias="prerelease")
    published_at: str | None = None
    created_at: str | None = None
    body: str | None = None
    html_url: str | None = None
    assets: list[ReleaseAsset] = Field(default_factory=list)

    @field_validator("is_draft", "is_prerelease", mode="before")
    @classmethod
    def none_to_false(cls, v: bool | None) -> bool:
        """Treat a missing or null flag as unset."""
        return bool(v)

    @property
    def is_stable(self) -> bool:
        """Whether the release is neither a draft nor a prerelease."""
        return not self.is_draft and not self.is_prerelease

    @property
    def asset_names(self) -> list[str]:
        return [asset.name for asset in self.assets]


class ReleaseFacts(BaseModel):
    """Release information derived for one repository."""

    model_config = ConfigDict(frozen=True)

    has_releases: bool = False
    has_installable_assets: bool = False
    latest_qualifying_version: str | None = None

    @classmethod
    def none(cls) -> "ReleaseFacts":
        """Facts for a repository with no usable release data."""
        return cls()


class LocalStateSets(BaseModel):
    """Snapshot of local state, captured once per enrichment batch."""

    model_config = ConfigDict(frozen=True)

    installed_repo_ids: frozenset[int] = frozenset()
    favorite_repo_ids: frozenset[int] = frozenset()
    starred_repo_ids: frozenset[int] = frozenset()


class EnrichedRepository(BaseModel):
    """A repository with its release facts and local state flags."""

    model_config = ConfigDict(frozen=True)

    repository: RepositorySummary
    release_facts: ReleaseFacts
    is_installed: bool = False
    is_favorite: bool = False
    is_starred: bool = False

    @property
    def id(self) -> int:
        return self.repository.id

    @property
    def full_name(self) -> str:
        return self.repository.full_name


class RepoStats(BaseModel):
    """Repository counters."""

    stars: int = 0
    forks: int = 0
    open_issues: int = 0
