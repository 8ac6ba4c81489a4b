"""Configuration data models for ghstore."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from ghstore.models.platform import PlatformType


class ServerConfig(BaseModel):
    """HTTP API server configuration."""

    port: int = 8000
    host: str = "127.0.0.1"


class GitHubConfig(BaseModel):
    """GitHub host configuration."""

    api_base_url: str = "https://api.github.com"
    raw_base_url: str = "https://raw.githubusercontent.com"
    token: str = ""
    timeout: float = 20.0  # seconds, per request
    user_agent: str = "ghstore/0.1"


class PlatformConfig(BaseModel):
    """Target platform configuration."""

    # None means detect from the running interpreter
    type: PlatformType | None = None
    installable_extensions: dict[PlatformType, list[str]] = Field(default_factory=dict)


class EnrichmentConfig(BaseModel):
    """Repository discovery and release check configuration."""

    repos_per_page: int = Field(default=100, ge=1, le=100)
    releases_per_page: int = Field(default=10, ge=1, le=100)
    max_concurrent_release_checks: int = Field(default=20, ge=1)


class DetailsConfig(BaseModel):
    """Repository details configuration."""

    # Tried in order when fetching README.md
    readme_branches: list[str] = Field(default_factory=lambda: ["master", "main"])


class PathsConfig(BaseModel):
    """Paths configuration."""

    data_dir: Path = Field(default_factory=lambda: Path.home() / ".ghstore")
    state_file: Path | None = None

    @field_validator("data_dir", mode="before")
    @classmethod
    def expand_data_dir(cls, v: str | Path) -> Path:
        """Expand user path for data_dir."""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v

    @field_validator("state_file", mode="before")
    @classmethod
    def expand_optional_path(cls, v: str | Path | None) -> Path | None:
        """Expand user path for optional paths."""
        if v is None:
            return None
        if isinstance(v, str):
            return Path(v).expanduser()
        return v

    def model_post_init(self, __context: object) -> None:
        """Set default file locations if not specified."""
        if self.state_file is None:
            self.state_file = self.data_dir / "local_state.json"


class AdvancedConfig(BaseModel):
    """Advanced configuration."""

    log_level: Literal["INFO", "DEBUG", "TRACE"] = "INFO"


class AppConfig(BaseModel):
    """Application configuration."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    platform: PlatformConfig = Field(default_factory=PlatformConfig)
    enrichment: EnrichmentConfig = Field(default_factory=EnrichmentConfig)
    details: DetailsConfig = Field(default_factory=DetailsConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    advanced: AdvancedConfig = Field(default_factory=AdvancedConfig)
