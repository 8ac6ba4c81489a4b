"""Configuration management for ghstore."""

import os
import sys
from pathlib import Path
from typing import Any

import yaml

from ghstore.exceptions import ValidationError
from ghstore.models.config import AppConfig
from ghstore.models.platform import PlatformType


class ConfigManager:
    """Manages application configuration with YAML file and environment variable support."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize configuration manager.

        Args:
            config_path: Path to config file. If None, uses GHSTORE_CONFIG_PATH
                        environment variable or defaults to platform-specific config directory
        """
        if config_path is None:
            env_path = os.getenv("GHSTORE_CONFIG_PATH")
            if env_path:
                config_path = Path(env_path).expanduser()
            else:
                if sys.platform == "win32":
                    # Windows: %APPDATA%\ghstore
                    config_dir = Path(os.getenv("APPDATA", str(Path.home()))) / "ghstore"
                elif sys.platform == "darwin":
                    # macOS: ~/Library/Application Support/ghstore
                    config_dir = Path.home() / "Library" / "Application Support" / "ghstore"
                else:
                    # Linux/Unix: ~/.config/ghstore
                    config_dir = Path.home() / ".config" / "ghstore"

                config_path = config_dir / "config.yaml"

        self.config_path = config_path
        self._config: AppConfig | None = None

    def load(self) -> AppConfig:
        """Load configuration from file and apply environment variable overrides.

        Returns:
            Loaded configuration
        """
        config_data: dict[str, Any] = {}

        if self.config_path.exists():
            with open(self.config_path, encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}

        config = AppConfig(**config_data)
        return self._apply_env_overrides(config)

    def save(self, config: AppConfig) -> None:
        """Save configuration to YAML file.

        Args:
            config: Configuration to save
        """
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        # mode="json" turns Paths and enums into plain strings
        config_dict = config.model_dump(mode="json", exclude_none=True)

        with open(self.config_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, allow_unicode=True, sort_keys=False)

    def _apply_env_overrides(self, config: AppConfig) -> AppConfig:
        """Apply environment variable overrides.

        Environment variables use the format: GHSTORE_<SECTION>_<KEY>
        Examples:
            - GHSTORE_SERVER_PORT=9000
            - GHSTORE_PLATFORM=linux

        Args:
            config: Base configuration

        Returns:
            Configuration with environment overrides applied

        Raises:
            ValidationError: If GHSTORE_PLATFORM or GHSTORE_MAX_CONCURRENT_RELEASE_CHECKS is not a valid value
        """
        if port := os.getenv("GHSTORE_SERVER_PORT"):
            config.server.port = int(port)
        if host := os.getenv("GHSTORE_SERVER_HOST"):
            config.server.host = host

        # GITHUB_TOKEN is what CI runners and most tooling export
        if token := os.getenv("GHSTORE_GITHUB_TOKEN") or os.getenv("GITHUB_TOKEN"):
            config.github.token = token
        if api_url := os.getenv("GHSTORE_GITHUB_API_URL"):
            config.github.api_base_url = api_url

        if platform_name := os.getenv("GHSTORE_PLATFORM"):
            try:
                config.platform.type = PlatformType(platform_name.lower())
            except ValueError:
                raise ValidationError("platform.unsupported", platform=platform_name) from None

        if limit := os.getenv("GHSTORE_MAX_CONCURRENT_RELEASE_CHECKS"):
            try:
                checks = int(limit)
            except ValueError:
                raise ValidationError("enrichment.invalid_concurrency_limit", limit=limit) from None
            if checks < 1:
                raise ValidationError("enrichment.invalid_concurrency_limit", limit=limit)
            config.enrichment.max_concurrent_release_checks = checks

        if data_dir := os.getenv("GHSTORE_DATA_DIR"):
            config.paths.data_dir = Path(data_dir).expanduser()
            # Recalculate dependent paths
            config.paths.state_file = None
            config.paths.model_post_init(None)

        if log_level := os.getenv("GHSTORE_LOG_LEVEL"):
            if log_level.upper() in ("INFO", "DEBUG", "TRACE"):
                config.advanced.log_level = log_level.upper()  # type: ignore

        return config

    def get_config(self) -> AppConfig:
        """Get configuration (singleton pattern).

        Returns:
            Current configuration
        """
        if self._config is None:
            self._config = self.load()
        return self._config

    def reload(self) -> AppConfig:
        """Reload configuration from file.

        Returns:
            Reloaded configuration
        """
        self._config = self.load()
        return self._config


# Global configuration manager instance
_config_manager = ConfigManager()


def get_config() -> AppConfig:
    """Get global application configuration.

    Returns:
        Application configuration
    """
    return _config_manager.get_config()


def reload_config() -> AppConfig:
    """Reload configuration from file.

    Returns:
        Reloaded configuration
    """
    return _config_manager.reload()


def save_config(config: AppConfig) -> None:
    """Save configuration to file.

    Args:
        config: Configuration to save
    """
    _config_manager.save(config)
