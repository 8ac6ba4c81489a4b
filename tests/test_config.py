"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from ghstore.config import ConfigManager
from ghstore.exceptions import ValidationError
from ghstore.models.platform import PlatformType


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "GHSTORE_GITHUB_TOKEN",
        "GITHUB_TOKEN",
        "GHSTORE_PLATFORM",
        "GHSTORE_DATA_DIR",
        "GHSTORE_MAX_CONCURRENT_RELEASE_CHECKS",
        "GHSTORE_LOG_LEVEL",
        "GHSTORE_SERVER_PORT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_file(tmp_path: Path) -> None:
    config = ConfigManager(tmp_path / "config.yaml").load()

    assert config.enrichment.repos_per_page == 100
    assert config.enrichment.releases_per_page == 10
    assert config.enrichment.max_concurrent_release_checks == 20
    assert config.details.readme_branches == ["master", "main"]
    assert config.platform.type is None
    assert config.paths.state_file == config.paths.data_dir / "local_state.json"


def test_yaml_values_loaded(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.dump(
            {
                "platform": {"type": "macos", "installable_extensions": {"macos": [".dmg", ".zip"]}},
                "enrichment": {"max_concurrent_release_checks": 5},
                "paths": {"data_dir": str(tmp_path / "data")},
            }
        ),
        encoding="utf-8",
    )

    config = ConfigManager(config_path).load()

    assert config.platform.type is PlatformType.MACOS
    assert config.platform.installable_extensions[PlatformType.MACOS] == [".dmg", ".zip"]
    assert config.enrichment.max_concurrent_release_checks == 5
    assert config.paths.state_file == tmp_path / "data" / "local_state.json"


def test_env_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "ci-token")
    monkeypatch.setenv("GHSTORE_PLATFORM", "Linux")
    monkeypatch.setenv("GHSTORE_MAX_CONCURRENT_RELEASE_CHECKS", "3")
    monkeypatch.setenv("GHSTORE_DATA_DIR", str(tmp_path / "elsewhere"))
    monkeypatch.setenv("GHSTORE_LOG_LEVEL", "debug")

    config = ConfigManager(tmp_path / "config.yaml").load()

    assert config.github.token == "ci-token"
    assert config.platform.type is PlatformType.LINUX
    assert config.enrichment.max_concurrent_release_checks == 3
    assert config.paths.state_file == tmp_path / "elsewhere" / "local_state.json"
    assert config.advanced.log_level == "DEBUG"


def test_prefixed_token_wins(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "ci-token")
    monkeypatch.setenv("GHSTORE_GITHUB_TOKEN", "app-token")

    assert ConfigManager(tmp_path / "config.yaml").load().github.token == "app-token"


def test_unknown_platform_env_rejected(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GHSTORE_PLATFORM", "symbian")

    with pytest.raises(ValidationError) as exc_info:
        ConfigManager(tmp_path / "config.yaml").load()

    assert exc_info.value.message_key == "platform.unsupported"


@pytest.mark.parametrize("limit", ["0", "-4", "many"])
def test_invalid_concurrency_env_rejected(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, limit: str) -> None:
    monkeypatch.setenv("GHSTORE_MAX_CONCURRENT_RELEASE_CHECKS", limit)

    with pytest.raises(ValidationError) as exc_info:
        ConfigManager(tmp_path / "config.yaml").load()

    assert exc_info.value.message_key == "enrichment.invalid_concurrency_limit"


def test_save_round_trips_through_yaml(tmp_path: Path) -> None:
    manager = ConfigManager(tmp_path / "nested" / "config.yaml")
    config = manager.load()
    config.platform.type = PlatformType.WINDOWS
    config.details.readme_branches = ["main"]

    manager.save(config)
    reloaded = manager.reload()

    assert reloaded.platform.type is PlatformType.WINDOWS
    assert reloaded.details.readme_branches == ["main"]
    assert manager.get_config() is reloaded
