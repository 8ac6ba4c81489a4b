"""Tests for structured logging."""

import json

import pytest

from ghstore import config as config_module
from ghstore import logger as logger_module
from ghstore.logger import get_logger, set_log_level


@pytest.fixture(autouse=True)
def _restore_level():
    previous = logger_module._min_level
    yield
    logger_module._min_level = previous


def test_events_below_level_are_dropped(capsys: pytest.CaptureFixture[str]) -> None:
    set_log_level("INFO")
    log = get_logger("ghstore.tests")

    log.debug("Hidden event")
    log.info("Repositories fetched", owner="octo", total=3)

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["event"] == "Repositories fetched"
    assert record["level"] == "info"
    assert record["owner"] == "octo"
    assert "timestamp" in record


def test_debug_level_lets_debug_through(capsys: pytest.CaptureFixture[str]) -> None:
    set_log_level("debug")

    get_logger("ghstore.tests").debug("Release lookup failed", repository="octo/app")

    assert json.loads(capsys.readouterr().out)["event"] == "Release lookup failed"


def test_level_read_from_config_on_first_event(
    capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(logger_module, "_min_level", None)
    monkeypatch.setenv("GHSTORE_PLATFORM", "symbian")
    monkeypatch.setattr(config_module._config_manager, "_config", None)

    get_logger("ghstore.tests").info("Still logged")

    assert json.loads(capsys.readouterr().out)["event"] == "Still logged"
