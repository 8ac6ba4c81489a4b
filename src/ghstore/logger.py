"""Structured JSON logging.

structlog is configured once, when this module is imported. The minimum level
is read from ``advanced.log_level`` on the first emitted event, so importing a
module never loads configuration.
"""

from typing import Any

import structlog

from ghstore.exceptions import AppBaseError

_CONFIG_LEVELS = {
    "TRACE": 5,
    "DEBUG": 10,
    "INFO": 20,
}

_METHOD_LEVELS = {
    "debug": 10,
    "info": 20,
    "warning": 30,
    "warn": 30,
    "error": 40,
    "exception": 40,
    "critical": 50,
    "fatal": 50,
}

_min_level: int | None = None


def set_log_level(level: str) -> None:
    """Set the minimum level; unknown names fall back to INFO."""
    global _min_level
    _min_level = _CONFIG_LEVELS.get(level.upper(), 20)


def _resolve_min_level() -> int:
    if _min_level is None:
        from ghstore.config import get_config

        try:
            set_log_level(get_config().advanced.log_level)
        except AppBaseError:
            # Invalid configuration is reported where it is used, not from a log call
            set_log_level("INFO")
    return _min_level if _min_level is not None else 20


def _drop_below_level(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    if _METHOD_LEVELS.get(method_name, 20) < _resolve_min_level():
        raise structlog.DropEvent
    return event_dict


structlog.configure(
    processors=[
        _drop_below_level,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ],
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    # Each call binds to the current sys.stdout
    cache_logger_on_first_use=False,
)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name

    Returns:
        Configured logger instance
    """
    return structlog.get_logger(name)
