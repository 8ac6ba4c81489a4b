"""Centralized exception hierarchy for ghstore.

Errors carry a message key plus parameters; ``str(error)`` renders the English message.
"""

_MESSAGES: dict[str, str] = {
    "platform.unsupported": "Unsupported platform '{platform}'",
    "platform.invalid_extension": "Installable extension '{extension}' for {platform} must start with '.'",
    "enrichment.invalid_concurrency_limit": "Concurrency limit must be at least 1, got {limit}",
    "github.invalid_page_size": "Page size must be at least 1, got {page_size}",
    "github.transport_failed": "Request to {path} failed: {error}",
    "github.bad_status": "GitHub returned {status} {reason} for {path}",
    "github.invalid_payload": "Unexpected response payload from {path}: {error}",
    "local_state.corrupt": "Local state file {path} is unreadable: {error}",
    "local_state.write_failed": "Failed to write local state file {path}: {error}",
    "repository.readme_not_found": "No README.md found for {repository}",
}


class AppBaseError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(
        self,
        message_key: str,
        status_code: int = 500,
        retriable: bool = False,
        **params: object,
    ) -> None:
        """
        Initialize the error.

        Args:
            message_key: Dot-path message key (e.g., 'github.bad_status')
            status_code: Recommended HTTP status code
            retriable: Whether the operation can be retried
            **params: Parameters for string formatting of the message
        """
        super().__init__(message_key)
        self.message_key = message_key
        self.status_code = status_code
        self.retriable = retriable
        self.params = params

    def __str__(self) -> str:
        """Returns the English version of the error message."""
        template = _MESSAGES.get(self.message_key)
        if template is not None:
            try:
                return template.format(**self.params)
            except (KeyError, IndexError):
                pass
        params_str = ", ".join(f"{k}={v}" for k, v in self.params.items())
        return f"[{self.message_key}] {params_str} (retriable: {self.retriable})"


class ResourceNotFoundError(AppBaseError):
    """Raised when a requested resource (repository, release, etc.) is not found."""

    def __init__(self, message_key: str, **params: object) -> None:
        super().__init__(message_key, status_code=404, **params)


class ValidationError(AppBaseError):
    """Raised when input or configuration validation fails."""

    def __init__(self, message_key: str, **params: object) -> None:
        super().__init__(message_key, status_code=400, **params)


class OperationalError(AppBaseError):
    """Raised when an operational failure occurs (network request, local state file, etc.)."""

    def __init__(self, message_key: str, retriable: bool = False, **params: object) -> None:
        super().__init__(message_key, status_code=500, retriable=retriable, **params)


class HostResponseError(OperationalError):
    """Raised when the repository host answers with a non-success status."""

    def __init__(self, path: str, status: int, reason: str = "") -> None:
        super().__init__(
            "github.bad_status",
            retriable=status == 429 or status >= 500,
            path=path,
            status=status,
            reason=reason,
        )
        self.host_status = status
