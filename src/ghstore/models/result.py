"""Tagged success/failure value returned by the service entry points."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an operation: a value, or an error message with its cause."""

    value: T | None = None
    error: str | None = None
    cause: BaseException | None = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str, cause: BaseException | None = None) -> "Result[T]":
        return cls(error=error, cause=cause)

    @property
    def is_success(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the failure cause.

        Raises:
            BaseException: The original cause, or RuntimeError carrying the message
        """
        if self.error is not None:
            if self.cause is not None:
                raise self.cause
            raise RuntimeError(self.error)
        return self.value  # type: ignore[return-value]
