from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from .errors import TravisError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a single API call: a decoded value or a classified error."""

    value: T | None = None
    error: TravisError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Result requires exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: TravisError) -> Result[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the carried error."""

        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


__all__ = ["Result"]
