from __future__ import annotations

from typing import Any, Optional


class TravisError(Exception):
    """Base error for travis-client."""


class NoData(TravisError):
    """The transport produced no body to decode."""

    def __init__(self, cause: Optional[BaseException] = None) -> None:
        message = "No data returned"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.cause = cause


class DecodingFailed(TravisError):
    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Unable to decode response: {cause}")
        self.cause = cause


class HttpStatusError(TravisError):
    def __init__(self, status_code: int, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.details = details


class NotLinked(TravisError):
    """Raised when following an embedded resource that carries no ``@href``."""

    def __init__(self, resource_type: str) -> None:
        super().__init__(f"Embedded {resource_type!r} resource has no follow link")
        self.resource_type = resource_type


class RequestCancelled(TravisError):
    def __init__(self) -> None:
        super().__init__("Request was cancelled")


class RequestFailed(TravisError):
    """A submitted operation raised instead of returning a result."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Request failed: {cause}")
        self.cause = cause
