"""Typed asynchronous client for the Travis CI v3 API."""

from __future__ import annotations

__version__ = "0.1.0"

from .client import TravisClient, escape
from .errors import (
    DecodingFailed,
    HttpStatusError,
    NoData,
    NotLinked,
    RequestCancelled,
    RequestFailed,
    TravisError,
)
from .handles import RequestHandle
from .hosts import TravisHost, resolve_host
from .http_client import HttpClient, RequestDescriptor
from .result import Result

__all__ = [
    "DecodingFailed",
    "HttpClient",
    "HttpStatusError",
    "NoData",
    "NotLinked",
    "RequestCancelled",
    "RequestFailed",
    "RequestDescriptor",
    "RequestHandle",
    "Result",
    "TravisClient",
    "TravisError",
    "TravisHost",
    "__version__",
    "escape",
    "resolve_host",
]
