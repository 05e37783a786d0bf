from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from types import TracebackType
from typing import Any, Literal, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from . import __version__
from .errors import DecodingFailed, HttpStatusError, NoData
from .hosts import TravisHost
from .result import Result

logger = logging.getLogger(__name__)

API_VERSION = "3"
DEFAULT_USER_AGENT = f"travis-client/{__version__}"

HttpMethod = Literal["GET", "POST"]
T = TypeVar("T")


def make_headers(token: str, *, user_agent: str = DEFAULT_USER_AGENT) -> dict[str, str]:
    """Headers shared by every request issued with ``token``."""

    return {
        "Travis-API-Version": API_VERSION,
        "Authorization": f"token {token}",
        "User-Agent": user_agent,
    }


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything needed to issue one API request, minus the credentials."""

    host: str
    path: str
    method: HttpMethod = "GET"
    query: dict[str, str] = field(default_factory=dict)
    scheme: str = "https"

    @property
    def url(self) -> httpx.URL:
        url = httpx.URL(f"{self.scheme}://{self.host}{self.path}")
        if self.query:
            url = url.copy_merge_params(self.query)
        return url


@lru_cache(maxsize=None)
def _adapter(model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model)


class HttpClient:
    """httpx.AsyncClient wrapper that builds Travis requests and decodes typed results."""

    def __init__(
        self,
        token: str,
        host: TravisHost = TravisHost.ORG,
        *,
        session: httpx.AsyncClient | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 60.0,
    ) -> None:
        self.host = TravisHost(host)
        self._headers = make_headers(token, user_agent=user_agent)
        self._owns_session = session is None
        self._session = session or httpx.AsyncClient(timeout=timeout)

    def __repr__(self) -> str:
        return f"HttpClient(host={self.host.host!r})"

    def build_request(
        self,
        path: str,
        query: dict[str, Any] | None = None,
        method: HttpMethod = "GET",
    ) -> RequestDescriptor:
        """Describe a request for an already-escaped ``path`` on the configured host."""

        params = {key: str(value) for key, value in (query or {}).items() if value is not None}
        return RequestDescriptor(host=self.host.host, path=path, method=method, query=params)

    async def execute(self, request: RequestDescriptor, model: type[T] | Any) -> Result[T]:
        """Send ``request`` once and decode the body into ``model``."""

        url = request.url
        logger.debug("%s %s", request.method, url)
        try:
            resp = await self._session.request(request.method, url, headers=self._headers)
        except httpx.HTTPError as exc:
            logger.warning("Request %s %s failed: %s", request.method, url, exc)
            return Result.failure(NoData(exc))

        if resp.status_code >= 400:
            try:
                detail = resp.json()
            except ValueError:
                detail = resp.text
            logger.warning("Request %s %s returned HTTP %s", request.method, url, resp.status_code)
            return Result.failure(
                HttpStatusError(resp.status_code, resp.reason_phrase, details=detail)
            )

        if not resp.content:
            return Result.failure(NoData())

        try:
            value = _adapter(model).validate_json(resp.content)
        except ValidationError as exc:
            logger.warning(
                "Failed to decode %s response from %s", getattr(model, "__name__", model), url,
                exc_info=True,
            )
            return Result.failure(DecodingFailed(exc))
        return Result.success(value)

    async def aclose(self) -> None:
        """Close the underlying :class:`httpx.AsyncClient` if this client created it."""

        if self._owns_session:
            await self._session.aclose()

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
