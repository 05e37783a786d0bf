from __future__ import annotations

import logging
from collections.abc import Awaitable
from types import TracebackType
from typing import Any, TypeVar, overload
from urllib.parse import quote

import httpx

from .errors import NotLinked
from .handles import Completion, RequestHandle
from .hosts import TravisHost
from .http_client import DEFAULT_USER_AGENT, HttpClient, HttpMethod
from .models.base import MinimalResource, TravisModel
from .models.build import Build
from .models.collection import Action, Collection
from .models.embed import Embed, Linked
from .models.job import Job
from .models.minimal import MinimalBranch, MinimalBuild, MinimalJob, MinimalRepository
from .models.repository import Branch, Repository
from .models.setting import Setting
from .result import Result

logger = logging.getLogger(__name__)

T = TypeVar("T")


def escape(identifier: str | int) -> str:
    """Percent-encode an identifier for use as a single path segment."""

    return quote(str(identifier), safe="")


def _page(limit: int | None, offset: int | None) -> dict[str, Any]:
    return {"limit": limit, "offset": offset}


class TravisClient:
    """Client for the Travis CI v3 API.

    Every operation is a coroutine resolving to a :class:`Result`; failures are
    returned, not raised. Use :meth:`submit` to schedule an operation with a
    cancellable handle and an optional completion callback.
    """

    def __init__(
        self,
        token: str,
        host: TravisHost = TravisHost.ORG,
        *,
        session: httpx.AsyncClient | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 60.0,
    ) -> None:
        self.http = HttpClient(
            token, host, session=session, user_agent=user_agent, timeout=timeout
        )

    def __repr__(self) -> str:
        return f"TravisClient(host={self.http.host.value!r})"

    async def aclose(self) -> None:
        """Close the underlying HTTP session."""

        await self.http.aclose()

    async def __aenter__(self) -> TravisClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def submit(
        self, operation: Awaitable[Result[T]], completion: Completion[T] | None = None
    ) -> RequestHandle[T]:
        """Schedule ``operation`` on the running loop and return a cancellable handle."""

        return RequestHandle(operation, completion)

    async def _call(
        self,
        path: str,
        model: Any,
        *,
        method: HttpMethod = "GET",
        query: dict[str, Any] | None = None,
    ) -> Result[Any]:
        request = self.http.build_request(path, query, method)
        return await self.http.execute(request, model)

    # ---- Repositories --------------------------------------------------------

    async def repositories_for_user(
        self, user: str, *, limit: int | None = None, offset: int | None = None
    ) -> Result[Collection[Repository]]:
        return await self._call(
            f"/owner/{escape(user)}/repos", Collection[Repository], query=_page(limit, offset)
        )

    async def user_repositories(
        self, *, limit: int | None = None, offset: int | None = None
    ) -> Result[Collection[Repository]]:
        return await self._call("/repos", Collection[Repository], query=_page(limit, offset))

    async def repository(self, id_or_slug: str | int) -> Result[Repository]:
        return await self._call(f"/repo/{escape(id_or_slug)}", Repository, method="POST")

    async def activate_repository(self, id_or_slug: str | int) -> Result[Repository]:
        return await self._call(f"/repo/{escape(id_or_slug)}/activate", Repository, method="POST")

    async def deactivate_repository(self, id_or_slug: str | int) -> Result[Repository]:
        return await self._call(
            f"/repo/{escape(id_or_slug)}/deactivate", Repository, method="POST"
        )

    async def star_repository(self, id_or_slug: str | int) -> Result[Repository]:
        return await self._call(f"/repo/{escape(id_or_slug)}/star", Repository, method="POST")

    async def unstar_repository(self, id_or_slug: str | int) -> Result[Repository]:
        return await self._call(f"/repo/{escape(id_or_slug)}/unstar", Repository, method="POST")

    async def settings_for_repository(
        self, id_or_slug: str | int, *, limit: int | None = None, offset: int | None = None
    ) -> Result[Collection[Setting]]:
        return await self._call(
            f"/repo/{escape(id_or_slug)}/settings", Collection[Setting], query=_page(limit, offset)
        )

    async def branch(self, id_or_slug: str | int, name: str) -> Result[Branch]:
        return await self._call(f"/repo/{escape(id_or_slug)}/branch/{escape(name)}", Branch)

    # ---- Builds --------------------------------------------------------------

    async def active_builds(
        self, *, limit: int | None = None, offset: int | None = None
    ) -> Result[Collection[Build]]:
        return await self._call("/active", Collection[Build], query=_page(limit, offset))

    async def user_builds(
        self, *, limit: int | None = None, offset: int | None = None
    ) -> Result[Collection[Build]]:
        return await self._call("/builds", Collection[Build], query=_page(limit, offset))

    async def builds_for_repository(
        self, id_or_slug: str | int, *, limit: int | None = None, offset: int | None = None
    ) -> Result[Collection[Build]]:
        return await self._call(
            f"/repo/{escape(id_or_slug)}/builds", Collection[Build], query=_page(limit, offset)
        )

    async def build(self, identifier: str | int) -> Result[Build]:
        return await self._call(f"/build/{escape(identifier)}", Build)

    async def restart_build(self, identifier: str | int) -> Result[Action[MinimalBuild]]:
        return await self._call(
            f"/build/{escape(identifier)}/restart", Action[MinimalBuild], method="POST"
        )

    async def cancel_build(self, identifier: str | int) -> Result[Action[MinimalBuild]]:
        return await self._call(
            f"/build/{escape(identifier)}/cancel", Action[MinimalBuild], method="POST"
        )

    # ---- Jobs ----------------------------------------------------------------

    async def jobs_for_build(
        self, identifier: str | int, *, limit: int | None = None, offset: int | None = None
    ) -> Result[Collection[Job]]:
        return await self._call(
            f"/build/{escape(identifier)}/jobs", Collection[Job], query=_page(limit, offset)
        )

    async def job(self, identifier: str | int) -> Result[Job]:
        return await self._call(f"/job/{escape(identifier)}", Job)

    async def restart_job(self, identifier: str | int) -> Result[Action[MinimalJob]]:
        return await self._call(
            f"/job/{escape(identifier)}/restart", Action[MinimalJob], method="POST"
        )

    async def cancel_job(self, identifier: str | int) -> Result[Action[MinimalJob]]:
        return await self._call(
            f"/job/{escape(identifier)}/cancel", Action[MinimalJob], method="POST"
        )

    # ---- Links ---------------------------------------------------------------

    @overload
    async def follow(self, embed: Embed[MinimalRepository]) -> Result[Repository]: ...

    @overload
    async def follow(self, embed: Embed[MinimalBuild]) -> Result[Build]: ...

    @overload
    async def follow(self, embed: Embed[MinimalJob]) -> Result[Job]: ...

    @overload
    async def follow(self, embed: Embed[MinimalBranch]) -> Result[Branch]: ...

    async def follow(self, embed: Embed[Any]) -> Result[Any]:
        """Fetch the full representation of an embedded resource.

        Embeds without an ``@href`` resolve to a ``NotLinked`` failure without
        touching the network.
        """

        if not isinstance(embed.object, MinimalResource):
            raise TypeError(
                f"{type(embed.object).__name__} has no full representation to follow"
            )
        link = embed.link
        if not isinstance(link, Linked):
            logger.debug("Embedded %s has no follow link", embed.type)
            return Result.failure(NotLinked(link.resource_type))
        full_model: type[TravisModel] = type(embed.object).full_model()
        return await self._call(link.path, full_model)


__all__ = ["TravisClient", "escape"]
