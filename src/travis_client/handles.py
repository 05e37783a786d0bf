from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Generator
from typing import Any, Generic, TypeVar

from .errors import RequestCancelled, RequestFailed, TravisError
from .result import Result

logger = logging.getLogger(__name__)

T = TypeVar("T")

Completion = Callable[[Result[T]], None]


class RequestHandle(Generic[T]):
    """Cancellable handle for an API call scheduled on the running event loop.

    Awaiting the handle yields the call's :class:`Result`. A cancelled call
    resolves to a ``RequestCancelled`` failure instead of raising. The
    completion callback fires once on the event loop in every case; an
    operation that raised is delivered as a failure (``RequestFailed`` unless
    it raised a ``TravisError``), while awaiting the handle re-raises it.
    """

    def __init__(
        self,
        operation: Awaitable[Result[T]],
        completion: Completion[T] | None = None,
    ) -> None:
        self._task: asyncio.Task[Result[T]] = asyncio.ensure_future(operation)
        if completion is not None:
            self._task.add_done_callback(lambda task: completion(self._outcome(task)))

    @staticmethod
    def _outcome(task: asyncio.Task[Result[T]]) -> Result[T]:
        if task.cancelled():
            return Result.failure(RequestCancelled())
        exc = task.exception()
        if exc is None:
            return task.result()
        logger.error("Submitted request raised", exc_info=exc)
        if isinstance(exc, TravisError):
            return Result.failure(exc)
        return Result.failure(RequestFailed(exc))

    def cancel(self) -> bool:
        return self._task.cancel()

    def cancelled(self) -> bool:
        return self._task.cancelled()

    def done(self) -> bool:
        return self._task.done()

    def result(self) -> Result[T]:
        """Return the outcome of a finished call."""

        if self._task.cancelled():
            return Result.failure(RequestCancelled())
        return self._task.result()

    async def _wait(self) -> Result[T]:
        try:
            await asyncio.shield(self._task)
        except asyncio.CancelledError:
            if not self._task.cancelled():
                raise
            logger.debug("Request handle %r was cancelled", self)
        return self.result()

    def __await__(self) -> Generator[Any, None, Result[T]]:
        return self._wait().__await__()


__all__ = ["Completion", "RequestHandle"]
