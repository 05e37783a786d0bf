from __future__ import annotations

from pydantic import Field

from .base import TravisModel


class PageLink(TravisModel):
    """Link to another page of a collection."""

    path: str = Field(alias="@href")
    offset: int
    limit: int


class Pagination(TravisModel):
    """Metadata describing one page of a list response.

    The page links are informational only; nothing fetches them automatically.
    """

    limit: int
    offset: int
    count: int
    is_first: bool
    is_last: bool
    next: PageLink | None = None
    prev: PageLink | None = None
    first: PageLink | None = None
    last: PageLink | None = None


__all__ = ["PageLink", "Pagination"]
