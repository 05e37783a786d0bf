from __future__ import annotations

from .base import TravisModel
from .embed import Embed
from .minimal import MinimalBranch, MinimalBuild, MinimalOwner, MinimalRepository


class Repository(TravisModel):
    """A repository as returned by ``/repo/{id}`` and repository listings."""

    id: int
    name: str
    slug: str
    description: str | None = None
    github_id: int | None = None
    github_language: str | None = None
    active: bool | None = None
    private: bool | None = None
    starred: bool | None = None
    managed_by_installation: bool | None = None
    active_on_org: bool | None = None
    owner: Embed[MinimalOwner] | None = None
    default_branch: Embed[MinimalBranch] | None = None


class Branch(TravisModel):
    name: str
    repository: Embed[MinimalRepository] | None = None
    default_branch: bool | None = None
    exists_on_github: bool | None = None
    last_build: Embed[MinimalBuild] | None = None


__all__ = ["Branch", "Repository"]
