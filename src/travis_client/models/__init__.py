"""Re-export typed models for the travis-client SDK."""

from __future__ import annotations

from .base import MinimalResource, TravisModel
from .build import Build
from .collection import Action, Collection
from .embed import Embed, Link, Linked, Unlinked
from .job import Job
from .minimal import (
    MinimalBranch,
    MinimalBuild,
    MinimalCommit,
    MinimalJob,
    MinimalOwner,
    MinimalRepository,
    MinimalStage,
)
from .pagination import PageLink, Pagination
from .repository import Branch, Repository
from .setting import Setting

__all__ = [
    "Action",
    "Branch",
    "Build",
    "Collection",
    "Embed",
    "Job",
    "Link",
    "Linked",
    "MinimalBranch",
    "MinimalBuild",
    "MinimalCommit",
    "MinimalJob",
    "MinimalOwner",
    "MinimalRepository",
    "MinimalResource",
    "MinimalStage",
    "PageLink",
    "Pagination",
    "Repository",
    "Setting",
    "TravisModel",
    "Unlinked",
]
