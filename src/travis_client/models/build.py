from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import TravisModel
from .embed import Embed
from .minimal import (
    MinimalBranch,
    MinimalCommit,
    MinimalJob,
    MinimalOwner,
    MinimalRepository,
    MinimalStage,
)


class Build(TravisModel):
    """A build with its embedded repository, branch, commit and jobs."""

    id: int
    number: str
    state: str
    duration: int | None = None
    event_type: str | None = None
    previous_state: str | None = None
    pull_request_title: str | None = None
    pull_request_number: int | None = None
    started_at: datetime | None = None
    finished_at: datetime | None = None
    updated_at: datetime | None = None
    private: bool | None = None
    tag: str | None = None
    repository: Embed[MinimalRepository] | None = None
    branch: Embed[MinimalBranch] | None = None
    commit: Embed[MinimalCommit] | None = None
    jobs: list[Embed[MinimalJob]] = Field(default_factory=list)
    stages: list[Embed[MinimalStage]] = Field(default_factory=list)
    created_by: Embed[MinimalOwner] | None = None


__all__ = ["Build"]
