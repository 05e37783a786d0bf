from __future__ import annotations

from datetime import datetime

from .base import TravisModel
from .embed import Embed
from .minimal import MinimalBuild, MinimalCommit, MinimalOwner, MinimalRepository, MinimalStage


class Job(TravisModel):
    id: int
    number: str | None = None
    state: str | None = None
    allow_failure: bool | None = None
    queue: str | None = None
    private: bool | None = None
    started_at: datetime | None = None
    finished_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    build: Embed[MinimalBuild] | None = None
    repository: Embed[MinimalRepository] | None = None
    commit: Embed[MinimalCommit] | None = None
    owner: Embed[MinimalOwner] | None = None
    stage: Embed[MinimalStage] | None = None


__all__ = ["Job"]
