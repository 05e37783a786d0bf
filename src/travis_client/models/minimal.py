"""Minimal representations returned when a resource is embedded in another."""

from __future__ import annotations

from datetime import datetime

from .base import MinimalResource, TravisModel


class MinimalRepository(MinimalResource):
    id: int
    name: str | None = None
    slug: str | None = None

    @classmethod
    def full_model(cls) -> type[TravisModel]:
        from .repository import Repository

        return Repository


class MinimalBranch(MinimalResource):
    name: str

    @classmethod
    def full_model(cls) -> type[TravisModel]:
        from .repository import Branch

        return Branch


class MinimalBuild(MinimalResource):
    id: int
    number: str | None = None
    state: str | None = None
    duration: int | None = None
    event_type: str | None = None
    previous_state: str | None = None
    pull_request_title: str | None = None
    pull_request_number: int | None = None
    started_at: datetime | None = None
    finished_at: datetime | None = None
    private: bool | None = None

    @classmethod
    def full_model(cls) -> type[TravisModel]:
        from .build import Build

        return Build


class MinimalJob(MinimalResource):
    id: int

    @classmethod
    def full_model(cls) -> type[TravisModel]:
        from .job import Job

        return Job


class MinimalCommit(TravisModel):
    id: int
    sha: str | None = None
    ref: str | None = None
    message: str | None = None
    compare_url: str | None = None
    committed_at: datetime | None = None


class MinimalOwner(TravisModel):
    id: int
    login: str | None = None


class MinimalStage(TravisModel):
    id: int
    number: int | None = None
    name: str | None = None
    state: str | None = None
    started_at: datetime | None = None
    finished_at: datetime | None = None


__all__ = [
    "MinimalBranch",
    "MinimalBuild",
    "MinimalCommit",
    "MinimalJob",
    "MinimalOwner",
    "MinimalRepository",
    "MinimalStage",
]
