from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TravisModel(BaseModel):
    """Base for decoded API resources.

    Sideband keys such as ``@type``, ``@href`` or ``@permissions`` are dropped
    unless a model declares them explicitly.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class MinimalResource(TravisModel):
    """Partial representation of a resource that has a full counterpart.

    Subclasses name their full representation through :meth:`full_model`,
    which is what lets :meth:`TravisClient.follow` fetch it.
    """

    @classmethod
    def full_model(cls) -> type[TravisModel]:
        raise NotImplementedError(f"{cls.__name__} does not declare a full representation")


__all__ = ["MinimalResource", "TravisModel"]
