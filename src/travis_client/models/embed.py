"""Wrapper for minimal representations embedded in API responses.

The v3 API embeds related resources inline::

    {"@type": "repository", "@href": "/repo/1", "id": 1, "name": "app", "slug": "a/app"}

``@type`` and ``@href`` are sideband fields. The remaining keys belong to the
embedded object itself, so :class:`Embed` decodes both from the same payload.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class Linked:
    path: str


@dataclass(frozen=True)
class Unlinked:
    resource_type: str


Link = Union[Linked, Unlinked]


class Embed(BaseModel, Generic[ModelT]):
    type: str = Field(alias="@type")
    path: str | None = Field(default=None, alias="@href")
    object: ModelT

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _share_payload(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and "object" not in data:
            return {"@type": data.get("@type"), "@href": data.get("@href"), "object": data}
        return data

    @model_serializer(mode="wrap")
    def _flatten(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        inner = data.pop("object", None) or {}
        return {**inner, **data}

    @property
    def link(self) -> Link:
        """Whether this embed can be expanded into its full representation."""

        if self.path:
            return Linked(self.path)
        return Unlinked(self.type)


__all__ = ["Embed", "Link", "Linked", "Unlinked"]
