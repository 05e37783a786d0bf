from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .pagination import Pagination

ItemT = TypeVar("ItemT")

_SIDEBAND_KEYS = ("@type", "@href", "@representation", "@pagination")


class Collection(BaseModel, Generic[ItemT]):
    """A decoded list response.

    Accepts either a bare JSON array or the v3 envelope, where the items live
    under the key named by ``@type`` (``{"@type": "builds", "builds": [...]}``).
    """

    type: str | None = Field(default=None, alias="@type")
    path: str | None = Field(default=None, alias="@href")
    pagination: Pagination | None = Field(default=None, alias="@pagination")
    items: list[ItemT]

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _locate_items(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"items": data}
        if not isinstance(data, Mapping) or "items" in data:
            return data
        normalized = {key: data[key] for key in _SIDEBAND_KEYS if key in data}
        key = data.get("@type")
        if isinstance(key, str) and isinstance(data.get(key), list):
            normalized["items"] = data[key]
            return normalized
        for name, value in data.items():
            if not name.startswith("@") and isinstance(value, list):
                normalized["items"] = value
                break
        return normalized

    def __iter__(self) -> Iterator[ItemT]:  # type: ignore[override]
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> ItemT:
        return self.items[index]


class Action(BaseModel, Generic[ItemT]):
    """Response to a state-changing request such as a build restart.

    The API answers with a ``pending`` envelope naming the affected resource
    in ``resource_type``; a bare resource payload is accepted too.
    """

    type: str | None = Field(default=None, alias="@type")
    resource_type: str | None = None
    state_change: str | None = None
    resource: ItemT

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _unwrap_resource(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or "resource" in data:
            return data
        resource_type = data.get("resource_type")
        if isinstance(resource_type, str) and isinstance(data.get(resource_type), Mapping):
            return {
                "@type": data.get("@type"),
                "resource_type": resource_type,
                "state_change": data.get("state_change"),
                "resource": data[resource_type],
            }
        return {"@type": data.get("@type"), "resource": data}


__all__ = ["Action", "Collection"]
