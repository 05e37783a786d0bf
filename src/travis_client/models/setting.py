from __future__ import annotations

from .base import TravisModel


class Setting(TravisModel):
    """A single repository setting; values are booleans or integers."""

    name: str
    value: bool | int


__all__ = ["Setting"]
