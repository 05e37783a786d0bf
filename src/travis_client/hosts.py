from __future__ import annotations

from enum import Enum


class TravisHost(str, Enum):
    """Deployments of the Travis CI API."""

    ORG = "org"
    COM = "com"

    @property
    def host(self) -> str:
        return _HOSTS[self]


_HOSTS: dict[TravisHost, str] = {
    TravisHost.ORG: "api.travis-ci.org",
    TravisHost.COM: "api.travis-ci.com",
}


def resolve_host(selector: TravisHost | str) -> str:
    """Return the network host for ``selector`` (a :class:`TravisHost` or its value)."""

    return TravisHost(selector).host


__all__ = ["TravisHost", "resolve_host"]
