from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .hosts import TravisHost

logger = logging.getLogger(__name__)

TOKEN_ENV = "TRAVIS_TOKEN"
HOST_ENV = "TRAVIS_HOST"
DEBUG_ENV = "TRAVIS_DEBUG"


class ConfigError(ValueError):
    """Raised when settings cannot be resolved from the environment."""


@dataclass(frozen=True)
class ClientSettings:
    """Settings used by the command line front end to build a client."""

    token: str
    host: TravisHost = TravisHost.ORG

    def __repr__(self) -> str:
        return f"ClientSettings(token='***', host={self.host.value!r})"

    @classmethod
    def from_env(
        cls, *, token: str | None = None, host: TravisHost | str | None = None
    ) -> ClientSettings:
        """Resolve settings, preferring explicit values over ``TRAVIS_*`` variables."""

        resolved_token = (token or os.getenv(TOKEN_ENV) or "").strip()
        if not resolved_token:
            raise ConfigError(f"No API token provided; pass --token or export {TOKEN_ENV}.")
        raw_host = host or os.getenv(HOST_ENV) or TravisHost.ORG
        try:
            resolved_host = (
                raw_host if isinstance(raw_host, TravisHost) else TravisHost(raw_host.lower())
            )
        except ValueError:
            choices = ", ".join(member.value for member in TravisHost)
            raise ConfigError(f"Unknown host {raw_host!r}; expected one of: {choices}.") from None
        logger.debug("Resolved client settings for host %s", resolved_host.value)
        return cls(token=resolved_token, host=resolved_host)


def debug_enabled() -> bool:
    return bool(os.getenv(DEBUG_ENV))


__all__ = ["ClientSettings", "ConfigError", "debug_enabled"]
