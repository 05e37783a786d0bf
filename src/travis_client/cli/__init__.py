from __future__ import annotations

import typer

from ..hosts import TravisHost
from . import builds, repositories

app = typer.Typer(help="Travis CI API client")


@app.callback()
def root(
    ctx: typer.Context,
    token: str | None = typer.Option(
        None, "--token", help="API token (defaults to the TRAVIS_TOKEN environment variable)"
    ),
    host: TravisHost | None = typer.Option(
        None, "--host", help="API deployment (defaults to TRAVIS_HOST or 'org')"
    ),
) -> None:
    """Initialize shared Typer context state."""

    ctx.ensure_object(dict)
    ctx.obj["token"] = token
    ctx.obj["host"] = host


repositories.register(app)
builds.register(app)


def main() -> None:
    app()


__all__ = ["app", "builds", "main", "repositories"]
