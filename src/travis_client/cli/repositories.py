"""Repository commands."""

from __future__ import annotations

import typer

from ..models.collection import Collection
from ..models.repository import Repository
from .common import console, handle_cli_errors, print_model, run_call


def register(app: typer.Typer) -> None:
    app.command("repos")(list_repositories)
    app.command("repo")(show_repository)
    app.command("activate")(activate)
    app.command("deactivate")(deactivate)
    app.command("star")(star)
    app.command("unstar")(unstar)
    app.command("settings")(settings)


def _print_repositories(repositories: Collection[Repository]) -> None:
    if not len(repositories):
        console.print("No repositories found.")
        return
    for repo in repositories:
        state = "active" if repo.active else "inactive"
        console.print(f"[bold]{repo.slug}[/bold] id={repo.id} {state}")


@handle_cli_errors
def list_repositories(
    ctx: typer.Context,
    owner: str | None = typer.Option(
        None, help="List repositories for this owner instead of the current user."
    ),
    limit: int | None = typer.Option(None, help="Page size."),
    offset: int | None = typer.Option(None, help="Page offset."),
) -> None:
    """List repositories."""

    if owner:
        repositories = run_call(
            ctx, lambda c: c.repositories_for_user(owner, limit=limit, offset=offset)
        )
    else:
        repositories = run_call(ctx, lambda c: c.user_repositories(limit=limit, offset=offset))
    _print_repositories(repositories)


@handle_cli_errors
def show_repository(
    ctx: typer.Context,
    repo: str = typer.Argument(..., help="Repository id or slug (owner/name)"),
) -> None:
    """Show a single repository."""

    print_model(run_call(ctx, lambda c: c.repository(repo)))


@handle_cli_errors
def activate(
    ctx: typer.Context,
    repo: str = typer.Argument(..., help="Repository id or slug (owner/name)"),
) -> None:
    """Enable builds for a repository."""

    result = run_call(ctx, lambda c: c.activate_repository(repo))
    console.print(f"[green]Activated[/green] {result.slug}")


@handle_cli_errors
def deactivate(
    ctx: typer.Context,
    repo: str = typer.Argument(..., help="Repository id or slug (owner/name)"),
) -> None:
    """Disable builds for a repository."""

    result = run_call(ctx, lambda c: c.deactivate_repository(repo))
    console.print(f"[green]Deactivated[/green] {result.slug}")


@handle_cli_errors
def star(
    ctx: typer.Context,
    repo: str = typer.Argument(..., help="Repository id or slug (owner/name)"),
) -> None:
    """Star a repository."""

    result = run_call(ctx, lambda c: c.star_repository(repo))
    console.print(f"[green]Starred[/green] {result.slug}")


@handle_cli_errors
def unstar(
    ctx: typer.Context,
    repo: str = typer.Argument(..., help="Repository id or slug (owner/name)"),
) -> None:
    """Remove the star from a repository."""

    result = run_call(ctx, lambda c: c.unstar_repository(repo))
    console.print(f"[green]Unstarred[/green] {result.slug}")


@handle_cli_errors
def settings(
    ctx: typer.Context,
    repo: str = typer.Argument(..., help="Repository id or slug (owner/name)"),
) -> None:
    """List repository settings."""

    for setting in run_call(ctx, lambda c: c.settings_for_repository(repo)):
        console.print(f"[bold]{setting.name}[/bold]={setting.value}")


__all__ = ["register"]
