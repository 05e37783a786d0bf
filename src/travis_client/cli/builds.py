"""Build and job commands."""

from __future__ import annotations

import typer

from ..models.build import Build
from ..models.collection import Collection
from .common import console, handle_cli_errors, print_model, run_call


def register(app: typer.Typer) -> None:
    app.command("builds")(list_builds)
    app.command("active")(active)
    app.command("build")(show_build)
    app.command("restart")(restart)
    app.command("cancel")(cancel)
    app.command("jobs")(list_jobs)
    app.command("job")(show_job)


def _print_builds(builds: Collection[Build]) -> None:
    if not len(builds):
        console.print("No builds found.")
        return
    for build in builds:
        repo = build.repository.object.slug if build.repository else None
        suffix = f" repo={repo}" if repo else ""
        console.print(f"[bold]#{build.number}[/bold] id={build.id} state={build.state}{suffix}")
    if builds.pagination is not None:
        page = builds.pagination
        console.print(f"offset={page.offset} limit={page.limit} count={page.count}")


@handle_cli_errors
def list_builds(
    ctx: typer.Context,
    repo: str | None = typer.Option(None, help="Repository id or slug (owner/name)"),
    limit: int | None = typer.Option(None, help="Page size."),
    offset: int | None = typer.Option(None, help="Page offset."),
) -> None:
    """List builds for the current user or a repository."""

    if repo:
        builds = run_call(
            ctx, lambda c: c.builds_for_repository(repo, limit=limit, offset=offset)
        )
    else:
        builds = run_call(ctx, lambda c: c.user_builds(limit=limit, offset=offset))
    _print_builds(builds)


@handle_cli_errors
def active(ctx: typer.Context) -> None:
    """List builds that are currently running or queued."""

    _print_builds(run_call(ctx, lambda c: c.active_builds()))


@handle_cli_errors
def show_build(
    ctx: typer.Context,
    build_id: str = typer.Argument(..., help="Build identifier"),
) -> None:
    """Show a single build."""

    print_model(run_call(ctx, lambda c: c.build(build_id)))


@handle_cli_errors
def restart(
    ctx: typer.Context,
    build_id: str = typer.Argument(..., help="Build identifier"),
    job: bool = typer.Option(False, "--job", help="Treat the identifier as a job id."),
) -> None:
    """Restart a build (or a single job with --job)."""

    if job:
        action = run_call(ctx, lambda c: c.restart_job(build_id))
    else:
        action = run_call(ctx, lambda c: c.restart_build(build_id))
    console.print(
        f"[green]Restart requested[/green] for {action.resource_type or 'build'} {action.resource.id}"
    )


@handle_cli_errors
def cancel(
    ctx: typer.Context,
    build_id: str = typer.Argument(..., help="Build identifier"),
    job: bool = typer.Option(False, "--job", help="Treat the identifier as a job id."),
) -> None:
    """Cancel a build (or a single job with --job)."""

    if job:
        action = run_call(ctx, lambda c: c.cancel_job(build_id))
    else:
        action = run_call(ctx, lambda c: c.cancel_build(build_id))
    console.print(
        f"[green]Cancel requested[/green] for {action.resource_type or 'build'} {action.resource.id}"
    )


@handle_cli_errors
def list_jobs(
    ctx: typer.Context,
    build_id: str = typer.Argument(..., help="Build identifier"),
) -> None:
    """List the jobs of a build."""

    jobs = run_call(ctx, lambda c: c.jobs_for_build(build_id))
    if not len(jobs):
        console.print("No jobs found.")
        return
    for job in jobs:
        console.print(f"[bold]{job.number or job.id}[/bold] id={job.id} state={job.state}")


@handle_cli_errors
def show_job(
    ctx: typer.Context,
    job_id: str = typer.Argument(..., help="Job identifier"),
) -> None:
    """Show a single job."""

    print_model(run_call(ctx, lambda c: c.job(job_id)))


__all__ = ["register"]
