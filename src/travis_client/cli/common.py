from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar, cast

import typer
from pydantic import BaseModel
from rich.console import Console

from ..client import TravisClient
from ..config import ClientSettings, ConfigError, debug_enabled
from ..errors import HttpStatusError, TravisError
from ..result import Result

console = Console()

T = TypeVar("T")


def _render_http_error(exc: HttpStatusError) -> None:
    console.print(f"[red]Error:[/red] {exc}")
    details = getattr(exc, "details", None)
    if details:
        snippet = details
        if isinstance(details, dict):
            snippet = json.dumps(details, indent=2)
        console.print(str(snippet))


CommandParams = ParamSpec("CommandParams")
CommandReturn = TypeVar("CommandReturn")


def handle_cli_errors(
    func: Callable[CommandParams, CommandReturn],
) -> Callable[CommandParams, CommandReturn]:
    @wraps(func)
    def wrapper(*args: CommandParams.args, **kwargs: CommandParams.kwargs) -> CommandReturn:
        try:
            return func(*args, **kwargs)
        except typer.BadParameter:
            raise
        except typer.Exit:
            raise
        except ConfigError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1) from None
        except HttpStatusError as exc:
            _render_http_error(exc)
            raise typer.Exit(1) from None
        except TravisError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1) from None
        except Exception as exc:
            if debug_enabled():
                raise
            console.print(f"[red]Error:[/red] Unexpected failure: {exc}")
            console.print("Set TRAVIS_DEBUG=1 for a stack trace.")
            raise typer.Exit(1) from exc

    return wrapper


def get_settings(ctx: typer.Context) -> ClientSettings:
    """Return the :class:`ClientSettings` cached on ``ctx``, resolving them on first use."""

    ctx_obj = cast(dict[str, Any], ctx.ensure_object(dict))
    existing = ctx_obj.get("settings")
    if isinstance(existing, ClientSettings):
        return existing
    settings = ClientSettings.from_env(token=ctx_obj.get("token"), host=ctx_obj.get("host"))
    ctx_obj["settings"] = settings
    return settings


def run_call(ctx: typer.Context, call: Callable[[TravisClient], Awaitable[Result[T]]]) -> T:
    """Run one client operation to completion and unwrap its result."""

    settings = get_settings(ctx)

    async def _run() -> Result[T]:
        async with TravisClient(settings.token, settings.host) as client:
            return await call(client)

    return asyncio.run(_run()).unwrap()


def print_model(model: BaseModel) -> None:
    console.print_json(data=model.model_dump(mode="json", by_alias=True, exclude_none=True))


__all__ = [
    "console",
    "get_settings",
    "handle_cli_errors",
    "print_model",
    "run_call",
]
