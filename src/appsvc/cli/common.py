from __future__ import annotations

import json
import os
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

from ..config import ConfigStore, Settings
from ..errors import AppServiceError, DeserializationError, EnumDriftError, HttpError

console = Console()


def _render_http_error(exc: HttpError) -> None:
    console.print(f"[red]Error:[/red] {exc}")
    details = exc.details
    if isinstance(details, BaseModel):
        details = details.model_dump(mode="json", by_alias=True)
    if details:
        snippet = json.dumps(details, indent=2) if isinstance(details, dict) else str(details)
        console.print(snippet, markup=False)


def _render_deserialization_error(exc: DeserializationError) -> None:
    console.print(f"[red]Error:[/red] {exc}")
    for error in exc.errors[1:]:
        location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        console.print(f"  {location}: {error.get('msg')}", markup=False)


def render_enum_findings(findings: list[tuple[str, str, str]]) -> None:
    for path, enum_name, raw in findings:
        console.print(
            f"[yellow]Unknown {enum_name}[/yellow] at {escape(path)}: {escape(repr(raw))}", highlight=False
        )


def get_settings(ctx: typer.Context) -> Settings:
    """Return the settings resolved by the root callback, loading them if absent."""

    obj = ctx.ensure_object(dict)
    settings = obj.get("settings")
    if not isinstance(settings, Settings):
        settings = ConfigStore().load()
        obj["settings"] = settings
    return settings


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
        except HttpError as exc:
            _render_http_error(exc)
            raise typer.Exit(1) from None
        except DeserializationError as exc:
            _render_deserialization_error(exc)
            raise typer.Exit(1) from None
        except EnumDriftError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            console.print("Rerun with --no-strict to accept values this client does not know.")
            raise typer.Exit(1) from None
        except AppServiceError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1) from None
        except Exception as exc:
            if os.getenv("APPSVC_DEBUG"):
                raise
            console.print(f"[red]Error:[/red] Unexpected failure: {exc}")
            console.print("Set APPSVC_DEBUG=1 for a stack trace.")
            raise typer.Exit(1) from exc

    return wrapper


__all__ = ["console", "get_settings", "handle_cli_errors", "render_enum_findings"]
