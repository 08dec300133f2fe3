"""Commands for viewing and changing persisted CLI settings."""

from __future__ import annotations

from dataclasses import asdict

import typer
from rich import print

from ..config import ConfigStore, setting_names
from .common import handle_cli_errors

app = typer.Typer(help="Settings stored in APPSVC_HOME/config.json")


@app.command("show")
@handle_cli_errors
def config_show() -> None:
    """Display the effective settings, environment overrides included."""

    settings = ConfigStore().load()
    for key, value in asdict(settings).items():
        print(f"{key} = {value}")


@app.command("set")
@handle_cli_errors
def config_set(
    key: str = typer.Argument(..., help="Setting name"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Persist a single setting."""

    if key not in setting_names():
        raise typer.BadParameter(
            f"Unknown setting '{key}' (expected one of {', '.join(setting_names())})",
            param_hint="KEY",
        )
    settings = ConfigStore().update(**{key: value})
    print(f"{key} set to {getattr(settings, key)}")
