from __future__ import annotations

import logging
import sys

import typer

from ..config import ConfigStore, coerce_setting
from . import config, enums, models
from .common import handle_cli_errors

app = typer.Typer(help="App Service model toolkit")


def _register_sub_app(name: str, sub_app: typer.Typer) -> None:
    app.add_typer(sub_app, name=name)


_register_sub_app("enums", enums.app)
_register_sub_app("config", config.app)

models.register(app)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("appsvc").setLevel(level)


@app.callback()
@handle_cli_errors
def common(
    ctx: typer.Context,
    log_level: str | None = typer.Option(
        None, "--log-level", help="Log level for appsvc loggers (overrides APPSVC_LOG_LEVEL)"
    ),
) -> None:
    """Initialize shared Typer context state."""

    ctx.ensure_object(dict)
    settings = ConfigStore().load()
    if log_level:
        settings.log_level = coerce_setting("log_level", log_level)
    configure_logging(settings.log_level)
    ctx.obj["settings"] = settings


__all__ = ["app", "configure_logging", "config", "enums", "models"]
