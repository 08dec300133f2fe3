"""Commands for the string enums used by the models."""

from __future__ import annotations

import json

import typer
from rich.table import Table

from ..registry import is_extensible, list_enums, resolve_enum
from .common import console, get_settings, handle_cli_errors

app = typer.Typer(help="Inspect and parse enum values")


@app.command("list")
@handle_cli_errors
def enums_list(ctx: typer.Context) -> None:
    """Show every enum with its documented wire values."""

    settings = get_settings(ctx)
    rows = [
        (enum_type.__name__, is_extensible(enum_type), [member.value for member in enum_type])
        for enum_type in list_enums()
    ]
    if settings.output == "json":
        payload = [{"name": name, "extensible": ext, "values": values} for name, ext, values in rows]
        typer.echo(json.dumps(payload, indent=2))
        return
    table = Table("Enum", "Kind", "Values")
    for name, extensible, values in rows:
        table.add_row(name, "extensible" if extensible else "closed", ", ".join(values))
    console.print(table)


@app.command("parse")
@handle_cli_errors
def enums_parse(
    name: str = typer.Argument(..., help="Enum class name"),
    value: str = typer.Argument(..., help="Wire value to parse"),
) -> None:
    """Parse VALUE as the enum NAME and show what it round-trips to."""

    enum_type = resolve_enum(name)
    if is_extensible(enum_type):
        member = enum_type.parse(value)  # type: ignore[attr-defined]
        label = "unknown" if member.is_unknown else member.name
        wire = member.serialize()
    else:
        try:
            member = enum_type(value)
        except ValueError:
            raise typer.BadParameter(
                f"'{value}' is not a valid {enum_type.__name__} "
                f"(expected one of {', '.join(m.value for m in enum_type)})",
                param_hint="VALUE",
            ) from None
        label = member.name
        wire = member.value
    typer.echo(f"{enum_type.__name__}: {label}")
    typer.echo(f"wire value: {json.dumps(wire)}")
