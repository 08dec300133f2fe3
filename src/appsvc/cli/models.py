"""Commands for inspecting models and validating wire documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer
import yaml
from rich.table import Table

from ..errors import DeserializationError, EnumDriftError
from ..models.base import AppServiceModel, PagedCollection, iter_unknown_enum_values
from ..registry import is_collection, list_models, resolve_model
from .common import console, get_settings, handle_cli_errors, render_enum_findings


def register(app: typer.Typer) -> None:
    app.command("models")(models_list)
    app.command("validate")(validate)
    app.command("schema")(schema)


def _model_kind(model: type[Any]) -> str:
    if is_collection(model):
        return "collection"
    if "location" in model.model_fields or "properties" in model.model_fields:
        return "resource"
    return "model"


@handle_cli_errors
def models_list(ctx: typer.Context) -> None:
    """List every exported model."""

    settings = get_settings(ctx)
    rows = [(model.__name__, _model_kind(model), model.__module__) for model in list_models()]
    if settings.output == "json":
        typer.echo(json.dumps([{"name": n, "kind": k, "module": m} for n, k, m in rows], indent=2))
        return
    table = Table("Model", "Kind", "Module")
    for row in rows:
        table.add_row(*row)
    console.print(table)


def load_document(path: Path) -> Any:
    """Read a JSON or YAML document from ``path``."""

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yaml", ".yml"}:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DeserializationError(path.name, f"invalid YAML: {exc}") from exc
    try:
        return json.loads(text)
    except ValueError as exc:
        raise DeserializationError(path.name, f"invalid JSON: {exc}") from exc


@handle_cli_errors
def validate(
    ctx: typer.Context,
    model_name: str = typer.Argument(..., metavar="MODEL", help="Model class name"),
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON or YAML document"),
    strict: bool | None = typer.Option(
        None,
        "--strict/--no-strict",
        help="Fail when the document holds enum values this client does not know "
        "(defaults to the fail_on_unknown_enums setting)",
    ),
) -> None:
    """Validate a wire document against MODEL and print the normalized payload."""

    settings = get_settings(ctx)
    model = resolve_model(model_name)
    if not issubclass(model, AppServiceModel):
        raise typer.BadParameter(f"{model.__name__} cannot be validated", param_hint="MODEL")
    instance = model.from_payload(load_document(path))

    if isinstance(instance, PagedCollection):
        continuation = instance.continuation()
        console.print(
            f"{len(instance)} item(s); next page: {continuation or 'none'}", highlight=False
        )
    typer.echo(json.dumps(instance.to_payload(), indent=2))

    findings = list(iter_unknown_enum_values(instance))
    if not findings:
        return
    render_enum_findings(findings)
    if settings.fail_on_unknown_enums if strict is None else strict:
        raise EnumDriftError(findings)


@handle_cli_errors
def schema(
    model_name: str = typer.Argument(..., metavar="MODEL", help="Model class name"),
) -> None:
    """Print the JSON schema of MODEL using wire names."""

    model = resolve_model(model_name)
    typer.echo(json.dumps(model.model_json_schema(by_alias=True), indent=2))
