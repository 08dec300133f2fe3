from __future__ import annotations

# ruff: noqa: S101
import pytest
import typer
from typer.testing import CliRunner

from appsvc.cli.common import handle_cli_errors
from appsvc.errors import ConfigError, DeserializationError, HttpError
from appsvc.models import DefaultErrorResponse

runner = CliRunner()


def _app_raising(exc: Exception) -> typer.Typer:
    app = typer.Typer()

    @app.command()
    @handle_cli_errors
    def boom() -> None:
        raise exc

    return app


def test_http_error_prints_friendly_message() -> None:
    details = DefaultErrorResponse.model_validate(
        {"error": {"code": "Conflict", "message": "Site name is taken"}}
    )
    result = runner.invoke(_app_raising(HttpError(409, "Site name is taken", details=details)))

    assert result.exit_code == 1
    assert "HTTP 409" in result.output
    assert '"code": "Conflict"' in result.output
    assert "Traceback" not in result.output


def test_deserialization_error_lists_each_problem() -> None:
    exc = DeserializationError(
        "Contact",
        "email: Field required (+1 more)",
        errors=[
            {"loc": ("email",), "msg": "Field required"},
            {"loc": ("phone",), "msg": "Field required"},
        ],
    )
    result = runner.invoke(_app_raising(exc))

    assert result.exit_code == 1
    assert "Cannot deserialize Contact" in result.output
    assert "phone: Field required" in result.output


def test_package_errors_exit_with_one() -> None:
    result = runner.invoke(_app_raising(ConfigError("Invalid value for output: 'xml'")))

    assert result.exit_code == 1
    assert "Invalid value for output" in result.output


def test_unexpected_errors_hide_traceback(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("APPSVC_DEBUG", raising=False)
    result = runner.invoke(_app_raising(RuntimeError("kaput")))

    assert result.exit_code == 1
    assert "Unexpected failure: kaput" in result.output
    assert "APPSVC_DEBUG" in result.output


def test_debug_mode_reraises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APPSVC_DEBUG", "1")
    result = runner.invoke(_app_raising(RuntimeError("kaput")))

    assert isinstance(result.exception, RuntimeError)
