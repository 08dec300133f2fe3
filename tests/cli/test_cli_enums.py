from __future__ import annotations

# ruff: noqa: S101
import json

from appsvc.cli import app


def test_enums_list_json(cli_runner, monkeypatch) -> None:
    monkeypatch.setenv("APPSVC_OUTPUT", "json")

    result = cli_runner.invoke(app, ["enums", "list"])

    assert result.exit_code == 0, result.output
    rows = {row["name"]: row for row in json.loads(result.output)}
    assert rows["FtpsState"] == {
        "name": "FtpsState",
        "extensible": True,
        "values": ["AllAllowed", "FtpsOnly", "Disabled"],
    }
    assert rows["SslState"]["extensible"] is False


def test_enums_list_table(cli_runner) -> None:
    result = cli_runner.invoke(app, ["enums", "list"])

    assert result.exit_code == 0, result.output
    assert "FtpsState" in result.output
    assert "extensible" in result.output


def test_parse_known_value(cli_runner) -> None:
    result = cli_runner.invoke(app, ["enums", "parse", "SupportedTlsVersions", "1.2"])

    assert result.exit_code == 0, result.output
    assert "SupportedTlsVersions: TLS1_2" in result.output
    assert 'wire value: "1.2"' in result.output


def test_parse_unknown_value_round_trips(cli_runner) -> None:
    result = cli_runner.invoke(app, ["enums", "parse", "ftpsstate", "SomeNewValue"])

    assert result.exit_code == 0, result.output
    assert "FtpsState: unknown" in result.output
    assert 'wire value: "SomeNewValue"' in result.output


def test_parse_closed_enum_rejects_unknown_value(cli_runner) -> None:
    result = cli_runner.invoke(app, ["enums", "parse", "SslState", "Bogus"])

    assert result.exit_code == 2
    assert "Bogus" in result.output


def test_parse_unknown_enum_name(cli_runner) -> None:
    result = cli_runner.invoke(app, ["enums", "parse", "Nope", "x"])

    assert result.exit_code == 1
    assert "Unknown enum 'Nope'" in result.output
