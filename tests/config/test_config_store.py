from __future__ import annotations

# ruff: noqa: S101
import json
import logging
import stat
import sys
from pathlib import Path

import pytest

from appsvc.config import ConfigStore, Settings
from appsvc.errors import ConfigError


def test_defaults_when_file_missing(config_path: Path) -> None:
    settings = ConfigStore().load()

    assert settings == Settings()
    assert settings.log_level == "WARNING"
    assert settings.fail_on_unknown_enums is False
    assert settings.output == "table"


def test_save_and_load(config_path: Path) -> None:
    store = ConfigStore()
    store.save(Settings(log_level="DEBUG", fail_on_unknown_enums=True, output="json"))

    raw = json.loads(config_path.read_text(encoding="utf-8"))
    assert raw == {"log_level": "DEBUG", "fail_on_unknown_enums": True, "output": "json"}
    assert store.load() == Settings(log_level="DEBUG", fail_on_unknown_enums=True, output="json")
    assert not config_path.with_suffix(".tmp").exists()


def test_explicit_path(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "settings.json"
    store = ConfigStore(path=path)
    store.update(output="json")

    assert path.exists()
    assert ConfigStore(path=path).load(apply_env=False).output == "json"


def test_update_normalizes_values(config_path: Path) -> None:
    updated = ConfigStore().update(log_level="info", fail_on_unknown_enums="yes")

    assert updated.log_level == "INFO"
    assert updated.fail_on_unknown_enums is True


def test_environment_beats_file(config_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path.write_text(json.dumps({"log_level": "ERROR", "output": "json"}), encoding="utf-8")
    monkeypatch.setenv("APPSVC_LOG_LEVEL", "debug")
    monkeypatch.setenv("APPSVC_FAIL_ON_UNKNOWN_ENUMS", "1")

    settings = ConfigStore().load()

    assert settings.log_level == "DEBUG"
    assert settings.fail_on_unknown_enums is True
    assert settings.output == "json"


def test_update_does_not_persist_environment_overrides(
    config_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("APPSVC_OUTPUT", "json")
    ConfigStore().update(log_level="ERROR")

    raw = json.loads(config_path.read_text(encoding="utf-8"))
    assert raw["output"] == "table"


def test_unknown_keys_in_file_are_ignored(config_path: Path) -> None:
    config_path.write_text(json.dumps({"output": "json", "legacy": 1}), encoding="utf-8")
    assert ConfigStore().load().output == "json"


@pytest.mark.parametrize(
    "changes",
    [{"log_level": "LOUD"}, {"output": "xml"}, {"fail_on_unknown_enums": "maybe"}, {"colour": "x"}],
)
def test_invalid_values_raise(config_path: Path, changes: dict) -> None:
    with pytest.raises(ConfigError):
        ConfigStore().update(**changes)


def test_invalid_stored_value_is_skipped_with_warning(config_path: Path, caplog) -> None:
    config_path.write_text(json.dumps({"output": "xml", "log_level": "INFO"}), encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="appsvc.config"):
        settings = ConfigStore().load()

    assert settings.output == "table"
    assert settings.log_level == "INFO"
    assert "Invalid value for output" in caplog.text


def test_update_repairs_invalid_stored_value(config_path: Path) -> None:
    config_path.write_text(json.dumps({"output": "xml"}), encoding="utf-8")

    updated = ConfigStore().update(output="json")

    assert updated.output == "json"
    assert json.loads(config_path.read_text(encoding="utf-8"))["output"] == "json"


def test_invalid_env_override_raises(config_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APPSVC_OUTPUT", "xml")
    with pytest.raises(ConfigError):
        ConfigStore().load()


def test_unreadable_file_logs_warning(config_path: Path, caplog) -> None:
    config_path.write_text("{broken", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="appsvc.config"):
        settings = ConfigStore().load()

    assert settings == Settings()
    assert "unreadable config file" in caplog.text


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission semantics")
def test_save_enforces_restrictive_permissions(config_path: Path) -> None:
    ConfigStore().save(Settings())

    mode = stat.S_IMODE(config_path.stat().st_mode)
    assert mode == 0o600
