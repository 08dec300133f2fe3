from __future__ import annotations

import json
import logging
import os
import stat
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from .errors import ConfigError

logger = logging.getLogger(__name__)

APPSVC_DIR = os.path.expanduser(os.getenv("APPSVC_HOME", "~/.appsvc"))
CONFIG_PATH = os.path.join(APPSVC_DIR, "config.json")

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
OUTPUT_FORMATS = ("table", "json")

_ENV_OVERRIDES = {
    "log_level": "APPSVC_LOG_LEVEL",
    "fail_on_unknown_enums": "APPSVC_FAIL_ON_UNKNOWN_ENUMS",
    "output": "APPSVC_OUTPUT",
}
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass
class Settings:
    log_level: str = "WARNING"
    fail_on_unknown_enums: bool = False
    output: str = "table"


def _secure_path(path: Path) -> None:
    if not path.exists():
        return

    try:
        if os.name == "nt":
            os.chmod(path, stat.S_IREAD | stat.S_IWRITE)
        else:
            path.chmod(0o600)
    except PermissionError as exc:
        logger.warning("Unable to enforce permissions for %s: %s", path, exc)


def _parse_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in _TRUE:
        return True
    if isinstance(value, str) and value.strip().lower() in _FALSE:
        return False
    raise ConfigError(f"Invalid value for {key}: {value!r} (expected true/false)")


def coerce_setting(key: str, value: Any) -> Any:
    """Validate ``value`` for the setting ``key`` and return it normalized."""

    if key == "log_level":
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ConfigError(
                f"Invalid value for log_level: {value!r} (expected one of {', '.join(LOG_LEVELS)})"
            )
        return level
    if key == "fail_on_unknown_enums":
        return _parse_bool(key, value)
    if key == "output":
        output = str(value).strip().lower()
        if output not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Invalid value for output: {value!r} (expected one of {', '.join(OUTPUT_FORMATS)})"
            )
        return output
    raise ConfigError(f"Unknown setting '{key}'")


def setting_names() -> list[str]:
    return [item.name for item in fields(Settings)]


class ConfigStore:
    """Persist :class:`Settings` as JSON under ``APPSVC_HOME``."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path else Path(CONFIG_PATH)

    def _ensure(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                raw = json.load(handle)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable config file %s: %s", self.path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Ignoring config file %s: expected a JSON object", self.path)
            return {}
        return raw

    def _write(self, data: dict[str, Any]) -> None:
        self._ensure()
        tmp = self.path.with_suffix(".tmp")
        with tmp.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=2)
        tmp.replace(self.path)
        _secure_path(self.path)

    def load(self, *, apply_env: bool = True) -> Settings:
        """Return the stored settings, with environment overrides applied."""

        raw = self._read()
        values: dict[str, Any] = {}
        for key in setting_names():
            if key not in raw:
                continue
            try:
                values[key] = coerce_setting(key, raw[key])
            except ConfigError as exc:
                logger.warning("Ignoring stored setting in %s: %s", self.path, exc)
        if apply_env:
            for key, env_name in _ENV_OVERRIDES.items():
                env_value = os.getenv(env_name)
                if env_value is not None:
                    values[key] = coerce_setting(key, env_value)
        return Settings(**values)

    def save(self, settings: Settings) -> None:
        self._write(asdict(settings))

    def update(self, **changes: Any) -> Settings:
        """Validate and persist ``changes`` on top of the stored file values."""

        current = self.load(apply_env=False)
        data = asdict(current)
        for key, value in changes.items():
            data[key] = coerce_setting(key, value)
        updated = Settings(**data)
        self.save(updated)
        return updated


__all__ = [
    "APPSVC_DIR",
    "CONFIG_PATH",
    "ConfigStore",
    "LOG_LEVELS",
    "OUTPUT_FORMATS",
    "Settings",
    "coerce_setting",
    "setting_names",
]
