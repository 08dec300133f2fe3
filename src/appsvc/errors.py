from __future__ import annotations

from typing import Any, Optional


class AppServiceError(Exception):
    """Base error for appsvc."""


class ConfigError(AppServiceError):
    pass


class DeserializationError(AppServiceError):
    """Raised when a wire payload cannot be turned into a model."""

    def __init__(self, model: str, message: str, *, errors: Optional[list[Any]] = None) -> None:
        super().__init__(f"Cannot deserialize {model}: {message}")
        self.model = model
        self.errors = errors or []


class HttpError(AppServiceError):
    def __init__(self, status_code: int, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.details = details


class UnknownModelError(AppServiceError, KeyError):
    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"Unknown {kind} '{name}'")
        self.kind = kind
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])


class EnumDriftError(AppServiceError):
    """Raised when strict validation finds values the client does not know."""

    def __init__(self, findings: list[tuple[str, str, str]]) -> None:
        super().__init__(f"{len(findings)} unrecognised enum value(s) found")
        self.findings = findings
