"""Typed data models for the App Service resource-management API."""

from __future__ import annotations

from .errors import (
    AppServiceError,
    ConfigError,
    DeserializationError,
    EnumDriftError,
    HttpError,
    UnknownModelError,
)
from .models.base import PagedCollection, iter_unknown_enum_values
from .models.enums import ExtensibleEnum

__version__ = "0.1.0"

__all__ = [
    "AppServiceError",
    "ConfigError",
    "DeserializationError",
    "EnumDriftError",
    "ExtensibleEnum",
    "HttpError",
    "PagedCollection",
    "UnknownModelError",
    "__version__",
    "iter_unknown_enum_values",
]
