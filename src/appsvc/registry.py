"""Name-based lookup of the exported models and enums."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from . import models
from .errors import UnknownModelError
from .models.base import AppServiceModel, PagedCollection
from .models.enums import ExtensibleEnum

_ABSTRACT_MODELS = {AppServiceModel, PagedCollection}


def _exported() -> list[object]:
    return [getattr(models, name) for name in models.__all__]


def list_models() -> list[type[BaseModel]]:
    found = [
        obj
        for obj in _exported()
        if isinstance(obj, type) and issubclass(obj, BaseModel) and obj not in _ABSTRACT_MODELS
    ]
    return sorted(found, key=lambda cls: cls.__name__)


def list_enums() -> list[type[Enum]]:
    found = [
        obj
        for obj in _exported()
        if isinstance(obj, type) and issubclass(obj, Enum) and obj is not ExtensibleEnum
    ]
    return sorted(found, key=lambda cls: cls.__name__)


def is_collection(model: type[BaseModel]) -> bool:
    return issubclass(model, PagedCollection)


def is_extensible(enum_type: type[Enum]) -> bool:
    return issubclass(enum_type, ExtensibleEnum)


def resolve_model(name: str) -> type[BaseModel]:
    """Return the exported model called ``name`` (case-insensitive)."""

    wanted = name.lower()
    for model in list_models():
        if model.__name__.lower() == wanted:
            return model
    raise UnknownModelError("model", name)


def resolve_enum(name: str) -> type[Enum]:
    wanted = name.lower()
    for enum_type in list_enums():
        if enum_type.__name__.lower() == wanted:
            return enum_type
    raise UnknownModelError("enum", name)


__all__ = [
    "is_collection",
    "is_extensible",
    "list_enums",
    "list_models",
    "resolve_enum",
    "resolve_model",
]
