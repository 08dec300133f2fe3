"""Shared building blocks for the App Service resource models."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_serializer,
)

from ..errors import DeserializationError
from .enums import ExtensibleEnum

ModelT = TypeVar("ModelT", bound="AppServiceModel")
T = TypeVar("T")


class AppServiceModel(BaseModel):
    """Base model applying the wire conventions shared by every schema type.

    * fields are addressed by their camelCase wire name or their Python name,
    * optional fields that are absent and optional lists that are empty are
      left out of the serialized payload,
    * ``null`` for an optional list field reads as an empty list,
    * properties the model does not declare are kept and written back.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_list_as_empty(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name is not None:
            field = cls.model_fields.get(info.field_name)
            if field is not None and field.default_factory is list:
                return []
        return value

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        omittable = _omittable_keys(type(self))
        return {
            key: value
            for key, value in data.items()
            if key not in omittable or (value is not None and value != [])
        }

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready wire representation of this model."""

        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_payload(cls: type[ModelT], data: Any) -> ModelT:
        """Validate a decoded wire payload, raising :class:`DeserializationError`."""

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise DeserializationError(
                cls.__name__, _summarize(exc), errors=exc.errors(include_url=False)
            ) from exc

    @classmethod
    def from_json(cls: type[ModelT], raw: str | bytes) -> ModelT:
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise DeserializationError(
                cls.__name__, _summarize(exc), errors=exc.errors(include_url=False)
            ) from exc


_OMITTABLE_CACHE: dict[type[BaseModel], frozenset[str]] = {}


def _omittable_keys(model: type[BaseModel]) -> frozenset[str]:
    cached = _OMITTABLE_CACHE.get(model)
    if cached is None:
        keys: set[str] = set()
        for name, field in model.model_fields.items():
            if field.is_required():
                continue
            keys.add(name)
            if field.alias:
                keys.add(field.alias)
        cached = frozenset(keys)
        _OMITTABLE_CACHE[model] = cached
    return cached


def _summarize(exc: ValidationError) -> str:
    first = exc.errors(include_url=False)[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    suffix = f" (+{exc.error_count() - 1} more)" if exc.error_count() > 1 else ""
    return f"{location}: {first['msg']}{suffix}"


class ProxyOnlyResource(AppServiceModel):
    """Resource envelope without ARM tracking fields (no location or tags)."""

    id: str | None = None
    name: str | None = None
    kind: str | None = None
    type: str | None = None


class Resource(AppServiceModel):
    """Tracked resource envelope shared by top-level App Service resources."""

    id: str | None = None
    name: str | None = None
    kind: str | None = None
    location: str
    type: str | None = None
    tags: dict[str, str] | None = None


class PagedCollection(AppServiceModel, Generic[T]):
    """One page of a listing operation.

    ``value`` keeps the order the service returned. ``next_link`` is an opaque
    continuation that is only meaningful to the listing operation that
    produced it.
    """

    value: list[T]
    next_link: str | None = Field(default=None, alias="nextLink")

    def continuation(self) -> str | None:
        return self.next_link or None

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.value)

    def __len__(self) -> int:
        return len(self.value)

    def __bool__(self) -> bool:
        return True


def iter_unknown_enum_values(model: BaseModel, path: str = "") -> Iterator[tuple[str, str, str]]:
    """Yield ``(path, enum name, raw value)`` for every unrecognised enum value."""

    for name in type(model).model_fields:
        value = getattr(model, name)
        yield from _walk(value, f"{path}.{name}" if path else name)


def _walk(value: Any, path: str) -> Iterator[tuple[str, str, str]]:
    if isinstance(value, ExtensibleEnum):
        if value.is_unknown:
            yield path, type(value).__name__, value.serialize()
    elif isinstance(value, BaseModel):
        yield from iter_unknown_enum_values(value, path)
    elif isinstance(value, list):
        for index, item in enumerate(value):
            yield from _walk(item, f"{path}[{index}]")
    elif isinstance(value, dict):
        for key, item in value.items():
            yield from _walk(item, f"{path}[{key!r}]")


__all__ = [
    "AppServiceModel",
    "PagedCollection",
    "ProxyOnlyResource",
    "Resource",
    "iter_unknown_enum_values",
]
