from __future__ import annotations

from pydantic import Field

from .base import AppServiceModel, PagedCollection, ProxyOnlyResource


class HybridConnectionProperties(AppServiceModel):
    service_bus_namespace: str | None = Field(default=None, alias="serviceBusNamespace")
    relay_name: str | None = Field(default=None, alias="relayName")
    relay_arm_uri: str | None = Field(default=None, alias="relayArmUri")
    hostname: str | None = None
    port: int | None = None
    send_key_name: str | None = Field(default=None, alias="sendKeyName")
    send_key_value: str | None = Field(default=None, alias="sendKeyValue")
    service_bus_suffix: str | None = Field(default=None, alias="serviceBusSuffix")


class HybridConnection(ProxyOnlyResource):
    """Service Bus relay connection exposed to an app."""

    properties: HybridConnectionProperties | None = None


class HybridConnectionCollection(PagedCollection[HybridConnection]):
    pass


class HybridConnectionKeyProperties(AppServiceModel):
    send_key_name: str | None = Field(default=None, alias="sendKeyName")
    send_key_value: str | None = Field(default=None, alias="sendKeyValue")


class HybridConnectionKey(ProxyOnlyResource):
    properties: HybridConnectionKeyProperties | None = None


class HybridConnectionLimitsProperties(AppServiceModel):
    current: int | None = None
    maximum: int | None = None


class HybridConnectionLimits(ProxyOnlyResource):
    """Hybrid connection quota of an App Service plan."""

    properties: HybridConnectionLimitsProperties | None = None


class RelayServiceConnectionEntityProperties(AppServiceModel):
    entity_name: str | None = Field(default=None, alias="entityName")
    entity_connection_string: str | None = Field(default=None, alias="entityConnectionString")
    resource_type: str | None = Field(default=None, alias="resourceType")
    resource_connection_string: str | None = Field(
        default=None, alias="resourceConnectionString"
    )
    hostname: str | None = None
    port: int | None = None
    biztalk_uri: str | None = Field(default=None, alias="biztalkUri")


class RelayServiceConnectionEntity(ProxyOnlyResource):
    """Legacy BizTalk hybrid connection."""

    properties: RelayServiceConnectionEntityProperties | None = None


__all__ = [
    "HybridConnection",
    "HybridConnectionCollection",
    "HybridConnectionKey",
    "HybridConnectionKeyProperties",
    "HybridConnectionLimits",
    "HybridConnectionLimitsProperties",
    "HybridConnectionProperties",
    "RelayServiceConnectionEntity",
    "RelayServiceConnectionEntityProperties",
]
