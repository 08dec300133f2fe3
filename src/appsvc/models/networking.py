"""Virtual network integration models."""

from __future__ import annotations

from pydantic import Field

from .base import AppServiceModel, ProxyOnlyResource
from .enums import RouteType


class VnetRouteProperties(AppServiceModel):
    start_address: str | None = Field(default=None, alias="startAddress")
    end_address: str | None = Field(default=None, alias="endAddress")
    route_type: RouteType | None = Field(default=None, alias="routeType")


class VnetRoute(ProxyOnlyResource):
    """Route applied to traffic leaving an app through its VNet integration."""

    properties: VnetRouteProperties | None = None


class VnetInfo(AppServiceModel):
    vnet_resource_id: str | None = Field(default=None, alias="vnetResourceId")
    cert_thumbprint: str | None = Field(default=None, alias="certThumbprint")
    cert_blob: str | None = Field(default=None, alias="certBlob")
    routes: list[VnetRoute] = Field(default_factory=list)
    resync_required: bool | None = Field(default=None, alias="resyncRequired")
    dns_servers: str | None = Field(default=None, alias="dnsServers")
    is_swift: bool | None = Field(default=None, alias="isSwift")


class VnetInfoResource(ProxyOnlyResource):
    properties: VnetInfo | None = None


class VnetGatewayProperties(AppServiceModel):
    vnet_name: str | None = Field(default=None, alias="vnetName")
    vpn_package_uri: str = Field(alias="vpnPackageUri")


class VnetGateway(ProxyOnlyResource):
    properties: VnetGatewayProperties | None = None


__all__ = [
    "VnetGateway",
    "VnetGatewayProperties",
    "VnetInfo",
    "VnetInfoResource",
    "VnetRoute",
    "VnetRouteProperties",
]
