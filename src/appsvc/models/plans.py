"""Typed representations of App Service plans (server farms)."""

from __future__ import annotations

from pydantic import AwareDatetime, Field

from .base import AppServiceModel, PagedCollection, Resource
from .common import ExtendedLocation, HostingEnvironmentProfile
from .enums import ProvisioningState, StatusOptions


class SkuCapacity(AppServiceModel):
    minimum: int | None = None
    maximum: int | None = None
    elastic_maximum: int | None = Field(default=None, alias="elasticMaximum")
    default: int | None = None
    scale_type: str | None = Field(default=None, alias="scaleType")


class Capability(AppServiceModel):
    name: str | None = None
    value: str | None = None
    reason: str | None = None


class SkuDescription(AppServiceModel):
    """Pricing tier of a plan or static site."""

    name: str | None = None
    tier: str | None = None
    size: str | None = None
    family: str | None = None
    capacity: int | None = None
    sku_capacity: SkuCapacity | None = Field(default=None, alias="skuCapacity")
    locations: list[str] = Field(default_factory=list)
    capabilities: list[Capability] = Field(default_factory=list)


class KubeEnvironmentProfile(AppServiceModel):
    id: str | None = None
    name: str | None = None
    type: str | None = None


class AppServicePlanProperties(AppServiceModel):
    worker_tier_name: str | None = Field(default=None, alias="workerTierName")
    status: StatusOptions | None = None
    subscription: str | None = None
    hosting_environment_profile: HostingEnvironmentProfile | None = Field(
        default=None, alias="hostingEnvironmentProfile"
    )
    maximum_number_of_workers: int | None = Field(default=None, alias="maximumNumberOfWorkers")
    geo_region: str | None = Field(default=None, alias="geoRegion")
    per_site_scaling: bool | None = Field(default=None, alias="perSiteScaling")
    elastic_scale_enabled: bool | None = Field(default=None, alias="elasticScaleEnabled")
    maximum_elastic_worker_count: int | None = Field(
        default=None, alias="maximumElasticWorkerCount"
    )
    number_of_sites: int | None = Field(default=None, alias="numberOfSites")
    is_spot: bool | None = Field(default=None, alias="isSpot")
    spot_expiration_time: AwareDatetime | None = Field(default=None, alias="spotExpirationTime")
    free_offer_expiration_time: AwareDatetime | None = Field(
        default=None, alias="freeOfferExpirationTime"
    )
    resource_group: str | None = Field(default=None, alias="resourceGroup")
    reserved: bool | None = None
    is_xenon: bool | None = Field(default=None, alias="isXenon")
    hyper_v: bool | None = Field(default=None, alias="hyperV")
    target_worker_count: int | None = Field(default=None, alias="targetWorkerCount")
    target_worker_size_id: int | None = Field(default=None, alias="targetWorkerSizeId")
    provisioning_state: ProvisioningState | None = Field(default=None, alias="provisioningState")
    kube_environment_profile: KubeEnvironmentProfile | None = Field(
        default=None, alias="kubeEnvironmentProfile"
    )
    zone_redundant: bool | None = Field(default=None, alias="zoneRedundant")


class AppServicePlan(Resource):
    """App Service plan hosting one or more apps."""

    properties: AppServicePlanProperties | None = None
    sku: SkuDescription | None = None
    extended_location: ExtendedLocation | None = Field(default=None, alias="extendedLocation")


class AppServicePlanCollection(PagedCollection[AppServicePlan]):
    """Page of App Service plans."""


__all__ = [
    "AppServicePlan",
    "AppServicePlanCollection",
    "AppServicePlanProperties",
    "Capability",
    "KubeEnvironmentProfile",
    "SkuCapacity",
    "SkuDescription",
]
