from __future__ import annotations

from pydantic import Field

from .base import AppServiceModel
from .enums import ManagedServiceIdentityType


class NameValuePair(AppServiceModel):
    name: str | None = None
    value: str | None = None


class HostingEnvironmentProfile(AppServiceModel):
    """Reference to the App Service Environment hosting a resource."""

    id: str | None = None
    name: str | None = None
    type: str | None = None


class ExtendedLocation(AppServiceModel):
    name: str | None = None
    type: str | None = None


class UserAssignedIdentity(AppServiceModel):
    principal_id: str | None = Field(default=None, alias="principalId")
    client_id: str | None = Field(default=None, alias="clientId")


class ManagedServiceIdentity(AppServiceModel):
    """Managed identity attached to a site or static site."""

    type: ManagedServiceIdentityType | None = None
    tenant_id: str | None = Field(default=None, alias="tenantId")
    principal_id: str | None = Field(default=None, alias="principalId")
    user_assigned_identities: dict[str, UserAssignedIdentity] | None = Field(
        default=None, alias="userAssignedIdentities"
    )


class DefaultErrorResponseErrorDetailsItem(AppServiceModel):
    code: str | None = None
    message: str | None = None
    target: str | None = None


class DefaultErrorResponseError(AppServiceModel):
    code: str | None = None
    message: str | None = None
    target: str | None = None
    details: list[DefaultErrorResponseErrorDetailsItem] = Field(default_factory=list)
    innererror: str | None = None


class DefaultErrorResponse(AppServiceModel):
    """Error body returned by the App Service management API."""

    error: DefaultErrorResponseError | None = None


__all__ = [
    "DefaultErrorResponse",
    "DefaultErrorResponseError",
    "DefaultErrorResponseErrorDetailsItem",
    "ExtendedLocation",
    "HostingEnvironmentProfile",
    "ManagedServiceIdentity",
    "NameValuePair",
    "UserAssignedIdentity",
]
