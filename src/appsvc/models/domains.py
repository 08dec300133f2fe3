"""Typed representations of App Service domain registrations."""

from __future__ import annotations

from pydantic import AwareDatetime, Field

from .base import AppServiceModel, PagedCollection, Resource
from .enums import (
    AzureResourceType,
    CustomHostNameDnsRecordType,
    DnsType,
    DomainStatus,
    HostNameType,
    ProvisioningState,
)


class Address(AppServiceModel):
    """Postal address of a domain contact."""

    address1: str
    address2: str | None = None
    city: str
    country: str
    postal_code: str = Field(alias="postalCode")
    state: str


class Contact(AppServiceModel):
    """Contact information required by domain registrars."""

    address_mailing: Address | None = Field(default=None, alias="addressMailing")
    email: str
    fax: str | None = None
    job_title: str | None = Field(default=None, alias="jobTitle")
    name_first: str = Field(alias="nameFirst")
    name_last: str = Field(alias="nameLast")
    name_middle: str | None = Field(default=None, alias="nameMiddle")
    organization: str | None = None
    phone: str


class DomainPurchaseConsent(AppServiceModel):
    agreement_keys: list[str] = Field(default_factory=list, alias="agreementKeys")
    agreed_by: str | None = Field(default=None, alias="agreedBy")
    agreed_at: AwareDatetime | None = Field(default=None, alias="agreedAt")


class HostName(AppServiceModel):
    name: str | None = None
    site_names: list[str] = Field(default_factory=list, alias="siteNames")
    azure_resource_name: str | None = Field(default=None, alias="azureResourceName")
    azure_resource_type: AzureResourceType | None = Field(
        default=None, alias="azureResourceType"
    )
    custom_host_name_dns_record_type: CustomHostNameDnsRecordType | None = Field(
        default=None, alias="customHostNameDnsRecordType"
    )
    host_name_type: HostNameType | None = Field(default=None, alias="hostNameType")


class DomainProperties(AppServiceModel):
    contact_admin: Contact = Field(alias="contactAdmin")
    contact_billing: Contact = Field(alias="contactBilling")
    contact_registrant: Contact = Field(alias="contactRegistrant")
    contact_tech: Contact = Field(alias="contactTech")
    registration_status: DomainStatus | None = Field(default=None, alias="registrationStatus")
    provisioning_state: ProvisioningState | None = Field(default=None, alias="provisioningState")
    name_servers: list[str] = Field(default_factory=list, alias="nameServers")
    privacy: bool | None = None
    created_time: AwareDatetime | None = Field(default=None, alias="createdTime")
    expiration_time: AwareDatetime | None = Field(default=None, alias="expirationTime")
    last_renewed_time: AwareDatetime | None = Field(default=None, alias="lastRenewedTime")
    auto_renew: bool | None = Field(default=None, alias="autoRenew")
    ready_for_dns_record_management: bool | None = Field(
        default=None, alias="readyForDnsRecordManagement"
    )
    managed_host_names: list[HostName] = Field(default_factory=list, alias="managedHostNames")
    consent: DomainPurchaseConsent
    domain_not_renewable_reasons: list[str] = Field(
        default_factory=list, alias="domainNotRenewableReasons"
    )
    dns_type: DnsType | None = Field(default=None, alias="dnsType")
    dns_zone_id: str | None = Field(default=None, alias="dnsZoneId")
    target_dns_type: DnsType | None = Field(default=None, alias="targetDnsType")
    auth_code: str | None = Field(default=None, alias="authCode")


class Domain(Resource):
    """A domain registered through App Service."""

    properties: DomainProperties | None = None


class DomainCollection(PagedCollection[Domain]):
    pass


class NameIdentifier(AppServiceModel):
    name: str | None = None


class NameIdentifierCollection(PagedCollection[NameIdentifier]):
    """Page of domain name recommendations."""


__all__ = [
    "Address",
    "Contact",
    "Domain",
    "DomainCollection",
    "DomainProperties",
    "DomainPurchaseConsent",
    "HostName",
    "NameIdentifier",
    "NameIdentifierCollection",
]
