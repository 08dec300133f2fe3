from __future__ import annotations

from pydantic import AwareDatetime, Field

from .base import AppServiceModel, PagedCollection, ProxyOnlyResource, Resource
from .common import HostingEnvironmentProfile
from .enums import KeyVaultSecretStatus


class CertificateProperties(AppServiceModel):
    password: str | None = None
    friendly_name: str | None = Field(default=None, alias="friendlyName")
    subject_name: str | None = Field(default=None, alias="subjectName")
    host_names: list[str] = Field(default_factory=list, alias="hostNames")
    pfx_blob: str | None = Field(default=None, alias="pfxBlob")
    site_name: str | None = Field(default=None, alias="siteName")
    self_link: str | None = Field(default=None, alias="selfLink")
    issuer: str | None = None
    issue_date: AwareDatetime | None = Field(default=None, alias="issueDate")
    expiration_date: AwareDatetime | None = Field(default=None, alias="expirationDate")
    thumbprint: str | None = None
    valid: bool | None = None
    cer_blob: str | None = Field(default=None, alias="cerBlob")
    public_key_hash: str | None = Field(default=None, alias="publicKeyHash")
    hosting_environment_profile: HostingEnvironmentProfile | None = Field(
        default=None, alias="hostingEnvironmentProfile"
    )
    key_vault_id: str | None = Field(default=None, alias="keyVaultId")
    key_vault_secret_name: str | None = Field(default=None, alias="keyVaultSecretName")
    key_vault_secret_status: KeyVaultSecretStatus | None = Field(
        default=None, alias="keyVaultSecretStatus"
    )
    server_farm_id: str | None = Field(default=None, alias="serverFarmId")
    canonical_name: str | None = Field(default=None, alias="canonicalName")
    domain_validation_method: str | None = Field(default=None, alias="domainValidationMethod")


class Certificate(Resource):
    """SSL certificate uploaded to or issued for App Service."""

    properties: CertificateProperties | None = None


class CertificatePatchResource(ProxyOnlyResource):
    """Certificate payload accepted by PATCH requests."""

    properties: CertificateProperties | None = None


class CertificateCollection(PagedCollection[Certificate]):
    pass


__all__ = [
    "Certificate",
    "CertificateCollection",
    "CertificatePatchResource",
    "CertificateProperties",
]
