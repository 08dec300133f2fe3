"""Typed representations of Static Web Apps."""

from __future__ import annotations

from typing import Any

from pydantic import AwareDatetime, Field

from .base import AppServiceModel, PagedCollection, ProxyOnlyResource, Resource
from .common import ManagedServiceIdentity
from .enums import CustomDomainStatus, EnterpriseGradeCdnStatus, StagingEnvironmentPolicy
from .plans import SkuDescription


class StaticSiteBuildProperties(AppServiceModel):
    """Build settings used by the generated GitHub workflow."""

    app_location: str | None = Field(default=None, alias="appLocation")
    api_location: str | None = Field(default=None, alias="apiLocation")
    app_artifact_location: str | None = Field(default=None, alias="appArtifactLocation")
    output_location: str | None = Field(default=None, alias="outputLocation")
    app_build_command: str | None = Field(default=None, alias="appBuildCommand")
    api_build_command: str | None = Field(default=None, alias="apiBuildCommand")
    skip_github_action_workflow_generation: bool | None = Field(
        default=None, alias="skipGithubActionWorkflowGeneration"
    )
    github_action_secret_name_override: str | None = Field(
        default=None, alias="githubActionSecretNameOverride"
    )


class StaticSiteTemplateOptions(AppServiceModel):
    template_repository_url: str | None = Field(default=None, alias="templateRepositoryUrl")
    owner: str | None = None
    repository_name: str | None = Field(default=None, alias="repositoryName")
    description: str | None = None
    is_private: bool | None = Field(default=None, alias="isPrivate")


class StaticSiteUserProvidedFunctionAppProperties(AppServiceModel):
    function_app_resource_id: str | None = Field(default=None, alias="functionAppResourceId")
    function_app_region: str | None = Field(default=None, alias="functionAppRegion")
    created_on: AwareDatetime | None = Field(default=None, alias="createdOn")


class StaticSiteUserProvidedFunctionApp(ProxyOnlyResource):
    properties: StaticSiteUserProvidedFunctionAppProperties | None = None


class StaticSiteLinkedBackend(AppServiceModel):
    backend_resource_id: str | None = Field(default=None, alias="backendResourceId")
    region: str | None = None
    created_on: AwareDatetime | None = Field(default=None, alias="createdOn")
    provisioning_state: str | None = Field(default=None, alias="provisioningState")


class StaticSite(AppServiceModel):
    """Properties of a static site."""

    default_hostname: str | None = Field(default=None, alias="defaultHostname")
    repository_url: str | None = Field(default=None, alias="repositoryUrl")
    branch: str | None = None
    custom_domains: list[str] = Field(default_factory=list, alias="customDomains")
    repository_token: str | None = Field(default=None, alias="repositoryToken")
    build_properties: StaticSiteBuildProperties | None = Field(
        default=None, alias="buildProperties"
    )
    private_endpoint_connections: list[dict[str, Any]] = Field(
        default_factory=list, alias="privateEndpointConnections"
    )
    staging_environment_policy: StagingEnvironmentPolicy | None = Field(
        default=None, alias="stagingEnvironmentPolicy"
    )
    allow_config_file_updates: bool | None = Field(default=None, alias="allowConfigFileUpdates")
    template_properties: StaticSiteTemplateOptions | None = Field(
        default=None, alias="templateProperties"
    )
    content_distribution_endpoint: str | None = Field(
        default=None, alias="contentDistributionEndpoint"
    )
    key_vault_reference_identity: str | None = Field(
        default=None, alias="keyVaultReferenceIdentity"
    )
    user_provided_function_apps: list[StaticSiteUserProvidedFunctionApp] = Field(
        default_factory=list, alias="userProvidedFunctionApps"
    )
    linked_backends: list[StaticSiteLinkedBackend] = Field(
        default_factory=list, alias="linkedBackends"
    )
    provider: str | None = None
    enterprise_grade_cdn_status: EnterpriseGradeCdnStatus | None = Field(
        default=None, alias="enterpriseGradeCdnStatus"
    )
    public_network_access: str | None = Field(default=None, alias="publicNetworkAccess")


class StaticSiteARMResource(Resource):
    """Static site resource envelope."""

    properties: StaticSite | None = None
    sku: SkuDescription | None = None
    identity: ManagedServiceIdentity | None = None


class StaticSiteCollection(PagedCollection[StaticSiteARMResource]):
    pass


class StaticSiteCustomDomainOverviewProperties(AppServiceModel):
    domain_name: str | None = Field(default=None, alias="domainName")
    created_on: AwareDatetime | None = Field(default=None, alias="createdOn")
    status: CustomDomainStatus | None = None
    validation_token: str | None = Field(default=None, alias="validationToken")
    error_message: str | None = Field(default=None, alias="errorMessage")


class StaticSiteCustomDomainOverviewARMResource(ProxyOnlyResource):
    properties: StaticSiteCustomDomainOverviewProperties | None = None


class StaticSiteCustomDomainOverviewCollection(
    PagedCollection[StaticSiteCustomDomainOverviewARMResource]
):
    """Page of custom domains attached to a static site."""


__all__ = [
    "StaticSite",
    "StaticSiteARMResource",
    "StaticSiteBuildProperties",
    "StaticSiteCollection",
    "StaticSiteCustomDomainOverviewARMResource",
    "StaticSiteCustomDomainOverviewCollection",
    "StaticSiteCustomDomainOverviewProperties",
    "StaticSiteLinkedBackend",
    "StaticSiteTemplateOptions",
    "StaticSiteUserProvidedFunctionApp",
    "StaticSiteUserProvidedFunctionAppProperties",
]
