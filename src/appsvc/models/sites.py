"""Typed representations of App Service apps (sites) and their configuration."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import AwareDatetime, Field, field_validator

from .base import AppServiceModel, PagedCollection, ProxyOnlyResource, Resource
from .common import (
    ExtendedLocation,
    HostingEnvironmentProfile,
    ManagedServiceIdentity,
    NameValuePair,
)
from .enums import (
    AzureStorageProtocol,
    AzureStorageState,
    AzureStorageType,
    ClientCertMode,
    ConnectionStringType,
    DefaultAction,
    FtpsState,
    HostType,
    IpFilterTag,
    ManagedPipelineMode,
    PublishingProfileFormat,
    RedundancyMode,
    ScmType,
    SiteAvailabilityState,
    SiteLoadBalancing,
    SslState,
    SupportedTlsVersions,
    UsageState,
)

logger = logging.getLogger(__name__)


class HostNameSslState(AppServiceModel):
    """SSL binding state of a single host name."""

    name: str | None = None
    ssl_state: SslState | None = Field(default=None, alias="sslState")
    virtual_ip: str | None = Field(default=None, alias="virtualIP")
    thumbprint: str | None = None
    to_update: bool | None = Field(default=None, alias="toUpdate")
    host_type: HostType | None = Field(default=None, alias="hostType")


class ConnStringInfo(AppServiceModel):
    name: str | None = None
    connection_string: str | None = Field(default=None, alias="connectionString")
    type: ConnectionStringType | None = None


class CorsSettings(AppServiceModel):
    allowed_origins: list[str] = Field(default_factory=list, alias="allowedOrigins")
    support_credentials: bool | None = Field(default=None, alias="supportCredentials")


class IpSecurityRestriction(AppServiceModel):
    """Inbound access rule evaluated before requests reach the app."""

    ip_address: str | None = Field(default=None, alias="ipAddress")
    subnet_mask: str | None = Field(default=None, alias="subnetMask")
    vnet_subnet_resource_id: str | None = Field(default=None, alias="vnetSubnetResourceId")
    vnet_traffic_tag: int | None = Field(default=None, alias="vnetTrafficTag")
    subnet_traffic_tag: int | None = Field(default=None, alias="subnetTrafficTag")
    action: str | None = None
    tag: IpFilterTag | None = None
    priority: int | None = None
    name: str | None = None
    description: str | None = None
    headers: dict[str, list[str]] | None = None


class SiteLimits(AppServiceModel):
    max_percentage_cpu: float | None = Field(default=None, alias="maxPercentageCpu")
    max_memory_in_mb: int | None = Field(default=None, alias="maxMemoryInMb")
    max_disk_size_in_mb: int | None = Field(default=None, alias="maxDiskSizeInMb")


class VirtualDirectory(AppServiceModel):
    virtual_path: str | None = Field(default=None, alias="virtualPath")
    physical_path: str | None = Field(default=None, alias="physicalPath")


class VirtualApplication(AppServiceModel):
    virtual_path: str | None = Field(default=None, alias="virtualPath")
    physical_path: str | None = Field(default=None, alias="physicalPath")
    preload_enabled: bool | None = Field(default=None, alias="preloadEnabled")
    virtual_directories: list[VirtualDirectory] = Field(
        default_factory=list, alias="virtualDirectories"
    )


class HandlerMapping(AppServiceModel):
    extension: str | None = None
    script_processor: str | None = Field(default=None, alias="scriptProcessor")
    arguments: str | None = None


class AzureStorageInfoValue(AppServiceModel):
    """Azure Files or Blob storage mounted into the app."""

    type: AzureStorageType | None = None
    account_name: str | None = Field(default=None, alias="accountName")
    share_name: str | None = Field(default=None, alias="shareName")
    access_key: str | None = Field(default=None, alias="accessKey")
    mount_path: str | None = Field(default=None, alias="mountPath")
    state: AzureStorageState | None = None
    protocol: AzureStorageProtocol | None = None


class RampUpRule(AppServiceModel):
    action_host_name: str | None = Field(default=None, alias="actionHostName")
    reroute_percentage: float | None = Field(default=None, alias="reroutePercentage")
    change_step: float | None = Field(default=None, alias="changeStep")
    change_interval_in_minutes: int | None = Field(default=None, alias="changeIntervalInMinutes")
    min_reroute_percentage: float | None = Field(default=None, alias="minReroutePercentage")
    max_reroute_percentage: float | None = Field(default=None, alias="maxReroutePercentage")
    change_decision_callback_url: str | None = Field(
        default=None, alias="changeDecisionCallbackUrl"
    )
    name: str | None = None


class Experiments(AppServiceModel):
    ramp_up_rules: list[RampUpRule] = Field(default_factory=list, alias="rampUpRules")


class SiteMachineKey(AppServiceModel):
    validation: str | None = None
    validation_key: str | None = Field(default=None, alias="validationKey")
    decryption: str | None = None
    decryption_key: str | None = Field(default=None, alias="decryptionKey")


class ApiDefinitionInfo(AppServiceModel):
    url: str | None = None


class ApiManagementConfig(AppServiceModel):
    id: str | None = None


class SiteConfig(AppServiceModel):
    """Configuration of an App Service app."""

    number_of_workers: int | None = Field(default=None, alias="numberOfWorkers")
    default_documents: list[str] = Field(default_factory=list, alias="defaultDocuments")
    net_framework_version: str | None = Field(default=None, alias="netFrameworkVersion")
    php_version: str | None = Field(default=None, alias="phpVersion")
    python_version: str | None = Field(default=None, alias="pythonVersion")
    node_version: str | None = Field(default=None, alias="nodeVersion")
    power_shell_version: str | None = Field(default=None, alias="powerShellVersion")
    linux_fx_version: str | None = Field(default=None, alias="linuxFxVersion")
    windows_fx_version: str | None = Field(default=None, alias="windowsFxVersion")
    request_tracing_enabled: bool | None = Field(default=None, alias="requestTracingEnabled")
    request_tracing_expiration_time: AwareDatetime | None = Field(
        default=None, alias="requestTracingExpirationTime"
    )
    remote_debugging_enabled: bool | None = Field(default=None, alias="remoteDebuggingEnabled")
    remote_debugging_version: str | None = Field(default=None, alias="remoteDebuggingVersion")
    http_logging_enabled: bool | None = Field(default=None, alias="httpLoggingEnabled")
    acr_use_managed_identity_creds: bool | None = Field(
        default=None, alias="acrUseManagedIdentityCreds"
    )
    acr_user_managed_identity_id: str | None = Field(
        default=None, alias="acrUserManagedIdentityID"
    )
    logs_directory_size_limit: int | None = Field(default=None, alias="logsDirectorySizeLimit")
    detailed_error_logging_enabled: bool | None = Field(
        default=None, alias="detailedErrorLoggingEnabled"
    )
    publishing_username: str | None = Field(default=None, alias="publishingUsername")
    app_settings: list[NameValuePair] = Field(default_factory=list, alias="appSettings")
    metadata: list[NameValuePair] = Field(default_factory=list)
    connection_strings: list[ConnStringInfo] = Field(
        default_factory=list, alias="connectionStrings"
    )
    machine_key: SiteMachineKey | None = Field(default=None, alias="machineKey")
    handler_mappings: list[HandlerMapping] = Field(default_factory=list, alias="handlerMappings")
    document_root: str | None = Field(default=None, alias="documentRoot")
    scm_type: ScmType | None = Field(default=None, alias="scmType")
    use32_bit_worker_process: bool | None = Field(default=None, alias="use32BitWorkerProcess")
    web_sockets_enabled: bool | None = Field(default=None, alias="webSocketsEnabled")
    always_on: bool | None = Field(default=None, alias="alwaysOn")
    java_version: str | None = Field(default=None, alias="javaVersion")
    java_container: str | None = Field(default=None, alias="javaContainer")
    java_container_version: str | None = Field(default=None, alias="javaContainerVersion")
    app_command_line: str | None = Field(default=None, alias="appCommandLine")
    managed_pipeline_mode: ManagedPipelineMode | None = Field(
        default=None, alias="managedPipelineMode"
    )
    virtual_applications: list[VirtualApplication] = Field(
        default_factory=list, alias="virtualApplications"
    )
    load_balancing: SiteLoadBalancing | None = Field(default=None, alias="loadBalancing")
    experiments: Experiments | None = None
    limits: SiteLimits | None = None
    auto_heal_enabled: bool | None = Field(default=None, alias="autoHealEnabled")
    tracing_options: str | None = Field(default=None, alias="tracingOptions")
    vnet_name: str | None = Field(default=None, alias="vnetName")
    vnet_route_all_enabled: bool | None = Field(default=None, alias="vnetRouteAllEnabled")
    vnet_private_ports_count: int | None = Field(default=None, alias="vnetPrivatePortsCount")
    cors: CorsSettings | None = None
    is_push_enabled: bool | None = Field(default=None, alias="isPushEnabled")
    api_definition: ApiDefinitionInfo | None = Field(default=None, alias="apiDefinition")
    api_management_config: ApiManagementConfig | None = Field(
        default=None, alias="apiManagementConfig"
    )
    auto_swap_slot_name: str | None = Field(default=None, alias="autoSwapSlotName")
    local_my_sql_enabled: bool | None = Field(default=None, alias="localMySqlEnabled")
    managed_service_identity_id: int | None = Field(
        default=None, alias="managedServiceIdentityId"
    )
    x_managed_service_identity_id: int | None = Field(
        default=None, alias="xManagedServiceIdentityId"
    )
    key_vault_reference_identity: str | None = Field(
        default=None, alias="keyVaultReferenceIdentity"
    )
    ip_security_restrictions: list[IpSecurityRestriction] = Field(
        default_factory=list, alias="ipSecurityRestrictions"
    )
    ip_security_restrictions_default_action: DefaultAction | None = Field(
        default=None, alias="ipSecurityRestrictionsDefaultAction"
    )
    scm_ip_security_restrictions: list[IpSecurityRestriction] = Field(
        default_factory=list, alias="scmIpSecurityRestrictions"
    )
    scm_ip_security_restrictions_default_action: DefaultAction | None = Field(
        default=None, alias="scmIpSecurityRestrictionsDefaultAction"
    )
    scm_ip_security_restrictions_use_main: bool | None = Field(
        default=None, alias="scmIpSecurityRestrictionsUseMain"
    )
    http20_enabled: bool | None = Field(default=None, alias="http20Enabled")
    min_tls_version: SupportedTlsVersions | None = Field(default=None, alias="minTlsVersion")
    scm_min_tls_version: SupportedTlsVersions | None = Field(
        default=None, alias="scmMinTlsVersion"
    )
    ftps_state: FtpsState | None = Field(default=None, alias="ftpsState")
    pre_warmed_instance_count: int | None = Field(default=None, alias="preWarmedInstanceCount")
    function_app_scale_limit: int | None = Field(default=None, alias="functionAppScaleLimit")
    health_check_path: str | None = Field(default=None, alias="healthCheckPath")
    functions_runtime_scale_monitoring_enabled: bool | None = Field(
        default=None, alias="functionsRuntimeScaleMonitoringEnabled"
    )
    website_time_zone: str | None = Field(default=None, alias="websiteTimeZone")
    minimum_elastic_instance_count: int | None = Field(
        default=None, alias="minimumElasticInstanceCount"
    )
    azure_storage_accounts: dict[str, AzureStorageInfoValue] | None = Field(
        default=None, alias="azureStorageAccounts"
    )
    public_network_access: str | None = Field(default=None, alias="publicNetworkAccess")


class SiteDnsConfig(AppServiceModel):
    dns_servers: list[str] = Field(default_factory=list, alias="dnsServers")
    dns_alt_server: str | None = Field(default=None, alias="dnsAltServer")
    dns_retry_attempt_timeout: int | None = Field(default=None, alias="dnsRetryAttemptTimeout")
    dns_retry_attempt_count: int | None = Field(default=None, alias="dnsRetryAttemptCount")
    dns_max_cache_timeout: int | None = Field(default=None, alias="dnsMaxCacheTimeout")
    dns_legacy_sort_order: bool | None = Field(default=None, alias="dnsLegacySortOrder")


class CloningInfo(AppServiceModel):
    """Source app and options used when creating an app as a clone."""

    correlation_id: str | None = Field(default=None, alias="correlationId")
    overwrite: bool | None = None
    clone_custom_host_names: bool | None = Field(default=None, alias="cloneCustomHostNames")
    clone_source_control: bool | None = Field(default=None, alias="cloneSourceControl")
    source_web_app_id: str = Field(alias="sourceWebAppId")
    source_web_app_location: str | None = Field(default=None, alias="sourceWebAppLocation")
    hosting_environment: str | None = Field(default=None, alias="hostingEnvironment")
    app_settings_overrides: dict[str, str] | None = Field(
        default=None, alias="appSettingsOverrides"
    )
    configure_load_balancing: bool | None = Field(default=None, alias="configureLoadBalancing")
    traffic_manager_profile_id: str | None = Field(default=None, alias="trafficManagerProfileId")
    traffic_manager_profile_name: str | None = Field(
        default=None, alias="trafficManagerProfileName"
    )


class SlotSwapStatus(AppServiceModel):
    timestamp_utc: AwareDatetime | None = Field(default=None, alias="timestampUtc")
    source_slot_name: str | None = Field(default=None, alias="sourceSlotName")
    destination_slot_name: str | None = Field(default=None, alias="destinationSlotName")


class SiteProperties(AppServiceModel):
    state: str | None = None
    host_names: list[str] = Field(default_factory=list, alias="hostNames")
    repository_site_name: str | None = Field(default=None, alias="repositorySiteName")
    usage_state: UsageState | None = Field(default=None, alias="usageState")
    enabled: bool | None = None
    enabled_host_names: list[str] = Field(default_factory=list, alias="enabledHostNames")
    availability_state: SiteAvailabilityState | None = Field(
        default=None, alias="availabilityState"
    )
    host_name_ssl_states: list[HostNameSslState] = Field(
        default_factory=list, alias="hostNameSslStates"
    )
    server_farm_id: str | None = Field(default=None, alias="serverFarmId")
    reserved: bool | None = None
    is_xenon: bool | None = Field(default=None, alias="isXenon")
    hyper_v: bool | None = Field(default=None, alias="hyperV")
    last_modified_time_utc: AwareDatetime | None = Field(default=None, alias="lastModifiedTimeUtc")
    vnet_route_all_enabled: bool | None = Field(default=None, alias="vnetRouteAllEnabled")
    vnet_image_pull_enabled: bool | None = Field(default=None, alias="vnetImagePullEnabled")
    vnet_content_share_enabled: bool | None = Field(default=None, alias="vnetContentShareEnabled")
    site_config: SiteConfig | None = Field(default=None, alias="siteConfig")
    dns_configuration: SiteDnsConfig | None = Field(default=None, alias="dnsConfiguration")
    traffic_manager_host_names: list[str] = Field(
        default_factory=list, alias="trafficManagerHostNames"
    )
    scm_site_also_stopped: bool | None = Field(default=None, alias="scmSiteAlsoStopped")
    target_swap_slot: str | None = Field(default=None, alias="targetSwapSlot")
    hosting_environment_profile: HostingEnvironmentProfile | None = Field(
        default=None, alias="hostingEnvironmentProfile"
    )
    client_affinity_enabled: bool | None = Field(default=None, alias="clientAffinityEnabled")
    client_cert_enabled: bool | None = Field(default=None, alias="clientCertEnabled")
    client_cert_mode: ClientCertMode | None = Field(default=None, alias="clientCertMode")
    client_cert_exclusion_paths: str | None = Field(
        default=None, alias="clientCertExclusionPaths"
    )
    host_names_disabled: bool | None = Field(default=None, alias="hostNamesDisabled")
    custom_domain_verification_id: str | None = Field(
        default=None, alias="customDomainVerificationId"
    )
    outbound_ip_addresses: str | None = Field(default=None, alias="outboundIpAddresses")
    possible_outbound_ip_addresses: str | None = Field(
        default=None, alias="possibleOutboundIpAddresses"
    )
    container_size: int | None = Field(default=None, alias="containerSize")
    daily_memory_time_quota: int | None = Field(default=None, alias="dailyMemoryTimeQuota")
    suspended_till: AwareDatetime | None = Field(default=None, alias="suspendedTill")
    max_number_of_workers: int | None = Field(default=None, alias="maxNumberOfWorkers")
    cloning_info: CloningInfo | None = Field(default=None, alias="cloningInfo")
    resource_group: str | None = Field(default=None, alias="resourceGroup")
    is_default_container: bool | None = Field(default=None, alias="isDefaultContainer")
    default_host_name: str | None = Field(default=None, alias="defaultHostName")
    slot_swap_status: SlotSwapStatus | None = Field(default=None, alias="slotSwapStatus")
    https_only: bool | None = Field(default=None, alias="httpsOnly")
    redundancy_mode: RedundancyMode | None = Field(default=None, alias="redundancyMode")
    in_progress_operation_id: str | None = Field(default=None, alias="inProgressOperationId")
    storage_account_required: bool | None = Field(default=None, alias="storageAccountRequired")
    key_vault_reference_identity: str | None = Field(
        default=None, alias="keyVaultReferenceIdentity"
    )
    virtual_network_subnet_id: str | None = Field(default=None, alias="virtualNetworkSubnetId")
    public_network_access: str | None = Field(default=None, alias="publicNetworkAccess")


class Site(Resource):
    """A web, mobile, API or function app."""

    properties: SiteProperties | None = None
    identity: ManagedServiceIdentity | None = None
    extended_location: ExtendedLocation | None = Field(default=None, alias="extendedLocation")


class WebAppCollection(PagedCollection[Site]):
    """Page of App Service apps."""


class SiteConfigResource(ProxyOnlyResource):
    properties: SiteConfig | None = None


class SiteConfigResourceCollection(PagedCollection[SiteConfigResource]):
    pass


class StringDictionary(ProxyOnlyResource):
    """App settings or metadata as a flat string dictionary."""

    properties: dict[str, str] | None = None


class CsmPublishingProfileOptions(AppServiceModel):
    """Options for requesting a publishing profile."""

    format: PublishingProfileFormat | None = None
    include_disaster_recovery_endpoints: bool | None = Field(
        default=None, alias="includeDisasterRecoveryEndpoints"
    )


class FunctionEnvelopeProperties(AppServiceModel):
    function_app_id: str | None = None
    script_root_path_href: str | None = None
    script_href: str | None = None
    config_href: str | None = None
    test_data_href: str | None = None
    secrets_file_href: str | None = None
    href: str | None = None
    config: Any = None
    files: dict[str, str] | None = None
    test_data: str | None = None
    invoke_url_template: str | None = None
    language: str | None = None
    is_disabled: bool | None = None


class FunctionEnvelope(ProxyOnlyResource):
    """Function information; ``config`` is the raw function.json document."""

    properties: FunctionEnvelopeProperties | None = None


class FunctionEnvelopeCollection(PagedCollection[FunctionEnvelope]):
    pass


class AppInsightsWebAppStackSettings(AppServiceModel):
    is_supported: bool | None = Field(default=None, alias="isSupported")
    is_default_off: bool | None = Field(default=None, alias="isDefaultOff")


class GitHubActionWebAppStackSettings(AppServiceModel):
    is_supported: bool | None = Field(default=None, alias="isSupported")
    supported_version: str | None = Field(default=None, alias="supportedVersion")


class WebAppRuntimeSettings(AppServiceModel):
    """Runtime settings for one version of a web app stack."""

    runtime_version: str | None = Field(default=None, alias="runtimeVersion")
    remote_debugging_supported: bool | None = Field(
        default=None, alias="remoteDebuggingSupported"
    )
    app_insights_settings: AppInsightsWebAppStackSettings | None = Field(
        default=None, alias="appInsightsSettings"
    )
    git_hub_action_settings: GitHubActionWebAppStackSettings | None = Field(
        default=None, alias="gitHubActionSettings"
    )
    is_preview: bool | None = Field(default=None, alias="isPreview")
    is_deprecated: bool | None = Field(default=None, alias="isDeprecated")
    is_hidden: bool | None = Field(default=None, alias="isHidden")
    end_of_life_date: AwareDatetime | None = Field(default=None, alias="endOfLifeDate")
    is_auto_update: bool | None = Field(default=None, alias="isAutoUpdate")
    is_early_access: bool | None = Field(default=None, alias="isEarlyAccess")

    @field_validator("is_deprecated", mode="before")
    @classmethod
    def _collapse_list_flag(cls, value: Any) -> Any:
        # Older API descriptions declare this flag as an array of booleans.
        if isinstance(value, list) and all(isinstance(item, bool) for item in value):
            logger.debug("Collapsing list-typed isDeprecated value %r", value)
            return any(value) if value else None
        return value


__all__ = [
    "ApiDefinitionInfo",
    "ApiManagementConfig",
    "AppInsightsWebAppStackSettings",
    "AzureStorageInfoValue",
    "CloningInfo",
    "ConnStringInfo",
    "CorsSettings",
    "CsmPublishingProfileOptions",
    "Experiments",
    "FunctionEnvelope",
    "FunctionEnvelopeCollection",
    "FunctionEnvelopeProperties",
    "GitHubActionWebAppStackSettings",
    "HandlerMapping",
    "HostNameSslState",
    "IpSecurityRestriction",
    "RampUpRule",
    "Site",
    "SiteConfig",
    "SiteConfigResource",
    "SiteConfigResourceCollection",
    "SiteDnsConfig",
    "SiteLimits",
    "SiteMachineKey",
    "SiteProperties",
    "SlotSwapStatus",
    "StringDictionary",
    "VirtualApplication",
    "VirtualDirectory",
    "WebAppCollection",
    "WebAppRuntimeSettings",
]
