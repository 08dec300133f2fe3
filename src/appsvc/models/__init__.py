"""Re-export typed models for the appsvc package."""

from __future__ import annotations

from .auth import (
    AuthPlatform,
    BlobStorageTokenStore,
    CookieExpiration,
    FileSystemTokenStore,
    ForwardProxy,
    GlobalValidation,
    HttpSettings,
    HttpSettingsRoutes,
    IdentityProviders,
    Login,
    LoginRoutes,
    Nonce,
    SiteAuthSettings,
    SiteAuthSettingsProperties,
    SiteAuthSettingsV2,
    SiteAuthSettingsV2Properties,
    TokenStore,
)
from .backups import (
    BackupItem,
    BackupItemCollection,
    BackupItemProperties,
    BackupRequest,
    BackupRequestProperties,
    BackupSchedule,
    DatabaseBackupSetting,
)
from .base import (
    AppServiceModel,
    PagedCollection,
    ProxyOnlyResource,
    Resource,
    iter_unknown_enum_values,
)
from .certificates import (
    Certificate,
    CertificateCollection,
    CertificatePatchResource,
    CertificateProperties,
)
from .common import (
    DefaultErrorResponse,
    DefaultErrorResponseError,
    DefaultErrorResponseErrorDetailsItem,
    ExtendedLocation,
    HostingEnvironmentProfile,
    ManagedServiceIdentity,
    NameValuePair,
    UserAssignedIdentity,
)
from .domains import (
    Address,
    Contact,
    Domain,
    DomainCollection,
    DomainProperties,
    DomainPurchaseConsent,
    HostName,
    NameIdentifier,
    NameIdentifierCollection,
)
from .enums import (
    AzureResourceType,
    AzureStorageProtocol,
    AzureStorageState,
    AzureStorageType,
    BackupItemStatus,
    BuiltInAuthenticationProvider,
    ClientCertMode,
    ConnectionStringType,
    CookieExpirationConvention,
    CustomDomainStatus,
    CustomHostNameDnsRecordType,
    DatabaseType,
    DefaultAction,
    DnsType,
    DomainStatus,
    EnterpriseGradeCdnStatus,
    ExtensibleEnum,
    ForwardProxyConvention,
    FrequencyUnit,
    FtpsState,
    HostNameType,
    HostType,
    IpFilterTag,
    KeyVaultSecretStatus,
    ManagedPipelineMode,
    ManagedServiceIdentityType,
    ProvisioningState,
    PublishingProfileFormat,
    RedundancyMode,
    RouteType,
    ScmType,
    SiteAvailabilityState,
    SiteLoadBalancing,
    SslState,
    StagingEnvironmentPolicy,
    StatusOptions,
    SupportedTlsVersions,
    UnauthenticatedClientAction,
    UnauthenticatedClientActionV2,
    UsageState,
)
from .hybrid_connections import (
    HybridConnection,
    HybridConnectionCollection,
    HybridConnectionKey,
    HybridConnectionKeyProperties,
    HybridConnectionLimits,
    HybridConnectionLimitsProperties,
    HybridConnectionProperties,
    RelayServiceConnectionEntity,
    RelayServiceConnectionEntityProperties,
)
from .networking import (
    VnetGateway,
    VnetGatewayProperties,
    VnetInfo,
    VnetInfoResource,
    VnetRoute,
    VnetRouteProperties,
)
from .plans import (
    AppServicePlan,
    AppServicePlanCollection,
    AppServicePlanProperties,
    Capability,
    KubeEnvironmentProfile,
    SkuCapacity,
    SkuDescription,
)
from .sites import (
    ApiDefinitionInfo,
    ApiManagementConfig,
    AppInsightsWebAppStackSettings,
    AzureStorageInfoValue,
    CloningInfo,
    ConnStringInfo,
    CorsSettings,
    CsmPublishingProfileOptions,
    Experiments,
    FunctionEnvelope,
    FunctionEnvelopeCollection,
    FunctionEnvelopeProperties,
    GitHubActionWebAppStackSettings,
    HandlerMapping,
    HostNameSslState,
    IpSecurityRestriction,
    RampUpRule,
    Site,
    SiteConfig,
    SiteConfigResource,
    SiteConfigResourceCollection,
    SiteDnsConfig,
    SiteLimits,
    SiteMachineKey,
    SiteProperties,
    SlotSwapStatus,
    StringDictionary,
    VirtualApplication,
    VirtualDirectory,
    WebAppCollection,
    WebAppRuntimeSettings,
)
from .static_sites import (
    StaticSite,
    StaticSiteARMResource,
    StaticSiteBuildProperties,
    StaticSiteCollection,
    StaticSiteCustomDomainOverviewARMResource,
    StaticSiteCustomDomainOverviewCollection,
    StaticSiteCustomDomainOverviewProperties,
    StaticSiteLinkedBackend,
    StaticSiteTemplateOptions,
    StaticSiteUserProvidedFunctionApp,
    StaticSiteUserProvidedFunctionAppProperties,
)

__all__ = [
    "AuthPlatform",
    "BlobStorageTokenStore",
    "CookieExpiration",
    "FileSystemTokenStore",
    "ForwardProxy",
    "GlobalValidation",
    "HttpSettings",
    "HttpSettingsRoutes",
    "IdentityProviders",
    "Login",
    "LoginRoutes",
    "Nonce",
    "SiteAuthSettings",
    "SiteAuthSettingsProperties",
    "SiteAuthSettingsV2",
    "SiteAuthSettingsV2Properties",
    "TokenStore",
    "BackupItem",
    "BackupItemCollection",
    "BackupItemProperties",
    "BackupRequest",
    "BackupRequestProperties",
    "BackupSchedule",
    "DatabaseBackupSetting",
    "AppServiceModel",
    "PagedCollection",
    "ProxyOnlyResource",
    "Resource",
    "iter_unknown_enum_values",
    "Certificate",
    "CertificateCollection",
    "CertificatePatchResource",
    "CertificateProperties",
    "DefaultErrorResponse",
    "DefaultErrorResponseError",
    "DefaultErrorResponseErrorDetailsItem",
    "ExtendedLocation",
    "HostingEnvironmentProfile",
    "ManagedServiceIdentity",
    "NameValuePair",
    "UserAssignedIdentity",
    "Address",
    "Contact",
    "Domain",
    "DomainCollection",
    "DomainProperties",
    "DomainPurchaseConsent",
    "HostName",
    "NameIdentifier",
    "NameIdentifierCollection",
    "AzureResourceType",
    "AzureStorageProtocol",
    "AzureStorageState",
    "AzureStorageType",
    "BackupItemStatus",
    "BuiltInAuthenticationProvider",
    "ClientCertMode",
    "ConnectionStringType",
    "CookieExpirationConvention",
    "CustomDomainStatus",
    "CustomHostNameDnsRecordType",
    "DatabaseType",
    "DefaultAction",
    "DnsType",
    "DomainStatus",
    "EnterpriseGradeCdnStatus",
    "ExtensibleEnum",
    "ForwardProxyConvention",
    "FrequencyUnit",
    "FtpsState",
    "HostNameType",
    "HostType",
    "IpFilterTag",
    "KeyVaultSecretStatus",
    "ManagedPipelineMode",
    "ManagedServiceIdentityType",
    "ProvisioningState",
    "PublishingProfileFormat",
    "RedundancyMode",
    "RouteType",
    "ScmType",
    "SiteAvailabilityState",
    "SiteLoadBalancing",
    "SslState",
    "StagingEnvironmentPolicy",
    "StatusOptions",
    "SupportedTlsVersions",
    "UnauthenticatedClientAction",
    "UnauthenticatedClientActionV2",
    "UsageState",
    "HybridConnection",
    "HybridConnectionCollection",
    "HybridConnectionKey",
    "HybridConnectionKeyProperties",
    "HybridConnectionLimits",
    "HybridConnectionLimitsProperties",
    "HybridConnectionProperties",
    "RelayServiceConnectionEntity",
    "RelayServiceConnectionEntityProperties",
    "VnetGateway",
    "VnetGatewayProperties",
    "VnetInfo",
    "VnetInfoResource",
    "VnetRoute",
    "VnetRouteProperties",
    "AppServicePlan",
    "AppServicePlanCollection",
    "AppServicePlanProperties",
    "Capability",
    "KubeEnvironmentProfile",
    "SkuCapacity",
    "SkuDescription",
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
