"""Authentication / Authorization ("Easy Auth") settings of an app.

Both the classic settings resource and the V2 shape are modelled. Identity
provider blocks in V2 are kept as opaque JSON; their structure differs per
provider and new providers appear without notice.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import AppServiceModel, ProxyOnlyResource
from .enums import (
    BuiltInAuthenticationProvider,
    CookieExpirationConvention,
    ForwardProxyConvention,
    UnauthenticatedClientAction,
    UnauthenticatedClientActionV2,
)


class SiteAuthSettingsProperties(AppServiceModel):
    enabled: bool | None = None
    runtime_version: str | None = Field(default=None, alias="runtimeVersion")
    unauthenticated_client_action: UnauthenticatedClientAction | None = Field(
        default=None, alias="unauthenticatedClientAction"
    )
    token_store_enabled: bool | None = Field(default=None, alias="tokenStoreEnabled")
    allowed_external_redirect_urls: list[str] = Field(
        default_factory=list, alias="allowedExternalRedirectUrls"
    )
    default_provider: BuiltInAuthenticationProvider | None = Field(
        default=None, alias="defaultProvider"
    )
    token_refresh_extension_hours: float | None = Field(
        default=None, alias="tokenRefreshExtensionHours"
    )
    client_id: str | None = Field(default=None, alias="clientId")
    client_secret: str | None = Field(default=None, alias="clientSecret")
    client_secret_setting_name: str | None = Field(default=None, alias="clientSecretSettingName")
    client_secret_certificate_thumbprint: str | None = Field(
        default=None, alias="clientSecretCertificateThumbprint"
    )
    issuer: str | None = None
    validate_issuer: bool | None = Field(default=None, alias="validateIssuer")
    allowed_audiences: list[str] = Field(default_factory=list, alias="allowedAudiences")
    additional_login_params: list[str] = Field(default_factory=list, alias="additionalLoginParams")
    aad_claims_authorization: str | None = Field(default=None, alias="aadClaimsAuthorization")
    google_client_id: str | None = Field(default=None, alias="googleClientId")
    google_client_secret: str | None = Field(default=None, alias="googleClientSecret")
    google_oauth_scopes: list[str] = Field(default_factory=list, alias="googleOAuthScopes")
    facebook_app_id: str | None = Field(default=None, alias="facebookAppId")
    facebook_app_secret: str | None = Field(default=None, alias="facebookAppSecret")
    facebook_oauth_scopes: list[str] = Field(default_factory=list, alias="facebookOAuthScopes")
    git_hub_client_id: str | None = Field(default=None, alias="gitHubClientId")
    git_hub_client_secret: str | None = Field(default=None, alias="gitHubClientSecret")
    git_hub_oauth_scopes: list[str] = Field(default_factory=list, alias="gitHubOAuthScopes")
    twitter_consumer_key: str | None = Field(default=None, alias="twitterConsumerKey")
    twitter_consumer_secret: str | None = Field(default=None, alias="twitterConsumerSecret")
    microsoft_account_client_id: str | None = Field(
        default=None, alias="microsoftAccountClientId"
    )
    microsoft_account_client_secret: str | None = Field(
        default=None, alias="microsoftAccountClientSecret"
    )
    microsoft_account_oauth_scopes: list[str] = Field(
        default_factory=list, alias="microsoftAccountOAuthScopes"
    )
    is_auth_from_file: str | None = Field(default=None, alias="isAuthFromFile")
    auth_file_path: str | None = Field(default=None, alias="authFilePath")
    config_version: str | None = Field(default=None, alias="configVersion")


class SiteAuthSettings(ProxyOnlyResource):
    """Classic authentication settings of an app."""

    properties: SiteAuthSettingsProperties | None = None


class AuthPlatform(AppServiceModel):
    enabled: bool | None = None
    runtime_version: str | None = Field(default=None, alias="runtimeVersion")
    config_file_path: str | None = Field(default=None, alias="configFilePath")


class GlobalValidation(AppServiceModel):
    require_authentication: bool | None = Field(default=None, alias="requireAuthentication")
    unauthenticated_client_action: UnauthenticatedClientActionV2 | None = Field(
        default=None, alias="unauthenticatedClientAction"
    )
    redirect_to_provider: str | None = Field(default=None, alias="redirectToProvider")
    excluded_paths: list[str] = Field(default_factory=list, alias="excludedPaths")


class IdentityProviders(AppServiceModel):
    azure_active_directory: dict[str, Any] | None = Field(
        default=None, alias="azureActiveDirectory"
    )
    facebook: dict[str, Any] | None = None
    git_hub: dict[str, Any] | None = Field(default=None, alias="gitHub")
    google: dict[str, Any] | None = None
    twitter: dict[str, Any] | None = None
    apple: dict[str, Any] | None = None
    azure_static_web_apps: dict[str, Any] | None = Field(
        default=None, alias="azureStaticWebApps"
    )
    custom_open_id_connect_providers: dict[str, Any] | None = Field(
        default=None, alias="customOpenIdConnectProviders"
    )


class LoginRoutes(AppServiceModel):
    logout_endpoint: str | None = Field(default=None, alias="logoutEndpoint")


class FileSystemTokenStore(AppServiceModel):
    directory: str | None = None


class BlobStorageTokenStore(AppServiceModel):
    sas_url_setting_name: str | None = Field(default=None, alias="sasUrlSettingName")


class TokenStore(AppServiceModel):
    enabled: bool | None = None
    token_refresh_extension_hours: float | None = Field(
        default=None, alias="tokenRefreshExtensionHours"
    )
    file_system: FileSystemTokenStore | None = Field(default=None, alias="fileSystem")
    azure_blob_storage: BlobStorageTokenStore | None = Field(
        default=None, alias="azureBlobStorage"
    )


class CookieExpiration(AppServiceModel):
    convention: CookieExpirationConvention | None = None
    time_to_expiration: str | None = Field(default=None, alias="timeToExpiration")


class Nonce(AppServiceModel):
    validate_nonce: bool | None = Field(default=None, alias="validateNonce")
    nonce_expiration_interval: str | None = Field(default=None, alias="nonceExpirationInterval")


class Login(AppServiceModel):
    routes: LoginRoutes | None = None
    token_store: TokenStore | None = Field(default=None, alias="tokenStore")
    preserve_url_fragments_for_logins: bool | None = Field(
        default=None, alias="preserveUrlFragmentsForLogins"
    )
    allowed_external_redirect_urls: list[str] = Field(
        default_factory=list, alias="allowedExternalRedirectUrls"
    )
    cookie_expiration: CookieExpiration | None = Field(default=None, alias="cookieExpiration")
    nonce: Nonce | None = None


class HttpSettingsRoutes(AppServiceModel):
    api_prefix: str | None = Field(default=None, alias="apiPrefix")


class ForwardProxy(AppServiceModel):
    convention: ForwardProxyConvention | None = None
    custom_host_header_name: str | None = Field(default=None, alias="customHostHeaderName")
    custom_proto_header_name: str | None = Field(default=None, alias="customProtoHeaderName")


class HttpSettings(AppServiceModel):
    require_https: bool | None = Field(default=None, alias="requireHttps")
    routes: HttpSettingsRoutes | None = None
    forward_proxy: ForwardProxy | None = Field(default=None, alias="forwardProxy")


class SiteAuthSettingsV2Properties(AppServiceModel):
    platform: AuthPlatform | None = None
    global_validation: GlobalValidation | None = Field(default=None, alias="globalValidation")
    identity_providers: IdentityProviders | None = Field(
        default=None, alias="identityProviders"
    )
    login: Login | None = None
    http_settings: HttpSettings | None = Field(default=None, alias="httpSettings")


class SiteAuthSettingsV2(ProxyOnlyResource):
    """Authentication settings in the V2 format."""

    properties: SiteAuthSettingsV2Properties | None = None


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
]
