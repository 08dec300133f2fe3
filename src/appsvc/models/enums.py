"""String enums used by the App Service models.

Two flavours live here. Closed enums are plain ``str`` enums: a value the
service did not document fails validation. Extensible enums derive from
:class:`ExtensibleEnum` and accept any string. Values known when this package
was built resolve to regular members; anything else becomes an *unknown*
member that carries the raw string and serializes back to it unchanged::

    >>> FtpsState.parse("FtpsOnly") is FtpsState.FTPS_ONLY
    True
    >>> state = FtpsState.parse("SomeNewValue")
    >>> state.is_unknown, state.serialize()
    (True, 'SomeNewValue')
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, core_schema

logger = logging.getLogger(__name__)


def _serialize_member(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class ExtensibleEnum(str, Enum):
    """Base class for open string enums that round-trip unknown values."""

    @classmethod
    def parse(cls, raw: str) -> Any:
        """Return the member for ``raw``; never raises for a string input."""

        return cls(raw)

    @classmethod
    def known_values(cls) -> list[str]:
        """Documented wire constants, in declaration order."""

        return [member.value for member in cls]

    @classmethod
    def _missing_(cls, value: object) -> Any:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = None
        member._value_ = value
        logger.debug("Captured unrecognised %s value %r", cls.__name__, value)
        return member

    @property
    def is_unknown(self) -> bool:
        return self._name_ is None

    def serialize(self) -> str:
        return self._value_

    def __str__(self) -> str:
        return self._value_

    def __repr__(self) -> str:
        if self.is_unknown:
            return f"<{type(self).__name__} (unknown): {self._value_!r}>"
        return f"<{type(self).__name__}.{self._name_}: {self._value_!r}>"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls.parse,
            core_schema.str_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_member, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema = handler.resolve_ref_schema(handler(schema))
        json_schema["title"] = cls.__name__
        json_schema["examples"] = cls.known_values()
        json_schema["x-ms-enum"] = {"name": cls.__name__, "modelAsString": True}
        return json_schema


# Extensible enums -------------------------------------------------------------------


class FtpsState(ExtensibleEnum):
    ALL_ALLOWED = "AllAllowed"
    FTPS_ONLY = "FtpsOnly"
    DISABLED = "Disabled"


class SupportedTlsVersions(ExtensibleEnum):
    """Minimum TLS version accepted by a site or its SCM endpoint."""

    TLS1_0 = "1.0"
    TLS1_1 = "1.1"
    TLS1_2 = "1.2"


class ScmType(ExtensibleEnum):
    NONE = "None"
    DROPBOX = "Dropbox"
    TFS = "Tfs"
    LOCAL_GIT = "LocalGit"
    GIT_HUB = "GitHub"
    CODE_PLEX_GIT = "CodePlexGit"
    CODE_PLEX_HG = "CodePlexHg"
    BITBUCKET_GIT = "BitbucketGit"
    BITBUCKET_HG = "BitbucketHg"
    EXTERNAL_GIT = "ExternalGit"
    EXTERNAL_HG = "ExternalHg"
    ONE_DRIVE = "OneDrive"
    VSO = "VSO"
    VSTSRM = "VSTSRM"


class DatabaseType(ExtensibleEnum):
    SQL_AZURE = "SqlAzure"
    MY_SQL = "MySql"
    LOCAL_MY_SQL = "LocalMySql"
    POSTGRE_SQL = "PostgreSql"


class RouteType(ExtensibleEnum):
    """How a virtual network route was added to the app."""

    DEFAULT = "DEFAULT"
    INHERITED = "INHERITED"
    STATIC = "STATIC"


class IpFilterTag(ExtensibleEnum):
    DEFAULT = "Default"
    XFF_PROXY = "XffProxy"
    SERVICE_TAG = "ServiceTag"


class PublishingProfileFormat(ExtensibleEnum):
    FILE_ZILLA3 = "FileZilla3"
    WEB_DEPLOY = "WebDeploy"
    FTP = "Ftp"


class ManagedServiceIdentityType(ExtensibleEnum):
    SYSTEM_ASSIGNED = "SystemAssigned"
    USER_ASSIGNED = "UserAssigned"
    SYSTEM_ASSIGNED_USER_ASSIGNED = "SystemAssigned, UserAssigned"
    NONE = "None"


class DefaultAction(ExtensibleEnum):
    ALLOW = "Allow"
    DENY = "Deny"


class EnterpriseGradeCdnStatus(ExtensibleEnum):
    ENABLED = "Enabled"
    ENABLING = "Enabling"
    DISABLED = "Disabled"
    DISABLING = "Disabling"


class CustomDomainStatus(ExtensibleEnum):
    RETRIEVING_VALIDATION_TOKEN = "RetrievingValidationToken"
    VALIDATING = "Validating"
    ADDING = "Adding"
    READY = "Ready"
    FAILED = "Failed"
    DELETING = "Deleting"
    UNHEALTHY = "Unhealthy"


class AzureStorageProtocol(ExtensibleEnum):
    SMB = "Smb"
    HTTP = "Http"
    NFS = "Nfs"


# Closed enums -----------------------------------------------------------------------


class SiteAvailabilityState(str, Enum):
    NORMAL = "Normal"
    LIMITED = "Limited"
    DISASTER_RECOVERY_MODE = "DisasterRecoveryMode"


class UsageState(str, Enum):
    NORMAL = "Normal"
    EXCEEDED = "Exceeded"


class SslState(str, Enum):
    DISABLED = "Disabled"
    SNI_ENABLED = "SniEnabled"
    IP_BASED_ENABLED = "IpBasedEnabled"


class HostType(str, Enum):
    STANDARD = "Standard"
    REPOSITORY = "Repository"


class ClientCertMode(str, Enum):
    REQUIRED = "Required"
    OPTIONAL = "Optional"
    OPTIONAL_INTERACTIVE_USER = "OptionalInteractiveUser"


class RedundancyMode(str, Enum):
    NONE = "None"
    MANUAL = "Manual"
    FAILOVER = "Failover"
    ACTIVE_ACTIVE = "ActiveActive"
    GEO_REDUNDANT = "GeoRedundant"


class ProvisioningState(str, Enum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    IN_PROGRESS = "InProgress"
    DELETING = "Deleting"


class StatusOptions(str, Enum):
    READY = "Ready"
    PENDING = "Pending"
    CREATING = "Creating"


class ConnectionStringType(str, Enum):
    MY_SQL = "MySql"
    SQL_SERVER = "SQLServer"
    SQL_AZURE = "SQLAzure"
    CUSTOM = "Custom"
    NOTIFICATION_HUB = "NotificationHub"
    SERVICE_BUS = "ServiceBus"
    EVENT_HUB = "EventHub"
    API_HUB = "ApiHub"
    DOC_DB = "DocDb"
    REDIS_CACHE = "RedisCache"
    POSTGRE_SQL = "PostgreSQL"


class ManagedPipelineMode(str, Enum):
    INTEGRATED = "Integrated"
    CLASSIC = "Classic"


class SiteLoadBalancing(str, Enum):
    WEIGHTED_ROUND_ROBIN = "WeightedRoundRobin"
    LEAST_REQUESTS = "LeastRequests"
    LEAST_RESPONSE_TIME = "LeastResponseTime"
    WEIGHTED_TOTAL_TRAFFIC = "WeightedTotalTraffic"
    REQUEST_HASH = "RequestHash"
    PER_SITE_ROUND_ROBIN = "PerSiteRoundRobin"


class FrequencyUnit(str, Enum):
    DAY = "Day"
    HOUR = "Hour"


class BackupItemStatus(str, Enum):
    IN_PROGRESS = "InProgress"
    FAILED = "Failed"
    SUCCEEDED = "Succeeded"
    TIMED_OUT = "TimedOut"
    CREATED = "Created"
    SKIPPED = "Skipped"
    PARTIALLY_SUCCEEDED = "PartiallySucceeded"
    DELETE_IN_PROGRESS = "DeleteInProgress"
    DELETE_FAILED = "DeleteFailed"
    DELETED = "Deleted"


class UnauthenticatedClientAction(str, Enum):
    REDIRECT_TO_LOGIN_PAGE = "RedirectToLoginPage"
    ALLOW_ANONYMOUS = "AllowAnonymous"


class UnauthenticatedClientActionV2(str, Enum):
    REDIRECT_TO_LOGIN_PAGE = "RedirectToLoginPage"
    ALLOW_ANONYMOUS = "AllowAnonymous"
    RETURN401 = "Return401"
    RETURN403 = "Return403"


class BuiltInAuthenticationProvider(str, Enum):
    AZURE_ACTIVE_DIRECTORY = "AzureActiveDirectory"
    FACEBOOK = "Facebook"
    GOOGLE = "Google"
    MICROSOFT_ACCOUNT = "MicrosoftAccount"
    TWITTER = "Twitter"
    GITHUB = "Github"


class ForwardProxyConvention(str, Enum):
    NO_PROXY = "NoProxy"
    STANDARD = "Standard"
    CUSTOM = "Custom"


class CookieExpirationConvention(str, Enum):
    FIXED_TIME = "FixedTime"
    IDENTITY_PROVIDER_DERIVED = "IdentityProviderDerived"


class DomainStatus(str, Enum):
    ACTIVE = "Active"
    AWAITING = "Awaiting"
    CANCELLED = "Cancelled"
    CONFISCATED = "Confiscated"
    DISABLED = "Disabled"
    EXCLUDED = "Excluded"
    EXPIRED = "Expired"
    FAILED = "Failed"
    HELD = "Held"
    LOCKED = "Locked"
    PARKED = "Parked"
    PENDING = "Pending"
    RESERVED = "Reserved"
    REVERTED = "Reverted"
    SUSPENDED = "Suspended"
    TRANSFERRED = "Transferred"
    UNKNOWN = "Unknown"
    UNLOCKED = "Unlocked"
    UNPARKED = "Unparked"
    UPDATED = "Updated"
    JSON_CONVERTER_FAILED = "JsonConverterFailed"


class DnsType(str, Enum):
    AZURE_DNS = "AzureDns"
    DEFAULT_DOMAIN_REGISTRAR_DNS = "DefaultDomainRegistrarDns"


class AzureResourceType(str, Enum):
    WEBSITE = "Website"
    TRAFFIC_MANAGER = "TrafficManager"


class CustomHostNameDnsRecordType(str, Enum):
    C_NAME = "CName"
    A = "A"


class HostNameType(str, Enum):
    VERIFIED = "Verified"
    MANAGED = "Managed"


class KeyVaultSecretStatus(str, Enum):
    INITIALIZED = "Initialized"
    WAITING_ON_CERTIFICATE_ORDER = "WaitingOnCertificateOrder"
    SUCCEEDED = "Succeeded"
    CERTIFICATE_ORDER_FAILED = "CertificateOrderFailed"
    OPERATION_NOT_PERMITTED_ON_KEY_VAULT = "OperationNotPermittedOnKeyVault"
    AZURE_SERVICE_UNAUTHORIZED_TO_ACCESS_KEY_VAULT = "AzureServiceUnauthorizedToAccessKeyVault"
    KEY_VAULT_DOES_NOT_EXIST = "KeyVaultDoesNotExist"
    KEY_VAULT_SECRET_DOES_NOT_EXIST = "KeyVaultSecretDoesNotExist"
    UNKNOWN_ERROR = "UnknownError"
    EXTERNAL_PRIVATE_KEY = "ExternalPrivateKey"
    UNKNOWN = "Unknown"


class AzureStorageType(str, Enum):
    AZURE_FILES = "AzureFiles"
    AZURE_BLOB = "AzureBlob"


class AzureStorageState(str, Enum):
    OK = "Ok"
    INVALID_CREDENTIALS = "InvalidCredentials"
    INVALID_SHARE = "InvalidShare"
    NOT_VALIDATED = "NotValidated"


class StagingEnvironmentPolicy(str, Enum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"


__all__ = [
    "ExtensibleEnum",
    "FtpsState",
    "SupportedTlsVersions",
    "ScmType",
    "DatabaseType",
    "RouteType",
    "IpFilterTag",
    "PublishingProfileFormat",
    "ManagedServiceIdentityType",
    "DefaultAction",
    "EnterpriseGradeCdnStatus",
    "CustomDomainStatus",
    "AzureStorageProtocol",
    "SiteAvailabilityState",
    "UsageState",
    "SslState",
    "HostType",
    "ClientCertMode",
    "RedundancyMode",
    "ProvisioningState",
    "StatusOptions",
    "ConnectionStringType",
    "ManagedPipelineMode",
    "SiteLoadBalancing",
    "FrequencyUnit",
    "BackupItemStatus",
    "UnauthenticatedClientAction",
    "UnauthenticatedClientActionV2",
    "BuiltInAuthenticationProvider",
    "ForwardProxyConvention",
    "CookieExpirationConvention",
    "DomainStatus",
    "DnsType",
    "AzureResourceType",
    "CustomHostNameDnsRecordType",
    "HostNameType",
    "KeyVaultSecretStatus",
    "AzureStorageType",
    "AzureStorageState",
    "StagingEnvironmentPolicy",
]
