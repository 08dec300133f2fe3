from __future__ import annotations

from pydantic import AwareDatetime, Field

from .base import AppServiceModel, PagedCollection, ProxyOnlyResource
from .enums import BackupItemStatus, DatabaseType, FrequencyUnit


class DatabaseBackupSetting(AppServiceModel):
    """Database included in an app backup."""

    database_type: DatabaseType = Field(alias="databaseType")
    name: str | None = None
    connection_string_name: str | None = Field(default=None, alias="connectionStringName")
    connection_string: str | None = Field(default=None, alias="connectionString")


class BackupSchedule(AppServiceModel):
    frequency_interval: int = Field(alias="frequencyInterval")
    frequency_unit: FrequencyUnit = Field(alias="frequencyUnit")
    keep_at_least_one_backup: bool = Field(alias="keepAtLeastOneBackup")
    retention_period_in_days: int = Field(alias="retentionPeriodInDays")
    start_time: AwareDatetime | None = Field(default=None, alias="startTime")
    last_execution_time: AwareDatetime | None = Field(default=None, alias="lastExecutionTime")


class BackupRequestProperties(AppServiceModel):
    backup_name: str | None = Field(default=None, alias="backupName")
    enabled: bool | None = None
    storage_account_url: str = Field(alias="storageAccountUrl")
    backup_schedule: BackupSchedule | None = Field(default=None, alias="backupSchedule")
    databases: list[DatabaseBackupSetting] = Field(default_factory=list)


class BackupRequest(ProxyOnlyResource):
    """Backup description submitted when backing up or scheduling backups."""

    properties: BackupRequestProperties | None = None


class BackupItemProperties(AppServiceModel):
    backup_id: int | None = Field(default=None, alias="id")
    storage_account_url: str | None = Field(default=None, alias="storageAccountUrl")
    blob_name: str | None = Field(default=None, alias="blobName")
    name: str | None = None
    status: BackupItemStatus | None = None
    size_in_bytes: int | None = Field(default=None, alias="sizeInBytes")
    created: AwareDatetime | None = None
    log: str | None = None
    databases: list[DatabaseBackupSetting] = Field(default_factory=list)
    scheduled: bool | None = None
    last_restore_time_stamp: AwareDatetime | None = Field(default=None, alias="lastRestoreTimeStamp")
    finished_time_stamp: AwareDatetime | None = Field(default=None, alias="finishedTimeStamp")
    correlation_id: str | None = Field(default=None, alias="correlationId")
    website_size_in_bytes: int | None = Field(default=None, alias="websiteSizeInBytes")


class BackupItem(ProxyOnlyResource):
    """A completed or running backup of an app."""

    properties: BackupItemProperties | None = None


class BackupItemCollection(PagedCollection[BackupItem]):
    pass


__all__ = [
    "BackupItem",
    "BackupItemCollection",
    "BackupItemProperties",
    "BackupRequest",
    "BackupRequestProperties",
    "BackupSchedule",
    "DatabaseBackupSetting",
]
