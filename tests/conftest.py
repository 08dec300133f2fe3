from __future__ import annotations

import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

# Ensure the repository-local ``src`` directory is importable when the project is
# not installed as a package.
SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    """Point the settings store at a throwaway file and clear env overrides."""

    import appsvc.config as config_module

    path = tmp_path / "config.json"
    monkeypatch.setenv("APPSVC_HOME", str(tmp_path))
    monkeypatch.setattr(config_module, "APPSVC_DIR", str(tmp_path), raising=False)
    monkeypatch.setattr(config_module, "CONFIG_PATH", str(path), raising=False)
    for name in ("APPSVC_LOG_LEVEL", "APPSVC_FAIL_ON_UNKNOWN_ENUMS", "APPSVC_OUTPUT"):
        monkeypatch.delenv(name, raising=False)
    return path


@pytest.fixture
def cli_runner(config_path):
    return CliRunner()


@pytest.fixture
def site_payload() -> dict:
    return {
        "id": "/subscriptions/sub/resourceGroups/rg/providers/Microsoft.Web/sites/contoso",
        "name": "contoso",
        "type": "Microsoft.Web/sites",
        "kind": "app",
        "location": "West Europe",
        "tags": {"env": "prod"},
        "properties": {
            "state": "Running",
            "hostNames": ["contoso.azurewebsites.net"],
            "enabled": True,
            "usageState": "Normal",
            "availabilityState": "Normal",
            "hostNameSslStates": [
                {"name": "contoso.azurewebsites.net", "sslState": "Disabled", "hostType": "Standard"}
            ],
            "serverFarmId": "/subscriptions/sub/resourceGroups/rg/providers/Microsoft.Web/serverfarms/plan",
            "lastModifiedTimeUtc": "2021-02-01T00:00:00Z",
            "siteConfig": {
                "numberOfWorkers": 1,
                "ftpsState": "FtpsOnly",
                "minTlsVersion": "1.2",
                "appSettings": [{"name": "WEBSITE_RUN_FROM_PACKAGE", "value": "1"}],
            },
            "httpsOnly": True,
        },
        "identity": {"type": "SystemAssigned, UserAssigned", "principalId": "p-1"},
    }
