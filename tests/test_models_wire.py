from __future__ import annotations

# ruff: noqa: S101
import logging
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from appsvc.errors import DeserializationError
from appsvc.models import (
    Address,
    AppServicePlan,
    BackupRequest,
    CloningInfo,
    CorsSettings,
    FunctionEnvelope,
    IpSecurityRestriction,
    ProxyOnlyResource,
    Resource,
    Site,
    SiteConfig,
    SiteProperties,
    SkuDescription,
    VnetInfo,
    WebAppRuntimeSettings,
    iter_unknown_enum_values,
)


def test_postal_code_uses_wire_name() -> None:
    address = Address(
        address1="1 Main St", city="Redmond", country="US", postal_code="98052", state="WA"
    )

    payload = address.to_payload()
    assert payload["postalCode"] == "98052"
    assert "postal_code" not in payload
    assert "address2" not in payload


def test_models_accept_python_and_wire_names() -> None:
    by_wire = CorsSettings.model_validate({"supportCredentials": True})
    by_name = CorsSettings(support_credentials=True)
    assert by_wire == by_name


def test_absent_optionals_are_omitted() -> None:
    assert SiteConfig().to_payload() == {}
    assert SiteConfig(number_of_workers=2).to_payload() == {"numberOfWorkers": 2}


def test_null_list_reads_as_empty_and_empty_list_is_omitted() -> None:
    cors = CorsSettings.model_validate({"allowedOrigins": None})

    assert cors.allowed_origins == []
    assert cors.to_payload() == {}


def test_non_empty_list_is_emitted() -> None:
    cors = CorsSettings(allowed_origins=["https://portal.azure.com"])
    assert cors.to_payload() == {"allowedOrigins": ["https://portal.azure.com"]}


def test_required_field_missing_is_a_hard_failure() -> None:
    with pytest.raises(DeserializationError) as excinfo:
        CloningInfo.from_payload({"overwrite": True})

    error = excinfo.value
    assert error.model == "CloningInfo"
    assert "sourceWebAppId" in str(error)
    assert error.errors and error.errors[0]["type"] == "missing"
    assert error.__cause__ is not None


def test_required_fields_are_always_emitted() -> None:
    info = CloningInfo(source_web_app_id="/subscriptions/x/sites/src")
    assert info.to_payload() == {"sourceWebAppId": "/subscriptions/x/sites/src"}


def test_tracked_resource_requires_location() -> None:
    with pytest.raises(DeserializationError):
        Site.from_payload({"name": "contoso"})
    site = Site(location="westus")
    assert site.to_payload() == {"location": "westus"}


def test_proxy_resource_has_no_location_or_tags() -> None:
    assert "location" not in ProxyOnlyResource.model_fields
    assert "tags" not in ProxyOnlyResource.model_fields
    assert issubclass(FunctionEnvelope, ProxyOnlyResource)
    assert issubclass(AppServicePlan, Resource)


def test_datetime_is_rfc3339_on_the_wire(site_payload) -> None:
    site = Site.from_payload(site_payload)

    assert site.properties.last_modified_time_utc == datetime(2021, 2, 1, tzinfo=timezone.utc)
    assert site.to_payload()["properties"]["lastModifiedTimeUtc"] == "2021-02-01T00:00:00Z"


def test_site_round_trip_keeps_every_field(site_payload) -> None:
    site = Site.from_payload(site_payload)

    assert site.to_payload() == site_payload
    assert Site.from_payload(site.to_payload()) == site


def test_unknown_wire_properties_survive(site_payload) -> None:
    site_payload["properties"]["someFutureFlag"] = {"nested": [1, 2]}
    site_payload["zones"] = ["1"]

    site = Site.from_payload(site_payload)
    payload = site.to_payload()

    assert payload["zones"] == ["1"]
    assert payload["properties"]["someFutureFlag"] == {"nested": [1, 2]}


def test_opaque_json_passes_through() -> None:
    config = {"bindings": [{"type": "httpTrigger", "authLevel": "function"}], "disabled": False}
    envelope = FunctionEnvelope.from_payload(
        {"id": "f1", "properties": {"config": config, "function_app_id": "app"}}
    )

    assert envelope.properties.config == config
    assert envelope.to_payload()["properties"] == {"config": config, "function_app_id": "app"}


def test_wrong_json_type_is_rejected() -> None:
    with pytest.raises(DeserializationError):
        SkuDescription.from_payload({"capacity": "lots"})


def test_from_json_rejects_malformed_body() -> None:
    with pytest.raises(DeserializationError):
        SiteConfig.from_json(b"{not json")


def test_models_are_immutable() -> None:
    rule = IpSecurityRestriction(ip_address="10.0.0.0/8")
    with pytest.raises(Exception):
        rule.ip_address = "0.0.0.0/0"  # type: ignore[misc]


def test_nested_required_fields_are_enforced() -> None:
    with pytest.raises(DeserializationError) as excinfo:
        BackupRequest.from_payload({"properties": {"backupName": "nightly"}})
    assert "storageAccountUrl" in str(excinfo.value)


def test_unknown_enum_values_are_reported_with_paths(site_payload) -> None:
    site_payload["properties"]["siteConfig"]["ftpsState"] = "QuantumOnly"
    site_payload["properties"]["siteConfig"]["ipSecurityRestrictions"] = [
        {"ipAddress": "1.2.3.4/32", "tag": "Default"},
        {"ipAddress": "5.6.7.8/32", "tag": "Private"},
    ]
    site = Site.from_payload(site_payload)

    findings = list(iter_unknown_enum_values(site))

    assert ("properties.site_config.ftps_state", "FtpsState", "QuantumOnly") in findings
    assert (
        "properties.site_config.ip_security_restrictions[1].tag",
        "IpFilterTag",
        "Private",
    ) in findings
    assert len(findings) == 2


def test_no_findings_for_known_values(site_payload) -> None:
    assert list(iter_unknown_enum_values(Site.from_payload(site_payload))) == []


def test_vnet_routes_null_list() -> None:
    info = VnetInfo.from_payload({"vnetResourceId": "/vnet", "routes": None})
    assert info.routes == []
    assert info.to_payload() == {"vnetResourceId": "/vnet"}


@pytest.mark.parametrize(
    ("raw", "expected"),
    [([True], True), ([False, False], False), ([], None), (True, True), (None, None)],
)
def test_list_typed_deprecation_flag_is_collapsed(raw, expected) -> None:
    settings = WebAppRuntimeSettings.from_payload({"runtimeVersion": "18", "isDeprecated": raw})
    assert settings.is_deprecated is expected


def test_deprecation_flag_collapse_is_logged(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="appsvc.models.sites"):
        WebAppRuntimeSettings.from_payload({"isDeprecated": [True]})
    assert "isDeprecated" in caplog.text


@pytest.mark.parametrize("raw", [[{"x": 1}], ["no"], ["false"], [1, 0]])
def test_deprecation_flag_list_of_non_booleans_is_rejected(raw) -> None:
    with pytest.raises(DeserializationError) as excinfo:
        WebAppRuntimeSettings.from_payload({"isDeprecated": raw})
    assert "isDeprecated" in str(excinfo.value)


def test_datetime_without_offset_is_rejected() -> None:
    with pytest.raises(DeserializationError) as excinfo:
        SiteProperties.from_payload({"lastModifiedTimeUtc": "2021-02-01T00:00:00"})
    assert "lastModifiedTimeUtc" in str(excinfo.value)


def test_naive_datetime_cannot_be_constructed() -> None:
    with pytest.raises(ValidationError):
        SiteProperties(last_modified_time_utc=datetime(2021, 2, 1))


def test_datetime_offset_is_kept_on_the_wire() -> None:
    props = SiteProperties.from_payload({"lastModifiedTimeUtc": "2021-02-01T10:30:00+02:00"})
    assert props.to_payload() == {"lastModifiedTimeUtc": "2021-02-01T10:30:00+02:00"}
