from __future__ import annotations

# ruff: noqa: S101
import logging

import pytest
from pydantic import BaseModel

from appsvc.errors import DeserializationError
from appsvc.models import (
    FtpsState,
    ManagedServiceIdentityType,
    SiteConfig,
    SslState,
    SupportedTlsVersions,
)
from appsvc.models.enums import ExtensibleEnum
from appsvc.registry import is_extensible, list_enums

EXTENSIBLE = [enum_type for enum_type in list_enums() if is_extensible(enum_type)]


@pytest.mark.parametrize("enum_type", EXTENSIBLE, ids=lambda e: e.__name__)
def test_known_members_parse_back_to_themselves(enum_type) -> None:
    for member in enum_type:
        assert enum_type.parse(member.serialize()) is member
        assert not member.is_unknown


@pytest.mark.parametrize("enum_type", EXTENSIBLE, ids=lambda e: e.__name__)
def test_unrecognised_string_is_preserved(enum_type) -> None:
    value = enum_type.parse("Totally-New value 42")
    assert value.is_unknown
    assert value.serialize() == "Totally-New value 42"
    assert isinstance(value, enum_type)


def test_ftps_state_accepts_new_service_value() -> None:
    value = FtpsState.parse("SomeNewValue")

    assert value.is_unknown
    assert value.serialize() == "SomeNewValue"
    assert str(value) == "SomeNewValue"
    assert value == "SomeNewValue"
    assert "unknown" in repr(value)


def test_matching_is_case_sensitive() -> None:
    assert FtpsState.parse("FtpsOnly") is FtpsState.FTPS_ONLY
    lowered = FtpsState.parse("ftpsonly")
    assert lowered.is_unknown
    assert lowered.serialize() == "ftpsonly"


def test_empty_string_is_captured_not_rejected() -> None:
    value = FtpsState.parse("")
    assert value.is_unknown
    assert value.serialize() == ""


def test_wire_constant_differs_from_identifier() -> None:
    assert SupportedTlsVersions.parse("1.2") is SupportedTlsVersions.TLS1_2
    assert SupportedTlsVersions.TLS1_2.serialize() == "1.2"
    combined = ManagedServiceIdentityType.parse("SystemAssigned, UserAssigned")
    assert combined is ManagedServiceIdentityType.SYSTEM_ASSIGNED_USER_ASSIGNED


def test_known_values_keep_declaration_order() -> None:
    assert FtpsState.known_values() == ["AllAllowed", "FtpsOnly", "Disabled"]


def test_unknown_values_do_not_join_the_member_list() -> None:
    FtpsState.parse("Transient")
    assert "Transient" not in FtpsState.known_values()
    assert len(list(FtpsState)) == 3


def test_unknown_value_is_logged_at_debug(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="appsvc.models.enums"):
        FtpsState.parse("Whatever")
    assert "Whatever" in caplog.text


class _Holder(BaseModel):
    state: FtpsState | None = None


def test_model_field_round_trips_unknown_value() -> None:
    holder = _Holder.model_validate({"state": "BrandNew"})

    assert holder.state is not None and holder.state.is_unknown
    assert holder.model_dump() == {"state": "BrandNew"}
    assert holder.model_dump_json() == '{"state":"BrandNew"}'


def test_known_member_serializes_as_plain_string() -> None:
    holder = _Holder(state=FtpsState.DISABLED)
    dumped = holder.model_dump()
    assert dumped == {"state": "Disabled"}
    assert type(dumped["state"]) is str


def test_non_string_enum_value_is_a_hard_failure() -> None:
    with pytest.raises(DeserializationError) as excinfo:
        SiteConfig.from_payload({"ftpsState": 3})
    assert "ftpsState" in str(excinfo.value)


def test_closed_enum_rejects_unknown_value() -> None:
    assert not issubclass(SslState, ExtensibleEnum)
    with pytest.raises(ValueError):
        SslState("NotAState")


def test_json_schema_lists_known_values() -> None:
    schema = _Holder.model_json_schema()
    state = schema["properties"]["state"]["anyOf"][0]
    assert state["type"] == "string"
    assert state["examples"] == ["AllAllowed", "FtpsOnly", "Disabled"]
    assert state["x-ms-enum"]["modelAsString"] is True
