from __future__ import annotations

# ruff: noqa: S101
import pytest

from appsvc.errors import DeserializationError
from appsvc.models import (
    AppServicePlanCollection,
    BackupItem,
    BackupItemCollection,
    FunctionEnvelopeCollection,
    WebAppCollection,
)


def test_next_link_is_exposed_as_continuation() -> None:
    page = BackupItemCollection.model_validate({"value": [{"id": "a"}], "nextLink": "X"})

    assert page.continuation() == "X"
    assert len(page) == 1


def test_missing_next_link_means_last_page() -> None:
    page = BackupItemCollection.model_validate({"value": [{"id": "a"}]})

    assert page.continuation() is None
    assert page.to_payload() == {"value": [{"id": "a"}]}


def test_null_next_link_means_last_page() -> None:
    page = FunctionEnvelopeCollection.model_validate_json('{"value": [{"id":"a"}], "nextLink": null}')

    assert [item.id for item in page] == ["a"]
    assert page.next_link is None
    assert page.continuation() is None


def test_empty_next_link_is_treated_as_absent() -> None:
    page = BackupItemCollection.model_validate({"value": [], "nextLink": ""})
    assert page.continuation() is None


def test_value_keeps_service_order() -> None:
    names = ["zeta", "alpha", "mid", "alpha"]
    page = BackupItemCollection.model_validate({"value": [{"name": n} for n in names]})

    assert [item.name for item in page] == names
    assert all(isinstance(item, BackupItem) for item in page.value)


def test_empty_value_is_still_emitted() -> None:
    page = BackupItemCollection(value=[])
    assert page.to_payload() == {"value": []}


def test_next_link_serializes_under_wire_name() -> None:
    page = BackupItemCollection(value=[], next_link="https://example.test/page2")
    assert page.to_payload() == {"value": [], "nextLink": "https://example.test/page2"}


def test_value_is_required() -> None:
    with pytest.raises(DeserializationError) as excinfo:
        BackupItemCollection.from_payload({"nextLink": "X"})
    assert "value" in str(excinfo.value)


def test_items_are_validated_against_the_item_type() -> None:
    with pytest.raises(DeserializationError):
        WebAppCollection.from_payload({"value": [{"name": "no-location"}]})


def test_page_is_immutable() -> None:
    page = AppServicePlanCollection(value=[])
    with pytest.raises(Exception):
        page.next_link = "other"  # type: ignore[misc]


def test_site_page_round_trip(site_payload) -> None:
    page = WebAppCollection.from_payload({"value": [site_payload], "nextLink": "token"})
    again = WebAppCollection.from_payload(page.to_payload())

    assert again == page
    assert again.value[0].properties.site_config.ftps_state.serialize() == "FtpsOnly"


def test_empty_page_with_continuation_is_truthy() -> None:
    page = BackupItemCollection.model_validate({"value": [], "nextLink": "X"})

    assert len(page) == 0
    assert page
    assert page.continuation() == "X"
