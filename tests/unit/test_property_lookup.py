"""
Tests unitarios para lookup_custom_properties.
"""
from app.application.services.property_lookup import lookup_custom_properties
from app.domain.entities.device import PropertyRow


def test_returns_matching_rows_in_dataset_order(property_rows) -> None:
    matches = lookup_custom_properties(property_rows, "SN1")

    assert [m.property_name for m in matches] == ["Location", "CostCenter"]


def test_match_is_case_sensitive(property_rows) -> None:
    assert lookup_custom_properties(property_rows, "sn1") == []


def test_match_is_exact(property_rows) -> None:
    assert lookup_custom_properties(property_rows, "SN") == []
    assert lookup_custom_properties(property_rows, "SN1 ") == []


def test_unknown_serial_returns_empty(property_rows) -> None:
    assert lookup_custom_properties(property_rows, "SN999") == []


def test_missing_serial_returns_empty(property_rows) -> None:
    assert lookup_custom_properties(property_rows, None) == []
    assert lookup_custom_properties(property_rows, "") == []


def test_empty_dataset_returns_empty() -> None:
    assert lookup_custom_properties((), "SN1") == []


def test_rows_with_empty_serial_never_match_missing_serial() -> None:
    dataset = [PropertyRow("", "Location", "A")]

    assert lookup_custom_properties(dataset, "") == []
