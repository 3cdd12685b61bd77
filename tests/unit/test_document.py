"""Tests for xcresult document accessors."""

from datetime import datetime, timedelta, timezone

import pytest

from xcresult_export.document import (
    document_key,
    find_value,
    get_ref_id,
    get_value,
    get_values,
    has_values,
    parse_date,
    type_name,
)
from xcresult_export.errors import MalformedDocumentError
from xcresult_export.testing import documents


def test_get_value_unwraps_scalar() -> None:
    """Returns the value inside the type envelope."""
    node = {"name": documents.string("LoginTests")}

    assert get_value(node, "name") == "LoginTests"


def test_get_value_raises_for_missing_field() -> None:
    """Raises MalformedDocumentError naming the field and type."""
    node = {"_type": {"_name": "ActionRecord"}}

    with pytest.raises(MalformedDocumentError) as exc_info:
        get_value(node, "actionResult")

    assert exc_info.value.field == "actionResult"
    assert "ActionRecord" in str(exc_info.value)


def test_find_value_returns_none_for_missing_field() -> None:
    """Returns None instead of raising for optional fields."""
    assert find_value({}, "duration") is None


def test_get_values_handles_missing_and_empty_arrays() -> None:
    """Returns an empty list for absent keys and item-less envelopes."""
    node = {"tests": {"_type": {"_name": "Array"}}}

    assert get_values(node, "tests") == []
    assert get_values(node, "subtests") == []
    assert not has_values(node, "tests")


def test_get_ref_id_reads_reference() -> None:
    """Returns the id of a reference."""
    node = {"summaryRef": documents.reference("0~abc")}

    assert get_ref_id(node, "summaryRef") == "0~abc"


def test_type_name() -> None:
    """Returns the declared type name or None."""
    assert type_name(documents.metadata("A/test()")) == "ActionTestMetadata"
    assert type_name({}) is None


def test_parse_date_with_offset() -> None:
    """Parses xcresult timestamps with fractional seconds and offset."""
    parsed = parse_date("2024-03-01T10:15:30.250+0100")

    assert parsed == datetime(
        2024, 3, 1, 10, 15, 30, 250000, tzinfo=timezone(timedelta(hours=1))
    )


def test_parse_date_rejects_garbage() -> None:
    """Raises ValueError for unparsable timestamps."""
    with pytest.raises(ValueError):
        parse_date("yesterday")


def test_document_key_ignores_key_order() -> None:
    """Equal documents produce the same key regardless of key order."""
    first = {"a": 1, "b": {"c": 2}}
    second = {"b": {"c": 2}, "a": 1}

    assert document_key(first) == document_key(second)
    assert document_key(first) != document_key({"a": 2, "b": {"c": 2}})
