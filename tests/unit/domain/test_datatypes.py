"""Tests for gord/domain/models/datatypes.py."""

from datetime import date, datetime, time

import pytest

from gord.domain.models.datatypes import JSON, Date, JSONSlice, JSONType, Time


# --- JSON ---

def test_json_dumps_encodes_document():
    assert JSON.dumps({"a": 1}) == '{"a": 1}'


def test_json_dumps_returns_json_kind():
    assert isinstance(JSON.dumps([1, 2]), JSON)


def test_json_data_decodes_document():
    assert JSON('{"a": [1, 2]}').data() == {"a": [1, 2]}


# --- Date ---

def test_date_of_drops_time_component():
    result = Date.of(datetime(2024, 3, 1, 15, 30))
    assert result == date(2024, 3, 1)
    assert type(result) is Date


def test_date_is_a_date():
    assert isinstance(Date(2024, 1, 1), date)


# --- Time ---

def test_time_of_datetime_keeps_time_of_day():
    assert Time.of(datetime(2024, 3, 1, 15, 30, 5)) == time(15, 30, 5)


def test_time_of_returns_time_kind():
    assert type(Time.of(time(8, 0))) is Time


def test_time_from_seconds():
    assert Time.from_seconds(3661.5) == time(1, 1, 1, 500000)


def test_time_from_seconds_rejects_full_day():
    with pytest.raises(ValueError):
        Time.from_seconds(86400)


def test_time_from_seconds_rejects_negative():
    with pytest.raises(ValueError):
        Time.from_seconds(-1)


def test_time_to_seconds():
    assert Time(1, 1, 1, 500000).to_seconds() == 3661.5


# --- JSONSlice / JSONType ---

def test_json_slice_behaves_as_list():
    tags = JSONSlice(["a", "b"])
    tags.append("c")
    assert tags == ["a", "b", "c"]


def test_json_slice_is_distinct_from_plain_list():
    assert not isinstance(["a"], JSONSlice)


def test_json_type_dumps_data():
    assert JSONType({"k": "v"}).dumps() == '{"k": "v"}'


def test_json_type_is_frozen():
    doc = JSONType({"k": "v"})
    with pytest.raises(AttributeError):
        doc.data = {}  # type: ignore[misc]
