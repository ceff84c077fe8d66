"""Tests for gord/__init__.py package exports."""

import gord
from gord import InvalidUpdateValueError, SqlRepository, UpdateMap


def test_package_exports_expected_names():
    assert set(gord.__all__) == {
        "ID",
        "IdKind",
        "JSON",
        "Date",
        "Time",
        "JSONSlice",
        "JSONType",
        "UPDATE_VALUE_KINDS",
        "UpdateMap",
        "InvalidUpdateValueError",
        "CRUDRepository",
        "Repository",
        "SqlRepository",
        "get_repository",
        "JSONColumn",
        "DateColumn",
        "TimeColumn",
        "JSONSliceColumn",
        "JSONTypeColumn",
    }


def test_every_export_resolves():
    assert all(hasattr(gord, name) for name in gord.__all__)


def test_update_map_importable_from_package():
    assert UpdateMap.__name__ == "UpdateMap"


def test_sql_repository_importable_from_package():
    assert issubclass(SqlRepository, gord.Repository)


def test_invalid_update_value_error_importable_from_package():
    assert issubclass(InvalidUpdateValueError, ValueError)
