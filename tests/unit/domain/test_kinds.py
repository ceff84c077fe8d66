"""Tests for gord/domain/models/kinds.py."""

import pytest

from gord.domain.models.kinds import IdKind, is_identifier


# --- is_identifier ---

@pytest.mark.parametrize("value", [0, -5, 2**70, "abc", ""])
def test_is_identifier_accepts_int_and_str(value):
    assert is_identifier(value)


@pytest.mark.parametrize("value", [True, False, 1.0, None, b"1", [1]])
def test_is_identifier_rejects_other_kinds(value):
    assert not is_identifier(value)


# --- IdKind.bounds ---

def test_uint8_bounds():
    assert IdKind.UINT8.bounds == (0, 255)


def test_int16_bounds():
    assert IdKind.INT16.bounds == (-32768, 32767)


def test_string_has_no_bounds():
    assert IdKind.STRING.bounds is None


def test_every_integer_kind_has_bounds():
    assert all(kind.bounds is not None for kind in IdKind if kind is not IdKind.STRING)


# --- IdKind.contains ---

def test_uint8_contains_upper_bound():
    assert IdKind.UINT8.contains(255)


def test_uint8_rejects_overflow():
    assert not IdKind.UINT8.contains(256)


def test_unsigned_rejects_negative():
    assert not IdKind.UINT64.contains(-1)


def test_int8_contains_lower_bound():
    assert IdKind.INT8.contains(-128)


def test_int64_rejects_string():
    assert not IdKind.INT64.contains("1")


def test_int_rejects_bool():
    assert not IdKind.INT.contains(True)


def test_string_contains_str():
    assert IdKind.STRING.contains("widget-1")


def test_string_rejects_int():
    assert not IdKind.STRING.contains(1)


def test_id_kind_is_string_comparable():
    assert IdKind.UINT32 == "uint32"
