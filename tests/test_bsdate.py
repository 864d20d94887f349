"""Tests for BSDate construction, parsing and ordering."""

from __future__ import annotations

import pytest
from dataclasses import FrozenInstanceError
from datetime import date, timedelta

from calnep import BSDate, DateRangeError, InvalidDateError

def test_construction_and_accessors():
    b = BSDate(2078, 6, 31)
    assert (b.year, b.month, b.day) == (2078, 6, 31)
    assert b.month_name == "Ashoj"
    assert b.days_in_month == 31

@pytest.mark.parametrize("month,name", [
    (1, "Baishakh"), (2, "Jestha"), (3, "Asar"), (4, "Shrawan"),
    (5, "Bhadra"), (6, "Ashoj"), (7, "Kartik"), (8, "Mangsir"),
    (9, "Poush"), (10, "Magh"), (11, "Falgun"), (12, "Chaitra"),
])
def test_month_names(month, name):
    assert BSDate(2000, month, 1).month_name == name

@pytest.mark.parametrize("year,month,day", [
    (1949, 12, 30),   # before the table
    (2101, 1, 1),     # after the table
    (2000, 0, 1),
    (2000, 13, 1),
    (2000, 1, 0),
    (2078, 8, 30),    # Mangsir 2078 has 29 days
    (1950, 1, 32),
])
def test_invalid_construction_is_refused(year, month, day):
    assert not BSDate.is_valid(year, month, day)
    assert BSDate.validated(year, month, day) is None
    with pytest.raises(InvalidDateError):
        BSDate(year, month, day)

def test_invalid_date_error_is_value_error():
    with pytest.raises(ValueError):
        BSDate(2000, 13, 1)

def test_non_integer_fields_are_refused():
    assert BSDate.validated("2000", 1, 1) is None
    assert BSDate.validated(2000.0, 1, 1) is None
    assert BSDate.validated(2000, True, 1) is None

def test_month_32_days():
    assert BSDate.validated(1950, 4, 32) == BSDate(1950, 4, 32)

def test_parse_canonical():
    assert BSDate.parse("2072-06-03") == BSDate(2072, 6, 3)
    assert BSDate.parse("1950-01-01") == BSDate(1950, 1, 1)
    assert BSDate.parse("2100-12-31") == BSDate(2100, 12, 31)

@pytest.mark.parametrize("text", [
    "",
    "2072-6-3",
    "72-06-03",
    "2072/06/03",
    "2072-06-03 ",
    " 2072-06-03",
    "2072-06-03T00:00",
    "x2072-06-03",
    "2072-13-01",
    "2078-08-30",
    "1949-01-01",
    "२०७२-०६-०३",
])
def test_parse_rejects(text):
    assert BSDate.parse(text) is None

def test_parse_non_string():
    assert BSDate.parse(None) is None
    assert BSDate.parse(20720603) is None

def test_fromisoformat():
    assert BSDate.fromisoformat("2081-01-01") == BSDate(2081, 1, 1)
    with pytest.raises(InvalidDateError):
        BSDate.fromisoformat("2081-01-32")

def test_canonical_string():
    b = BSDate(2000, 1, 2)
    assert b.isoformat() == "2000-01-02"
    assert str(b) == "2000-01-02"
    assert BSDate.parse(str(b)) == b

def test_equality_and_hash():
    assert BSDate(1976, 9, 16) == BSDate(1976, 9, 16)
    assert BSDate(1976, 9, 16) != BSDate(1976, 9, 17)
    assert len({BSDate(1976, 9, 16), BSDate(1976, 9, 16)}) == 1

def test_ordering_matches_canonical_string():
    dates = [
        BSDate(2078, 1, 1),
        BSDate(1950, 12, 31),
        BSDate(2078, 10, 2),
        BSDate(2078, 9, 29),
        BSDate(1951, 1, 1),
    ]
    assert sorted(dates) == sorted(dates, key=str)
    assert BSDate(1950, 12, 31) < BSDate(1951, 1, 1)
    assert BSDate(2078, 9, 29) < BSDate(2078, 10, 2)

def test_immutable_and_replace_revalidates():
    b = BSDate(2078, 6, 31)
    with pytest.raises(FrozenInstanceError):
        b.day = 1
    assert b.replace(month=5) == BSDate(2078, 5, 31)
    with pytest.raises(InvalidDateError):
        b.replace(month=8)   # Mangsir 2078 has 29 days
    assert b == BSDate(2078, 6, 31)

def test_ad_property():
    assert BSDate(2072, 6, 3).ad == date(2015, 9, 20)
    assert BSDate.from_ad(date(2015, 9, 20)) == BSDate(2072, 6, 3)
    assert BSDate.from_ad(date(1893, 4, 11)) is None

def test_day_arithmetic():
    b = BSDate(1950, 1, 31)
    assert b + timedelta(days=1) == BSDate(1950, 2, 1)
    assert timedelta(days=1) + b == BSDate(1950, 2, 1)
    assert BSDate(1951, 1, 1) - timedelta(days=1) == BSDate(1950, 12, 31)
    assert BSDate(1976, 9, 17) - BSDate(1976, 9, 16) == timedelta(days=1)
    assert BSDate(1951, 1, 1) - BSDate(1950, 1, 1) == timedelta(days=365)

def test_day_arithmetic_out_of_range():
    with pytest.raises(DateRangeError):
        BSDate(1950, 1, 1) - timedelta(days=1)
    with pytest.raises(OverflowError):
        BSDate(2100, 12, 31) + timedelta(days=1)

@pytest.mark.parametrize("delta", [
    timedelta(hours=1),
    timedelta(hours=-1),
    timedelta(days=1, seconds=1),
    timedelta(microseconds=1),
])
def test_sub_day_deltas_are_refused(delta):
    b = BSDate(2000, 5, 5)
    with pytest.raises(ValueError):
        b + delta
    with pytest.raises(ValueError):
        b - delta
