# tests/test_table.py

import pytest
from datetime import date

from calnep.core.errors import TableError
from calnep.engines.table import BS_TABLE, CalendarTable

def test_table_range():
    assert BS_TABLE.first_year == 1950
    assert BS_TABLE.last_year == 2100
    assert len(BS_TABLE) == 151
    assert BS_TABLE.epoch == date(1893, 4, 12)
    assert 1950 in BS_TABLE and 2100 in BS_TABLE
    assert 1949 not in BS_TABLE and 2101 not in BS_TABLE

def test_month_lengths_lookup():
    assert BS_TABLE.month_lengths(1950) == (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 29, 31)
    assert BS_TABLE.month_lengths(2078) == (31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30)
    assert BS_TABLE.month_lengths(1949) is None
    assert BS_TABLE.month_lengths(2101) is None

@pytest.mark.parametrize("year,month,expected", [
    (1950, 1, 31),
    (1950, 4, 32),
    (2078, 8, 29),
    (2100, 12, 31),
    (2100, 13, None),
    (2000, 0, None),
    (1949, 12, None),
    (2101, 1, None),
])
def test_last_day(year, month, expected):
    assert BS_TABLE.last_day(year, month) == expected

def test_every_month_length_is_plausible():
    for n in BS_TABLE.flattened:
        assert n in (29, 30, 31, 32)

def test_year_lengths_are_auditable():
    assert BS_TABLE.audit() == []
    for year in BS_TABLE.years:
        assert 354 <= BS_TABLE.year_length(year) <= 385

def test_flattened_and_cumulative():
    assert len(BS_TABLE.flattened) == 151 * 12
    assert BS_TABLE.flattened[:12] == BS_TABLE.month_lengths(1950)
    assert BS_TABLE.cumulative[0] == 31
    assert BS_TABLE.cumulative[11] == 365
    assert BS_TABLE.total_days == 55154

def test_offset_of_and_locate_are_inverse_at_month_edges():
    assert BS_TABLE.offset_of(1950, 1, 1) == 0
    assert BS_TABLE.locate(0) == (1950, 1, 1)
    assert BS_TABLE.locate(30) == (1950, 1, 31)
    assert BS_TABLE.locate(31) == (1950, 2, 1)
    assert BS_TABLE.locate(364) == (1950, 12, 31)
    assert BS_TABLE.locate(365) == (1951, 1, 1)
    assert BS_TABLE.offset_of(1976, 9, 16) == 9758

def test_locate_bounds():
    assert BS_TABLE.locate(-1) is None
    assert BS_TABLE.locate(BS_TABLE.total_days - 1) == (2100, 12, 31)
    assert BS_TABLE.locate(BS_TABLE.total_days) is None

def test_from_rows_rejects_bad_data():
    with pytest.raises(TableError):
        CalendarTable.from_rows(2000, [], date(1943, 4, 14))
    with pytest.raises(TableError, match="expected 12"):
        CalendarTable.from_rows(2000, [(31,) * 11], date(1943, 4, 14))
    with pytest.raises(TableError, match="invalid month lengths"):
        CalendarTable.from_rows(2000, [(31,) * 11 + (28,)], date(1943, 4, 14))

def test_audit_flags_implausible_year():
    t = CalendarTable.from_rows(2000, [(29,) * 12, (32,) * 12], date(1943, 4, 14))
    problems = t.audit()
    assert len(problems) == 1
    assert problems[0].startswith("year 2000: 348 days")

def test_table_is_immutable():
    with pytest.raises(AttributeError):
        BS_TABLE.first_year = 1900

def test_is_prefix_of():
    assert BS_TABLE.is_prefix_of(BS_TABLE)
    short = CalendarTable.from_rows(BS_TABLE.first_year, BS_TABLE.rows[:3], BS_TABLE.epoch)
    assert short.is_prefix_of(BS_TABLE)
    assert not BS_TABLE.is_prefix_of(short)
    shifted = CalendarTable.from_rows(BS_TABLE.first_year, BS_TABLE.rows[:3], date(1893, 4, 13))
    assert not shifted.is_prefix_of(BS_TABLE)
    edited = CalendarTable.from_rows(BS_TABLE.first_year, [(30,) * 12] + list(BS_TABLE.rows[1:3]), BS_TABLE.epoch)
    assert not edited.is_prefix_of(BS_TABLE)
