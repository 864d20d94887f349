# tests/test_conversion.py

import logging
import pytest
import random
from datetime import date, timedelta

import calnep
from calnep import BSDate, DateRangeError, TableError
from calnep.engines.calendar import BSCalendar
from calnep.engines.table import BS_TABLE, CalendarTable

EPOCH = date(1893, 4, 12)
LAST_AD = date(2044, 4, 13)

@pytest.mark.parametrize("ad,bs", [
    (date(1893, 4, 12), (1950, 1, 1)),
    (date(1893, 4, 13), (1950, 1, 2)),
    (date(1919, 12, 31), (1976, 9, 16)),
    (date(1920, 1, 1), (1976, 9, 17)),
    (date(1943, 4, 15), (2000, 1, 2)),
    (date(2015, 9, 20), (2072, 6, 3)),
    (date(2024, 4, 13), (2081, 1, 1)),
    (date(2033, 4, 12), (2089, 12, 30)),
    (date(2044, 4, 13), (2100, 12, 31)),
])
def test_known_conversions(ad, bs):
    b = BSDate(*bs)
    assert calnep.to_bs(ad) == b
    assert calnep.to_ad(b) == ad

def test_before_epoch_is_unrepresentable():
    assert calnep.to_bs(EPOCH - timedelta(days=1)) is None
    assert calnep.to_bs(date(1, 1, 1)) is None

def test_after_table_is_unrepresentable():
    assert calnep.to_bs(LAST_AD + timedelta(days=1)) is None
    assert calnep.to_bs(date(9999, 12, 31)) is None

def test_full_round_trip_over_table():
    """Every AD day covered by the table maps to a BS date and back."""
    prev = None
    d = EPOCH
    for _ in range(BS_TABLE.total_days):
        b = calnep.to_bs(d)
        assert b is not None
        assert calnep.to_ad(b) == d
        if prev is not None:
            assert prev < b
            assert (prev + timedelta(days=1)) == b
        prev = b
        d += timedelta(days=1)
    assert d == LAST_AD + timedelta(days=1)

def test_every_bs_date_round_trips():
    for year in BS_TABLE.years:
        for month in range(1, 13):
            for day in (1, BS_TABLE.last_day(year, month)):
                b = BSDate(year, month, day)
                assert calnep.to_bs(calnep.to_ad(b)) == b

def test_ordering_is_preserved():
    random.seed(42)
    for _ in range(2000):
        a = EPOCH + timedelta(days=random.randint(0, BS_TABLE.total_days - 1))
        c = EPOCH + timedelta(days=random.randint(0, BS_TABLE.total_days - 1))
        ba, bc = calnep.to_bs(a), calnep.to_bs(c)
        assert (ba < bc) == (a < c)
        assert (ba == bc) == (a == c)

def test_month_bounds_and_new_year():
    b = calnep.month_bounds(2081, 1)
    assert b["first_date"] == date(2024, 4, 13)
    assert b["days"] == 31
    assert b["last_date"] == date(2024, 5, 13)
    assert calnep.new_year_day(2081) == date(2024, 4, 13)
    assert calnep.new_year_day(1950) == EPOCH
    with pytest.raises(KeyError):
        calnep.month_bounds(2101, 1)

def test_civil_month_records():
    rows = calnep.civil_month(2078, 8)
    assert len(rows) == 29
    assert rows[0]["bs"] == BSDate(2078, 8, 1)
    assert rows[-1]["bs"] == BSDate(2078, 8, 29)
    for a, b in zip(rows, rows[1:]):
        assert b["date"] - a["date"] == timedelta(days=1)
        assert b["jdn"] - a["jdn"] == 1

def test_day_info_and_explain():
    info = calnep.day_info(date(2015, 9, 20), debug=True)
    assert info.bs == BSDate(2072, 6, 3)
    assert info.civil_date == date(2015, 9, 20)
    assert info.debug["offset"] == 44720
    assert info.attributes is None
    assert calnep.day_info(EPOCH - timedelta(days=1)) is None
    assert calnep.explain(date(2015, 9, 20))["bs"] == BSDate(2072, 6, 3)

def test_calendar_info():
    info = calnep.calendar_info()
    assert info["first_year"] == 1950
    assert info["last_year"] == 2100
    assert info["epoch"] == EPOCH
    assert info["total_days"] == 55154

def test_calendar_over_custom_table():
    # first two years only; same data and epoch as the packaged table
    t = CalendarTable.from_rows(1950, BS_TABLE.rows[:2], EPOCH)
    cal = BSCalendar(t)
    assert cal.to_bs(EPOCH + timedelta(days=365)) == BSDate(1951, 1, 1)
    assert cal.to_bs(EPOCH + timedelta(days=t.total_days)) is None
    assert cal.to_ad(BSDate(1951, 12, 30)) == EPOCH + timedelta(days=t.total_days - 1)

def test_uninitialized_calendar(monkeypatch):
    monkeypatch.setattr(calnep.api, "_calendar", None)
    with pytest.raises(RuntimeError, match="not initialized"):
        calnep.to_bs(EPOCH)

def test_out_of_range_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="calnep")
    assert calnep.to_bs(EPOCH - timedelta(days=1)) is None
    assert "outside the BS table" in caplog.text

def test_custom_table_must_be_prefix_of_packaged_table():
    with pytest.raises(TableError, match="not a prefix"):
        BSCalendar(CalendarTable.from_rows(1950, [(30,) * 12], EPOCH))
    with pytest.raises(TableError):
        BSCalendar(CalendarTable.from_rows(1950, BS_TABLE.rows[:2], EPOCH + timedelta(days=1)))
    with pytest.raises(TableError):
        BSCalendar(CalendarTable.from_rows(1951, BS_TABLE.rows[1:3], date(1894, 4, 12)))

def test_custom_table_refuses_dates_past_its_range():
    cal = BSCalendar(CalendarTable.from_rows(1950, BS_TABLE.rows[:2], EPOCH))
    with pytest.raises(DateRangeError):
        cal.to_ad(BSDate(2000, 1, 1))
    with pytest.raises(KeyError):
        cal.month_bounds(1952, 1)

def test_bootstrap_builds_the_default_calendar():
    from calnep.bootstrap import build_calendar
    from calnep.engines.calendar import default_calendar

    assert build_calendar() is default_calendar()
