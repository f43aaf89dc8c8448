from datetime import date, datetime, timedelta

import pytest

from monthpace.calendar_utils import (
    DayType,
    days_in_month,
    index_by_date,
    normalize_series,
    remaining_day_type_counts,
    to_date,
)
from monthpace.errors import InvalidDateError, MonthPaceError


def test_day_type_follows_iso_weekday():
    assert DayType.of(date(2024, 1, 1)) is DayType.MONDAY
    assert DayType.of(date(2024, 1, 7)) is DayType.SUNDAY
    assert DayType.of(date(2023, 12, 27)) is DayType.WEDNESDAY
    assert int(DayType.SUNDAY) == 7


def test_days_in_month_handles_leap_years():
    assert days_in_month(date(2024, 2, 10)) == 29
    assert days_in_month(date(2023, 2, 10)) == 28
    assert days_in_month(date(1900, 2, 1)) == 28
    assert days_in_month(date(2000, 2, 1)) == 29
    assert days_in_month(date(2024, 4, 30)) == 30
    assert days_in_month(date(2024, 12, 1)) == 31


def test_remaining_counts_mid_month():
    counts = remaining_day_type_counts(date(2024, 1, 15))
    assert counts == {
        DayType.MONDAY: 2,
        DayType.TUESDAY: 3,
        DayType.WEDNESDAY: 3,
        DayType.THURSDAY: 2,
        DayType.FRIDAY: 2,
        DayType.SATURDAY: 2,
        DayType.SUNDAY: 2,
    }


def test_remaining_counts_last_day_is_all_zero():
    counts = remaining_day_type_counts(date(2024, 1, 31))
    assert set(counts) == set(DayType)
    assert sum(counts.values()) == 0


def test_remaining_counts_sum_to_days_left_for_every_day_of_2024():
    day = date(2024, 1, 1)
    while day.year == 2024:
        counts = remaining_day_type_counts(day)
        assert sum(counts.values()) == days_in_month(day) - day.day, day
        day += timedelta(days=1)


@pytest.mark.parametrize(
    "value, expected",
    [
        (date(2024, 1, 15), date(2024, 1, 15)),
        (datetime(2024, 1, 15, 8, 30), date(2024, 1, 15)),
        ("2024-01-15", date(2024, 1, 15)),
        ("2024-01-15T08:30:00", date(2024, 1, 15)),
        (" 2024-01-15 ", date(2024, 1, 15)),
    ],
)
def test_to_date_accepts_dates_and_iso_strings(value, expected):
    assert to_date(value) == expected


@pytest.mark.parametrize(
    "value", ["", "2024-02-30", "15/01/2024", "2024-01-15garbage", "2024-01-15 extra", 20240115, None]
)
def test_to_date_rejects_everything_else(value):
    with pytest.raises(InvalidDateError) as excinfo:
        to_date(value)
    assert excinfo.value.value == value
    assert isinstance(excinfo.value, MonthPaceError)
    assert isinstance(excinfo.value, ValueError)


def test_normalize_series_parses_keys():
    series = normalize_series({"2024-01-02": "b", date(2024, 1, 1): "a"})
    assert series == {date(2024, 1, 1): "a", date(2024, 1, 2): "b"}


def test_index_by_date_last_write_wins():
    items = [("2024-01-01", 1), ("2024-01-02", 2), ("2024-01-01", 3)]
    indexed = index_by_date(items, lambda item: item[0])
    assert indexed == {date(2024, 1, 1): ("2024-01-01", 3), date(2024, 1, 2): ("2024-01-02", 2)}
