"""
Calendar helpers
Day types, month lengths and the remaining-days collaborator used by the
seasonal projection.
"""

import calendar
from datetime import date, datetime, timedelta
from enum import IntEnum
from typing import Any, Callable, Dict, Iterable, Mapping

from .errors import InvalidDateError


class DayType(IntEnum):
    """ISO-8601 weekday, 1 = Monday ... 7 = Sunday"""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, day: date) -> "DayType":
        return cls(day.isoweekday())


def to_date(value: Any) -> date:
    """
    Coerce a series key or accessor result into a date

    Args:
        value: date, datetime, ISO ``YYYY-MM-DD`` string or full ISO
            datetime string (reduced to its date part)

    Returns:
        The calendar day

    Raises:
        InvalidDateError: value is none of the above or does not parse
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError as exc:
            raise InvalidDateError(value) from exc
    raise InvalidDateError(value, f"Expected a date or ISO date string, got {type(value).__name__}")


def days_in_month(day: date) -> int:
    return calendar.monthrange(day.year, day.month)[1]


def is_same_month(left: date, right: date) -> bool:
    return left.year == right.year and left.month == right.month


def remaining_day_type_counts(reference_date: date) -> Dict[DayType, int]:
    """
    Count the days of each weekday left in the month after reference_date

    The reference date itself is not counted. Every DayType is present in the
    result, with 0 when none of that weekday remains.
    """
    counts = {day_type_: 0 for day_type_ in DayType}
    last_day = days_in_month(reference_date)
    current = reference_date
    for _ in range(last_day - reference_date.day):
        current += timedelta(days=1)
        counts[DayType.of(current)] += 1
    return counts


def normalize_series(series: Mapping[Any, Any]) -> Dict[date, Any]:
    """Parse the keys of a date-keyed mapping into dates."""
    return {to_date(key): item for key, item in series.items()}


def index_by_date(items: Iterable[Any], date_accessor: Callable[[Any], Any]) -> Dict[date, Any]:
    """
    Re-key a sequential collection by the date each item carries

    Duplicate dates overwrite each other, the last item wins.
    """
    indexed: Dict[date, Any] = {}
    for item in items:
        indexed[to_date(date_accessor(item))] = item
    return indexed
