"""
Monthly Projector Module
Projects a partial month's cumulative total to a full-month estimate
"""

import logging
from collections import defaultdict
from datetime import date, timedelta
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Union

from .calendar_utils import (
    DayType,
    days_in_month,
    index_by_date,
    is_same_month,
    normalize_series,
    remaining_day_type_counts,
    to_date,
)

LOGGER = logging.getLogger(__name__)

ValueAccessor = Callable[[Any], float]
DateAccessor = Callable[[Any], Any]
RemainingDaysProvider = Callable[[date], Mapping[DayType, int]]
SeriesInput = Union[Mapping[Any, Any], Iterable[Any]]

# Below this day of month there is not a full week of in-month history
FALLBACK_WINDOW_DAYS = 7


def _reference_day(reference_date: Optional[date]) -> date:
    if reference_date is None:
        return date.today()
    return to_date(reference_date)


class MonthlyProjector:
    """Projects monthly totals linearly or with day-of-week seasonality"""

    def __init__(self, remaining_days: Optional[RemainingDaysProvider] = None):
        """
        Initialize projector

        Args:
            remaining_days: Calendar collaborator returning, for a reference
                date, the count of each day type left in its month after it.
                Defaults to calendar_utils.remaining_day_type_counts.
        """
        self.remaining_days = remaining_days or remaining_day_type_counts

    def extrapolate_linear(self,
                           total_so_far: float,
                           reference_date: Optional[date] = None) -> float:
        """
        Project monthly total assuming every day contributes equally

        Args:
            total_so_far: Cumulative value observed so far this month
            reference_date: Day the total runs up to (default: today)

        Returns:
            Projected monthly total
        """
        reference = _reference_day(reference_date)
        days_elapsed = reference.day

        if days_elapsed == 0:
            return 0.0

        return total_so_far / days_elapsed * days_in_month(reference)

    def extrapolate_seasonal(self,
                             current: SeriesInput,
                             fallback: SeriesInput,
                             value_accessor: ValueAccessor,
                             reference_date: Optional[date] = None,
                             date_accessor: Optional[DateAccessor] = None) -> float:
        """
        Project monthly total from per-weekday averages

        Elapsed days of the month feed an average per ISO weekday, which is
        then spread over the weekdays still to come. During the first week
        the averages come from the 7 days before reference_date, taking days
        that fall before the 1st from the fallback series.

        Args:
            current: Current month items keyed by ISO date, or a sequence of
                items when date_accessor is given
            fallback: Previous period items, same shape as current
            value_accessor: Extracts the numeric value from an item
            reference_date: Day of the projection, excluded from the actuals
                (default: today)
            date_accessor: Extracts the date from an item; makes both inputs
                sequences that are re-keyed by date (last duplicate wins)

        Returns:
            Actual total of elapsed days plus the projected remainder

        Raises:
            InvalidDateError: a key or accessor result is not a date
        """
        reference = _reference_day(reference_date)

        if date_accessor is not None:
            current_by_day = index_by_date(current, date_accessor)
            fallback_by_day = index_by_date(fallback, date_accessor)
        else:
            current_by_day = normalize_series(current)
            fallback_by_day = normalize_series(fallback)

        sum_by_day_type: Dict[DayType, float] = defaultdict(float)
        count_by_day_type: Dict[DayType, int] = defaultdict(int)
        extrapolated_total = 0.0

        if reference.day <= FALLBACK_WINDOW_DAYS:
            for days_back in range(1, FALLBACK_WINDOW_DAYS + 1):
                past_day = reference - timedelta(days=days_back)
                day_type = DayType.of(past_day)

                if is_same_month(past_day, reference):
                    value = self._value_for(current_by_day, past_day, value_accessor)
                    extrapolated_total += value
                else:
                    # Fallback days shape the averages but are not actuals
                    value = self._value_for(fallback_by_day, past_day, value_accessor)

                sum_by_day_type[day_type] += value
                count_by_day_type[day_type] += 1
        else:
            for item_day, item in current_by_day.items():
                if item_day.day >= reference.day:
                    continue

                value = float(value_accessor(item))
                # Weekday is taken within the reference month
                day_type = DayType.of(date(reference.year, reference.month, item_day.day))
                sum_by_day_type[day_type] += value
                count_by_day_type[day_type] += 1
                extrapolated_total += value

        for day_type, remaining_count in self.remaining_days(reference).items():
            count = count_by_day_type.get(day_type, 0)
            if count == 0:
                LOGGER.debug(
                    "No samples for %s before %s, skipping %d remaining day(s)",
                    day_type, reference.isoformat(), remaining_count,
                )
                continue
            average = sum_by_day_type[day_type] / count
            extrapolated_total += average * remaining_count

        return extrapolated_total

    @staticmethod
    def _value_for(series: Mapping[date, Any], day: date, value_accessor: ValueAccessor) -> float:
        if day not in series:
            return 0.0
        return float(value_accessor(series[day]))


_DEFAULT_PROJECTOR = MonthlyProjector()


def extrapolate_linear(total_so_far: float, reference_date: Optional[date] = None) -> float:
    return _DEFAULT_PROJECTOR.extrapolate_linear(total_so_far, reference_date)


def extrapolate_seasonal(current: SeriesInput,
                         fallback: SeriesInput,
                         value_accessor: ValueAccessor,
                         reference_date: Optional[date] = None,
                         date_accessor: Optional[DateAccessor] = None) -> float:
    return _DEFAULT_PROJECTOR.extrapolate_seasonal(
        current, fallback, value_accessor, reference_date, date_accessor
    )
