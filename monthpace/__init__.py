"""
monthpace - Change classification and month-end projection for dashboards
"""

from .calendar_utils import DayType, remaining_day_type_counts
from .change import ChangeDirection, ChangeResult, PercentageChangeCalculator, compute_change
from .errors import ConfigurationError, InvalidDateError, MonthPaceError
from .projector import MonthlyProjector, extrapolate_linear, extrapolate_seasonal

__all__ = [
    'ChangeDirection',
    'ChangeResult',
    'ConfigurationError',
    'DayType',
    'InvalidDateError',
    'MonthPaceError',
    'MonthlyProjector',
    'PercentageChangeCalculator',
    'compute_change',
    'extrapolate_linear',
    'extrapolate_seasonal',
    'remaining_day_type_counts',
]

__version__ = '0.1.0'
