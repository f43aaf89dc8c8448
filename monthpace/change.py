"""
Percentage Change Module
Classifies an observed value against a reference as up, down or equal
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


DEFAULT_EQUALITY_THRESHOLD = 1.0


class ChangeDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    EQUAL = "equal"


@dataclass(frozen=True)
class ChangeResult:
    """Rate of change in percent (2 decimals) and its direction"""

    value: float
    direction: ChangeDirection

    def to_dict(self) -> Dict:
        return {
            'value': self.value,
            'direction': self.direction.value,
        }


class PercentageChangeCalculator:
    """Computes relative change with a tolerance band around the reference"""

    def __init__(self, equality_threshold: float = DEFAULT_EQUALITY_THRESHOLD):
        """
        Initialize calculator

        Args:
            equality_threshold: Percent band around the reference treated as
                "equal" (default 1.0, i.e. ±1%)
        """
        self.equality_threshold = equality_threshold

    def compute_change(self,
                       data: float,
                       reference: float,
                       equality_threshold: Optional[float] = None) -> ChangeResult:
        """
        Compute the percentage change of data against reference

        A zero reference yields a value of 0.0, "up" when data is positive and
        "equal" otherwise. The equal zone is centred on the reference and
        scaled by its magnitude, so it also holds for negative references.

        Args:
            data: Observed value
            reference: Value to compare against
            equality_threshold: Overrides the calculator's threshold for this call

        Returns:
            ChangeResult
        """
        threshold = self.equality_threshold if equality_threshold is None else equality_threshold

        if reference == 0:
            direction = ChangeDirection.UP if data > 0 else ChangeDirection.EQUAL
            return ChangeResult(value=0.0, direction=direction)

        change_value = round((data - reference) / reference * 100, 2)

        # Inclusive band: data sitting exactly on a bound is "equal"
        tolerance = abs(reference) * (threshold / 100)
        lower_bound = reference - tolerance
        upper_bound = reference + tolerance

        if data < lower_bound:
            direction = ChangeDirection.DOWN
        elif data > upper_bound:
            direction = ChangeDirection.UP
        else:
            direction = ChangeDirection.EQUAL

        return ChangeResult(value=change_value, direction=direction)


_DEFAULT_CALCULATOR = PercentageChangeCalculator()


def compute_change(data: float,
                   reference: float,
                   equality_threshold: float = DEFAULT_EQUALITY_THRESHOLD) -> ChangeResult:
    return _DEFAULT_CALCULATOR.compute_change(data, reference, equality_threshold)
