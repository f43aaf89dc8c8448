"""Exception types raised by monthpace."""

from typing import Any


class MonthPaceError(ValueError):
    """Base class for every error raised by this package."""


class InvalidDateError(MonthPaceError):
    """A series key or date accessor produced something that is not a calendar date."""

    def __init__(self, value: Any, message: str = ""):
        self.value = value
        super().__init__(message or f"Invalid date: {value!r}")


class ConfigurationError(MonthPaceError):
    """An environment setting could not be parsed."""
