"""Canonical week-date error types.

Two kinds of failure exist:
- WeekDateRangeError: a numeric component is outside its domain
- WeekDateFormatError: text does not match a recognized week-date pattern

WeekDateTypeError is the range error raised when a component is not an
int at all. It is also a TypeError.

Range error codes:
- YEAR_OUT_OF_RANGE, WEEK_OUT_OF_RANGE, WEEKDAY_OUT_OF_RANGE
- UNKNOWN_DAY_OF_WEEK, DATE_OUT_OF_RANGE, WEEKDAY_UNSET

Format error codes:
- EMPTY_TEXT, EMPTY_FORMAT, UNKNOWN_FORMAT, LENGTH_MISMATCH
- MISSING_WEEK_MARKER, MISSING_SEPARATOR, INVALID_NUMBER
- INVALID_COMPONENTS, INCOMPLETE_WEEK_DATE
"""


class WeekDateError(ValueError):
    """Base class for week-date failures.

    Attributes:
        code: Error code
        message: Error message
    """

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")


class WeekDateRangeError(WeekDateError):
    """Raised when a year, week, weekday or day of week is out of range."""


class WeekDateFormatError(WeekDateError):
    """Raised when week-date text or a format specifier is invalid."""


class WeekDateTypeError(WeekDateRangeError, TypeError):
    """Raised when a year, week, weekday or day of week is not an int."""
