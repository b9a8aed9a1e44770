"""Weeks-per-year rule for ISO week-numbering years.

A year has 53 weeks when it starts on a Thursday, or when it is a leap
year starting on a Wednesday. Both cases reduce to a check on P(y), the
weekday offset of December 31st.
"""

from weekcal.calendar.constants import LONG_YEAR_WEEKS, MAX_YEAR, MIN_YEAR, SHORT_YEAR_WEEKS
from weekcal.calendar.errors import WeekDateRangeError, WeekDateTypeError


def _p(year: int) -> int:
    return (year + year // 4 - year // 100 + year // 400) % 7


def _weeks_in_year(year: int) -> int:
    """Week count for any integer year, without range checks."""
    if _p(year) == 4 or _p(year - 1) == 3:
        return LONG_YEAR_WEEKS
    return SHORT_YEAR_WEEKS


def validate_year(year: int) -> None:
    """Check that year is an integer within the supported range.

    Args:
        year: Week-numbering year

    Raises:
        WeekDateRangeError: If year is outside [1, 9999]
        WeekDateTypeError: If year is not an int
    """
    if isinstance(year, bool) or not isinstance(year, int):
        raise WeekDateTypeError("YEAR_OUT_OF_RANGE", f"year must be an integer, got {year!r}")
    if year < MIN_YEAR or year > MAX_YEAR:
        raise WeekDateRangeError(
            "YEAR_OUT_OF_RANGE",
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}",
        )


def weeks_in_year(year: int) -> int:
    """Return the number of ISO weeks (52 or 53) in a week-numbering year.

    Args:
        year: Week-numbering year (1-9999)

    Returns:
        52 or 53

    Raises:
        WeekDateRangeError: If year is outside the supported range
    """
    validate_year(year)
    return _weeks_in_year(year)


def is_long_year(year: int) -> bool:
    """Check if a week-numbering year has 53 weeks."""
    return weeks_in_year(year) == LONG_YEAR_WEEKS
