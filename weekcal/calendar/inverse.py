"""ISO week-date to Gregorian date conversion.

Week 1 is anchored on January 4th. The raw ordinal of a week-date within
its week-numbering year is::

    week * 7 + weekday - (weekday(January 4th) + 3)

which may fall below 1 or above the year's day count at year boundaries.
"""

import calendar
from datetime import date, timedelta

from loguru import logger

from weekcal.calendar.constants import ANCHOR_DAY, ANCHOR_MONTH
from weekcal.calendar.errors import WeekDateRangeError


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if calendar.isleap(year) else 365


def january_fourth_weekday(year: int) -> int:
    """Return the ISO weekday (1-7) of January 4th of year."""
    return date(year, ANCHOR_MONTH, ANCHOR_DAY).isoweekday()


def _raw_ordinal(year: int, week: int, weekday: int) -> int:
    return week * 7 + weekday - (january_fourth_weekday(year) + 3)


def ordinal_day(year: int, week: int, weekday: int) -> int:
    """Return the 1-based day of the Gregorian year containing the week-date.

    The Gregorian year can differ from the week-numbering year for dates in
    week 1 or in the last week. Use gregorian_year() for the matching year.

    Args:
        year: Week-numbering year
        week: ISO week number
        weekday: ISO weekday (1=Monday)

    Returns:
        Ordinal day within the containing Gregorian year
    """
    ordinal = _raw_ordinal(year, week, weekday)
    if ordinal < 1:
        return ordinal + days_in_year(year - 1)
    if ordinal > days_in_year(year):
        return ordinal - days_in_year(year)
    return ordinal


def gregorian_year(year: int, week: int, weekday: int) -> int:
    """Return the Gregorian year containing the week-date."""
    ordinal = _raw_ordinal(year, week, weekday)
    if ordinal < 1:
        return year - 1
    if ordinal > days_in_year(year):
        return year + 1
    return year


def to_calendar_date(year: int, week: int, weekday: int) -> date:
    """Convert week-date components to a Gregorian date.

    Adds the raw ordinal to January 1st of year, letting the date
    arithmetic roll over into the neighbouring year.

    Raises:
        WeekDateRangeError: If the date falls outside 0001-01-01..9999-12-31
    """
    ordinal = _raw_ordinal(year, week, weekday)
    try:
        return date(year, 1, 1) + timedelta(days=ordinal - 1)
    except OverflowError as e:
        logger.debug(f"Week-date {year}-W{week:02d}-{weekday} overflows the calendar")
        raise WeekDateRangeError(
            "DATE_OUT_OF_RANGE",
            f"{year}-W{week:02d}-{weekday} falls outside the supported calendar range",
        ) from e
