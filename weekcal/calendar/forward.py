"""Gregorian date to ISO week-date conversion.

The week-numbering year of a date is the Gregorian year of the Thursday
in that date's week. Weeks start on Monday and week 1 is the first week
holding at least four days of the new year.
"""

from datetime import date, datetime, timedelta
from enum import IntEnum

from weekcal.calendar.constants import THURSDAY
from weekcal.calendar.errors import WeekDateRangeError, WeekDateTypeError


class DayOfWeek(IntEnum):
    """Day of week in ``date.weekday()`` numbering."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


_WEEKDAY_NUMBERS: dict[DayOfWeek, int] = {
    DayOfWeek.MONDAY: 1,
    DayOfWeek.TUESDAY: 2,
    DayOfWeek.WEDNESDAY: 3,
    DayOfWeek.THURSDAY: 4,
    DayOfWeek.FRIDAY: 5,
    DayOfWeek.SATURDAY: 6,
    DayOfWeek.SUNDAY: 7,
}


def as_date(value: date) -> date:
    """Drop the time part of a datetime; plain dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def weekday_number(day_of_week: DayOfWeek | int) -> int:
    """Map a day of week to its ISO weekday number.

    Args:
        day_of_week: DayOfWeek member, or an int in ``date.weekday()`` numbering

    Returns:
        1 (Monday) through 7 (Sunday)

    Raises:
        WeekDateRangeError: If day_of_week is not one of the seven days
        WeekDateTypeError: If day_of_week is not an int
    """
    if isinstance(day_of_week, bool) or not isinstance(day_of_week, int):
        raise WeekDateTypeError("UNKNOWN_DAY_OF_WEEK", f"Unknown day of week: {day_of_week!r}")
    try:
        return _WEEKDAY_NUMBERS[DayOfWeek(day_of_week)]
    except ValueError as e:
        raise WeekDateRangeError("UNKNOWN_DAY_OF_WEEK", f"Unknown day of week: {day_of_week!r}") from e


def week_date_weekday(value: date) -> int:
    """Return the ISO weekday (1-7) of a date."""
    return weekday_number(DayOfWeek(as_date(value).weekday()))


def week_date_year(value: date) -> int:
    """Return the ISO week-numbering year of a date.

    Shifts to the Thursday of the date's own week and takes its year, so
    early January days can belong to the previous year and late December
    days to the next one.
    """
    d = as_date(value)
    thursday = d + timedelta(days=THURSDAY - week_date_weekday(d))
    return thursday.year


def _first_four_day_week_of_year(d: date) -> int:
    """Week of year with Monday-first weeks and a four-day first week.

    Days before week 1 count towards the last week of the previous year.
    """
    jan1 = date(d.year, 1, 1)
    jan1_weekday = week_date_weekday(jan1)
    if jan1_weekday <= THURSDAY:
        week1_monday = jan1 - timedelta(days=jan1_weekday - 1)
    else:
        week1_monday = jan1 + timedelta(days=8 - jan1_weekday)

    if d < week1_monday:
        return _first_four_day_week_of_year(date(d.year - 1, 12, 31))
    return (d - week1_monday).days // 7 + 1


def week_date_week(value: date) -> int:
    """Return the ISO week number (1-53) of a date."""
    d = as_date(value)
    # Monday-Wednesday are counted from the Thursday of the same week.
    # Shifting to Thursday rather than a fixed +3 days keeps 9999-12-29 in range.
    weekday = week_date_weekday(d)
    if weekday < THURSDAY:
        d = d + timedelta(days=THURSDAY - weekday)
    return _first_four_day_week_of_year(d)


def week_date_components(value: date) -> tuple[int, int, int]:
    """Return (year, week, weekday) for a Gregorian date."""
    return week_date_year(value), week_date_week(value), week_date_weekday(value)
