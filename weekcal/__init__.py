"""ISO 8601 week-date conversion, parsing and formatting."""

from loguru import logger

# Silent until the host application opts in with setup_logger()
logger.disable("weekcal")

from weekcal.calendar.codec import format_date, format_week_date, parse_date, parse_week_date
from weekcal.calendar.errors import (
    WeekDateError,
    WeekDateFormatError,
    WeekDateRangeError,
    WeekDateTypeError,
)
from weekcal.calendar.formats import FORMATS, WeekDateFormat, resolve_format
from weekcal.calendar.forward import (
    DayOfWeek,
    week_date_components,
    week_date_week,
    week_date_weekday,
    week_date_year,
    weekday_number,
)
from weekcal.calendar.rules import is_long_year, weeks_in_year
from weekcal.calendar.week_date import (
    WeekDate,
    compare_week_dates,
    ordinal_day_of_year,
    to_calendar_date,
    week_date_from_date,
)
from weekcal.core.logger import reset_logger, setup_logger

__all__ = [
    "FORMATS",
    "DayOfWeek",
    "WeekDate",
    "WeekDateError",
    "WeekDateFormat",
    "WeekDateFormatError",
    "WeekDateRangeError",
    "WeekDateTypeError",
    "compare_week_dates",
    "format_date",
    "format_week_date",
    "is_long_year",
    "ordinal_day_of_year",
    "parse_date",
    "parse_week_date",
    "reset_logger",
    "resolve_format",
    "setup_logger",
    "to_calendar_date",
    "week_date_components",
    "week_date_from_date",
    "week_date_week",
    "week_date_weekday",
    "week_date_year",
    "weekday_number",
    "weeks_in_year",
]
