"""Week-date text codec.

Formats WeekDate values to, and parses them from, the four ISO 8601
week-date patterns in weekcal.calendar.formats. All failures surface as
WeekDateFormatError, including component values that parse as numbers
but are out of range for the calendar.
"""

from datetime import date

from loguru import logger

from weekcal.calendar.errors import WeekDateFormatError, WeekDateRangeError
from weekcal.calendar.formats import SEPARATOR, WEEK_MARKER, WeekDateFormat, resolve_format
from weekcal.calendar.week_date import WeekDate

_YEAR_DIGITS = 4
_WEEK_DIGITS = 2


def format_week_date(week_date: WeekDate, specifier: str) -> str:
    """Format a WeekDate with one of the four week-date patterns.

    Args:
        week_date: Week-date to format
        specifier: Format specifier ("d", "D", "y", "Y") or its template

    Returns:
        Formatted string, e.g. "1980-W40-1" for "D"

    Raises:
        WeekDateFormatError: If the specifier is unknown, or a complete
            format is requested for a week-date without a weekday
    """
    fmt = resolve_format(specifier)
    if fmt.complete and week_date.weekday is None:
        raise WeekDateFormatError(
            "INCOMPLETE_WEEK_DATE",
            f"{fmt.name} format requires a weekday, got {week_date!r}",
        )

    text = fmt.template.replace("YYYY", f"{week_date.year:04d}")
    text = text.replace("ww", f"{week_date.week:02d}")
    if fmt.complete:
        text = text.replace("D", str(week_date.weekday))
    return text


def _parse_number(text: str, field: str, source: str) -> int:
    # int() would also accept signs, whitespace and non-ASCII digits
    if not text or not text.isascii() or not text.isdigit():
        logger.debug(f"Rejected week-date {source!r}: {field} {text!r} is not numeric")
        raise WeekDateFormatError("INVALID_NUMBER", f"{field} {text!r} in {source!r} is not a number")
    return int(text)


def _split(text: str, fmt: WeekDateFormat) -> tuple[str, str, str | None]:
    """Split text into (year, week, weekday) substrings."""
    year_part, marker, rest = text.partition(WEEK_MARKER)
    if not marker:
        raise WeekDateFormatError("MISSING_WEEK_MARKER", f"{text!r} has no '{WEEK_MARKER}' week marker")

    if fmt.extended:
        if not year_part.endswith(SEPARATOR):
            raise WeekDateFormatError(
                "MISSING_SEPARATOR",
                f"{text!r} must have '{SEPARATOR}' between year and week",
            )
        year_part = year_part[: -len(SEPARATOR)]

    week_part = rest[:_WEEK_DIGITS]
    remainder = rest[_WEEK_DIGITS:]
    if not fmt.complete:
        return year_part, week_part, None

    if fmt.extended:
        if not remainder.startswith(SEPARATOR):
            raise WeekDateFormatError(
                "MISSING_SEPARATOR",
                f"{text!r} must have '{SEPARATOR}' between week and weekday",
            )
        remainder = remainder[len(SEPARATOR) :]
    return year_part, week_part, remainder


def parse_week_date(text: str, specifier: str) -> WeekDate:
    """Parse text in one of the four week-date patterns.

    Reduced patterns ("y", "Y") yield a WeekDate whose weekday is None.

    Args:
        text: Text to parse, e.g. "1980-W40-1"
        specifier: Format specifier ("d", "D", "y", "Y") or its template

    Returns:
        Parsed WeekDate

    Raises:
        WeekDateFormatError: If text is empty, the specifier is unknown, the
            length or layout does not match, a field is not numeric, or the
            parsed components are out of range
    """
    if not text:
        raise WeekDateFormatError("EMPTY_TEXT", "Week-date text must not be empty")
    fmt = resolve_format(specifier)

    if len(text) != len(fmt.template):
        logger.debug(f"Rejected week-date {text!r}: expected {len(fmt.template)} characters for {fmt.template}")
        raise WeekDateFormatError(
            "LENGTH_MISMATCH",
            f"{text!r} does not match {fmt.template}: expected {len(fmt.template)} characters, got {len(text)}",
        )

    year_part, week_part, weekday_part = _split(text, fmt)
    if len(year_part) != _YEAR_DIGITS:
        raise WeekDateFormatError("INVALID_NUMBER", f"year in {text!r} must have {_YEAR_DIGITS} digits")

    year = _parse_number(year_part, "year", text)
    week = _parse_number(week_part, "week", text)
    weekday = _parse_number(weekday_part, "weekday", text) if weekday_part is not None else None

    try:
        return WeekDate(year, week, weekday)
    except WeekDateRangeError as e:
        logger.debug(f"Rejected week-date {text!r}: {e.code}")
        raise WeekDateFormatError("INVALID_COMPONENTS", f"{text!r} is not a valid week-date: {e.message}") from e


def format_date(value: date, specifier: str) -> str:
    """Format a Gregorian date directly as a week-date string."""
    return format_week_date(WeekDate.from_date(value), specifier)


def parse_date(text: str, specifier: str) -> date:
    """Parse a complete week-date string into a Gregorian date.

    Raises:
        WeekDateFormatError: If parsing fails or the format is a reduced one
    """
    fmt = resolve_format(specifier)
    if not fmt.complete:
        raise WeekDateFormatError(
            "INCOMPLETE_WEEK_DATE",
            f"{fmt.name} format has no weekday and cannot name a single date",
        )
    return parse_week_date(text, fmt.specifier).to_date()
