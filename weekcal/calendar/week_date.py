"""ISO 8601 week-date value type.

A WeekDate is an immutable (year, week, weekday) triple. It is built from
a Gregorian date or from explicit components, which are validated in
order: year, then week (its upper bound depends on the year), then weekday.

A WeekDate parsed from a reduced format ("YYYYWww", "YYYY-Www") carries
no weekday. Such a value names a whole week rather than a day, so it
cannot be converted to a Gregorian date or an ordinal day.
"""

from dataclasses import dataclass
from datetime import date

from weekcal.calendar import inverse
from weekcal.calendar.constants import MAX_WEEKDAY, MIN_WEEK, MIN_WEEKDAY
from weekcal.calendar.errors import WeekDateRangeError, WeekDateTypeError
from weekcal.calendar.formats import REDUCED_BASIC, REDUCED_EXTENDED, WeekDateFormat, resolve_format
from weekcal.calendar.forward import week_date_components
from weekcal.calendar.rules import validate_year, weeks_in_year
from weekcal.config.settings import settings


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class WeekDate:
    """Immutable ISO 8601 week-date.

    Attributes:
        year: Week-numbering year (1-9999)
        week: Week of the year (1-52, or 1-53 in long years)
        weekday: Day of the week, 1=Monday through 7=Sunday; None for a reduced week-date
    """

    year: int
    week: int
    weekday: int | None = None

    def __post_init__(self) -> None:
        validate_year(self.year)

        max_week = weeks_in_year(self.year)
        if not _is_int(self.week):
            raise WeekDateTypeError("WEEK_OUT_OF_RANGE", f"week must be an integer, got {self.week!r}")
        if self.week < MIN_WEEK or self.week > max_week:
            raise WeekDateRangeError(
                "WEEK_OUT_OF_RANGE",
                f"week must be between {MIN_WEEK} and {max_week} in {self.year}, got {self.week!r}",
            )

        if self.weekday is None:
            return

        if not _is_int(self.weekday):
            raise WeekDateTypeError("WEEKDAY_OUT_OF_RANGE", f"weekday must be an integer, got {self.weekday!r}")
        if self.weekday < MIN_WEEKDAY or self.weekday > MAX_WEEKDAY:
            raise WeekDateRangeError(
                "WEEKDAY_OUT_OF_RANGE",
                f"weekday must be between {MIN_WEEKDAY} and {MAX_WEEKDAY}, got {self.weekday!r}",
            )

        # Last days of 9999-W52 lie past the end of the Gregorian range
        inverse.to_calendar_date(self.year, self.week, self.weekday)

    @classmethod
    def from_date(cls, value: date) -> "WeekDate":
        """Build the week-date of a Gregorian date (or the date part of a datetime)."""
        year, week, weekday = week_date_components(value)
        return cls(year, week, weekday)

    @classmethod
    def parse(cls, text: str, specifier: str) -> "WeekDate":
        """Parse text in one of the four week-date formats. See parse_week_date."""
        from weekcal.calendar.codec import parse_week_date

        return parse_week_date(text, specifier)

    @property
    def is_complete(self) -> bool:
        """True if the week-date names a single day."""
        return self.weekday is not None

    def _require_weekday(self) -> int:
        if self.weekday is None:
            raise WeekDateRangeError(
                "WEEKDAY_UNSET",
                f"{self.year}-W{self.week:02d} has no weekday and does not name a single day",
            )
        return self.weekday

    def to_date(self) -> date:
        """Return the Gregorian date of this week-date.

        Raises:
            WeekDateRangeError: If the weekday is unset
        """
        return inverse.to_calendar_date(self.year, self.week, self._require_weekday())

    def ordinal_day(self) -> int:
        """Return the day of the Gregorian year that contains this week-date.

        Raises:
            WeekDateRangeError: If the weekday is unset
        """
        return inverse.ordinal_day(self.year, self.week, self._require_weekday())

    def format(self, specifier: str) -> str:
        """Format as text. See format_week_date."""
        from weekcal.calendar.codec import format_week_date

        return format_week_date(self, specifier)

    def _default_format(self) -> WeekDateFormat:
        fmt = resolve_format(settings.default_format)
        if fmt.complete and not self.is_complete:
            return REDUCED_EXTENDED if fmt.extended else REDUCED_BASIC
        return fmt

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return self.format(self._default_format().specifier)
        return self.format(format_spec)

    def __str__(self) -> str:
        return self.format(self._default_format().specifier)

    def _sort_key(self) -> tuple[int, int, int]:
        # Unset weekday orders before Monday
        return self.year, self.week, self.weekday or 0

    def __lt__(self, other: "WeekDate | None") -> bool:
        if other is None:
            return False
        if not isinstance(other, WeekDate):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: "WeekDate | None") -> bool:
        if other is None:
            return False
        if not isinstance(other, WeekDate):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: "WeekDate | None") -> bool:
        if other is None:
            return True
        if not isinstance(other, WeekDate):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: "WeekDate | None") -> bool:
        if other is None:
            return True
        if not isinstance(other, WeekDate):
            return NotImplemented
        return self._sort_key() >= other._sort_key()


def week_date_from_date(value: date) -> WeekDate:
    """Convert a Gregorian date to its WeekDate."""
    return WeekDate.from_date(value)


def to_calendar_date(week_date: WeekDate) -> date:
    """Convert a complete WeekDate to its Gregorian date."""
    return week_date.to_date()


def ordinal_day_of_year(week_date: WeekDate) -> int:
    """Return the 1-based day of the Gregorian year containing week_date."""
    return week_date.ordinal_day()


def compare_week_dates(first: WeekDate | None, second: WeekDate | None) -> int:
    """Three-way comparison of week-dates.

    None sorts before any WeekDate.

    Returns:
        -1, 0 or 1

    Raises:
        TypeError: If either argument is neither a WeekDate nor None
    """
    for value in (first, second):
        if value is not None and not isinstance(value, WeekDate):
            raise TypeError(f"Cannot compare WeekDate with {type(value).__name__}")

    if first is None and second is None:
        return 0
    if first is None:
        return -1
    if second is None:
        return 1
    if first < second:
        return -1
    if first > second:
        return 1
    return 0
