"""Week-date format table.

Four fixed ISO 8601 week-date patterns. Each is addressable by its
single-character specifier or by its literal template:

    d  YYYYWwwD    complete basic
    D  YYYY-Www-D  complete extended
    y  YYYYWww     reduced basic
    Y  YYYY-Www    reduced extended
"""

from dataclasses import dataclass

from weekcal.calendar.errors import WeekDateFormatError

WEEK_MARKER = "W"
SEPARATOR = "-"


@dataclass(frozen=True)
class WeekDateFormat:
    """Immutable week-date pattern.

    Attributes:
        name: Human readable name
        specifier: Single-character format specifier
        template: Literal template string
        complete: True if the pattern carries a weekday
        extended: True if the pattern uses "-" separators
    """

    name: str
    specifier: str
    template: str
    complete: bool
    extended: bool


COMPLETE_BASIC = WeekDateFormat("complete basic", "d", "YYYYWwwD", complete=True, extended=False)
COMPLETE_EXTENDED = WeekDateFormat("complete extended", "D", "YYYY-Www-D", complete=True, extended=True)
REDUCED_BASIC = WeekDateFormat("reduced basic", "y", "YYYYWww", complete=False, extended=False)
REDUCED_EXTENDED = WeekDateFormat("reduced extended", "Y", "YYYY-Www", complete=False, extended=True)

FORMATS: tuple[WeekDateFormat, ...] = (
    COMPLETE_BASIC,
    COMPLETE_EXTENDED,
    REDUCED_BASIC,
    REDUCED_EXTENDED,
)


def resolve_format(specifier: str) -> WeekDateFormat:
    """Look up a format by specifier character or template string.

    Args:
        specifier: One of "d", "D", "y", "Y" or the matching template

    Returns:
        Matching WeekDateFormat

    Raises:
        WeekDateFormatError: If specifier is empty or unrecognized
    """
    if not specifier:
        raise WeekDateFormatError("EMPTY_FORMAT", "Format specifier must not be empty")
    for fmt in FORMATS:
        if specifier in (fmt.specifier, fmt.template):
            return fmt
    raise WeekDateFormatError("UNKNOWN_FORMAT", f'"{specifier}" is not a valid WeekDate format')
