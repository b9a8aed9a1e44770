"""Week-date constants - single source of truth.

Supported range matches the proleptic Gregorian range of ``datetime.date``.
"""

MIN_YEAR = 1
MAX_YEAR = 9999

MIN_WEEK = 1
SHORT_YEAR_WEEKS = 52
LONG_YEAR_WEEKS = 53

MIN_WEEKDAY = 1
MAX_WEEKDAY = 7

# ISO week 1 is the week containing January 4th
ANCHOR_MONTH = 1
ANCHOR_DAY = 4

THURSDAY = 4
