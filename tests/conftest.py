"""Root conftest for all tests.

Shared week-date fixtures: the long years of one 400-year cycle and the
year-transition conversion table.
"""

from datetime import date

import pytest

from weekcal.calendar.week_date import WeekDate

# In a 400-year cycle 71 years have 53 weeks, the rest have 52.
CYCLE_LENGTH = 400
LONG_YEARS = frozenset(
    {
        4, 9, 15, 20, 26, 32, 37, 43, 48, 54,
        60, 65, 71, 76, 82, 88, 93, 99, 105, 111,
        116, 122, 128, 133, 139, 144, 150, 156, 161, 167,
        172, 178, 184, 189, 195, 201, 207, 212, 218, 224,
        229, 235, 240, 246, 252, 257, 263, 268, 274, 280,
        285, 291, 296, 303, 308, 314, 320, 325, 331, 336,
        342, 348, 353, 359, 364, 370, 376, 381, 387, 392,
        398,
    }
)  # fmt: skip

# Ascending order
DATES_BY_WEEK_DATE: list[tuple[tuple[int, int, int], date]] = [
    ((1980, 40, 1), date(1980, 9, 29)),
    # 2004 -> 2005
    ((2004, 53, 6), date(2005, 1, 1)),
    ((2004, 53, 7), date(2005, 1, 2)),
    # 2005 -> 2006
    ((2005, 52, 6), date(2005, 12, 31)),
    ((2005, 52, 7), date(2006, 1, 1)),
    ((2006, 1, 1), date(2006, 1, 2)),
    # 2006 -> 2007
    ((2006, 52, 7), date(2006, 12, 31)),
    ((2007, 1, 1), date(2007, 1, 1)),
    # 2007 -> 2008
    ((2007, 52, 7), date(2007, 12, 30)),
    ((2008, 1, 1), date(2007, 12, 31)),
    ((2008, 1, 2), date(2008, 1, 1)),
    ((2008, 39, 5), date(2008, 9, 26)),
    ((2008, 39, 6), date(2008, 9, 27)),
    # 2008 -> 2009
    ((2008, 52, 7), date(2008, 12, 28)),
    ((2009, 1, 1), date(2008, 12, 29)),
    ((2009, 1, 2), date(2008, 12, 30)),
    ((2009, 1, 3), date(2008, 12, 31)),
    ((2009, 1, 4), date(2009, 1, 1)),
    # 2009 -> 2010
    ((2009, 53, 4), date(2009, 12, 31)),
    ((2009, 53, 5), date(2010, 1, 1)),
    ((2009, 53, 6), date(2010, 1, 2)),
    ((2009, 53, 7), date(2010, 1, 3)),
    ((2032, 40, 5), date(2032, 10, 1)),
]


@pytest.fixture
def long_years() -> frozenset[int]:
    return LONG_YEARS


@pytest.fixture
def transition_table() -> list[tuple[WeekDate, date]]:
    """(WeekDate, date) pairs in ascending order."""
    return [(WeekDate(*components), value) for components, value in DATES_BY_WEEK_DATE]


@pytest.fixture
def sample_dates() -> list[date]:
    """Every 11th day from 1590 to 2410, plus both ends of the calendar."""
    start = date(1590, 1, 1).toordinal()
    end = date(2410, 12, 31).toordinal()
    dates = [date.fromordinal(ordinal) for ordinal in range(start, end, 11)]
    dates += [date(1, 1, 1), date(1, 1, 7), date(9999, 12, 27), date(9999, 12, 29), date(9999, 12, 31)]
    return dates
