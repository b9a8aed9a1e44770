"""Tests for the weeks-per-year rule."""

import pytest

from weekcal.calendar.errors import WeekDateRangeError, WeekDateTypeError
from weekcal.calendar.rules import is_long_year, weeks_in_year


def test_weeks_in_year_over_one_cycle(long_years: frozenset[int]) -> None:
    """Every year of one 400-year cycle has the expected week count."""
    for year in range(1, 401):
        expected = 53 if year in long_years else 52
        assert weeks_in_year(year) == expected, year


def test_cycle_has_71_long_years() -> None:
    assert sum(1 for year in range(1, 401) if is_long_year(year)) == 71


def test_rule_repeats_every_400_years() -> None:
    for year in range(1, 9600):
        assert weeks_in_year(year) == weeks_in_year(year + 400), year


@pytest.mark.parametrize(("year", "expected"), [(2004, 53), (2009, 53), (2015, 53), (2020, 53), (2014, 52), (2021, 52)])
def test_weeks_in_known_years(year: int, expected: int) -> None:
    assert weeks_in_year(year) == expected


@pytest.mark.parametrize("year", [0, -1, 10000])
def test_weeks_in_year_rejects_out_of_range(year: int) -> None:
    with pytest.raises(WeekDateRangeError, match="YEAR_OUT_OF_RANGE"):
        weeks_in_year(year)


@pytest.mark.parametrize("year", [2020.0, "2020", True])
def test_weeks_in_year_rejects_non_integers(year: object) -> None:
    with pytest.raises(WeekDateTypeError, match="YEAR_OUT_OF_RANGE"):
        weeks_in_year(year)  # type: ignore[arg-type]


def test_type_error_is_still_a_range_error() -> None:
    with pytest.raises(TypeError) as exc_info:
        weeks_in_year("2020")  # type: ignore[arg-type]
    assert isinstance(exc_info.value, WeekDateRangeError)
    assert exc_info.value.code == "YEAR_OUT_OF_RANGE"
