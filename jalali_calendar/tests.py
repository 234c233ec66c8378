import pytest

from . import bounds, core
from .exceptions import InvalidField
from .forms import JalaliDateFormField
from .utils import format_jalali_date, parse_jalali_date


def test_known_leap_years():
    assert core.is_leap_year(1375)
    assert core.is_leap_year(1379)
    assert core.is_leap_year(1399)
    assert not core.is_leap_year(1376)
    assert not core.is_leap_year(1394)


def test_eight_leap_years_in_every_33_year_window():
    for start in range(-100, 1500, 7):
        window = [y for y in range(start, start + 33) if core.is_leap_year(y)]
        assert len(window) == 8


def test_leap_gaps_are_four_or_five():
    leaps = [y for y in range(1200, 1600) if core.is_leap_year(y)]
    gaps = {b - a for a, b in zip(leaps, leaps[1:])}
    assert gaps == {4, 5}


def test_floor_division_rounds_down():
    assert core.floor_divide(-1, 4) == -1
    assert core.floor_divide(7, 4) == 1
    assert core.floor_divmod(-1, 12) == (-1, 11)


def test_month_lengths_sums_to_year_length():
    for y in list(range(1370, 1410)) + [0, -5, 3000]:
        assert sum(core.month_lengths(y)) == core.year_length(y)


def test_esfand_length_follows_leap_rule():
    assert core.month_length(core.ESFAND, 1399) == 30
    assert core.month_length(core.ESFAND, 1394) == 29


def test_epoch_day_numbers():
    assert core.jalali_day_before_year(1376) + 1 == core.FAR_1_1376_JALALI_DAY
    assert core.jalali_day_to_day_of_week(core.FAR_1_1376_JALALI_DAY) == core.FRIDAY
    # 1 January 1970 was a Thursday, Dey 11, 1348.
    assert core.jalali_day_to_day_of_week(core.EPOCH_JALALI_DAY) == core.THURSDAY
    year, doy = core.decompose_jalali_day(core.EPOCH_JALALI_DAY)
    assert year == 1348
    assert core.month_and_day(doy) == (core.DEY, 11)


def test_decompose_inverts_day_before_year():
    for y in range(-70, 1500, 3):
        first = core.jalali_day_before_year(y) + 1
        assert core.decompose_jalali_day(first) == (y, 0)
        last = first + core.year_length(y) - 1
        assert core.decompose_jalali_day(last) == (y, core.year_length(y) - 1)


def test_month_and_day_boundaries():
    assert core.month_and_day(0) == (core.FARVARDIN, 1)
    assert core.month_and_day(185) == (core.SHAHRIVAR, 31)
    assert core.month_and_day(186) == (core.MEHR, 1)
    assert core.month_and_day(365) == (core.ESFAND, 30)


def test_week_number():
    # Day 1 is a Wednesday; weeks start on Saturday.
    assert core.week_number(1, core.WEDNESDAY, core.SATURDAY, 4) == 0
    assert core.week_number(1, core.WEDNESDAY, core.SATURDAY, 1) == 1
    assert core.week_number(4, core.SATURDAY, core.SATURDAY, 1) == 2


def test_bounds_tables():
    assert bounds.maximum(core.DAY_OF_MONTH) == 31
    assert bounds.least_maximum(core.DAY_OF_MONTH) == 29
    assert bounds.minimum(core.DAY_OF_WEEK_IN_MONTH) == -1
    assert bounds.greatest_minimum(core.YEAR) == 1
    with pytest.raises(InvalidField):
        bounds.maximum(core.FIELD_COUNT)


def test_parse_and_format():
    y, m, d = parse_jalali_date("1394-05-01")
    assert (y, m, d) == (1394, 5, 1)
    assert format_jalali_date(y, m, d) == "1394/05/01"


def test_formfield_clean():
    field = JalaliDateFormField()
    assert field.clean("1399/12/30") == "1399/12/30"
    assert field.clean("1394-5-1") == "1394/05/01"


def test_invalid_day():
    field = JalaliDateFormField()
    with pytest.raises(Exception):
        field.clean("1394/12/30")
