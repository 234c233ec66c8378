import copy

import pytest

from jalali_calendar import (
    AH,
    AM_PM,
    BH,
    DAY_OF_MONTH,
    DAY_OF_WEEK,
    DAY_OF_WEEK_IN_MONTH,
    DAY_OF_YEAR,
    DST_OFFSET,
    ERA,
    FRIDAY,
    HOUR,
    HOUR_OF_DAY,
    MILLISECOND,
    MINUTE,
    MONTH,
    PM,
    SATURDAY,
    SECOND,
    SUNDAY,
    THURSDAY,
    TUESDAY,
    WEDNESDAY,
    WEEK_OF_MONTH,
    WEEK_OF_YEAR,
    YEAR,
    ZONE_OFFSET,
    CalendarError,
    DayOfWeekInMonthZero,
    FieldOutOfRange,
    InvalidEra,
    InvalidField,
    JalaliCalendar,
)
from jalali_calendar.core import LONG_MAX, LONG_MIN, ONE_DAY, ONE_HOUR, month_length

MORDAD_1_1394_UTC = 1437609600000  # 2015-07-23T00:00:00Z
TEHRAN = 3 * ONE_HOUR + 30 * 60 * 1000


def _date(cal):
    return cal.get(YEAR), cal.get(MONTH), cal.get(DAY_OF_MONTH)


def test_mordad_1_1394_is_23_july_2015():
    cal = JalaliCalendar(1394, 4, 1)
    assert cal.get_time() == MORDAD_1_1394_UTC
    assert cal.get(DAY_OF_WEEK) == THURSDAY
    assert cal.get(DAY_OF_YEAR) == 125


def test_time_to_fields_with_clock():
    cal = JalaliCalendar(millis=MORDAD_1_1394_UTC + (15 * 60 + 14) * 60 * 1000)
    assert _date(cal) == (1394, 4, 1)
    assert cal.get(HOUR_OF_DAY) == 15
    assert cal.get(HOUR) == 3
    assert cal.get(AM_PM) == PM
    assert cal.get(MINUTE) == 14
    assert cal.get(ERA) == AH


def test_raw_offset_shifts_wall_clock():
    cal = JalaliCalendar(1394, 4, 1, raw_offset=TEHRAN)
    assert cal.get_time() == MORDAD_1_1394_UTC - TEHRAN

    at_epoch = JalaliCalendar(millis=0, raw_offset=TEHRAN)
    assert at_epoch.get(HOUR_OF_DAY) == 3
    assert at_epoch.get(MINUTE) == 30
    assert at_epoch.get(ZONE_OFFSET) == TEHRAN
    assert at_epoch.get(DST_OFFSET) == 0


def test_set_time_get_time_identity():
    cal = JalaliCalendar(millis=0)
    for millis in (0, -1, 1, MORDAD_1_1394_UTC, -(10**13) + 17, 10**15 + 3, LONG_MIN, LONG_MAX):
        cal.set_time(millis)
        assert cal.get_time() == millis


def test_compose_decompose_round_trip():
    for year in range(1300, 1420, 7):
        for month in range(12):
            for day in (1, 15, month_length(month, year)):
                cal = JalaliCalendar(year, month, day)
                back = JalaliCalendar(millis=cal.get_time())
                assert _date(back) == (year, month, day)


def test_clear_defaults_to_farvardin_1_1375():
    cal = JalaliCalendar(millis=MORDAD_1_1394_UTC)
    cal.clear()
    assert not cal.is_set(YEAR)
    assert _date(cal) == (1375, 0, 1)
    assert cal.is_set(YEAR)


def test_clear_single_field_recomputes_from_the_rest():
    cal = JalaliCalendar(1394, 4, 1, 10, 30)
    cal.get_time()
    cal.clear(HOUR_OF_DAY)
    cal.set(HOUR, 3)
    cal.set(AM_PM, PM)
    assert cal.get(HOUR_OF_DAY) == 15
    assert cal.get(MINUTE) == 30


def test_newer_hour_beats_hour_of_day():
    cal = JalaliCalendar(1394, 4, 1)
    cal.set(HOUR_OF_DAY, 10)
    cal.set(AM_PM, PM)
    cal.set(HOUR, 3)
    assert cal.get(HOUR_OF_DAY) == 15
    cal.set(HOUR_OF_DAY, 8)
    assert cal.get(HOUR_OF_DAY) == 8


def test_week_of_month_and_day_of_week():
    cal = JalaliCalendar(1394, 4, 1)
    cal.get_time()
    cal.set(WEEK_OF_MONTH, 2)
    cal.set(DAY_OF_WEEK, SATURDAY)
    assert _date(cal) == (1394, 4, 3)


def test_day_of_week_in_month():
    cal = JalaliCalendar(1394, 4, 1)
    cal.get_time()
    cal.set(DAY_OF_WEEK, THURSDAY)
    cal.set(DAY_OF_WEEK_IN_MONTH, 2)
    assert _date(cal) == (1394, 4, 8)


def test_negative_day_of_week_in_month_counts_from_the_end():
    cal = JalaliCalendar(1394, 4, 1)
    cal.get_time()
    cal.set(DAY_OF_WEEK, THURSDAY)
    cal.set(DAY_OF_WEEK_IN_MONTH, -1)
    assert _date(cal) == (1394, 4, 29)


def test_day_of_year():
    cal = JalaliCalendar(millis=0)
    cal.clear()
    cal.set(YEAR, 1394)
    cal.set(DAY_OF_YEAR, 125)
    assert _date(cal) == (1394, 4, 1)


def test_week_of_year_and_day_of_week():
    cal = JalaliCalendar(millis=0)
    cal.clear()
    cal.set(YEAR, 1394)
    cal.set(WEEK_OF_YEAR, 2)
    cal.set(DAY_OF_WEEK, SATURDAY)
    assert _date(cal) == (1394, 0, 8)


def test_most_recently_set_group_wins():
    cal = JalaliCalendar(millis=0)
    cal.clear()
    cal.set(YEAR, 1394)
    cal.set(WEEK_OF_YEAR, 2)
    cal.set(DAY_OF_WEEK, SATURDAY)
    cal.set(MONTH, 4)
    cal.set(DAY_OF_MONTH, 20)
    assert _date(cal) == (1394, 4, 20)


def test_month_without_day_means_first_of_month():
    cal = JalaliCalendar(millis=0)
    cal.clear()
    cal.set(YEAR, 1394)
    cal.set(MONTH, 4)
    assert _date(cal) == (1394, 4, 1)


def test_lenient_mode_normalizes_overflow():
    assert _date(JalaliCalendar(1394, 11, 30)) == (1395, 0, 1)
    assert _date(JalaliCalendar(1394, 12, 1)) == (1395, 0, 1)
    assert _date(JalaliCalendar(1394, -1, 1)) == (1393, 11, 1)
    assert _date(JalaliCalendar(1394, 0, 0)) == (1393, 11, 29)


def test_strict_mode_rejects_day_past_month_end():
    cal = JalaliCalendar(1394, 11, 30, lenient=False)
    with pytest.raises(FieldOutOfRange) as excinfo:
        cal.get(DAY_OF_MONTH)
    assert excinfo.value.field == DAY_OF_MONTH
    assert excinfo.value.maximum == 29
    assert JalaliCalendar(1399, 11, 30, lenient=False).get(DAY_OF_MONTH) == 30


def test_strict_mode_rejects_static_bounds():
    cal = JalaliCalendar(1394, 12, 1, lenient=False)
    with pytest.raises(FieldOutOfRange) as excinfo:
        cal.get_time()
    assert excinfo.value.field == MONTH

    cal = JalaliCalendar(1394, 0, 1, 24, lenient=False)
    with pytest.raises(CalendarError):
        cal.get_time()


def test_strict_failure_leaves_calendar_usable():
    cal = JalaliCalendar(1394, 11, 30, lenient=False)
    with pytest.raises(FieldOutOfRange):
        cal.get_time()
    cal.set(DAY_OF_MONTH, 29)
    assert _date(cal) == (1394, 11, 29)


def test_strict_mode_rejects_zero_day_of_week_in_month():
    cal = JalaliCalendar(1394, 4, 1, lenient=False)
    cal.get_time()
    cal.set(DAY_OF_WEEK, THURSDAY)
    cal.set(DAY_OF_WEEK_IN_MONTH, 0)
    with pytest.raises(DayOfWeekInMonthZero):
        cal.get_time()


def test_invalid_era_is_rejected_in_both_modes():
    for lenient in (True, False):
        cal = JalaliCalendar(1394, 0, 1, lenient=lenient)
        cal.set(ERA, 5)
        with pytest.raises(InvalidEra):
            cal.get_time()


def test_invalid_field_index():
    cal = JalaliCalendar(millis=0)
    with pytest.raises(InvalidField):
        cal.get(17)
    with pytest.raises(InvalidField):
        cal.set(-1, 0)
    with pytest.raises(InvalidField):
        cal.is_set(99)
    assert issubclass(InvalidField, ValueError)


def test_era_bh():
    cal = JalaliCalendar(1, 0, 1)
    cal.set(ERA, BH)
    assert cal.get(ERA) == BH
    assert cal.get(YEAR) == 1
    assert cal.get_time() < JalaliCalendar(1, 0, 1).get_time()
    # 1 BH (proleptic year 0) is a common year.
    assert cal.get_actual_maximum(DAY_OF_YEAR) == 365


def test_user_zone_offset_field_overrides_raw_offset():
    cal = JalaliCalendar(1394, 4, 1)
    cal.set(ZONE_OFFSET, ONE_HOUR)
    assert cal.get_time() == MORDAD_1_1394_UTC - ONE_HOUR


def test_farvardin_1_1380_is_in_week_53_of_1379():
    cal = JalaliCalendar(1380, 0, 1, first_day_of_week=SATURDAY, minimal_days_in_first_week=4)
    assert cal.get(DAY_OF_WEEK) == WEDNESDAY
    assert cal.get(WEEK_OF_YEAR) == 53
    assert cal.week_year() == 1379


def test_last_days_of_year_can_be_week_1():
    cal = JalaliCalendar(1379, 11, 30, first_day_of_week=SUNDAY, minimal_days_in_first_week=4)
    assert cal.get(DAY_OF_WEEK) == TUESDAY
    assert cal.get(WEEK_OF_YEAR) == 1
    assert cal.week_year() == 1380


def test_config_change_recomputes_week_fields():
    cal = JalaliCalendar(1380, 0, 1)
    assert cal.get(WEEK_OF_YEAR) == 1
    cal.minimal_days_in_first_week = 4
    assert cal.get(WEEK_OF_YEAR) == 53

    cal.raw_offset = TEHRAN
    cal.set(MILLISECOND, 0)
    assert cal.get(HOUR_OF_DAY) == 3


def test_week_settings_are_validated():
    with pytest.raises(ValueError):
        JalaliCalendar(millis=0, first_day_of_week=0)
    cal = JalaliCalendar(millis=0)
    with pytest.raises(ValueError):
        cal.minimal_days_in_first_week = 8


def test_constructor_argument_checks():
    with pytest.raises(TypeError):
        JalaliCalendar(1394)
    with pytest.raises(TypeError):
        JalaliCalendar(month=3)
    assert JalaliCalendar().get(YEAR) >= 1400


def test_equality_and_copy():
    a = JalaliCalendar(millis=MORDAD_1_1394_UTC)
    b = JalaliCalendar(1394, 4, 1)
    assert a == b
    assert a != JalaliCalendar(millis=MORDAD_1_1394_UTC, raw_offset=TEHRAN)
    assert a != JalaliCalendar(millis=MORDAD_1_1394_UTC, first_day_of_week=FRIDAY)
    assert a != MORDAD_1_1394_UTC
    with pytest.raises(TypeError):
        hash(a)

    c = copy.copy(a)
    c.set(DAY_OF_MONTH, 2)
    assert a.get(DAY_OF_MONTH) == 1
    assert c.get_time() == a.get_time() + ONE_DAY
    assert a.copy() == a


def test_repr():
    cal = JalaliCalendar(1394, 4, 1, 15, 14, 5)
    assert repr(cal) == "<JalaliCalendar 1394/05/01 15:14:05.000 AH offset=0>"
    assert cal.get(SECOND) == 5


class _OneHourDst(JalaliCalendar):
    def _dst_offset(self, local_millis):
        return ONE_HOUR


class _DstFromMordad11(JalaliCalendar):
    switch = MORDAD_1_1394_UTC + 10 * ONE_DAY

    def _dst_offset(self, local_millis):
        return ONE_HOUR if local_millis >= self.switch else 0


def test_dst_pushes_late_evening_into_next_day():
    cal = _OneHourDst(millis=MORDAD_1_1394_UTC + 23 * ONE_HOUR + 30 * 60 * 1000)
    assert _date(cal) == (1394, 4, 2)
    assert cal.get(HOUR_OF_DAY) == 0
    assert cal.get(MINUTE) == 30
    assert cal.get(DST_OFFSET) == ONE_HOUR


def test_add_days_keeps_wall_clock_across_dst_change():
    cal = _DstFromMordad11(millis=MORDAD_1_1394_UTC + 10 * ONE_HOUR)
    assert cal.get(DST_OFFSET) == 0
    cal.add(DAY_OF_MONTH, 20)
    assert _date(cal) == (1394, 4, 21)
    assert cal.get(HOUR_OF_DAY) == 10
    assert cal.get(DST_OFFSET) == ONE_HOUR


def test_add_hours_does_not_compensate_dst():
    cal = _DstFromMordad11(millis=MORDAD_1_1394_UTC + 10 * ONE_DAY - ONE_HOUR)
    cal.add(HOUR_OF_DAY, 1)
    assert cal.get(HOUR_OF_DAY) == 1
    assert cal.get(DST_OFFSET) == ONE_HOUR


def test_strict_day_of_year_follows_leap_years():
    cal = JalaliCalendar(millis=0, lenient=False)
    cal.clear()
    cal.set(YEAR, 1394)
    cal.set(DAY_OF_YEAR, 366)
    with pytest.raises(FieldOutOfRange) as excinfo:
        cal.get_time()
    assert excinfo.value.field == DAY_OF_YEAR
    assert excinfo.value.maximum == 365

    cal.set(YEAR, 1399)
    assert _date(cal) == (1399, 11, 30)


def test_strict_validation_uses_default_year_when_year_unset():
    cal = JalaliCalendar(millis=0, lenient=False)
    cal.clear()
    cal.set(MONTH, 11)
    cal.set(DAY_OF_MONTH, 30)
    # 1375 is a leap year, so Esfand has 30 days.
    assert _date(cal) == (1375, 11, 30)
