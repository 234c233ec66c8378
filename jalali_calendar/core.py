"""Canonical Jalali (solar Hijri) calendar arithmetic.

This module is the single source of truth for the leap rule, the day
numbering and the week numbering used by :class:`jalali_calendar.calendar.JalaliCalendar`.
Everything here is a pure function over integers.

Leap years follow the 33 year cycle: a year is leap when ``(year + 11) mod 33``
is a multiple of four other than 32.  That yields eight leap years per cycle
spaced four years apart, with a five year gap before the first leap year of
the next cycle (1370, 1375, 1379, ...).

Day numbers are Julian-style day numbers whose day starts at midnight.  Day
2440588 is 1 January 1970 and day 2450529 is Friday, Farvardin 1, 1376.
"""

from __future__ import annotations

from typing import List, Tuple

# Field indices ------------------------------------------------------------
ERA = 0
YEAR = 1
MONTH = 2
WEEK_OF_YEAR = 3
WEEK_OF_MONTH = 4
DAY_OF_MONTH = 5
DATE = DAY_OF_MONTH
DAY_OF_YEAR = 6
DAY_OF_WEEK = 7
DAY_OF_WEEK_IN_MONTH = 8
AM_PM = 9
HOUR = 10
HOUR_OF_DAY = 11
MINUTE = 12
SECOND = 13
MILLISECOND = 14
ZONE_OFFSET = 15
DST_OFFSET = 16
FIELD_COUNT = 17

FIELD_NAMES: Tuple[str, ...] = (
    "ERA",
    "YEAR",
    "MONTH",
    "WEEK_OF_YEAR",
    "WEEK_OF_MONTH",
    "DAY_OF_MONTH",
    "DAY_OF_YEAR",
    "DAY_OF_WEEK",
    "DAY_OF_WEEK_IN_MONTH",
    "AM_PM",
    "HOUR",
    "HOUR_OF_DAY",
    "MINUTE",
    "SECOND",
    "MILLISECOND",
    "ZONE_OFFSET",
    "DST_OFFSET",
)

# Eras: ..., 2 BH, 1 BH, 1 AH, 2 AH, ...
BH = 0
AH = 1

AM = 0
PM = 1

SUNDAY = 1
MONDAY = 2
TUESDAY = 3
WEDNESDAY = 4
THURSDAY = 5
FRIDAY = 6
SATURDAY = 7

FARVARDIN = 0
ORDIBEHESHT = 1
KHORDAD = 2
TIR = 3
MORDAD = 4
SHAHRIVAR = 5
MEHR = 6
ABAN = 7
AZAR = 8
DEY = 9
BAHMAN = 10
ESFAND = 11

MONTH_NAMES: List[str] = [
    "Farvardin",
    "Ordibehesht",
    "Khordad",
    "Tir",
    "Mordad",
    "Shahrivar",
    "Mehr",
    "Aban",
    "Azar",
    "Dey",
    "Bahman",
    "Esfand",
]

FAR_1_1376_JALALI_DAY: int = 2450529
EPOCH_JALALI_DAY: int = 2440588
# Year before the epoch year 1376; 1376 starts a 33 year cycle.
BASE_YEAR: int = 1375

DAYS_IN_33_YEARS: int = 365 * 33 + 8  # 12053
DAYS_IN_4_YEARS: int = 365 * 4 + 1  # 1461

NUM_DAYS: Tuple[int, ...] = (0, 31, 62, 93, 124, 155, 186, 216, 246, 276, 306, 336)
MONTH_LENGTH: Tuple[int, ...] = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)
LEAP_MONTH_LENGTH: Tuple[int, ...] = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 30)

ONE_SECOND: int = 1000
ONE_MINUTE: int = 60 * ONE_SECOND
ONE_HOUR: int = 60 * ONE_MINUTE
ONE_DAY: int = 24 * ONE_HOUR
ONE_WEEK: int = 7 * ONE_DAY

LONG_MIN: int = -(2**63)
LONG_MAX: int = 2**63 - 1


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a leap year.

    ``year`` is the proleptic year number where 0 is 1 BH, -1 is 2 BH and so
    on.  Python's ``%`` is a true modulus so the rule holds for every int.
    """

    mod = (year + 11) % 33
    return mod % 4 == 0 and mod != 32


def floor_divide(numerator: int, denominator: int) -> int:
    """Divide rounding toward negative infinity; ``floor_divide(-1, 4) == -1``."""

    return numerator // denominator


def floor_divmod(numerator: int, denominator: int) -> Tuple[int, int]:
    """Return ``(quotient, remainder)`` with a non-negative remainder."""

    return divmod(numerator, denominator)


def pin_millis(value: int) -> int:
    """Clamp ``value`` to the signed 64-bit range instead of wrapping."""

    if value > LONG_MAX:
        return LONG_MAX
    if value < LONG_MIN:
        return LONG_MIN
    return value


def millis_to_jalali_day(millis: int) -> int:
    """Convert milliseconds since the epoch to a Jalali day number."""

    return EPOCH_JALALI_DAY + floor_divide(millis, ONE_DAY)


def jalali_day_to_millis(day: int) -> int:
    """Convert a Jalali day number to milliseconds since the epoch."""

    return (day - EPOCH_JALALI_DAY) * ONE_DAY


def jalali_day_to_day_of_week(day: int) -> int:
    """Return the weekday (``SUNDAY``..``SATURDAY``) of Jalali day ``day``."""

    # Day FAR_1_1376_JALALI_DAY is a Friday, and so is every multiple of 7 from it.
    return (day - FAR_1_1376_JALALI_DAY + FRIDAY - SUNDAY) % 7 + SUNDAY


def month_length(month: int, year: int) -> int:
    """Length of 0-based ``month`` in proleptic ``year``."""

    if is_leap_year(year):
        return LEAP_MONTH_LENGTH[month]
    return MONTH_LENGTH[month]


def year_length(year: int) -> int:
    """Return the number of days in proleptic ``year``."""

    return 366 if is_leap_year(year) else 365


def month_lengths(year: int) -> List[int]:
    """Return the twelve month lengths of ``year``."""

    return [month_length(m, year) for m in range(12)]


def jalali_day_before_year(year: int) -> int:
    """Return the Jalali day number of the day before Farvardin 1 of ``year``."""

    y = year - BASE_YEAR - 1
    cycles, rem = floor_divmod(y, 33)
    day = FAR_1_1376_JALALI_DAY + 365 * y - 1
    day += cycles * 8
    day += floor_divide(rem, 4)
    day -= floor_divide(rem, 32)
    return day


def decompose_jalali_day(day: int) -> Tuple[int, int]:
    """Split a Jalali day number into ``(year, day_of_year)``.

    ``year`` is proleptic (0 is 1 BH) and ``day_of_year`` is 0-based.  The
    offset from Farvardin 1, 1376 is broken down into 33 year cycles
    (12053 days), 4 year groups (1461 days) and single 365 day years.
    """

    offset = day - FAR_1_1376_JALALI_DAY
    n33, rem = floor_divmod(offset, DAYS_IN_33_YEARS)
    n4, rem = floor_divmod(rem, DAYS_IN_4_YEARS)
    n1, rem = floor_divmod(rem, 365)
    year = BASE_YEAR + 33 * n33 + 4 * n4 + n1
    day_of_year = rem
    if n4 != 7 and n1 == 4:
        # Esfand 30 closing a 4 year group.
        day_of_year = 365
    else:
        year += 1
        if n4 == 8:
            # The last group of the cycle is not leap, so its extra day
            # belongs to the final year.
            day_of_year += 1
        elif n4 == 7 and n1 == 4:
            # Farvardin 1 of the last year of the 33 year cycle.
            day_of_year = 0
    return year, day_of_year


def month_and_day(day_of_year: int) -> Tuple[int, int]:
    """Return ``(month, day_of_month)`` for 0-based ``day_of_year``.

    The month is 0-based, the day of month 1-based.
    """

    if day_of_year < NUM_DAYS[6]:
        month = day_of_year // 31
    else:
        month = (day_of_year - 6) // 30
    return month, day_of_year - NUM_DAYS[month] + 1


def week_number(
    day_of_period: int,
    day_of_week: int,
    first_day_of_week: int,
    minimal_days_in_first_week: int,
) -> int:
    """Return the week number of a day within a year or a month.

    ``day_of_period`` is 1 for the first day of the period and ``day_of_week``
    is the weekday of that day.  The result is 1-based, or 0 for leading days
    that do not make up ``minimal_days_in_first_week`` days before the first
    full week.
    """

    period_start = (day_of_week - first_day_of_week - day_of_period + 1) % 7
    week_no = (day_of_period + period_start - 1) // 7
    if 7 - period_start >= minimal_days_in_first_week:
        week_no += 1
    return week_no
