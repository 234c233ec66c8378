"""Jalali (solar Hijri) calendar engine with Django helpers."""

from .calendar import JalaliCalendar
from .core import (
    AH,
    AM,
    AM_PM,
    BH,
    DATE,
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
    MONDAY,
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
)
from .exceptions import (
    CalendarError,
    DayOfWeekInMonthZero,
    FieldOutOfRange,
    InvalidEra,
    InvalidField,
)

__all__ = [
    "JalaliCalendar",
    "CalendarError",
    "DayOfWeekInMonthZero",
    "FieldOutOfRange",
    "InvalidEra",
    "InvalidField",
    "ERA",
    "YEAR",
    "MONTH",
    "WEEK_OF_YEAR",
    "WEEK_OF_MONTH",
    "DAY_OF_MONTH",
    "DATE",
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
    "BH",
    "AH",
    "AM",
    "PM",
    "SUNDAY",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
]
