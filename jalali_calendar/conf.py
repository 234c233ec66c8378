"""Project-level defaults for Jalali calendars, read from Django settings."""

from __future__ import annotations

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from django.conf import settings

from .calendar import JalaliCalendar
from .core import SATURDAY


def first_day_of_week() -> int:
    return getattr(settings, "JALALI_FIRST_DAY_OF_WEEK", SATURDAY)


def minimal_days_in_first_week() -> int:
    return getattr(settings, "JALALI_MINIMAL_DAYS_IN_FIRST_WEEK", 1)


def lenient() -> bool:
    return getattr(settings, "JALALI_LENIENT", True)


def time_zone() -> str:
    return getattr(settings, "JALALI_TIME_ZONE", None) or settings.TIME_ZONE


def raw_offset_for(tz_name: str, when: datetime | None = None) -> int:
    """Return the standard UTC offset of ``tz_name`` in milliseconds.

    Daylight saving is subtracted, so Asia/Tehran gives 3.5 hours all year.
    """

    zone = ZoneInfo(tz_name)
    moment = (when or datetime.now(zone)).astimezone(zone)
    offset = moment.utcoffset() - (moment.dst() or timedelta(0))
    return offset // timedelta(milliseconds=1)


def default_calendar(*args, **overrides) -> JalaliCalendar:
    """Build a :class:`JalaliCalendar` configured from settings.

    Positional arguments and ``millis`` are passed through; keyword
    configuration overrides the settings.
    """

    overrides.setdefault("first_day_of_week", first_day_of_week())
    overrides.setdefault("minimal_days_in_first_week", minimal_days_in_first_week())
    overrides.setdefault("lenient", lenient())
    if "raw_offset" not in overrides:
        overrides["raw_offset"] = raw_offset_for(time_zone())
    return JalaliCalendar(*args, **overrides)
