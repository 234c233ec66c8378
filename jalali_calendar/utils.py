"""Jalali calendar helper utilities."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Any

from django.core.exceptions import ValidationError

from . import core
from .calendar import JalaliCalendar
from .core import (
    DAY_OF_MONTH,
    ERA,
    HOUR_OF_DAY,
    MILLISECOND,
    MINUTE,
    MONTH,
    SECOND,
    YEAR,
)

_EPOCH = datetime(1970, 1, 1)
_ONE_MILLISECOND = timedelta(milliseconds=1)

# Persian (U+06F0..) and Arabic-Indic (U+0660..) digits.
_DIGITS = str.maketrans(
    "۰۱۲۳۴۵۶۷۸۹٠١٢٣٤٥٦٧٨٩",
    "01234567890123456789",
)
# Arabic letters that Persian text should use the Persian form of.
_PERSIAN_LETTERS = str.maketrans(
    {
        "ك": "ک",  # ARABIC LETTER KAF -> KEHEH
        "ي": "ی",  # ARABIC LETTER YEH -> FARSI YEH
        "ى": "ی",  # ALEF MAKSURA -> FARSI YEH
    }
)

_DATE_RE = re.compile(
    r"(\d{1,4})[/-](\d{1,2})[/-](\d{1,2})"
    r"(?:\s+(\d{1,2}):(\d{1,2})(?::(\d{1,2})(?:\.(\d{1,3}))?)?)?"
)


def normalize_digits(value: str) -> str:
    """Return ``value`` with Persian and Arabic-Indic digits as ASCII."""

    return value.translate(_DIGITS)


def unify_characters(value: str) -> str:
    """Replace Arabic Kaf and Yeh with their Persian forms."""

    return value.translate(_PERSIAN_LETTERS)


def days_in_month(year: int, month: int) -> int:
    """Return number of days in 1-based ``month`` for ``year``."""

    if not 1 <= month <= 12:
        raise ValueError("Month must be 1-12")
    return core.month_length(month - 1, year)


def parse_jalali_date(value: Any) -> tuple[int | None, int | None, int | None]:
    """Tolerant parser for Jalali dates.

    Accepts multiple input types:

    * ``None``/``""``/``b""`` → ``(None, None, None)``
    * ``tuple``/``list`` of three items → components (strings allowed)
    * ``bytes`` → decoded as UTF-8
    * ``str`` in formats ``YYYY/MM/DD`` or ``YYYY-MM-DD``, Persian digits allowed

    Raises :class:`django.core.exceptions.ValidationError` on invalid input.
    """

    err_msg = "Date must be in YYYY/MM/DD or YYYY-MM-DD format"

    if value in (None, "", b""):
        return (None, None, None)

    if isinstance(value, list | tuple) and len(value) == 3:
        if all(v in (None, "", b"") for v in value):
            return (None, None, None)
        try:
            y, m, d = [int(normalize_digits(str(v))) for v in value]
            max_day = days_in_month(y, m)
        except ValueError as exc:
            raise ValidationError(err_msg) from exc
        if not 1 <= d <= max_day:
            raise ValidationError(err_msg)
        return y, m, d

    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValidationError(err_msg) from exc

    if isinstance(value, str):
        value = normalize_digits(value).strip()
        if not value:
            return (None, None, None)

        match = re.fullmatch(r"(\d{1,4})[/-](\d{1,2})[/-](\d{1,2})", value)
        if not match:
            raise ValidationError(err_msg)
        y, m, d = map(int, match.groups())
        try:
            max_day = days_in_month(y, m)
        except ValueError as exc:
            raise ValidationError(err_msg) from exc
        if y <= 0 or not 1 <= d <= max_day:
            raise ValidationError(err_msg)
        return y, m, d

    raise ValidationError(err_msg)


def format_jalali_date(year: int, month: int, day: int) -> str:
    """Return ``YYYY/MM/DD`` string from components."""

    days_in_month(year, month)  # validation
    return f"{year:04d}/{month:02d}/{day:02d}"


def jalali_to_gregorian(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> datetime:
    """Return the naive Gregorian ``datetime`` for a Jalali wall-clock time.

    ``month`` is 1-based.  Out-of-range parts raise
    :class:`jalali_calendar.exceptions.CalendarError`; dates past Gregorian
    year 9999 raise ``ValueError``.
    """

    cal = JalaliCalendar(year, month - 1, day, hour, minute, second, lenient=False)
    cal.set(MILLISECOND, millisecond)
    try:
        return _EPOCH + timedelta(milliseconds=cal.get_time())
    except OverflowError as exc:
        raise ValueError(
            f"{year:04d}/{month:02d}/{day:02d} is outside the supported Gregorian range"
        ) from exc


def gregorian_to_jalali(value: date | datetime) -> tuple[int, int, int, int, int, int]:
    """Return ``(year, month, day, hour, minute, second)`` for ``value``.

    Aware datetimes are converted by their wall-clock reading.
    """

    if isinstance(value, datetime):
        moment = value.replace(tzinfo=None)
    else:
        moment = datetime(value.year, value.month, value.day)
    millis = (moment - _EPOCH) // _ONE_MILLISECOND
    cal = JalaliCalendar(millis=millis)
    year = cal.get(YEAR) if cal.get(ERA) == core.AH else 1 - cal.get(YEAR)
    return (
        year,
        cal.get(MONTH) + 1,
        cal.get(DAY_OF_MONTH),
        cal.get(HOUR_OF_DAY),
        cal.get(MINUTE),
        cal.get(SECOND),
    )


def _split_date_time(text: str) -> tuple[tuple[int, ...], tuple[int, ...] | None]:
    match = _DATE_RE.fullmatch(normalize_digits(text).strip())
    if not match:
        raise ValueError(f"Cannot parse date {text!r}")
    parts = match.groups()
    ymd = tuple(int(p) for p in parts[:3])
    if parts[3] is None:
        return ymd, None
    clock = tuple(int(p) for p in parts[3:] if p is not None)
    return ymd, clock


def _format_clock(clock: tuple[int, ...], hour: int, minute: int, second: int) -> str:
    if len(clock) == 2:
        return f" {hour:02d}:{minute:02d}"
    return f" {hour:02d}:{minute:02d}:{second:02d}"


def solar_to_gregorian(text: str) -> str:
    """Convert ``YYYY/MM/DD[ HH:mm[:ss[.S]]]`` from Jalali to Gregorian.

    >>> solar_to_gregorian("1394/05/01 15:14")
    '2015/07/23 15:14'
    """

    (y, m, d), clock = _split_date_time(text)
    hour, minute, second, milli = (tuple(clock or ()) + (0, 0, 0, 0))[:4]
    result = jalali_to_gregorian(y, m, d, hour, minute, second, milli)
    out = f"{result.year:04d}/{result.month:02d}/{result.day:02d}"
    if clock is not None:
        out += _format_clock(clock, result.hour, result.minute, result.second)
    return out


def gregorian_to_solar(value: str | date | datetime) -> str:
    """Convert a Gregorian date to ``YYYY/MM/DD[ HH:mm[:ss]]`` Jalali text.

    Strings use ``YYYY/MM/DD`` or ``YYYY-MM-DD`` with an optional
    ``HH:mm``, ``HH:mm:ss`` or ``HH:mm:ss.S`` time.  ``datetime`` values
    always include ``HH:mm:ss``.
    """

    clock: tuple[int, ...] | None
    if isinstance(value, datetime):
        moment = value
        clock = (value.hour, value.minute, value.second)
    elif isinstance(value, date):
        moment = value
        clock = None
    else:
        (y, m, d), clock = _split_date_time(value)
        hour, minute, second, milli = (tuple(clock or ()) + (0, 0, 0, 0))[:4]
        moment = datetime(y, m, d, hour, minute, second, milli * 1000)

    y, m, d, hour, minute, second = gregorian_to_jalali(moment)
    out = f"{y:04d}/{m:02d}/{d:02d}"
    if clock is not None:
        out += _format_clock(clock, hour, minute, second)
    return out
