"""Mutable Jalali calendar converting between an instant and calendar fields.

A :class:`JalaliCalendar` holds an instant (milliseconds since 1970-01-01
UTC) and seventeen integer fields.  Either side may be stale; reads bring
the stale side up to date.  Every ``set`` receives a stamp from a counter
so that, when several field groups could determine the day, the most
recently set group wins.
"""

from __future__ import annotations

import logging
import time as _time
from typing import List, Optional, Tuple

from . import bounds, core
from .core import (
    AH,
    AM_PM,
    BASE_YEAR,
    BH,
    DAY_OF_MONTH,
    DAY_OF_WEEK,
    DAY_OF_WEEK_IN_MONTH,
    DAY_OF_YEAR,
    DST_OFFSET,
    ERA,
    ESFAND,
    FARVARDIN,
    FIELD_COUNT,
    HOUR,
    HOUR_OF_DAY,
    MILLISECOND,
    MINUTE,
    MONTH,
    ONE_DAY,
    ONE_HOUR,
    ONE_MINUTE,
    ONE_SECOND,
    ONE_WEEK,
    SATURDAY,
    SECOND,
    SUNDAY,
    WEEK_OF_MONTH,
    WEEK_OF_YEAR,
    YEAR,
    ZONE_OFFSET,
    floor_divmod,
    jalali_day_before_year,
    jalali_day_to_day_of_week,
    jalali_day_to_millis,
    millis_to_jalali_day,
    pin_millis,
    week_number,
)
from .exceptions import DayOfWeekInMonthZero, FieldOutOfRange, InvalidEra, InvalidField

logger = logging.getLogger(__name__)

UNSET = 0
COMPUTED = 1
MINIMUM_USER_STAMP = 2

# Fields that add() shifts by a fixed number of milliseconds, and whether the
# shift spans whole days (so a change of DST offset is compensated).
_ADD_UNITS = {
    WEEK_OF_YEAR: (ONE_WEEK, True),
    WEEK_OF_MONTH: (ONE_WEEK, True),
    DAY_OF_WEEK_IN_MONTH: (ONE_WEEK, True),
    AM_PM: (12 * ONE_HOUR, True),
    DAY_OF_MONTH: (ONE_DAY, True),
    DAY_OF_YEAR: (ONE_DAY, True),
    DAY_OF_WEEK: (ONE_DAY, True),
    HOUR_OF_DAY: (ONE_HOUR, False),
    HOUR: (ONE_HOUR, False),
    MINUTE: (ONE_MINUTE, False),
    SECOND: (ONE_SECOND, False),
    MILLISECOND: (1, False),
}


def _aggregate_stamp(a: int, b: int) -> int:
    if a == UNSET or b == UNSET:
        return UNSET
    return max(a, b)


def _check_weekday_setting(name: str, value: int) -> int:
    if not isinstance(value, int) or not SUNDAY <= value <= SATURDAY:
        raise ValueError(f"{name} must be between 1 and 7, got {value!r}")
    return value


class JalaliCalendar:
    """Jalali calendar value with lenient or strict field resolution.

    ``JalaliCalendar()`` holds the current instant,
    ``JalaliCalendar(millis=...)`` a given instant, and
    ``JalaliCalendar(1394, 4, 1)`` is Mordad 1, 1394 (``month`` is 0-based).
    """

    def __init__(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
        hour: Optional[int] = None,
        minute: Optional[int] = None,
        second: Optional[int] = None,
        *,
        millis: Optional[int] = None,
        raw_offset: int = 0,
        first_day_of_week: int = SATURDAY,
        minimal_days_in_first_week: int = 1,
        lenient: bool = True,
    ) -> None:
        self._fields: List[int] = [0] * FIELD_COUNT
        self._stamps: List[int] = [UNSET] * FIELD_COUNT
        self._next_stamp = MINIMUM_USER_STAMP
        self._time = 0
        self._is_time_set = False
        self._are_fields_set = False
        self._raw_offset = int(raw_offset)
        self._first_day_of_week = _check_weekday_setting("first_day_of_week", first_day_of_week)
        self._minimal_days = _check_weekday_setting(
            "minimal_days_in_first_week", minimal_days_in_first_week
        )
        self._lenient = bool(lenient)

        if year is None:
            if any(v is not None for v in (month, day, hour, minute, second)):
                raise TypeError("year is required when other date parts are given")
            if millis is None:
                millis = _time.time_ns() // 1_000_000
            self.set_time(millis)
            return

        if month is None or day is None:
            raise TypeError("year, month and day must be given together")
        if millis is not None:
            raise TypeError("millis cannot be combined with date parts")
        self.set(ERA, AH)
        self.set(YEAR, year)
        self.set(MONTH, month)
        self.set(DAY_OF_MONTH, day)
        if hour is not None:
            self.set(HOUR_OF_DAY, hour)
        if minute is not None:
            self.set(MINUTE, minute)
        if second is not None:
            self.set(SECOND, second)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def first_day_of_week(self) -> int:
        return self._first_day_of_week

    @first_day_of_week.setter
    def first_day_of_week(self, value: int) -> None:
        value = _check_weekday_setting("first_day_of_week", value)
        if value != self._first_day_of_week:
            self._first_day_of_week = value
            self._are_fields_set = False

    @property
    def minimal_days_in_first_week(self) -> int:
        return self._minimal_days

    @minimal_days_in_first_week.setter
    def minimal_days_in_first_week(self, value: int) -> None:
        value = _check_weekday_setting("minimal_days_in_first_week", value)
        if value != self._minimal_days:
            self._minimal_days = value
            self._are_fields_set = False

    @property
    def lenient(self) -> bool:
        return self._lenient

    @lenient.setter
    def lenient(self, value: bool) -> None:
        self._lenient = bool(value)

    @property
    def raw_offset(self) -> int:
        """Standard offset from UTC in milliseconds, without DST."""
        return self._raw_offset

    @raw_offset.setter
    def raw_offset(self, value: int) -> None:
        value = int(value)
        if value != self._raw_offset:
            self._raw_offset = value
            self._are_fields_set = False

    # ------------------------------------------------------------------
    # Instant and fields
    # ------------------------------------------------------------------
    def get_time(self) -> int:
        """Return the instant in milliseconds since the epoch."""
        if not self._is_time_set:
            self._update_time()
        return self._time

    def set_time(self, millis: int) -> None:
        """Move to ``millis`` and recompute every field."""
        self._time = pin_millis(int(millis))
        self._is_time_set = True
        self._compute_fields()
        self._are_fields_set = True

    def get(self, field: int) -> int:
        bounds.check_field(field, "get")
        self._complete()
        return self._fields[field]

    def set(self, field: int, value: int) -> None:
        """Set ``field`` to ``value`` without validating it.

        Validation and normalization happen when the instant is next
        needed.
        """
        bounds.check_field(field, "set")
        self._refresh_stale_fields()
        self._fields[field] = int(value)
        self._stamps[field] = self._next_stamp
        self._next_stamp += 1
        self._is_time_set = False
        self._are_fields_set = False

    def clear(self, field: Optional[int] = None) -> None:
        """Unset ``field``, or every field when called without arguments."""
        if field is None:
            self._fields = [0] * FIELD_COUNT
            self._stamps = [UNSET] * FIELD_COUNT
        else:
            bounds.check_field(field, "clear")
            self._refresh_stale_fields()
            self._fields[field] = 0
            self._stamps[field] = UNSET
        self._is_time_set = False
        self._are_fields_set = False

    def is_set(self, field: int) -> bool:
        bounds.check_field(field, "is_set")
        return self._stamps[field] != UNSET

    def _refresh_stale_fields(self) -> None:
        # A valid instant with stale fields (after a configuration change)
        # must be expanded before individual fields are overwritten.
        if self._is_time_set and not self._are_fields_set:
            self._compute_fields()
            self._are_fields_set = True

    def _complete(self) -> None:
        if not self._is_time_set:
            self._update_time()
        if not self._are_fields_set:
            self._compute_fields()
            self._are_fields_set = True

    def _update_time(self) -> None:
        self._compute_time()
        self._is_time_set = True

    # ------------------------------------------------------------------
    # Instant -> fields
    # ------------------------------------------------------------------
    def _dst_offset(self, local_millis: int) -> int:
        """Daylight saving offset in effect at ``local_millis``.

        Only a fixed raw offset is modelled, so this is always zero.
        """
        return 0

    def _compute_fields(self) -> None:
        raw_offset = self._raw_offset
        local_millis = pin_millis(self._time + raw_offset)
        self._time_to_fields(local_millis, quick=False)

        millis_in_day = local_millis % ONE_DAY
        dst_offset = self._dst_offset(local_millis)
        millis_in_day += dst_offset
        if millis_in_day >= ONE_DAY:
            # DST moved the wall clock past midnight.
            millis_in_day -= ONE_DAY
            self._time_to_fields(pin_millis(local_millis + dst_offset), quick=False)

        f = self._fields
        f[MILLISECOND] = millis_in_day % 1000
        millis_in_day //= 1000
        f[SECOND] = millis_in_day % 60
        millis_in_day //= 60
        f[MINUTE] = millis_in_day % 60
        millis_in_day //= 60
        f[HOUR_OF_DAY] = millis_in_day
        f[AM_PM] = millis_in_day // 12
        f[HOUR] = millis_in_day % 12
        f[ZONE_OFFSET] = raw_offset
        f[DST_OFFSET] = dst_offset
        self._stamps = [COMPUTED] * FIELD_COUNT

    def _time_to_fields(self, the_time: int, quick: bool) -> None:
        """Fill the date fields from local wall-clock milliseconds.

        With ``quick`` only ERA, YEAR, MONTH, DAY_OF_MONTH, DAY_OF_WEEK and
        DAY_OF_YEAR are filled.
        """
        f = self._fields
        jalali_day = millis_to_jalali_day(the_time)
        raw_year, day_of_year0 = core.decompose_jalali_day(jalali_day)
        day_of_week = jalali_day_to_day_of_week(jalali_day)
        month, date = core.month_and_day(day_of_year0)
        day_of_year = day_of_year0 + 1

        if raw_year < 1:
            f[ERA] = BH
            f[YEAR] = 1 - raw_year
        else:
            f[ERA] = AH
            f[YEAR] = raw_year
        f[MONTH] = month
        f[DAY_OF_MONTH] = date
        f[DAY_OF_WEEK] = day_of_week
        f[DAY_OF_YEAR] = day_of_year
        if quick:
            return

        first_dow = self._first_day_of_week
        min_days = self._minimal_days
        rel_dow = (day_of_week + 7 - first_dow) % 7
        rel_dow_far1 = (day_of_week - day_of_year + 701 - first_dow) % 7
        week_of_year = (day_of_year - 1 + rel_dow_far1) // 7
        if 7 - rel_dow_far1 >= min_days:
            week_of_year += 1

        if day_of_year > 359:
            # The last days of the year may belong to week 1 of the next one.
            last_doy = core.year_length(raw_year)
            last_rel_dow = (rel_dow + last_doy - day_of_year) % 7
            if 6 - last_rel_dow >= min_days and day_of_year + 7 - rel_dow > last_doy:
                week_of_year = 1
        elif week_of_year == 0:
            # Leading days belong to the last week of the previous year.
            prev_doy = day_of_year + core.year_length(raw_year - 1)
            week_of_year = week_number(prev_doy, day_of_week, first_dow, min_days)

        f[WEEK_OF_YEAR] = week_of_year
        f[WEEK_OF_MONTH] = week_number(date, day_of_week, first_dow, min_days)
        f[DAY_OF_WEEK_IN_MONTH] = (date - 1) // 7 + 1

    # ------------------------------------------------------------------
    # Fields -> instant
    # ------------------------------------------------------------------
    def _compute_time(self) -> None:
        if not self._lenient:
            self._validate_fields()

        f = self._fields
        s = self._stamps
        year = f[YEAR] if s[YEAR] != UNSET else BASE_YEAR
        if s[ERA] != UNSET:
            era = f[ERA]
            if era == BH:
                year = 1 - year
            elif era != AH:
                raise InvalidEra(era)

        millis = jalali_day_to_millis(self._compute_jalali_day(year))

        hour_stamp = max(s[HOUR], s[HOUR_OF_DAY])
        millis_in_day = 0
        if hour_stamp != UNSET:
            if hour_stamp == s[HOUR_OF_DAY]:
                millis_in_day = f[HOUR_OF_DAY]
            else:
                millis_in_day = f[HOUR] + 12 * f[AM_PM]
        millis_in_day = millis_in_day * 60 + f[MINUTE]
        millis_in_day = millis_in_day * 60 + f[SECOND]
        millis_in_day = millis_in_day * 1000 + f[MILLISECOND]
        millis += millis_in_day

        if s[ZONE_OFFSET] >= MINIMUM_USER_STAMP:
            zone_offset = f[ZONE_OFFSET]
        else:
            zone_offset = self._raw_offset

        if s[DST_OFFSET] >= MINIMUM_USER_STAMP:
            dst_offset = f[DST_OFFSET]
        else:
            if (
                self._lenient
                or s[MONTH] == UNSET
                or s[DAY_OF_MONTH] == UNSET
                or millis_in_day != millis % ONE_DAY
            ):
                # Normalize the date fields for the DST lookup.
                self._time_to_fields(millis, quick=True)
            dst_offset = self._dst_offset(millis)

        self._time = pin_millis(millis - zone_offset - dst_offset)

    def _compute_jalali_day(self, year: int) -> int:
        """Return the Jalali day number selected by the freshest field group."""
        f = self._fields
        s = self._stamps
        first_dow = self._first_day_of_week
        min_days = self._minimal_days

        dow_stamp = s[DAY_OF_WEEK]
        month_stamp = s[MONTH]
        dom_stamp = s[DAY_OF_MONTH]
        wom_stamp = _aggregate_stamp(s[WEEK_OF_MONTH], dow_stamp)
        dowim_stamp = _aggregate_stamp(s[DAY_OF_WEEK_IN_MONTH], dow_stamp)
        doy_stamp = s[DAY_OF_YEAR]
        woy_stamp = _aggregate_stamp(s[WEEK_OF_YEAR], dow_stamp)

        best = max(dom_stamp, wom_stamp, dowim_stamp, doy_stamp, woy_stamp)
        if best == UNSET:
            # No complete group; fall back to week numbers without a weekday.
            wom_stamp = s[WEEK_OF_MONTH]
            dowim_stamp = max(s[DAY_OF_WEEK_IN_MONTH], dow_stamp)
            woy_stamp = s[WEEK_OF_YEAR]
            best = max(wom_stamp, dowim_stamp, woy_stamp)
            if best == UNSET:
                best = dom_stamp = month_stamp

        # Weekday offset from the first day of the week, 0..6.
        rel_dow = (f[DAY_OF_WEEK] - first_dow) % 7 if dow_stamp != UNSET else 0

        use_month = best in (dom_stamp, wom_stamp, dowim_stamp)
        month = 0
        if use_month:
            month = f[MONTH] if month_stamp != UNSET else FARVARDIN
            if month < FARVARDIN or month > ESFAND:
                carry, month = floor_divmod(month, 12)
                year += carry

        jalali_day = jalali_day_before_year(year)

        if use_month:
            jalali_day += core.NUM_DAYS[month]
            if best == dom_stamp:
                date = f[DAY_OF_MONTH] if s[DAY_OF_MONTH] != UNSET else 1
            else:
                first_rel = (jalali_day_to_day_of_week(jalali_day + 1) - first_dow) % 7
                date = 1 - first_rel + rel_dow
                if best == wom_stamp:
                    if 7 - first_rel < min_days:
                        date += 7
                    date += 7 * (f[WEEK_OF_MONTH] - 1)
                else:
                    if date < 1:
                        date += 7
                    dim = f[DAY_OF_WEEK_IN_MONTH] if s[DAY_OF_WEEK_IN_MONTH] != UNSET else 1
                    if dim >= 0:
                        date += 7 * (dim - 1)
                    else:
                        # Count back from the end: -1 is the last such weekday.
                        month_len = core.month_length(month, year)
                        date += ((month_len - date) // 7 + dim + 1) * 7
            return jalali_day + date

        if best == doy_stamp:
            return jalali_day + f[DAY_OF_YEAR]

        first_rel = (jalali_day_to_day_of_week(jalali_day + 1) - first_dow) % 7
        date = 1 - first_rel + rel_dow
        if 7 - first_rel < min_days:
            date += 7
        date += 7 * (f[WEEK_OF_YEAR] - 1)
        return jalali_day + date

    def _validate_fields(self) -> None:
        f = self._fields
        s = self._stamps
        for field in range(FIELD_COUNT):
            if s[field] == UNSET or field in (DAY_OF_MONTH, DAY_OF_YEAR):
                continue
            value = f[field]
            if field == ERA and value not in (BH, AH):
                logger.debug("Rejecting era %s in strict mode", value)
                raise InvalidEra(value)
            if not bounds.in_bounds(field, value):
                self._reject(field, value, bounds.minimum(field), bounds.maximum(field))

        if s[DAY_OF_MONTH] != UNSET:
            self._check_range(DAY_OF_MONTH, 1, self._month_length(f[MONTH]))
        if s[DAY_OF_YEAR] != UNSET:
            self._check_range(DAY_OF_YEAR, 1, self._year_length())
        if s[DAY_OF_WEEK_IN_MONTH] != UNSET and f[DAY_OF_WEEK_IN_MONTH] == 0:
            logger.debug("Rejecting DAY_OF_WEEK_IN_MONTH=0 in strict mode")
            raise DayOfWeekInMonthZero()

    def _check_range(self, field: int, low: int, high: int) -> None:
        value = self._fields[field]
        if not low <= value <= high:
            self._reject(field, value, low, high)

    def _reject(self, field: int, value: int, low: int, high: int) -> None:
        error = FieldOutOfRange(field, value, low, high)
        logger.debug("Rejecting field in strict mode: %s", error)
        raise error

    # ------------------------------------------------------------------
    # Era-aware helpers over the current fields
    # ------------------------------------------------------------------
    def _era(self) -> int:
        return self._fields[ERA] if self._stamps[ERA] != UNSET else AH

    def _proleptic_year(self) -> int:
        year = self._fields[YEAR] if self._stamps[YEAR] != UNSET else BASE_YEAR
        return 1 - year if self._era() == BH else year

    def _set_proleptic_year(self, year: int) -> None:
        if year > 0:
            self.set(YEAR, year)
            if self._era() != AH:
                self.set(ERA, AH)
        else:
            self.set(YEAR, 1 - year)
            if self._era() != BH:
                self.set(ERA, BH)

    def _month_length(self, month: int) -> int:
        return core.month_length(month, self._proleptic_year())

    def _year_length(self) -> int:
        return core.year_length(self._proleptic_year())

    def _pin_day_of_month(self) -> None:
        month_len = self._month_length(self._fields[MONTH])
        if self._fields[DAY_OF_MONTH] > month_len:
            self.set(DAY_OF_MONTH, month_len)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def add(self, field: int, amount: int) -> None:
        """Add ``amount`` to ``field`` and carry into larger fields.

        Adding years or months keeps the day of month when it exists in the
        target month and pins it to the last day otherwise.
        """
        if amount == 0:
            return
        bounds.check_field(field, "add")
        if field in (ZONE_OFFSET, DST_OFFSET):
            raise InvalidField(field, "add")
        self._complete()
        f = self._fields

        if field == YEAR:
            self._set_proleptic_year(self._proleptic_year() + amount)
            self._pin_day_of_month()
        elif field == MONTH:
            carry, month = floor_divmod(f[MONTH] + amount, 12)
            if carry:
                self._set_proleptic_year(self._proleptic_year() + carry)
            self.set(MONTH, month)
            self._pin_day_of_month()
        elif field == ERA:
            self.set(ERA, min(max(f[ERA] + amount, BH), AH))
        else:
            unit, spans_days = _ADD_UNITS[field]
            dst_before = f[DST_OFFSET] if spans_days else 0
            self.set_time(self._time + amount * unit)
            if spans_days:
                dst_shift = dst_before - self._fields[DST_OFFSET]
                if dst_shift:
                    self.set_time(self._time + dst_shift)

    def roll(self, field: int, amount) -> None:
        """Add ``amount`` to ``field`` without changing larger fields.

        ``amount`` may be a bool, meaning one unit up (True) or down (False).
        """
        if isinstance(amount, bool):
            amount = 1 if amount else -1
        if amount == 0:
            return
        bounds.check_field(field, "roll")
        if field in (ZONE_OFFSET, DST_OFFSET):
            raise InvalidField(field, "roll")
        self._complete()
        f = self._fields
        low = bounds.minimum(field)
        high = bounds.maximum(field)

        if field in (HOUR, HOUR_OF_DAY):
            # Move the instant so that DST changes do not disturb the roll.
            old = f[field]
            new = (old + amount) % (high + 1)
            self.set_time(self._time + ONE_HOUR * (new - old))
            return

        if field == MONTH:
            month = (f[MONTH] + amount) % 12
            self.set(MONTH, month)
            self._pin_day_of_month()
            return

        if field == WEEK_OF_YEAR:
            self._roll_week_of_year(amount)
            return

        if field == WEEK_OF_MONTH:
            self._roll_week_of_month(amount)
            return

        if field == DAY_OF_YEAR:
            start = self._time - (f[DAY_OF_YEAR] - 1) * ONE_DAY
            span = self._year_length() * ONE_DAY
            self.set_time((self._time + amount * ONE_DAY - start) % span + start)
            return

        if field == DAY_OF_WEEK:
            lead = (f[DAY_OF_WEEK] - self._first_day_of_week) % 7
            start = self._time - lead * ONE_DAY
            self.set_time((self._time + amount * ONE_DAY - start) % ONE_WEEK + start)
            return

        if field == DAY_OF_WEEK_IN_MONTH:
            before = (f[DAY_OF_MONTH] - 1) // 7
            after = (self._month_length(f[MONTH]) - f[DAY_OF_MONTH]) // 7
            start = self._time - before * ONE_WEEK
            span = (before + after + 1) * ONE_WEEK
            self.set_time((self._time + amount * ONE_WEEK - start) % span + start)
            return

        if field == DAY_OF_MONTH:
            high = self._month_length(f[MONTH])

        gap = high - low + 1
        self.set(field, (f[field] + amount - low) % gap + low)

    def _roll_week_of_year(self, amount: int) -> None:
        f = self._fields
        first_dow = self._first_day_of_week
        min_days = self._minimal_days
        week = f[WEEK_OF_YEAR]
        # The week may belong to the neighbouring year.
        week_year = self._proleptic_year()
        week_doy = f[DAY_OF_YEAR]
        if f[MONTH] == FARVARDIN:
            if week >= 52:
                week_year -= 1
                week_doy += core.year_length(week_year)
        elif week == 1:
            week_doy -= core.year_length(week_year)
            week_year += 1

        week += amount
        if week < 1 or week > 52:
            last_doy = core.year_length(week_year)
            last_rel_dow = (last_doy - week_doy + f[DAY_OF_WEEK] - first_dow) % 7
            if 6 - last_rel_dow >= min_days:
                last_doy -= 7
            last_dow = (last_rel_dow + first_dow - 1) % 7 + 1
            last_week = week_number(last_doy, last_dow, first_dow, min_days)
            week = (week + last_week - 1) % last_week + 1

        self.set(WEEK_OF_YEAR, week)
        self._set_proleptic_year(week_year)

    def _roll_week_of_month(self, amount: int) -> None:
        f = self._fields
        rel_dow = (f[DAY_OF_WEEK] - self._first_day_of_week) % 7
        # Weekday of day 1 relative to the first day of the week.
        first_rel = (rel_dow - f[DAY_OF_MONTH] + 1) % 7
        if 7 - first_rel < self._minimal_days:
            start = 8 - first_rel
        else:
            start = 1 - first_rel
        month_len = self._month_length(f[MONTH])
        last_rel = (month_len - f[DAY_OF_MONTH] + rel_dow) % 7
        limit = month_len + 7 - last_rel
        gap = limit - start
        date = (f[DAY_OF_MONTH] + amount * 7 - start) % gap + start
        # Phantom days outside the month are pinned to its first or last day.
        date = max(1, min(date, month_len))
        self.set(DAY_OF_MONTH, date)

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------
    def get_minimum(self, field: int) -> int:
        return bounds.minimum(field)

    def get_greatest_minimum(self, field: int) -> int:
        return bounds.greatest_minimum(field)

    def get_least_maximum(self, field: int) -> int:
        return bounds.least_maximum(field)

    def get_maximum(self, field: int) -> int:
        return bounds.maximum(field)

    def get_actual_minimum(self, field: int) -> int:
        return bounds.minimum(field)

    def get_actual_maximum(self, field: int) -> int:
        """Return the largest value ``field`` can take given the other fields."""
        bounds.check_field(field, "get_actual_maximum")
        if field == DAY_OF_MONTH:
            return self._month_length(self.get(MONTH))
        if field == DAY_OF_YEAR:
            self._complete()
            return self._year_length()
        if field == YEAR:
            return self._actual_maximum_year()
        if field in (WEEK_OF_YEAR, WEEK_OF_MONTH, DAY_OF_WEEK_IN_MONTH):
            return self._probe_actual_maximum(field)
        return bounds.maximum(field)

    def _probe_actual_maximum(self, field: int) -> int:
        value = bounds.least_maximum(field)
        end = bounds.maximum(field)
        if value == end:
            return value

        work = self.copy()
        work.lenient = True
        if field in (WEEK_OF_YEAR, WEEK_OF_MONTH):
            work.set(DAY_OF_WEEK, self._first_day_of_week)

        result = value
        while value <= end:
            work.set(field, value)
            if work.get(field) != value:
                break
            result = value
            value += 1
        return result

    def _actual_maximum_year(self) -> int:
        work = self.copy()
        work.lenient = True
        era = work.get(ERA)
        saved = work.get_time()

        low_good = bounds.least_maximum(YEAR)
        high_bad = bounds.maximum(YEAR) + 1
        while low_good + 1 < high_bad:
            year = (low_good + high_bad) // 2
            work.set(YEAR, year)
            if work.get(YEAR) == year and work.get(ERA) == era:
                low_good = year
            else:
                high_bad = year
                work.set_time(saved)
        logger.debug("Actual maximum year for era %s is %s", era, low_good)
        return low_good

    @staticmethod
    def is_leap_year(year: int) -> bool:
        return core.is_leap_year(year)

    # ------------------------------------------------------------------
    # Misc
    # ------------------------------------------------------------------
    def week_year(self) -> int:
        """Return the proleptic year that WEEK_OF_YEAR counts in.

        Farvardin days in week 52 or 53 belong to the previous year and
        Esfand days in week 1 to the next one.
        """
        self._complete()
        year = self._proleptic_year()
        week = self._fields[WEEK_OF_YEAR]
        month = self._fields[MONTH]
        if month == FARVARDIN and week >= 52:
            return year - 1
        if month == ESFAND and week == 1:
            return year + 1
        return year

    def _config(self) -> Tuple[int, int, bool, int]:
        return (
            self._first_day_of_week,
            self._minimal_days,
            self._lenient,
            self._raw_offset,
        )

    def copy(self) -> "JalaliCalendar":
        other = self.__class__.__new__(self.__class__)
        other.__dict__.update(self.__dict__)
        other._fields = list(self._fields)
        other._stamps = list(self._stamps)
        return other

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.get_time() == other.get_time() and self._config() == other._config()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        self._complete()
        f = self._fields
        era = "AH" if f[ERA] == AH else "BH"
        return (
            f"<JalaliCalendar {f[YEAR]:04d}/{f[MONTH] + 1:02d}/{f[DAY_OF_MONTH]:02d} "
            f"{f[HOUR_OF_DAY]:02d}:{f[MINUTE]:02d}:{f[SECOND]:02d}.{f[MILLISECOND]:03d} "
            f"{era} offset={self._raw_offset}>"
        )
