"""Static field bounds for the Jalali calendar.

<pre>
                           Greatest       Least
Field name        Minimum   Minimum     Maximum     Maximum
----------        -------   -------     -------     -------
ERA                     0         0           1           1
YEAR                    1         1   292269054   292278994
MONTH                   0         0          11          11
WEEK_OF_YEAR            1         1          52          53
WEEK_OF_MONTH           0         0           5           6
DAY_OF_MONTH            1         1          29          31
DAY_OF_YEAR             1         1         365         366
DAY_OF_WEEK             1         1           7           7
DAY_OF_WEEK_IN_MONTH   -1        -1           4           6
AM_PM                   0         0           1           1
HOUR                    0         0          11          11
HOUR_OF_DAY             0         0          23          23
MINUTE                  0         0          59          59
SECOND                  0         0          59          59
MILLISECOND             0         0         999         999
ZONE_OFFSET           -12h      -12h         12h         12h
DST_OFFSET              0         0           1h          1h
</pre>
"""

from __future__ import annotations

from typing import Tuple

from .core import FIELD_COUNT, ONE_HOUR
from .exceptions import InvalidField

MIN_VALUES: Tuple[int, ...] = (
    0, 1, 0, 1, 0, 1, 1, 1, -1, 0, 0, 0, 0, 0, 0, -12 * ONE_HOUR, 0,
)  # fmt: skip
LEAST_MAX_VALUES: Tuple[int, ...] = (
    1, 292269054, 11, 52, 5, 29, 365, 7, 4, 1, 11, 23, 59, 59, 999, 12 * ONE_HOUR, ONE_HOUR,
)  # fmt: skip
MAX_VALUES: Tuple[int, ...] = (
    1, 292278994, 11, 53, 6, 31, 366, 7, 6, 1, 11, 23, 59, 59, 999, 12 * ONE_HOUR, ONE_HOUR,
)  # fmt: skip


def check_field(field: int, operation: str = "access") -> int:
    """Return ``field`` or raise :class:`InvalidField` for an unknown index."""

    if not isinstance(field, int) or not 0 <= field < FIELD_COUNT:
        raise InvalidField(field, operation)
    return field


def minimum(field: int) -> int:
    return MIN_VALUES[check_field(field)]


def greatest_minimum(field: int) -> int:
    # No field has a varying minimum in this calendar.
    return MIN_VALUES[check_field(field)]


def least_maximum(field: int) -> int:
    return LEAST_MAX_VALUES[check_field(field)]


def maximum(field: int) -> int:
    return MAX_VALUES[check_field(field)]


def in_bounds(field: int, value: int) -> bool:
    """Return True if ``value`` lies within the static range of ``field``."""

    return minimum(field) <= value <= maximum(field)
