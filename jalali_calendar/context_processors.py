"""Context processors for the Jalali calendar."""

from . import conf, core
from .core import AH, DAY_OF_MONTH, ERA, MONTH, YEAR


def jalali_today(request):
    """Expose today's Jalali date and the metadata of the current year.

    "Today" is taken in ``JALALI_TIME_ZONE``.
    """

    cal = conf.default_calendar()
    year = cal.get(YEAR) if cal.get(ERA) == AH else 1 - cal.get(YEAR)
    meta = {
        "year": year,
        "is_leap": core.is_leap_year(year),
        "month_lengths": core.month_lengths(year),
        "month_names": core.MONTH_NAMES,
    }
    return {
        "JALALI_TODAY": f"{year:04d}/{cal.get(MONTH) + 1:02d}/{cal.get(DAY_OF_MONTH):02d}",
        "JALALI_CALENDAR_META": meta,
    }
