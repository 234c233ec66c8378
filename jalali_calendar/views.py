"""Views for Jalali calendar utilities."""

import logging

from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from . import core
from .utils import gregorian_to_solar, solar_to_gregorian

logger = logging.getLogger(__name__)


@require_GET
def year_meta(request, y: int) -> JsonResponse:
    """Return calendar metadata for year ``y``."""

    data = {
        "year": y,
        "is_leap": core.is_leap_year(y),
        "month_lengths": core.month_lengths(y),
        "year_length": core.year_length(y),
        "first_weekday": core.jalali_day_to_day_of_week(core.jalali_day_before_year(y) + 1),
    }
    return JsonResponse(data)


@require_GET
def convert_date(request) -> JsonResponse:
    """Convert ``?date=`` to the calendar named by ``?to=`` (gregorian|jalali)."""

    value = request.GET.get("date", "")
    target = request.GET.get("to", "gregorian")
    if not value:
        return JsonResponse({"error": "Missing date parameter"}, status=400)
    try:
        if target == "gregorian":
            result = solar_to_gregorian(value)
        elif target == "jalali":
            result = gregorian_to_solar(value)
        else:
            return JsonResponse({"error": f"Unknown target {target!r}"}, status=400)
    except (ValueError, ValidationError) as exc:
        logger.info("Rejected conversion of %r to %s: %s", value, target, exc)
        return JsonResponse({"error": str(exc)}, status=400)
    return JsonResponse({"value": result})
