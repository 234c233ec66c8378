"""Validators for Jalali calendar dates."""

from django.core.exceptions import ValidationError

from .utils import days_in_month


def validate_jalali_date_parts(year: int, month: int, day: int) -> None:
    """Validate numeric parts of a Jalali date (1-based month)."""
    if year <= 0:
        raise ValidationError("Year must be greater than 0")
    if not 1 <= month <= 12:
        raise ValidationError("Month must be 1-12")
    max_day = days_in_month(year, month)
    if not 1 <= day <= max_day:
        raise ValidationError(f"Month {month} has {max_day} days in year {year}")
