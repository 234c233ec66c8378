from __future__ import annotations

import re

from django import forms

from jalali_calendar.utils import normalize_digits
from jalali_calendar.validators import validate_jalali_date_parts

_JDATE_RE = re.compile(r"^\s*(\d{1,4})[/-](\d{1,2})[/-](\d{1,2})\s*$")  # YYYY/MM/DD


def parse_jalali_date(s: str) -> tuple[int, int, int]:
    if not s:
        raise forms.ValidationError("Enter a date.")
    m = _JDATE_RE.match(normalize_digits(s))
    if not m:
        raise forms.ValidationError("Expected YYYY/MM/DD or YYYY-MM-DD (Jalali).")
    y, mo, d = map(int, m.groups())
    validate_jalali_date_parts(y, mo, d)
    return y, mo, d


def format_jalali_date(y: int, m: int, d: int) -> str:
    return f"{y:04d}/{m:02d}/{d:02d}"


class JalaliDateFormField(forms.Field):
    """\
    Plain text field for a Jalali date.
    clean() returns the normalized string YYYY/MM/DD.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("widget", forms.TextInput(attrs={"placeholder": "YYYY/MM/DD"}))
        super().__init__(*args, **kwargs)

    def to_python(self, value):
        if value in (None, ""):
            return ""
        if isinstance(value, str):
            y, m, d = parse_jalali_date(value)
            return format_jalali_date(y, m, d)
        return str(value)

    def clean(self, value):
        v = super().clean(value)
        if v in ("", None):
            return ""
        return v
