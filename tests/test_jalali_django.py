import re
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from django import forms
from django.core.exceptions import ValidationError
from django.test import Client, RequestFactory, override_settings

from jalali_calendar import BH, ERA, FRIDAY, SATURDAY, SUNDAY, JalaliCalendar, conf
from jalali_calendar.conf import default_calendar, raw_offset_for
from jalali_calendar.context_processors import jalali_today
from jalali_calendar.forms import JalaliDateFormField, parse_jalali_date
from jalali_calendar.validators import validate_jalali_date_parts


class _F(forms.Form):
    d = JalaliDateFormField()


def test_form_normalizes_date():
    f = _F(data={"d": "1394-5-1"})
    assert f.is_valid()
    assert f.cleaned_data["d"] == "1394/05/01"


def test_form_rejects_missing_leap_day():
    f = _F(data={"d": "1394/12/30"})
    assert not f.is_valid()
    assert "Month 12 has 29 days in year 1394" in str(f.errors)


def test_form_parser_is_strict():
    with pytest.raises(ValidationError):
        parse_jalali_date("")
    with pytest.raises(ValidationError):
        parse_jalali_date("1394/05")
    assert parse_jalali_date(" 1399/12/30 ") == (1399, 12, 30)


def test_validator_messages():
    validate_jalali_date_parts(1399, 12, 30)
    with pytest.raises(ValidationError):
        validate_jalali_date_parts(0, 1, 1)
    with pytest.raises(ValidationError):
        validate_jalali_date_parts(1394, 13, 1)
    with pytest.raises(ValidationError) as excinfo:
        validate_jalali_date_parts(1394, 7, 31)
    assert "Month 7 has 30 days in year 1394" in str(excinfo.value)


def test_year_meta_view():
    resp = Client().get("/calendar/year/1399/meta/")
    assert resp.status_code == 200
    data = resp.json()
    assert data["is_leap"] is True
    assert data["year_length"] == 366
    assert data["month_lengths"][-1] == 30
    assert data["first_weekday"] == FRIDAY


def test_year_meta_api_alias():
    data = Client().get("/api/calendar/year/1394/").json()
    assert data["is_leap"] is False
    assert data["first_weekday"] == SATURDAY


def test_convert_view():
    client = Client()
    resp = client.get("/calendar/convert/", {"date": "1394/05/01 15:14", "to": "gregorian"})
    assert resp.status_code == 200
    assert resp.json() == {"value": "2015/07/23 15:14"}

    resp = client.get("/calendar/convert/", {"date": "2015-07-23", "to": "jalali"})
    assert resp.json() == {"value": "1394/05/01"}


def test_convert_view_errors():
    client = Client()
    assert client.get("/calendar/convert/").status_code == 400
    resp = client.get("/calendar/convert/", {"date": "1394/12/30"})
    assert resp.status_code == 400
    assert "error" in resp.json()
    resp = client.get("/calendar/convert/", {"date": "1394/05/01", "to": "hijri"})
    assert resp.status_code == 400
    assert client.post("/calendar/convert/", {"date": "1394/05/01"}).status_code == 405
    resp = client.get("/calendar/convert/", {"date": "9500/01/01", "to": "gregorian"})
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_raw_offset_for_ignores_dst():
    winter = datetime(2024, 1, 1, tzinfo=ZoneInfo("UTC"))
    summer = datetime(2024, 7, 1, tzinfo=ZoneInfo("UTC"))
    assert raw_offset_for("Asia/Tehran", winter) == 12600000
    assert raw_offset_for("Europe/Prague", summer) == 3600000
    assert raw_offset_for("UTC") == 0


@override_settings(
    JALALI_FIRST_DAY_OF_WEEK=SUNDAY,
    JALALI_MINIMAL_DAYS_IN_FIRST_WEEK=4,
    JALALI_LENIENT=False,
    JALALI_TIME_ZONE="UTC",
)
def test_default_calendar_reads_settings():
    cal = default_calendar(millis=0)
    assert cal.first_day_of_week == SUNDAY
    assert cal.minimal_days_in_first_week == 4
    assert cal.lenient is False
    assert cal.raw_offset == 0
    assert default_calendar(millis=0, lenient=True).lenient is True


@override_settings(JALALI_TIME_ZONE="Asia/Tehran")
def test_default_calendar_uses_zone_offset():
    assert default_calendar(millis=0).raw_offset == 12600000


@override_settings(JALALI_TIME_ZONE="UTC")
def test_context_processor():
    request = RequestFactory().get("/")
    ctx = jalali_today(request)
    assert re.fullmatch(r"\d{4}/\d{2}/\d{2}", ctx["JALALI_TODAY"])
    meta = ctx["JALALI_CALENDAR_META"]
    assert ctx["JALALI_TODAY"].startswith(f"{meta['year']:04d}/")
    assert len(meta["month_lengths"]) == 12
    assert meta["month_names"][0] == "Farvardin"


def test_context_processor_counts_bh_years_back_from_zero(monkeypatch):
    def one_bh():
        cal = JalaliCalendar(1, 0, 1)
        cal.set(ERA, BH)
        return cal

    monkeypatch.setattr(conf, "default_calendar", one_bh)
    ctx = jalali_today(RequestFactory().get("/"))
    assert ctx["JALALI_CALENDAR_META"]["year"] == 0
    assert ctx["JALALI_TODAY"] == "0000/01/01"
    assert ctx["JALALI_CALENDAR_META"]["is_leap"] is False
