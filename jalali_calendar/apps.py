from django.apps import AppConfig


class JalaliCalendarConfig(AppConfig):
    name = "jalali_calendar"
    verbose_name = "Jalali calendar"
