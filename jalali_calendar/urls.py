from django.urls import path

from . import views

app_name = "jalali_calendar"

urlpatterns = [
    path("convert/", views.convert_date, name="convert_date"),
    path("year/<int:y>/meta/", views.year_meta, name="year_meta"),
]
