from django.urls import include, path

from jalali_calendar import views as calendar_views

urlpatterns = [
    path("calendar/", include("jalali_calendar.urls")),
    path("api/calendar/year/<int:y>/", calendar_views.year_meta, name="jalali-year-api"),
]
