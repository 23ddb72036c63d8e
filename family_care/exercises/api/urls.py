from django.urls import re_path

from family_care.exercises.services import MONTH_DAYS
from family_care.exercises.services import WEEK_DAYS

from .views import ExerciseLogView
from .views import ExerciseRecordsView
from .views import ExerciseSummaryView
from .views import ExerciseTodayView

urlpatterns = [
    re_path(r"^exercise/?$", ExerciseLogView.as_view(), name="exercise-log"),
    re_path(r"^exercise/today/?$", ExerciseTodayView.as_view(), name="exercise-today"),
    re_path(
        r"^exercise/records/?$",
        ExerciseRecordsView.as_view(),
        name="exercise-records",
    ),
    re_path(
        r"^exercise/summary/week/?$",
        ExerciseSummaryView.as_view(days=WEEK_DAYS),
        name="exercise-summary-week",
    ),
    re_path(
        r"^exercise/summary/month/?$",
        ExerciseSummaryView.as_view(days=MONTH_DAYS),
        name="exercise-summary-month",
    ),
]
