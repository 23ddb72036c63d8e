from __future__ import annotations

import math

from drf_spectacular.utils import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from family_care.common.api import fits_db_integer
from family_care.common.api import request_payload
from family_care.common.exceptions import ApiError
from family_care.exercises.services import WEEK_DAYS
from family_care.exercises.services import latest_for_today
from family_care.exercises.services import log_exercise
from family_care.exercises.services import records_for
from family_care.exercises.services import records_since
from family_care.realtime.socketio import get_relay

from .serializers import ExerciseSerializer


def _is_number(value: object) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _optional_level(value: object) -> int | None:
    """Zero, blanks and non-numbers all mean "not reported"."""
    if not _is_number(value) or not value:
        return None
    return int(value)


@extend_schema(tags=["Exercise"], request=OpenApiTypes.OBJECT, responses=OpenApiTypes.OBJECT)
class ExerciseLogView(APIView):
    """Log a session for today.

    Body: ``{exerciseType, duration, fatigueLevel?, difficulty?}`` where
    ``duration`` must be a JSON number (minutes). Numbers too large for an
    integer column are rejected like missing ones.
    """

    permission_classes = [IsAuthenticated]

    def post(self, request):
        data = request_payload(request)
        exercise_type = data.get("exerciseType")
        duration = data.get("duration")
        if not exercise_type or not _is_number(duration):
            raise ApiError("missing_fields")

        fatigue_level = data.get("fatigueLevel")
        if not fits_db_integer(duration) or (
            _is_number(fatigue_level) and not fits_db_integer(fatigue_level)
        ):
            raise ApiError("missing_fields")
        difficulty = data.get("difficulty")
        exercise = log_exercise(
            get_relay(),
            user=request.user,
            exercise_type=str(exercise_type),
            duration=duration,
            fatigue_level=_optional_level(fatigue_level),
            difficulty=str(difficulty) if difficulty else None,
        )
        return Response({"ok": True, "id": exercise.id})


@extend_schema(tags=["Exercise"], responses=OpenApiTypes.OBJECT)
class ExerciseTodayView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        record = latest_for_today(request.user.pk)
        return Response(
            {"record": ExerciseSerializer(record).data if record is not None else None}
        )


@extend_schema(tags=["Exercise"], responses=OpenApiTypes.OBJECT)
class ExerciseRecordsView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        records = records_for(request.user.pk)
        return Response({"records": ExerciseSerializer(records, many=True).data})


@extend_schema(tags=["Exercise"], responses=OpenApiTypes.OBJECT)
class ExerciseSummaryView(APIView):
    """Trailing-window rollup; ``days`` is set per route (week or month)."""

    permission_classes = [IsAuthenticated]
    days = WEEK_DAYS

    def get(self, request):
        records = records_since(request.user.pk, self.days)
        return Response({"records": ExerciseSerializer(records, many=True).data})
