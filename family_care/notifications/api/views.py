from __future__ import annotations

from drf_spectacular.utils import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from family_care.common.api import parse_positive_int
from family_care.common.api import request_payload
from family_care.common.exceptions import ApiError
from family_care.notifications.models import NotificationSettings
from family_care.notifications.services import save_settings
from family_care.realtime.events.exercises import publish_exercise_reminder
from family_care.realtime.socketio import get_relay

from .permissions import IsFamilyMember
from .serializers import NotificationSettingsSerializer


@extend_schema(tags=["Settings"], responses=OpenApiTypes.OBJECT)
class NotificationSettingsView(APIView):
    """Read or replace the caller's notification toggles."""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        row = NotificationSettings.objects.filter(user_id=request.user.pk).first()
        if row is None:
            return Response({"settings": {}})
        return Response({"settings": NotificationSettingsSerializer(row).data})

    @extend_schema(request=OpenApiTypes.OBJECT)
    def post(self, request):
        save_settings(request.user.pk, request_payload(request))
        return Response({"ok": True})


@extend_schema(tags=["Settings"], request=OpenApiTypes.OBJECT, responses=OpenApiTypes.OBJECT)
class NotifyParentView(APIView):
    """Family member nudges an elderly user to exercise (realtime only)."""

    permission_classes = [IsAuthenticated, IsFamilyMember]

    def post(self, request):
        elderly_user_id = parse_positive_int(
            request_payload(request).get("elderlyUserId")
        )
        if elderly_user_id is None:
            raise ApiError("missing_elderlyUserId")
        publish_exercise_reminder(
            get_relay(),
            from_user_id=request.user.pk,
            to_user_id=elderly_user_id,
        )
        return Response({"ok": True})
