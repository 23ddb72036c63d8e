from __future__ import annotations

from drf_spectacular.utils import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from family_care.chat.services import conversation
from family_care.chat.services import send_direct_message
from family_care.chat.services import send_group_message
from family_care.common.api import parse_positive_int
from family_care.common.api import request_payload
from family_care.common.exceptions import ApiError
from family_care.realtime.socketio import get_relay

from .serializers import MessageSerializer


@extend_schema(tags=["Messages"], responses=OpenApiTypes.OBJECT)
class ConversationView(APIView):
    """Both directions of the caller's chat with one contact, oldest first."""

    permission_classes = [IsAuthenticated]

    def get(self, request, contact_id: str):
        peer_id = parse_positive_int(contact_id)
        if peer_id is None:
            raise ApiError("invalid_contact")
        messages = conversation(request.user.pk, peer_id)
        return Response({"messages": MessageSerializer(messages, many=True).data})


@extend_schema(tags=["Messages"], request=OpenApiTypes.OBJECT, responses=OpenApiTypes.OBJECT)
class SendMessageView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        data = request_payload(request)
        content = data.get("content")
        if not content:
            raise ApiError("missing_content")

        relay = get_relay()
        if data.get("isGroup"):
            send_group_message(relay, sender_id=request.user.pk, content=str(content))
            return Response({"ok": True})

        recipient_id = parse_positive_int(data.get("toUserId"))
        if recipient_id is None:
            raise ApiError("missing_toUserId")
        message = send_direct_message(
            relay,
            sender_id=request.user.pk,
            recipient_id=recipient_id,
            content=str(content),
        )
        return Response({"ok": True, "id": message.id})
