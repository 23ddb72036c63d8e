from drf_spectacular.utils import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from family_care.common.api import request_payload
from family_care.common.exceptions import ApiError
from family_care.support.models import SupportMessage
from family_care.support.services import post_support_message

from .serializers import SupportMessageSerializer


@extend_schema(tags=["Support"], responses=OpenApiTypes.OBJECT)
class SupportThreadView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        messages = SupportMessage.objects.filter(user=request.user).order_by("id")
        return Response({"messages": SupportMessageSerializer(messages, many=True).data})

    @extend_schema(request=OpenApiTypes.OBJECT)
    def post(self, request):
        content = request_payload(request).get("content")
        if not content:
            raise ApiError("missing_content")
        post_support_message(request.user, str(content))
        return Response({"ok": True})
