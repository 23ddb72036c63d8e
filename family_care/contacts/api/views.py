from __future__ import annotations

from drf_spectacular.utils import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from family_care.common.api import request_payload
from family_care.common.api import validate_or_raise
from family_care.common.exceptions import ApiError
from family_care.common.exceptions import ApiNotFound
from family_care.contacts.services import contacts_of
from family_care.contacts.services import link_contacts
from family_care.realtime.socketio import get_presence
from family_care.users.models import User

from .serializers import AddContactSerializer
from .serializers import ContactSerializer


@extend_schema(tags=["Contacts"], responses=OpenApiTypes.OBJECT)
class ContactListView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        serializer = ContactSerializer(
            contacts_of(request.user.pk),
            many=True,
            context={"request": request, "presence": get_presence()},
        )
        return Response({"contacts": serializer.data})


@extend_schema(tags=["Contacts"], request=AddContactSerializer, responses=OpenApiTypes.OBJECT)
class AddContactView(APIView):
    """Link the caller and the user owning ``phone`` in both directions."""

    permission_classes = [IsAuthenticated]

    def post(self, request):
        data = validate_or_raise(
            AddContactSerializer,
            request_payload(request),
            error_code="missing_phone",
        )
        other = User.objects.filter(phone=data["phone"]).first()
        if other is None:
            raise ApiNotFound("user_not_found")
        if other.pk == request.user.pk:
            raise ApiError("cannot_add_self")

        link_contacts(request.user.pk, other.pk)
        return Response({"ok": True})
