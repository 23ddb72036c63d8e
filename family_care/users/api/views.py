from django.conf import settings
from django.contrib.auth import login
from django.contrib.auth import logout
from drf_spectacular.utils import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from family_care.common.api import request_payload
from family_care.common.api import validate_or_raise
from family_care.users.services import issue_otp
from family_care.users.services import normalize_role
from family_care.users.services import upsert_user
from family_care.users.services import verify_otp

from .serializers import RequestOtpSerializer
from .serializers import UserSerializer
from .serializers import VerifyOtpSerializer

SESSION_BACKEND = "django.contrib.auth.backends.ModelBackend"


@extend_schema(
    tags=["Auth"],
    request=RequestOtpSerializer,
    responses=OpenApiTypes.OBJECT,
)
class RequestOtpView(APIView):
    """Create or update the user behind a phone number and issue a code."""

    permission_classes = [AllowAny]

    def post(self, request):
        data = validate_or_raise(
            RequestOtpSerializer,
            request_payload(request),
            error_code="missing_fields",
        )
        upsert_user(
            phone=data["phone"],
            first_name=data["firstName"],
            last_name=data["lastName"],
            role=normalize_role(data.get("role")),
        )
        otp = issue_otp(data["phone"])

        body = {"ok": True}
        if settings.OTP_EXPOSE_DEV_CODE:
            body["devCode"] = otp.code
        return Response(body)


@extend_schema(
    tags=["Auth"],
    request=VerifyOtpSerializer,
    responses=OpenApiTypes.OBJECT,
)
class VerifyOtpView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        data = validate_or_raise(
            VerifyOtpSerializer,
            request_payload(request),
            error_code="missing_fields",
        )
        user = verify_otp(data["phone"], data["code"])
        login(request, user, backend=SESSION_BACKEND)
        return Response({"ok": True, "user": UserSerializer(user).data})


@extend_schema(tags=["Auth"], responses=OpenApiTypes.OBJECT)
class MeView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        user = request.user
        if not getattr(user, "is_authenticated", False):
            return Response({"user": None})
        return Response({"user": UserSerializer(user).data})


@extend_schema(tags=["Auth"], request=None, responses=OpenApiTypes.OBJECT)
class LogoutView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        logout(request)
        return Response({"ok": True})
