from rest_framework import serializers

from family_care.users.models import User


class UserSerializer(serializers.ModelSerializer):
    """Public shape of a user: ``{id, firstName, lastName, phone, role}``."""

    firstName = serializers.CharField(source="first_name", read_only=True)  # noqa: N815
    lastName = serializers.CharField(source="last_name", read_only=True)  # noqa: N815

    class Meta:
        model = User
        fields = ["id", "firstName", "lastName", "phone", "role"]
        read_only_fields = ["id", "phone", "role"]


class RequestOtpSerializer(serializers.Serializer):
    firstName = serializers.CharField(max_length=150)  # noqa: N815
    lastName = serializers.CharField(max_length=150)  # noqa: N815
    phone = serializers.CharField(max_length=32)
    role = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class VerifyOtpSerializer(serializers.Serializer):
    phone = serializers.CharField(max_length=32)
    code = serializers.CharField(max_length=32)
