from rest_framework import serializers

from family_care.support.models import SupportMessage


class SupportMessageSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source="user_id", read_only=True)  # noqa: N815
    isBot = serializers.BooleanField(source="is_bot", read_only=True)  # noqa: N815
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)  # noqa: N815

    class Meta:
        model = SupportMessage
        fields = ["id", "userId", "role", "content", "isBot", "createdAt"]
