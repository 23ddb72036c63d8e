from rest_framework import serializers

from family_care.chat.models import Message


class MessageSerializer(serializers.ModelSerializer):
    fromUserId = serializers.IntegerField(source="sender_id", read_only=True)  # noqa: N815
    toUserId = serializers.IntegerField(source="recipient_id", read_only=True)  # noqa: N815
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)  # noqa: N815

    class Meta:
        model = Message
        fields = ["id", "fromUserId", "toUserId", "content", "createdAt"]
