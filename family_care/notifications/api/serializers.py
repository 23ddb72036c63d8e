from rest_framework import serializers

from family_care.notifications.models import NotificationSettings


class NotificationSettingsSerializer(serializers.ModelSerializer):
    """Settings row with toggles rendered as 0/1."""

    user_id = serializers.IntegerField(read_only=True)
    elderly_notify_exercise = serializers.IntegerField(read_only=True)
    elderly_notify_checkup = serializers.IntegerField(read_only=True)
    family_notify_parent_done = serializers.IntegerField(read_only=True)

    class Meta:
        model = NotificationSettings
        fields = (
            "user_id",
            "elderly_notify_exercise",
            "elderly_notify_checkup",
            "family_notify_parent_done",
        )
