from rest_framework import serializers

from family_care.users.api.serializers import UserSerializer


class ContactSerializer(UserSerializer):
    """A contact is a user plus whether they are connected right now."""

    online = serializers.SerializerMethodField()

    class Meta(UserSerializer.Meta):
        fields = [*UserSerializer.Meta.fields, "online"]

    def get_online(self, obj) -> bool:
        presence = self.context.get("presence")
        return presence is not None and presence.is_online(obj.pk)


class AddContactSerializer(serializers.Serializer):
    phone = serializers.CharField(max_length=32)
