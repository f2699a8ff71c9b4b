from rest_framework import serializers

from common.converters import IsoDateTimeField

from .models import Message


class MessageSerializer(serializers.ModelSerializer):
    user_id = serializers.CharField(read_only=True)
    created_at = IsoDateTimeField(read_only=True)

    class Meta:
        model = Message
        fields = ("id", "user_id", "user_name", "title", "content", "created_at", "is_read")
        read_only_fields = ("id", "user_name", "is_read")
