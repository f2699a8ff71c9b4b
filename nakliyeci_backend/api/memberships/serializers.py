from rest_framework import serializers

from common.converters import IsoDateTimeField

from .models import MembershipRequest, RequestStatus


class MembershipRequestSerializer(serializers.ModelSerializer):
    user_id = serializers.CharField(read_only=True)
    created_at = IsoDateTimeField(read_only=True)

    class Meta:
        model = MembershipRequest
        fields = (
            "id",
            "name",
            "phone",
            "email",
            "company_name",
            "details",
            "status",
            "created_at",
            "user_id",
        )
        read_only_fields = ("id", "status")
        extra_kwargs = {"name": {"allow_blank": False}, "phone": {"allow_blank": False}}


class RequestStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=RequestStatus.choices)
