from rest_framework import serializers

from common.converters import IsoDateTimeField

from .models import CompanyNote, DirectoryContact


class DirectoryContactSerializer(serializers.ModelSerializer):
    created_at = IsoDateTimeField(read_only=True)

    class Meta:
        model = DirectoryContact
        fields = ("id", "name", "company_name", "phone", "email", "notes", "created_at")
        read_only_fields = ("id",)
        extra_kwargs = {"name": {"allow_blank": False}, "phone": {"allow_blank": False}}


class CompanyNoteSerializer(serializers.ModelSerializer):
    created_at = IsoDateTimeField(read_only=True)
    author = serializers.CharField(required=False, allow_blank=True)

    class Meta:
        model = CompanyNote
        fields = ("id", "title", "content", "author", "type", "created_at")
        read_only_fields = ("id",)


class ConvertContactSerializer(serializers.Serializer):
    company_id = serializers.CharField()
