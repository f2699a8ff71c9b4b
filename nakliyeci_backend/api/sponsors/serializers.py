from rest_framework import serializers

from common.converters import DefaultTrueBooleanField, IsoDateTimeField

from .models import EntityType, Sponsor


class SponsorSerializer(serializers.ModelSerializer):
    company_id = serializers.CharField(read_only=True)
    start_date = IsoDateTimeField()
    end_date = IsoDateTimeField(required=False, allow_null=True, required_value=False)
    created_at = IsoDateTimeField(read_only=True)
    is_active = DefaultTrueBooleanField()

    class Meta:
        model = Sponsor
        fields = (
            "id",
            "company_id",
            "company_name",
            "company_logo_url",
            "company_link",
            "entity_type",
            "entity_name",
            "start_date",
            "end_date",
            "is_active",
            "created_at",
        )
        read_only_fields = ("id", "company_name", "company_logo_url", "company_link")


class SponsorshipBatchSerializer(serializers.Serializer):
    company_id = serializers.CharField(
        allow_blank=True, error_messages={"required": "Firma seçimi zorunludur."}
    )
    country_codes = serializers.ListField(
        child=serializers.CharField(max_length=8), required=False, default=list
    )
    city_names = serializers.ListField(
        child=serializers.CharField(max_length=128), required=False, default=list
    )
    # ham dizge: ayrıştırma ve mesajlar servis katmanında
    start_date = serializers.CharField()
    end_date = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class SponsorshipLocationSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=EntityType.choices)
    name = serializers.CharField(max_length=128)


class CompanySponsorshipsSerializer(serializers.Serializer):
    locations = SponsorshipLocationSerializer(many=True)
