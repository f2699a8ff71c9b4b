from rest_framework import serializers

from common.converters import DefaultTrueBooleanField, IsoDateTimeField

from .models import TransportOffer


class TransportOfferSerializer(serializers.ModelSerializer):
    user_id = serializers.CharField(read_only=True)
    posted_at = IsoDateTimeField(read_only=True)
    is_active = DefaultTrueBooleanField()

    class Meta:
        model = TransportOffer
        fields = (
            "id",
            "user_id",
            "company_name",
            "posted_at",
            "is_active",
            "origin_country",
            "origin_city",
            "origin_district",
            "destination_country",
            "destination_city",
            "destination_district",
            "vehicle_type",
            "distance_km",
            "price_try",
            "price_usd",
            "price_eur",
            "notes",
        )
        read_only_fields = ("id", "company_name")
        extra_kwargs = {
            "origin_city": {"allow_blank": False},
            "destination_city": {"allow_blank": False},
            "vehicle_type": {"allow_blank": False},
        }

    def validate(self, attrs):
        for f in ("distance_km", "price_try", "price_usd", "price_eur"):
            value = attrs.get(f)
            if value is not None and value < 0:
                raise serializers.ValidationError({f: "Negatif değer girilemez."})
        return attrs
