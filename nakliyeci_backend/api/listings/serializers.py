from __future__ import annotations

from rest_framework import serializers

from common.converters import DefaultTrueBooleanField, IsoDateTimeField

from .choices import FreightType
from .models import Freight

BASE_FIELDS = (
    "id",
    "user_id",
    "freight_type",
    "posted_by",
    "company_name",
    "contact_person",
    "contact_email",
    "work_phone",
    "mobile_phone",
    "origin_country",
    "origin_city",
    "origin_district",
    "destination_country",
    "destination_city",
    "destination_district",
    "loading_date",
    "posted_at",
    "is_active",
    "description",
)


def _required(*names, text=True) -> dict:
    extra = {"required": True}
    if text:
        extra["allow_blank"] = False
    return {n: dict(extra) for n in names}


class FreightBaseSerializer(serializers.ModelSerializer):
    user_id = serializers.CharField(read_only=True)
    posted_at = IsoDateTimeField(read_only=True)
    is_active = DefaultTrueBooleanField()

    class Meta:
        model = Freight
        fields = BASE_FIELDS
        read_only_fields = ("id", "freight_type")


class CommercialFreightSerializer(FreightBaseSerializer):
    class Meta(FreightBaseSerializer.Meta):
        fields = BASE_FIELDS + (
            "cargo_type",
            "vehicle_needed",
            "loading_type",
            "cargo_form",
            "cargo_weight",
            "cargo_weight_unit",
            "is_continuous_load",
            "shipment_scope",
        )
        extra_kwargs = {
            **_required(
                "cargo_type",
                "vehicle_needed",
                "loading_type",
                "cargo_form",
                "cargo_weight_unit",
                "shipment_scope",
            ),
            **_required("cargo_weight", text=False),
        }


class ResidentialFreightSerializer(FreightBaseSerializer):
    class Meta(FreightBaseSerializer.Meta):
        fields = BASE_FIELDS + (
            "residential_transport_type",
            "residential_place_type",
            "residential_elevator_status",
            "residential_floor_level",
        )
        extra_kwargs = _required(
            "residential_transport_type",
            "residential_place_type",
            "residential_elevator_status",
            "residential_floor_level",
        )


class EmptyVehicleSerializer(FreightBaseSerializer):
    class Meta(FreightBaseSerializer.Meta):
        fields = BASE_FIELDS + (
            "advertised_vehicle_type",
            "service_type_for_load",
            "vehicle_stated_capacity",
            "vehicle_stated_capacity_unit",
        )
        extra_kwargs = {
            **_required("advertised_vehicle_type"),
            **_required("vehicle_stated_capacity", text=False),
        }


FREIGHT_SERIALIZERS = {
    FreightType.COMMERCIAL: CommercialFreightSerializer,
    FreightType.RESIDENTIAL: ResidentialFreightSerializer,
    FreightType.EMPTY_VEHICLE: EmptyVehicleSerializer,
}


def freight_serializer_for(freight_type: str):
    try:
        return FREIGHT_SERIALIZERS[FreightType(freight_type)]
    except ValueError:
        raise serializers.ValidationError({"freight_type": "Geçersiz ilan türü."})


class FreightSerializer(serializers.BaseSerializer):
    """Her ilanı kendi tür serializer'ı ile yazar."""

    def to_representation(self, instance):
        return freight_serializer_for(instance.freight_type)(instance, context=self.context).data


class FreightCreateSerializer(serializers.Serializer):
    freight_type = serializers.ChoiceField(choices=FreightType.choices)

    def validate(self, attrs):
        variant = freight_serializer_for(attrs["freight_type"])(data=self.initial_data)
        variant.is_valid(raise_exception=True)
        return {**variant.validated_data, "freight_type": attrs["freight_type"]}
