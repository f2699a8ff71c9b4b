from rest_framework import serializers

from common.converters import DefaultTrueBooleanField, IsoDateTimeField

from .models import (
    AdminNote,
    Announcement,
    AuthDocument,
    CargoTypeOption,
    HeroSlide,
    HeroSlideType,
    MembershipPlan,
    TransportMode,
    VehicleTypeOption,
)


class CatalogItemSerializer(serializers.ModelSerializer):
    is_active = DefaultTrueBooleanField()

    class Meta:
        fields = ("id", "name", "is_active")
        read_only_fields = ("id",)
        extra_kwargs = {"name": {"allow_blank": False}}


class VehicleTypeSerializer(CatalogItemSerializer):
    class Meta(CatalogItemSerializer.Meta):
        model = VehicleTypeOption
        fields = CatalogItemSerializer.Meta.fields + ("description",)


class CargoTypeSerializer(CatalogItemSerializer):
    class Meta(CatalogItemSerializer.Meta):
        model = CargoTypeOption
        fields = CatalogItemSerializer.Meta.fields + ("category",)


class AuthDocumentSerializer(CatalogItemSerializer):
    class Meta(CatalogItemSerializer.Meta):
        model = AuthDocument
        fields = CatalogItemSerializer.Meta.fields + ("required_for", "details")


class TransportModeSerializer(CatalogItemSerializer):
    class Meta(CatalogItemSerializer.Meta):
        model = TransportMode
        fields = CatalogItemSerializer.Meta.fields + ("description", "applicable_to")


class MembershipPlanSerializer(CatalogItemSerializer):
    features = serializers.ListField(child=serializers.CharField(), required=False)

    class Meta(CatalogItemSerializer.Meta):
        model = MembershipPlan
        fields = CatalogItemSerializer.Meta.fields + (
            "price",
            "duration",
            "duration_unit",
            "features",
            "description",
        )

    def validate_price(self, value):
        if value < 0:
            raise serializers.ValidationError("Fiyat negatif olamaz.")
        return value


class AnnouncementSerializer(serializers.ModelSerializer):
    is_active = DefaultTrueBooleanField()
    start_date = IsoDateTimeField(required=False, allow_null=True, required_value=False)
    end_date = IsoDateTimeField(required=False, allow_null=True, required_value=False)
    created_at = IsoDateTimeField(read_only=True)

    class Meta:
        model = Announcement
        fields = (
            "id",
            "title",
            "content",
            "target_audience",
            "start_date",
            "end_date",
            "is_active",
            "created_at",
        )
        read_only_fields = ("id",)

    def validate(self, attrs):
        start, end = attrs.get("start_date"), attrs.get("end_date")
        if start and end and end < start:
            raise serializers.ValidationError({"end_date": "Bitiş tarihi başlangıçtan önce olamaz."})
        return attrs


class AdminNoteSerializer(serializers.ModelSerializer):
    created_date = IsoDateTimeField(read_only=True)
    last_modified_date = IsoDateTimeField(read_only=True)

    class Meta:
        model = AdminNote
        fields = (
            "id",
            "title",
            "content",
            "category",
            "is_important",
            "created_date",
            "last_modified_date",
        )
        read_only_fields = ("id",)


# slayt türüne göre dolu olması gereken alanlar
HERO_SLIDE_REQUIRED = {
    HeroSlideType.CENTERED: ("background_image_url",),
    HeroSlideType.LEFT_ALIGNED: ("background_image_url",),
    HeroSlideType.WITH_INPUT: ("background_image_url", "button_text", "form_action_url"),
    HeroSlideType.SPLIT: ("media_type", "media_url"),
    HeroSlideType.TITLE_ONLY: ("background_image_url",),
    HeroSlideType.VIDEO_BACKGROUND: ("video_url",),
}


class HeroSlideSerializer(serializers.ModelSerializer):
    is_active = DefaultTrueBooleanField()
    created_at = IsoDateTimeField(read_only=True)

    class Meta:
        model = HeroSlide
        fields = (
            "id",
            "type",
            "title",
            "subtitle",
            "is_active",
            "order",
            "created_at",
            "background_image_url",
            "background_color",
            "media_type",
            "media_url",
            "video_url",
            "button_text",
            "button_url",
            "button_icon",
            "button_color",
            "button_text_color",
            "button_shape",
            "text_color",
            "overlay_opacity",
            "input_placeholder",
            "form_action_url",
        )
        read_only_fields = ("id",)

    def validate_overlay_opacity(self, value):
        if value is not None and not 0 <= value <= 1:
            raise serializers.ValidationError("Opaklık 0 ile 1 arasında olmalıdır.")
        return value

    def validate(self, attrs):
        # tür değiştiren kısmi güncellemeler de yeni türün alanlarını getirmeli
        slide_type = attrs.get("type")
        if slide_type:
            missing = {
                name: "Bu slayt türü için zorunludur."
                for name in HERO_SLIDE_REQUIRED[slide_type]
                if not attrs.get(name)
            }
            if missing:
                raise serializers.ValidationError(missing)
        return attrs
