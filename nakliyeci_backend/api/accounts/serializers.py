from __future__ import annotations

from rest_framework import serializers

from common.converters import DefaultTrueBooleanField, IsoDateTimeField

from .models import AdminProfile, AdminRole, UserProfile, UserRole

BASE_FIELDS = (
    "id",
    "role",
    "email",
    "name",
    "is_active",
    "created_at",
    "mobile_phone",
    "work_phone",
)

COMPANY_FIELDS = (
    "username",
    "company_title",
    "logo_url",
    "category",
    "contact_full_name",
    "fax",
    "website",
    "company_description",
    "company_type",
    "address_country",
    "address_city",
    "address_district",
    "full_address",
    "working_methods",
    "working_routes",
    "preferred_cities",
    "preferred_countries",
    "owned_vehicles",
    "auth_documents",
    "membership_status",
    "membership_end_date",
    "sponsorships",
)


class ProfileBaseSerializer(serializers.ModelSerializer):
    is_active = DefaultTrueBooleanField()
    created_at = IsoDateTimeField(read_only=True)

    class Meta:
        model = UserProfile
        fields = BASE_FIELDS
        read_only_fields = ("id", "role")


class IndividualProfileSerializer(ProfileBaseSerializer):
    class Meta(ProfileBaseSerializer.Meta):
        fields = BASE_FIELDS


class CompanyProfileSerializer(ProfileBaseSerializer):
    membership_end_date = IsoDateTimeField(required=False, allow_null=True, required_value=False)
    sponsorships = serializers.ListField(child=serializers.DictField(), read_only=True)
    working_methods = serializers.ListField(child=serializers.CharField(), required=False)
    working_routes = serializers.ListField(child=serializers.CharField(), required=False)
    preferred_cities = serializers.ListField(child=serializers.CharField(), required=False)
    preferred_countries = serializers.ListField(child=serializers.CharField(), required=False)
    owned_vehicles = serializers.ListField(child=serializers.CharField(), required=False)
    auth_documents = serializers.ListField(child=serializers.CharField(), required=False)

    class Meta(ProfileBaseSerializer.Meta):
        fields = BASE_FIELDS + COMPANY_FIELDS


PROFILE_SERIALIZERS = {
    UserRole.INDIVIDUAL: IndividualProfileSerializer,
    UserRole.COMPANY: CompanyProfileSerializer,
}


def profile_serializer_for(role: str):
    try:
        return PROFILE_SERIALIZERS[UserRole(role)]
    except ValueError:
        raise serializers.ValidationError({"role": "Geçersiz kullanıcı rolü."})


def serialize_profile(profile: UserProfile, context=None) -> dict:
    return profile_serializer_for(profile.role)(profile, context=context or {}).data


class ProfileSerializer(serializers.BaseSerializer):
    """Listelerde her kaydı kendi rol serializer'ı ile yazar."""

    def to_representation(self, instance):
        return serialize_profile(instance, self.context)


class ProfileCreateSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=UserRole.choices, default=UserRole.COMPANY)

    def validate(self, attrs):
        variant = profile_serializer_for(attrs["role"])(data=self.initial_data)
        variant.is_valid(raise_exception=True)
        return {**variant.validated_data, "role": attrs["role"]}


class UserActiveSerializer(serializers.Serializer):
    is_active = serializers.BooleanField()


class UserRoleSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=UserRole.choices)


class AdminPasswordChangeSerializer(serializers.Serializer):
    new_password = serializers.CharField(min_length=6, write_only=True)


class CompanyCardSerializer(serializers.ModelSerializer):
    """Herkese açık firma kartı (şifre/iletişim dışı alanlar)."""

    name = serializers.CharField(source="display_name", read_only=True)
    sponsorships = serializers.ListField(child=serializers.DictField(), read_only=True)
    created_at = IsoDateTimeField(read_only=True)

    class Meta:
        model = UserProfile
        fields = (
            "id",
            "name",
            "logo_url",
            "category",
            "company_type",
            "company_description",
            "address_country",
            "address_city",
            "address_district",
            "website",
            "work_phone",
            "mobile_phone",
            "working_methods",
            "working_routes",
            "membership_status",
            "sponsorships",
            "created_at",
        )


# ======================
# ADMINS
# ======================


class AdminProfileSerializer(serializers.ModelSerializer):
    created_at = IsoDateTimeField(read_only=True)

    class Meta:
        model = AdminProfile
        fields = ("id", "username", "name", "role", "is_active", "created_at")


class AdminCreateSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=64)
    password = serializers.CharField(min_length=6, write_only=True)
    name = serializers.CharField(required=False, allow_blank=True)
    role = serializers.ChoiceField(choices=AdminRole.choices, default=AdminRole.ADMIN)
    is_active = serializers.BooleanField(default=True)


class AdminUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True)
    role = serializers.ChoiceField(choices=AdminRole.choices, required=False)
    is_active = serializers.BooleanField(required=False)
    password = serializers.CharField(min_length=6, write_only=True, required=False)


class AdminLoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(write_only=True)
