from datetime import timedelta

import django_filters
from django.core.validators import RegexValidator
from django.utils import timezone

from .models import MembershipStatus, UserProfile


class CompanyFilter(django_filters.FilterSet):
    city = django_filters.CharFilter(field_name="address_city")
    category = django_filters.CharFilter(field_name="category")
    country = django_filters.CharFilter(field_name="address_country")

    class Meta:
        model = UserProfile
        fields = ["city", "category", "country"]


class AdminUserFilter(django_filters.FilterSet):
    pending = django_filters.BooleanFilter(method="filter_pending")
    sponsors = django_filters.BooleanFilter(method="filter_sponsors")
    # has | has_not | gün sayısı
    membership = django_filters.CharFilter(
        method="filter_membership",
        validators=[RegexValidator(r"^(has|has_not|\d{1,4})$", "Geçersiz üyelik filtresi.")],
    )

    class Meta:
        model = UserProfile
        fields = ["pending", "sponsors", "membership", "role"]

    def filter_pending(self, qs, name, value):
        return qs.filter(is_active=False) if value else qs

    def filter_sponsors(self, qs, name, value):
        if not value:
            return qs
        return qs.filter(sponsors__is_active=True).distinct()

    def filter_membership(self, qs, name, value):
        value = (value or "").strip()
        if value == "has":
            return qs.exclude(membership_status=MembershipStatus.NONE)
        if value == "has_not":
            return qs.filter(membership_status=MembershipStatus.NONE)
        now = timezone.now()
        return qs.filter(
            membership_end_date__gte=now,
            membership_end_date__lte=now + timedelta(days=int(value)),
        )
