import django_filters
from django.utils import timezone

from .choices import FreightType, ShipmentScope
from .models import Freight


class FreightFilter(django_filters.FilterSet):
    freight_type = django_filters.ChoiceFilter(choices=FreightType.choices)
    origin_city = django_filters.CharFilter(field_name="origin_city")
    destination_city = django_filters.CharFilter(field_name="destination_city")
    vehicle_needed = django_filters.CharFilter(field_name="vehicle_needed")
    shipment_scope = django_filters.ChoiceFilter(choices=ShipmentScope.choices)
    is_continuous_load = django_filters.BooleanFilter(field_name="is_continuous_load")
    posted_today = django_filters.BooleanFilter(method="filter_posted_today")

    class Meta:
        model = Freight
        fields = [
            "freight_type",
            "origin_city",
            "destination_city",
            "vehicle_needed",
            "shipment_scope",
            "is_continuous_load",
        ]

    def filter_posted_today(self, qs, name, value):
        if not value:
            return qs
        start = timezone.localtime().replace(hour=0, minute=0, second=0, microsecond=0)
        return qs.filter(posted_at__gte=start)
