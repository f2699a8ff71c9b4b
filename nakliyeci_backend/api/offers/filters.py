import django_filters

from .models import TransportOffer


class TransportOfferFilter(django_filters.FilterSet):
    origin_city = django_filters.CharFilter(field_name="origin_city")
    destination_city = django_filters.CharFilter(field_name="destination_city")
    vehicle_type = django_filters.CharFilter(field_name="vehicle_type")

    class Meta:
        model = TransportOffer
        fields = ["origin_city", "destination_city", "vehicle_type"]
