import uuid

from django.db import models
from django.utils import timezone

from api.accounts.models import UserProfile

from .choices import (
    CargoForm,
    CargoType,
    ElevatorStatus,
    FloorLevel,
    FreightType,
    LoadingType,
    ResidentialPlaceType,
    ShipmentScope,
    WeightUnit,
)


class Freight(models.Model):
    """
    İlan. `freight_type` türü belirler; türe özgü alanlar yalnızca
    ilgili türde doldurulur (Ticari / Evden Eve / Boş Araç).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(UserProfile, on_delete=models.CASCADE, related_name="listings")
    freight_type = models.CharField(max_length=16, choices=FreightType.choices)

    posted_by = models.CharField(max_length=255, blank=True)
    company_name = models.CharField(max_length=255, blank=True)
    contact_person = models.CharField(max_length=255)
    contact_email = models.EmailField(blank=True)
    work_phone = models.CharField(max_length=32, blank=True)
    mobile_phone = models.CharField(max_length=32)

    origin_country = models.CharField(max_length=8, default="TR")
    origin_city = models.CharField(max_length=128)
    origin_district = models.CharField(max_length=128, blank=True)
    destination_country = models.CharField(max_length=8, default="TR")
    destination_city = models.CharField(max_length=128)
    destination_district = models.CharField(max_length=128, blank=True)

    loading_date = models.DateField()
    posted_at = models.DateTimeField(default=timezone.now, db_index=True)
    is_active = models.BooleanField(default=True)
    description = models.TextField(blank=True)

    # Ticari
    cargo_type = models.CharField(max_length=64, choices=CargoType.choices, blank=True)
    vehicle_needed = models.CharField(max_length=128, blank=True)
    loading_type = models.CharField(max_length=16, choices=LoadingType.choices, blank=True)
    cargo_form = models.CharField(max_length=16, choices=CargoForm.choices, blank=True)
    cargo_weight = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    cargo_weight_unit = models.CharField(max_length=16, choices=WeightUnit.choices, blank=True)
    is_continuous_load = models.BooleanField(default=False)
    shipment_scope = models.CharField(max_length=16, choices=ShipmentScope.choices, blank=True)

    # Evden Eve
    residential_transport_type = models.CharField(max_length=64, blank=True)
    residential_place_type = models.CharField(
        max_length=16, choices=ResidentialPlaceType.choices, blank=True
    )
    residential_elevator_status = models.CharField(
        max_length=32, choices=ElevatorStatus.choices, blank=True
    )
    residential_floor_level = models.CharField(
        max_length=32, choices=FloorLevel.choices, blank=True
    )

    # Boş Araç
    advertised_vehicle_type = models.CharField(max_length=128, blank=True)
    service_type_for_load = models.CharField(max_length=64, blank=True)
    vehicle_stated_capacity = models.DecimalField(
        max_digits=12, decimal_places=2, null=True, blank=True
    )
    vehicle_stated_capacity_unit = models.CharField(
        max_length=16, choices=WeightUnit.choices, blank=True
    )

    class Meta:
        db_table = "listings"
        indexes = [
            models.Index(fields=["is_active", "-posted_at"]),
            models.Index(fields=["is_active", "freight_type", "-posted_at"]),
            models.Index(fields=["user", "-posted_at"]),
        ]

    def __str__(self):
        return f"{self.freight_type}: {self.origin_city} → {self.destination_city}"
