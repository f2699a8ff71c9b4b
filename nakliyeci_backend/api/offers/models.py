import uuid

from django.db import models
from django.utils import timezone

from api.accounts.models import UserProfile


class TransportOffer(models.Model):
    """Firmaların yayınladığı taşıma teklifi (güzergah + araç + fiyat)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        UserProfile, on_delete=models.CASCADE, related_name="transport_offers"
    )
    company_name = models.CharField(max_length=255, default="Bilinmiyor")
    posted_at = models.DateTimeField(default=timezone.now, db_index=True)
    is_active = models.BooleanField(default=True)

    origin_country = models.CharField(max_length=8, default="TR")
    origin_city = models.CharField(max_length=128)
    origin_district = models.CharField(max_length=128, blank=True)
    destination_country = models.CharField(max_length=8, default="TR")
    destination_city = models.CharField(max_length=128)
    destination_district = models.CharField(max_length=128, blank=True)

    vehicle_type = models.CharField(max_length=128)
    distance_km = models.DecimalField(max_digits=10, decimal_places=1, null=True, blank=True)
    price_try = models.DecimalField(max_digits=14, decimal_places=2, null=True, blank=True)
    price_usd = models.DecimalField(max_digits=14, decimal_places=2, null=True, blank=True)
    price_eur = models.DecimalField(max_digits=14, decimal_places=2, null=True, blank=True)
    notes = models.TextField(blank=True)

    class Meta:
        db_table = "transportOffers"
        indexes = [
            models.Index(fields=["is_active", "-posted_at"]),
            models.Index(fields=["user", "-posted_at"]),
        ]

    def __str__(self):
        return f"{self.company_name}: {self.origin_city} → {self.destination_city}"
