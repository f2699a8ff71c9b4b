import uuid

from django.db import models
from django.utils import timezone

from api.accounts.models import UserProfile


class EntityType(models.TextChoices):
    COUNTRY = "country", "Ülke"
    CITY = "city", "Şehir"


class Sponsor(models.Model):
    """
    Firmanın bir ülke ya da şehir için sponsorluğu.
    Firma adı/logo/bağlantı kayıt anında kopyalanır.
    (company, entity_type, entity_name) tekilliği uygulama tarafında denetlenir.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company = models.ForeignKey(UserProfile, on_delete=models.CASCADE, related_name="sponsors")
    company_name = models.CharField(max_length=255, blank=True)
    company_logo_url = models.URLField(max_length=500, blank=True)
    company_link = models.CharField(max_length=255, blank=True)

    entity_type = models.CharField(max_length=16, choices=EntityType.choices)
    entity_name = models.CharField(max_length=128)

    start_date = models.DateTimeField()
    end_date = models.DateTimeField(null=True, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "sponsors"
        indexes = [
            models.Index(fields=["company", "entity_type", "entity_name"]),
            models.Index(fields=["is_active", "entity_type"]),
        ]

    def __str__(self):
        return f"{self.company_name} ({self.entity_type}: {self.entity_name})"
