import uuid

from django.db import models
from django.utils import timezone

from api.accounts.models import UserProfile


class RequestStatus(models.TextChoices):
    NEW = "new", "Yeni"
    CONTACTED = "contacted", "İletişime Geçildi"
    CONVERTED = "converted", "Üye Yapıldı"
    CLOSED = "closed", "Kapatıldı"


class MembershipRequest(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    phone = models.CharField(max_length=32)
    email = models.EmailField(blank=True)
    company_name = models.CharField(max_length=255, blank=True)
    details = models.TextField(blank=True)
    status = models.CharField(max_length=16, choices=RequestStatus.choices, default=RequestStatus.NEW)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    # talep giriş yapmış bir kullanıcıdan geldiyse
    user = models.ForeignKey(
        UserProfile,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="membership_requests",
    )

    class Meta:
        db_table = "membershipRequests"
        ordering = ["-created_at"]
        indexes = [models.Index(fields=["status", "-created_at"])]

    def __str__(self):
        return f"{self.name} ({self.status})"
