import uuid

from django.db import models
from django.db.models import Q
from django.utils import timezone

from api.accounts.models import UserProfile


class NoteType(models.TextChoices):
    NOTE = "note", "Not"
    PAYMENT = "payment", "Ödeme"


class ConversionStatus(models.TextChoices):
    COPYING = "copying", "Kopyalanıyor"
    COPIED = "copied", "Kopyalandı"
    DONE = "done", "Tamamlandı"


class DirectoryContact(models.Model):
    """Henüz üye olmamış firma/kişi için yönetici rehber kaydı."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    company_name = models.CharField(max_length=255, blank=True)
    phone = models.CharField(max_length=32)
    email = models.EmailField(blank=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = "directoryContacts"
        ordering = ["-created_at"]

    def __str__(self):
        return self.company_name or self.name


class CompanyNote(models.Model):
    """
    Yönetici notu ya da ödeme kaydı. Sahibi ya bir firma (`user`) ya da bir
    rehber kaydıdır (`contact`), ikisi birden olamaz.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        UserProfile,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="company_notes",
    )
    contact = models.ForeignKey(
        DirectoryContact,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="contact_notes",
    )
    title = models.CharField(max_length=255)
    content = models.TextField(blank=True)
    author = models.CharField(max_length=255, default="Admin")
    type = models.CharField(max_length=16, choices=NoteType.choices, default=NoteType.NOTE)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = "notes"
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(user__isnull=False, contact__isnull=True)
                    | Q(user__isnull=True, contact__isnull=False)
                ),
                name="note_single_owner",
            )
        ]

    def __str__(self):
        return self.title


class ConversionMarker(models.Model):
    """
    Rehber kaydı → firma dönüşümünün ilerleme kaydı.
    `copied` durumunda kalan işaretçiler `resume_conversions` ile tamamlanır.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    # rehber kaydı dönüşüm sonunda silinir; FK değil
    contact_id = models.CharField(max_length=64, db_index=True)
    company = models.ForeignKey(
        UserProfile, on_delete=models.CASCADE, related_name="conversion_markers"
    )
    status = models.CharField(
        max_length=16, choices=ConversionStatus.choices, default=ConversionStatus.COPYING
    )
    note_count = models.PositiveIntegerField(default=0)
    copied_note_ids = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "conversionMarkers"
        indexes = [models.Index(fields=["status", "created_at"])]

    def __str__(self):
        return f"{self.contact_id} → {self.company_id} ({self.status})"
