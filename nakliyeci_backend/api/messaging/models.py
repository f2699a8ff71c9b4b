import uuid

from django.db import models
from django.utils import timezone

from api.accounts.models import UserProfile


class Message(models.Model):
    """Kullanıcıdan yöneticiye gönderilen mesaj."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        UserProfile, on_delete=models.SET_NULL, null=True, blank=True, related_name="messages"
    )
    user_name = models.CharField(max_length=255, default="Bilinmeyen Kullanıcı")
    title = models.CharField(max_length=255)
    content = models.TextField()
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    is_read = models.BooleanField(default=False)

    class Meta:
        db_table = "messages"
        ordering = ["-created_at"]
        indexes = [models.Index(fields=["is_read", "-created_at"])]

    def __str__(self):
        return f"{self.user_name}: {self.title}"
