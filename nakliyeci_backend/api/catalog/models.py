import uuid

from django.db import models
from django.utils import timezone


class RequiredFor(models.TextChoices):
    INDIVIDUAL = "Bireysel", "Bireysel"
    COMPANY = "Firma", "Firma"
    BOTH = "Her İkisi de", "Her İkisi de"


class ApplicableTo(models.TextChoices):
    COMMERCIAL = "Ticari", "Ticari"
    RESIDENTIAL = "Evden Eve", "Evden Eve"
    BOTH = "Her İkisi de", "Her İkisi de"


class DurationUnit(models.TextChoices):
    DAY = "Gün", "Gün"
    MONTH = "Ay", "Ay"
    YEAR = "Yıl", "Yıl"


class TargetAudience(models.TextChoices):
    ALL = "Tümü", "Tümü"
    INDIVIDUALS = "Bireysel Kullanıcılar", "Bireysel Kullanıcılar"
    COMPANIES = "Firma Kullanıcıları", "Firma Kullanıcıları"


class HeroSlideType(models.TextChoices):
    CENTERED = "centered", "Ortalanmış"
    LEFT_ALIGNED = "left-aligned", "Sola Dayalı"
    WITH_INPUT = "with-input", "Giriş Alanlı"
    SPLIT = "split", "Bölünmüş"
    TITLE_ONLY = "title-only", "Yalnızca Başlık"
    VIDEO_BACKGROUND = "video-background", "Video Arka Planlı"


class MediaType(models.TextChoices):
    IMAGE = "image", "Görsel"
    VIDEO = "video", "Video"


class ButtonShape(models.TextChoices):
    DEFAULT = "default", "Varsayılan"
    ROUNDED = "rounded", "Yuvarlak"


class CatalogItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    is_active = models.BooleanField(default=True)

    class Meta:
        abstract = True
        ordering = ["name"]

    def __str__(self):
        return self.name


class VehicleTypeOption(CatalogItem):
    description = models.TextField(blank=True)

    class Meta(CatalogItem.Meta):
        db_table = "settingsVehicleTypes"


class CargoTypeOption(CatalogItem):
    category = models.CharField(max_length=128, blank=True)

    class Meta(CatalogItem.Meta):
        db_table = "settingsCargoTypes"


class AuthDocument(CatalogItem):
    required_for = models.CharField(max_length=16, choices=RequiredFor.choices)
    details = models.TextField(blank=True)

    class Meta(CatalogItem.Meta):
        db_table = "settingsAuthDocs"


class TransportMode(CatalogItem):
    description = models.TextField(blank=True)
    applicable_to = models.CharField(max_length=16, choices=ApplicableTo.choices)

    class Meta(CatalogItem.Meta):
        db_table = "settingsTransportTypes"


class MembershipPlan(CatalogItem):
    price = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    duration = models.PositiveIntegerField(default=1)
    duration_unit = models.CharField(
        max_length=8, choices=DurationUnit.choices, default=DurationUnit.MONTH
    )
    features = models.JSONField(default=list, blank=True)
    description = models.TextField(blank=True)

    class Meta:
        db_table = "settingsMemberships"
        ordering = ["price"]


class Announcement(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    content = models.TextField()
    target_audience = models.CharField(
        max_length=32, choices=TargetAudience.choices, default=TargetAudience.ALL
    )
    start_date = models.DateTimeField(null=True, blank=True)
    end_date = models.DateTimeField(null=True, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "settingsAnnouncements"
        ordering = ["-created_at"]

    def __str__(self):
        return self.title


class AdminNote(models.Model):
    """Yöneticilerin kendi aralarındaki iç notları."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    content = models.TextField()
    category = models.CharField(max_length=64, default="Genel")
    is_important = models.BooleanField(default=False)
    created_date = models.DateTimeField(default=timezone.now)
    last_modified_date = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "settingsAdminNotes"
        ordering = ["-last_modified_date"]

    def __str__(self):
        return self.title


class HeroSlide(models.Model):
    """
    Ana sayfa manşet alanındaki slaytlar. `type` hangi medya alanlarının
    dolu olması gerektiğini belirler; kalan alanlar boş bırakılabilir.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    type = models.CharField(max_length=24, choices=HeroSlideType.choices)
    title = models.CharField(max_length=255)
    subtitle = models.CharField(max_length=500, blank=True)
    is_active = models.BooleanField(default=True)
    order = models.IntegerField(default=0)
    created_at = models.DateTimeField(default=timezone.now)

    background_image_url = models.CharField(max_length=500, blank=True)
    background_color = models.CharField(max_length=32, blank=True)
    media_type = models.CharField(max_length=8, choices=MediaType.choices, blank=True)
    media_url = models.CharField(max_length=500, blank=True)
    video_url = models.CharField(max_length=500, blank=True)

    button_text = models.CharField(max_length=128, blank=True)
    button_url = models.CharField(max_length=500, blank=True)
    button_icon = models.CharField(max_length=64, blank=True)
    button_color = models.CharField(max_length=32, blank=True)
    button_text_color = models.CharField(max_length=32, blank=True)
    button_shape = models.CharField(
        max_length=8, choices=ButtonShape.choices, default=ButtonShape.DEFAULT
    )
    text_color = models.CharField(max_length=32, blank=True)
    overlay_opacity = models.FloatField(null=True, blank=True)

    input_placeholder = models.CharField(max_length=255, blank=True)
    form_action_url = models.CharField(max_length=500, blank=True)

    class Meta:
        db_table = "heroSlides"
        ordering = ["order", "created_at"]

    def __str__(self):
        return self.title
