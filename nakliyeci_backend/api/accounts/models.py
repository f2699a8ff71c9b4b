import uuid

from django.contrib.auth.hashers import check_password, make_password
from django.db import models
from django.utils import timezone

from common.utils import slugify_tr, turkish_sort_key


class UserRole(models.TextChoices):
    INDIVIDUAL = "individual", "Bireysel"
    COMPANY = "company", "Firma"


class CompanyType(models.TextChoices):
    LOCAL = "local", "Yerli Firma"
    FOREIGN = "foreign", "Yabancı Firma"


class CompanyCategory(models.TextChoices):
    NAKLIYECI = "Nakliyeci", "Nakliyeci"
    LOJISTIK = "Lojistik", "Lojistik"
    KARGO = "Kargo", "Kargo"
    EVDEN_EVE = "Evden Eve Nakliyat", "Evden Eve Nakliyat"
    DEPOLAMA = "Depolama", "Depolama"
    GUMRUK = "Gümrük Müşaviri", "Gümrük Müşaviri"

    @classmethod
    def from_slug(cls, slug: str):
        for value, _label in cls.choices:
            if slugify_tr(value) == slug:
                return value
        return None


class MembershipStatus(models.TextChoices):
    NONE = "Yok", "Yok"
    STANDART = "Standart", "Standart"
    PREMIUM = "Premium", "Premium"


class AdminRole(models.TextChoices):
    ADMIN = "admin", "Yönetici"
    SUPER_ADMIN = "superAdmin", "Süper Yönetici"


class UserProfile(models.Model):
    """
    Platform kullanıcısının profil kaydı. Birincil anahtar Firebase uid'dir;
    kimlik (giriş/kayıt/şifre) Firebase Authentication'da tutulur.
    """

    id = models.CharField(primary_key=True, max_length=128)
    role = models.CharField(max_length=16, choices=UserRole.choices, default=UserRole.COMPANY)
    email = models.EmailField(db_index=True)
    name = models.CharField(max_length=255, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    mobile_phone = models.CharField(max_length=32, blank=True)
    work_phone = models.CharField(max_length=32, blank=True)

    # firma alanları
    username = models.CharField(max_length=64, blank=True, db_index=True)
    company_title = models.CharField(max_length=255, blank=True)
    sort_name = models.CharField(max_length=512, blank=True, db_index=True, editable=False)
    logo_url = models.URLField(max_length=500, blank=True)
    category = models.CharField(
        max_length=64, choices=CompanyCategory.choices, default=CompanyCategory.NAKLIYECI
    )
    contact_full_name = models.CharField(max_length=255, blank=True)
    fax = models.CharField(max_length=32, blank=True)
    website = models.CharField(max_length=255, blank=True)
    company_description = models.TextField(blank=True)
    company_type = models.CharField(
        max_length=16, choices=CompanyType.choices, default=CompanyType.LOCAL
    )
    address_country = models.CharField(max_length=8, default="TR")
    address_city = models.CharField(max_length=128, blank=True)
    address_district = models.CharField(max_length=128, blank=True)
    full_address = models.TextField(blank=True)
    working_methods = models.JSONField(default=list, blank=True)
    working_routes = models.JSONField(default=list, blank=True)
    preferred_cities = models.JSONField(default=list, blank=True)
    preferred_countries = models.JSONField(default=list, blank=True)
    owned_vehicles = models.JSONField(default=list, blank=True)
    auth_documents = models.JSONField(default=list, blank=True)

    membership_status = models.CharField(
        max_length=16, choices=MembershipStatus.choices, default=MembershipStatus.NONE
    )
    membership_end_date = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "users"
        indexes = [
            models.Index(fields=["role", "is_active", "address_city"]),
            models.Index(fields=["role", "is_active", "category"]),
        ]

    def save(self, *args, **kwargs):
        if self.email:
            self.email = self.email.strip().lower()
        if self.role == UserRole.COMPANY:
            # firmada görünen ad = ünvan
            self.company_title = self.company_title or self.name
            self.name = self.company_title
        self.sort_name = turkish_sort_key(self.display_name)
        update_fields = kwargs.get("update_fields")
        if update_fields is not None:
            kwargs["update_fields"] = set(update_fields) | {"sort_name", "name", "company_title"}
        super().save(*args, **kwargs)

    def __str__(self):
        return self.display_name or self.email or self.id

    @property
    def display_name(self) -> str:
        return self.company_title or self.name

    @property
    def is_company(self) -> bool:
        return self.role == UserRole.COMPANY

    @property
    def sponsorships(self) -> list[dict]:
        return [
            {"type": s.entity_type, "name": s.entity_name}
            for s in self.sponsors.filter(is_active=True).order_by("entity_type", "entity_name")
        ]


class AdminProfile(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = models.CharField(max_length=64, unique=True)
    name = models.CharField(max_length=255, blank=True)
    password = models.CharField(max_length=128)
    role = models.CharField(max_length=16, choices=AdminRole.choices, default=AdminRole.ADMIN)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "admins"
        ordering = ["username"]

    def __str__(self):
        return self.username

    def set_password(self, raw_password: str):
        self.password = make_password(raw_password)

    def check_password(self, raw_password: str) -> bool:
        return check_password(raw_password, self.password)

    @property
    def is_super_admin(self) -> bool:
        return self.role == AdminRole.SUPER_ADMIN
