"""
Ayar katalogları: araç tipleri, yük cinsleri, yetki belgeleri, taşımacılık
türleri, üyelik paketleri, duyurular, manşet slaytları ve yönetici notları.

Tüm kataloglar aynı CRUD arayüzünü paylaşır; `CATALOGS` her türün modelini,
serializer'ını, sıralamasını ve herkese açık olup olmadığını tanımlar.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from django.db import DatabaseError
from django.utils import timezone

from api.listings.choices import VEHICLES_NEEDED, CargoType
from common.converters import coerce_datetime

from . import serializers as s
from .models import (
    AdminNote,
    Announcement,
    ApplicableTo,
    AuthDocument,
    CargoTypeOption,
    DurationUnit,
    HeroSlide,
    MembershipPlan,
    RequiredFor,
    TargetAudience,
    TransportMode,
    VehicleTypeOption,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Catalog:
    model: type
    serializer: type
    ordering: tuple[str, ...]
    label: str
    # herkese açık listede yalnızca etkin kayıtlar
    public: bool = True
    created_field: str | None = None
    modified_field: str | None = None
    protected: frozenset = field(default_factory=frozenset)

    def protected_fields(self) -> set[str]:
        names = {"id", "pk", *self.protected}
        if self.created_field:
            names.add(self.created_field)
        if self.modified_field:
            names.add(self.modified_field)
        return names


CATALOGS: dict[str, Catalog] = {
    "vehicle-types": Catalog(
        VehicleTypeOption, s.VehicleTypeSerializer, ("name",), "Araç Tipleri"
    ),
    "cargo-types": Catalog(CargoTypeOption, s.CargoTypeSerializer, ("name",), "Yük Cinsleri"),
    "auth-docs": Catalog(AuthDocument, s.AuthDocumentSerializer, ("name",), "Yetki Belgeleri"),
    "transport-types": Catalog(
        TransportMode, s.TransportModeSerializer, ("name",), "Taşımacılık Türleri"
    ),
    "memberships": Catalog(
        MembershipPlan, s.MembershipPlanSerializer, ("price", "name"), "Üyelikler"
    ),
    "announcements": Catalog(
        Announcement,
        s.AnnouncementSerializer,
        ("-created_at",),
        "Duyurular",
        created_field="created_at",
    ),
    "admin-notes": Catalog(
        AdminNote,
        s.AdminNoteSerializer,
        ("-last_modified_date",),
        "Yönetici Notları",
        public=False,
        created_field="created_date",
        modified_field="last_modified_date",
    ),
    "hero-slides": Catalog(
        HeroSlide,
        s.HeroSlideSerializer,
        ("order", "created_at"),
        "Manşet Slaytları",
        created_field="created_at",
    ),
}


def get_catalog(kind: str) -> Catalog | None:
    return CATALOGS.get(kind)


# ======================
# CRUD
# ======================


def list_items(catalog: Catalog, *, active_only: bool = False) -> list:
    try:
        qs = catalog.model.objects.all()
        if active_only:
            qs = qs.filter(is_active=True)
        return list(qs.order_by(*catalog.ordering))
    except DatabaseError:
        logger.exception("Error fetching %s", catalog.model.__name__)
        return []


def get_item(catalog: Catalog, item_id):
    try:
        return catalog.model.objects.filter(pk=item_id).first()
    except DatabaseError:
        logger.exception("Error fetching %s %s", catalog.model.__name__, item_id)
        return None


def add_item(catalog: Catalog, data: dict):
    payload = {k: v for k, v in data.items() if k not in catalog.protected_fields()}
    now = timezone.now()
    if catalog.created_field:
        payload[catalog.created_field] = now
    if catalog.modified_field:
        payload[catalog.modified_field] = now
    try:
        return catalog.model.objects.create(**payload)
    except DatabaseError:
        logger.exception("Error adding %s", catalog.model.__name__)
        return None


def update_item(catalog: Catalog, item_id, data: dict) -> bool:
    patch = {k: v for k, v in data.items() if k not in catalog.protected_fields()}
    if catalog.modified_field:
        patch[catalog.modified_field] = timezone.now()
    try:
        qs = catalog.model.objects.filter(pk=item_id)
        if not patch:
            return qs.exists()
        return bool(qs.update(**patch))
    except DatabaseError:
        logger.exception("Error updating %s %s", catalog.model.__name__, item_id)
        return False


def delete_item(catalog: Catalog, item_id) -> bool:
    try:
        deleted, _ = catalog.model.objects.filter(pk=item_id).delete()
        return bool(deleted)
    except DatabaseError:
        logger.exception("Error deleting %s %s", catalog.model.__name__, item_id)
        return False


# ======================
# SEED
# ======================

DEFAULT_AUTH_DOCS = [
    {
        "name": "K1 Yetki Belgesi",
        "required_for": RequiredFor.COMPANY,
        "details": "Yurtiçi ticari amaçlı eşya taşımacılığı yapacaklara verilir.",
    },
    {
        "name": "C2 Yetki Belgesi",
        "required_for": RequiredFor.COMPANY,
        "details": "Uluslararası ve yurtiçi ticari amaçlı eşya taşımacılığı yapacaklara verilir.",
    },
    {
        "name": "Src Belgesi",
        "required_for": RequiredFor.INDIVIDUAL,
        "details": "Ticari araç sürücüleri için mesleki yeterlilik belgesi.",
    },
]

DEFAULT_MEMBERSHIPS = [
    {
        "name": "Standart Üyelik",
        "price": 99,
        "duration": 1,
        "duration_unit": DurationUnit.MONTH,
        "features": ["Aylık 10 ilan hakkı", "Standart destek"],
        "description": "Başlangıç seviyesi için aylık üyelik.",
    },
    {
        "name": "Premium Üyelik",
        "price": 249,
        "duration": 1,
        "duration_unit": DurationUnit.MONTH,
        "features": ["Sınırsız ilan hakkı", "Öne çıkan ilanlar", "7/24 Destek"],
        "description": "Profesyoneller için aylık premium üyelik.",
    },
    {
        "name": "Yıllık Gold Üyelik",
        "price": 2499,
        "duration": 1,
        "duration_unit": DurationUnit.YEAR,
        "features": ["Sınırsız ilan hakkı", "Öne çıkan ilanlar", "Dedicated Destek", "Raporlama"],
        "description": "Uzun vadeli avantajlı yıllık üyelik.",
    },
]

DEFAULT_TRANSPORT_TYPES = [
    {
        "name": "Komple Taşıma",
        "applicable_to": ApplicableTo.COMMERCIAL,
        "description": "Tek bir müşterinin yükünü bir araçla taşıma.",
    },
    {
        "name": "Parsiyel Taşıma",
        "applicable_to": ApplicableTo.COMMERCIAL,
        "description": "Birden fazla müşterinin yükünü aynı araçta birleştirerek taşıma.",
    },
    {
        "name": "Evden Eve Nakliyat",
        "applicable_to": ApplicableTo.RESIDENTIAL,
        "description": "Konut ve ofis eşyalarının taşınması.",
    },
    {
        "name": "Proje Taşımacılığı",
        "applicable_to": ApplicableTo.COMMERCIAL,
        "description": "Özel ekipman ve planlama gerektiren büyük ölçekli yükler.",
    },
]

DEFAULT_ANNOUNCEMENTS = [
    {
        "title": "Yeni Yıl Kampanyası!",
        "content": "Tüm üyeliklerde %20 indirim fırsatını kaçırmayın. Detaylar için tıklayın.",
        "target_audience": TargetAudience.ALL,
        "start_date": "2023-12-15",
        "end_date": "2024-01-05",
    },
    {
        "title": "Sistem Bakımı",
        "content": (
            "Platformumuzda 20 Ocak Pazar 02:00-04:00 saatleri arasında kısa süreli "
            "bir bakım çalışması yapılacaktır."
        ),
        "target_audience": TargetAudience.ALL,
        "start_date": "2024-01-18",
        "end_date": "2024-01-20",
    },
]

DEFAULT_ADMIN_NOTES = [
    {
        "title": "Kullanıcı Arayüzü Geri Bildirimi",
        "content": "Kullanıcılar mobil arayüzde filtrelerin daha belirgin olmasını talep ediyor.",
        "category": "Kullanıcı Geri Bildirimi",
        "is_important": False,
    },
    {
        "title": "Pazarlama Stratejisi Toplantısı",
        "content": "Gelecek çeyrek pazarlama hedefleri ve bütçesi için 15 Şubat'ta toplantı planlandı.",
        "category": "Yönetici",
        "is_important": True,
    },
]


def _seed_rows():
    """(katalog anahtarı, eşleştirme alanı, kayıtlar) üçlüleri."""
    yield "vehicle-types", "name", [
        {"name": v, "description": f"Araç tipi: {v}"} for v in VEHICLES_NEEDED
    ]
    yield "cargo-types", "name", [{"name": c.label, "category": "Genel"} for c in CargoType]
    yield "auth-docs", "name", DEFAULT_AUTH_DOCS
    yield "memberships", "name", DEFAULT_MEMBERSHIPS
    yield "transport-types", "name", DEFAULT_TRANSPORT_TYPES
    yield "announcements", "title", [
        {
            **a,
            "start_date": coerce_datetime(a["start_date"]),
            "end_date": coerce_datetime(a["end_date"]),
        }
        for a in DEFAULT_ANNOUNCEMENTS
    ]
    yield "admin-notes", "title", DEFAULT_ADMIN_NOTES


def seed_settings() -> tuple[bool, list[dict]]:
    """
    Varsayılan katalog kayıtlarını ekler; aynı ad/başlıkta kayıt varsa atlar.
    Dönen ayrıntılar her kayıt için {category, name, status} içerir.
    """
    ok = True
    details = []
    for kind, key, rows in _seed_rows():
        catalog = CATALOGS[kind]
        for row in rows:
            name = row[key]
            try:
                if catalog.model.objects.filter(**{key: name}).exists():
                    status = "Zaten mevcut, atlandı"
                elif add_item(catalog, row) is None:
                    raise DatabaseError(f"{name} eklenemedi")
                else:
                    status = "Başarıyla eklendi"
            except DatabaseError as e:
                logger.exception("Seeding %s / %s failed", kind, name)
                status = f"Ekleme hatası: {e}"
                ok = False
            details.append({"category": catalog.label, "name": name, "status": status})
    logger.info("Settings seed finished (ok=%s, %s rows)", ok, len(details))
    return ok, details
