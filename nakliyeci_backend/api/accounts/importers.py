"""
Firestore JSON dışa aktarımını (firestore-export biçimi) veritabanına yükler.

Biçim: {"__collections__": {"users": {"<docId>": {...alanlar,
"__collections__": {"notes": {...}}}}, "listings": {...}, ...}}.
Zaman damgaları {"__datatype__": "timestamp", "value": {"_seconds", "_nanoseconds"}}
olarak gelir; her kayıt `RecordSchema` ile dönüştürülür.

Firestore kimlikleri UUID olmadığından UUID anahtarlı tablolarda kimlik
`uuid5(koleksiyon/docId)` ile türetilir; aynı dosya tekrar yüklendiğinde
kayıtlar güncellenir, çoğaltılmaz.
"""
from __future__ import annotations

import logging
import uuid
from collections import Counter

from django.db import DatabaseError, transaction

from api.catalog.models import (
    AdminNote,
    Announcement,
    ApplicableTo,
    AuthDocument,
    ButtonShape,
    CargoTypeOption,
    DurationUnit,
    HeroSlide,
    HeroSlideType,
    MediaType,
    MembershipPlan,
    RequiredFor,
    TargetAudience,
    TransportMode,
    VehicleTypeOption,
)
from api.directory.models import CompanyNote, DirectoryContact, NoteType
from api.listings.choices import (
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
from api.listings.models import Freight
from api.memberships.models import MembershipRequest, RequestStatus
from api.messaging.models import Message
from api.offers.models import TransportOffer
from api.sponsors.models import EntityType, Sponsor
from common.converters import (
    Choice,
    Day,
    Flag,
    Items,
    Number,
    RecordSchema,
    Text,
    Timestamp,
)

from .models import CompanyCategory, CompanyType, MembershipStatus, UserProfile, UserRole

logger = logging.getLogger(__name__)

NAMESPACE = uuid.UUID("6f1c1f0e-3c5a-4d7e-9a53-2f7f0b5f9e21")

# eski kayıtlarda ticari ilan türü "Yük" olarak tutulmuş
FREIGHT_TYPE_ALIASES = {"Yük": FreightType.COMMERCIAL.value}


def derived_id(collection: str, doc_id: str) -> uuid.UUID:
    return uuid.uuid5(NAMESPACE, f"{collection}/{doc_id}")


def unwrap(value):
    """firestore-export tip sarmalayıcılarını açar; alt koleksiyonları atar."""
    if isinstance(value, dict):
        if "__datatype__" in value:
            return unwrap(value.get("value"))
        return {k: unwrap(v) for k, v in value.items() if k != "__collections__"}
    if isinstance(value, list):
        return [unwrap(v) for v in value]
    return value


# ======================
# SCHEMAS
# ======================

USER_SCHEMA = RecordSchema(
    "users",
    Choice("role", UserRole.values, default=UserRole.COMPANY),
    Text("email"),
    Text("name"),
    Flag("isActive", "is_active"),
    Timestamp("createdAt", "created_at"),
    Text("mobilePhone", "mobile_phone"),
    Text("workPhone", "work_phone"),
    Text("username"),
    Text("companyTitle", "company_title"),
    Text("logoUrl", "logo_url"),
    Choice("category", CompanyCategory.values, default=CompanyCategory.NAKLIYECI),
    Text("contactFullName", "contact_full_name"),
    Text("fax"),
    Text("website"),
    Text("companyDescription", "company_description"),
    Choice("companyType", CompanyType.values, "company_type", default=CompanyType.LOCAL),
    Text("addressCountry", "address_country", default="TR"),
    Text("addressCity", "address_city"),
    Text("addressDistrict", "address_district"),
    Text("fullAddress", "full_address"),
    Items("workingMethods", "working_methods"),
    Items("workingRoutes", "working_routes"),
    Items("preferredCities", "preferred_cities"),
    Items("preferredCountries", "preferred_countries"),
    Items("ownedVehicles", "owned_vehicles"),
    Items("authDocuments", "auth_documents"),
    Choice(
        "membershipStatus", MembershipStatus.values, "membership_status", default=MembershipStatus.NONE
    ),
    Timestamp("membershipEndDate", "membership_end_date", required=False),
)

LISTING_SCHEMA = RecordSchema(
    "listings",
    Text("userId", "user_id"),
    Choice("freightType", FreightType.values, "freight_type", default=FreightType.COMMERCIAL),
    Text("postedBy", "posted_by"),
    Text("companyName", "company_name"),
    Text("contactPerson", "contact_person"),
    Text("contactEmail", "contact_email"),
    Text("workPhone", "work_phone"),
    Text("mobilePhone", "mobile_phone"),
    Text("originCountry", "origin_country", default="TR"),
    Text("originCity", "origin_city"),
    Text("originDistrict", "origin_district"),
    Text("destinationCountry", "destination_country", default="TR"),
    Text("destinationCity", "destination_city"),
    Text("destinationDistrict", "destination_district"),
    Day("loadingDate", "loading_date"),
    Timestamp("postedAt", "posted_at"),
    Flag("isActive", "is_active"),
    Text("description"),
    Choice("cargoType", CargoType.values, "cargo_type", default=""),
    Text("vehicleNeeded", "vehicle_needed"),
    Choice("loadingType", LoadingType.values, "loading_type", default=""),
    Choice("cargoForm", CargoForm.values, "cargo_form", default=""),
    Number("cargoWeight", "cargo_weight"),
    Choice("cargoWeightUnit", WeightUnit.values, "cargo_weight_unit", default=""),
    Flag("isContinuousLoad", "is_continuous_load", default=False),
    Choice("shipmentScope", ShipmentScope.values, "shipment_scope", default=""),
    Text("residentialTransportType", "residential_transport_type"),
    Choice(
        "residentialPlaceType", ResidentialPlaceType.values, "residential_place_type", default=""
    ),
    Choice(
        "residentialElevatorStatus",
        ElevatorStatus.values,
        "residential_elevator_status",
        default="",
    ),
    Choice("residentialFloorLevel", FloorLevel.values, "residential_floor_level", default=""),
    Text("advertisedVehicleType", "advertised_vehicle_type"),
    Text("serviceTypeForLoad", "service_type_for_load"),
    Number("vehicleStatedCapacity", "vehicle_stated_capacity"),
    Choice(
        "vehicleStatedCapacityUnit", WeightUnit.values, "vehicle_stated_capacity_unit", default=""
    ),
)

OFFER_SCHEMA = RecordSchema(
    "transportOffers",
    Text("userId", "user_id"),
    Text("companyName", "company_name", default="Bilinmiyor"),
    Timestamp("postedAt", "posted_at"),
    Flag("isActive", "is_active"),
    Text("originCountry", "origin_country", default="TR"),
    Text("originCity", "origin_city"),
    Text("originDistrict", "origin_district"),
    Text("destinationCountry", "destination_country", default="TR"),
    Text("destinationCity", "destination_city"),
    Text("destinationDistrict", "destination_district"),
    Text("vehicleType", "vehicle_type"),
    Number("distanceKm", "distance_km"),
    Number("priceTRY", "price_try"),
    Number("priceUSD", "price_usd"),
    Number("priceEUR", "price_eur"),
    Text("notes"),
)

SPONSOR_SCHEMA = RecordSchema(
    "sponsors",
    Text("companyId", "company_id"),
    Text("companyName", "company_name"),
    Text("companyLogoUrl", "company_logo_url"),
    Text("companyLink", "company_link"),
    Choice("entityType", EntityType.values, "entity_type"),
    Text("entityName", "entity_name"),
    Timestamp("startDate", "start_date"),
    Timestamp("endDate", "end_date", required=False),
    Flag("isActive", "is_active"),
    Timestamp("createdAt", "created_at"),
)

MESSAGE_SCHEMA = RecordSchema(
    "messages",
    Text("userId", "user_id", default=None),
    Text("userName", "user_name", default="Bilinmeyen Kullanıcı"),
    Text("title"),
    Text("content"),
    Timestamp("createdAt", "created_at"),
    Flag("isRead", "is_read", default=False),
)

NOTE_SCHEMA = RecordSchema(
    "notes",
    Text("title"),
    Text("content"),
    Text("author", default="Admin"),
    Choice("type", NoteType.values, default=NoteType.NOTE),
    Timestamp("createdAt", "created_at"),
)

CONTACT_SCHEMA = RecordSchema(
    "directoryContacts",
    Text("name"),
    Text("companyName", "company_name"),
    Text("phone"),
    Text("email"),
    Text("notes"),
    Timestamp("createdAt", "created_at"),
)

MEMBERSHIP_REQUEST_SCHEMA = RecordSchema(
    "membershipRequests",
    Text("name"),
    Text("phone"),
    Text("email"),
    Text("companyName", "company_name"),
    Text("details"),
    Choice("status", RequestStatus.values, default=RequestStatus.NEW),
    Timestamp("createdAt", "created_at"),
    Text("userId", "user_id", default=None),
)

CATALOG_SCHEMAS = {
    "settingsVehicleTypes": (
        VehicleTypeOption,
        RecordSchema(
            "settingsVehicleTypes", Text("name"), Text("description"), Flag("isActive", "is_active")
        ),
    ),
    "settingsCargoTypes": (
        CargoTypeOption,
        RecordSchema(
            "settingsCargoTypes", Text("name"), Text("category"), Flag("isActive", "is_active")
        ),
    ),
    "settingsAuthDocs": (
        AuthDocument,
        RecordSchema(
            "settingsAuthDocs",
            Text("name"),
            Choice("requiredFor", RequiredFor.values, "required_for", default=RequiredFor.BOTH),
            Text("details"),
            Flag("isActive", "is_active"),
        ),
    ),
    "settingsTransportTypes": (
        TransportMode,
        RecordSchema(
            "settingsTransportTypes",
            Text("name"),
            Text("description"),
            Choice("applicableTo", ApplicableTo.values, "applicable_to", default=ApplicableTo.BOTH),
            Flag("isActive", "is_active"),
        ),
    ),
    "settingsMemberships": (
        MembershipPlan,
        RecordSchema(
            "settingsMemberships",
            Text("name"),
            Number("price", default=0),
            Number("duration", default=1),
            Choice("durationUnit", DurationUnit.values, "duration_unit", default=DurationUnit.MONTH),
            Items("features"),
            Text("description"),
            Flag("isActive", "is_active"),
        ),
    ),
    "settingsAnnouncements": (
        Announcement,
        RecordSchema(
            "settingsAnnouncements",
            Text("title"),
            Text("content"),
            Choice(
                "targetAudience", TargetAudience.values, "target_audience", default=TargetAudience.ALL
            ),
            Timestamp("startDate", "start_date", required=False),
            Timestamp("endDate", "end_date", required=False),
            Flag("isActive", "is_active"),
            Timestamp("createdAt", "created_at"),
        ),
    ),
    "settingsAdminNotes": (
        AdminNote,
        RecordSchema(
            "settingsAdminNotes",
            Text("title"),
            Text("content"),
            Text("category", default="Genel"),
            Flag("isImportant", "is_important", default=False),
            Timestamp("createdDate", "created_date"),
            Timestamp("lastModifiedDate", "last_modified_date"),
        ),
    ),
    "heroSlides": (
        HeroSlide,
        RecordSchema(
            "heroSlides",
            Choice("type", HeroSlideType.values, default=HeroSlideType.CENTERED),
            Text("title"),
            Text("subtitle"),
            Flag("isActive", "is_active"),
            Number("order", default=0),
            Timestamp("createdAt", "created_at"),
            Text("backgroundImageUrl", "background_image_url"),
            Text("backgroundColor", "background_color"),
            Choice("mediaType", MediaType.values, "media_type", default=""),
            Text("mediaUrl", "media_url"),
            Text("videoUrl", "video_url"),
            Text("buttonText", "button_text"),
            Text("buttonUrl", "button_url"),
            Text("buttonIcon", "button_icon"),
            Text("buttonColor", "button_color"),
            Text("buttonTextColor", "button_text_color"),
            Choice("buttonShape", ButtonShape.values, "button_shape", default=ButtonShape.DEFAULT),
            Text("textColor", "text_color"),
            Number("overlayOpacity", "overlay_opacity"),
            Text("inputPlaceholder", "input_placeholder"),
            Text("formActionUrl", "form_action_url"),
        ),
    ),
}


# ======================
# IMPORT
# ======================


class FirestoreImporter:
    def __init__(self, export: dict):
        self.collections = (export or {}).get("__collections__", export or {})
        self.stats: Counter = Counter()
        self.user_ids: set[str] = set()

    def docs(self, name: str, source: dict | None = None):
        source = self.collections if source is None else source
        for doc_id, raw in (source.get(name) or {}).items():
            yield str(doc_id), raw if isinstance(raw, dict) else {}

    def save(self, label: str, model, pk, data: dict) -> bool:
        try:
            with transaction.atomic():
                model.objects.update_or_create(pk=pk, defaults=data)
        except DatabaseError:
            logger.exception("Import: %s %s could not be saved", label, pk)
            self.stats[f"{label}.failed"] += 1
            return False
        self.stats[f"{label}.imported"] += 1
        return True

    def skip(self, label: str, doc_id: str, reason: str):
        logger.warning("Import: %s %s skipped (%s)", label, doc_id, reason)
        self.stats[f"{label}.skipped"] += 1

    # --- koleksiyonlar ---

    def import_users(self):
        for doc_id, raw in self.docs("users"):
            data = USER_SCHEMA.convert(unwrap(raw), doc_id)
            data.pop("id")
            if self.save("users", UserProfile, doc_id, data):
                self.user_ids.add(doc_id)
                self.import_legacy_sponsorships(doc_id, unwrap(raw))
                for note_id, note in self.docs("notes", raw.get("__collections__") or {}):
                    self.import_note(note_id, note, user_id=doc_id)

    def import_legacy_sponsorships(self, user_id: str, raw: dict):
        """Profil belgesinde tutulan eski `sponsorships` dizisi → Sponsor kayıtları."""
        entries = raw.get("sponsorships")
        if not isinstance(entries, list):
            return
        profile = UserProfile.objects.get(pk=user_id)
        for entry in entries:
            if not isinstance(entry, dict) or entry.get("type") not in EntityType.values:
                continue
            name = str(entry.get("name") or "").strip()
            if not name:
                continue
            pk = derived_id("sponsorships", f"{user_id}/{entry['type']}/{name}")
            self.save(
                "sponsors",
                Sponsor,
                pk,
                {
                    "company_id": user_id,
                    "company_name": profile.display_name,
                    "company_logo_url": profile.logo_url,
                    "company_link": f"/uyelerimiz/firma/{user_id}",
                    "entity_type": entry["type"],
                    "entity_name": name,
                    "start_date": profile.created_at,
                    "is_active": True,
                },
            )

    def import_note(self, doc_id: str, raw: dict, *, user_id=None, contact_id=None):
        data = NOTE_SCHEMA.convert(unwrap(raw), doc_id)
        data.pop("id")
        owner = "users" if user_id else "directoryContacts"
        pk = derived_id(f"{owner}/{user_id or contact_id}/notes", doc_id)
        self.save("notes", CompanyNote, pk, {**data, "user_id": user_id, "contact_id": contact_id})

    def import_owned(self, name: str, schema: RecordSchema, model, owner_field: str):
        for doc_id, raw in self.docs(name):
            raw = unwrap(raw)
            if name == "listings" and raw.get("freightType") in FREIGHT_TYPE_ALIASES:
                raw["freightType"] = FREIGHT_TYPE_ALIASES[raw["freightType"]]
            data = schema.convert(raw, doc_id)
            data.pop("id")
            if data.get(owner_field) not in self.user_ids:
                self.skip(name, doc_id, f"unknown owner {data.get(owner_field)!r}")
                continue
            self.save(name, model, derived_id(name, doc_id), data)

    def import_optional_owner(self, name: str, schema: RecordSchema, model):
        for doc_id, raw in self.docs(name):
            data = schema.convert(unwrap(raw), doc_id)
            data.pop("id")
            if data.get("user_id") not in self.user_ids:
                data["user_id"] = None
            self.save(name, model, derived_id(name, doc_id), data)

    def import_contacts(self):
        for doc_id, raw in self.docs("directoryContacts"):
            data = CONTACT_SCHEMA.convert(unwrap(raw), doc_id)
            data.pop("id")
            pk = derived_id("directoryContacts", doc_id)
            if self.save("directoryContacts", DirectoryContact, pk, data):
                for note_id, note in self.docs("notes", raw.get("__collections__") or {}):
                    self.import_note(note_id, note, contact_id=pk)

    def import_catalogs(self):
        for name, (model, schema) in CATALOG_SCHEMAS.items():
            for doc_id, raw in self.docs(name):
                data = schema.convert(unwrap(raw), doc_id)
                data.pop("id")
                self.save(name, model, derived_id(name, doc_id), data)

    def run(self) -> Counter:
        self.user_ids = set(UserProfile.objects.values_list("pk", flat=True))
        self.import_users()
        self.import_owned("listings", LISTING_SCHEMA, Freight, "user_id")
        self.import_owned("transportOffers", OFFER_SCHEMA, TransportOffer, "user_id")
        self.import_owned("sponsors", SPONSOR_SCHEMA, Sponsor, "company_id")
        self.import_optional_owner("messages", MESSAGE_SCHEMA, Message)
        self.import_optional_owner("membershipRequests", MEMBERSHIP_REQUEST_SCHEMA, MembershipRequest)
        self.import_contacts()
        self.import_catalogs()
        logger.info("Firestore import finished: %s", dict(self.stats))
        return self.stats
