from __future__ import annotations

import logging

from django.db import DatabaseError, transaction
from django.utils import timezone

from api.accounts.models import UserProfile, UserRole
from common.converters import coerce_datetime
from common.results import BatchResult, MutationResult

from .models import EntityType, Sponsor

logger = logging.getLogger(__name__)

PROTECTED_FIELDS = {"id", "pk", "created_at", "company", "company_id"}


def _failure(message: str) -> BatchResult:
    return BatchResult(success=False, message=message, added_count=0, skipped_count=0)


def _company_fields(company: UserProfile) -> dict:
    return {
        "company_name": company.display_name,
        "company_logo_url": company.logo_url,
        "company_link": f"/uyelerimiz/firma/{company.pk}",
    }


# ======================
# BATCH
# ======================


def add_sponsorships_batch(
    company_id: str,
    country_codes: list[str] | None,
    city_names: list[str] | None,
    start_date,
    end_date=None,
) -> BatchResult:
    """
    Firmaya ülke/şehir sponsorluklarını toplu ekler. Mevcut (tür, ad) çiftleri
    atlanır ve sayılır; istek içindeki tekrarlar tek hedef sayılır.
    Okuma-sonra-yazma denetimi kilit almaz: eşzamanlı iki istek aynı hedefi
    iki kez ekleyebilir.
    """
    if not company_id:
        return _failure("Firma seçimi zorunludur.")

    targets = list(
        dict.fromkeys(
            [(EntityType.COUNTRY.value, c.strip()) for c in country_codes or [] if c and c.strip()]
            + [(EntityType.CITY.value, c.strip()) for c in city_names or [] if c and c.strip()]
        )
    )
    if not targets:
        return _failure("En az bir ülke veya şehir seçilmelidir.")

    start = coerce_datetime(start_date, field="start_date", record_id=company_id)
    if start is None:
        return _failure("Geçerli bir başlangıç tarihi seçilmelidir.")
    end = None
    if end_date not in (None, ""):
        end = coerce_datetime(end_date, field="end_date", record_id=company_id)
        if end is None:
            return _failure("Geçerli bir bitiş tarihi seçilmelidir.")
        if end < start:
            return _failure("Bitiş tarihi başlangıç tarihinden önce olamaz.")

    try:
        company = UserProfile.objects.filter(pk=company_id).first()
        if company is None:
            return _failure("Seçilen firma bulunamadı.")

        existing = set(
            Sponsor.objects.filter(company=company).values_list("entity_type", "entity_name")
        )
        now = timezone.now()
        staged = [
            Sponsor(
                company=company,
                entity_type=entity_type,
                entity_name=entity_name,
                start_date=start,
                end_date=end,
                is_active=True,
                created_at=now,
                **_company_fields(company),
            )
            for entity_type, entity_name in targets
            if (entity_type, entity_name) not in existing
        ]
        skipped = len(targets) - len(staged)

        if not staged:
            return BatchResult(
                success=True,
                message="Seçilen tüm sponsorluklar zaten mevcut, yeni kayıt eklenmedi.",
                added_count=0,
                skipped_count=skipped,
            )

        with transaction.atomic():
            Sponsor.objects.bulk_create(staged)
    except DatabaseError:
        logger.exception("Error adding sponsorships for company %s", company_id)
        return _failure("Sponsorluklar eklenirken bir hata oluştu.")

    message = f"{len(staged)} yeni sponsorluk eklendi."
    if skipped:
        message += f" {skipped} mevcut sponsorluk atlandı."
    logger.info("Company %s: %s sponsorships added, %s skipped", company_id, len(staged), skipped)
    return BatchResult(success=True, message=message, added_count=len(staged), skipped_count=skipped)


# ======================
# CRUD
# ======================


def get_all_sponsors() -> list[Sponsor]:
    try:
        return list(Sponsor.objects.order_by("-created_at"))
    except DatabaseError:
        logger.exception("Error fetching sponsors")
        return []


def get_sponsors_by_company(company_id: str) -> list[Sponsor]:
    try:
        return list(Sponsor.objects.filter(company_id=company_id).order_by("entity_type", "entity_name"))
    except DatabaseError:
        logger.exception("Error fetching sponsors for company %s", company_id)
        return []


def update_sponsor(sponsor_id, data: dict) -> MutationResult:
    patch = {k: v for k, v in data.items() if k not in PROTECTED_FIELDS}
    try:
        sponsor = Sponsor.objects.filter(pk=sponsor_id).first()
        if sponsor is None:
            return MutationResult.missing("Sponsorluk bulunamadı.")
        start = patch.get("start_date", sponsor.start_date)
        end = patch.get("end_date", sponsor.end_date)
        if end is not None and end < start:
            return MutationResult(False, "Bitiş tarihi başlangıç tarihinden önce olamaz.")
        entity_type = patch.get("entity_type", sponsor.entity_type)
        entity_name = patch.get("entity_name", sponsor.entity_name)
        if (entity_type, entity_name) != (sponsor.entity_type, sponsor.entity_name):
            taken = (
                Sponsor.objects.filter(
                    company_id=sponsor.company_id,
                    entity_type=entity_type,
                    entity_name=entity_name,
                )
                .exclude(pk=sponsor.pk)
                .exists()
            )
            if taken:
                return MutationResult(False, "Bu firma için aynı sponsorluk zaten mevcut.")
        if patch:
            Sponsor.objects.filter(pk=sponsor_id).update(**patch)
    except DatabaseError:
        logger.exception("Error updating sponsor %s", sponsor_id)
        return MutationResult(False, "Sponsorluk güncellenirken bir hata oluştu.")
    return MutationResult(True, "Sponsorluk güncellendi.")


def delete_sponsor(sponsor_id) -> bool:
    try:
        deleted, _ = Sponsor.objects.filter(pk=sponsor_id).delete()
        return bool(deleted)
    except DatabaseError:
        logger.exception("Error deleting sponsor %s", sponsor_id)
        return False


def set_company_sponsorships(company_id: str, locations: list[dict]) -> MutationResult:
    """
    Firmanın etkin sponsorluk kümesini `locations` ({type, name}) ile değiştirir:
    eksikler bugünden başlayarak eklenir, listede olmayanlar silinir.
    """
    wanted = list(
        dict.fromkeys(
            (loc["type"], loc["name"].strip())
            for loc in locations
            if loc.get("name") and loc["name"].strip()
        )
    )
    try:
        company = UserProfile.objects.filter(pk=company_id).first()
        if company is None:
            return MutationResult.missing("Seçilen firma bulunamadı.")

        current = {
            (s.entity_type, s.entity_name): s.pk
            for s in Sponsor.objects.filter(company=company, is_active=True)
        }
        now = timezone.now()
        to_add = [
            Sponsor(
                company=company,
                entity_type=entity_type,
                entity_name=entity_name,
                start_date=now,
                is_active=True,
                created_at=now,
                **_company_fields(company),
            )
            for entity_type, entity_name in wanted
            if (entity_type, entity_name) not in current
        ]
        to_remove = [pk for key, pk in current.items() if key not in set(wanted)]

        with transaction.atomic():
            if to_remove:
                Sponsor.objects.filter(pk__in=to_remove).delete()
            if to_add:
                Sponsor.objects.bulk_create(to_add)
    except DatabaseError:
        logger.exception("Error replacing sponsorships for company %s", company_id)
        return MutationResult(False, "Sponsorluklar güncellenirken bir hata oluştu.")

    logger.info(
        "Company %s sponsorships replaced: +%s -%s", company_id, len(to_add), len(to_remove)
    )
    return MutationResult(True, "Sponsorluklar güncellendi.")


# ======================
# QUERIES
# ======================


def _company_ids_by_type(entity_type: str) -> set[str]:
    return set(
        Sponsor.objects.filter(is_active=True, entity_type=entity_type).values_list(
            "company_id", flat=True
        )
    )


def get_active_sponsor_company_ids() -> set[str]:
    try:
        return set(
            Sponsor.objects.filter(is_active=True).values_list("company_id", flat=True).distinct()
        )
    except DatabaseError:
        logger.exception("Error fetching active sponsor company ids")
        return set()


def get_sponsored_companies() -> dict[str, list[UserProfile]]:
    """
    Etkin sponsorluğu olan etkin firmalar. Ülke sponsorluğu olanlar `country`,
    diğerleri `city` grubunda; gruplar Türkçe alfabeye göre sıralıdır.
    """
    groups = {EntityType.COUNTRY.value: [], EntityType.CITY.value: []}
    try:
        companies = (
            UserProfile.objects.filter(
                role=UserRole.COMPANY, is_active=True, sponsors__is_active=True
            )
            .distinct()
            .order_by("sort_name", "pk")
        )
        country_ids = _company_ids_by_type(EntityType.COUNTRY)
        for company in companies:
            key = EntityType.COUNTRY if company.pk in country_ids else EntityType.CITY
            groups[key.value].append(company)
    except DatabaseError:
        logger.exception("Error fetching sponsored companies")
        return {EntityType.COUNTRY.value: [], EntityType.CITY.value: []}
    return groups