from __future__ import annotations

import logging

from django.conf import settings
from django.db import DatabaseError

from common.pagination import fetch_page
from common.results import Page, QueryError

from .filters import FreightFilter
from .models import Freight

logger = logging.getLogger(__name__)

SORT_ORDERS = {"newest": True, "oldest": False}
PROTECTED_FIELDS = {"id", "pk", "posted_at", "user", "user_id"}


def get_listings(
    filters: dict | None = None, page_size: int | None = None, cursor: str | None = None
) -> Page:
    filters = dict(filters or {})
    sort_by = filters.pop("sort_by", None) or "newest"
    if sort_by not in SORT_ORDERS:
        return Page(error=QueryError(message="Geçersiz sıralama seçeneği."))

    fs = FreightFilter(data=filters, queryset=Freight.objects.filter(is_active=True))
    if not fs.is_valid():
        errors = "; ".join(str(e) for errs in fs.form.errors.values() for e in errs)
        return Page(error=QueryError(message=f"Geçersiz filtre: {errors}"))

    return fetch_page(
        fs.qs,
        order_field="posted_at",
        descending=SORT_ORDERS[sort_by],
        page_size=settings.LISTING_PAGE_SIZE if page_size is None else page_size,
        cursor=cursor,
        label="ilanlar",
    )


def get_listing_by_id(listing_id) -> Freight | None:
    try:
        return Freight.objects.select_related("user").filter(pk=listing_id).first()
    except DatabaseError:
        logger.exception("Error fetching listing %s", listing_id)
        return None


def get_listings_by_user_id(user_id: str) -> list[Freight]:
    try:
        return list(Freight.objects.filter(user_id=user_id).order_by("-posted_at"))
    except DatabaseError:
        logger.exception("Error fetching listings for user %s", user_id)
        return []


def get_all_listings_for_admin() -> list[Freight]:
    try:
        return list(Freight.objects.select_related("user").order_by("-posted_at"))
    except DatabaseError:
        logger.exception("Error fetching listings for admin")
        return []


def add_listing(user_id: str, data: dict) -> Freight | None:
    payload = {k: v for k, v in data.items() if k not in PROTECTED_FIELDS}
    if payload.get("is_active") is None:
        payload["is_active"] = True
    try:
        listing = Freight.objects.create(user_id=user_id, **payload)
    except DatabaseError:
        logger.exception("Error adding listing for user %s", user_id)
        return None
    logger.info("Listing %s added by %s (%s)", listing.pk, user_id, listing.freight_type)
    return listing


def update_listing(listing_id, data: dict) -> bool:
    patch = {k: v for k, v in data.items() if k not in PROTECTED_FIELDS}
    try:
        qs = Freight.objects.filter(pk=listing_id)
        if not patch:
            return qs.exists()
        return bool(qs.update(**patch))
    except DatabaseError:
        logger.exception("Error updating listing %s", listing_id)
        return False


def delete_listing(listing_id) -> bool:
    try:
        deleted, _ = Freight.objects.filter(pk=listing_id).delete()
        return bool(deleted)
    except DatabaseError:
        logger.exception("Error deleting listing %s", listing_id)
        return False
