from __future__ import annotations

import logging

from django.conf import settings
from django.db import DatabaseError
from django.utils import timezone

from common.pagination import fetch_page
from common.results import Page, QueryError

from .filters import TransportOfferFilter
from .models import TransportOffer

logger = logging.getLogger(__name__)

PROTECTED_FIELDS = {"id", "pk", "posted_at", "user", "user_id", "company_name"}


def add_transport_offer(user_id: str, company_name: str | None, data: dict) -> TransportOffer | None:
    payload = {k: v for k, v in data.items() if k not in PROTECTED_FIELDS}
    if payload.get("is_active") is None:
        payload["is_active"] = True
    try:
        offer = TransportOffer.objects.create(
            user_id=user_id,
            company_name=company_name or "Bilinmiyor",
            posted_at=timezone.now(),
            **payload,
        )
    except DatabaseError:
        logger.exception("Error adding transport offer for user %s", user_id)
        return None
    logger.info("Transport offer %s added by %s", offer.pk, user_id)
    return offer


def get_transport_offer_by_id(offer_id) -> TransportOffer | None:
    try:
        return TransportOffer.objects.filter(pk=offer_id).first()
    except DatabaseError:
        logger.exception("Error fetching transport offer %s", offer_id)
        return None


def update_transport_offer(offer_id, data: dict) -> bool:
    """Teklifi günceller; her güncelleme `posted_at` alanını yeniler."""
    patch = {k: v for k, v in data.items() if k not in PROTECTED_FIELDS}
    patch["posted_at"] = timezone.now()
    try:
        return bool(TransportOffer.objects.filter(pk=offer_id).update(**patch))
    except DatabaseError:
        logger.exception("Error updating transport offer %s", offer_id)
        return False


def delete_transport_offer(offer_id) -> bool:
    try:
        deleted, _ = TransportOffer.objects.filter(pk=offer_id).delete()
        return bool(deleted)
    except DatabaseError:
        logger.exception("Error deleting transport offer %s", offer_id)
        return False


def get_transport_offers_by_user_id(user_id: str) -> tuple[list[TransportOffer], QueryError | None]:
    try:
        offers = list(TransportOffer.objects.filter(user_id=user_id).order_by("-posted_at"))
    except DatabaseError as e:
        logger.exception("Error fetching transport offers for user %s", user_id)
        return [], QueryError.from_exception(e, "Teklifler yüklenirken bir hata oluştu.")
    return offers, None


def get_active_transport_offers(
    filters: dict | None = None, page_size: int | None = None, cursor: str | None = None
) -> Page:
    fs = TransportOfferFilter(
        data=dict(filters or {}), queryset=TransportOffer.objects.filter(is_active=True)
    )
    if not fs.is_valid():
        errors = "; ".join(str(e) for errs in fs.form.errors.values() for e in errs)
        return Page(error=QueryError(message=f"Geçersiz filtre: {errors}"))

    return fetch_page(
        fs.qs,
        order_field="posted_at",
        descending=True,
        page_size=settings.OFFER_PAGE_SIZE if page_size is None else page_size,
        cursor=cursor,
        label="teklifler",
    )
