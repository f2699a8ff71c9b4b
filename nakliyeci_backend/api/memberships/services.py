from __future__ import annotations

import logging

from django.db import DatabaseError
from django.utils import timezone

from common.results import MutationResult

from .models import MembershipRequest, RequestStatus

logger = logging.getLogger(__name__)

PROTECTED_FIELDS = {"id", "pk", "created_at", "status"}


def add_membership_request(
    data: dict, user_id: str | None = None
) -> tuple[MembershipRequest | None, str | None]:
    payload = {k: v for k, v in data.items() if k not in PROTECTED_FIELDS}
    try:
        request = MembershipRequest.objects.create(
            **payload,
            user_id=user_id,
            status=RequestStatus.NEW,
            created_at=timezone.now(),
        )
    except DatabaseError:
        logger.exception("Error adding membership request")
        return None, "Talep oluşturulurken bir hata oluştu."
    logger.info("Membership request %s created", request.pk)
    return request, None


def get_all_membership_requests() -> list[MembershipRequest]:
    try:
        return list(MembershipRequest.objects.order_by("-created_at"))
    except DatabaseError:
        logger.exception("Error fetching membership requests")
        return []


def update_membership_request_status(request_id, status: str) -> MutationResult:
    if status not in RequestStatus.values:
        return MutationResult(False, "Geçersiz talep durumu.")
    try:
        updated = MembershipRequest.objects.filter(pk=request_id).update(status=status)
    except DatabaseError:
        logger.exception("Error updating membership request %s", request_id)
        return MutationResult(False, "Durum güncellenemedi.")
    if not updated:
        return MutationResult.missing("Talep bulunamadı.")
    return MutationResult(True, "Talep durumu güncellendi.")


def delete_membership_request(request_id) -> bool:
    try:
        deleted, _ = MembershipRequest.objects.filter(pk=request_id).delete()
        return bool(deleted)
    except DatabaseError:
        logger.exception("Error deleting membership request %s", request_id)
        return False
