from __future__ import annotations

import logging

from django.db import DatabaseError, transaction
from django.utils import timezone

from api.accounts.models import UserProfile
from common.results import MutationResult

from .models import CompanyNote, ConversionMarker, ConversionStatus, DirectoryContact, NoteType

logger = logging.getLogger(__name__)

NOTE_PROTECTED_FIELDS = {"id", "pk", "created_at", "author", "user", "user_id", "contact", "contact_id"}
CONTACT_PROTECTED_FIELDS = {"id", "pk", "created_at"}


def _owner(company_id=None, contact_id=None) -> dict:
    if bool(company_id) == bool(contact_id):
        raise ValueError("Not sahibi olarak firma ya da rehber kaydından yalnızca biri verilmelidir.")
    return {"user_id": company_id} if company_id else {"contact_id": contact_id}


# ======================
# NOTES
# ======================


def get_notes(*, company_id=None, contact_id=None, note_type: str | None = None) -> list[CompanyNote]:
    owner = _owner(company_id, contact_id)
    try:
        qs = CompanyNote.objects.filter(**owner)
        if note_type:
            qs = qs.filter(type=note_type)
        return list(qs.order_by("-created_at"))
    except DatabaseError:
        logger.exception("Error fetching notes for %s", owner)
        return []


def add_note(data: dict, *, company_id=None, contact_id=None) -> CompanyNote | None:
    owner = _owner(company_id, contact_id)
    payload = {k: v for k, v in data.items() if k not in NOTE_PROTECTED_FIELDS}
    payload["type"] = payload.get("type") or NoteType.NOTE
    try:
        note = CompanyNote.objects.create(
            **owner,
            author=data.get("author") or "Admin",
            created_at=timezone.now(),
            **payload,
        )
    except DatabaseError:
        logger.exception("Error adding note for %s", owner)
        return None
    return note


def update_note(note_id, data: dict, *, company_id=None, contact_id=None) -> bool:
    """Yazar ve oluşturulma zamanı değiştirilemez."""
    owner = _owner(company_id, contact_id)
    patch = {k: v for k, v in data.items() if k not in NOTE_PROTECTED_FIELDS}
    try:
        qs = CompanyNote.objects.filter(pk=note_id, **owner)
        if not patch:
            return qs.exists()
        return bool(qs.update(**patch))
    except DatabaseError:
        logger.exception("Error updating note %s for %s", note_id, owner)
        return False


def delete_note(note_id, *, company_id=None, contact_id=None) -> bool:
    owner = _owner(company_id, contact_id)
    try:
        deleted, _ = CompanyNote.objects.filter(pk=note_id, **owner).delete()
        return bool(deleted)
    except DatabaseError:
        logger.exception("Error deleting note %s for %s", note_id, owner)
        return False


# ======================
# DIRECTORY CONTACTS
# ======================


def get_all_directory_contacts() -> list[DirectoryContact]:
    try:
        return list(DirectoryContact.objects.order_by("-created_at"))
    except DatabaseError:
        logger.exception("Error fetching directory contacts")
        return []


def get_directory_contact(contact_id) -> DirectoryContact | None:
    try:
        return DirectoryContact.objects.filter(pk=contact_id).first()
    except DatabaseError:
        logger.exception("Error fetching directory contact %s", contact_id)
        return None


def add_directory_contact(data: dict) -> DirectoryContact | None:
    payload = {k: v for k, v in data.items() if k not in CONTACT_PROTECTED_FIELDS}
    try:
        return DirectoryContact.objects.create(created_at=timezone.now(), **payload)
    except DatabaseError:
        logger.exception("Error adding directory contact")
        return None


def update_directory_contact(contact_id, data: dict) -> bool:
    patch = {k: v for k, v in data.items() if k not in CONTACT_PROTECTED_FIELDS}
    try:
        qs = DirectoryContact.objects.filter(pk=contact_id)
        if not patch:
            return qs.exists()
        return bool(qs.update(**patch))
    except DatabaseError:
        logger.exception("Error updating directory contact %s", contact_id)
        return False


def delete_directory_contact(contact_id) -> bool:
    try:
        deleted, _ = DirectoryContact.objects.filter(pk=contact_id).delete()
        return bool(deleted)
    except DatabaseError:
        logger.exception("Error deleting directory contact %s", contact_id)
        return False


# ======================
# CONTACT → COMPANY
# ======================


def _note_copies(notes, company_id: str) -> list[CompanyNote]:
    return [
        CompanyNote(
            user_id=company_id,
            title=n.title,
            content=n.content,
            author=n.author,
            type=n.type,
            created_at=n.created_at,
        )
        for n in notes
    ]


def _copy_notes(marker: ConversionMarker) -> None:
    notes = list(CompanyNote.objects.filter(contact_id=marker.contact_id).order_by("created_at"))
    with transaction.atomic():
        CompanyNote.objects.bulk_create(_note_copies(notes, marker.company_id))
        marker.status = ConversionStatus.COPIED
        marker.note_count = len(notes)
        marker.copied_note_ids = [str(n.pk) for n in notes]
        marker.save(update_fields=["status", "note_count", "copied_note_ids", "updated_at"])


def _remove_contact(marker: ConversionMarker) -> None:
    # kopyalamadan sonra rehber kaydına eklenen notlar silinmeden önce taşınır
    with transaction.atomic():
        late = list(
            CompanyNote.objects.filter(contact_id=marker.contact_id)
            .exclude(pk__in=marker.copied_note_ids)
            .order_by("created_at")
        )
        if late:
            CompanyNote.objects.bulk_create(_note_copies(late, marker.company_id))
            marker.note_count += len(late)
            marker.copied_note_ids += [str(n.pk) for n in late]
        CompanyNote.objects.filter(contact_id=marker.contact_id).delete()
        DirectoryContact.objects.filter(pk=marker.contact_id).delete()
        marker.status = ConversionStatus.DONE
        marker.save(update_fields=["status", "note_count", "copied_note_ids", "updated_at"])


def convert_contact_to_company(contact_id, company_id: str) -> MutationResult:
    """
    Rehber kaydının notlarını firmaya taşır ve rehber kaydını siler.

    İki aşamalıdır: notlar tek bir atomik blokta kopyalanır (işaretçi
    `copied`), ardından ikinci blokta kaynak notlar ve rehber kaydı silinir
    (işaretçi `done`). Aşamalar arasında kesilen bir dönüşüm
    `resume_pending_conversions` ile tamamlanır.
    """
    try:
        contact = DirectoryContact.objects.filter(pk=contact_id).first()
        if contact is None:
            return MutationResult.missing("Rehber kaydı bulunamadı.")
        company = UserProfile.objects.filter(pk=company_id).first()
        if company is None:
            return MutationResult.missing("Seçilen firma bulunamadı.")

        marker = (
            ConversionMarker.objects.filter(contact_id=str(contact.pk), company=company)
            .exclude(status=ConversionStatus.DONE)
            .order_by("-created_at")
            .first()
        )
        if marker is None:
            marker = ConversionMarker.objects.create(contact_id=str(contact.pk), company=company)
    except DatabaseError:
        logger.exception("Error starting conversion of contact %s", contact_id)
        return MutationResult(False, "Dönüştürme başlatılamadı.")

    if marker.status == ConversionStatus.COPYING:
        try:
            _copy_notes(marker)
        except DatabaseError:
            logger.exception("Conversion %s: copying notes failed", marker.pk)
            return MutationResult(False, "Notlar firmaya kopyalanırken bir hata oluştu.")

    try:
        _remove_contact(marker)
    except DatabaseError:
        logger.exception("Conversion %s: removing contact failed", marker.pk)
        return MutationResult(
            False, "Notlar kopyalandı ancak rehber kaydı silinemedi; işlem daha sonra tamamlanacak."
        )

    logger.info(
        "Contact %s converted to company %s (%s notes)", contact_id, company_id, marker.note_count
    )
    return MutationResult(
        True, f"Rehber kaydı firmaya dönüştürüldü, {marker.note_count} not taşındı."
    )


def resume_pending_conversions() -> int:
    """`copied` durumunda kalmış dönüşümlerin silme aşamasını tamamlar."""
    finished = 0
    pending = ConversionMarker.objects.filter(status=ConversionStatus.COPIED).order_by("created_at")
    for marker in pending:
        try:
            _remove_contact(marker)
        except DatabaseError:
            logger.exception("Conversion %s: resume failed", marker.pk)
            continue
        finished += 1
    if finished:
        logger.info("Resumed %s pending conversions", finished)
    return finished
