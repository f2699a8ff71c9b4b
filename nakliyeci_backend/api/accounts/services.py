"""
Kullanıcı profilleri ve yönetici hesapları için veri erişimi.

Fonksiyonlar veritabanı/Firebase hatalarını yakalar, loglar ve tek tip
sonuç döndürür (bool, nesne | None, MutationResult, Page).
"""
from __future__ import annotations

import logging

from django.conf import settings
from django.db import DatabaseError, transaction
from firebase_admin import auth as firebase_auth
from firebase_admin.exceptions import FirebaseError

from common.converters import coerce_datetime
from common.pagination import fetch_page
from common.results import MutationResult, Page, QueryError
from common.utils import key_contains, turkish_sort_key

from .filters import AdminUserFilter, CompanyFilter
from .models import AdminProfile, AdminRole, UserProfile, UserRole

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = {
    UserRole.COMPANY: (
        "email",
        "username",
        "company_title",
        "category",
        "contact_full_name",
        "mobile_phone",
        "address_city",
        "full_address",
    ),
    UserRole.INDIVIDUAL: ("email", "name"),
}

# güncellemede değiştirilemeyen alanlar
PROTECTED_FIELDS = {"id", "pk", "email", "role", "created_at", "password", "sort_name"}
CREATE_IGNORED = {"id", "pk", "created_at", "password", "sort_name"}


def _invalid_filter(form) -> QueryError:
    errors = "; ".join(str(e) for errs in form.errors.values() for e in errs)
    return QueryError(message=f"Geçersiz filtre: {errors}")


def _company_qs():
    return UserProfile.objects.filter(role=UserRole.COMPANY, is_active=True)


# ======================
# PROFILE
# ======================


def get_user_profile(uid: str) -> UserProfile | None:
    try:
        return UserProfile.objects.filter(pk=uid).first()
    except DatabaseError:
        logger.exception("Error fetching user profile %s", uid)
        return None


def create_user_profile(uid: str, data: dict) -> tuple[UserProfile | None, str | None]:
    payload = {k: v for k, v in data.items() if k not in CREATE_IGNORED}
    role = payload.pop("role", None) or UserRole.COMPANY
    if role not in UserRole.values:
        return None, "Geçersiz kullanıcı rolü."

    payload["email"] = (payload.get("email") or "").strip().lower()
    if role == UserRole.COMPANY:
        payload["company_title"] = payload.get("company_title") or payload.get("name", "")

    missing = [f for f in REQUIRED_FIELDS[role] if not payload.get(f)]
    if missing:
        return None, "Lütfen tüm zorunlu alanları doldurun."

    try:
        if UserProfile.objects.filter(pk=uid).exists():
            return None, "Bu kullanıcı için profil zaten mevcut."
        if UserProfile.objects.filter(email__iexact=payload["email"]).exists():
            return None, "Bu e-posta adresi zaten kayıtlı."
        username = payload.get("username")
        if username and UserProfile.objects.filter(username__iexact=username).exists():
            return None, "Bu kullanıcı adı zaten alınmış."

        profile = UserProfile(id=uid, role=role, **payload)
        profile.save(force_insert=True)
        logger.info("User profile created: %s (%s)", uid, role)
        return profile, None
    except DatabaseError as e:
        logger.exception("Error creating user profile %s", uid)
        return None, f"Profil kaydı başarısız: {e}"


def update_user_profile(uid: str, data: dict) -> MutationResult:
    patch = {k: v for k, v in data.items() if k not in PROTECTED_FIELDS}

    if "membership_end_date" in patch:
        raw = patch["membership_end_date"]
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            patch["membership_end_date"] = None
        else:
            parsed = coerce_datetime(raw, field="membership_end_date", record_id=uid)
            if parsed is None:
                logger.warning("Invalid membership_end_date for %s: %r, field not updated", uid, raw)
                patch.pop("membership_end_date")
            else:
                patch["membership_end_date"] = parsed

    try:
        profile = UserProfile.objects.filter(pk=uid).first()
        if profile is None:
            return MutationResult.missing("Kullanıcı bulunamadı.")
        username = patch.get("username")
        if (
            username
            and UserProfile.objects.filter(username__iexact=username).exclude(pk=uid).exists()
        ):
            return MutationResult(False, "Bu kullanıcı adı zaten alınmış.")
        if profile.is_company:
            # ad ⇄ ünvan eşitlenir
            if "name" in patch:
                patch["company_title"] = patch["name"]
            elif "company_title" in patch:
                patch["name"] = patch["company_title"]
        for field, value in patch.items():
            setattr(profile, field, value)
        profile.save()
        return MutationResult(True, "Profil güncellendi.")
    except DatabaseError:
        logger.exception("Error updating user profile %s", uid)
        return MutationResult(False, "Profil güncellenemedi.")


def delete_user_profile(uid: str) -> bool:
    try:
        deleted, _ = UserProfile.objects.filter(pk=uid).delete()
    except DatabaseError:
        logger.exception("Error deleting user profile %s", uid)
        return False
    if deleted:
        logger.info("User profile %s deleted", uid)
    return bool(deleted)


def get_all_user_profiles() -> list[UserProfile]:
    try:
        return list(UserProfile.objects.order_by("-created_at"))
    except DatabaseError:
        logger.exception("Error fetching all user profiles")
        return []


def get_active_company_profiles() -> list[UserProfile]:
    try:
        return list(_company_qs().order_by("sort_name", "pk"))
    except DatabaseError:
        logger.exception("Error fetching active company profiles")
        return []


def get_company_profiles_by_category(category: str) -> list[UserProfile]:
    try:
        return list(_company_qs().filter(category=category).order_by("sort_name", "pk"))
    except DatabaseError:
        logger.exception("Error fetching companies for category %s", category)
        return []


def search_company_profiles_by_name(term: str) -> list[UserProfile]:
    key = turkish_sort_key(term or "")
    if not key:
        return []
    try:
        candidates = _company_qs().filter(sort_name__contains=key).order_by("sort_name", "pk")
        return [p for p in candidates if key_contains(p.sort_name, key)]
    except DatabaseError:
        logger.exception("Error searching companies by name %r", term)
        return []


# ======================
# PAGINATED QUERIES
# ======================


def get_paginated_companies(
    filters: dict | None = None, page_size: int | None = None, cursor: str | None = None
) -> Page:
    fs = CompanyFilter(data=filters or {}, queryset=_company_qs())
    if not fs.is_valid():
        return Page(error=_invalid_filter(fs.form))
    return fetch_page(
        fs.qs,
        order_field="sort_name",
        descending=False,
        page_size=settings.COMPANY_PAGE_SIZE if page_size is None else page_size,
        cursor=cursor,
        label="firmalar",
    )


def get_paginated_admin_users(
    filters: dict | None = None, page_size: int | None = None, cursor: str | None = None
) -> Page:
    fs = AdminUserFilter(data=filters or {}, queryset=UserProfile.objects.all())
    if not fs.is_valid():
        return Page(error=_invalid_filter(fs.form))
    return fetch_page(
        fs.qs,
        order_field="created_at",
        descending=True,
        page_size=settings.ADMIN_USERS_PAGE_SIZE if page_size is None else page_size,
        cursor=cursor,
        label="kullanıcılar",
    )


# ======================
# STATUS MUTATORS
# ======================


def set_user_active(uid: str, is_active: bool) -> MutationResult:
    try:
        updated = UserProfile.objects.filter(pk=uid).update(is_active=bool(is_active))
    except DatabaseError:
        logger.exception("Error setting is_active for %s", uid)
        return MutationResult(False, "Kullanıcı durumu güncellenemedi.")
    if not updated:
        return MutationResult.missing("Kullanıcı bulunamadı.")
    msg = "Kullanıcı aktifleştirildi." if is_active else "Kullanıcı pasifleştirildi."
    return MutationResult(True, msg)


def change_user_role(uid: str, role: str) -> MutationResult:
    if role not in UserRole.values:
        return MutationResult(False, "Geçersiz kullanıcı rolü.")
    try:
        updated = UserProfile.objects.filter(pk=uid).update(role=role)
    except DatabaseError:
        logger.exception("Error changing role for %s", uid)
        return MutationResult(False, "Kullanıcı rolü güncellenemedi.")
    if not updated:
        return MutationResult.missing("Kullanıcı bulunamadı.")
    return MutationResult(True, "Kullanıcı rolü güncellendi.")


def change_user_password_by_admin(uid: str, new_password: str) -> MutationResult:
    if not new_password or len(new_password) < 6:
        return MutationResult(False, "Şifre en az 6 karakter olmalıdır.")
    try:
        firebase_auth.update_user(uid, password=new_password)
    except firebase_auth.UserNotFoundError:
        return MutationResult.missing("Kullanıcı kimlik sisteminde bulunamadı.")
    except (ValueError, FirebaseError):
        logger.exception("Error changing password for %s", uid)
        return MutationResult(False, "Şifre değiştirilemedi.")
    logger.info("Password changed by admin for %s", uid)
    return MutationResult(True, "Şifre başarıyla güncellendi.")


# ======================
# ADMINS
# ======================


def get_all_admins() -> list[AdminProfile]:
    try:
        return list(AdminProfile.objects.order_by("username"))
    except DatabaseError:
        logger.exception("Error fetching admins")
        return []


def add_admin(data: dict) -> tuple[AdminProfile | None, str | None]:
    username = (data.get("username") or "").strip()
    password = data.get("password") or ""
    if not username:
        return None, "Kullanıcı adı zorunludur."
    if not password:
        return None, "Şifre zorunludur."
    role = data.get("role") or AdminRole.ADMIN
    if role not in AdminRole.values:
        return None, "Geçersiz yönetici rolü."
    try:
        if AdminProfile.objects.filter(username__iexact=username).exists():
            return None, "Bu kullanıcı adı zaten kullanılıyor."
        admin = AdminProfile(
            username=username,
            name=data.get("name") or "",
            role=role,
            is_active=data.get("is_active", True),
        )
        admin.set_password(password)
        admin.save(force_insert=True)
        logger.info("Admin created: %s (%s)", username, role)
        return admin, None
    except DatabaseError:
        logger.exception("Error adding admin %s", username)
        return None, "Yönetici eklenirken bir hata oluştu."


def update_admin(admin_id, data: dict) -> MutationResult:
    try:
        admin = AdminProfile.objects.filter(pk=admin_id).first()
        if admin is None:
            return MutationResult.missing("Yönetici bulunamadı.")
        if "role" in data:
            if data["role"] not in AdminRole.values:
                return MutationResult(False, "Geçersiz yönetici rolü.")
            admin.role = data["role"]
        if "is_active" in data:
            admin.is_active = bool(data["is_active"])
        if "name" in data:
            admin.name = data["name"] or ""
        if data.get("password"):
            admin.set_password(data["password"])
        admin.save()
    except DatabaseError:
        logger.exception("Error updating admin %s", admin_id)
        return MutationResult(False, "Yönetici güncellenemedi.")
    return MutationResult(True, "Yönetici güncellendi.")


def delete_admin(admin_id) -> bool:
    try:
        deleted, _ = AdminProfile.objects.filter(pk=admin_id).delete()
        return bool(deleted)
    except DatabaseError:
        logger.exception("Error deleting admin %s", admin_id)
        return False


def authenticate_admin(username: str, password: str) -> AdminProfile | None:
    try:
        admin = AdminProfile.objects.filter(username__iexact=(username or "").strip()).first()
    except DatabaseError:
        logger.exception("Error loading admin %s", username)
        return None
    if admin is None or not admin.is_active or not admin.check_password(password or ""):
        logger.warning("Admin login failed for %r", username)
        return None
    return admin


@transaction.atomic
def bootstrap_admin(username: str, password: str) -> tuple[AdminProfile, bool]:
    admin = AdminProfile.objects.select_for_update().filter(username__iexact=username).first()
    if admin is not None:
        return admin, False
    admin = AdminProfile(username=username, name=username, role=AdminRole.SUPER_ADMIN)
    admin.set_password(password)
    admin.save(force_insert=True)
    return admin, True
