import logging
from datetime import timedelta

from django.conf import settings
from firebase_admin import auth as firebase_auth
from firebase_admin.exceptions import FirebaseError
from rest_framework import authentication, exceptions
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

from .models import AdminProfile

logger = logging.getLogger(__name__)


class FirebaseUser:
    """Firebase ID token'ı doğrulanmış son kullanıcı."""

    is_authenticated = True
    is_admin = False

    def __init__(self, uid: str, claims: dict):
        self.uid = uid
        self.claims = claims
        self.email = claims.get("email", "")

    @property
    def pk(self):
        return self.uid

    def __str__(self):
        return self.uid


class AdminPrincipal:
    is_authenticated = True
    is_admin = True

    def __init__(self, admin: AdminProfile):
        self.admin = admin

    @property
    def pk(self):
        return self.admin.pk

    @property
    def role(self) -> str:
        return self.admin.role

    @property
    def display_name(self) -> str:
        return self.admin.name or self.admin.username

    def __str__(self):
        return self.admin.username


def _bearer(request) -> str | None:
    header = authentication.get_authorization_header(request).split()
    if not header or header[0].lower() != b"bearer":
        return None
    if len(header) != 2:
        raise exceptions.AuthenticationFailed("Geçersiz Authorization başlığı.")
    try:
        return header[1].decode()
    except UnicodeError:
        raise exceptions.AuthenticationFailed("Geçersiz Authorization başlığı.")


def issue_admin_token(admin: AdminProfile) -> dict:
    token = AccessToken()
    token.set_exp(lifetime=timedelta(minutes=settings.ADMIN_TOKEN_LIFETIME_MIN))
    token["admin_id"] = str(admin.pk)
    token["admin_role"] = admin.role
    return {"access": str(token), "expires_at": token["exp"]}


class AdminTokenAuthentication(authentication.BaseAuthentication):
    """
    Yönetici oturumu: sunucunun imzaladığı, süreli token.
    Token bir yönetici token'ı değilse None döner ve sıradaki sınıf denenir.
    """

    def authenticate(self, request):
        raw = _bearer(request)
        if raw is None:
            return None
        try:
            token = AccessToken(raw)
        except TokenError:
            return None

        admin_id = token.get("admin_id")
        if not admin_id:
            return None

        admin = AdminProfile.objects.filter(pk=admin_id).first()
        if admin is None or not admin.is_active:
            raise exceptions.AuthenticationFailed("Yönetici oturumu geçersiz.")
        return AdminPrincipal(admin), token

    def authenticate_header(self, request):
        return "Bearer"


class FirebaseAuthentication(authentication.BaseAuthentication):
    def authenticate(self, request):
        raw = _bearer(request)
        if raw is None:
            return None
        try:
            claims = firebase_auth.verify_id_token(raw)
        except (ValueError, FirebaseError) as e:
            logger.warning("Firebase token rejected: %s", e)
            raise exceptions.AuthenticationFailed("Geçersiz kimlik doğrulama anahtarı.")
        return FirebaseUser(claims["uid"], claims), raw

    def authenticate_header(self, request):
        return "Bearer"
