"""
Pytest yapılandırması ve ortak fixture'lar.

Firebase kimlik doğrulaması `verify_id_token` yamalanarak taklit edilir;
yönetici istemcileri sunucunun imzaladığı gerçek token'ları kullanır.
"""
from unittest.mock import patch

import pytest
from rest_framework.test import APIClient

from api.accounts.authentication import issue_admin_token
from api.accounts.models import AdminProfile, AdminRole, UserProfile, UserRole


@pytest.fixture
def api_client():
    """Kimliksiz istemci."""
    return APIClient()


@pytest.fixture
def make_company(db):
    def _make(uid, title, city="İstanbul", **extra):
        fields = {
            "email": f"{uid}@example.com",
            "username": uid,
            "company_title": title,
            "contact_full_name": "Ali Veli",
            "mobile_phone": "05550000000",
            "address_city": city,
            "full_address": "Merkez Mah. No:1",
        }
        fields.update(extra)
        return UserProfile.objects.create(id=uid, role=UserRole.COMPANY, **fields)

    return _make


@pytest.fixture
def company(make_company):
    return make_company("co1", "Anadolu Lojistik")


@pytest.fixture
def make_admin(db):
    def _make(username="yonetici", password="gizli123", role=AdminRole.ADMIN, **extra):
        admin = AdminProfile(username=username, name=username, role=role, **extra)
        admin.set_password(password)
        admin.save()
        return admin

    return _make


@pytest.fixture
def admin(make_admin):
    return make_admin()


@pytest.fixture
def super_admin(make_admin):
    return make_admin(username="patron", role=AdminRole.SUPER_ADMIN)


def _admin_client(admin):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_admin_token(admin)['access']}")
    return client


@pytest.fixture
def admin_client(admin):
    return _admin_client(admin)


@pytest.fixture
def super_admin_client(super_admin):
    return _admin_client(super_admin)


@pytest.fixture
def firebase_tokens():
    """token → claims eşlemesi; bilinmeyen token reddedilir."""
    tokens = {}

    def verify(raw):
        if raw not in tokens:
            raise ValueError("invalid id token")
        return tokens[raw]

    with patch(
        "api.accounts.authentication.firebase_auth.verify_id_token", side_effect=verify
    ):
        yield tokens


@pytest.fixture
def user_client(firebase_tokens):
    def _client(uid, email=None):
        raw = f"token-{uid}"
        firebase_tokens[raw] = {"uid": uid, "email": email or f"{uid}@example.com"}
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {raw}")
        return client

    return _client
