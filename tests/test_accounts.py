"""
Profil, firma listeleri ve yönetici oturumu testleri.
"""
from datetime import timedelta
from unittest.mock import patch

import pytest
from django.utils import timezone
from firebase_admin import auth as firebase_auth

from api.accounts import services
from api.accounts.models import AdminRole, MembershipStatus, UserProfile, UserRole

COMPANY_PAYLOAD = {
    "role": "company",
    "username": "anadolu",
    "company_title": "Anadolu Lojistik",
    "category": "Lojistik",
    "contact_full_name": "Ayşe Kaya",
    "mobile_phone": "05551112233",
    "address_city": "Ankara",
    "full_address": "Çankaya",
}


@pytest.mark.django_db
class TestProfileServices:
    def test_create_company_profile(self):
        profile, error = services.create_user_profile("u1", {**COMPANY_PAYLOAD, "email": "A@Example.com"})
        assert error is None
        assert profile.email == "a@example.com"
        assert profile.name == "Anadolu Lojistik"
        assert profile.is_active is True

    def test_missing_required_fields(self):
        profile, error = services.create_user_profile("u1", {"role": "company", "email": "a@b.com"})
        assert profile is None
        assert error == "Lütfen tüm zorunlu alanları doldurun."

    def test_email_conflict(self, make_company):
        make_company("u1", "Bir", email="ortak@example.com")
        _, error = services.create_user_profile(
            "u2", {**COMPANY_PAYLOAD, "email": "ORTAK@example.com"}
        )
        assert error == "Bu e-posta adresi zaten kayıtlı."

    def test_username_conflict(self, make_company):
        make_company("u1", "Bir", username="anadolu")
        _, error = services.create_user_profile("u2", {**COMPANY_PAYLOAD, "email": "x@y.com"})
        assert error == "Bu kullanıcı adı zaten alınmış."

    def test_individual_profile(self):
        profile, error = services.create_user_profile(
            "u3", {"role": "individual", "email": "b@c.com", "name": "Mehmet"}
        )
        assert error is None
        assert profile.role == UserRole.INDIVIDUAL
        assert profile.display_name == "Mehmet"

    def test_update_keeps_name_and_title_in_sync(self, company):
        assert services.update_user_profile(company.pk, {"name": "Yeni Ünvan", "email": "x@x.com"}).success
        company.refresh_from_db()
        assert company.company_title == "Yeni Ünvan"
        assert company.email == "co1@example.com"

    def test_invalid_membership_date_is_ignored(self, company):
        assert services.update_user_profile(
            company.pk, {"membership_end_date": "yarın", "membership_status": "Premium"}
        ).success
        company.refresh_from_db()
        assert company.membership_end_date is None
        assert company.membership_status == MembershipStatus.PREMIUM

    def test_update_missing(self, db):
        assert services.update_user_profile("yok", {"name": "x"}).not_found

    def test_update_rejects_taken_username(self, company, make_company):
        make_company("co2", "Diğer Lojistik")
        result = services.update_user_profile(company.pk, {"username": "CO2"})
        assert not result.success
        assert result.message == "Bu kullanıcı adı zaten alınmış."
        company.refresh_from_db()
        assert company.username == "co1"
        assert services.update_user_profile(company.pk, {"username": "CO1"}).success

    def test_active_companies_in_turkish_order(self, make_company):
        make_company("a", "Zeytin Nakliyat")
        make_company("b", "Çağrı Lojistik")
        make_company("c", "Cem Taşımacılık")
        make_company("d", "Pasif Firma", is_active=False)
        names = [c.company_title for c in services.get_active_company_profiles()]
        assert names == ["Cem Taşımacılık", "Çağrı Lojistik", "Zeytin Nakliyat"]

    def test_search_by_name(self, make_company):
        make_company("a", "Öztürk Nakliyat")
        make_company("b", "Demir Lojistik")
        results = services.search_company_profiles_by_name("öztürk")
        assert [c.pk for c in results] == ["a"]
        assert services.search_company_profiles_by_name("") == []

    def test_search_matches_whole_letters_only(self, make_company):
        make_company("a", "Bc Nakliyat")
        make_company("b", "Işık Lojistik")
        assert [c.pk for c in services.search_company_profiles_by_name("ı")] == ["b"]

    def test_paginated_companies_city_filter(self, make_company):
        make_company("a", "Bir", city="İzmir")
        make_company("b", "İki", city="Ankara")
        page = services.get_paginated_companies({"city": "İzmir"}, page_size=10)
        assert page.error is None
        assert [c.pk for c in page.items] == ["a"]


@pytest.mark.django_db
class TestStatusMutators:
    def test_set_active(self, company):
        result = services.set_user_active(company.pk, False)
        assert result.success
        company.refresh_from_db()
        assert company.is_active is False

    def test_set_active_missing(self, db):
        result = services.set_user_active("yok", True)
        assert result.not_found

    def test_change_role_invalid(self, company):
        result = services.change_user_role(company.pk, "kral")
        assert not result.success
        assert not result.not_found

    def test_password_too_short(self, company):
        assert services.change_user_password_by_admin(company.pk, "123").success is False

    def test_password_change_calls_firebase(self, company):
        with patch("api.accounts.services.firebase_auth.update_user") as update_user:
            result = services.change_user_password_by_admin(company.pk, "yenisifre")
        assert result.success
        update_user.assert_called_once_with(company.pk, password="yenisifre")

    def test_password_change_unknown_firebase_user(self, company):
        error = firebase_auth.UserNotFoundError("yok")
        with patch("api.accounts.services.firebase_auth.update_user", side_effect=error):
            result = services.change_user_password_by_admin(company.pk, "yenisifre")
        assert result.not_found


@pytest.mark.django_db
class TestProfileEndpoints:
    def test_profile_requires_login(self, api_client):
        response = api_client.get("/api/profile/")
        assert response.status_code == 401

    def test_create_and_read_profile(self, user_client):
        client = user_client("u1", "u1@example.com")
        response = client.post("/api/profile/", COMPANY_PAYLOAD, format="json")
        assert response.status_code == 201, response.data
        assert response.data["email"] == "u1@example.com"
        assert response.data["is_active"] is True

        response = client.get("/api/profile/")
        assert response.status_code == 200
        assert response.data["company_title"] == "Anadolu Lojistik"

    def test_user_cannot_activate_self(self, user_client, make_company):
        make_company("u1", "Bekleyen", is_active=False)
        client = user_client("u1")
        response = client.patch("/api/profile/", {"is_active": True, "website": "x.com"}, format="json")
        assert response.status_code == 200
        assert UserProfile.objects.get(pk="u1").is_active is False

    def test_unknown_token_rejected(self, firebase_tokens, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer sahte")
        response = api_client.get("/api/profile/")
        assert response.status_code == 401


@pytest.mark.django_db
class TestCompanyEndpoints:
    def test_public_list_paginates(self, api_client, make_company):
        for i, name in enumerate(["Ak", "Be", "Ce"]):
            make_company(f"c{i}", name)
        response = api_client.get("/api/companies/", {"page_size": 2})
        assert response.status_code == 200
        assert [c["name"] for c in response.data["results"]] == ["Ak", "Be"]
        assert response.data["cursor"]

        response = api_client.get("/api/companies/", {"page_size": 2, "cursor": response.data["cursor"]})
        assert [c["name"] for c in response.data["results"]] == ["Ce"]
        assert response.data["cursor"] is None

    def test_bad_page_size(self, api_client, db):
        response = api_client.get("/api/companies/", {"page_size": "0"})
        assert response.status_code == 400

    def test_category_by_slug(self, api_client, make_company):
        make_company("a", "Gümrükçü", category="Gümrük Müşaviri")
        response = api_client.get("/api/companies/category/gumruk-musaviri/")
        assert response.status_code == 200
        assert response.data["category"] == "Gümrük Müşaviri"
        assert len(response.data["results"]) == 1

    def test_unknown_category(self, api_client, db):
        assert api_client.get("/api/companies/category/uzay/").status_code == 404

    def test_inactive_company_hidden(self, api_client, make_company):
        make_company("a", "Pasif", is_active=False)
        assert api_client.get("/api/companies/a/").status_code == 404


@pytest.mark.django_db
class TestAdminSession:
    def test_login_returns_token(self, api_client, admin):
        response = api_client.post(
            "/api/admin/login/", {"username": "YONETICI", "password": "gizli123"}, format="json"
        )
        assert response.status_code == 200
        assert response.data["access"]
        assert response.data["admin"]["username"] == "yonetici"

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['access']}")
        me = api_client.get("/api/admin/me/")
        assert me.status_code == 200
        assert me.data["role"] == AdminRole.ADMIN

    def test_wrong_password(self, api_client, admin):
        response = api_client.post(
            "/api/admin/login/", {"username": "yonetici", "password": "yanlis"}, format="json"
        )
        assert response.status_code == 401

    def test_inactive_admin_cannot_login(self, api_client, make_admin):
        make_admin(username="eski", is_active=False)
        response = api_client.post(
            "/api/admin/login/", {"username": "eski", "password": "gizli123"}, format="json"
        )
        assert response.status_code == 401

    def test_deactivated_admin_token_rejected(self, admin_client, admin):
        admin.is_active = False
        admin.save()
        assert admin_client.get("/api/admin/me/").status_code == 401

    def test_firebase_user_is_not_admin(self, user_client, company):
        assert user_client("co1").get("/api/admin/users/").status_code == 403


@pytest.mark.django_db
class TestAdminUserEndpoints:
    def test_pending_filter(self, admin_client, make_company):
        make_company("a", "Onaylı")
        make_company("b", "Bekleyen", is_active=False)
        response = admin_client.get("/api/admin/users/", {"pending": "true"})
        assert response.status_code == 200
        assert [u["id"] for u in response.data["results"]] == ["b"]

    def test_approve_user(self, admin_client, make_company):
        make_company("b", "Bekleyen", is_active=False)
        response = admin_client.post("/api/admin/users/b/active/", {"is_active": True}, format="json")
        assert response.status_code == 200
        assert response.data["success"] is True
        assert UserProfile.objects.get(pk="b").is_active

    def test_missing_user_is_404(self, admin_client):
        response = admin_client.post("/api/admin/users/yok/role/", {"role": "company"}, format="json")
        assert response.status_code == 404

    def test_delete_user(self, admin_client, company):
        assert admin_client.delete(f"/api/admin/users/{company.pk}/").status_code == 204
        assert not UserProfile.objects.filter(pk=company.pk).exists()

    def test_membership_days_filter(self, admin_client, make_company):
        soon = timezone.now() + timedelta(days=10)
        make_company("a", "Yakında Bitecek", membership_status="Premium", membership_end_date=soon)
        make_company("b", "Üyeliksiz")
        response = admin_client.get("/api/admin/users/", {"membership": "30"})
        assert [u["id"] for u in response.data["results"]] == ["a"]
        assert response.data["error"] is None

    def test_membership_days_out_of_range(self, admin_client, company):
        response = admin_client.get("/api/admin/users/", {"membership": "9999999999"})
        assert response.status_code == 200
        assert response.data["results"] == []
        assert "Geçersiz üyelik filtresi." in response.data["error"]["message"]

    def test_patch_rejects_taken_username(self, admin_client, company, make_company):
        make_company("co2", "Diğer Lojistik")
        response = admin_client.patch(
            f"/api/admin/users/{company.pk}/", {"username": "co2"}, format="json"
        )
        assert response.status_code == 400
        assert response.data["detail"] == "Bu kullanıcı adı zaten alınmış."


@pytest.mark.django_db
class TestAdminManagement:
    def test_only_super_admin_creates_admins(self, admin_client, super_admin_client):
        payload = {"username": "yeni", "password": "sifre123"}
        assert admin_client.post("/api/admin/admins/", payload, format="json").status_code == 403
        response = super_admin_client.post("/api/admin/admins/", payload, format="json")
        assert response.status_code == 201
        assert response.data["role"] == AdminRole.ADMIN

    def test_duplicate_username(self, super_admin_client, admin):
        response = super_admin_client.post(
            "/api/admin/admins/", {"username": "Yonetici", "password": "sifre123"}, format="json"
        )
        assert response.status_code == 400
        assert response.data["detail"] == "Bu kullanıcı adı zaten kullanılıyor."

    def test_cannot_delete_self(self, super_admin_client, super_admin):
        response = super_admin_client.delete(f"/api/admin/admins/{super_admin.pk}/")
        assert response.status_code == 400

    def test_bootstrap_is_idempotent(self, db):
        admin, created = services.bootstrap_admin("kurucu", "sifre123")
        assert created and admin.is_super_admin
        again, created = services.bootstrap_admin("KURUCU", "baska")
        assert not created
        assert again.pk == admin.pk
