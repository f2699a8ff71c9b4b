"""
Yük / boş araç ilanları: servisler ve uç noktalar.
"""
from datetime import timedelta

import pytest
from django.utils import timezone

from api.listings import services
from api.listings.choices import FreightType
from api.listings.models import Freight

COMMERCIAL = {
    "freight_type": "Ticari",
    "contact_person": "Ayşe Kaya",
    "mobile_phone": "05551112233",
    "origin_city": "İstanbul",
    "destination_city": "Ankara",
    "loading_date": "2024-06-01",
    "cargo_type": "Gıda",
    "vehicle_needed": "Kamyon",
    "loading_type": "Komple",
    "cargo_form": "Paletli",
    "cargo_weight": "12.5",
    "cargo_weight_unit": "Ton",
    "shipment_scope": "Yurt İçi",
}

EMPTY_VEHICLE = {
    "freight_type": "Boş Araç",
    "contact_person": "Can",
    "mobile_phone": "05550000000",
    "origin_city": "İzmir",
    "destination_city": "Bursa",
    "loading_date": "2024-06-02",
    "advertised_vehicle_type": "Tır",
    "vehicle_stated_capacity": "20",
    "vehicle_stated_capacity_unit": "Ton",
}


@pytest.fixture
def make_listing(company):
    def _make(posted_at=None, **extra):
        fields = {
            "freight_type": FreightType.COMMERCIAL,
            "contact_person": "Ayşe",
            "mobile_phone": "0555",
            "origin_city": "İstanbul",
            "destination_city": "Ankara",
            "loading_date": timezone.now().date(),
            "posted_at": posted_at or timezone.now(),
        }
        fields.update(extra)
        return Freight.objects.create(user=company, **fields)

    return _make


@pytest.mark.django_db
class TestListingServices:
    def test_newest_first_by_default(self, make_listing):
        now = timezone.now()
        old = make_listing(posted_at=now - timedelta(days=2))
        new = make_listing(posted_at=now)
        page = services.get_listings(page_size=10)
        assert [l.pk for l in page.items] == [new.pk, old.pk]

    def test_oldest_sort(self, make_listing):
        now = timezone.now()
        old = make_listing(posted_at=now - timedelta(days=2))
        new = make_listing(posted_at=now)
        page = services.get_listings({"sort_by": "oldest"}, page_size=10)
        assert [l.pk for l in page.items] == [old.pk, new.pk]

    def test_invalid_sort(self, db):
        page = services.get_listings({"sort_by": "rastgele"})
        assert page.items == []
        assert page.error.message == "Geçersiz sıralama seçeneği."

    def test_inactive_excluded(self, make_listing):
        make_listing(is_active=False)
        visible = make_listing()
        page = services.get_listings(page_size=10)
        assert [l.pk for l in page.items] == [visible.pk]

    def test_filters(self, make_listing):
        make_listing(origin_city="İzmir")
        target = make_listing(origin_city="Bursa", destination_city="Van")
        page = services.get_listings({"origin_city": "Bursa", "destination_city": "Van"}, page_size=10)
        assert [l.pk for l in page.items] == [target.pk]

    def test_posted_today(self, make_listing):
        make_listing(posted_at=timezone.now() - timedelta(days=3))
        today = make_listing()
        page = services.get_listings({"posted_today": "true"}, page_size=10)
        assert [l.pk for l in page.items] == [today.pk]

    def test_invalid_freight_type_filter(self, db):
        page = services.get_listings({"freight_type": "Uçak"})
        assert page.error is not None
        assert page.error.message.startswith("Geçersiz filtre")

    def test_pages_do_not_overlap(self, make_listing):
        base = timezone.now()
        listings = [make_listing(posted_at=base - timedelta(minutes=i)) for i in range(5)]
        first = services.get_listings(page_size=2)
        second = services.get_listings(page_size=2, cursor=first.cursor)
        third = services.get_listings(page_size=2, cursor=second.cursor)
        ids = [l.pk for l in first.items + second.items + third.items]
        assert ids == [l.pk for l in listings]
        assert third.cursor is None

    def test_update_cannot_change_owner(self, make_listing, make_company):
        listing = make_listing()
        make_company("co2", "Başka")
        assert services.update_listing(listing.pk, {"user_id": "co2", "description": "Yeni"})
        listing.refresh_from_db()
        assert listing.user_id == "co1"
        assert listing.description == "Yeni"

    def test_add_defaults_active(self, company):
        listing = services.add_listing(
            company.pk,
            {
                "freight_type": FreightType.EMPTY_VEHICLE,
                "contact_person": "Can",
                "mobile_phone": "0555",
                "origin_city": "İzmir",
                "destination_city": "Bursa",
                "loading_date": timezone.now().date(),
                "is_active": None,
            },
        )
        assert listing.is_active is True


@pytest.mark.django_db
class TestListingEndpoints:
    def test_create_requires_login(self, api_client):
        response = api_client.post("/api/listings/", COMMERCIAL, format="json")
        assert response.status_code == 401

    def test_create_requires_profile(self, user_client):
        response = user_client("profilsiz").post("/api/listings/", COMMERCIAL, format="json")
        assert response.status_code == 400

    def test_create_commercial(self, user_client, company):
        response = user_client("co1").post("/api/listings/", COMMERCIAL, format="json")
        assert response.status_code == 201, response.data
        assert response.data["freight_type"] == "Ticari"
        assert response.data["company_name"] == "Anadolu Lojistik"
        assert response.data["posted_by"] == "Anadolu Lojistik"
        assert response.data["user_id"] == "co1"
        assert response.data["is_active"] is True

    def test_commercial_requires_cargo_fields(self, user_client, company):
        payload = {k: v for k, v in COMMERCIAL.items() if k != "cargo_type"}
        response = user_client("co1").post("/api/listings/", payload, format="json")
        assert response.status_code == 400
        assert "cargo_type" in response.data

    def test_create_empty_vehicle(self, user_client, company):
        response = user_client("co1").post("/api/listings/", EMPTY_VEHICLE, format="json")
        assert response.status_code == 201, response.data
        assert response.data["advertised_vehicle_type"] == "Tır"
        assert "cargo_type" not in response.data

    def test_unknown_freight_type(self, user_client, company):
        payload = {**COMMERCIAL, "freight_type": "Uçak"}
        response = user_client("co1").post("/api/listings/", payload, format="json")
        assert response.status_code == 400

    def test_public_list(self, api_client, make_listing):
        make_listing()
        response = api_client.get("/api/listings/")
        assert response.status_code == 200
        assert len(response.data["results"]) == 1
        assert response.data["error"] is None

    def test_invalid_filter_reported_in_body(self, api_client, db):
        response = api_client.get("/api/listings/", {"sort_by": "rastgele"})
        assert response.status_code == 200
        assert response.data["results"] == []
        assert response.data["error"]["message"] == "Geçersiz sıralama seçeneği."

    def test_inactive_listing_visible_to_owner_only(self, api_client, user_client, make_listing):
        listing = make_listing(is_active=False)
        assert api_client.get(f"/api/listings/{listing.pk}/").status_code == 404
        assert user_client("co1").get(f"/api/listings/{listing.pk}/").status_code == 200

    def test_owner_updates(self, user_client, make_listing):
        listing = make_listing(cargo_type="Gıda")
        response = user_client("co1").patch(
            f"/api/listings/{listing.pk}/", {"description": "Acil"}, format="json"
        )
        assert response.status_code == 200
        assert response.data["description"] == "Acil"

    def test_other_user_cannot_update(self, user_client, make_listing):
        listing = make_listing()
        response = user_client("yabanci").patch(
            f"/api/listings/{listing.pk}/", {"description": "X"}, format="json"
        )
        assert response.status_code == 403

    def test_admin_deletes(self, admin_client, make_listing):
        listing = make_listing()
        assert admin_client.delete(f"/api/listings/{listing.pk}/").status_code == 204
        assert not Freight.objects.filter(pk=listing.pk).exists()

    def test_my_listings_include_inactive(self, user_client, make_listing):
        make_listing(is_active=False)
        make_listing()
        response = user_client("co1").get("/api/listings/mine/")
        assert response.status_code == 200
        assert len(response.data) == 2

    def test_admin_list_requires_admin(self, user_client, admin_client, make_listing):
        make_listing(is_active=False)
        assert user_client("co1").get("/api/listings/admin/").status_code == 403
        response = admin_client.get("/api/listings/admin/")
        assert response.status_code == 200
        assert len(response.data) == 1
