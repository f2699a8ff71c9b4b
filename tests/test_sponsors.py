"""
Sponsorluk testleri: toplu ekleme, etkin küme değişimi, sponsor firma grupları.
"""
import pytest

from api.sponsors import services
from api.sponsors.models import EntityType, Sponsor


@pytest.mark.django_db
class TestSponsorshipBatch:
    def test_add_then_skip_existing(self, company):
        result = services.add_sponsorships_batch("co1", ["TR", "DE"], [], "2024-01-01")
        assert result.success
        assert (result.added_count, result.skipped_count) == (2, 0)
        assert result.message == "2 yeni sponsorluk eklendi."

        again = services.add_sponsorships_batch("co1", ["TR", "DE"], [], "2024-01-01")
        assert again.success
        assert (again.added_count, again.skipped_count) == (0, 2)
        assert again.message == "Seçilen tüm sponsorluklar zaten mevcut, yeni kayıt eklenmedi."
        assert Sponsor.objects.count() == 2

    def test_partial_skip_message(self, company):
        services.add_sponsorships_batch("co1", ["TR"], [], "2024-01-01")
        result = services.add_sponsorships_batch("co1", ["TR"], ["İzmir"], "2024-01-01")
        assert (result.added_count, result.skipped_count) == (1, 1)
        assert result.message == "1 yeni sponsorluk eklendi. 1 mevcut sponsorluk atlandı."

    def test_duplicates_in_request_counted_once(self, company):
        result = services.add_sponsorships_batch("co1", ["TR", "TR", " "], ["Van", "Van"], "2024-01-01")
        assert result.added_count == 2
        assert Sponsor.objects.filter(company_id="co1").count() == 2

    def test_denormalized_company_fields(self, company):
        services.add_sponsorships_batch("co1", [], ["Ankara"], "2024-01-01")
        sponsor = Sponsor.objects.get()
        assert sponsor.entity_type == EntityType.CITY
        assert sponsor.company_name == "Anadolu Lojistik"
        assert sponsor.company_link == "/uyelerimiz/firma/co1"
        assert sponsor.is_active is True
        assert sponsor.end_date is None

    @pytest.mark.parametrize(
        "args, message",
        [
            (("", ["TR"], [], "2024-01-01"), "Firma seçimi zorunludur."),
            (("co1", [], [], "2024-01-01"), "En az bir ülke veya şehir seçilmelidir."),
            (("co1", ["TR"], [], "geçersiz"), "Geçerli bir başlangıç tarihi seçilmelidir."),
            (("co1", ["TR"], [], "2024-02-01", "2024-01-01"), "Bitiş tarihi başlangıç tarihinden önce olamaz."),
            (("yok", ["TR"], [], "2024-01-01"), "Seçilen firma bulunamadı."),
        ],
    )
    def test_validation(self, company, args, message):
        result = services.add_sponsorships_batch(*args)
        assert not result.success
        assert result.message == message
        assert (result.added_count, result.skipped_count) == (0, 0)
        assert not Sponsor.objects.exists()


@pytest.mark.django_db
class TestSponsorQueries:
    def test_replace_active_set(self, company):
        services.add_sponsorships_batch("co1", ["TR"], ["Van"], "2024-01-01")
        result = services.set_company_sponsorships(
            "co1", [{"type": "city", "name": "Van"}, {"type": "city", "name": "Muş"}]
        )
        assert result.success
        names = {(s.entity_type, s.entity_name) for s in services.get_sponsors_by_company("co1")}
        assert names == {("city", "Van"), ("city", "Muş")}

    def test_replace_missing_company(self, db):
        assert services.set_company_sponsorships("yok", []).not_found

    def test_sponsored_companies_grouped(self, make_company):
        make_company("z", "Zafer Nakliyat")
        make_company("c", "Çelik Lojistik")
        make_company("a", "Akdeniz Kargo")
        make_company("p", "Pasif", is_active=False)
        make_company("n", "Sponsorsuz")
        services.add_sponsorships_batch("z", ["TR"], [], "2024-01-01")
        services.add_sponsorships_batch("c", [], ["İzmir"], "2024-01-01")
        services.add_sponsorships_batch("a", [], ["Van"], "2024-01-01")
        services.add_sponsorships_batch("p", ["DE"], [], "2024-01-01")

        groups = services.get_sponsored_companies()
        assert [c.pk for c in groups["country"]] == ["z"]
        assert [c.pk for c in groups["city"]] == ["a", "c"]

    def test_inactive_sponsorship_ignored(self, company):
        services.add_sponsorships_batch("co1", ["TR"], [], "2024-01-01")
        Sponsor.objects.update(is_active=False)
        assert services.get_active_sponsor_company_ids() == set()
        assert services.get_sponsored_companies() == {"country": [], "city": []}

    def test_profile_lists_sponsorships(self, company):
        services.add_sponsorships_batch("co1", ["TR"], ["Van"], "2024-01-01")
        assert company.sponsorships == [
            {"type": "city", "name": "Van"},
            {"type": "country", "name": "TR"},
        ]

    def test_update_rejects_end_before_start(self, company):
        services.add_sponsorships_batch("co1", ["TR"], [], "2024-03-01")
        sponsor = Sponsor.objects.get()
        result = services.update_sponsor(sponsor.pk, {"end_date": sponsor.start_date.replace(year=2023)})
        assert not result.success
        assert not result.not_found

    def test_update_cannot_duplicate_target(self, company):
        services.add_sponsorships_batch("co1", ["TR", "DE"], [], "2024-01-01")
        germany = Sponsor.objects.get(entity_name="DE")
        result = services.update_sponsor(germany.pk, {"entity_name": "TR"})
        assert not result.success
        assert result.message == "Bu firma için aynı sponsorluk zaten mevcut."
        germany.refresh_from_db()
        assert germany.entity_name == "DE"

        assert services.update_sponsor(germany.pk, {"entity_name": "FR"}).success
        assert services.update_sponsor(germany.pk, {"entity_name": "FR", "is_active": False}).success


@pytest.mark.django_db
class TestSponsorEndpoints:
    def test_batch_requires_admin(self, api_client, company):
        response = api_client.post(
            "/api/sponsors/admin/",
            {"company_id": "co1", "country_codes": ["TR"], "start_date": "2024-01-01"},
            format="json",
        )
        assert response.status_code == 401

    def test_batch_created_then_ok(self, admin_client, company):
        payload = {"company_id": "co1", "country_codes": ["TR", "DE"], "start_date": "2024-01-01"}
        response = admin_client.post("/api/sponsors/admin/", payload, format="json")
        assert response.status_code == 201
        assert response.data["added_count"] == 2

        response = admin_client.post("/api/sponsors/admin/", payload, format="json")
        assert response.status_code == 200
        assert response.data["skipped_count"] == 2

    def test_batch_validation_error(self, admin_client, company):
        response = admin_client.post(
            "/api/sponsors/admin/", {"company_id": "co1", "start_date": "2024-01-01"}, format="json"
        )
        assert response.status_code == 400
        assert response.data["detail"] == "En az bir ülke veya şehir seçilmelidir."

    def test_public_sponsored_companies(self, api_client, company):
        services.add_sponsorships_batch("co1", ["TR"], [], "2024-01-01")
        response = api_client.get("/api/sponsors/")
        assert response.status_code == 200
        assert [c["name"] for c in response.data["country"]] == ["Anadolu Lojistik"]
        assert response.data["city"] == []

    def test_delete(self, admin_client, company):
        services.add_sponsorships_batch("co1", ["TR"], [], "2024-01-01")
        sponsor = Sponsor.objects.get()
        assert admin_client.delete(f"/api/sponsors/admin/{sponsor.pk}/").status_code == 204
        assert admin_client.delete(f"/api/sponsors/admin/{sponsor.pk}/").status_code == 404

    def test_patch_rejects_existing_target(self, admin_client, company):
        services.add_sponsorships_batch("co1", ["TR", "DE"], [], "2024-01-01")
        germany = Sponsor.objects.get(entity_name="DE")
        response = admin_client.patch(
            f"/api/sponsors/admin/{germany.pk}/", {"entity_name": "TR"}, format="json"
        )
        assert response.status_code == 400
        names = sorted(Sponsor.objects.values_list("entity_name", flat=True))
        assert names == ["DE", "TR"]

    def test_replace_company_set(self, admin_client, company):
        response = admin_client.put(
            "/api/sponsors/admin/companies/co1/",
            {"locations": [{"type": "country", "name": "TR"}]},
            format="json",
        )
        assert response.status_code == 200
        response = admin_client.get("/api/sponsors/admin/companies/co1/")
        assert [s["entity_name"] for s in response.data] == ["TR"]
