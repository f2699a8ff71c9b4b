"""
Rehber kayıtları, notlar ve rehber → firma dönüşümü testleri.
"""
import uuid
from unittest.mock import patch

import pytest
from django.db import DatabaseError

from api.directory import services
from api.directory.models import CompanyNote, ConversionMarker, ConversionStatus, DirectoryContact


@pytest.fixture
def contact(db):
    return DirectoryContact.objects.create(name="Hasan Usta", company_name="Usta Nakliyat", phone="0532")


@pytest.fixture
def contact_with_notes(contact):
    services.add_note({"title": "İlk görüşme", "content": "Arandı"}, contact_id=contact.pk)
    services.add_note({"title": "Ödeme", "content": "500 TL", "type": "payment"}, contact_id=contact.pk)
    return contact


@pytest.mark.django_db
class TestNotes:
    def test_owner_must_be_exactly_one(self, company, contact):
        with pytest.raises(ValueError):
            services.get_notes()
        with pytest.raises(ValueError):
            services.get_notes(company_id=company.pk, contact_id=contact.pk)

    def test_add_defaults(self, company):
        note = services.add_note({"title": "Not"}, company_id=company.pk)
        assert note.author == "Admin"
        assert note.type == "note"
        assert note.user_id == company.pk
        assert note.contact_id is None

    def test_filter_by_type(self, contact_with_notes):
        payments = services.get_notes(contact_id=contact_with_notes.pk, note_type="payment")
        assert [n.title for n in payments] == ["Ödeme"]
        assert len(services.get_notes(contact_id=contact_with_notes.pk)) == 2

    def test_update_keeps_author(self, company):
        note = services.add_note({"title": "Not", "author": "Zeynep"}, company_id=company.pk)
        assert services.update_note(note.pk, {"title": "Yeni", "author": "Başkası"}, company_id=company.pk)
        note.refresh_from_db()
        assert note.title == "Yeni"
        assert note.author == "Zeynep"

    def test_update_scoped_to_owner(self, company, make_company):
        other = make_company("co2", "Diğer")
        note = services.add_note({"title": "Not"}, company_id=company.pk)
        assert services.update_note(note.pk, {"title": "X"}, company_id=other.pk) is False
        assert services.delete_note(note.pk, company_id=other.pk) is False
        assert services.delete_note(note.pk, company_id=company.pk) is True


@pytest.mark.django_db
class TestConversion:
    def test_convert_moves_notes(self, company, contact_with_notes):
        result = services.convert_contact_to_company(contact_with_notes.pk, company.pk)
        assert result.success
        assert result.message == "Rehber kaydı firmaya dönüştürüldü, 2 not taşındı."
        assert not DirectoryContact.objects.filter(pk=contact_with_notes.pk).exists()
        assert CompanyNote.objects.filter(contact__isnull=False).count() == 0
        moved = services.get_notes(company_id=company.pk)
        assert {n.title for n in moved} == {"İlk görüşme", "Ödeme"}
        assert {n.type for n in moved} == {"note", "payment"}
        assert ConversionMarker.objects.get().status == ConversionStatus.DONE

    def test_missing_contact(self, company):
        result = services.convert_contact_to_company(uuid.uuid4(), company.pk)
        assert result.not_found
        assert result.message == "Rehber kaydı bulunamadı."

    def test_missing_company(self, contact):
        result = services.convert_contact_to_company(contact.pk, "yok")
        assert result.not_found
        assert DirectoryContact.objects.filter(pk=contact.pk).exists()

    def test_interrupted_conversion_is_resumed(self, company, contact_with_notes):
        with patch("api.directory.services._remove_contact", side_effect=DatabaseError("kesildi")):
            result = services.convert_contact_to_company(contact_with_notes.pk, company.pk)
        assert not result.success
        marker = ConversionMarker.objects.get()
        assert marker.status == ConversionStatus.COPIED
        assert marker.note_count == 2
        assert DirectoryContact.objects.filter(pk=contact_with_notes.pk).exists()

        assert services.resume_pending_conversions() == 1
        assert not DirectoryContact.objects.filter(pk=contact_with_notes.pk).exists()
        assert len(services.get_notes(company_id=company.pk)) == 2
        assert services.resume_pending_conversions() == 0

    def test_note_added_after_copy_is_carried_over(self, company, contact_with_notes):
        with patch("api.directory.services._remove_contact", side_effect=DatabaseError("kesildi")):
            services.convert_contact_to_company(contact_with_notes.pk, company.pk)
        services.add_note({"title": "Geç not"}, contact_id=contact_with_notes.pk)

        assert services.resume_pending_conversions() == 1
        titles = {n.title for n in services.get_notes(company_id=company.pk)}
        assert titles == {"Geç not", "Ödeme", "İlk görüşme"}
        assert ConversionMarker.objects.get().note_count == 3
        assert not CompanyNote.objects.filter(contact__isnull=False).exists()

    def test_retry_does_not_copy_twice(self, company, contact_with_notes):
        with patch("api.directory.services._remove_contact", side_effect=DatabaseError("kesildi")):
            services.convert_contact_to_company(contact_with_notes.pk, company.pk)
        result = services.convert_contact_to_company(contact_with_notes.pk, company.pk)
        assert result.success
        assert len(services.get_notes(company_id=company.pk)) == 2
        assert ConversionMarker.objects.count() == 1


@pytest.mark.django_db
class TestDirectoryEndpoints:
    def test_admin_only(self, user_client, company):
        assert user_client("co1").get("/api/directory/contacts/").status_code == 403

    def test_contact_crud(self, admin_client):
        response = admin_client.post(
            "/api/directory/contacts/", {"name": "Hasan", "phone": "0532"}, format="json"
        )
        assert response.status_code == 201
        pk = response.data["id"]

        response = admin_client.patch(
            f"/api/directory/contacts/{pk}/", {"company_name": "Hasan Nakliyat"}, format="json"
        )
        assert response.status_code == 200
        assert response.data["company_name"] == "Hasan Nakliyat"

        assert admin_client.delete(f"/api/directory/contacts/{pk}/").status_code == 204
        assert admin_client.get(f"/api/directory/contacts/{pk}/").status_code == 404

    def test_contact_requires_phone(self, admin_client):
        response = admin_client.post("/api/directory/contacts/", {"name": "Hasan"}, format="json")
        assert response.status_code == 400

    def test_company_notes(self, admin_client, company):
        url = f"/api/directory/companies/{company.pk}/notes/"
        response = admin_client.post(url, {"title": "Tahsilat", "type": "payment"}, format="json")
        assert response.status_code == 201
        assert response.data["author"] == "Admin"
        note_id = response.data["id"]

        assert admin_client.get(url, {"type": "payment"}).data[0]["id"] == note_id
        assert admin_client.get(url, {"type": "fatura"}).status_code == 400

        response = admin_client.patch(f"{url}{note_id}/", {"content": "Ödendi"}, format="json")
        assert response.status_code == 200
        assert admin_client.delete(f"{url}{note_id}/").status_code == 204

    def test_convert_endpoint(self, admin_client, company, contact_with_notes):
        response = admin_client.post(
            f"/api/directory/contacts/{contact_with_notes.pk}/convert/",
            {"company_id": company.pk},
            format="json",
        )
        assert response.status_code == 200
        assert response.data["success"] is True

    def test_convert_unknown_company(self, admin_client, contact):
        response = admin_client.post(
            f"/api/directory/contacts/{contact.pk}/convert/", {"company_id": "yok"}, format="json"
        )
        assert response.status_code == 404
