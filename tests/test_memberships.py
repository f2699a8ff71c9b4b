"""
Üyelik talepleri testleri.
"""
import uuid

import pytest

from api.memberships import services
from api.memberships.models import MembershipRequest, RequestStatus

REQUEST = {"name": "Veli", "phone": "0532", "email": "veli@example.com", "company_name": "Veli Nakliyat"}


@pytest.mark.django_db
class TestMembershipRequestServices:
    def test_new_request_starts_as_new(self):
        obj, error = services.add_membership_request({**REQUEST, "status": "closed"})
        assert error is None
        assert obj.status == RequestStatus.NEW
        assert obj.user_id is None

    def test_status_update(self):
        obj, _ = services.add_membership_request(dict(REQUEST))
        result = services.update_membership_request_status(obj.pk, "contacted")
        assert result.success
        obj.refresh_from_db()
        assert obj.status == RequestStatus.CONTACTED

    def test_invalid_status(self):
        obj, _ = services.add_membership_request(dict(REQUEST))
        result = services.update_membership_request_status(obj.pk, "unknown")
        assert not result.success
        assert not result.not_found

    def test_status_update_missing(self):
        assert services.update_membership_request_status(uuid.uuid4(), "closed").not_found


@pytest.mark.django_db
class TestMembershipRequestEndpoints:
    def test_anonymous_can_apply(self, api_client):
        response = api_client.post("/api/membership-requests/", REQUEST, format="json")
        assert response.status_code == 201
        assert response.data["message"] == "Talep başarıyla oluşturuldu."
        assert response.data["request"]["status"] == "new"

    def test_logged_in_company_is_linked(self, user_client, company):
        response = user_client("co1").post("/api/membership-requests/", REQUEST, format="json")
        assert response.status_code == 201
        assert MembershipRequest.objects.get().user_id == "co1"

    def test_name_and_phone_required(self, api_client, db):
        response = api_client.post("/api/membership-requests/", {"email": "a@b.com"}, format="json")
        assert response.status_code == 400
        assert {"name", "phone"} <= set(response.data)

    def test_list_is_admin_only(self, api_client, admin_client, db):
        services.add_membership_request(dict(REQUEST))
        assert api_client.get("/api/membership-requests/").status_code == 401
        response = admin_client.get("/api/membership-requests/")
        assert response.status_code == 200
        assert len(response.data) == 1

    def test_admin_updates_and_deletes(self, admin_client, db):
        obj, _ = services.add_membership_request(dict(REQUEST))
        url = f"/api/membership-requests/{obj.pk}/"
        assert admin_client.patch(url, {"status": "converted"}, format="json").status_code == 200
        assert admin_client.patch(url, {"status": "yanlis"}, format="json").status_code == 400
        assert admin_client.delete(url).status_code == 204
        assert admin_client.delete(url).status_code == 404
