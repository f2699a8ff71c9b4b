"""
İletişim mesajları testleri.
"""
import uuid

import pytest

from api.messaging import services
from api.messaging.models import Message


@pytest.mark.django_db
class TestMessageServices:
    def test_add_defaults_user_name(self, db):
        message = services.add_message(None, "", "Merhaba", "İçerik")
        assert message.user_name == "Bilinmeyen Kullanıcı"
        assert message.is_read is False

    def test_mark_read_is_idempotent(self, db):
        message = services.add_message(None, "Ali", "Konu", "İçerik")
        assert services.mark_message_as_read(message.pk) is True
        assert services.mark_message_as_read(message.pk) is True
        message.refresh_from_db()
        assert message.is_read is True

    def test_mark_read_missing(self, db):
        assert services.mark_message_as_read(uuid.uuid4()) is False

    def test_unread_count(self, db):
        first = services.add_message(None, "A", "1", "x")
        services.add_message(None, "B", "2", "y")
        services.mark_message_as_read(first.pk)
        assert services.count_unread_messages() == 1

    def test_newest_first(self, db):
        first = services.add_message(None, "A", "1", "x")
        second = services.add_message(None, "B", "2", "y")
        assert [m.pk for m in services.get_all_messages()] == [second.pk, first.pk]


@pytest.mark.django_db
class TestMessageEndpoints:
    def test_user_sends_message(self, user_client, company):
        response = user_client("co1").post(
            "/api/messages/", {"title": "Soru", "content": "Üyelik hakkında"}, format="json"
        )
        assert response.status_code == 201, response.data
        assert response.data["user_name"] == "Anadolu Lojistik"
        assert response.data["user_id"] == "co1"
        assert response.data["is_read"] is False

    def test_user_without_profile(self, user_client):
        response = user_client("profilsiz").post(
            "/api/messages/", {"title": "Soru", "content": "..."}, format="json"
        )
        assert response.status_code == 201
        assert response.data["user_name"] == "Bilinmeyen Kullanıcı"
        assert response.data["user_id"] is None

    def test_anonymous_cannot_send(self, api_client, db):
        response = api_client.post("/api/messages/", {"title": "a", "content": "b"}, format="json")
        assert response.status_code == 401

    def test_inbox_is_admin_only(self, user_client, admin_client, company):
        services.add_message("co1", "Anadolu", "Konu", "İçerik")
        assert user_client("co1").get("/api/messages/").status_code == 403
        response = admin_client.get("/api/messages/")
        assert response.status_code == 200
        assert response.data["unread"] == 1
        assert len(response.data["results"]) == 1

    def test_read_and_delete(self, admin_client, db):
        message = services.add_message(None, "A", "Konu", "İçerik")
        assert admin_client.post(f"/api/messages/{message.pk}/read/").status_code == 200
        assert admin_client.post(f"/api/messages/{message.pk}/read/").status_code == 200
        assert admin_client.get("/api/messages/unread-count/").data == {"unread": 0}
        assert admin_client.delete(f"/api/messages/{message.pk}/").status_code == 204
        assert not Message.objects.exists()
        assert admin_client.post(f"/api/messages/{message.pk}/read/").status_code == 404
