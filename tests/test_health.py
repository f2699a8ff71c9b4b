from unittest.mock import patch

import pytest
from django.db import OperationalError

pytestmark = pytest.mark.django_db


def test_health_endpoint(client):
    response = client.get("/health/")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["database"] is True


def test_health_database_down(client):
    with patch("core.health.connection.cursor", side_effect=OperationalError("down")):
        response = client.get("/health/")
    assert response.status_code == 503
    assert response.json()["database"] is False


def test_health_rejects_post(client):
    assert client.post("/health/").status_code == 405


def test_schema_is_served(client):
    response = client.get("/api/schema/", {"format": "json"})
    assert response.status_code == 200
