"""
Integration tests: full application with the in-memory store
"""

import pytest
from fastapi.testclient import TestClient

from shipapi.config import settings
from shipapi.main import create_app


@pytest.fixture(autouse=True)
def memory_store(monkeypatch):
    monkeypatch.setattr(settings, "ship_store", "memory")


@pytest.mark.integration
class TestShipApiLifespan:
    def test_add_then_look_up(self, normandy):
        """Ship added over HTTP is visible to both lookups"""
        with TestClient(create_app()) as client:
            body = normandy.model_dump(mode="json", by_alias=True)

            assert client.get("/api/ship/1234").status_code == 404

            created = client.post("/api/ship/", json=body)
            assert created.status_code == 201
            assert created.json() == body

            details = client.get("/api/ship/1234")
            assert details.status_code == 200
            assert details.json() == body

            position = client.get("/api/ship/1234/position")
            assert position.status_code == 200
            assert position.json() == 4

            duplicate = client.post("/api/ship/", json=body)
            assert duplicate.status_code == 409

    def test_store_is_reset_between_runs(self):
        """Each app run starts with an empty in-memory store"""
        with TestClient(create_app()) as client:
            assert client.get("/api/ship/1234/position").status_code == 404
