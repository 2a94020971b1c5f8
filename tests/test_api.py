"""
FastAPI endpoint tests for the Venezuela Territory API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from venezuela_territory.territory import VenezuelaTerritory

client = TestClient(app)


@pytest.fixture(autouse=True)
def _fresh_territory() -> None:
    """Give every test its own accessor (bypasses lifespan)."""
    api._territory = VenezuelaTerritory()
    yield  # type: ignore[misc]
    api._territory = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["states_loaded"] == 24
        assert data["cache_enabled"] is True
        assert data["cache_entries"] == 0

    def test_uninitialised_returns_503(self) -> None:
        api._territory = None
        resp = client.get("/health")
        assert resp.status_code == 503


class TestStateEndpoints:
    def test_get_state(self) -> None:
        resp = client.get("/states/Zulia")
        assert resp.status_code == 200
        data = resp.json()
        assert data["name"] == "Zulia"
        assert data["capital"] == "Maracaibo"
        assert data["iso"] == "VE-V"
        assert len(data["municipalities"]) == 21
        assert data["municipalities_complete"] is True

    def test_get_state_accent_insensitive(self) -> None:
        resp = client.get("/states/falcon")
        assert resp.status_code == 200
        assert resp.json()["name"] == "Falcón"

    def test_unknown_state_404(self) -> None:
        resp = client.get("/states/NonExistentState")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "State 'NonExistentState' not found"

    def test_list_states(self) -> None:
        resp = client.get("/states")
        assert resp.status_code == 200
        names = [s["name"] for s in resp.json()]
        assert len(names) == 24
        assert names[0] == "Amazonas"


class TestMunicipalityAndParishEndpoints:
    def test_get_municipality(self) -> None:
        data = client.get("/municipalities/Maracaibo").json()
        assert data["state"] == "Zulia"
        assert len(data["parishes"]) == 18

    def test_unknown_municipality_404(self) -> None:
        resp = client.get("/municipalities/NonExistentMunicipality")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Municipality 'NonExistentMunicipality' not found"

    def test_get_parish(self) -> None:
        data = client.get("/parishes/Chacao").json()
        assert data["municipality"] == "Chacao"
        assert data["state"] == "Miranda"
        assert data["type"] == "civil"

    def test_unknown_parish_404(self) -> None:
        assert client.get("/parishes/NonExistentParish").status_code == 404


class TestSearchEndpoint:
    def test_search(self) -> None:
        data = client.get("/search", params={"q": "Miranda"}).json()
        assert len(data["states"]) == 1
        assert len(data["municipalities"]) == 1
        assert len(data["parishes"]) == 1

    def test_search_nothing(self) -> None:
        data = client.get("/search", params={"q": "NonExistentTerritory"}).json()
        assert data == {"states": [], "municipalities": [], "parishes": []}

    def test_search_requires_query(self) -> None:
        assert client.get("/search").status_code == 422


class TestStatsAndCacheEndpoints:
    def test_stats(self) -> None:
        data = client.get("/stats").json()
        assert data["total_states"] == 24
        assert data["total_municipalities"] == 335
        assert data["total_parishes"] == 1146
        assert data["total_area"] == 0
        assert data["complete"] is True

    def test_clear_cache(self) -> None:
        client.get("/states/Zulia")
        client.get("/states/Lara")
        resp = client.delete("/cache")
        assert resp.status_code == 200
        assert resp.json() == {"cleared": 2}
        assert client.get("/health").json()["cache_entries"] == 0
