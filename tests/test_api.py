"""
Test suite for the M-Pulse Coordination API
"""
import random

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from services.agent_orchestrator import create_orchestrator
from services.data_store import SharedDataStore
from tests.conftest import StubEnvironmentSource, make_air_quality, make_snapshot, make_weather


def build_orchestrator(settings, clock):
    source = StubEnvironmentSource(
        weather=make_weather(rainfall_mm=60, humidity_pct=85),
        air_quality=make_air_quality(aqi=120),
    )
    return create_orchestrator(
        settings=settings,
        source=source,
        store=SharedDataStore(default_snapshot=make_snapshot()),
        rng=random.Random(3),
        clock=clock,
    )


@pytest.fixture
def client(settings, clock):
    """Create test client around an orchestrator with a stubbed data source"""
    app = create_app(settings, build_orchestrator(settings, clock))
    with TestClient(app) as test_client:
        yield test_client


class TestGeneral:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["api"]["alerts"] == "/api/v1/alerts"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["services"]["data_store"]["hospitals"] == 5
        assert data["uptime_seconds"] is not None

    def test_agents_not_initialized(self, settings):
        # Without entering the lifespan no orchestrator is built
        client = TestClient(create_app(settings))
        response = client.get("/api/v1/logistics/hospitals")
        assert response.status_code == 503


class TestCivicEndpoints:

    def test_city_wide_snapshot(self, client):
        response = client.get("/api/v1/civic/All%20Wards")
        assert response.status_code == 200
        assert response.json()["risk_level"] == "low"

    def test_sync_then_read_ward(self, client):
        response = client.post("/api/v1/civic/sync", params={"region": "G North"})
        assert response.status_code == 200
        assert response.json()["risk_level"] == "high"

        ward = client.get("/api/v1/civic/G%20North").json()
        assert ward == response.json()

    def test_unsynced_ward_falls_back(self, client):
        assert client.get("/api/v1/civic/Z%20Ward").json() == client.get("/api/v1/civic/All%20Wards").json()

    def test_stream_status(self, client):
        response = client.get("/api/v1/civic/streams")
        assert response.status_code == 200
        assert len(response.json()) == 5


class TestForecastEndpoints:

    def test_missing_forecast_is_404(self, client):
        assert client.get("/api/v1/forecast/G%20North").status_code == 404

    def test_generate_then_read(self, client):
        generated = client.post("/api/v1/forecast/G%20North")
        assert generated.status_code == 200
        assert len(generated.json()) == 7

        stored = client.get("/api/v1/forecast/G%20North")
        assert stored.json() == generated.json()

    def test_heatmap(self, client):
        response = client.get("/api/v1/forecast/heatmap")
        assert response.status_code == 200
        assert response.json()["G North"] == 0.8


class TestLogisticsEndpoints:

    def hospital_payload(self, hospital_id="1", beds_available=20):
        return {
            "id": hospital_id,
            "name": "KEM Hospital",
            "ward": "G North",
            "beds_available": beds_available,
            "total_beds": 250,
            "doctors_on_duty": 32,
            "alert_level": "high",
            "coordinates": [72.8479, 19.0053],
        }

    def test_hospital_roster(self, client):
        response = client.get("/api/v1/logistics/hospitals")
        assert response.status_code == 200
        assert [h["id"] for h in response.json()] == ["1", "2", "3", "4", "5"]

    def test_update_hospital(self, client):
        response = client.put("/api/v1/logistics/hospitals/1", json=self.hospital_payload())
        assert response.status_code == 200

        allocation = client.post("/api/v1/logistics/allocate").json()
        assert allocation["diversions"][0]["from_hospital_id"] == "1"
        assert allocation["diversions"][0]["to_hospital_id"] == "2"

    def test_update_id_mismatch(self, client):
        response = client.put("/api/v1/logistics/hospitals/2", json=self.hospital_payload("1"))
        assert response.status_code == 400

    def test_update_unknown_hospital(self, client):
        response = client.put("/api/v1/logistics/hospitals/99", json=self.hospital_payload("99"))
        assert response.status_code == 404

    def test_update_rejects_invalid_beds(self, client):
        response = client.put("/api/v1/logistics/hospitals/1", json=self.hospital_payload(beds_available=400))
        assert response.status_code == 422

    def test_allocate(self, client):
        response = client.post("/api/v1/logistics/allocate")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "Optimized"
        assert len(data["recommendations"]) == 3

    def test_route(self, client):
        response = client.post("/api/v1/logistics/routes", json={
            "start": {"lat": 19.0053, "lon": 72.8479},
            "end": {"lat": 19.0566, "lon": 72.8323},
        })
        assert response.status_code == 200
        assert response.json()["eta"] == "25 mins"


class TestAlertEndpoints:

    def test_generate_without_forecast(self, client):
        response = client.post("/api/v1/alerts/generate")
        assert response.status_code == 200
        assert response.json()["alert"] is None

    def test_cycle_then_broadcast(self, client):
        cycle = client.post("/api/v1/system/cycle")
        assert cycle.status_code == 200
        alert = cycle.json()["alert"]
        assert alert is not None

        alerts = client.get("/api/v1/alerts").json()
        assert alerts[0]["id"] == alert["id"]

        broadcast = client.post(f"/api/v1/alerts/{alert['id']}/broadcast")
        assert broadcast.status_code == 200
        assert broadcast.json()["success"] is True
        assert broadcast.json()["recipient_count"] == 150000

    def test_broadcast_unknown_channel(self, client):
        alert = client.post("/api/v1/system/cycle").json()["alert"]
        response = client.post(f"/api/v1/alerts/{alert['id']}/broadcast", json={"channels": ["Pager"]})
        assert response.status_code == 200
        assert response.json()["success"] is False

    def test_broadcast_unknown_alert(self, client):
        response = client.post("/api/v1/alerts/does-not-exist/broadcast")
        assert response.status_code == 404

    def test_alert_limit_validation(self, client):
        assert client.get("/api/v1/alerts", params={"limit": 0}).status_code == 422


class TestApiKey:

    @pytest.fixture
    def secured_client(self, clock):
        settings = Settings(log_format="console", api_key="secret-key")
        with TestClient(create_app(settings, build_orchestrator(settings, clock))) as client:
            yield client

    def test_mutation_requires_key(self, secured_client):
        response = secured_client.post("/api/v1/civic/sync")
        assert response.status_code == 401

    def test_wrong_key_rejected(self, secured_client):
        response = secured_client.post(
            "/api/v1/system/cycle", headers={"Authorization": "Bearer wrong"}
        )
        assert response.status_code == 401

    def test_valid_key_accepted(self, secured_client):
        response = secured_client.post(
            "/api/v1/civic/sync", headers={"Authorization": "Bearer secret-key"}
        )
        assert response.status_code == 200

    def test_reads_are_open(self, secured_client):
        assert secured_client.get("/api/v1/logistics/hospitals").status_code == 200
