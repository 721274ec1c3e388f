"""
Tests for the coordination cycle across all four agents
"""

import random

import pytest

from models.base import DEFAULT_REGION, RiskLevel
from services.agent_orchestrator import create_orchestrator
from services.data_store import SharedDataStore
from tests.conftest import StubEnvironmentSource, make_air_quality, make_snapshot, make_weather


def high_risk_source():
    return StubEnvironmentSource(
        weather=make_weather(rainfall_mm=60, humidity_pct=85),
        air_quality=make_air_quality(aqi=120),
    )


@pytest.fixture
def orchestrator(settings, clock):
    return create_orchestrator(
        settings=settings,
        source=high_risk_source(),
        store=SharedDataStore(default_snapshot=make_snapshot()),
        rng=random.Random(7),
        clock=clock,
    )


class TestCreateOrchestrator:

    def test_agents_share_one_store(self, orchestrator):
        store = orchestrator.store
        assert orchestrator.aggregator.store is store
        assert orchestrator.forecaster.store is store
        assert orchestrator.logistics.store is store
        assert orchestrator.alerts.store is store

    def test_builds_own_store_when_not_given(self, settings):
        orchestrator = create_orchestrator(settings=settings, source=StubEnvironmentSource())
        assert len(orchestrator.store.get_hospitals()) == 5


class TestRunCycle:

    @pytest.mark.asyncio
    async def test_high_risk_cycle_raises_alert(self, orchestrator, clock):
        cycle = await orchestrator.run_cycle()

        assert cycle.region == DEFAULT_REGION
        assert cycle.snapshot.risk_level == RiskLevel.HIGH
        assert cycle.alert is not None
        assert cycle.alert.title == "⚠️ High Health Risk: Dengue / Malaria"
        assert orchestrator.store.get_alerts()[0].id == cycle.alert.id
        assert cycle.completed_at == clock()

    @pytest.mark.asyncio
    async def test_high_risk_cycle_scales_forecast(self, orchestrator):
        cycle = await orchestrator.run_cycle()

        assert len(cycle.forecast) == 7
        assert all(p.predicted_cases >= 30 for p in cycle.forecast)
        assert all(75 <= p.confidence <= 99 for p in cycle.forecast)
        assert orchestrator.store.get_forecast(DEFAULT_REGION) == cycle.forecast

    @pytest.mark.asyncio
    async def test_repeat_cycle_suppresses_duplicate_alert(self, orchestrator, clock):
        await orchestrator.run_cycle()
        clock.advance(minutes=10)

        second = await orchestrator.run_cycle()

        assert second.alert is None
        assert len(orchestrator.store.get_alerts()) == 1

    @pytest.mark.asyncio
    async def test_ward_cycle_does_not_alert_city_wide(self, orchestrator):
        cycle = await orchestrator.run_cycle("G North")

        assert cycle.snapshot.risk_level == RiskLevel.HIGH
        assert orchestrator.store.get_forecast("G North") == cycle.forecast
        assert orchestrator.store.get_forecast(DEFAULT_REGION) is None
        assert cycle.alert is None

    @pytest.mark.asyncio
    async def test_cycle_serializes(self, orchestrator):
        cycle = await orchestrator.run_cycle()
        payload = cycle.to_dict()

        assert payload["snapshot"]["risk_level"] == "high"
        assert payload["alert"]["severity"] == "high"
        assert payload["allocation"]["status"] == "Optimized"
        assert len(payload["forecast"]) == 7
