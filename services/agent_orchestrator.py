"""
Agent Orchestrator

Builds the shared store and the four coordination agents with the same
injected collaborators, and runs one full coordination cycle.

Flow:
1. Civic Data Aggregator: ingest and score environmental feeds
2. Outbreak Forecaster: project case counts from the stored snapshot
3. Public Alert System: raise a deduplicated alert on high risk
4. Logistics Coordinator: advisory hospital load balancing

Each step only uses an agent's public operation; agents exchange data
through the store alone.
"""

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from agents.civic_data_aggregator import CivicDataAggregator
from agents.logistics_coordinator import LogisticsCoordinator
from agents.outbreak_forecaster import OutbreakForecaster
from agents.public_alert_system import PublicAlertSystem
from config import Settings, settings as default_settings
from models.base import DEFAULT_REGION
from models.model import Alert, CivicSnapshot, ForecastPoint, ResourceAllocation
from services.alert_distributor import AlertDistributor
from services.data_store import SharedDataStore
from services.environment_data import EnvironmentalDataService, EnvironmentalDataSource

logger = logging.getLogger("mpulse.agent_orchestrator")


@dataclass
class CoordinationCycle:
    """Everything one pass through the agents produced"""
    region: str
    snapshot: CivicSnapshot
    forecast: List[ForecastPoint]
    alert: Optional[Alert]
    allocation: ResourceAllocation
    completed_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "region": self.region,
            "snapshot": self.snapshot.model_dump(mode="json"),
            "forecast": [p.model_dump(mode="json") for p in self.forecast],
            "alert": self.alert.model_dump(mode="json") if self.alert else None,
            "allocation": self.allocation.model_dump(mode="json"),
            "completed_at": self.completed_at.isoformat(),
        }


class AgentOrchestrator:
    """Holds the store and the agents built around it"""

    def __init__(self,
                 store: SharedDataStore,
                 aggregator: CivicDataAggregator,
                 forecaster: OutbreakForecaster,
                 logistics: LogisticsCoordinator,
                 alerts: PublicAlertSystem,
                 clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self.aggregator = aggregator
        self.forecaster = forecaster
        self.logistics = logistics
        self.alerts = alerts
        self.clock = clock

    async def run_cycle(self, region: str = DEFAULT_REGION) -> CoordinationCycle:
        logger.info(f"Starting coordination cycle for {region}")

        snapshot = await self.aggregator.sync_all_streams(region)
        forecast = self.forecaster.generate_forecast(region)
        alert = self.alerts.generate_alerts()
        allocation = self.logistics.allocate_resources()

        logger.info(f"Coordination cycle for {region} complete: "
                    f"risk={snapshot.risk_level.value}, alert={'yes' if alert else 'no'}")

        return CoordinationCycle(
            region=region,
            snapshot=snapshot,
            forecast=forecast,
            alert=alert,
            allocation=allocation,
            completed_at=self.clock(),
        )


# Factory function
def create_orchestrator(settings: Optional[Settings] = None,
                        source: Optional[EnvironmentalDataSource] = None,
                        store: Optional[SharedDataStore] = None,
                        distributor: Optional[AlertDistributor] = None,
                        rng: Optional[random.Random] = None,
                        clock: Callable[[], datetime] = datetime.now) -> AgentOrchestrator:
    """Create a store (unless given) and all four agents sharing it"""
    settings = settings or default_settings
    rng = rng or random.Random()
    store = store or SharedDataStore(rng=rng)
    source = source or EnvironmentalDataService(settings=settings)

    return AgentOrchestrator(
        store=store,
        aggregator=CivicDataAggregator(store, source, settings=settings, rng=rng),
        forecaster=OutbreakForecaster(store, settings=settings, rng=rng, clock=clock),
        logistics=LogisticsCoordinator(store),
        alerts=PublicAlertSystem(store, distributor=distributor, settings=settings, clock=clock),
        clock=clock,
    )
