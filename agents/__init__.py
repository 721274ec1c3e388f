"""
M-Pulse Multi-Agent System

Cooperating agents that share state only through the SharedDataStore.

Agents:
- CivicDataAggregator: Ingests and scores environmental feeds per ward
- OutbreakForecaster: Projects 7-day disease case counts
- LogisticsCoordinator: Advisory hospital load balancing
- PublicAlertSystem: Deduplicated citizen alerts and broadcast
"""

from agents.civic_data_aggregator import CivicDataAggregator
from agents.outbreak_forecaster import OutbreakForecaster
from agents.logistics_coordinator import LogisticsCoordinator
from agents.public_alert_system import PublicAlertSystem

__all__ = [
    "CivicDataAggregator",
    "OutbreakForecaster",
    "LogisticsCoordinator",
    "PublicAlertSystem",
]
