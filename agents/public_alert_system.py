"""
Public Alert System (Agent 4)

Turns high civic risk into citizen alerts, suppressing repeats of the
same alert inside a cooldown window, and hands alerts to the notification
channels.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from config import Settings, settings as default_settings
from models.base import DEFAULT_REGION, RiskLevel
from models.model import Alert, BroadcastResult
from services.alert_distributor import AlertDistributor, create_alert_distributor
from services.data_store import SharedDataStore

logger = logging.getLogger("mpulse.agents.alerts")

DEFAULT_CHANNELS = ["SMS", "App"]
ALERT_MESSAGE = ("Elevated risk detected due to recent weather and AQI levels. "
                 "Please take necessary precautions.")


class PublicAlertSystem:
    """
    Agent that delivers targeted citizen alerts

    Deduplication is by exact title: a candidate is dropped when an alert
    with the same title was created less than the cooldown ago.
    """

    def __init__(self,
                 store: SharedDataStore,
                 distributor: Optional[AlertDistributor] = None,
                 settings: Optional[Settings] = None,
                 clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self.distributor = distributor or create_alert_distributor()
        self.settings = settings or default_settings
        self.clock = clock

    @property
    def cooldown(self) -> timedelta:
        return timedelta(seconds=self.settings.alert_cooldown_seconds)

    def generate_alerts(self) -> Optional[Alert]:
        logger.info("Scanning for high-risk patterns...")

        forecast = self.store.get_forecast(DEFAULT_REGION)
        civic_data = self.store.get_civic_data(DEFAULT_REGION)
        if forecast is None or civic_data is None:
            return None

        if civic_data.risk_level != RiskLevel.HIGH:
            return None

        now = self.clock()
        candidate = Alert(
            title=f"⚠️ High Health Risk: {civic_data.predicted_condition}",
            message=ALERT_MESSAGE,
            severity=RiskLevel.HIGH,
            regions=[DEFAULT_REGION],
            created_at=now,
            channels=list(DEFAULT_CHANNELS),
        )

        if self._is_duplicate(candidate, now):
            logger.info(f"Skipping duplicate alert: {candidate.title}")
            return None

        self.store.add_alert(candidate)
        logger.info(f"Generated new alert: {candidate.title}")
        return candidate

    def _is_duplicate(self, candidate: Alert, now: datetime) -> bool:
        return any(
            existing.title == candidate.title and now - existing.created_at < self.cooldown
            for existing in self.store.get_alerts()
        )

    async def broadcast_alert(self, alert_id: str, channels: List[str]) -> BroadcastResult:
        """
        Dispatch an alert to the notification gateways

        Returns:
            BroadcastResult; ``success`` is False for an unknown alert
            or if any channel failed
        """
        logger.info(f"Broadcasting Alert {alert_id} via {', '.join(channels)}")

        alert = self.store.get_alert(alert_id)
        if alert is None:
            logger.warning(f"Alert {alert_id} not found, nothing broadcast")
            return BroadcastResult(
                alert_id=alert_id,
                success=False,
                recipient_count=0,
                delivery_time="Immediate",
            )

        deliveries = await self.distributor.distribute(alert_id, channels, alert=alert)

        return BroadcastResult(
            alert_id=alert_id,
            success=all(d.success for d in deliveries),
            recipient_count=self.settings.simulated_recipient_count,
            delivery_time="Immediate",
            deliveries=deliveries,
        )
