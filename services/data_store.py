"""
Shared Data Store

Process-wide, in-memory source of truth for civic snapshots, forecasts,
the hospital roster and the alert log. Every agent reads and writes
through this object; none of them talk to each other directly.

Values are copied on the way in and on the way out, so a caller that
mutates what it was handed never changes stored state.
"""

import random
from typing import Dict, Iterable, List, Optional

import structlog

from models.base import DEFAULT_REGION
from models.model import Alert, CivicSnapshot, ForecastPoint, Hospital
from services.seed_data import generate_civic_baseline, load_seed_hospitals

logger = structlog.get_logger(__name__)


class SharedDataStore:
    """In-memory store shared by all coordination agents"""

    def __init__(self,
                 hospitals: Optional[Iterable[Hospital]] = None,
                 default_snapshot: Optional[CivicSnapshot] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize the store with its startup seed

        Args:
            hospitals: Initial roster (static seed roster when omitted)
            default_snapshot: Snapshot for the default region (generated when omitted)
            rng: Random source for the generated default snapshot
        """
        roster = load_seed_hospitals() if hospitals is None else hospitals
        self._civic_data: Dict[str, CivicSnapshot] = {}
        self._forecasts: Dict[str, List[ForecastPoint]] = {}
        self._hospitals: List[Hospital] = [h.model_copy(deep=True) for h in roster]
        self._alerts: List[Alert] = []

        seed = default_snapshot or generate_civic_baseline(rng or random.Random())
        self._civic_data[DEFAULT_REGION] = seed.model_copy(deep=True)

        logger.info("Shared data store initialized",
                    hospitals=len(self._hospitals),
                    default_risk=seed.risk_level.value)

    # --- Civic data ---

    def update_civic_data(self, region: str, snapshot: CivicSnapshot) -> None:
        self._civic_data[region] = snapshot.model_copy(deep=True)
        logger.info("Civic data updated", region=region, risk_level=snapshot.risk_level.value)

    def get_civic_data(self, region: str) -> Optional[CivicSnapshot]:
        """Snapshot for ``region``, falling back to the default region (one hop)"""
        snapshot = self._civic_data.get(region) or self._civic_data.get(DEFAULT_REGION)
        return snapshot.model_copy(deep=True) if snapshot else None

    # --- Forecasts ---

    def update_forecast(self, region: str, forecast: List[ForecastPoint]) -> None:
        self._forecasts[region] = [point.model_copy() for point in forecast]
        logger.info("Forecast updated", region=region, points=len(forecast))

    def get_forecast(self, region: str) -> Optional[List[ForecastPoint]]:
        """Latest forecast for ``region``; None until one has been generated"""
        forecast = self._forecasts.get(region)
        if forecast is None:
            return None
        return [point.model_copy() for point in forecast]

    # --- Hospitals ---

    def get_hospitals(self) -> List[Hospital]:
        return [h.model_copy(deep=True) for h in self._hospitals]

    def update_hospital(self, hospital: Hospital) -> bool:
        """
        Replace the roster entry with the same id.

        Unknown ids are not appended.

        Returns:
            True if an entry was replaced, False if there is no such hospital
        """
        for index, existing in enumerate(self._hospitals):
            if existing.id == hospital.id:
                self._hospitals[index] = hospital.model_copy(deep=True)
                logger.info("Hospital updated", hospital_id=hospital.id, name=hospital.name)
                return True

        logger.warning("No such hospital, update ignored", hospital_id=hospital.id)
        return False

    # --- Alerts ---

    def add_alert(self, alert: Alert) -> None:
        self._alerts.insert(0, alert.model_copy(deep=True))
        logger.info("New alert added", alert_id=alert.id, title=alert.title)

    def get_alerts(self) -> List[Alert]:
        """Alert log, most recent first"""
        return [a.model_copy(deep=True) for a in self._alerts]

    def get_alert(self, alert_id: str) -> Optional[Alert]:
        for alert in self._alerts:
            if alert.id == alert_id:
                return alert.model_copy(deep=True)
        return None
