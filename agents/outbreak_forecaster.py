"""
Outbreak Forecaster (Agent 2)

Projects ward-level disease case counts for the coming week from the
civic snapshot held in the shared store.
"""

import logging
import math
import random
from datetime import datetime
from typing import Callable, Dict, List, Optional

from config import Settings, settings as default_settings
from models.base import RiskLevel
from models.model import ForecastPoint
from services.data_store import SharedDataStore
from services.seed_data import generate_outbreak_baseline

logger = logging.getLogger("mpulse.agents.forecast")

RISK_HEATMAP: Dict[str, float] = {
    "G North": 0.8,
    "F South": 0.6,
    "H West": 0.4,
    "D Ward": 0.2,
}


class OutbreakForecaster:
    """
    Agent that turns civic risk into a 7-day outbreak projection

    The projection itself is a seeded baseline; a high-risk snapshot
    scales every day's case count and raises its confidence.
    """

    def __init__(self,
                 store: SharedDataStore,
                 settings: Optional[Settings] = None,
                 rng: Optional[random.Random] = None,
                 clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self.settings = settings or default_settings
        self.rng = rng or random.Random()
        self.clock = clock

    def generate_forecast(self, region: str) -> List[ForecastPoint]:
        logger.info(f"Running outbreak models for {region}...")

        civic_data = self.store.get_civic_data(region)
        forecast = generate_outbreak_baseline(
            self.rng,
            start=self.clock().date(),
            days=self.settings.forecast_horizon_days,
        )

        if civic_data is not None and civic_data.risk_level == RiskLevel.HIGH:
            forecast = [self._escalate(point) for point in forecast]

        self.store.update_forecast(region, forecast)

        logger.info(f"Forecast generated for {region}. "
                    f"Max predicted cases: {max(p.predicted_cases for p in forecast)}")
        return forecast

    def _escalate(self, point: ForecastPoint) -> ForecastPoint:
        return point.model_copy(update={
            "predicted_cases": math.floor(point.predicted_cases * self.settings.high_risk_case_multiplier),
            "confidence": min(point.confidence + self.settings.high_risk_confidence_boost,
                              self.settings.max_forecast_confidence),
        })

    def get_risk_heatmap(self) -> Dict[str, float]:
        """Illustrative ward intensities in [0, 1]; not derived from live state"""
        return dict(RISK_HEATMAP)
