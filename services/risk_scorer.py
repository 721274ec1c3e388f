"""
Risk Scorer

Additive point model turning current weather and air quality into a
civic risk assessment:

- Rainfall (waterborne disease):  > 50 mm -> 40, > 10 mm -> 20
- AQI (respiratory illness):      > 300 -> 50, > 200 -> 30, > 100 -> 10
- Humidity (vector breeding):     > 80% -> 20

Totals above 60 are high risk, above 30 moderate, otherwise low.
"""

import random
from dataclasses import dataclass
from typing import Any, Dict, Optional

from models.base import AirQualityReading, EventDensity, RiskLevel, WeatherReading

HIGH_RISK_THRESHOLD = 60
MODERATE_RISK_THRESHOLD = 30

# Readings substituted when the environmental source is unavailable
FALLBACK_WEATHER = WeatherReading(temperature=30, rainfall_mm=0, humidity_pct=70, wind_speed=10)
FALLBACK_AIR_QUALITY = AirQualityReading(aqi=150, pm2_5=50, pm10=100)

EVENT_DENSITY_WEIGHTS = {
    EventDensity.HIGH: 30,
    EventDensity.MODERATE: 30,
    EventDensity.LOW: 40,
}


@dataclass
class RiskAssessment:
    """Scored civic risk for one set of readings"""
    score: int
    risk_level: RiskLevel
    predicted_condition: str
    confidence: int
    event_density: EventDensity
    rainfall_mm: float
    aqi: float

    def snapshot_fields(self) -> Dict[str, Any]:
        """Fields that map one-to-one onto a CivicSnapshot"""
        return {
            "rainfall_mm": self.rainfall_mm,
            "aqi": self.aqi,
            "risk_level": self.risk_level,
            "predicted_condition": self.predicted_condition,
            "confidence": self.confidence,
            "event_density": self.event_density,
        }


def score_environment(weather: WeatherReading, air_quality: AirQualityReading) -> int:
    score = 0

    if weather.rainfall_mm > 50:
        score += 40
    elif weather.rainfall_mm > 10:
        score += 20

    if air_quality.aqi > 300:
        score += 50
    elif air_quality.aqi > 200:
        score += 30
    elif air_quality.aqi > 100:
        score += 10

    if weather.humidity_pct > 80:
        score += 20

    return score


def classify_risk_level(score: int) -> RiskLevel:
    if score > HIGH_RISK_THRESHOLD:
        return RiskLevel.HIGH
    if score > MODERATE_RISK_THRESHOLD:
        return RiskLevel.MODERATE
    return RiskLevel.LOW


def predict_condition(weather: WeatherReading, air_quality: AirQualityReading) -> str:
    """First matching branch wins, regardless of the point total"""
    if weather.rainfall_mm > 20 and weather.humidity_pct > 75:
        return "Dengue / Malaria"
    if air_quality.aqi > 150:
        return "Respiratory Infections"
    if weather.rainfall_mm > 100:
        return "Leptospirosis"
    return "None"


def calculate_risk_score(
    weather: WeatherReading,
    air_quality: AirQualityReading,
    rng: Optional[random.Random] = None
) -> RiskAssessment:
    """
    Score current readings.

    Confidence and event density are synthetic until a real model and
    event calendar feed exist; both come from ``rng``.

    Args:
        weather: Current weather reading
        air_quality: Current air quality reading
        rng: Random source (an unseeded ``random.Random`` when omitted)

    Returns:
        RiskAssessment with the civic snapshot fields and the raw score
    """
    rng = rng or random.Random()
    score = score_environment(weather, air_quality)

    confidence = min(int(85 + rng.random() * 10), 99)
    event_density = rng.choices(
        list(EVENT_DENSITY_WEIGHTS),
        weights=list(EVENT_DENSITY_WEIGHTS.values()),
    )[0]

    return RiskAssessment(
        score=score,
        risk_level=classify_risk_level(score),
        predicted_condition=predict_condition(weather, air_quality),
        confidence=confidence,
        event_density=event_density,
        rainfall_mm=weather.rainfall_mm,
        aqi=air_quality.aqi,
    )
