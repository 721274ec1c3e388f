"""
Shared base models and enums for M-Pulse
Used by the store, the agents and the HTTP layer
"""

from pydantic import BaseModel, Field
from enum import Enum


DEFAULT_REGION = "All Wards"


# ============= Enums =============

class RiskLevel(str, Enum):
    """Unified risk level classification"""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class EventDensity(str, Enum):
    """Crowd/event density around a ward"""
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


# ============= Environmental Readings =============

class WeatherReading(BaseModel):
    """Current weather at a coordinate"""
    temperature: float = Field(..., ge=-100.0, le=100.0)
    rainfall_mm: float = Field(..., ge=0.0, le=5000.0)
    humidity_pct: float = Field(..., ge=0.0, le=100.0)
    wind_speed: float = Field(..., ge=0.0, le=500.0)


class AirQualityReading(BaseModel):
    """Current air quality at a coordinate"""
    aqi: float = Field(..., ge=0.0)
    pm2_5: float = Field(..., ge=0.0)
    pm10: float = Field(..., ge=0.0)


# ============= Validation Helpers =============

def validate_coordinates(lat: float, lon: float) -> bool:
    """Validate coordinate ranges"""
    return -90 <= lat <= 90 and -180 <= lon <= 180
