"""
M-Pulse Data Models
Centralized export of all Pydantic models
"""

# Base models and enums
from .base import (
    DEFAULT_REGION,
    RiskLevel,
    EventDensity,
    WeatherReading,
    AirQualityReading,
    validate_coordinates
)

# Store entities and agent results
from .model import (
    CivicSnapshot,
    ForecastPoint,
    Hospital,
    Alert,
    StreamStatus,
    DiversionSuggestion,
    ResourceAllocation,
    GeoPoint,
    AmbulanceRoute,
    ChannelDelivery,
    BroadcastResult
)

__all__ = [
    # Base
    "DEFAULT_REGION",
    "RiskLevel",
    "EventDensity",
    "WeatherReading",
    "AirQualityReading",
    "validate_coordinates",

    # Entities
    "CivicSnapshot",
    "ForecastPoint",
    "Hospital",
    "Alert",

    # Agent results
    "StreamStatus",
    "DiversionSuggestion",
    "ResourceAllocation",
    "GeoPoint",
    "AmbulanceRoute",
    "ChannelDelivery",
    "BroadcastResult",
]
