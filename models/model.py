from pydantic import BaseModel, model_validator, Field, ConfigDict
from typing import List, Optional, Tuple
from datetime import date, datetime
import uuid

# Import shared base models
from .base import RiskLevel, EventDensity, validate_coordinates


class CivicSnapshot(BaseModel):
    """Enriched civic signals for one region"""
    rainfall_mm: float = Field(..., ge=0.0)
    aqi: float = Field(..., ge=0.0)
    event_density: EventDensity
    predicted_condition: str
    confidence: float = Field(..., ge=0.0, le=100.0)
    risk_level: RiskLevel

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "rainfall_mm": 64.0,
                "aqi": 142.0,
                "event_density": "Moderate",
                "predicted_condition": "Dengue / Malaria",
                "confidence": 91,
                "risk_level": "high"
            }
        }
    )


class ForecastPoint(BaseModel):
    """Projected case count for one disease on one day"""
    date: date
    disease: str = Field(..., min_length=1)
    predicted_cases: int = Field(..., ge=0)
    confidence: float = Field(..., ge=0.0, le=100.0)


class Hospital(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200)
    ward: str
    beds_available: int = Field(..., ge=0)
    total_beds: int = Field(..., gt=0)
    doctors_on_duty: int = Field(..., ge=0)
    alert_level: RiskLevel
    coordinates: Tuple[float, float] = Field(..., description="(longitude, latitude)")
    website: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None

    @model_validator(mode="after")
    def check_bed_counts(self):
        if self.beds_available > self.total_beds:
            raise ValueError("beds_available cannot exceed total_beds")
        return self

    @model_validator(mode="after")
    def check_coordinates(self):
        lon, lat = self.coordinates
        if not validate_coordinates(lat, lon):
            raise ValueError("coordinates must be (longitude, latitude) within range")
        return self

    @property
    def occupancy_rate(self) -> float:
        return (self.total_beds - self.beds_available) / self.total_beds


class Alert(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=1000)
    severity: RiskLevel
    regions: List[str] = Field(default_factory=list)
    created_at: datetime
    channels: List[str] = Field(default_factory=list)


# --- Agent result models ---

class StreamStatus(BaseModel):
    source_id: str
    name: str
    status: str
    record_count: int


class DiversionSuggestion(BaseModel):
    """An overloaded hospital and the first roster entry with spare capacity"""
    from_hospital_id: str
    from_hospital: str
    occupancy_rate: float
    to_hospital_id: Optional[str] = None
    to_hospital: Optional[str] = None


class ResourceAllocation(BaseModel):
    status: str
    recommendations: List[str]
    diversions: List[DiversionSuggestion] = Field(default_factory=list)
    surge_diseases: List[str] = Field(default_factory=list)


class GeoPoint(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class AmbulanceRoute(BaseModel):
    route: str
    eta: str
    traffic_status: str


class ChannelDelivery(BaseModel):
    channel: str
    success: bool
    timestamp: datetime
    message_id: Optional[str] = None
    error: Optional[str] = None


class BroadcastResult(BaseModel):
    alert_id: str
    success: bool
    recipient_count: int
    delivery_time: str
    deliveries: List[ChannelDelivery] = Field(default_factory=list)
