"""
Configuration management for the M-Pulse coordination core
"""
import os
from typing import List, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


ENV_PREFIX = "MPULSE_"


class Settings(BaseModel):
    """Application settings with environment variable support"""

    # API Configuration
    api_title: str = "M-Pulse Coordination API"
    api_description: str = "Civic health signals, outbreak forecasts, hospital logistics and public alerts"
    api_version: str = "1.0.0"
    debug: bool = False

    # Security Configuration
    api_key: Optional[str] = None
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:8080"]

    # External APIs
    open_meteo_url: str = "https://api.open-meteo.com/v1/forecast"
    air_quality_url: str = "https://air-quality-api.open-meteo.com/v1/air-quality"
    fetch_timeout_seconds: float = 10.0

    # Mumbai-wide reference coordinate
    default_latitude: float = 19.0760
    default_longitude: float = 72.8777

    # Agent tuning
    forecast_horizon_days: int = Field(7, ge=1)
    high_risk_case_multiplier: float = 1.5
    high_risk_confidence_boost: int = 5
    max_forecast_confidence: int = 99
    alert_cooldown_seconds: int = 3600
    simulated_recipient_count: int = 150000

    # Logging Configuration
    log_level: str = "INFO"
    log_format: str = "json"

    model_config = ConfigDict(validate_assignment=True)

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    @field_validator('debug', mode='before')
    @classmethod
    def parse_debug(cls, v):
        if isinstance(v, str):
            return v.lower() in ('true', '1', 'yes', 'on')
        return v

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from MPULSE_* environment variables (case-insensitive)"""
        environ = os.environ if environ is None else environ
        overrides = {}
        for key, value in environ.items():
            if not key.upper().startswith(ENV_PREFIX):
                continue
            field = key[len(ENV_PREFIX):].lower()
            if field in cls.model_fields:
                overrides[field] = value
        return cls(**overrides)


# Global settings instance
settings = Settings.from_env()
