import asyncio
import random
from datetime import datetime, timedelta

import pytest

from config import Settings
from models.base import AirQualityReading, EventDensity, RiskLevel, WeatherReading
from models.model import CivicSnapshot, Hospital
from services.data_store import SharedDataStore


class SequenceRandom(random.Random):
    """Random source that replays fixed values from random()"""

    def __init__(self, values):
        super().__init__(0)
        self._values = list(values)

    def random(self):
        return self._values.pop(0)


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


class StubEnvironmentSource:
    """Environmental source returning canned readings, or raising"""

    def __init__(self, weather=None, air_quality=None,
                 weather_error=None, air_error=None, delay=0.0):
        self.weather = weather or make_weather()
        self.air_quality = air_quality or make_air_quality()
        self.weather_error = weather_error
        self.air_error = air_error
        self.delay = delay
        self.calls = []

    async def fetch_weather(self, lat, lon):
        self.calls.append(("weather", lat, lon))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.weather_error:
            raise self.weather_error
        return self.weather

    async def fetch_air_quality(self, lat, lon):
        self.calls.append(("air_quality", lat, lon))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.air_error:
            raise self.air_error
        return self.air_quality


def make_weather(rainfall_mm=0.0, humidity_pct=60.0, temperature=29.0, wind_speed=12.0):
    return WeatherReading(
        temperature=temperature,
        rainfall_mm=rainfall_mm,
        humidity_pct=humidity_pct,
        wind_speed=wind_speed,
    )


def make_air_quality(aqi=50.0, pm2_5=20.0, pm10=40.0):
    return AirQualityReading(aqi=aqi, pm2_5=pm2_5, pm10=pm10)


def make_snapshot(risk_level=RiskLevel.LOW, predicted_condition="None", **overrides):
    fields = {
        "rainfall_mm": 5.0,
        "aqi": 80.0,
        "event_density": EventDensity.LOW,
        "predicted_condition": predicted_condition,
        "confidence": 88,
        "risk_level": risk_level,
    }
    fields.update(overrides)
    return CivicSnapshot(**fields)


def make_hospital(hospital_id, beds_available, total_beds=100, name=None, ward="G North"):
    return Hospital(
        id=hospital_id,
        name=name or f"Hospital {hospital_id}",
        ward=ward,
        beds_available=beds_available,
        total_beds=total_beds,
        doctors_on_duty=10,
        alert_level=RiskLevel.MODERATE,
        coordinates=(72.84, 19.00),
    )


@pytest.fixture
def settings():
    return Settings(log_format="console", fetch_timeout_seconds=0.5)


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 7, 1, 9, 0, 0))


@pytest.fixture
def store():
    """Store with the seed roster and a low-risk city-wide snapshot"""
    return SharedDataStore(default_snapshot=make_snapshot())


@pytest.fixture
def high_risk_store():
    return SharedDataStore(
        default_snapshot=make_snapshot(
            risk_level=RiskLevel.HIGH,
            predicted_condition="Dengue / Malaria",
            rainfall_mm=75.0,
        )
    )
