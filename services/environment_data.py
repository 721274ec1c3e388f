"""
Environmental Data Service
Fetches current weather and air quality from the Open-Meteo APIs.
"""

from typing import Optional, Protocol

import httpx
import structlog
from pydantic import ValidationError

from config import Settings, settings as default_settings
from models.base import AirQualityReading, WeatherReading

logger = structlog.get_logger(__name__)


class UpstreamUnavailable(Exception):
    """An environmental provider could not deliver a usable reading"""


class EnvironmentalDataSource(Protocol):
    async def fetch_weather(self, lat: float, lon: float) -> WeatherReading: ...

    async def fetch_air_quality(self, lat: float, lon: float) -> AirQualityReading: ...


class EnvironmentalDataService:
    """
    Open-Meteo backed environmental data source.

    Every transport, status or payload problem surfaces as
    UpstreamUnavailable so callers have a single failure to map onto
    their fallback readings.
    """

    def __init__(self, settings: Optional[Settings] = None, client: Optional[httpx.AsyncClient] = None):
        self.settings = settings or default_settings
        self.client = client or httpx.AsyncClient(timeout=self.settings.fetch_timeout_seconds)

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def fetch_weather(self, lat: float, lon: float) -> WeatherReading:
        params = {
            "latitude": lat,
            "longitude": lon,
            "current": "temperature_2m,relative_humidity_2m,rain,wind_speed_10m",
        }
        current = await self._get_current(self.settings.open_meteo_url, params)
        try:
            reading = WeatherReading(
                temperature=current["temperature_2m"],
                rainfall_mm=current["rain"],
                humidity_pct=current["relative_humidity_2m"],
                wind_speed=current["wind_speed_10m"],
            )
        except (KeyError, ValidationError) as e:
            raise UpstreamUnavailable(f"Malformed weather payload: {e}") from e

        logger.info("Fetched weather", lat=lat, lon=lon, rainfall_mm=reading.rainfall_mm)
        return reading

    async def fetch_air_quality(self, lat: float, lon: float) -> AirQualityReading:
        params = {
            "latitude": lat,
            "longitude": lon,
            "current": "us_aqi,pm2_5,pm10",
        }
        current = await self._get_current(self.settings.air_quality_url, params)
        try:
            reading = AirQualityReading(
                aqi=current["us_aqi"],
                pm2_5=current["pm2_5"],
                pm10=current["pm10"],
            )
        except (KeyError, ValidationError) as e:
            raise UpstreamUnavailable(f"Malformed air quality payload: {e}") from e

        logger.info("Fetched air quality", lat=lat, lon=lon, aqi=reading.aqi)
        return reading

    async def _get_current(self, url: str, params: dict) -> dict:
        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            logger.error("Environmental request failed", url=url, error=str(e))
            raise UpstreamUnavailable(str(e)) from e
        except ValueError as e:
            raise UpstreamUnavailable(f"Invalid JSON from {url}") from e

        current = data.get("current") if isinstance(data, dict) else None
        if not isinstance(current, dict):
            raise UpstreamUnavailable(f"No current conditions in response from {url}")
        return current
