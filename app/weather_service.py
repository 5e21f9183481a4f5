# app/weather_service.py
from __future__ import annotations
from typing import Any, Dict, List, Optional
import logging
import random
import time

import requests

from app import config
from app.data_model import PressureSample

logger = logging.getLogger("uvicorn.error")

BASE_PRESSURE = 1013.25  # standard sea-level pressure, hPa
SAMPLE_INTERVAL_MS = 3 * 60 * 60 * 1000  # 3-hourly, like the forecast API
DAY_MS = 24 * 60 * 60 * 1000


class WeatherSourceError(Exception):
    pass


class HistoryUnavailableError(WeatherSourceError):
    pass


def _now_ms() -> int:
    return int(time.time() * 1000)


class WeatherSource:
    """Supplies pressure observations. Implemented by a simulated and a live source."""

    name = "base"

    def get_current_pressure(self, lat: float, lon: float) -> PressureSample:
        raise NotImplementedError

    def get_forecast_samples(self, lat: float, lon: float) -> List[PressureSample]:
        raise NotImplementedError

    def get_historical(self, days: int = 7) -> List[PressureSample]:
        raise NotImplementedError


class SimulatedWeatherSource(WeatherSource):
    """Random data around standard pressure, for demos and offline use."""

    name = "mock"

    def __init__(self, seed: Optional[int] = None, forecast_days: int = 3):
        self.rng = random.Random(seed)
        self.forecast_days = forecast_days

    def _sample(self, timestamp_ms: int, pressure_spread: float, temp_spread: float, humidity_spread: float) -> PressureSample:
        return PressureSample(
            timestamp_ms=timestamp_ms,
            pressure=BASE_PRESSURE + (self.rng.random() - 0.5) * pressure_spread,
            temperature=20 + (self.rng.random() - 0.5) * temp_spread,
            humidity=50 + (self.rng.random() - 0.5) * humidity_spread,
        )

    def get_current_pressure(self, lat: float, lon: float) -> PressureSample:
        return self._sample(_now_ms(), 20, 15, 30)

    def get_forecast_samples(self, lat: float, lon: float) -> List[PressureSample]:
        """3-hourly samples from today's UTC midnight; each day drifts by up to ±5 hPa."""
        start = _now_ms() // DAY_MS * DAY_MS
        samples = []
        for day in range(self.forecast_days):
            day_offset = (self.rng.random() - 0.5) * 10
            for slot in range(DAY_MS // SAMPLE_INTERVAL_MS):
                sample = self._sample(start + day * DAY_MS + slot * SAMPLE_INTERVAL_MS, 2, 15, 30)
                sample.pressure += day_offset
                samples.append(sample)
        return samples

    def get_historical(self, days: int = 7) -> List[PressureSample]:
        """One sample per day for the last `days` days plus now, oldest first."""
        now = _now_ms()
        return [self._sample(now - i * DAY_MS, 15, 10, 20) for i in range(days, -1, -1)]


class OpenWeatherMapSource(WeatherSource):
    """Live data from the OpenWeatherMap 2.5 API (metric units)."""

    name = "live"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key or config.OPENWEATHER_API_KEY
        self.base_url = (base_url or config.OPENWEATHER_BASE_URL).rstrip("/")
        self.timeout = timeout or config.WEATHER_TIMEOUT_SECONDS
        self.session = session or requests.Session()

    def _get(self, endpoint: str, lat: float, lon: float) -> Dict[str, Any]:
        if not self.api_key:
            raise WeatherSourceError("OPENWEATHER_API_KEY is not set")

        url = f"{self.base_url}/{endpoint}"
        params = {"lat": lat, "lon": lon, "appid": self.api_key, "units": "metric"}
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.error(f"OpenWeatherMap request to /{endpoint} failed: {e}")
            raise WeatherSourceError(f"Weather API request failed: {e}") from e
        except ValueError as e:
            raise WeatherSourceError(f"Weather API returned invalid JSON: {e}") from e

    def get_current_pressure(self, lat: float, lon: float) -> PressureSample:
        return parse_observation(self._get("weather", lat, lon))

    def get_forecast_samples(self, lat: float, lon: float) -> List[PressureSample]:
        data = self._get("forecast", lat, lon)
        samples = transform_forecast_response(data)
        logger.info(f"Fetched {len(samples)} forecast samples for ({lat}, {lon})")
        return samples

    def get_historical(self, days: int = 7) -> List[PressureSample]:
        raise HistoryUnavailableError("The live weather source has no history endpoint")


def parse_observation(entry: Dict[str, Any]) -> PressureSample:
    """Map one OpenWeatherMap entry ({"dt": seconds, "main": {...}}) to a PressureSample."""
    try:
        main = entry["main"]
        return PressureSample(
            timestamp_ms=int(entry["dt"]) * 1000,
            pressure=float(main["pressure"]),
            temperature=float(main["temp"]),
            humidity=float(main["humidity"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise WeatherSourceError(f"Unexpected weather API payload: {e}") from e


def transform_forecast_response(data: Dict[str, Any]) -> List[PressureSample]:
    if not isinstance(data, dict) or not isinstance(data.get("list"), list):
        raise WeatherSourceError("Forecast response has no 'list' field")
    return [parse_observation(entry) for entry in data["list"]]


def get_weather_source(name: Optional[str] = None) -> WeatherSource:
    name = (name or config.WEATHER_SOURCE).lower()
    if name == "live":
        return OpenWeatherMapSource()
    if name == "mock":
        return SimulatedWeatherSource()
    raise ValueError(f"Unknown weather source: {name!r} (expected 'mock' or 'live')")
