# app/config.py
import os
from datetime import timezone, tzinfo
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

load_dotenv()  # Load .env variables before reading them

WEATHER_SOURCE = os.getenv("WEATHER_SOURCE", "mock").strip().lower()  # "mock" or "live"
OPENWEATHER_API_KEY = os.getenv("OPENWEATHER_API_KEY")
OPENWEATHER_BASE_URL = os.getenv("OPENWEATHER_BASE_URL", "https://api.openweathermap.org/data/2.5")
WEATHER_TIMEOUT_SECONDS = float(os.getenv("WEATHER_TIMEOUT_SECONDS", "10"))

# Calendar-date bucketing for the daily forecast: "UTC", "local" or an IANA name
FORECAST_TIMEZONE = os.getenv("FORECAST_TIMEZONE", "UTC")

# Tokyo
DEFAULT_LAT = float(os.getenv("DEFAULT_LAT", "35.6895"))
DEFAULT_LON = float(os.getenv("DEFAULT_LON", "139.6917"))

MATCH_LIMIT = int(os.getenv("MATCH_LIMIT", "10"))

DATA_DIR = Path(os.getenv("DATA_DIR", str(Path(__file__).parent)))


def resolve_timezone(name: Optional[str] = None) -> Optional[tzinfo]:
    """
    Map a timezone setting to a tzinfo.
    "local" returns None, meaning the machine's local timezone.
    """
    name = (name or FORECAST_TIMEZONE).strip()
    if name.upper() == "UTC":
        return timezone.utc
    if name.lower() == "local":
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone setting: {name!r}") from e
