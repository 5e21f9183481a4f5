# display_utils.py

from datetime import datetime, timezone, tzinfo
from typing import Dict, List, Optional
import numpy as np
from app.data_model import PressureSample, DailyForecast

RISK_LEVEL_INFO: Dict[str, Dict[str, str]] = {
    "high": {
        "label": "Warning",
        "description": "Headaches are likely under these conditions",
        "color": "#FF4757",
    },
    "medium": {
        "label": "Caution",
        "description": "Watch for mild changes in how you feel",
        "color": "#FFA726",
    },
    "low": {
        "label": "Safe",
        "description": "Pressure is stable",
        "color": "#4CAF50",
    },
}


def format_pressure(pressure: float) -> str:
    return f"{pressure:.1f} hPa"


def format_temperature(temperature: float) -> str:
    return f"{temperature:.1f}°C"


def format_humidity(humidity: float) -> str:
    return f"{humidity:.0f}%"


def format_change(change: float) -> str:
    """Signed change, e.g. "+1.2" or "-0.4"; no sign for zero."""
    sign = "+" if change > 0 else ""
    return f"{sign}{change:.1f}"


def chart_label(timestamp_ms: int, tz: Optional[tzinfo] = timezone.utc) -> str:
    """Month/day label for a chart axis, e.g. "1/15". tz=None means local time."""
    dt = datetime.fromtimestamp(timestamp_ms / 1000.0, tz=timezone.utc)
    dt = dt.astimezone(tz) if tz is not None else dt.astimezone()
    return f"{dt.month}/{dt.day}"


def risk_info(risk_level: str) -> Dict[str, str]:
    if risk_level not in RISK_LEVEL_INFO:
        raise ValueError(f"Unknown risk level: {risk_level}")
    return RISK_LEVEL_INFO[risk_level]


def describe_forecast(day: DailyForecast) -> str:
    """One-line summary for a forecast row."""
    info = risk_info(day.risk_level)
    return (
        f"{day.date}: {format_pressure(day.pressure)} ({format_change(day.pressure_change)}), "
        f"{format_temperature(day.temperature)}, {format_humidity(day.humidity)}, "
        f"{info['label']} - {info['description']}"
    )


def summarize_history(samples: List[PressureSample]) -> Optional[Dict[str, float]]:
    """
    Average / max / min / range of pressure over a history series.
    Returns None for an empty series.
    """
    if not samples:
        return None
    pressures = np.array([s.pressure for s in samples], dtype=float)
    return {
        "average": round(float(pressures.mean()), 1),
        "max": round(float(pressures.max()), 1),
        "min": round(float(pressures.min()), 1),
        "range": round(float(pressures.max() - pressures.min()), 1),
    }
