# forecast_aggregator.py

from collections import defaultdict
from datetime import datetime, timezone, tzinfo
from typing import Dict, List, Optional, Sequence

import numpy as np

from app.data_model import PressureSample, DailyForecast, ChartPoint
from app.display_utils import chart_label

FORECAST_DAYS = 3  # the app shows a 3-day outlook

# |pressure change| in hPa; comparisons are strictly "greater than"
HIGH_RISK_CHANGE = 6.0
MEDIUM_RISK_CHANGE = 3.0


def classify_risk(pressure_change: float) -> str:
    change = abs(pressure_change)
    if change > HIGH_RISK_CHANGE:
        return "high"
    elif change > MEDIUM_RISK_CHANGE:
        return "medium"
    return "low"


def sample_datetime(timestamp_ms: int, tz: Optional[tzinfo] = timezone.utc) -> datetime:
    """
    Convert a Unix millisecond timestamp to an aware datetime.
    tz=None means the machine's local timezone.
    """
    dt = datetime.fromtimestamp(timestamp_ms / 1000.0, tz=timezone.utc)
    return dt.astimezone(tz) if tz is not None else dt.astimezone()


def sample_date(timestamp_ms: int, tz: Optional[tzinfo] = timezone.utc) -> str:
    return sample_datetime(timestamp_ms, tz).date().isoformat()


def group_samples_by_date(
    samples: Sequence[PressureSample],
    tz: Optional[tzinfo] = timezone.utc,
) -> Dict[str, List[PressureSample]]:
    """Bucket samples by calendar date (YYYY-MM-DD) in the given timezone."""
    groups: Dict[str, List[PressureSample]] = defaultdict(list)
    for sample in samples:
        groups[sample_date(sample.timestamp_ms, tz)].append(sample)
    return dict(groups)


def aggregate_forecast(
    samples: Sequence[PressureSample],
    tz: Optional[tzinfo] = timezone.utc,
    max_days: int = FORECAST_DAYS,
) -> List[DailyForecast]:
    """
    Turn a raw time series into daily summaries:
      - mean pressure, temperature and humidity per date
      - pressure change vs. the previous date present in the sequence (0 for the first)
      - risk level from the size of that change
    Only the first `max_days` dates are returned.
    """
    groups = group_samples_by_date(samples, tz)

    forecast: List[DailyForecast] = []
    previous_pressure: Optional[float] = None

    # ISO dates sort chronologically as strings
    for date in sorted(groups):
        day_samples = groups[date]
        pressure = float(np.mean([s.pressure for s in day_samples]))
        temperature = float(np.mean([s.temperature for s in day_samples]))
        humidity = float(np.mean([s.humidity for s in day_samples]))

        pressure_change = 0.0 if previous_pressure is None else pressure - previous_pressure
        previous_pressure = pressure

        forecast.append(DailyForecast(
            date=date,
            pressure=pressure,
            pressure_change=pressure_change,
            risk_level=classify_risk(pressure_change),
            temperature=temperature,
            humidity=humidity,
        ))

    return forecast[:max(max_days, 0)]


def build_chart_points(
    samples: Sequence[PressureSample],
    tz: Optional[tzinfo] = timezone.utc,
) -> List[ChartPoint]:
    """One chart point per raw sample; no date grouping."""
    points = []
    for sample in samples:
        points.append(ChartPoint(
            timestamp_ms=sample.timestamp_ms,
            label=chart_label(sample.timestamp_ms, tz),
            pressure=sample.pressure,
            temperature=sample.temperature,
            humidity=sample.humidity,
        ))
    return points
