from zoneinfo import ZoneInfo

import pytest
from app.data_model import PressureSample, DailyForecast
from app.display_utils import (
    format_pressure,
    format_temperature,
    format_humidity,
    format_change,
    chart_label,
    risk_info,
    describe_forecast,
    summarize_history,
)


def test_formatters():
    assert format_pressure(1013.25) == "1013.2 hPa"
    assert format_temperature(20.46) == "20.5°C"
    assert format_humidity(49.6) == "50%"


def test_format_change_sign():
    assert format_change(1.24) == "+1.2"
    assert format_change(-0.4) == "-0.4"
    assert format_change(0) == "0.0"


def test_risk_info():
    assert risk_info("high")["label"] == "Warning"
    assert risk_info("low")["description"] == "Pressure is stable"
    with pytest.raises(ValueError):
        risk_info("extreme")


def test_describe_forecast():
    day = DailyForecast(date="2024-01-02", pressure=1004.0, pressure_change=-7.0,
                        risk_level="high", temperature=5.0, humidity=70.0)
    assert describe_forecast(day) == "2024-01-02: 1004.0 hPa (-7.0), 5.0°C, 70%, Warning - Headaches are likely under these conditions"


def test_summarize_history():
    samples = [PressureSample(timestamp_ms=i, pressure=p, temperature=20, humidity=50)
               for i, p in enumerate([1000.0, 1010.0, 1005.0])]
    assert summarize_history(samples) == {"average": 1005.0, "max": 1010.0, "min": 1000.0, "range": 10.0}


def test_summarize_empty_history():
    assert summarize_history([]) is None


def test_chart_label():
    # 2024-01-15T12:00:00Z
    assert chart_label(1705320000000) == "1/15"


def test_chart_label_follows_timezone_across_midnight():
    # 2024-01-31T20:00:00Z is already February 1st in Tokyo
    assert chart_label(1706731200000) == "1/31"
    assert chart_label(1706731200000, tz=ZoneInfo("Asia/Tokyo")) == "2/1"
