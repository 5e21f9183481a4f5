# data_model.py

from dataclasses import dataclass, field
from typing import List, Optional, Union

# --- Vocabularies ---

GENDERS = ["male", "female", "other", ""]  # "" = not answered
HEADACHE_FREQUENCIES = ["daily", "weekly", "monthly", "rarely", ""]

MIN_SENSITIVITY = 1
MAX_SENSITIVITY = 5

SYMPTOM_OPTIONS = [
    "headache", "dizziness", "stiff shoulders", "drowsiness",
    "joint pain", "fatigue", "nausea", "tinnitus",
]

TRIGGER_OPTIONS = [
    "pressure change", "weather change", "stress", "lack of sleep",
    "fatigue", "menstrual cycle", "diet", "alcohol",
]


class InvalidProfileError(ValueError):
    """Raised when a profile cannot be used for matching."""


# --- Profile Models ---

@dataclass
class UserProfile:
    prefecture: str = ""
    age: Union[int, str] = ""
    gender: str = ""               # see GENDERS
    headache_frequency: str = ""   # see HEADACHE_FREQUENCIES
    pressure_sensitivity: int = 3  # 1 (not sensitive) to 5 (very sensitive)
    common_symptoms: List[str] = field(default_factory=list)
    triggers: List[str] = field(default_factory=list)
    notifications: bool = True

    user_id: str = ""
    name: str = ""


@dataclass
class MatchResult:
    profile: UserProfile
    score: int


# --- Weather Models ---

@dataclass
class PressureSample:
    timestamp_ms: int    # Unix epoch milliseconds
    pressure: float      # hPa
    temperature: float   # °C
    humidity: float      # percent, 0-100


@dataclass
class DailyForecast:
    date: str               # e.g., "2024-01-01"
    pressure: float
    pressure_change: float  # vs. the previous day in the same sequence
    risk_level: str         # "low", "medium" or "high"
    temperature: float
    humidity: float


@dataclass
class ChartPoint:
    timestamp_ms: int
    label: str  # e.g., "1/15"
    pressure: float
    temperature: float
    humidity: float


# --- Log and Community Models ---

@dataclass
class HeadacheRecord:
    record_id: str
    timestamp_ms: int
    severity: int  # 0 (none) to 5 (severe)
    symptoms: List[str] = field(default_factory=list)
    notes: Optional[str] = None


@dataclass
class WeatherSnapshot:
    condition: str  # "sunny", "cloudy", "rainy" or "snowy"
    pressure: float
    pressure_change: float


@dataclass
class CommunityPost:
    post_id: str
    user_name: str
    user_icon: str
    prefecture: str
    posted_ago: str  # e.g., "3h ago"
    weather: WeatherSnapshot
    symptoms: List[str]
    note: str
    empathy_count: int = 0
    is_empathized: bool = False
