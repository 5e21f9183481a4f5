from dataclasses import asdict
from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Optional, Union
import uuid
import logging

from app import config
from app.community_service import generate_community_posts
from app.data_model import UserProfile, InvalidProfileError
from app.data_storage import get_user, save_user, save_record, load_records
from app.display_utils import describe_forecast, risk_info, summarize_history
from app.forecast_aggregator import aggregate_forecast, build_chart_points
from app.matching_service import find_similar_users, StaticCandidateSource, StoredCandidateSource
from app.onboarding import run_onboarding, OnboardingError
from app.record_service import create_record, RecordValidationError
from app.weather_service import (
    WeatherSource,
    WeatherSourceError,
    HistoryUnavailableError,
    get_weather_source,
)

app = FastAPI()

# -----------------------------
# Middleware
# -----------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # replace "*" with the app's origin in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger = logging.getLogger("uvicorn.error")


@app.get("/")
@app.head("/")
def root():
    return {"message": "Headache Tracker API is running"}


def get_source() -> WeatherSource:
    return get_weather_source()


# -----------------------------
# Request models
# -----------------------------
class ProfileInput(BaseModel):
    user_id: Optional[str] = None
    name: str = ""
    prefecture: str = ""
    age: Union[int, str] = ""
    gender: str = ""
    headache_frequency: str = ""
    pressure_sensitivity: int = Field(3, ge=1, le=5)
    common_symptoms: List[str] = Field(default_factory=list)
    triggers: List[str] = Field(default_factory=list)
    notifications: bool = True

    def to_profile(self) -> UserProfile:
        return UserProfile(
            user_id=self.user_id or "",
            name=self.name,
            prefecture=self.prefecture,
            age=self.age,
            gender=self.gender,
            headache_frequency=self.headache_frequency,
            pressure_sensitivity=self.pressure_sensitivity,
            common_symptoms=list(self.common_symptoms),
            triggers=list(self.triggers),
            notifications=self.notifications,
        )


class OnboardingInput(BaseModel):
    name: str = ""
    prefecture: str = ""
    age: Union[int, str] = ""
    gender: str = ""
    headache_frequency: str = ""
    pressure_sensitivity: int = 3
    common_symptoms: List[str] = Field(default_factory=list)
    triggers: List[str] = Field(default_factory=list)
    notifications: bool = True


class RecordInput(BaseModel):
    severity: int = 0
    symptoms: List[str] = Field(default_factory=list)
    notes: Optional[str] = None


# -----------------------------
# Profiles & matching
# -----------------------------
@app.post("/users")
def register_user(profile_input: ProfileInput):
    profile = profile_input.to_profile()
    if not profile.user_id:
        profile.user_id = uuid.uuid4().hex
    save_user(profile)
    logger.info(f"User registered: {profile.user_id}")
    return asdict(profile)


@app.get("/users/{user_id}")
def read_user(user_id: str):
    profile = get_user(user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="User not found")
    return asdict(profile)


def _ranked_response(subject: UserProfile, source, limit: int) -> dict:
    try:
        matches = find_similar_users(subject, source=source, limit=limit)
    except InvalidProfileError as e:
        logger.warning(f"Matching rejected an invalid profile: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Error while matching user {subject.user_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error. Please try again later.")
    return {
        "user_id": subject.user_id or None,
        "matches": [{"user": asdict(m.profile), "score": m.score} for m in matches],
    }


@app.get("/matches/{user_id}")
def get_matches(user_id: str, limit: int = Query(config.MATCH_LIMIT, ge=1, le=100)):
    subject = get_user(user_id)
    if subject is None:
        raise HTTPException(status_code=404, detail="User not found")
    return _ranked_response(subject, StoredCandidateSource(), limit)


@app.post("/matches")
def match_profile(profile_input: ProfileInput, limit: int = Query(config.MATCH_LIMIT, ge=1, le=100)):
    return _ranked_response(profile_input.to_profile(), StaticCandidateSource(), limit)


@app.post("/onboarding/complete")
def complete_onboarding(answers: OnboardingInput):
    try:
        profile = run_onboarding(answers.dict())
    except OnboardingError as e:
        raise HTTPException(status_code=400, detail=str(e))
    save_user(profile)
    return asdict(profile)


# -----------------------------
# Weather
# -----------------------------
@app.get("/weather/current")
def current_pressure(
    lat: float = config.DEFAULT_LAT,
    lon: float = config.DEFAULT_LON,
    source: WeatherSource = Depends(get_source),
):
    try:
        sample = source.get_current_pressure(lat, lon)
    except WeatherSourceError as e:
        logger.error(f"Current pressure unavailable: {e}")
        raise HTTPException(status_code=502, detail="Weather data temporarily unavailable.")
    return asdict(sample)


@app.get("/weather/forecast")
def forecast(
    lat: float = config.DEFAULT_LAT,
    lon: float = config.DEFAULT_LON,
    source: WeatherSource = Depends(get_source),
):
    try:
        samples = source.get_forecast_samples(lat, lon)
    except WeatherSourceError as e:
        logger.error(f"Forecast unavailable: {e}")
        raise HTTPException(status_code=502, detail="Weather data temporarily unavailable.")
    except Exception as e:
        logger.error(f"Error in /weather/forecast endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error. Please try again later.")

    days = aggregate_forecast(samples, tz=config.resolve_timezone())
    return {
        "source": source.name,
        "timezone": config.FORECAST_TIMEZONE,
        "forecast": [
            dict(asdict(day), risk=risk_info(day.risk_level), summary=describe_forecast(day))
            for day in days
        ],
    }


@app.get("/weather/history")
def history(days: int = Query(7, ge=1, le=31), source: WeatherSource = Depends(get_source)):
    try:
        samples = source.get_historical(days)
    except HistoryUnavailableError as e:
        raise HTTPException(status_code=501, detail=str(e))
    except WeatherSourceError as e:
        logger.error(f"History unavailable: {e}")
        raise HTTPException(status_code=502, detail="Weather data temporarily unavailable.")

    points = build_chart_points(samples, tz=config.resolve_timezone())
    return {
        "points": [asdict(p) for p in points],
        "summary": summarize_history(samples),
    }


# -----------------------------
# Headache log & community
# -----------------------------
@app.post("/records", status_code=201)
def add_record(record_input: RecordInput):
    try:
        record = create_record(record_input.severity, record_input.symptoms, record_input.notes)
    except RecordValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    save_record(record)
    return asdict(record)


@app.get("/records")
def list_records():
    records = sorted(load_records(), key=lambda r: r.timestamp_ms, reverse=True)
    return [asdict(r) for r in records]


@app.get("/community/posts")
def community_posts(count: int = Query(20, ge=1, le=100), seed: Optional[int] = None):
    return [asdict(p) for p in generate_community_posts(count=count, seed=seed)]
