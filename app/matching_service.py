# app/matching_service.py
from __future__ import annotations
from typing import List, Optional, Sequence

from app.data_model import UserProfile, MatchResult
from app.data_storage import load_all_users
from app.match_scorer import calculate_match_score

DEFAULT_MATCH_LIMIT = 10

# Sample directory of other users, used until a remote directory exists
SAMPLE_PROFILES: List[UserProfile] = [
    UserProfile(
        user_id="sample-1",
        prefecture="Tokyo",
        age="25",
        gender="female",
        headache_frequency="weekly",
        pressure_sensitivity=4,
        common_symptoms=["headache", "stiff shoulders", "dizziness"],
        triggers=["pressure change", "stress", "lack of sleep"],
        notifications=True,
    ),
    UserProfile(
        user_id="sample-2",
        prefecture="Osaka",
        age="32",
        gender="male",
        headache_frequency="monthly",
        pressure_sensitivity=5,
        common_symptoms=["headache", "nausea"],
        triggers=["pressure change", "weather change", "fatigue"],
        notifications=True,
    ),
    UserProfile(
        user_id="sample-3",
        prefecture="Fukuoka",
        age="41",
        gender="female",
        headache_frequency="daily",
        pressure_sensitivity=3,
        common_symptoms=["headache", "drowsiness", "joint pain"],
        triggers=["weather change", "menstrual cycle"],
        notifications=False,
    ),
    UserProfile(
        user_id="sample-4",
        prefecture="Hokkaido",
        age="57",
        gender="other",
        headache_frequency="rarely",
        pressure_sensitivity=1,
        common_symptoms=["tinnitus"],
        triggers=["alcohol"],
        notifications=False,
    ),
]


class CandidateSource:
    """Supplies the pool of profiles a subject is matched against."""

    def get_candidates(self, subject: UserProfile) -> List[UserProfile]:
        raise NotImplementedError


class StaticCandidateSource(CandidateSource):
    def __init__(self, profiles: Optional[Sequence[UserProfile]] = None):
        self.profiles = list(SAMPLE_PROFILES if profiles is None else profiles)

    def get_candidates(self, subject: UserProfile) -> List[UserProfile]:
        return list(self.profiles)


class StoredCandidateSource(CandidateSource):
    """Candidates are every profile in the JSON profile store."""

    def get_candidates(self, subject: UserProfile) -> List[UserProfile]:
        return load_all_users()


def rank_candidates(
    subject: UserProfile,
    candidates: Sequence[UserProfile],
    limit: int = DEFAULT_MATCH_LIMIT,
) -> List[MatchResult]:
    """
    Score every candidate against the subject, drop non-positive scores and
    return the top `limit` results, highest score first.
    Ties keep the order in which candidates were given.
    """
    results: List[MatchResult] = []
    for candidate in candidates:
        # The subject itself can be part of a stored pool
        if subject.user_id and candidate.user_id == subject.user_id:
            continue
        score = calculate_match_score(subject, candidate)
        if score > 0:
            results.append(MatchResult(profile=candidate, score=score))

    # sorted() is stable, also with reverse=True
    results = sorted(results, key=lambda r: r.score, reverse=True)
    return results[:max(limit, 0)]


def find_similar_users(
    subject: UserProfile,
    source: Optional[CandidateSource] = None,
    limit: int = DEFAULT_MATCH_LIMIT,
) -> List[MatchResult]:
    """Find users with a similar symptom profile, best match first."""
    source = source or StaticCandidateSource()
    return rank_candidates(subject, source.get_candidates(subject), limit=limit)
