# match_scorer.py

from typing import Dict
from app.data_model import UserProfile, InvalidProfileError, MIN_SENSITIVITY, MAX_SENSITIVITY

# Points per shared symptom / shared trigger / step of sensitivity closeness
MATCH_WEIGHTS: Dict[str, int] = {
    "symptom": 10,
    "trigger": 8,
    "sensitivity": 5,
}

SYMPTOM_WEIGHT = MATCH_WEIGHTS["symptom"]
TRIGGER_WEIGHT = MATCH_WEIGHTS["trigger"]
SENSITIVITY_WEIGHT = MATCH_WEIGHTS["sensitivity"]


def validate_profile(profile: UserProfile) -> None:
    """
    Reject profiles whose pressure sensitivity is not an integer in 1-5.
    Out-of-range values are never clamped.
    """
    sensitivity = profile.pressure_sensitivity
    if isinstance(sensitivity, bool) or not isinstance(sensitivity, int):
        raise InvalidProfileError(
            f"pressure_sensitivity must be an integer, got {sensitivity!r}"
        )
    if not MIN_SENSITIVITY <= sensitivity <= MAX_SENSITIVITY:
        raise InvalidProfileError(
            f"pressure_sensitivity must be between {MIN_SENSITIVITY} and {MAX_SENSITIVITY}, got {sensitivity}"
        )


def calculate_match_score(subject: UserProfile, candidate: UserProfile) -> int:
    """
    Computes how similar a candidate is to the subject based on:
      - Shared symptoms (10 points each)
      - Shared triggers (8 points each)
      - Closeness of pressure sensitivity (25 points when equal, down to 5)

    Symptoms and triggers are compared as sets, so the score is symmetric.
    """
    validate_profile(subject)
    validate_profile(candidate)

    score = 0

    candidate_symptoms = set(candidate.common_symptoms or [])
    for symptom in set(subject.common_symptoms or []):
        if symptom in candidate_symptoms:
            score += SYMPTOM_WEIGHT

    candidate_triggers = set(candidate.triggers or [])
    for trigger in set(subject.triggers or []):
        if trigger in candidate_triggers:
            score += TRIGGER_WEIGHT

    # Always added: 0 difference -> 25, 4 -> 5
    sensitivity_diff = abs(subject.pressure_sensitivity - candidate.pressure_sensitivity)
    score += (MAX_SENSITIVITY - sensitivity_diff) * SENSITIVITY_WEIGHT

    return score
