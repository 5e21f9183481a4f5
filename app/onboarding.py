# app/onboarding.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Union
import uuid

from app.data_model import (
    UserProfile,
    GENDERS,
    HEADACHE_FREQUENCIES,
    InvalidProfileError,
)
from app.match_scorer import validate_profile

ONBOARDING_STEPS = [
    "basic_info",
    "headache_frequency",
    "pressure_sensitivity",
    "symptoms",
    "triggers",
    "notifications",
]

SENSITIVITY_LABELS = {
    1: "not sensitive at all",
    2: "not very sensitive",
    3: "average",
    4: "somewhat sensitive",
    5: "very sensitive",
}


class OnboardingError(ValueError):
    pass


@dataclass
class ProfileDraft:
    name: str = ""
    prefecture: str = ""
    age: Union[int, str] = ""
    gender: str = ""
    headache_frequency: str = ""
    pressure_sensitivity: int = 3
    common_symptoms: List[str] = field(default_factory=list)
    triggers: List[str] = field(default_factory=list)
    notifications: bool = True


def _check_basic_info(draft: ProfileDraft) -> None:
    if draft.gender not in GENDERS:
        raise OnboardingError(f"Unknown gender: {draft.gender!r}")
    age = str(draft.age).strip()
    if age and not age.isdigit():
        raise OnboardingError(f"Age must be a whole number, got {draft.age!r}")


def _check_frequency(draft: ProfileDraft) -> None:
    if draft.headache_frequency not in HEADACHE_FREQUENCIES:
        raise OnboardingError(f"Unknown headache frequency: {draft.headache_frequency!r}")


def _check_sensitivity(draft: ProfileDraft) -> None:
    # Same rule as matching
    try:
        validate_profile(UserProfile(pressure_sensitivity=draft.pressure_sensitivity))
    except InvalidProfileError as e:
        raise OnboardingError(str(e)) from e


def _no_check(draft: ProfileDraft) -> None:
    return None


STEP_GUARDS: Dict[str, Callable[[ProfileDraft], None]] = {
    "basic_info": _check_basic_info,
    "headache_frequency": _check_frequency,
    "pressure_sensitivity": _check_sensitivity,
    "symptoms": _no_check,
    "triggers": _no_check,
    "notifications": _no_check,
}


class OnboardingWizard:
    """
    Step-by-step profile collection.

    The wizard moves forward only when the current step's guard passes,
    and can always move back. Finishing requires a non-empty name and
    yields the completed UserProfile.
    """

    def __init__(self, draft: Optional[ProfileDraft] = None):
        self.draft = draft or ProfileDraft()
        self.step = 0
        self.completed = False

    @property
    def total_steps(self) -> int:
        return len(ONBOARDING_STEPS)

    @property
    def current_step(self) -> str:
        return ONBOARDING_STEPS[self.step]

    @property
    def is_last_step(self) -> bool:
        return self.step == self.total_steps - 1

    def progress(self) -> float:
        return (self.step + 1) / self.total_steps

    def sensitivity_label(self) -> str:
        return SENSITIVITY_LABELS.get(self.draft.pressure_sensitivity, "")

    def update(self, **fields) -> None:
        for key, value in fields.items():
            if not hasattr(self.draft, key):
                raise OnboardingError(f"Unknown profile field: {key}")
            setattr(self.draft, key, value)

    def toggle_symptom(self, symptom: str) -> None:
        _toggle(self.draft.common_symptoms, symptom)

    def toggle_trigger(self, trigger: str) -> None:
        _toggle(self.draft.triggers, trigger)

    def next_step(self) -> Union[int, UserProfile]:
        """
        Validate the current step and advance.
        On the last step this completes the wizard and returns the profile.
        """
        STEP_GUARDS[self.current_step](self.draft)
        if self.is_last_step:
            return self.complete()
        self.step += 1
        return self.step

    def back(self) -> int:
        if self.step > 0:
            self.step -= 1
        return self.step

    def complete(self) -> UserProfile:
        for step in ONBOARDING_STEPS:
            STEP_GUARDS[step](self.draft)
        if not self.draft.name.strip():
            raise OnboardingError("Please enter your name")

        age = str(self.draft.age).strip()
        self.completed = True
        return UserProfile(
            user_id=uuid.uuid4().hex,
            name=self.draft.name.strip(),
            prefecture=self.draft.prefecture,
            age=int(age) if age else "",
            gender=self.draft.gender,
            headache_frequency=self.draft.headache_frequency,
            pressure_sensitivity=self.draft.pressure_sensitivity,
            common_symptoms=list(self.draft.common_symptoms),
            triggers=list(self.draft.triggers),
            notifications=self.draft.notifications,
        )


def _toggle(items: List[str], value: str) -> None:
    if value in items:
        items.remove(value)
    else:
        items.append(value)


def run_onboarding(answers: Dict) -> UserProfile:
    """Walk every step with the given answers and return the finished profile."""
    wizard = OnboardingWizard()
    wizard.update(**answers)
    result = wizard.next_step()
    while not isinstance(result, UserProfile):
        result = wizard.next_step()
    return result
