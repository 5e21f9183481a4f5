import pytest
from app.data_model import UserProfile
from app.match_scorer import calculate_match_score
from app.onboarding import OnboardingWizard, OnboardingError, ONBOARDING_STEPS, run_onboarding


def test_walks_through_all_steps():
    wizard = OnboardingWizard()
    wizard.update(name="Aki", age="29", gender="female")
    assert wizard.current_step == "basic_info"

    for expected in ONBOARDING_STEPS[1:]:
        wizard.next_step()
        assert wizard.current_step == expected

    assert wizard.is_last_step
    profile = wizard.next_step()
    assert isinstance(profile, UserProfile)
    assert profile.name == "Aki"
    assert profile.age == 29
    assert profile.user_id
    assert wizard.completed


def test_back_stops_at_first_step():
    wizard = OnboardingWizard()
    wizard.next_step()
    assert wizard.back() == 0
    assert wizard.back() == 0


def test_progress():
    wizard = OnboardingWizard()
    assert wizard.progress() == pytest.approx(1 / 6)
    wizard.next_step()
    assert wizard.progress() == pytest.approx(2 / 6)


def test_guard_blocks_invalid_step():
    wizard = OnboardingWizard()
    wizard.update(age="twenty")
    with pytest.raises(OnboardingError):
        wizard.next_step()
    assert wizard.step == 0


def test_sensitivity_guard():
    wizard = OnboardingWizard()
    wizard.next_step()
    wizard.next_step()
    wizard.update(pressure_sensitivity=7)
    with pytest.raises(OnboardingError):
        wizard.next_step()


def test_completion_requires_name():
    wizard = OnboardingWizard()
    wizard.update(name="   ")
    with pytest.raises(OnboardingError):
        wizard.complete()
    assert not wizard.completed


def test_toggles():
    wizard = OnboardingWizard()
    wizard.toggle_symptom("headache")
    wizard.toggle_symptom("dizziness")
    wizard.toggle_symptom("headache")
    wizard.toggle_trigger("stress")
    assert wizard.draft.common_symptoms == ["dizziness"]
    assert wizard.draft.triggers == ["stress"]


def test_unknown_field_rejected():
    with pytest.raises(OnboardingError):
        OnboardingWizard().update(favourite_colour="blue")


def test_run_onboarding():
    profile = run_onboarding({
        "name": "Ren",
        "prefecture": "Osaka",
        "headache_frequency": "monthly",
        "pressure_sensitivity": 5,
        "common_symptoms": ["headache"],
        "triggers": ["pressure change"],
        "notifications": False,
    })
    assert profile.prefecture == "Osaka"
    assert profile.age == ""
    assert profile.pressure_sensitivity == 5
    assert profile.notifications is False


@pytest.mark.parametrize("sensitivity", [3.0, True, "3", 0, 6])
def test_non_integer_or_out_of_range_sensitivity_blocks_completion(sensitivity):
    wizard = OnboardingWizard()
    wizard.update(name="Aki", pressure_sensitivity=sensitivity)
    with pytest.raises(OnboardingError):
        wizard.complete()
    assert not wizard.completed


def test_completed_profile_can_be_matched():
    wizard = OnboardingWizard()
    wizard.update(name="Aki", pressure_sensitivity=4)
    profile = wizard.complete()
    assert calculate_match_score(profile, UserProfile(pressure_sensitivity=4)) == 25


def test_sensitivity_label():
    wizard = OnboardingWizard()
    assert wizard.sensitivity_label() == "average"
    wizard.update(pressure_sensitivity=5)
    assert wizard.sensitivity_label() == "very sensitive"
