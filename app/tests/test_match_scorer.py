import pytest
from app.match_scorer import calculate_match_score, validate_profile
from app.data_model import UserProfile, InvalidProfileError
from app.generate_mock_users import generate_mock_profiles


def test_identical_sensitivity_no_overlap():
    a = UserProfile(pressure_sensitivity=3, common_symptoms=["headache"], triggers=["stress"])
    b = UserProfile(pressure_sensitivity=3, common_symptoms=["nausea"], triggers=["alcohol"])
    assert calculate_match_score(a, b) == 25


def test_shared_symptoms_and_triggers():
    a = UserProfile(
        pressure_sensitivity=4,
        common_symptoms=["headache", "stiff shoulders", "dizziness"],
        triggers=["pressure change", "stress", "lack of sleep"],
    )
    b = UserProfile(
        pressure_sensitivity=5,
        common_symptoms=["headache", "nausea"],
        triggers=["pressure change", "weather change", "fatigue"],
    )
    # 1 symptom (10) + 1 trigger (8) + diff 1 (20)
    assert calculate_match_score(a, b) == 38


def test_maximal_sensitivity_difference_is_the_floor():
    a = UserProfile(pressure_sensitivity=1)
    b = UserProfile(pressure_sensitivity=5)
    assert calculate_match_score(a, b) == 5


def test_floor_holds_for_every_sensitivity_pair():
    for s1 in range(1, 6):
        for s2 in range(1, 6):
            score = calculate_match_score(
                UserProfile(pressure_sensitivity=s1), UserProfile(pressure_sensitivity=s2)
            )
            assert score >= 5


def test_duplicate_entries_count_once():
    a = UserProfile(pressure_sensitivity=2, common_symptoms=["headache", "headache"])
    b = UserProfile(pressure_sensitivity=2, common_symptoms=["headache"])
    assert calculate_match_score(a, b) == 35
    assert calculate_match_score(b, a) == 35


def test_score_is_symmetric():
    users = generate_mock_profiles(12, seed=7)
    for a in users:
        for b in users:
            assert calculate_match_score(a, b) == calculate_match_score(b, a)


@pytest.mark.parametrize("sensitivity", [0, 6, -1, "3", 3.5, True, None])
def test_out_of_range_sensitivity_is_rejected(sensitivity):
    bad = UserProfile(pressure_sensitivity=sensitivity)
    good = UserProfile(pressure_sensitivity=3)
    with pytest.raises(InvalidProfileError):
        calculate_match_score(good, bad)
    with pytest.raises(InvalidProfileError):
        calculate_match_score(bad, good)


def test_validate_profile_accepts_bounds():
    validate_profile(UserProfile(pressure_sensitivity=1))
    validate_profile(UserProfile(pressure_sensitivity=5))
