import random

from app import data_storage
from app.generate_mock_users import generate_mock_profiles, populate_profile_store
from app.match_scorer import validate_profile


def test_profiles_are_valid_for_matching():
    profiles = generate_mock_profiles(20, seed=1)
    assert len(profiles) == 20
    for profile in profiles:
        validate_profile(profile)
        assert profile.common_symptoms
        assert profile.triggers


def test_same_seed_same_profiles():
    assert generate_mock_profiles(5, seed=11) == generate_mock_profiles(5, seed=11)


def test_global_random_state_is_untouched():
    random.seed(123)
    expected = random.random()
    random.seed(123)
    generate_mock_profiles(5, seed=11)
    assert random.random() == expected


def test_populate_profile_store(monkeypatch, tmp_path):
    monkeypatch.setattr(data_storage, "USERS_FILE", tmp_path / "users.json")
    profiles = populate_profile_store(count=3, seed=2)
    assert [u.user_id for u in data_storage.load_all_users()] == [p.user_id for p in profiles]
