from app.data_model import UserProfile, SYMPTOM_OPTIONS, TRIGGER_OPTIONS
from app.data_storage import save_user
import random
import uuid
from typing import List, Optional

PREFECTURES = ["Tokyo", "Osaka", "Aichi", "Fukuoka", "Hokkaido", "Okinawa", "Kyoto", "Miyagi"]


def generate_random_user(index: int, rng: Optional[random.Random] = None) -> UserProfile:
    rng = rng or random.Random()
    return UserProfile(
        user_id=f"mock_user_{index}_{uuid.UUID(int=rng.getrandbits(128)).hex[:6]}",
        name=f"Mock User {index}",
        prefecture=rng.choice(PREFECTURES),
        age=str(rng.randint(18, 70)),
        gender=rng.choice(["male", "female", "other"]),
        headache_frequency=rng.choice(["daily", "weekly", "monthly", "rarely"]),
        pressure_sensitivity=rng.randint(1, 5),
        common_symptoms=rng.sample(SYMPTOM_OPTIONS, k=rng.randint(1, 4)),
        triggers=rng.sample(TRIGGER_OPTIONS, k=rng.randint(1, 3)),
        notifications=rng.random() > 0.3,
    )


def generate_mock_profiles(count: int, seed: Optional[int] = None) -> List[UserProfile]:
    """Random candidate pool; the same seed always yields the same profiles."""
    rng = random.Random(seed)
    return [generate_random_user(i, rng) for i in range(count)]


def populate_profile_store(count: int = 10, seed: Optional[int] = None) -> List[UserProfile]:
    profiles = generate_mock_profiles(count, seed)
    for profile in profiles:
        save_user(profile)
        print(f"✅ Saved mock profile: {profile.user_id} ({profile.prefecture}, sensitivity {profile.pressure_sensitivity})")
    return profiles


if __name__ == "__main__":
    populate_profile_store()
