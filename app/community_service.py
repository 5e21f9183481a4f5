# app/community_service.py
from typing import List, Optional
import random

from app.data_model import CommunityPost, WeatherSnapshot

DUMMY_NOTES = [
    "My head felt heavy all day and I couldn't focus on anything.",
    "Bad dizziness since this morning, probably the pressure.",
    "Stiff shoulders, can barely move them.",
    "My joints always ache when the seasons change.",
    "Feeling nauseous and no appetite. Just going to rest.",
    "Chills and feeling off today.",
    "Not sure if it's stress, but my skin is acting up.",
]

USER_NAMES = ["Sky Walker", "Rain Drop", "Cloud Nine", "Calm Breeze"]
PREFECTURES = ["Tokyo", "Osaka", "Aichi", "Fukuoka", "Hokkaido", "Okinawa"]
USER_ICONS = ["🐶", "😺", "🐼", "🐻", "🐰"]
CONDITIONS = ["sunny", "cloudy", "rainy"]

POST_SYMPTOMS = [
    "headache", "dizziness", "stiff shoulders", "drowsiness", "joint pain", "fatigue",
    "nausea", "tinnitus", "fever", "loss of appetite", "rough skin",
]


def generate_community_posts(count: int = 20, seed: Optional[int] = None) -> List[CommunityPost]:
    """Anonymized demo feed; each post carries 1-3 symptoms and a weather snapshot."""
    rng = random.Random(seed)
    posts = []
    for i in range(count):
        symptoms = rng.sample(POST_SYMPTOMS, k=rng.randint(1, 3))
        posts.append(CommunityPost(
            post_id=f"post-{i}",
            user_name=rng.choice(USER_NAMES),
            user_icon=rng.choice(USER_ICONS),
            prefecture=rng.choice(PREFECTURES),
            posted_ago=f"{rng.randint(1, 10)}h ago",
            weather=WeatherSnapshot(
                condition=rng.choice(CONDITIONS),
                pressure=round(rng.uniform(995.0, 1030.0), 1),
                pressure_change=round(rng.uniform(-5.0, 5.0), 1),
            ),
            symptoms=symptoms,
            note=rng.choice(DUMMY_NOTES),
            empathy_count=rng.randint(0, 49),
            is_empathized=rng.random() > 0.5,
        ))
    return posts


def toggle_empathy(post: CommunityPost) -> CommunityPost:
    if post.is_empathized:
        post.empathy_count = max(post.empathy_count - 1, 0)
    else:
        post.empathy_count += 1
    post.is_empathized = not post.is_empathized
    return post
