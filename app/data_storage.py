# data_storage.py

import json
import logging
import os
from typing import List, Optional
from app.config import DATA_DIR
from app.data_model import UserProfile, HeadacheRecord

logger = logging.getLogger("uvicorn.error")

USERS_FILE = DATA_DIR / "users.json"
RECORDS_FILE = DATA_DIR / "records.json"


def user_to_dict(user: UserProfile) -> dict:
    return {
        "user_id": user.user_id,
        "name": user.name,
        "prefecture": user.prefecture,
        "age": user.age,
        "gender": user.gender,
        "headache_frequency": user.headache_frequency,
        "pressure_sensitivity": user.pressure_sensitivity,
        "common_symptoms": list(user.common_symptoms),
        "triggers": list(user.triggers),
        "notifications": user.notifications,
    }


def dict_to_user(data: dict) -> UserProfile:
    return UserProfile(
        user_id=data.get("user_id", ""),
        name=data.get("name", ""),
        prefecture=data.get("prefecture", ""),
        age=data.get("age", ""),
        gender=data.get("gender", ""),
        headache_frequency=data.get("headache_frequency", ""),
        pressure_sensitivity=data.get("pressure_sensitivity", 3),
        common_symptoms=data.get("common_symptoms", []),
        triggers=data.get("triggers", []),
        notifications=data.get("notifications", True),
    )


def record_to_dict(record: HeadacheRecord) -> dict:
    return record.__dict__.copy()


def dict_to_record(data: dict) -> HeadacheRecord:
    return HeadacheRecord(**data)


def _read_json_list(path) -> list:
    if not os.path.exists(path):
        return []
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _write_json_list(path, items: list) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(items, f, indent=2, ensure_ascii=False)


# --- Profiles ---

def load_all_users() -> List[UserProfile]:
    return [dict_to_user(d) for d in _read_json_list(USERS_FILE)]


def save_all_users(users: List[UserProfile]) -> None:
    _write_json_list(USERS_FILE, [user_to_dict(u) for u in users])


def save_user(user: UserProfile) -> None:
    """Insert the profile, or replace the stored one with the same user_id."""
    users = load_all_users()
    for i, u in enumerate(users):
        if u.user_id == user.user_id:
            users[i] = user
            break
    else:
        users.append(user)
    save_all_users(users)
    logger.info(f"Saved profile {user.user_id} ({len(users)} stored)")


def get_user(user_id: str) -> Optional[UserProfile]:
    return next((u for u in load_all_users() if u.user_id == user_id), None)


# --- Headache records ---

def load_records() -> List[HeadacheRecord]:
    return [dict_to_record(d) for d in _read_json_list(RECORDS_FILE)]


def save_record(record: HeadacheRecord) -> None:
    records = load_records()
    records.append(record)
    _write_json_list(RECORDS_FILE, [record_to_dict(r) for r in records])
    logger.info(f"Saved headache record {record.record_id}")
