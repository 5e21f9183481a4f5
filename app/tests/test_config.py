from datetime import timezone
from zoneinfo import ZoneInfo

import pytest
from app.config import resolve_timezone


def test_utc():
    assert resolve_timezone("UTC") is timezone.utc
    assert resolve_timezone("utc") is timezone.utc


def test_local_means_machine_timezone():
    assert resolve_timezone("local") is None


def test_iana_name():
    assert resolve_timezone("Asia/Tokyo") == ZoneInfo("Asia/Tokyo")


def test_unknown_name():
    with pytest.raises(ValueError):
        resolve_timezone("Mars/Olympus_Mons")
