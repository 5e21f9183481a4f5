# app/record_service.py
from typing import List, Optional
import time
import uuid

from app.data_model import HeadacheRecord

MIN_SEVERITY = 0
MAX_SEVERITY = 5

SEVERITY_LABELS = ["none", "very mild", "mild", "moderate", "severe", "extreme"]


class RecordValidationError(ValueError):
    pass


def create_record(
    severity: int,
    symptoms: Optional[List[str]] = None,
    notes: Optional[str] = None,
    timestamp_ms: Optional[int] = None,
) -> HeadacheRecord:
    """
    Build a headache log entry.
    A record needs a severity above 0 or at least one symptom.
    """
    if not MIN_SEVERITY <= severity <= MAX_SEVERITY:
        raise RecordValidationError(
            f"severity must be between {MIN_SEVERITY} and {MAX_SEVERITY}, got {severity}"
        )

    # Keep first occurrence order, drop duplicates and blanks
    cleaned: List[str] = []
    for s in symptoms or []:
        s = s.strip()
        if s and s not in cleaned:
            cleaned.append(s)

    if severity == MIN_SEVERITY and not cleaned:
        raise RecordValidationError("Select a severity or at least one symptom")

    timestamp_ms = timestamp_ms if timestamp_ms is not None else int(time.time() * 1000)
    return HeadacheRecord(
        record_id=uuid.uuid4().hex,
        timestamp_ms=timestamp_ms,
        severity=severity,
        symptoms=cleaned,
        notes=(notes or "").strip() or None,
    )


def severity_label(severity: int) -> str:
    if not MIN_SEVERITY <= severity <= MAX_SEVERITY:
        raise RecordValidationError(f"Unknown severity: {severity}")
    return SEVERITY_LABELS[severity]
