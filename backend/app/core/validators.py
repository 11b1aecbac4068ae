"""
Parsing helpers for loosely typed request input
"""
import math
from datetime import datetime, timezone
from typing import Any, Optional

from app.core.exceptions import ValidationError


def parse_positive_int(raw: Optional[str], field: str, message: Optional[str] = None) -> int:
    """Parse a query parameter that must be a positive integer"""
    error = message or f"Invalid or missing {field}"
    value = (raw or "").strip()
    try:
        parsed = int(value)
    except ValueError:
        raise ValidationError(error, details={"field": field, "value": raw})
    if parsed <= 0:
        raise ValidationError(error, details={"field": field, "value": raw})
    return parsed


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_rate(raw: Any) -> float:
    """Hourly rates arrive as numbers or numeric strings"""
    if isinstance(raw, bool):
        raise ValidationError("Rate must be a number", details={"field": "rate"})
    try:
        rate = float(raw)
    except (TypeError, ValueError):
        raise ValidationError("Rate must be a number", details={"field": "rate", "value": raw})
    if not math.isfinite(rate):
        raise ValidationError("Rate must be a finite number", details={"field": "rate", "value": raw})
    return rate


def parse_datetime(raw: Optional[str], field: str) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or datetime into an aware UTC datetime.

    "2099-01-01" means midnight UTC; naive datetimes are taken as UTC.
    Blank input returns None.
    """
    if is_blank(raw):
        return None
    try:
        parsed = datetime.fromisoformat(str(raw).strip())
    except ValueError:
        raise ValidationError(
            f"{field} must be an ISO-8601 date or datetime",
            details={"field": field, "value": raw},
        )
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
