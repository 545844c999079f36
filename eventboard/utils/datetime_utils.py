"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the event catalog.
Wall-clock conversions use the timezone configured in eventboard.core.config
unless an explicit tzinfo is passed.

Functions:
- utc_now(): Current UTC time, timezone-aware (use for persisted timestamps)
- ensure_utc(): Normalize any datetime into aware UTC
- to_native_datetime(): Normalize every stored timestamp representation
- to_local_input_value(): Datetime -> "YYYY-MM-DDTHH:MM" in local time
- parse_local_input_value(): "YYYY-MM-DDTHH:MM" in local time -> aware UTC
- format_event_date(): Human-readable date for list/card display
"""
import logging
from datetime import datetime, timezone as dt_timezone, tzinfo
from typing import Any, Optional

import zoneinfo

from ..core.config import get_settings

logger = logging.getLogger(__name__)

LOCAL_INPUT_FORMAT = "%Y-%m-%dT%H:%M"
NO_DATE_LABEL = "Not scheduled"


def get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().local_timezone

    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Invalid timezone '{tz_str}', falling back to UTC")
        return dt_timezone.utc


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_native_datetime(value: Any) -> Optional[datetime]:
    """
    Convert a stored timestamp into an aware UTC datetime.

    Accepts a plain datetime, a store wrapper exposing `as_datetime()`
    (bson.DatetimeMS, bson.Timestamp), epoch milliseconds or ISO 8601 text.
    Every representation of the same instant normalizes to the same value.

    Raises:
        ValueError: If the value cannot be interpreted as a timestamp
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    if hasattr(value, "as_datetime"):
        try:
            return ensure_utc(value.as_datetime())
        except (OverflowError, OSError) as e:
            raise ValueError(f"Timestamp out of range: {value!r}") from e
    if isinstance(value, bool):
        raise ValueError(f"Not a timestamp: {value!r}")
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=dt_timezone.utc)
        except (OverflowError, OSError) as e:
            raise ValueError(f"Timestamp out of range: {value!r}") from e
    if isinstance(value, str):
        if not value.strip():
            return None
        return ensure_utc(datetime.fromisoformat(value.strip().replace("Z", "+00:00")))
    raise ValueError(f"Not a timestamp: {value!r}")


def to_local_input_value(value: Any, tz: Optional[tzinfo] = None) -> str:
    """
    Render a timestamp as the value of a local date-and-time form field.

    Args:
        value: Any representation accepted by to_native_datetime
        tz: Wall-clock timezone (defaults to the configured local timezone)

    Returns:
        "YYYY-MM-DDTHH:MM", or "" when there is no timestamp
    """
    dt = to_native_datetime(value)
    if dt is None:
        return ""
    return dt.astimezone(tz or get_app_timezone()).strftime(LOCAL_INPUT_FORMAT)


def parse_local_input_value(text: Optional[str], tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """
    Parse a local date-and-time form value back into an aware UTC datetime.

    Seconds are accepted but not required. Values that already carry an
    offset keep it. Returns None for empty or unparseable input.
    """
    if not text or not text.strip():
        return None
    try:
        dt = datetime.fromisoformat(text.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz or get_app_timezone())
    return dt.astimezone(dt_timezone.utc)


def format_event_date(value: Any, tz: Optional[tzinfo] = None) -> str:
    """Medium date plus short time in local time, e.g. "1 Mar 2025, 10:00"."""
    try:
        dt = to_native_datetime(value)
    except ValueError:
        dt = None
    if dt is None:
        return NO_DATE_LABEL
    local = dt.astimezone(tz or get_app_timezone())
    return f"{local.day} {local.strftime('%b %Y, %H:%M')}"
