"""Utility modules for the event catalog."""

from .datetime_utils import (
    utc_now,
    ensure_utc,
    to_native_datetime,
    to_local_input_value,
    parse_local_input_value,
    format_event_date,
)

__all__ = [
    "utc_now",
    "ensure_utc",
    "to_native_datetime",
    "to_local_input_value",
    "parse_local_input_value",
    "format_event_date",
]
