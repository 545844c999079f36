"""
Mapping between Event records and the editable event form.

Both directions are pure and synchronous. Datetimes cross the boundary as
local wall-clock text ("YYYY-MM-DDTHH:MM"), the format a date-and-time
input field expects.
"""

# Standard library imports
from datetime import tzinfo
from typing import Any, Mapping, Optional

# Local application imports
from ...core.exceptions import FormValidationError
from ...domain.constants import EventFields
from ...domain.models.event import Event, EventCategory, EventDraft
from ...utils.datetime_utils import parse_local_input_value, to_local_input_value
from ..dto.event_dto import EventFormFields

_FALSE_CHECKBOX_VALUES = {"", "off", "false", "0", "no"}


def blank_fields() -> EventFormFields:
    """Empty form, as shown in create mode or after a reset"""
    return EventFormFields()


def fields_from_event(event: Event, tz: Optional[tzinfo] = None) -> EventFormFields:
    """Populate the form from a selected record"""
    return EventFormFields(
        name=event.name or "",
        description=event.description or "",
        category=EventCategory.coerce(event.category),
        datetime=to_local_input_value(event.starts_at, tz),
        is_private=bool(event.is_private),
    )


def checkbox_value(value: Any) -> bool:
    """Coerce a submitted checkbox value; an absent box arrives as None"""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_CHECKBOX_VALUES
    return bool(value)


def draft_from_form(form: Mapping[str, Any], tz: Optional[tzinfo] = None) -> EventDraft:
    """
    Build the editable field set from submitted form values

    Args:
        form: Submitted values keyed by field name; the privacy checkbox may be absent
        tz: Timezone the datetime field is expressed in (defaults to the configured one)

    Returns:
        EventDraft with trimmed text, a concrete category and a UTC timestamp

    Raises:
        FormValidationError: If the name is blank or the datetime is unparseable
    """
    name = (form.get(EventFields.NAME) or "").strip()
    if not name:
        raise FormValidationError(EventFields.NAME, "Event name is required")

    raw_datetime = form.get(EventFields.DATETIME)
    starts_at = parse_local_input_value(str(raw_datetime) if raw_datetime else None, tz)
    if starts_at is None:
        raise FormValidationError(EventFields.DATETIME, "A valid date and time is required")

    return EventDraft(
        name=name,
        description=(form.get(EventFields.DESCRIPTION) or "").strip(),
        starts_at=starts_at,
        category=EventCategory.coerce(form.get(EventFields.CATEGORY) or EventCategory.OTHER),
        is_private=checkbox_value(form.get(EventFields.IS_PRIVATE)),
    )
