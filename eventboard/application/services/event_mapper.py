# Standard library imports
from datetime import datetime
from typing import Any, Dict, Set

# Local application imports
from ...domain.constants import EventFields
from ...domain.models.event import Event, EventCategory, EventDraft
from ...domain.repositories.document_store import DocumentSnapshot
from ...utils.datetime_utils import to_native_datetime


def snapshot_to_event(snapshot: DocumentSnapshot) -> Event:
    """
    Convert a store snapshot to the Event domain model

    Args:
        snapshot: Document read from the events collection

    Returns:
        Event domain model

    Raises:
        ValueError: If required fields are missing or timestamps are malformed
    """
    return Event(
        id=snapshot.id,
        name=snapshot.get(EventFields.NAME) or "",
        owner_id=snapshot.get(EventFields.OWNER_ID) or "",
        description=_text(snapshot.get(EventFields.DESCRIPTION), EventFields.DESCRIPTION),
        starts_at=to_native_datetime(snapshot.get(EventFields.DATETIME)),
        category=EventCategory.coerce(snapshot.get(EventFields.CATEGORY)),
        is_private=bool(snapshot.get(EventFields.IS_PRIVATE, False)),
        created_at=to_native_datetime(snapshot.get(EventFields.CREATED_AT)),
        favorited_by=_member_set(snapshot.get(EventFields.FAVORITED_BY)),
    )


def _text(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"Field {field_name} must be text, got {type(value).__name__}")
    return value


def _member_set(value: Any) -> Set[str]:
    # Stored as an array of user ids; anything else is a malformed document
    if value is None:
        return set()
    if not isinstance(value, (list, tuple, set)):
        raise ValueError(f"Field {EventFields.FAVORITED_BY} must be an array, got {type(value).__name__}")
    if not all(isinstance(member, str) for member in value):
        raise ValueError(f"Field {EventFields.FAVORITED_BY} must hold user ids")
    return set(value)


def draft_to_fields(draft: EventDraft) -> Dict[str, Any]:
    """Editable field set written by an owner edit, keyed by EventFields.EDITABLE"""
    values = {
        EventFields.NAME: draft.name,
        EventFields.DESCRIPTION: draft.description,
        EventFields.DATETIME: draft.starts_at,
        EventFields.CATEGORY: EventCategory.coerce(draft.category).value,
        EventFields.IS_PRIVATE: bool(draft.is_private),
    }
    return {name: values[name] for name in EventFields.EDITABLE}


def new_event_document(draft: EventDraft, owner_id: str, created_at: datetime) -> Dict[str, Any]:
    """Full document for a newly created event"""
    document = draft_to_fields(draft)
    document[EventFields.OWNER_ID] = owner_id
    document[EventFields.CREATED_AT] = created_at
    document[EventFields.FAVORITED_BY] = []
    return document


def merge_draft(event: Event, draft: EventDraft) -> Event:
    """Return a copy of `event` with the editable fields taken from `draft`"""
    return Event(
        id=event.id,
        name=draft.name,
        owner_id=event.owner_id,
        description=draft.description,
        starts_at=draft.starts_at,
        category=EventCategory.coerce(draft.category),
        is_private=bool(draft.is_private),
        created_at=event.created_at,
        favorited_by=set(event.favorited_by),
    )
