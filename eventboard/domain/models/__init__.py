from .event import Event, EventCategory, EventDraft
from .user import SessionUser

__all__ = ["Event", "EventCategory", "EventDraft", "SessionUser"]
