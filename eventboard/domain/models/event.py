# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Set


class EventCategory(str, Enum):
    """Closed set of event categories"""

    SPORTS = "Sports"
    MUSIC = "Music"
    SOCIAL = "Social"
    OTHER = "Other"

    @classmethod
    def coerce(cls, value: Optional[str]) -> "EventCategory":
        """Map a stored or submitted value to a category, defaulting to OTHER."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


@dataclass
class Event:
    """
    Pure domain model for a catalog Event.

    `favorited_by` only changes through set-patches issued by the favorites
    reconciler; owner edits never touch it, nor `owner_id` / `created_at`.
    """

    id: Optional[str]
    name: str
    owner_id: str
    description: str = ""
    starts_at: Optional[datetime] = None
    category: EventCategory = EventCategory.OTHER
    is_private: bool = False
    created_at: Optional[datetime] = None
    favorited_by: Set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        """Business validations"""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Event name is required")
        if not self.owner_id or not isinstance(self.owner_id, str):
            raise ValueError("Owner user ID is required")
        self.category = EventCategory.coerce(self.category)
        self.favorited_by = set(self.favorited_by or ())

    def is_favorited_by(self, user_id: str) -> bool:
        return user_id in self.favorited_by


@dataclass
class EventDraft:
    """Editable field set of an Event, as produced by the form binder"""

    name: str
    description: str
    starts_at: datetime
    category: EventCategory = EventCategory.OTHER
    is_private: bool = False
