from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Set

from ...domain.models.event import Event

if TYPE_CHECKING:
    from ...core.exceptions import LoadError
    from ..dto.event_dto import Notice


@dataclass
class CatalogState:
    """
    In-memory mirror rendered by a view.

    The loader replaces `events` wholesale; the favorites reconciler and the
    CRUD use cases only touch the record they were asked about, looked up by
    id at the moment they write.
    """

    events: List[Event] = field(default_factory=list)
    favorite_ids: Set[str] = field(default_factory=set)
    loading: bool = False
    error: Optional["LoadError"] = None
    selected_event: Optional[Event] = None
    # Single slot: a new notice replaces an unseen one
    notice: Optional["Notice"] = None

    def find(self, event_id: str) -> Optional[Event]:
        for event in self.events:
            if event.id == event_id:
                return event
        return None

    def replace_events(self, events: List[Event]) -> None:
        self.events = list(events)

    def append_event(self, event: Event) -> None:
        self.events = [*self.events, event]

    def replace_event(self, event: Event) -> None:
        self.events = [event if e.id == event.id else e for e in self.events]
        if self.selected_event is not None and self.selected_event.id == event.id:
            self.selected_event = event

    def remove_event(self, event_id: str) -> None:
        self.events = [e for e in self.events if e.id != event_id]
        self.favorite_ids.discard(event_id)
        if self.selected_event is not None and self.selected_event.id == event_id:
            self.selected_event = None

    def set_notice(self, notice: Optional["Notice"]) -> None:
        self.notice = notice

    def clear_notice(self) -> None:
        self.notice = None
