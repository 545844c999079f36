from .event_dto import EventFormFields, Notice, NoticeKind

__all__ = [
    "EventFormFields",
    "Notice",
    "NoticeKind",
]
