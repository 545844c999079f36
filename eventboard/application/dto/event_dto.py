from enum import Enum
from typing import Optional

from pydantic import BaseModel

from ...domain.models.event import EventCategory


class EventFormFields(BaseModel):
    """DTO for the values shown in the create/edit event form"""
    name: str = ""
    description: str = ""
    category: EventCategory = EventCategory.OTHER
    datetime: str = ""  # local wall clock, "YYYY-MM-DDTHH:MM"
    is_private: bool = False


class NoticeKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class Notice(BaseModel):
    """DTO for the transient message shown after an operation"""
    kind: NoticeKind
    message: str
    operation: Optional[str] = None

    @classmethod
    def success(cls, message: str, operation: Optional[str] = None) -> "Notice":
        return cls(kind=NoticeKind.SUCCESS, message=message, operation=operation)

    @classmethod
    def error(cls, message: str, operation: Optional[str] = None) -> "Notice":
        return cls(kind=NoticeKind.ERROR, message=message, operation=operation)
