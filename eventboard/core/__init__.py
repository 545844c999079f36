from .config import Settings, get_settings
from .exceptions import (
    EventBoardError,
    StoreError,
    DocumentNotFoundError,
    NotAuthenticatedError,
    LoadError,
    InvalidQueryError,
    WriteError,
    ToggleError,
    FormValidationError,
)

__all__ = [
    "Settings",
    "get_settings",
    "EventBoardError",
    "StoreError",
    "DocumentNotFoundError",
    "NotAuthenticatedError",
    "LoadError",
    "InvalidQueryError",
    "WriteError",
    "ToggleError",
    "FormValidationError",
]
