from .create_event import CreateEventUseCase
from .update_event import UpdateEventUseCase
from .delete_event import DeleteEventUseCase

__all__ = [
    "CreateEventUseCase",
    "UpdateEventUseCase",
    "DeleteEventUseCase",
]
