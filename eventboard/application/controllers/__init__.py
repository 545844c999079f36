from .event_management_controller import EventManagementController
from .public_browse_controller import PublicBrowseController

__all__ = [
    "EventManagementController",
    "PublicBrowseController",
]
