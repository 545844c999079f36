"""
Custom exception hierarchy for the event catalog.

Used by the document store, the catalog/favorites/CRUD use cases and the
view controllers. All exceptions inherit from EventBoardError and carry a
user-facing message alongside the technical one.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class EventBoardError(Exception):
    """Base exception for all event catalog errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "An error occurred. Please try again."
        self.details = details or {}


# -----------------------------------------------------------------------------
# Document store
# -----------------------------------------------------------------------------


class StoreError(EventBoardError):
    """Raised when the remote document store rejects or fails an operation."""
    pass


class DocumentNotFoundError(StoreError):
    """Raised when a write targets a document that does not exist."""

    def __init__(self, collection: str, doc_id: str):
        super().__init__(
            f"Document {doc_id} not found in {collection}",
            user_message="The event no longer exists.",
            details={"collection": collection, "doc_id": doc_id},
        )
        self.collection = collection
        self.doc_id = doc_id


# -----------------------------------------------------------------------------
# Session
# -----------------------------------------------------------------------------


class NotAuthenticatedError(EventBoardError):
    """Raised when an operation needs a signed-in user and there is none."""

    def __init__(self, message: str = "No active session"):
        super().__init__(message, user_message="Sign in to continue.")


# -----------------------------------------------------------------------------
# Catalog loading
# -----------------------------------------------------------------------------


class LoadError(EventBoardError):
    """Raised when the catalog query fails. Prior mirror state is kept."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            user_message=user_message or "Failed to load events",
            details=details,
        )


class InvalidQueryError(LoadError):
    """Raised when query criteria cannot be composed into a query."""
    pass


# -----------------------------------------------------------------------------
# Writes
# -----------------------------------------------------------------------------


class WriteError(EventBoardError):
    """Raised when a create, update or delete fails. The mirror is unchanged."""

    def __init__(
        self,
        operation: str,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, user_message=user_message, details=details)
        self.operation = operation


class ToggleError(EventBoardError):
    """Raised after a failed favorite patch has been rolled back locally."""

    def __init__(self, event_id: str, message: str):
        super().__init__(
            message,
            user_message="Updating favorites failed",
            details={"event_id": event_id},
        )
        self.event_id = event_id


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class FormValidationError(EventBoardError):
    """Raised when submitted form values cannot be turned into an event."""

    def __init__(self, field: str, message: str):
        super().__init__(message, user_message=message, details={"field": field})
        self.field = field
