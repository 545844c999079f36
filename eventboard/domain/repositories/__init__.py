from .document_store import (
    DocumentStore,
    DocumentSnapshot,
    Predicate,
    OrderBy,
    SortDirection,
    SetOp,
    EQUALS,
)
from .session_provider import SessionProvider

__all__ = [
    "DocumentStore",
    "DocumentSnapshot",
    "Predicate",
    "OrderBy",
    "SortDirection",
    "SetOp",
    "EQUALS",
    "SessionProvider",
]
