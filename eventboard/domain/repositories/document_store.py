# Standard library imports
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence


EQUALS = "=="


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class SetOp(str, Enum):
    """Atomic mutation applied to an array-valued field"""
    ADD = "add"
    REMOVE = "remove"


@dataclass(frozen=True)
class Predicate:
    field: str
    op: str
    value: Any


@dataclass(frozen=True)
class OrderBy:
    field: str
    direction: SortDirection = SortDirection.ASCENDING


@dataclass
class DocumentSnapshot:
    """A document as read from the store: its id plus the field mapping"""

    id: str
    data: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)


class DocumentStore(ABC):
    """
    Repository interface - defines contract for remote document access.

    `update_document` replaces the given fields wholesale, while
    `patch_set_field` mutates a single array field atomically. Callers that
    share a document with concurrent writers must use the latter.
    """

    @abstractmethod
    async def query_collection(
        self,
        name: str,
        predicates: Sequence[Predicate],
        order_by: Optional[OrderBy] = None,
    ) -> List[DocumentSnapshot]:
        """Return documents matching all predicates (ANDed)"""
        pass

    @abstractmethod
    async def get_by_id(self, name: str, doc_id: str) -> Optional[DocumentSnapshot]:
        """Get a document by ID, or None if it does not exist"""
        pass

    @abstractmethod
    async def add_document(self, name: str, fields: Dict[str, Any]) -> str:
        """Create a document and return its store-assigned ID"""
        pass

    @abstractmethod
    async def update_document(self, name: str, doc_id: str, fields: Dict[str, Any]) -> None:
        """Overwrite the given fields of an existing document"""
        pass

    @abstractmethod
    async def patch_set_field(
        self,
        name: str,
        doc_id: str,
        field_name: str,
        op: SetOp,
        value: Any,
    ) -> None:
        """Atomically add a value to, or remove it from, an array field"""
        pass

    @abstractmethod
    async def delete_document(self, name: str, doc_id: str) -> None:
        """Delete a document"""
        pass
