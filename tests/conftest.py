"""
Shared pytest fixtures for eventboard tests.

InMemoryDocumentStore is a DocumentStore fake with the same set-patch
semantics as MongoDB ($addToSet / $pull), failure injection per operation,
and optional gates that hold a query open until the test releases it.
"""
import asyncio
import copy
import itertools
import os
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence
from unittest.mock import MagicMock, patch

import pytest

from eventboard.core.exceptions import DocumentNotFoundError, StoreError
from eventboard.domain.constants import EventFields
from eventboard.domain.repositories.document_store import (
    EQUALS,
    DocumentSnapshot,
    DocumentStore,
    OrderBy,
    Predicate,
    SetOp,
    SortDirection,
)
from eventboard.infrastructure.session.static_session_provider import StaticSessionProvider

COLLECTION = "events"


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed DocumentStore used in place of MongoDB."""

    def __init__(self) -> None:
        self.collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.calls: List[tuple] = []
        self.failures: Dict[str, Exception] = {}
        self.query_gates: List[asyncio.Event] = []
        self._ids = itertools.count(1)

    # -- test helpers ---------------------------------------------------

    def seed(self, name: str, doc_id: str, fields: Dict[str, Any]) -> None:
        self.collections.setdefault(name, {})[doc_id] = copy.deepcopy(fields)

    def document(self, name: str, doc_id: str) -> Optional[Dict[str, Any]]:
        return self.collections.get(name, {}).get(doc_id)

    def fail(self, op: str, exc: Optional[Exception] = None) -> None:
        self.failures[op] = exc or StoreError(f"{op} unavailable")

    def calls_of(self, op: str) -> List[tuple]:
        return [call for call in self.calls if call[0] == op]

    def _check(self, op: str) -> None:
        if op in self.failures:
            raise self.failures[op]

    # -- DocumentStore --------------------------------------------------

    async def query_collection(
        self,
        name: str,
        predicates: Sequence[Predicate],
        order_by: Optional[OrderBy] = None,
    ) -> List[DocumentSnapshot]:
        self.calls.append(("query", name, tuple(predicates), order_by))
        if self.query_gates:
            await self.query_gates.pop(0).wait()
        self._check("query")

        results = []
        for doc_id, data in self.collections.get(name, {}).items():
            if all(p.op == EQUALS and data.get(p.field) == p.value for p in predicates):
                results.append(DocumentSnapshot(id=doc_id, data=copy.deepcopy(data)))
        if order_by is not None:
            results.sort(
                key=lambda snap: snap.data.get(order_by.field),
                reverse=order_by.direction == SortDirection.DESCENDING,
            )
        return results

    async def get_by_id(self, name: str, doc_id: str) -> Optional[DocumentSnapshot]:
        self.calls.append(("get", name, doc_id))
        self._check("get")
        data = self.document(name, doc_id)
        return DocumentSnapshot(id=doc_id, data=copy.deepcopy(data)) if data is not None else None

    async def add_document(self, name: str, fields: Dict[str, Any]) -> str:
        self.calls.append(("add", name, copy.deepcopy(fields)))
        self._check("add")
        doc_id = f"evt-{next(self._ids)}"
        self.seed(name, doc_id, fields)
        return doc_id

    async def update_document(self, name: str, doc_id: str, fields: Dict[str, Any]) -> None:
        self.calls.append(("update", name, doc_id, copy.deepcopy(fields)))
        self._check("update")
        data = self.document(name, doc_id)
        if data is None:
            raise DocumentNotFoundError(name, doc_id)
        data.update(copy.deepcopy(fields))

    async def patch_set_field(
        self,
        name: str,
        doc_id: str,
        field_name: str,
        op: SetOp,
        value: Any,
    ) -> None:
        self.calls.append(("patch", name, doc_id, field_name, op, value))
        self._check("patch")
        data = self.document(name, doc_id)
        if data is None:
            raise DocumentNotFoundError(name, doc_id)
        values = list(data.get(field_name) or [])
        if op == SetOp.ADD:
            if value not in values:
                values.append(value)
        else:
            values = [v for v in values if v != value]
        data[field_name] = values

    async def delete_document(self, name: str, doc_id: str) -> None:
        self.calls.append(("delete", name, doc_id))
        self._check("delete")
        if self.collections.get(name, {}).pop(doc_id, None) is None:
            raise DocumentNotFoundError(name, doc_id)


def event_document(
    name: str,
    owner_id: str = "user-1",
    category: str = "Other",
    is_private: bool = False,
    created_at: Optional[datetime] = None,
    favorited_by: Optional[List[str]] = None,
    starts_at: Optional[datetime] = None,
    description: str = "",
) -> Dict[str, Any]:
    return {
        EventFields.NAME: name,
        EventFields.DESCRIPTION: description,
        EventFields.DATETIME: starts_at or datetime(2025, 3, 1, 10, 0, tzinfo=timezone.utc),
        EventFields.CATEGORY: category,
        EventFields.IS_PRIVATE: is_private,
        EventFields.OWNER_ID: owner_id,
        EventFields.CREATED_AT: created_at or datetime(2025, 1, 1, tzinfo=timezone.utc),
        EventFields.FAVORITED_BY: list(favorited_by or []),
    }


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def session():
    return StaticSessionProvider("user-1")


@pytest.fixture
def signed_out_session():
    return StaticSessionProvider(None)


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_eventboard",
        "EVENTS_COLLECTION": COLLECTION,
        "LOCAL_TIMEZONE": "UTC",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.events_collection = COLLECTION
    mock.mongo_timeout_ms = 1000
    mock.session_user_id = "user-1"
    mock.local_timezone = "UTC"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("eventboard.core.config.get_settings", return_value=mock), patch(
        "eventboard.utils.datetime_utils.get_settings", return_value=mock
    ), patch(
        "eventboard.di.providers.catalog_provider.get_settings", return_value=mock
    ), patch(
        "eventboard.di.providers.repository_provider.get_settings", return_value=mock
    ), patch(
        "eventboard.infrastructure.db.mongo_connection.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def make_document():
    """Factory for raw event documents as stored in the events collection."""
    return event_document
