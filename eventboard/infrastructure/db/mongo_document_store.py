# Standard library imports
import logging
from typing import Any, Dict, List, Optional, Sequence

# External package imports
from motor.motor_asyncio import AsyncIOMotorDatabase
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import DocumentNotFoundError, StoreError
from ...domain.repositories.document_store import (
    EQUALS,
    DocumentSnapshot,
    DocumentStore,
    OrderBy,
    Predicate,
    SetOp,
    SortDirection,
)
from .mongo_connection import get_database

logger = logging.getLogger(__name__)

MONGO_ID = "_id"

_SET_OPERATORS = {
    SetOp.ADD: "$addToSet",
    SetOp.REMOVE: "$pull",
}


class MongoDocumentStore(DocumentStore):
    """MongoDB implementation of DocumentStore"""

    def __init__(self, database: Optional[AsyncIOMotorDatabase] = None) -> None:
        self.database = database if database is not None else get_database()

    async def query_collection(
        self,
        name: str,
        predicates: Sequence[Predicate],
        order_by: Optional[OrderBy] = None,
    ) -> List[DocumentSnapshot]:
        """
        Find documents matching every predicate

        Args:
            name: Collection name
            predicates: Equality predicates, ANDed together
            order_by: Optional sort field and direction

        Returns:
            List of DocumentSnapshot in store order
        """
        query = self._build_query(predicates)
        try:
            cursor = self.database[name].find(query)
            if order_by is not None:
                direction = DESCENDING if order_by.direction == SortDirection.DESCENDING else ASCENDING
                cursor = cursor.sort(order_by.field, direction)
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise StoreError(f"Error querying {name}: {str(e)}") from e

        return [self._document_to_snapshot(doc) for doc in documents]

    async def get_by_id(self, name: str, doc_id: str) -> Optional[DocumentSnapshot]:
        if not doc_id:
            return None
        try:
            document = await self.database[name].find_one(self._id_filter(doc_id))
        except PyMongoError as e:
            raise StoreError(f"Error finding {doc_id} in {name}: {str(e)}") from e

        if document is None:
            return None
        return self._document_to_snapshot(document)

    async def add_document(self, name: str, fields: Dict[str, Any]) -> str:
        if not fields:
            raise ValueError("Document fields cannot be empty")

        # insert_one mutates its argument with the generated _id
        document = {k: v for k, v in fields.items() if k != MONGO_ID}
        try:
            result = await self.database[name].insert_one(document)
        except PyMongoError as e:
            raise StoreError(f"Error adding document to {name}: {str(e)}") from e
        return str(result.inserted_id)

    async def update_document(self, name: str, doc_id: str, fields: Dict[str, Any]) -> None:
        updates = {k: v for k, v in fields.items() if k != MONGO_ID}
        if not updates:
            raise ValueError("Update fields cannot be empty")

        try:
            result = await self.database[name].update_one(
                self._id_filter(doc_id),
                {"$set": updates},
            )
        except PyMongoError as e:
            raise StoreError(f"Error updating {doc_id} in {name}: {str(e)}") from e

        if result.matched_count == 0:
            raise DocumentNotFoundError(name, doc_id)

    async def patch_set_field(
        self,
        name: str,
        doc_id: str,
        field_name: str,
        op: SetOp,
        value: Any,
    ) -> None:
        operator = _SET_OPERATORS[SetOp(op)]
        try:
            result = await self.database[name].update_one(
                self._id_filter(doc_id),
                {operator: {field_name: value}},
            )
        except PyMongoError as e:
            raise StoreError(
                f"Error applying {operator} on {field_name} of {doc_id}: {str(e)}"
            ) from e

        if result.matched_count == 0:
            raise DocumentNotFoundError(name, doc_id)

    async def delete_document(self, name: str, doc_id: str) -> None:
        try:
            result = await self.database[name].delete_one(self._id_filter(doc_id))
        except PyMongoError as e:
            raise StoreError(f"Error deleting {doc_id} from {name}: {str(e)}") from e

        if result.deleted_count == 0:
            raise DocumentNotFoundError(name, doc_id)

    def _build_query(self, predicates: Sequence[Predicate]) -> Dict[str, Any]:
        """
        Translate predicates into a MongoDB filter

        Only equality is supported; repeated fields are combined with $and.
        """
        clauses: List[Dict[str, Any]] = []
        for predicate in predicates:
            if predicate.op != EQUALS:
                raise ValueError(f"Unsupported query operator: {predicate.op}")
            value = predicate.value
            if predicate.field == MONGO_ID:
                value = self._id_filter(value)[MONGO_ID]
            clauses.append({predicate.field: value})

        fields = [next(iter(clause)) for clause in clauses]
        if len(set(fields)) == len(fields):
            query: Dict[str, Any] = {}
            for clause in clauses:
                query.update(clause)
            return query
        return {"$and": clauses}

    def _id_filter(self, doc_id: str) -> Dict[str, Any]:
        # Store-assigned IDs are ObjectIds; anything else was inserted as a plain string
        try:
            return {MONGO_ID: ObjectId(doc_id)}
        except (InvalidId, TypeError):
            return {MONGO_ID: doc_id}

    def _document_to_snapshot(self, document: Dict[str, Any]) -> DocumentSnapshot:
        if not document:
            raise ValueError("Invalid document: document is None or empty")

        data = {k: v for k, v in document.items() if k != MONGO_ID}
        return DocumentSnapshot(id=str(document.get(MONGO_ID)), data=data)
