from typing import TYPE_CHECKING

from ...domain.repositories.document_store import DocumentStore
from ...infrastructure.db.mongo_connection import get_database

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the database handle in the container.
        Skipped when a database or document store was registered up front (e.g. in tests).
        """
        if container.has("database") or container.has(DocumentStore):
            return
        container.register_singleton("database", get_database())
