from typing import TYPE_CHECKING

from ...core.config import get_settings
from ...domain.repositories.document_store import DocumentStore
from ...domain.repositories.session_provider import SessionProvider
from ...infrastructure.db.mongo_document_store import MongoDocumentStore
from ...infrastructure.session.static_session_provider import StaticSessionProvider

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the document store and session provider.
        Registrations made before setup take precedence.
        """
        if not container.has(DocumentStore):
            container.register_singleton(
                DocumentStore,
                MongoDocumentStore(database=container.get("database")),
            )

        if not container.has(SessionProvider):
            container.register_singleton(
                SessionProvider,
                StaticSessionProvider(get_settings().session_user_id or None),
            )
