# Standard library imports
import logging
from pathlib import Path
from typing import Optional

# External package imports
from dotenv import load_dotenv

# Local application imports
from ..domain.repositories.document_store import DocumentStore
from ..domain.repositories.session_provider import SessionProvider
from .base_container import BaseContainer
from .providers import (
    CatalogProvider,
    DatabaseProvider,
    RepositoryProvider,
)

logger = logging.getLogger(__name__)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connection (DatabaseProvider)
    2. Document store and session (RepositoryProvider) - depends on database
    3. Use cases and view controllers (CatalogProvider) - depend on the store
    """

    def __init__(
        self,
        document_store: Optional[DocumentStore] = None,
        session_provider: Optional[SessionProvider] = None,
    ) -> None:
        super().__init__()
        if document_store is not None:
            self.register_singleton(DocumentStore, document_store)
        if session_provider is not None:
            self.register_singleton(SessionProvider, session_provider)
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        CatalogProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Loads a .env file from the working directory on first use.

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        env_path = Path.cwd() / ".env"
        if load_dotenv(env_path):
            logger.info(f"Loaded environment from {env_path}")
        _container = DIContainer()
    return _container
