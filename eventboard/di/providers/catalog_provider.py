from typing import TYPE_CHECKING

from ...core.config import get_settings
from ...domain.repositories.document_store import DocumentStore
from ...domain.repositories.session_provider import SessionProvider
from ...application.state.catalog_state import CatalogState
from ...application.use_cases.catalog.compose_query import QueryComposer
from ...application.use_cases.catalog.load_catalog import CatalogLoader
from ...application.use_cases.favorites.toggle_favorite import FavoriteReconciler
from ...application.use_cases.event.create_event import CreateEventUseCase
from ...application.use_cases.event.update_event import UpdateEventUseCase
from ...application.use_cases.event.delete_event import DeleteEventUseCase
from ...application.controllers.event_management_controller import EventManagementController
from ...application.controllers.public_browse_controller import PublicBrowseController

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CatalogProvider:
    """Catalog provider - registers the query composer and one factory per view"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        collection = get_settings().events_collection

        container.register_singleton(QueryComposer, QueryComposer(collection))

        # Each view gets its own mirror, loader and request-token sequence
        def build_public_browse() -> PublicBrowseController:
            store = container.get(DocumentStore)
            session = container.get(SessionProvider)
            state = CatalogState()
            return PublicBrowseController(
                session_provider=session,
                state=state,
                query_composer=container.get(QueryComposer),
                catalog_loader=CatalogLoader(store, state),
                favorite_reconciler=FavoriteReconciler(store, session, state, collection),
            )

        def build_event_management() -> EventManagementController:
            store = container.get(DocumentStore)
            state = CatalogState()
            return EventManagementController(
                session_provider=container.get(SessionProvider),
                state=state,
                query_composer=container.get(QueryComposer),
                catalog_loader=CatalogLoader(store, state),
                create_event=CreateEventUseCase(store, state, collection),
                update_event=UpdateEventUseCase(store, state, collection),
                delete_event=DeleteEventUseCase(store, state, collection),
            )

        container.register_factory(PublicBrowseController, build_public_browse)
        container.register_factory(EventManagementController, build_event_management)
