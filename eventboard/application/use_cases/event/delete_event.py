import logging

from ....core.exceptions import WriteError
from ....domain.repositories.document_store import DocumentStore
from ...state.catalog_state import CatalogState

logger = logging.getLogger(__name__)


class DeleteEventUseCase:
    def __init__(self, document_store: DocumentStore, state: CatalogState, collection: str) -> None:
        self.document_store = document_store
        self.state = state
        self.collection = collection

    async def execute(self, event_id: str) -> None:
        try:
            await self.document_store.delete_document(self.collection, event_id)
        except Exception as e:
            logger.error(f"Deleting event {event_id} failed: {e}")
            raise WriteError(
                "delete",
                f"Error deleting event {event_id}: {str(e)}",
                user_message="Deleting the event failed",
                details={"event_id": event_id},
            ) from e

        self.state.remove_event(event_id)
        logger.info(f"Deleted event {event_id}")
