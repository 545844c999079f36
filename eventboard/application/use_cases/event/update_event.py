# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....core.exceptions import WriteError
from ....domain.models.event import Event, EventDraft
from ....domain.repositories.document_store import DocumentStore
from ...services.event_mapper import draft_to_fields, merge_draft
from ...state.catalog_state import CatalogState

logger = logging.getLogger(__name__)


class UpdateEventUseCase:
    """Use case for an owner edit of an existing event"""

    def __init__(self, document_store: DocumentStore, state: CatalogState, collection: str) -> None:
        self.document_store = document_store
        self.state = state
        self.collection = collection

    async def execute(self, event_id: str, draft: EventDraft, fallback: Optional[Event] = None) -> Event:
        """
        Write the full editable field set and merge it into the mirror

        Only the editable fields are sent, so favorites patched concurrently
        by other users are not overwritten. The merge reads the mirror entry
        after the write completes, keeping any optimistic favorite flip made
        in the meantime.

        Args:
            event_id: ID of the event to update
            draft: Editable fields from the form
            fallback: Record to merge into when the mirror no longer holds the id

        Returns:
            The merged Event

        Raises:
            WriteError: If the store rejected the update (mirror unchanged)
        """
        try:
            await self.document_store.update_document(
                self.collection,
                event_id,
                draft_to_fields(draft),
            )
        except Exception as e:
            logger.error(f"Updating event {event_id} failed: {e}")
            raise WriteError(
                "update",
                f"Error updating event {event_id}: {str(e)}",
                user_message="Updating the event failed",
                details={"event_id": event_id},
            ) from e

        current = self.state.find(event_id) or fallback
        if current is None:
            raise WriteError(
                "update",
                f"Event {event_id} was updated but is not in the local mirror",
                user_message="Updating the event failed",
                details={"event_id": event_id},
            )

        merged = merge_draft(current, draft)
        self.state.replace_event(merged)
        logger.info(f"Updated event {event_id}")
        return merged
