# Standard library imports
import logging

# Local application imports
from ....core.exceptions import WriteError
from ....domain.models.event import Event, EventDraft
from ....domain.repositories.document_store import DocumentStore
from ....utils.datetime_utils import utc_now
from ...services.event_mapper import new_event_document
from ...state.catalog_state import CatalogState

logger = logging.getLogger(__name__)


class CreateEventUseCase:
    """Use case for creating a new event and appending it to the mirror"""

    def __init__(self, document_store: DocumentStore, state: CatalogState, collection: str) -> None:
        self.document_store = document_store
        self.state = state
        self.collection = collection

    async def execute(self, draft: EventDraft, owner_id: str) -> Event:
        """
        Create a new event

        Args:
            draft: Editable fields from the form
            owner_id: ID of the user creating the event

        Returns:
            Event with the store-assigned ID, as appended to the mirror

        Raises:
            WriteError: If the store rejected the document (mirror unchanged)
        """
        created_at = utc_now()
        document = new_event_document(draft, owner_id, created_at)

        try:
            event_id = await self.document_store.add_document(self.collection, document)
        except Exception as e:
            logger.error(f"Creating event '{draft.name}' for {owner_id} failed: {e}")
            raise WriteError(
                "create",
                f"Error creating event: {str(e)}",
                user_message="Adding the event failed",
            ) from e

        event = Event(
            id=event_id,
            name=draft.name,
            owner_id=owner_id,
            description=draft.description,
            starts_at=draft.starts_at,
            category=draft.category,
            is_private=draft.is_private,
            created_at=created_at,
        )
        self.state.append_event(event)
        logger.info(f"Created event {event_id} for {owner_id}")
        return event
