# Standard library imports
import inspect
import logging
from datetime import tzinfo
from typing import Awaitable, Callable, List, Mapping, Optional, Union

# Local application imports
from ...core.exceptions import (
    FormValidationError,
    InvalidQueryError,
    LoadError,
    NotAuthenticatedError,
    WriteError,
)
from ...domain.constants import ALL_CATEGORIES
from ...domain.models.event import Event, EventCategory
from ...domain.repositories.session_provider import SessionProvider
from ..dto.event_dto import EventFormFields, Notice
from ..services.form_binder import blank_fields, checkbox_value, draft_from_form, fields_from_event
from ..state.catalog_state import CatalogState
from ..use_cases.catalog.compose_query import (
    QueryComposer,
    QueryFilters,
    QueryScope,
    normalize_search_term,
    resolve_category,
)
from ..use_cases.catalog.load_catalog import CatalogLoader
from ..use_cases.event.create_event import CreateEventUseCase
from ..use_cases.event.delete_event import DeleteEventUseCase
from ..use_cases.event.update_event import UpdateEventUseCase

logger = logging.getLogger(__name__)

Confirm = Callable[[], Union[bool, Awaitable[bool]]]

MSG_ADDED = "Event added"
MSG_UPDATED = "Event updated"
MSG_DELETED = "Event deleted"
MSG_ADD_FAILED = "Adding the event failed"
MSG_UPDATE_FAILED = "Updating the event failed"
MSG_DELETE_FAILED = "Deleting the event failed"
MSG_LOAD_FAILED = "Failed to load events"
MSG_SEARCH_FAILED = "Search failed"


class EventManagementController:
    """
    Owner view: lists the signed-in user's events and drives the single
    create/edit form.

    The selected event decides the form mode: nothing selected means submit
    creates, a selection means submit updates it. Writes patch the mirror in
    place; only filter and search intents query the store.
    """

    def __init__(
        self,
        session_provider: SessionProvider,
        state: CatalogState,
        query_composer: QueryComposer,
        catalog_loader: CatalogLoader,
        create_event: CreateEventUseCase,
        update_event: UpdateEventUseCase,
        delete_event: DeleteEventUseCase,
        tz: Optional[tzinfo] = None,
    ) -> None:
        self.session_provider = session_provider
        self.state = state
        self.query_composer = query_composer
        self.catalog_loader = catalog_loader
        self.create_event = create_event
        self.update_event = update_event
        self.delete_event = delete_event
        self.tz = tz
        self.filter_category: Union[EventCategory, str] = ALL_CATEGORIES
        self.search_term: str = ""

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def _owner_id(self) -> str:
        user = self.session_provider.get_current_user()
        if not self.session_provider.is_authenticated() or user is None:
            raise NotAuthenticatedError("Managing events requires a signed-in user")
        return user.id

    async def reload(self) -> Optional[List[Event]]:
        """Query the owner's events with the current category and search term"""
        searching = normalize_search_term(self.search_term) is not None
        try:
            spec = self.query_composer.compose(
                QueryScope(owner_id=self._owner_id()),
                QueryFilters(category=self.filter_category, search_term=self.search_term),
            )
            return await self.catalog_loader.load(spec)
        except (LoadError, NotAuthenticatedError) as e:
            logger.error(f"Owner catalog reload failed: {e}")
            self.state.set_notice(
                Notice.error(MSG_SEARCH_FAILED if searching else MSG_LOAD_FAILED, operation="load")
            )
            return None

    async def mount(self) -> Optional[List[Event]]:
        return await self.reload()

    async def change_category(self, category: Optional[Union[EventCategory, str]]) -> Optional[List[Event]]:
        # An unknown category is rejected without replacing the active filter
        try:
            resolve_category(category)
        except InvalidQueryError as e:
            logger.warning(f"Rejected category filter: {e}")
            self.state.set_notice(Notice.error(MSG_LOAD_FAILED, operation="load"))
            return None
        self.filter_category = category or ALL_CATEGORIES
        return await self.reload()

    async def submit_search(self, term: Optional[str]) -> Optional[List[Event]]:
        # Terms of two characters or fewer fall back to the unfiltered list
        self.search_term = term or ""
        return await self.reload()

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    @property
    def selected_event(self) -> Optional[Event]:
        return self.state.selected_event

    @property
    def is_editing(self) -> bool:
        return self.state.selected_event is not None

    def select(self, event_id: str) -> EventFormFields:
        event = self.state.find(event_id)
        if event is None:
            raise ValueError("Event not found")
        self.state.selected_event = event
        return fields_from_event(event, self.tz)

    def cancel(self) -> EventFormFields:
        self.state.selected_event = None
        return blank_fields()

    def current_fields(self) -> EventFormFields:
        if self.state.selected_event is None:
            return blank_fields()
        return fields_from_event(self.state.selected_event, self.tz)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def submit(self, form: Mapping) -> EventFormFields:
        """
        Create or update from submitted form values

        Returns:
            The values the form should show next: blank after a create,
            the saved record after an update, the submitted values on failure
        """
        self.state.clear_notice()
        selected = self.state.selected_event
        failure_message = MSG_UPDATE_FAILED if selected is not None else MSG_ADD_FAILED
        operation = "update" if selected is not None else "create"

        try:
            draft = draft_from_form(form, self.tz)
            if selected is None:
                await self.create_event.execute(draft, self._owner_id())
                self.state.set_notice(Notice.success(MSG_ADDED, operation=operation))
                return blank_fields()

            updated = await self.update_event.execute(selected.id, draft, fallback=selected)
            self.state.selected_event = updated
            self.state.set_notice(Notice.success(MSG_UPDATED, operation=operation))
            return fields_from_event(updated, self.tz)
        except FormValidationError as e:
            logger.warning(f"Rejected event form: {e}")
            self.state.set_notice(Notice.error(f"{failure_message}: {e.user_message}", operation=operation))
        except (WriteError, NotAuthenticatedError) as e:
            logger.error(f"Event {operation} failed: {e}")
            self.state.set_notice(Notice.error(failure_message, operation=operation))
        return _submitted_values(form)

    async def delete(self, confirm: Confirm) -> bool:
        """
        Delete the selected event after an explicit confirmation

        Returns:
            True if the event was deleted; False if nothing was selected,
            the user declined or the store rejected the delete
        """
        selected = self.state.selected_event
        if selected is None:
            return False

        answer = confirm()
        if inspect.isawaitable(answer):
            answer = await answer
        if not answer:
            return False

        self.state.clear_notice()
        try:
            await self.delete_event.execute(selected.id)
        except WriteError as e:
            logger.error(f"Event delete failed: {e}")
            self.state.set_notice(Notice.error(MSG_DELETE_FAILED, operation="delete"))
            return False

        self.state.selected_event = None
        self.state.set_notice(Notice.success(MSG_DELETED, operation="delete"))
        return True


def _submitted_values(form: Mapping) -> EventFormFields:
    return EventFormFields(
        name=str(form.get("name") or ""),
        description=str(form.get("description") or ""),
        category=EventCategory.coerce(form.get("category") or None),
        datetime=str(form.get("datetime") or ""),
        is_private=checkbox_value(form.get("is_private")),
    )
