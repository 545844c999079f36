# Standard library imports
import logging

# Local application imports
from ....core.exceptions import NotAuthenticatedError, ToggleError
from ....domain.constants import EventFields
from ....domain.repositories.document_store import DocumentStore, SetOp
from ....domain.repositories.session_provider import SessionProvider
from ...state.catalog_state import CatalogState

logger = logging.getLogger(__name__)


class FavoriteReconciler:
    """
    Keeps the current user's favorites in the mirror in step with the store.

    A toggle is two-phase: the local bit is flipped first so the view
    responds immediately, then the matching set-patch is sent. If the patch
    fails, the inverse flip is applied to that one event and ToggleError is
    raised.
    """

    def __init__(
        self,
        document_store: DocumentStore,
        session_provider: SessionProvider,
        state: CatalogState,
        collection: str,
    ) -> None:
        self.document_store = document_store
        self.session_provider = session_provider
        self.state = state
        self.collection = collection

    def _current_user_id(self) -> str:
        user = self.session_provider.get_current_user()
        if not self.session_provider.is_authenticated() or user is None:
            raise NotAuthenticatedError("Favorites require a signed-in user")
        return user.id

    def is_favorite(self, event_id: str) -> bool:
        return event_id in self.state.favorite_ids

    def refresh(self) -> None:
        """Re-derive the favorites index from the mirror's events"""
        user = self.session_provider.get_current_user()
        if not self.session_provider.is_authenticated() or user is None:
            self.state.favorite_ids = set()
            return
        self.state.favorite_ids = {
            event.id for event in self.state.events if event.is_favorited_by(user.id)
        }

    async def toggle(self, event_id: str) -> bool:
        """
        Flip favorite membership of an event for the current user

        Args:
            event_id: ID of an event in the mirror

        Returns:
            The new membership bit

        Raises:
            NotAuthenticatedError: If there is no active session
            ToggleError: If the remote patch failed (the local flip is rolled back)
        """
        user_id = self._current_user_id()
        turning_on = not self.is_favorite(event_id)
        op = SetOp.ADD if turning_on else SetOp.REMOVE

        self._apply(event_id, user_id, turning_on)
        try:
            await self.document_store.patch_set_field(
                self.collection,
                event_id,
                EventFields.FAVORITED_BY,
                op,
                user_id,
            )
        except Exception as e:
            self._apply(event_id, user_id, not turning_on)
            logger.warning(
                f"Favorite {op.value} for event {event_id} failed, local change rolled back: {e}"
            )
            raise ToggleError(event_id, f"Error updating favorites of {event_id}: {str(e)}") from e

        logger.info(f"User {user_id} {'added' if turning_on else 'removed'} favorite {event_id}")
        return turning_on

    def _apply(self, event_id: str, user_id: str, favorite: bool) -> None:
        # Computed against the current mirror so a reload in between is respected
        if favorite:
            self.state.favorite_ids.add(event_id)
        else:
            self.state.favorite_ids.discard(event_id)

        event = self.state.find(event_id)
        if event is None:
            return
        favorited_by = set(event.favorited_by)
        if favorite:
            favorited_by.add(user_id)
        else:
            favorited_by.discard(user_id)
        event.favorited_by = favorited_by
        if self.state.selected_event is not None and self.state.selected_event.id == event_id:
            self.state.selected_event.favorited_by = set(favorited_by)

    def favorite_count(self, event_id: str) -> int:
        event = self.state.find(event_id)
        return len(event.favorited_by) if event is not None else 0
