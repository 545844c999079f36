import logging
from typing import List, Optional, Union

from ...core.exceptions import InvalidQueryError, LoadError, NotAuthenticatedError, ToggleError
from ...domain.constants import ALL_CATEGORIES
from ...domain.models.event import Event, EventCategory
from ...domain.repositories.session_provider import SessionProvider
from ..dto.event_dto import Notice
from ..state.catalog_state import CatalogState
from ..use_cases.catalog.compose_query import QueryComposer, QueryFilters, QueryScope, resolve_category
from ..use_cases.catalog.load_catalog import CatalogLoader
from ..use_cases.favorites.toggle_favorite import FavoriteReconciler

logger = logging.getLogger(__name__)

MSG_LOAD_FAILED = "Failed to load events"

PUBLIC_SCOPE = QueryScope(public_only=True)


class PublicBrowseController:
    """Public view: browse non-private events by category and curate favorites"""

    def __init__(
        self,
        session_provider: SessionProvider,
        state: CatalogState,
        query_composer: QueryComposer,
        catalog_loader: CatalogLoader,
        favorite_reconciler: FavoriteReconciler,
    ) -> None:
        self.session_provider = session_provider
        self.state = state
        self.query_composer = query_composer
        self.catalog_loader = catalog_loader
        self.favorite_reconciler = favorite_reconciler
        self.selected_category: Union[EventCategory, str] = ALL_CATEGORIES

    async def reload(self) -> Optional[List[Event]]:
        # Signed-out visitors see nothing and trigger no query
        if not self.session_provider.is_authenticated():
            self.state.replace_events([])
            self.state.selected_event = None
            self.favorite_reconciler.refresh()
            return None
        try:
            spec = self.query_composer.compose(
                PUBLIC_SCOPE,
                QueryFilters(category=self.selected_category),
            )
            events = await self.catalog_loader.load(spec)
        except LoadError as e:
            logger.error(f"Public catalog reload failed: {e}")
            self.state.set_notice(Notice.error(MSG_LOAD_FAILED, operation="load"))
            return None

        if events is not None:
            self.favorite_reconciler.refresh()
        return events

    async def mount(self) -> Optional[List[Event]]:
        return await self.reload()

    async def select_category(self, category: Optional[Union[EventCategory, str]]) -> Optional[List[Event]]:
        try:
            resolve_category(category)
        except InvalidQueryError as e:
            logger.warning(f"Rejected category filter: {e}")
            self.state.set_notice(Notice.error(MSG_LOAD_FAILED, operation="load"))
            return None
        self.selected_category = category or ALL_CATEGORIES
        return await self.reload()

    async def toggle_favorite(self, event_id: str) -> Optional[bool]:
        """
        Flip the favorite bit of an event

        Returns:
            The new membership bit, or None when signed out or the patch failed
        """
        if not self.session_provider.is_authenticated():
            return None
        try:
            return await self.favorite_reconciler.toggle(event_id)
        except (ToggleError, NotAuthenticatedError) as e:
            # Rolled back already; not shown to the user
            logger.warning(f"Favorite toggle for {event_id} not applied: {e}")
            return None

    def is_favorite(self, event_id: str) -> bool:
        return self.favorite_reconciler.is_favorite(event_id)

    def favorite_count(self, event_id: str) -> int:
        return self.favorite_reconciler.favorite_count(event_id)
