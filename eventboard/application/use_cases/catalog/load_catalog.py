# Standard library imports
import itertools
import logging
from typing import List, Optional

# Local application imports
from ....core.exceptions import LoadError
from ....domain.models.event import Event
from ....domain.repositories.document_store import DocumentStore
from ...services.event_mapper import snapshot_to_event
from ...state.catalog_state import CatalogState
from .compose_query import QuerySpec

logger = logging.getLogger(__name__)


class CatalogLoader:
    """
    Executes a composed query and replaces the mirror's event list.

    Every call takes a new request token. Only the call holding the latest
    token may write the mirror; older calls that resolve afterwards are
    discarded, so the most recently issued reload always wins.
    """

    def __init__(self, document_store: DocumentStore, state: CatalogState) -> None:
        self.document_store = document_store
        self.state = state
        self._tokens = itertools.count(1)
        self._latest_token = 0

    @property
    def latest_token(self) -> int:
        return self._latest_token

    def is_current(self, token: int) -> bool:
        return token == self._latest_token

    async def load(self, spec: QuerySpec) -> Optional[List[Event]]:
        """
        Load the catalog for a query

        Args:
            spec: Composed query; its search term is applied client-side

        Returns:
            The new event list, or None if a newer load superseded this one

        Raises:
            LoadError: If this is the latest load and the query failed
        """
        token = next(self._tokens)
        self._latest_token = token
        self.state.loading = True

        try:
            snapshots = await self.document_store.query_collection(
                spec.collection,
                spec.predicates,
                spec.order_by,
            )
        except Exception as e:
            if not self.is_current(token):
                logger.warning(f"Superseded catalog load #{token} failed: {e}")
                return None
            logger.error(f"Catalog load #{token} failed: {e}")
            if isinstance(e, LoadError):
                self.state.error = e
                raise
            error = LoadError(f"Error loading events: {str(e)}")
            self.state.error = error
            raise error from e
        finally:
            if self.is_current(token):
                self.state.loading = False

        if not self.is_current(token):
            logger.debug(f"Discarding stale catalog load #{token} (latest is #{self._latest_token})")
            return None

        events = spec.apply(self._materialize(snapshots))
        self.state.replace_events(events)
        self.state.error = None
        logger.info(f"Loaded {len(events)} events from {spec.collection}")
        return events

    def _materialize(self, snapshots) -> List[Event]:
        events: List[Event] = []
        for snapshot in snapshots:
            try:
                events.append(snapshot_to_event(snapshot))
            except (ValueError, TypeError) as e:
                logger.warning(f"Skipping malformed event document {snapshot.id}: {e}")
        return events
