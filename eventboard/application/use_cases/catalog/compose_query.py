# Standard library imports
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

# Local application imports
from ....core.exceptions import InvalidQueryError
from ....domain.constants import ALL_CATEGORIES, EventFields
from ....domain.models.event import Event, EventCategory
from ....domain.repositories.document_store import (
    EQUALS,
    OrderBy,
    Predicate,
    SortDirection,
)

# Terms this short are treated as no search at all
MIN_SEARCH_LENGTH = 3


@dataclass(frozen=True)
class QueryScope:
    """Fixed visibility of a view: the owner's events, public events, or both"""
    owner_id: Optional[str] = None
    public_only: bool = False


@dataclass(frozen=True)
class QueryFilters:
    """User-selected criteria on top of the scope"""
    category: Optional[Union[EventCategory, str]] = None
    search_term: Optional[str] = None


@dataclass(frozen=True)
class QuerySpec:
    """
    Store query plus the client-side name search.

    `predicates` and `order_by` are sent to the store; `search_term` is
    already normalized (trimmed, lower-cased) and None when there is
    nothing to refine.
    """

    collection: str
    predicates: Tuple[Predicate, ...]
    order_by: OrderBy
    search_term: Optional[str] = None

    def matches(self, event: Event) -> bool:
        if self.search_term is None:
            return True
        return self.search_term in (event.name or "").lower()

    def apply(self, events: Iterable[Event]) -> List[Event]:
        return [event for event in events if self.matches(event)]


def normalize_search_term(term: Optional[str]) -> Optional[str]:
    """Lower-cased, trimmed term, or None when it is too short to search on"""
    normalized = (term or "").strip().lower()
    if len(normalized) < MIN_SEARCH_LENGTH:
        return None
    return normalized


def resolve_category(category: Optional[Union[EventCategory, str]]) -> Optional[EventCategory]:
    """
    Map a filter selection to a concrete category

    Returns:
        The category, or None for "all categories"

    Raises:
        InvalidQueryError: If the selection is not a known category
    """
    if category is None or category == "" or category == ALL_CATEGORIES:
        return None
    if isinstance(category, EventCategory):
        return category
    try:
        return EventCategory(category)
    except ValueError:
        raise InvalidQueryError(
            f"Unknown category filter: {category!r}",
            details={"category": category},
        )


class QueryComposer:
    """Builds the store query for a view from its scope and the selected filters"""

    def __init__(self, collection: str) -> None:
        self.collection = collection

    def compose(self, base: QueryScope, filters: Optional[QueryFilters] = None) -> QuerySpec:
        filters = filters or QueryFilters()
        predicates: List[Predicate] = []

        if base.owner_id:
            predicates.append(Predicate(EventFields.OWNER_ID, EQUALS, base.owner_id))
        if base.public_only:
            predicates.append(Predicate(EventFields.IS_PRIVATE, EQUALS, False))
        if not predicates:
            raise InvalidQueryError("Query scope requires an owner or public visibility")

        category = resolve_category(filters.category)
        if category is not None:
            predicates.append(Predicate(EventFields.CATEGORY, EQUALS, category.value))

        return QuerySpec(
            collection=self.collection,
            predicates=tuple(predicates),
            order_by=OrderBy(EventFields.CREATED_AT, SortDirection.DESCENDING),
            search_term=normalize_search_term(filters.search_term),
        )
