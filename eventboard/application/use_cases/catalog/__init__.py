from .compose_query import (
    QueryComposer,
    QueryScope,
    QueryFilters,
    QuerySpec,
    MIN_SEARCH_LENGTH,
)
from .load_catalog import CatalogLoader

__all__ = [
    "QueryComposer",
    "QueryScope",
    "QueryFilters",
    "QuerySpec",
    "MIN_SEARCH_LENGTH",
    "CatalogLoader",
]
