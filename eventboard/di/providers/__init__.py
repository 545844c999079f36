from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .catalog_provider import CatalogProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "CatalogProvider",
]
