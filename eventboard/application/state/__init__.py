from .catalog_state import CatalogState

__all__ = ["CatalogState"]
