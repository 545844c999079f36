from .toggle_favorite import FavoriteReconciler

__all__ = ["FavoriteReconciler"]
