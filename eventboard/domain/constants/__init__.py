"""Constants for domain model field names and filter values"""

from .event_fields import EventFields
from .categories import ALL_CATEGORIES, CATEGORY_LABELS, FILTER_CHOICES, category_label

__all__ = [
    "EventFields",
    "ALL_CATEGORIES",
    "CATEGORY_LABELS",
    "FILTER_CHOICES",
    "category_label",
]
