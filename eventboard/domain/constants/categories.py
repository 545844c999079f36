"""
Category filter values offered by the browse and management views.

ALL_CATEGORIES is a filter sentinel, never a stored category. Labels are
the display text shown in the category selector; stored values stay English.
"""

from ..models.event import EventCategory

ALL_CATEGORIES = "All"

CATEGORY_LABELS = {
    ALL_CATEGORIES: "Svi",
    EventCategory.SPORTS.value: "Sport",
    EventCategory.MUSIC.value: "Glazba",
    EventCategory.SOCIAL.value: "Druženje",
    EventCategory.OTHER.value: "Ostalo",
}

FILTER_CHOICES = tuple(CATEGORY_LABELS.keys())


def category_label(value) -> str:
    """Display label for a filter value or stored category; unknown values read as Other"""
    if value in (None, ""):
        return CATEGORY_LABELS[ALL_CATEGORIES]
    key = value.value if isinstance(value, EventCategory) else value
    if key in CATEGORY_LABELS:
        return CATEGORY_LABELS[key]
    return CATEGORY_LABELS[EventCategory.OTHER.value]
