from .form_binder import blank_fields, fields_from_event, draft_from_form
from .event_mapper import snapshot_to_event, draft_to_fields, new_event_document, merge_draft

__all__ = [
    "blank_fields",
    "fields_from_event",
    "draft_from_form",
    "snapshot_to_event",
    "draft_to_fields",
    "new_event_document",
    "merge_draft",
]
