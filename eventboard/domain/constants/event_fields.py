class EventFields:
    """MongoDB field names for events collection"""

    NAME = "name"
    DESCRIPTION = "description"
    DATETIME = "datetime"
    CATEGORY = "category"
    IS_PRIVATE = "is_private"

    OWNER_ID = "owner_id"
    CREATED_AT = "created_at"

    FAVORITED_BY = "favorited_by"

    # Fields an owner edit writes; everything else is set once or set-patched
    EDITABLE = (NAME, DESCRIPTION, DATETIME, CATEGORY, IS_PRIVATE)
