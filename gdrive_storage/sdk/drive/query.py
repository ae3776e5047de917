"""Drive query string construction."""

import logging

logger = logging.getLogger(__name__)

FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"

# Search scope selector -> extra query clause
TYPE_FILTERS = {
    "files": f"mimeType != '{FOLDER_MIME_TYPE}'",
    "folders": f"mimeType = '{FOLDER_MIME_TYPE}'",
    "all": "",
}


def escape_query_value(value: str) -> str:
    """Escape a value for use inside a single-quoted Drive query string."""
    return str(value).replace("\\", "\\\\").replace("'", "\\'")


def build_search_query(name: str, type_search: str = "files") -> str:
    """
    Build a 'name contains' query narrowed by the scope selector.

    Unrecognized selectors apply no type filter, the same as 'all'.
    """
    if type_search not in TYPE_FILTERS:
        logger.debug(f"Unknown search type '{type_search}', searching all objects.")
    type_filter = TYPE_FILTERS.get(type_search, "")

    query = f"name contains '{escape_query_value(name)}'"
    if type_filter:
        query += f" and {type_filter}"
    return query


def in_parents_query(folder_id: str) -> str:
    """Query matching the direct children of a folder."""
    return f"'{escape_query_value(folder_id)}' in parents"
