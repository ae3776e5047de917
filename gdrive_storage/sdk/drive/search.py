"""Google Drive search and paginated listing."""

import logging
from typing import Dict, List

from .query import build_search_query

logger = logging.getLogger(__name__)

LIST_FIELDS = "nextPageToken, files(id, name)"


def list_all_files(service, query: str) -> List[Dict[str, str]]:
    """
    Run a files.list query and follow nextPageToken until it runs out.

    Args:
        service: Drive API service object
        query: Drive query string

    Returns:
        List of {"id", "name"} dicts across all pages, in page order
    """
    files = []
    page_token = None
    pages = 0

    while True:
        response = service.files().list(
            q=query,
            spaces="drive",
            pageToken=page_token,
            fields=LIST_FIELDS,
        ).execute()
        pages += 1

        for file in response.get("files", []):
            files.append({"id": file.get("id"), "name": file.get("name")})

        page_token = response.get("nextPageToken")
        if not page_token:
            break

    logger.debug(f"Query {query!r} returned {len(files)} items over {pages} page(s)")
    return files


def search(service, name: str, type_search: str = "files") -> List[Dict[str, str]]:
    """
    Search Google Drive for files and/or folders whose name contains a substring.

    Args:
        service: Drive API service object
        name: Name or partial name to look for
        type_search: 'files' (no folders), 'folders' (only folders) or 'all'.
                     Anything else is treated as 'all'.

    Returns:
        List of {"id", "name"} dicts for every match
    """
    return list_all_files(service, build_search_query(name, type_search))
