"""Google Drive folder operations."""

from typing import Dict, List, Optional

from .query import FOLDER_MIME_TYPE, escape_query_value, in_parents_query
from .search import list_all_files


def create_folder(service, name: str) -> dict:
    """
    Create a new folder in the Drive root.

    Duplicate names are allowed; Drive keeps both.

    Returns:
        Dict with the folder name and its new id
    """
    file_metadata = {
        "name": name,
        "mimeType": FOLDER_MIME_TYPE
    }

    folder = service.files().create(
        body=file_metadata,
        fields="id"
    ).execute()

    return {
        "folder": name,
        "folderId": folder.get("id")
    }


def list_files_in_folder(service, folder_id: str) -> List[Dict[str, str]]:
    """List every direct child of a folder, across all result pages."""
    return list_all_files(service, in_parents_query(folder_id))


def find_child(service, parent_id: str, name: str) -> Optional[dict]:
    """
    Find a non-trashed item by exact name directly under a folder.

    Returns:
        Dict with id, name, mimeType and size of the first match, or None
    """
    results = service.files().list(
        q=f"{in_parents_query(parent_id)} and name = '{escape_query_value(name)}' and trashed = false",
        spaces="drive",
        fields="files(id, name, mimeType, size)",
        pageSize=1
    ).execute()

    files = results.get("files", [])
    return files[0] if files else None
