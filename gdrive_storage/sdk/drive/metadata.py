"""Google Drive file metadata operations."""

METADATA_FIELDS = ("id", "name", "mimeType", "size", "createdTime", "modifiedTime")


def get_file_metadata(service, file_id: str) -> dict:
    """
    Get the metadata of a file or folder.

    Returns:
        Dict with id, name, mimeType, size, createdTime and modifiedTime.
        Fields Drive does not report (size for folders) are None.
    """
    file = service.files().get(
        fileId=file_id,
        fields=", ".join(METADATA_FIELDS)
    ).execute()

    return {field: file.get(field) for field in METADATA_FIELDS}


def update_file_metadata(service, file_id: str, new_name: str) -> dict:
    """Rename a file or folder. Returns its id and new name."""
    updated = service.files().update(
        fileId=file_id,
        body={"name": new_name},
        fields="id, name"
    ).execute()

    return {
        "id": updated.get("id"),
        "name": updated.get("name")
    }
