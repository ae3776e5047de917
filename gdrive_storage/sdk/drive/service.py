"""Google Drive service factory."""

from googleapiclient.discovery import build


def get_drive_service(credentials):
    """
    Build and return a Google Drive API service object.

    Args:
        credentials: An authorized google.auth credentials object

    Returns:
        Google Drive v3 API service object
    """
    return build("drive", "v3", credentials=credentials, cache_discovery=False)
