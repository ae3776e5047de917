"""Google Drive SDK operations."""

from .service import get_drive_service
from .query import FOLDER_MIME_TYPE, build_search_query
from .folders import create_folder, list_files_in_folder, find_child
from .upload import UploadedFile, upload_file
from .download import StreamedDownload, open_download
from .search import search, list_all_files
from .metadata import get_file_metadata, update_file_metadata

__all__ = [
    "get_drive_service",
    "FOLDER_MIME_TYPE",
    "build_search_query",
    "create_folder",
    "list_files_in_folder",
    "find_child",
    "UploadedFile",
    "upload_file",
    "StreamedDownload",
    "open_download",
    "search",
    "list_all_files",
    "get_file_metadata",
    "update_file_metadata",
]
