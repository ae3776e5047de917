"""gdrive-storage SDK - Google Drive operations behind a single facade.

The facade is built once by the application's composition root and passed
to whatever needs Drive access:

    from gdrive_storage.sdk import DriveFacade

    drive = DriveFacade.from_env()
    folder = drive.create_folder("invoices")
    result = drive.upload_file(UploadedFile.from_path("a.pdf"), folder["folderId"])
    for ref in drive.search("invoice", "files"):
        print(ref["id"], ref["name"])
"""

from . import config
from . import exceptions
from .drive import UploadedFile, StreamedDownload
from .exceptions import DriveStorageError, ConfigurationError, RemoteOperationError
from .facade import DriveFacade
from .session import DriveSession
from .storage import Disk, GoogleDriveDisk, StorageManager

__all__ = [
    "config",
    "exceptions",
    "DriveFacade",
    "DriveSession",
    "UploadedFile",
    "StreamedDownload",
    "Disk",
    "GoogleDriveDisk",
    "StorageManager",
    "DriveStorageError",
    "ConfigurationError",
    "RemoteOperationError",
]
