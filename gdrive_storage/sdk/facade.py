"""Single entry point for Google Drive storage operations.

DriveFacade forwards each operation to the Drive API (or to the configured
storage disk for path-based operations), returns plain dicts and turns every
remote failure into RemoteOperationError.
"""

import logging
from functools import wraps
from typing import Dict, Iterator, List, Optional

from . import drive
from .config import DriveSettings, load_settings
from .drive import StreamedDownload, UploadedFile
from .exceptions import DriveStorageError, RemoteOperationError
from .session import DriveSession
from .storage import GoogleDriveDisk, StorageManager
from .timing import time_api_call

logger = logging.getLogger(__name__)


def _to_remote_error(e: Exception) -> RemoteOperationError:
    logger.error(f"Google Drive Error: {e}")
    return RemoteOperationError.from_exception(e)


def remote_operation(func):
    """
    Decorator translating failures of a facade operation.

    Errors already in the gdrive-storage hierarchy pass through; anything
    else is logged and re-raised as RemoteOperationError.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DriveStorageError:
            raise
        except Exception as e:
            raise _to_remote_error(e) from e
    return wrapper


def _translated_chunks(chunks: Iterator[bytes]) -> Iterator[bytes]:
    try:
        yield from chunks
    except DriveStorageError:
        raise
    except Exception as e:
        raise _to_remote_error(e) from e


class DriveFacade:
    """
    Google Drive operations for an application, bound to one session.

    Build it once at startup and pass it to whatever needs Drive access:

        drive = DriveFacade.from_env()
    """

    def __init__(
        self,
        session: DriveSession,
        storage: Optional[StorageManager] = None,
        disk_name: Optional[str] = None
    ):
        self.session = session
        self.disk_name = disk_name or session.settings.disk
        if storage is None:
            storage = StorageManager({
                self.disk_name: GoogleDriveDisk(session.service, session.settings.folder_id)
            })
        self.storage = storage

    @classmethod
    def from_settings(cls, settings: DriveSettings, refresh: bool = True) -> "DriveFacade":
        """Authorize with the given settings and build a facade."""
        return cls(DriveSession.create(settings, refresh=refresh))

    @classmethod
    def from_env(cls, refresh: bool = True) -> "DriveFacade":
        """
        Authorize with settings from the environment and config file.

        Raises:
            ConfigurationError: If any required credential is missing
        """
        return cls.from_settings(load_settings(), refresh=refresh)

    @property
    def service(self):
        return self.session.service

    @property
    def settings(self) -> DriveSettings:
        return self.session.settings

    # --- Drive API operations -------------------------------------------

    @time_api_call
    @remote_operation
    def upload_file(self, file: UploadedFile, folder_id: Optional[str] = None) -> dict:
        """
        Upload a file under a random 10-character name.

        The file goes to `folder_id`, else to the configured default folder
        (GOOGLE_DRIVE_FOLDER_ID), else to the Drive root.

        Returns:
            {"id": <new file id>}
        """
        return drive.upload_file(
            self.service, file,
            folder_id=folder_id,
            default_folder_id=self.settings.folder_id
        )

    @time_api_call
    @remote_operation
    def create_folder(self, name: str) -> dict:
        """Create a folder. Returns {"folder": name, "folderId": id}."""
        return drive.create_folder(self.service, name)

    @time_api_call
    @remote_operation
    def search(self, name: str, type_search: str = "files") -> List[Dict[str, str]]:
        """
        Find files and/or folders whose name contains `name`.

        type_search is 'files', 'folders' or 'all'; unknown values mean 'all'.
        All result pages are fetched before returning.
        """
        return drive.search(self.service, name, type_search)

    @time_api_call
    @remote_operation
    def list_files_in_folder(self, folder_id: str) -> List[Dict[str, str]]:
        """List every direct child of a folder as {"id", "name"} dicts."""
        return drive.list_files_in_folder(self.service, folder_id)

    @time_api_call
    @remote_operation
    def get_file_metadata(self, file_id: str) -> dict:
        return drive.get_file_metadata(self.service, file_id)

    @time_api_call
    @remote_operation
    def update_file_metadata(self, file_id: str, new_name: str) -> dict:
        return drive.update_file_metadata(self.service, file_id, new_name)

    # --- Disk operations ------------------------------------------------

    @time_api_call
    @remote_operation
    def download(self, path: str) -> StreamedDownload:
        """
        Open a file on the storage disk as a byte stream.

        Failures while reading the stream are raised as RemoteOperationError too.
        """
        stream = self.storage.disk(self.disk_name).download(path)
        return StreamedDownload(
            name=stream.name,
            mime_type=stream.mime_type,
            chunks=_translated_chunks(iter(stream)),
            size=stream.size,
        )

    @time_api_call
    @remote_operation
    def url(self, path: str) -> str:
        return self.storage.disk(self.disk_name).url(path)

    @time_api_call
    @remote_operation
    def delete(self, path: str) -> bool:
        """Delete a file on the storage disk. False if nothing was there to delete."""
        return self.storage.disk(self.disk_name).delete(path)
