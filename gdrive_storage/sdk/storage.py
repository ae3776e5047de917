"""Keyed storage disks.

A disk is a named backend offering path-addressed download, url and delete.
The StorageManager maps disk names to disk instances and is populated by the
application's composition root.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from .drive import find_child, open_download
from .drive.download import StreamedDownload
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PUBLIC_URL_TEMPLATE = "https://drive.google.com/uc?id={file_id}&export=media"


class Disk(ABC):
    """Interface for keyed storage backends."""

    @abstractmethod
    def download(self, path: str) -> StreamedDownload:
        """Open the file at `path` as a byte stream.

        Raises:
            FileNotFoundError: If nothing exists at `path`.
        """

    @abstractmethod
    def url(self, path: str) -> str:
        """Return a URL for the file at `path`.

        Raises:
            FileNotFoundError: If nothing exists at `path`.
        """

    @abstractmethod
    def delete(self, path: str) -> bool:
        """Delete the file at `path`. Returns False if there was nothing to delete."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether a file exists at `path`."""


class GoogleDriveDisk(Disk):
    """
    Disk backed by Google Drive.

    Paths are '/'-separated names resolved from the root folder, e.g.
    'reports/2024/summary.pdf'. Trashed items are ignored. When several items
    share a name, the first one Drive returns wins.
    """

    def __init__(self, service, root_folder_id: Optional[str] = None):
        self.service = service
        self.root_folder_id = root_folder_id or "root"

    def resolve(self, path: str) -> Optional[dict]:
        """Resolve a path to its Drive file dict, or None if any segment is missing."""
        parts = [p for p in path.split("/") if p]
        if not parts:
            return None

        current = {"id": self.root_folder_id}
        for part in parts:
            current = find_child(self.service, current["id"], part)
            if current is None:
                logger.debug(f"Path '{path}' not found at segment '{part}'")
                return None
        return current

    def _require(self, path: str) -> dict:
        file = self.resolve(path)
        if file is None:
            raise FileNotFoundError(f"File not found: {path}")
        return file

    def download(self, path: str) -> StreamedDownload:
        return open_download(self.service, self._require(path))

    def url(self, path: str) -> str:
        file = self._require(path)
        result = self.service.files().get(
            fileId=file["id"],
            fields="webContentLink"
        ).execute()
        return result.get("webContentLink") or PUBLIC_URL_TEMPLATE.format(file_id=file["id"])

    def delete(self, path: str) -> bool:
        file = self.resolve(path)
        if file is None:
            return False
        self.service.files().delete(fileId=file["id"]).execute()
        logger.debug(f"Deleted '{path}' ({file['id']})")
        return True

    def exists(self, path: str) -> bool:
        return self.resolve(path) is not None


class StorageManager:
    """Registry of named disks."""

    def __init__(self, disks: Optional[Dict[str, Disk]] = None):
        self._disks: Dict[str, Disk] = dict(disks or {})

    def register(self, name: str, disk: Disk):
        self._disks[name] = disk

    def disk(self, name: str) -> Disk:
        """
        Get a disk by name.

        Raises:
            ConfigurationError: If no disk is registered under that name
        """
        try:
            return self._disks[name]
        except KeyError:
            raise ConfigurationError(f"Storage disk not configured: {name}") from None

    def names(self):
        return sorted(self._disks)
