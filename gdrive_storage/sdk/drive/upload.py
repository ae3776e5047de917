"""Google Drive upload operations."""

import io
import os
import secrets
import string
import logging
import mimetypes
from typing import BinaryIO, Optional, Union

from googleapiclient.http import MediaIoBaseUpload

logger = logging.getLogger(__name__)

RANDOM_NAME_LENGTH = 10
_NAME_ALPHABET = string.ascii_letters + string.digits


class UploadedFile:
    """
    A file waiting to be uploaded: a readable byte source plus its
    extension and MIME type.
    """

    def __init__(self, source: Union[BinaryIO, bytes, str], extension: str = "", mime_type: Optional[str] = None):
        self.source = source
        self.extension = extension.lstrip(".")
        self.mime_type = mime_type or "application/octet-stream"

    @classmethod
    def from_path(cls, local_path: str) -> "UploadedFile":
        """Describe a local file. The file is opened lazily by read()."""
        mime_type, _ = mimetypes.guess_type(local_path)
        _, extension = os.path.splitext(local_path)
        return cls(local_path, extension=extension, mime_type=mime_type)

    @classmethod
    def from_bytes(cls, data: bytes, filename: str, mime_type: Optional[str] = None) -> "UploadedFile":
        """Describe in-memory content using its original filename for type hints."""
        if mime_type is None:
            mime_type, _ = mimetypes.guess_type(filename)
        _, extension = os.path.splitext(filename)
        return cls(io.BytesIO(data), extension=extension, mime_type=mime_type)

    def read(self) -> bytes:
        """Read the whole content into memory."""
        if isinstance(self.source, (bytes, bytearray)):
            return bytes(self.source)
        if isinstance(self.source, (str, os.PathLike)):
            with open(self.source, "rb") as f:
                return f.read()
        return self.source.read()


def random_name(extension: str = "", length: int = RANDOM_NAME_LENGTH) -> str:
    """Random alphanumeric base name with the extension appended."""
    base = "".join(secrets.choice(_NAME_ALPHABET) for _ in range(length))
    return f"{base}.{extension}" if extension else base


def upload_file(
    service,
    file: UploadedFile,
    folder_id: Optional[str] = None,
    default_folder_id: Optional[str] = None
) -> dict:
    """
    Upload a file to Google Drive under a random name.

    Args:
        service: Drive API service object
        file: The content to upload
        folder_id: Destination folder ID. None or "" means not given.
        default_folder_id: Folder used when folder_id is not given.
                           With neither, the file lands in the Drive root.

    Returns:
        Dict with the new file's id
    """
    file_metadata = {"name": random_name(file.extension)}

    parent = folder_id or default_folder_id
    if parent:
        file_metadata["parents"] = [parent]

    data = file.read()
    media = MediaIoBaseUpload(
        io.BytesIO(data),
        mimetype=file.mime_type,
        resumable=False
    )

    logger.debug(f"Uploading {len(data)} bytes as '{file_metadata['name']}'")
    uploaded = service.files().create(
        body=file_metadata,
        media_body=media,
        fields="id"
    ).execute()

    return {"id": uploaded.get("id")}
