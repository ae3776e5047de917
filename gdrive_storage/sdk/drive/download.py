"""Google Drive download operations."""

import io
import os
import tempfile
from typing import Iterator, Optional

from googleapiclient.http import DEFAULT_CHUNK_SIZE, MediaIoBaseDownload


class StreamedDownload:
    """
    File content delivered as a stream of byte chunks.

    Chunks are fetched from Drive as they are iterated, so the stream can
    only be consumed once.
    """

    def __init__(self, name: str, mime_type: Optional[str], chunks: Iterator[bytes], size: Optional[int] = None):
        self.name = name
        self.mime_type = mime_type
        self.size = size
        self._chunks = chunks

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._chunks)

    def read(self) -> bytes:
        """Consume the whole stream and return its content."""
        return b"".join(self._chunks)

    def save(self, save_path: str) -> int:
        """
        Write the stream to a local file. Returns the number of bytes written.

        Content goes to a temporary file next to `save_path` and is moved into
        place only once the stream is complete, so a failed download never
        leaves a truncated file behind.
        """
        target_dir = os.path.dirname(os.path.abspath(save_path))
        fd, tmp_path = tempfile.mkstemp(dir=target_dir, prefix=".download-", suffix=".part")
        written = 0
        try:
            with os.fdopen(fd, "wb") as f:
                for chunk in self._chunks:
                    f.write(chunk)
                    written += len(chunk)
            os.replace(tmp_path, save_path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        return written


def iter_file_chunks(service, file_id: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield the content of a Drive file chunk by chunk."""
    request = service.files().get_media(fileId=file_id)
    buffer = io.BytesIO()
    downloader = MediaIoBaseDownload(buffer, request, chunksize=chunk_size)

    done = False
    while not done:
        _, done = downloader.next_chunk()
        chunk = buffer.getvalue()
        if chunk:
            yield chunk
        buffer.seek(0)
        buffer.truncate()


def open_download(service, file: dict, chunk_size: int = DEFAULT_CHUNK_SIZE) -> StreamedDownload:
    """
    Prepare a streamed download of a resolved Drive file.

    Args:
        service: Drive API service object
        file: Dict with at least the file 'id', plus 'name', 'mimeType', 'size' when known
    """
    size = file.get("size")
    return StreamedDownload(
        name=file.get("name"),
        mime_type=file.get("mimeType"),
        chunks=iter_file_chunks(service, file["id"], chunk_size=chunk_size),
        size=int(size) if size is not None else None,
    )
