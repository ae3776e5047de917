"""
Unit test fixtures: Drive service doubles and a ready-made facade.

No test here talks to Google.
"""

from unittest.mock import MagicMock

import pytest

from gdrive_storage.sdk import DriveFacade, DriveSession
from gdrive_storage.sdk.config import DriveSettings


class _Request:
    """Stand-in for googleapiclient.http.HttpRequest."""

    def __init__(self, fn):
        self._fn = fn

    def execute(self):
        return self._fn()


class FakeFiles:
    """In-memory files() resource supporting create, get, update and delete."""

    def __init__(self):
        self.items = {}
        self.created = []
        self._next_id = 1

    def create(self, body=None, media_body=None, fields=None):
        def run():
            file_id = f"file-{self._next_id}"
            self._next_id += 1
            item = dict(body or {}, id=file_id)
            self.items[file_id] = item
            self.created.append({"body": body, "media_body": media_body, "fields": fields})
            return {"id": file_id}
        return _Request(run)

    def get(self, fileId=None, fields=None):
        def run():
            item = self.items[fileId]
            wanted = [f.strip() for f in fields.split(",")] if fields else list(item)
            return {k: item[k] for k in wanted if k in item}
        return _Request(run)

    def update(self, fileId=None, body=None, fields=None):
        def run():
            self.items[fileId].update(body or {})
            item = self.items[fileId]
            return {"id": item["id"], "name": item.get("name")}
        return _Request(run)

    def delete(self, fileId=None):
        def run():
            del self.items[fileId]
            return ""
        return _Request(run)


class FakeDriveService:
    def __init__(self):
        self._files = FakeFiles()

    def files(self):
        return self._files


@pytest.fixture
def settings():
    return DriveSettings(client_id="client-id", client_secret="client-secret", refresh_token="refresh-token")


@pytest.fixture
def fake_service():
    return FakeDriveService()


@pytest.fixture
def mock_service():
    """MagicMock service; set files().list().execute side effects per test."""
    return MagicMock()


@pytest.fixture
def paged_service(mock_service):
    """Factory: make successive files().list(...).execute() calls return the given pages."""
    def _make(pages):
        mock_service.files.return_value.list.return_value.execute.side_effect = list(pages)
        return mock_service
    return _make


@pytest.fixture
def make_facade(settings):
    """Factory building a facade around any service double."""
    def _make(service, **overrides):
        values = dict(
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            refresh_token=settings.refresh_token,
        )
        values.update(overrides)
        return DriveFacade(DriveSession(service, DriveSettings(**values)))
    return _make
