"""Unit tests for folder creation and metadata read/update."""

from gdrive_storage.sdk.drive import FOLDER_MIME_TYPE


def test_create_folder_returns_name_and_id(fake_service, make_facade):
    facade = make_facade(fake_service)

    result = facade.create_folder("invoices")

    assert result == {"folder": "invoices", "folderId": "file-1"}
    created = fake_service.files().created[0]
    assert created["body"] == {"name": "invoices", "mimeType": FOLDER_MIME_TYPE}
    assert created["fields"] == "id"


def test_duplicate_folder_names_are_allowed(fake_service, make_facade):
    facade = make_facade(fake_service)

    first = facade.create_folder("invoices")
    second = facade.create_folder("invoices")

    assert first["folderId"] != second["folderId"]


def test_get_metadata_returns_six_fields(fake_service, make_facade):
    fake_service.files().items["abc"] = {
        "id": "abc",
        "name": "report.pdf",
        "mimeType": "application/pdf",
        "size": "1024",
        "createdTime": "2024-01-01T00:00:00.000Z",
        "modifiedTime": "2024-02-01T00:00:00.000Z",
        "owners": [{"displayName": "someone"}],
    }
    facade = make_facade(fake_service)

    assert facade.get_file_metadata("abc") == {
        "id": "abc",
        "name": "report.pdf",
        "mimeType": "application/pdf",
        "size": "1024",
        "createdTime": "2024-01-01T00:00:00.000Z",
        "modifiedTime": "2024-02-01T00:00:00.000Z",
    }


def test_get_metadata_missing_size_is_none(fake_service, make_facade):
    fake_service.files().items["dir"] = {"id": "dir", "name": "docs", "mimeType": FOLDER_MIME_TYPE}
    facade = make_facade(fake_service)

    metadata = facade.get_file_metadata("dir")

    assert metadata["size"] is None
    assert metadata["createdTime"] is None


def test_get_metadata_requests_exact_fields(mock_service, make_facade):
    mock_service.files.return_value.get.return_value.execute.return_value = {"id": "abc"}
    facade = make_facade(mock_service)

    facade.get_file_metadata("abc")

    mock_service.files.return_value.get.assert_called_once_with(
        fileId="abc",
        fields="id, name, mimeType, size, createdTime, modifiedTime",
    )


def test_rename_then_read_reflects_new_name(fake_service, make_facade):
    fake_service.files().items["abc"] = {"id": "abc", "name": "old.pdf", "mimeType": "application/pdf"}
    facade = make_facade(fake_service)

    assert facade.update_file_metadata("abc", "X") == {"id": "abc", "name": "X"}
    assert facade.get_file_metadata("abc")["name"] == "X"
