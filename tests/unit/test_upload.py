"""Unit tests for uploads: naming, parent folder selection and payload."""

import re

import pytest

from gdrive_storage.sdk.drive import UploadedFile, upload_file
from gdrive_storage.sdk.drive.upload import random_name


@pytest.fixture
def upload_service(mock_service):
    mock_service.files.return_value.create.return_value.execute.return_value = {"id": "new-file"}
    return mock_service


def _create_kwargs(service):
    return service.files.return_value.create.call_args.kwargs


def test_random_name_shape():
    assert re.fullmatch(r"[A-Za-z0-9]{10}\.pdf", random_name("pdf"))
    assert re.fullmatch(r"[A-Za-z0-9]{10}", random_name(""))
    assert random_name("pdf") != random_name("pdf")


def test_upload_to_root_without_any_folder(upload_service):
    file = UploadedFile.from_bytes(b"%PDF-1.4", "scan.pdf")

    result = upload_file(upload_service, file)

    assert result == {"id": "new-file"}
    kwargs = _create_kwargs(upload_service)
    assert "parents" not in kwargs["body"]
    assert re.fullmatch(r"[A-Za-z0-9]{10}\.pdf", kwargs["body"]["name"])
    assert kwargs["fields"] == "id"


def test_upload_uses_default_folder(upload_service):
    file = UploadedFile.from_bytes(b"data", "notes.txt")

    upload_file(upload_service, file, default_folder_id="default-folder")

    assert _create_kwargs(upload_service)["body"]["parents"] == ["default-folder"]


def test_explicit_folder_wins_over_default(upload_service):
    file = UploadedFile.from_bytes(b"data", "notes.txt")

    upload_file(upload_service, file, folder_id="explicit", default_folder_id="default-folder")

    assert _create_kwargs(upload_service)["body"]["parents"] == ["explicit"]


def test_empty_explicit_folder_uses_default(upload_service):
    file = UploadedFile.from_bytes(b"data", "notes.txt")

    upload_file(upload_service, file, folder_id="", default_folder_id="default-folder")

    assert _create_kwargs(upload_service)["body"]["parents"] == ["default-folder"]


def test_empty_explicit_folder_without_default_goes_to_root(upload_service):
    upload_file(upload_service, UploadedFile.from_bytes(b"data", "notes.txt"), folder_id="")

    assert "parents" not in _create_kwargs(upload_service)["body"]


def test_media_is_multipart_with_full_content(upload_service):
    file = UploadedFile.from_bytes(b"hello drive", "notes.txt")

    upload_file(upload_service, file)

    media = _create_kwargs(upload_service)["media_body"]
    assert media.mimetype() == "text/plain"
    assert media.resumable() is False
    assert media.getbytes(0, media.size()) == b"hello drive"


def test_from_path_reads_local_file(tmp_path, upload_service):
    local = tmp_path / "photo.png"
    local.write_bytes(b"\x89PNG")

    file = UploadedFile.from_path(str(local))
    upload_file(upload_service, file)

    assert file.extension == "png"
    assert file.mime_type == "image/png"
    media = _create_kwargs(upload_service)["media_body"]
    assert media.getbytes(0, media.size()) == b"\x89PNG"


def test_unknown_type_defaults_to_octet_stream():
    file = UploadedFile(b"raw", extension=".bin.unknownext")
    assert file.mime_type == "application/octet-stream"
    assert file.read() == b"raw"


def test_facade_upload_uses_configured_default_folder(upload_service, make_facade):
    facade = make_facade(upload_service, folder_id="configured-folder")

    assert facade.upload_file(UploadedFile.from_bytes(b"x", "a.txt")) == {"id": "new-file"}
    assert _create_kwargs(upload_service)["body"]["parents"] == ["configured-folder"]


def test_facade_upload_without_default_folder_goes_to_root(upload_service, make_facade):
    facade = make_facade(upload_service)

    facade.upload_file(UploadedFile.from_bytes(b"x", "a.txt"))

    assert "parents" not in _create_kwargs(upload_service)["body"]
