"""Unit tests for building RemoteOperationError from provider failures."""

import json

import httplib2
from googleapiclient.errors import HttpError

from gdrive_storage.sdk.exceptions import RemoteOperationError


def _http_error(status, content):
    resp = httplib2.Response({"status": status})
    return HttpError(resp, content, uri="https://www.googleapis.com/drive/v3/files/abc")


def test_structured_payload_message_and_reason_are_used():
    payload = {
        "error": {
            "code": 404,
            "message": "File not found: abc.",
            "errors": [{"domain": "global", "reason": "notFound", "message": "File not found: abc."}],
        }
    }
    error = RemoteOperationError.from_exception(_http_error(404, json.dumps(payload).encode()))

    assert str(error) == "File not found: abc."
    assert error.code == "notFound"
    assert error.status == 404
    assert json.loads(error.provider_message) == payload


def test_status_field_used_when_no_reason_list():
    payload = {"error": {"code": 403, "message": "Forbidden", "status": "PERMISSION_DENIED"}}
    error = RemoteOperationError.from_exception(_http_error(403, json.dumps(payload).encode()))

    assert str(error) == "Forbidden"
    assert error.code == "PERMISSION_DENIED"


def test_non_json_payload_falls_back_to_raw_text():
    error = RemoteOperationError.from_exception(_http_error(502, b"<html>Bad Gateway</html>"))

    assert str(error) == "<html>Bad Gateway</html>"
    assert error.code is None
    assert error.status == 502


def test_json_without_error_message_falls_back_to_raw_text():
    content = json.dumps({"error": {"code": 500}}).encode()
    error = RemoteOperationError.from_exception(_http_error(500, content))

    assert str(error) == content.decode()
    assert error.status == 500


def test_plain_exception_message_is_kept():
    error = RemoteOperationError.from_exception(FileNotFoundError("File not found: a/b.txt"))

    assert str(error) == "File not found: a/b.txt"
    assert error.code is None
    assert error.status is None


def test_json_in_plain_exception_message_is_parsed():
    message = json.dumps({"error": {"code": 400, "message": "Invalid Value"}})
    error = RemoteOperationError.from_exception(RuntimeError(message))

    assert str(error) == "Invalid Value"
    assert error.status == 400
    assert error.provider_message == message


def test_empty_message_uses_exception_name():
    error = RemoteOperationError.from_exception(TimeoutError())
    assert str(error) == "TimeoutError"
