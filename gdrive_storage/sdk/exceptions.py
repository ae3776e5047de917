import json
from typing import Iterable, Optional


class DriveStorageError(Exception):
    """Base class for all gdrive-storage exceptions."""
    pass


class ConfigurationError(DriveStorageError):
    """Raised when required configuration is missing or unusable."""

    def __init__(self, message: str, missing_keys: Iterable[str] = ()):
        super().__init__(message)
        self.missing_keys = list(missing_keys)


class RemoteOperationError(DriveStorageError):
    """Raised when a Drive API call or a storage disk operation fails.

    Attributes:
        code: Provider error reason (e.g. 'notFound'), if one was reported
        status: HTTP status code, if the failure came from an HTTP response
        provider_message: The raw, unparsed failure text
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status: Optional[int] = None,
        provider_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.code = code
        self.status = status
        self.provider_message = provider_message if provider_message is not None else message

    @classmethod
    def from_exception(cls, exc: BaseException) -> "RemoteOperationError":
        """
        Build an error from any exception raised by a remote call.

        Google API errors carry a JSON payload of the form
        {"error": {"code": 404, "message": "...", "errors": [{"reason": "..."}]}}.
        When the payload parses, its message and reason are used. Otherwise the
        raw exception text becomes the message. This never raises.
        """
        raw = _raw_message(exc)
        status = _http_status(exc)
        payload = _parse_payload(getattr(exc, "content", None)) or _parse_payload(raw)

        message = raw
        code = None
        error = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(error, dict):
            if isinstance(error.get("message"), str) and error["message"]:
                message = error["message"]
            code = _error_reason(error)
            if status is None and isinstance(error.get("code"), int):
                status = error["code"]

        if not message:
            message = exc.__class__.__name__

        return cls(message, code=code, status=status, provider_message=raw)


def _raw_message(exc: BaseException) -> str:
    content = getattr(exc, "content", None)
    if isinstance(content, bytes) and content:
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError:
            pass
    elif isinstance(content, str) and content:
        return content
    return str(exc)


def _http_status(exc: BaseException) -> Optional[int]:
    resp = getattr(exc, "resp", None)
    status = getattr(resp, "status", None)
    try:
        return int(status) if status is not None else None
    except (TypeError, ValueError):
        return None


def _parse_payload(value) -> Optional[dict]:
    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError:
            return None
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = json.loads(value)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


def _error_reason(error: dict) -> Optional[str]:
    errors = error.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        reason = errors[0].get("reason")
        if reason:
            return str(reason)
    status = error.get("status")
    return str(status) if status else None
