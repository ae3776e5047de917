"""Authenticated Drive session bootstrap.

A DriveSession is built once by the application's composition root from
the three credential settings and then shared by reference.
"""

import logging
from typing import Optional

from google.auth.exceptions import RefreshError, TransportError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials

from .config import DriveSettings, load_settings
from .drive.service import get_drive_service
from .exceptions import ConfigurationError, RemoteOperationError

logger = logging.getLogger(__name__)

TOKEN_URI = "https://oauth2.googleapis.com/token"


def build_credentials(settings: DriveSettings) -> Credentials:
    """
    Build OAuth user credentials from a client id/secret and refresh token.

    Raises:
        ConfigurationError: If any of the three values is missing
    """
    settings.require_credentials()
    return Credentials(
        token=None,
        refresh_token=settings.refresh_token,
        token_uri=TOKEN_URI,
        client_id=settings.client_id,
        client_secret=settings.client_secret,
    )


class DriveSession:
    """Holds the authenticated Drive service handle for the process."""

    def __init__(self, service, settings: DriveSettings):
        self.service = service
        self.settings = settings

    @classmethod
    def create(cls, settings: Optional[DriveSettings] = None, refresh: bool = True) -> "DriveSession":
        """
        Validate settings, authorize and build the Drive service.

        Args:
            settings: Resolved settings. Loaded from env/config file when None.
            refresh: Exchange the refresh token for an access token right away,
                     so revoked or mistyped tokens fail here instead of on the
                     first operation.

        Raises:
            ConfigurationError: If credentials are missing or rejected
            RemoteOperationError: If the token endpoint cannot be reached
        """
        settings = settings or load_settings()
        credentials = build_credentials(settings)

        if refresh:
            try:
                credentials.refresh(Request())
            except RefreshError as e:
                message = f"Google Drive refresh token was rejected: {e}"
                logger.error(message)
                raise ConfigurationError(message) from e
            except TransportError as e:
                logger.error(f"Google Drive token refresh failed: {e}")
                raise RemoteOperationError.from_exception(e) from e
            logger.debug("Google Drive access token obtained.")

        service = get_drive_service(credentials)
        logger.debug("Google Drive session initialized.")
        return cls(service, settings)
