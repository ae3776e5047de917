"""Obtain a refresh token for GOOGLE_DRIVE_REFRESH_TOKEN.

Runs the installed-app OAuth flow in the browser. Nothing is written to
disk; the caller decides where the token goes.
"""

import os
import logging
from typing import List, Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DRIVE_SCOPES = ["https://www.googleapis.com/auth/drive"]

AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
TOKEN_URI = "https://oauth2.googleapis.com/token"


def build_client_config(client_id: str, client_secret: str) -> dict:
    """Client configuration in the client_secrets.json 'installed' layout."""
    return {
        "installed": {
            "client_id": client_id,
            "client_secret": client_secret,
            "auth_uri": AUTH_URI,
            "token_uri": TOKEN_URI,
            "redirect_uris": ["http://localhost"],
        }
    }


def create_refresh_token(
    client_creds_path: Optional[str] = None,
    client_id: Optional[str] = None,
    client_secret: Optional[str] = None,
    scopes: Optional[List[str]] = None,
    port: int = 0,
) -> str:
    """
    Run the OAuth consent flow and return the resulting refresh token.

    Args:
        client_creds_path: Path to a client_secrets.json file
        client_id: OAuth client ID (used when no file is given)
        client_secret: OAuth client secret (used when no file is given)
        scopes: Scopes to request. Defaults to full Drive access.
        port: Local port for the redirect listener (0 picks a free one)

    Returns:
        The refresh token string

    Raises:
        ConfigurationError: If no usable client credentials were supplied,
                            or Google did not return a refresh token
    """
    from google_auth_oauthlib.flow import InstalledAppFlow

    scopes = scopes or DRIVE_SCOPES

    if client_creds_path:
        if not os.path.exists(client_creds_path):
            raise ConfigurationError(f"Client credentials file not found: {client_creds_path}")
        logger.info(f"Using client credentials: {client_creds_path}")
        flow = InstalledAppFlow.from_client_secrets_file(client_creds_path, scopes)
    elif client_id and client_secret:
        flow = InstalledAppFlow.from_client_config(build_client_config(client_id, client_secret), scopes)
    else:
        missing = [
            key for key, value in (
                ("GOOGLE_DRIVE_CLIENT_ID", client_id),
                ("GOOGLE_DRIVE_CLIENT_SECRET", client_secret),
            ) if not value
        ]
        raise ConfigurationError(
            f"Missing Google Drive configuration (.env): {', '.join(missing)}",
            missing_keys=missing,
        )

    logger.info(f"Requesting OAuth token for scopes: {', '.join(scopes)}")
    # prompt=consent makes Google issue a refresh token even on re-authorization
    creds = flow.run_local_server(port=port, access_type="offline", prompt="consent")
    logger.info("User authorization completed via browser.")

    if not creds.refresh_token:
        raise ConfigurationError("Authorization succeeded but no refresh token was returned.")
    return creds.refresh_token
