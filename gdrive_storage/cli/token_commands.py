"""CLI commands for obtaining a refresh token."""

import os

import click
from click_option_group import optgroup, MutuallyExclusiveOptionGroup

from gdrive_storage.sdk.config import CLIENT_ID_KEY, CLIENT_SECRET_KEY, REFRESH_TOKEN_KEY
from gdrive_storage.sdk.token import DRIVE_SCOPES, create_refresh_token
from .decorators import handle_errors


@click.group()
def token():
    """Obtain Google Drive OAuth tokens."""
    pass


@token.command("create")
@optgroup.group('Client credentials', cls=MutuallyExclusiveOptionGroup)
@optgroup.option('--client-creds', type=click.Path(exists=True, dir_okay=False),
                 help='OAuth client secrets JSON file.')
@optgroup.option('--from-env', is_flag=True,
                 help=f'Use {CLIENT_ID_KEY} and {CLIENT_SECRET_KEY} (default).')
@click.option('--scope', 'scopes', multiple=True, help='Scope URL to request. Repeatable. Defaults to full Drive access.')
@click.option('--port', type=int, default=0, show_default=True, help='Local port for the OAuth redirect.')
@handle_errors
def create_cmd(client_creds, from_env, scopes, port):
    """Run the browser consent flow and print a refresh token.

    The token is printed as a .env line; it is not stored anywhere.
    """
    refresh_token = create_refresh_token(
        client_creds_path=client_creds,
        client_id=None if client_creds else os.getenv(CLIENT_ID_KEY),
        client_secret=None if client_creds else os.getenv(CLIENT_SECRET_KEY),
        scopes=list(scopes) or DRIVE_SCOPES,
        port=port,
    )
    click.secho("Authorization complete. Add this line to your .env:", fg="green", err=True)
    click.echo(f"{REFRESH_TOKEN_KEY}={refresh_token}")
