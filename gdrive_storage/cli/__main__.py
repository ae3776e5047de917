"""gdrive-storage CLI - Command-line access to the Drive storage facade."""

import logging
import os
import sys
import json
from dotenv import load_dotenv
import click

from gdrive_storage import __version__
from gdrive_storage.sdk.config import (
    FOLDER_ID_KEY, REQUIRED_KEYS, get_config_file_path, load_settings
)

from .drive_commands import DRIVE_COMMANDS
from .token_commands import token as token_module
from .config_commands import config_group as config_module


# Configure logging at the application level
if not logging.root.handlers:
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO),
                        format='%(asctime)s - %(levelname)s - %(message)s')
# Suppress noisy INFO logs from googleapiclient and google_auth_oauthlib
logging.getLogger('googleapiclient.discovery').setLevel(logging.WARNING)
logging.getLogger('googleapiclient.discovery_cache').setLevel(logging.WARNING)
logging.getLogger('google_auth_oauthlib.flow').setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


@click.group()
@click.version_option(__version__, prog_name="gdrive-storage")
def cli():
    """gdrive-storage CLI.

    Upload, search, list, rename, download and delete Google Drive files
    using the credentials in GOOGLE_DRIVE_* environment variables.
    """
    pass


@click.command()
def status():
    """Show which Drive settings are configured.

    Secret values are never printed. Exits with 1 if a required value is missing.
    """
    settings = load_settings()
    missing = settings.missing_keys()

    report = {
        "config_file": str(get_config_file_path()),
        "configured": {key: key not in missing for key in REQUIRED_KEYS},
        FOLDER_ID_KEY: settings.folder_id,
        "disk": settings.disk,
    }
    click.echo(json.dumps(report, indent=2))

    if missing:
        click.secho(f"Missing: {', '.join(missing)}", fg="red", err=True)
        sys.exit(1)
    click.secho("Ready to use.", fg="green", err=True)


# Add commands to groups using add_command()
cli.add_command(status, name='status')
cli.add_command(token_module, name='token')
cli.add_command(config_module, name='config')
for command in DRIVE_COMMANDS:
    cli.add_command(command)


def main():
    """Entry point for the CLI."""
    load_dotenv()
    cli()


if __name__ == "__main__":
    main()
