"""CLI decorators for error reporting and facade construction."""

import logging
import sys
from functools import wraps

import click

from gdrive_storage.sdk import DriveFacade
from gdrive_storage.sdk.exceptions import ConfigurationError, DriveStorageError

logger = logging.getLogger(__name__)


def build_facade() -> DriveFacade:
    """Composition root for CLI commands."""
    return DriveFacade.from_env()


def handle_errors(f):
    """
    Decorator reporting gdrive-storage errors as 'Error: ...' on stderr
    and exiting with status 1.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ConfigurationError as e:
            click.secho(f"Error: {e}", fg="red", err=True)
            if e.missing_keys:
                click.echo("\nSet them in the environment or a .env file, or run:", err=True)
                click.echo("  gdrive-storage token create", err=True)
            sys.exit(1)
        except DriveStorageError as e:
            logger.debug(f"Provider message: {getattr(e, 'provider_message', None)}")
            click.secho(f"Error: {e}", fg="red", err=True)
            sys.exit(1)
    return decorated_function
