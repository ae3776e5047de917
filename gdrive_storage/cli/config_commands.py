"""CLI commands for the gdrive-storage config file."""

import sys

import click
import yaml

from gdrive_storage.sdk import config

# Keys that may be written with 'config set'. Credentials belong in the
# environment or .env, not in the config file.
ALLOWED_KEYS = {
    "drive.folder_id": "Default upload folder and root of disk paths.",
    "storage.disk": "Name of the storage disk used by download, url and rm.",
}


@click.group()
def config_group():
    """Commands for managing the gdrive-storage config file."""
    pass


@config_group.command('view')
def view_config():
    """Displays the current configuration file contents."""
    click.echo(f"# {config.get_config_file_path()}")
    click.echo(yaml.safe_dump(config.load_config(), default_flow_style=False))


@config_group.command('get')
@click.argument('key')
def get_config(key):
    """Prints a value using a dot-separated KEY, e.g. drive.folder_id."""
    value = config.get_config_value(key)
    if value is None:
        click.echo(f"Key '{key}' is not set.", err=True)
        sys.exit(1)
    click.echo(value)


@config_group.command('set')
@click.argument('key')
@click.argument('value')
def set_config(key, value):
    """
    Sets a configuration value for a supported key.

    \b
    Supported Keys:
      - drive.folder_id: Default upload folder and root of disk paths.
      - storage.disk:    Storage disk name (default 'google').

    \b
    Examples:
      gdrive-storage config set drive.folder_id 1AbCdEf
    """
    if key not in ALLOWED_KEYS:
        allowed = ", ".join(sorted(ALLOWED_KEYS))
        raise click.UsageError(f"Configuration key '{key}' is not supported. Supported keys: {allowed}.")

    config.set_config_value(key, value)
    click.echo(f"Set '{key}' to: {value}")
