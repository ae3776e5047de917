"""Drive commands for the gdrive-storage CLI."""

import json
import sys

import click

from gdrive_storage.sdk import UploadedFile
from . import decorators
from .decorators import handle_errors


def _echo_json(result):
    click.echo(json.dumps(result, indent=2))


@click.command('upload')
@click.argument('local_path', type=click.Path(exists=True, dir_okay=False))
@click.option('--folder-id', default=None, help='Destination folder ID. Defaults to GOOGLE_DRIVE_FOLDER_ID, then the Drive root.')
@handle_errors
def upload_file(local_path, folder_id):
    """Upload a file under a random name."""
    facade = decorators.build_facade()
    _echo_json(facade.upload_file(UploadedFile.from_path(local_path), folder_id=folder_id))


@click.command('mkdir')
@click.argument('name')
@handle_errors
def create_folder(name):
    """Create a new folder in the Drive root."""
    facade = decorators.build_facade()
    _echo_json(facade.create_folder(name))


@click.command('search')
@click.argument('name')
@click.option('--type', 'type_search', type=click.Choice(['files', 'folders', 'all']), default='files',
              show_default=True, help='Restrict results to files, folders, or both.')
@handle_errors
def search(name, type_search):
    """Find files or folders whose name contains NAME."""
    facade = decorators.build_facade()
    _echo_json(facade.search(name, type_search))


@click.command('ls')
@click.argument('folder_id')
@handle_errors
def list_folder(folder_id):
    """List everything directly inside a folder."""
    facade = decorators.build_facade()
    _echo_json(facade.list_files_in_folder(folder_id))


@click.command('info')
@click.argument('file_id')
@handle_errors
def file_info(file_id):
    """Show the metadata of a file or folder."""
    facade = decorators.build_facade()
    _echo_json(facade.get_file_metadata(file_id))


@click.command('rename')
@click.argument('file_id')
@click.argument('new_name')
@handle_errors
def rename(file_id, new_name):
    """Rename a file or folder."""
    facade = decorators.build_facade()
    _echo_json(facade.update_file_metadata(file_id, new_name))


@click.command('download')
@click.argument('path')
@click.argument('save_path', type=click.Path(dir_okay=False, writable=True))
@handle_errors
def download(path, save_path):
    """Download a file from the storage disk.

    PATH: Drive path such as 'reports/summary.pdf'
    SAVE_PATH: Local path where the file should be saved
    """
    facade = decorators.build_facade()
    stream = facade.download(path)
    size = stream.save(save_path)
    _echo_json({
        "name": stream.name,
        "mime_type": stream.mime_type,
        "file_path": save_path,
        "size": size,
    })


@click.command('url')
@click.argument('path')
@handle_errors
def url(path):
    """Print the download URL of a file on the storage disk."""
    facade = decorators.build_facade()
    click.echo(facade.url(path))


@click.command('rm')
@click.argument('path')
@handle_errors
def delete(path):
    """Delete a file from the storage disk."""
    facade = decorators.build_facade()
    deleted = facade.delete(path)
    _echo_json({"path": path, "deleted": deleted})
    if not deleted:
        sys.exit(1)


DRIVE_COMMANDS = [
    upload_file,
    create_folder,
    search,
    list_folder,
    file_info,
    rename,
    download,
    url,
    delete,
]
