"""gdrive-storage - Google Drive storage adapter.

Namespace package containing:
- gdrive_storage.sdk: Drive facade, session bootstrap and storage disks
- gdrive_storage.cli: Command-line interface
"""

__version__ = "0.3.0"
