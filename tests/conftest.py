"""
Shared test configuration for gdrive-storage.

Keeps the real environment and config file out of tests: every test runs
with no GOOGLE_DRIVE_* variables and a config path inside tmp_path.
"""

import pytest

DRIVE_ENV_KEYS = [
    "GOOGLE_DRIVE_CLIENT_ID",
    "GOOGLE_DRIVE_CLIENT_SECRET",
    "GOOGLE_DRIVE_REFRESH_TOKEN",
    "GOOGLE_DRIVE_FOLDER_ID",
]


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Clear Drive variables and point the config file at a temp location."""
    for key in DRIVE_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("GDRIVE_STORAGE_CONFIG_FILE", str(tmp_path / "config" / "config.yaml"))
    yield

