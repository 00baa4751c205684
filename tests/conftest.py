"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import udevconf...' works, and
provides shared fixtures for writing config files and isolating logging.
"""
import logging
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def write_config(tmp_path):
    """
    Factory fixture: write config text (str or bytes) to a temp file.

    Returns:
        Callable(content, name="udev.conf") -> Path.
    """
    def _write(content, name="udev.conf"):
        path = tmp_path / name
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def fixed_mount_path():
    """Mount path finder that never touches /proc."""
    return lambda: "/sys"


@pytest.fixture(autouse=True)
def reset_udevconf_logger():
    """Undo any level change (e.g. udev_log="no") made during a test."""
    yield
    logging.getLogger("udevconf").setLevel(logging.NOTSET)
