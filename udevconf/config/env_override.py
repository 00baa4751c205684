"""
Environment variable overrides, mostly for test harnesses.

**Environment variables**:
  - UDEV_NO_SLEEP: if present (any value, even empty), sleep_enabled = False.
  - UDEV_TEST: if present, enables the two overrides below.
  - SYSFS_PATH (test mode only): replaces the discovered sysfs mount point.
  - UDEV_CONFIG_FILE (test mode only): replaces the config file path before
    the file is opened, so a harness can point the loader at a fixture.

Overrides are plain presence checks on the mapping passed in; nothing here
reads os.environ unless the caller hands it over.
"""

import logging
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from udevconf.config.settings import UdevSettings

logger = logging.getLogger(__name__)

ENV_NO_SLEEP = "UDEV_NO_SLEEP"
ENV_TEST = "UDEV_TEST"
ENV_SYSFS_PATH = "SYSFS_PATH"
ENV_CONFIG_FILE = "UDEV_CONFIG_FILE"


def apply_sleep_override(settings: UdevSettings, environ: Mapping[str, str]) -> None:
    """Clear sleep_enabled if UDEV_NO_SLEEP is present."""
    if ENV_NO_SLEEP in environ:
        settings.sleep_enabled = False


def apply_test_overrides(settings: UdevSettings, environ: Mapping[str, str]) -> bool:
    """
    Apply SYSFS_PATH / UDEV_CONFIG_FILE when UDEV_TEST is present.

    Returns:
        True if test mode is active.
    """
    if ENV_TEST not in environ:
        return False

    sysfs_path = environ.get(ENV_SYSFS_PATH)
    if sysfs_path is not None:
        settings.set_string("sysfs_path", sysfs_path)
    config_path = environ.get(ENV_CONFIG_FILE)
    if config_path is not None:
        settings.set_string("config_path", config_path)

    logger.debug(
        "test mode: sysfs_path='%s' config_path='%s'",
        settings.sysfs_path,
        settings.config_path,
    )
    return True


def apply_env_overrides(settings: UdevSettings, environ: Mapping[str, str]) -> UdevSettings:
    """
    Apply every environment override to settings in place.

    Args:
        settings: Settings holding defaults (and the discovered sysfs path).
        environ: Environment mapping, usually os.environ.

    Returns:
        The same settings object, for chaining.
    """
    apply_sleep_override(settings, environ)
    apply_test_overrides(settings, environ)
    return settings


def load_env_file(path: Optional[Path | str] = None, override: bool = False) -> bool:
    """
    Load KEY=value lines from a .env file into os.environ.

    Lets a harness keep UDEV_TEST / SYSFS_PATH / UDEV_CONFIG_FILE in a file
    instead of exporting them. Variables already set in the environment win
    unless override is True.

    Args:
        path: .env file to read. None searches upward from the current
              directory, as python-dotenv does.
        override: Replace variables that are already set.

    Returns:
        True if at least one variable was loaded.
    """
    loaded = load_dotenv(dotenv_path=path, override=override)
    logger.debug("env file %s loaded=%s", path or ".env", loaded)
    return loaded
