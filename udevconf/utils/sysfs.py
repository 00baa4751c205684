"""
Locate the sysfs mount point.

Reads the kernel mount table and returns the mount point of the first
filesystem of type "sysfs". Falls back to /sys when the table can't be read
or lists no sysfs, so discovery never blocks startup.
"""

import logging
from pathlib import Path
from typing import Union

from udevconf.config.settings import SYSFS_PATH_DEFAULT

logger = logging.getLogger(__name__)

PROC_MOUNTS = "/proc/mounts"
SYSFS_FS_TYPE = "sysfs"


def _unescape_mount_field(field: str) -> str:
    # The mount table octal-escapes space, tab, newline and backslash
    return (
        field.replace("\\040", " ")
        .replace("\\011", "\t")
        .replace("\\012", "\n")
        .replace("\\134", "\\")
    )


def discover_sysfs_mount_path(mounts_file: Union[str, Path] = PROC_MOUNTS) -> str:
    """
    Return where sysfs is mounted.

    Args:
        mounts_file: Mount table in /proc/mounts format
                     ("device mountpoint fstype options dump pass").

    Returns:
        The sysfs mount point, or "/sys" if none could be found.
    """
    try:
        with open(mounts_file, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                fields = line.split()
                if len(fields) >= 3 and fields[2] == SYSFS_FS_TYPE:
                    return _unescape_mount_field(fields[1])
    except OSError as e:
        logger.debug("sysfs mount discovery failed: %s", e)
        return SYSFS_PATH_DEFAULT

    logger.debug("no sysfs entry in '%s', using %s", mounts_file, SYSFS_PATH_DEFAULT)
    return SYSFS_PATH_DEFAULT
