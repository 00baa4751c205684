"""
Settings that govern the udev daemon.

**Conceptual**: UdevSettings is the single value that carries everything the
rest of the daemon needs from udev.conf and the environment: where the device
root lives, where the database / rules / permissions files are, the default
ownership of new nodes, and whether logging and inter-event sleeping are on.

**Lifecycle**:
  1. UdevSettings.defaults() builds a value holding the built-in defaults.
  2. The loader mutates it in place (env overrides, then config file lines).
  3. The loaded value is handed to every consumer. Nothing writes it after
     initialization, so it needs no locking.

**Why bounded strings?** The daemon historically stored these in fixed-size
fields. Each string field keeps its old maximum length, and every write goes
through truncate_value() so an oversized value is cut, never overrun.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any

# C-era size limits (including the terminating NUL)
PATH_MAX = 4096
NAME_MAX = 255
MODE_SIZE = 8
OWNER_SIZE = 30
GROUP_SIZE = 30

# Built-in defaults
SYSFS_PATH_DEFAULT = "/sys"
UDEV_ROOT = "/udev/"
UDEV_DB = "/udev/.udev.tdb"
UDEV_CONFIG_FILE = "/etc/udev/udev.conf"
UDEV_RULES_FILE = "/etc/udev/udev.rules"
UDEV_PERMISSION_FILE = "/etc/udev/udev.permissions"
UDEV_LOG_DEFAULT = "yes"

# Maximum stored length (characters) per string field
FIELD_MAX_LENGTHS: Dict[str, int] = {
    "sysfs_path": PATH_MAX - 1,
    "root_path": PATH_MAX - 1,
    "db_path": PATH_MAX + NAME_MAX - 1,
    "rules_path": PATH_MAX + NAME_MAX - 1,
    "permissions_path": PATH_MAX + NAME_MAX - 1,
    "config_path": PATH_MAX + NAME_MAX - 1,
    "default_mode": MODE_SIZE - 1,
    "default_owner": OWNER_SIZE - 1,
    "default_group": GROUP_SIZE - 1,
}

TRUE_LITERALS = ("true", "yes")


def string_is_true(value: str) -> bool:
    """Return True iff value is "true" or "yes", ignoring case."""
    return value.lower() in TRUE_LITERALS


def truncate_value(value: str, max_length: int) -> str:
    """Cut value down to max_length characters."""
    return value[:max_length]


@dataclass
class UdevSettings:
    """
    Process-wide udev configuration.

    Attributes:
        sysfs_path: Mount point of sysfs (discovered, or SYSFS_PATH in test mode).
        root_path: Directory where device nodes are created (udev_root).
        db_path: Device database file (udev_db).
        rules_path: Naming rules file or directory (udev_rules).
        permissions_path: Permissions file or directory (udev_permissions).
        config_path: The config file itself. Only settable from the
                     environment, never from inside the file.
        default_mode: Mode string for new nodes, e.g. "0600" (default_mode).
        default_owner: Owner for new nodes (default_owner).
        default_group: Group for new nodes (default_group).
        log_enabled: Whether the daemon logs (udev_log).
        sleep_enabled: Whether the daemon sleeps between events. Cleared by
                       UDEV_NO_SLEEP, never set from the file.
    """
    sysfs_path: str = SYSFS_PATH_DEFAULT
    root_path: str = UDEV_ROOT
    db_path: str = UDEV_DB
    rules_path: str = UDEV_RULES_FILE
    permissions_path: str = UDEV_PERMISSION_FILE
    config_path: str = UDEV_CONFIG_FILE
    default_mode: str = ""
    default_owner: str = ""
    default_group: str = ""
    log_enabled: bool = string_is_true(UDEV_LOG_DEFAULT)
    sleep_enabled: bool = True

    @classmethod
    def defaults(cls) -> "UdevSettings":
        """Return a fresh settings value holding only built-in defaults."""
        return cls()

    def set_string(self, field_name: str, value: str) -> None:
        """
        Write a bounded string field.

        Raises:
            KeyError: If field_name is not a string field.
        """
        setattr(self, field_name, truncate_value(value, FIELD_MAX_LENGTHS[field_name]))

    def asdict(self) -> Dict[str, Any]:
        return asdict(self)
