"""
Table of recognized udev.conf variables and how each one is stored.

**Conceptual**: Every variable the file may set is one entry in
SETTINGS_TABLE, keyed by its lower-cased name. The entry says which
UdevSettings field it writes and how:
  - StringSetter copies the value, truncated to the field's maximum length.
  - BoolSetter stores True iff the value is "true" or "yes" (any case).

Adding a variable means adding one table row; the matching logic is shared.

Unknown names are ignored on purpose, so a newer config file still loads on
an older daemon and vice versa.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Union

from udevconf.config.settings import (
    FIELD_MAX_LENGTHS,
    UdevSettings,
    string_is_true,
    truncate_value,
)
from udevconf.parsing.pair_parser import KeyValuePair

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StringSetter:
    """Copy the value into a bounded string field."""
    field: str
    max_length: int

    def apply(self, settings: UdevSettings, value: str) -> None:
        setattr(settings, self.field, truncate_value(value, self.max_length))


@dataclass(frozen=True)
class BoolSetter:
    """Interpret the value as a boolean ("true"/"yes" → True)."""
    field: str

    def apply(self, settings: UdevSettings, value: str) -> None:
        setattr(settings, self.field, string_is_true(value))


Setter = Union[StringSetter, BoolSetter]


def _string(field: str) -> StringSetter:
    return StringSetter(field=field, max_length=FIELD_MAX_LENGTHS[field])


# udev_config_filename is deliberately absent: the file can't redirect itself
SETTINGS_TABLE: Dict[str, Setter] = {
    "udev_root": _string("root_path"),
    "udev_db": _string("db_path"),
    "udev_rules": _string("rules_path"),
    "udev_permissions": _string("permissions_path"),
    "default_mode": _string("default_mode"),
    "default_owner": _string("default_owner"),
    "default_group": _string("default_group"),
    "udev_log": BoolSetter(field="log_enabled"),
}


def lookup_setter(variable: str) -> Optional[Setter]:
    """Return the setter bound to variable (case-insensitive), or None."""
    return SETTINGS_TABLE.get(variable.lower())


def apply_pair(settings: UdevSettings, pair: KeyValuePair) -> bool:
    """
    Store one parsed pair into settings.

    Args:
        settings: Settings to update in place.
        pair: Parsed variable/value.

    Returns:
        True if the variable is recognized and a field was written,
        False if it was ignored.
    """
    setter = lookup_setter(pair.variable)
    if setter is None:
        logger.debug("ignoring unknown variable '%s'", pair.variable)
        return False

    logger.debug("%s = '%s'", pair.variable.lower(), pair.value)
    setter.apply(settings, pair.value)
    return True
