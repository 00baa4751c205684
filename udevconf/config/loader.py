"""
Load udev.conf into a UdevSettings value.

**Conceptual**: This is the one place that turns "defaults + environment +
config file" into the settings the daemon runs with. It runs once at
startup, synchronously, before any rule is evaluated.

**States** (ConfigLoader.state):
  INIT → DEFAULTS_APPLIED → BUFFER_ACQUIRED → PARSING → DONE

  1. Build defaults, seed sysfs_path from the mount table, apply
     environment overrides (which may redirect the config path).
  2. Map the config file. If it can't be opened we go straight to DONE with
     a failed LoadResult; defaults and overrides stay in effect.
  3. Walk the file line by line: skip blank and "#" lines, parse the pair,
     store it if the variable is recognized.
  4. The first malformed line stops the walk. Lines before it stay applied,
     lines after it are never read.
  5. The mapped buffer is released on every path before returning.

**Failures are results, not exceptions**: load_config() never raises a
UdevConfigError. The caller inspects LoadResult.ok and carries on with the
(possibly partially customized) settings either way.
"""

import enum
import logging
import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from udevconf.config.env_override import apply_env_overrides
from udevconf.config.registry import apply_pair
from udevconf.config.settings import UdevSettings
from udevconf.parsing.errors import (
    ConfigFileUnavailableError,
    ConfigParseError,
    UdevConfigError,
)
from udevconf.parsing.line_scanner import MAX_LINE_LENGTH, scan_lines
from udevconf.parsing.pair_parser import parse_pair
from udevconf.utils.file_map import map_file
from udevconf.utils.logging import configure_from_settings
from udevconf.utils.sysfs import discover_sysfs_mount_path

logger = logging.getLogger(__name__)

COMMENT_CHARACTER = "#"


class LoaderState(enum.Enum):
    INIT = "init"
    DEFAULTS_APPLIED = "defaults_applied"
    BUFFER_ACQUIRED = "buffer_acquired"
    PARSING = "parsing"
    DONE = "done"


@dataclass
class LoadResult:
    """
    Outcome of one load.

    Attributes:
        settings: The settings after the load (always usable).
        ok: True if the file was read and every line parsed.
        error: ConfigFileUnavailableError or a ConfigParseError subclass
               when ok is False.
        lines_read: Lines consumed, including the failing one.
        pairs_applied: Recognized directives stored into settings.
    """
    settings: UdevSettings
    ok: bool
    error: Optional[UdevConfigError] = None
    lines_read: int = 0
    pairs_applied: int = 0


def log_settings(settings: UdevSettings, when: str) -> None:
    for name, value in settings.asdict().items():
        logger.debug("%s: %s = %s", when, name, value)


def parse_config_text(
    settings: UdevSettings,
    buf,
    source: str = "<buffer>",
    strict: bool = False,
    max_line_length: int = MAX_LINE_LENGTH,
) -> LoadResult:
    """
    Apply every directive in buf to settings, stopping at the first bad line.

    Args:
        settings: Settings to update in place.
        buf: bytes-like contents of a config file.
        source: Name used in diagnostics (usually the file path).
        strict: Reject overlong lines instead of truncating them.
        max_line_length: Longest accepted line in bytes.

    Returns:
        LoadResult; ok is False and error is set if a line was malformed.
    """
    lines_read = 0
    pairs_applied = 0

    try:
        for scanned in scan_lines(buf, max_length=max_line_length, strict=strict):
            lines_read = scanned.number
            text = scanned.text.decode("utf-8", errors="replace")
            logger.debug("read '%s'", text)

            stripped = text.lstrip()
            if not stripped or stripped.startswith(COMMENT_CHARACTER):
                continue

            try:
                pair = parse_pair(text)
            except ConfigParseError as e:
                e.line_number = scanned.number
                raise

            logger.debug("variable = '%s', value = '%s'", pair.variable, pair.value)
            if apply_pair(settings, pair):
                pairs_applied += 1

    except ConfigParseError as e:
        lines_read = e.line_number or lines_read + 1
        logger.warning(
            "%s:%d:%d: error parsing '%s': %s",
            source, lines_read, e.column, e.line, e.reason,
        )
        return LoadResult(
            settings=settings,
            ok=False,
            error=e,
            lines_read=lines_read,
            pairs_applied=pairs_applied,
        )

    return LoadResult(
        settings=settings,
        ok=True,
        lines_read=lines_read,
        pairs_applied=pairs_applied,
    )


class ConfigLoader:
    """
    One-shot loader for udev.conf.

    **Example usage**:
        >>> loader = ConfigLoader()
        >>> result = loader.load()
        >>> if not result.ok:
        ...     print(f"using defaults: {result.error}")
        >>> settings = result.settings

    Args:
        environ: Environment mapping for overrides (default: os.environ).
        mount_path_finder: Callable returning the sysfs mount point.
        strict: Treat overlong lines as malformed instead of truncating.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        mount_path_finder: Optional[Callable[[], str]] = None,
        strict: bool = False,
    ):
        self.environ = os.environ if environ is None else environ
        self.mount_path_finder = mount_path_finder or discover_sysfs_mount_path
        self.strict = strict
        self.state = LoaderState.INIT

    def load(self, settings: Optional[UdevSettings] = None) -> LoadResult:
        """
        Run the full load and return its result.

        Args:
            settings: Pre-built settings to update. None starts from defaults.
        """
        self.state = LoaderState.INIT
        if settings is None:
            settings = UdevSettings.defaults()

        settings.set_string("sysfs_path", self.mount_path_finder())
        apply_env_overrides(settings, self.environ)
        self.state = LoaderState.DEFAULTS_APPLIED
        logger.debug("sysfs_path='%s'", settings.sysfs_path)
        log_settings(settings, "defaults")

        try:
            with map_file(settings.config_path) as buf:
                self.state = LoaderState.BUFFER_ACQUIRED
                logger.debug("reading '%s' as config file", settings.config_path)

                self.state = LoaderState.PARSING
                result = parse_config_text(
                    settings, buf, source=settings.config_path, strict=self.strict
                )
        except ConfigFileUnavailableError as e:
            self.state = LoaderState.DONE
            logger.info("%s", e)
            return LoadResult(settings=settings, ok=False, error=e)

        self.state = LoaderState.DONE
        log_settings(settings, "loaded")
        return result


def load_config(
    settings: Optional[UdevSettings] = None,
    environ: Optional[Mapping[str, str]] = None,
    mount_path_finder: Optional[Callable[[], str]] = None,
    strict: bool = False,
) -> LoadResult:
    """Convenience wrapper: ConfigLoader(...).load(settings)."""
    loader = ConfigLoader(
        environ=environ, mount_path_finder=mount_path_finder, strict=strict
    )
    return loader.load(settings)


def init_udev_config(
    environ: Optional[Mapping[str, str]] = None,
    mount_path_finder: Optional[Callable[[], str]] = None,
) -> UdevSettings:
    """
    Startup entrypoint: load settings and apply the udev_log toggle.

    Always returns usable settings; a missing or broken file only means
    fewer customizations.
    """
    result = load_config(environ=environ, mount_path_finder=mount_path_finder)
    configure_from_settings(result.settings)
    return result.settings
