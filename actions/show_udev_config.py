#!/usr/bin/env python3
"""
Show the settings udev would run with.

**Purpose**: Load udev.conf exactly as the daemon does at startup (defaults,
sysfs discovery, environment overrides, config file) and print the result.
Handy for checking a config file or a test fixture before deploying it.

**Usage**:
    python actions/show_udev_config.py
    python actions/show_udev_config.py --config tests/fixtures/udev.conf
    python actions/show_udev_config.py --env-file .env --verbose

**Exit codes**:
  - 0: Config file read and fully parsed.
  - 1: Config file missing or malformed (defaults / partial settings shown).
  - 2: Bad command-line arguments.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

# Ensure project root is on path for imports
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from udevconf.config.env_override import ENV_CONFIG_FILE, ENV_TEST, load_env_file
from udevconf.config.loader import LoadResult, load_config
from udevconf.utils.logging import get_logger
from udevconf.utils.sysfs import PROC_MOUNTS, discover_sysfs_mount_path


def build_environ(config_path=None) -> dict:
    """
    Snapshot os.environ, pointing the loader at config_path if given.

    --config is implemented through the same test-mode override a harness
    would use, so the loader path is identical to the daemon's.
    """
    environ = dict(os.environ)
    if config_path is not None:
        environ[ENV_TEST] = "1"
        environ[ENV_CONFIG_FILE] = str(config_path)
    return environ


def format_result(result: LoadResult) -> str:
    """Render a LoadResult as aligned "name = value" lines plus a status line."""
    values = result.settings.asdict()
    width = max(len(name) for name in values)
    lines = [f"{name:<{width}} = {value!r}" for name, value in values.items()]

    if result.ok:
        status = f"OK: {result.pairs_applied} setting(s) applied from {result.lines_read} line(s)"
    else:
        status = f"FAILED: {result.error} (showing defaults plus {result.pairs_applied} applied setting(s))"
    lines.append("")
    lines.append(status)
    return "\n".join(lines)


def main(argv=None) -> int:
    """
    Main entry point.

    **Workflow**:
      1. Parse command-line arguments
      2. Optionally load a .env file (UDEV_TEST, SYSFS_PATH, ...)
      3. Run the loader
      4. Print settings and status
    """
    parser = argparse.ArgumentParser(
        description="Load udev.conf and print the resulting settings.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Config file to read instead of the default /etc/udev/udev.conf.",
    )

    parser.add_argument(
        "--env-file",
        type=str,
        default=None,
        help="Load environment overrides from this .env file first.",
    )

    parser.add_argument(
        "--mounts-file",
        type=str,
        default=PROC_MOUNTS,
        help=f"Mount table used to find sysfs. Default: {PROC_MOUNTS}.",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat lines longer than 254 bytes as errors instead of truncating them.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print parser debug traces.",
    )

    args = parser.parse_args(argv)

    get_logger(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.env_file is not None:
        if not Path(args.env_file).is_file():
            print(f"ERROR: env file not found: {args.env_file}")
            return 2
        load_env_file(args.env_file)

    result = load_config(
        environ=build_environ(args.config),
        mount_path_finder=lambda: discover_sysfs_mount_path(args.mounts_file),
        strict=args.strict,
    )

    print(format_result(result))
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
