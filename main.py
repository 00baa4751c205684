"""
udevconf – Main entry point.

Runs the startup configuration pass and prints where udev will create its
device nodes.
"""

from udevconf.config.loader import init_udev_config
from udevconf.utils.logging import get_logger


def main() -> None:
    """Load settings and print a one-line summary."""
    get_logger()
    settings = init_udev_config()
    print(
        f"udev_root={settings.root_path} udev_rules={settings.rules_path} "
        f"sysfs={settings.sysfs_path} log={settings.log_enabled}"
    )


if __name__ == "__main__":
    main()
