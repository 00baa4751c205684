"""
Tests for udevconf/config/env_override.py

Environment overrides are driven by an explicit mapping, so most tests pass
a plain dict instead of touching os.environ.
"""

import os

from udevconf.config.env_override import (
    apply_env_overrides,
    apply_sleep_override,
    apply_test_overrides,
    load_env_file,
)
from udevconf.config.settings import UDEV_CONFIG_FILE, UdevSettings


def test_no_environment_leaves_defaults():
    s = apply_env_overrides(UdevSettings.defaults(), {})

    assert s == UdevSettings.defaults()


def test_no_sleep_presence_disables_sleep():
    """Test that UDEV_NO_SLEEP disables sleep regardless of its value."""
    for value in ("1", "0", "", "no"):
        s = UdevSettings.defaults()
        apply_sleep_override(s, {"UDEV_NO_SLEEP": value})
        assert s.sleep_enabled is False


def test_overrides_ignored_outside_test_mode():
    """Test that SYSFS_PATH / UDEV_CONFIG_FILE need UDEV_TEST."""
    s = UdevSettings.defaults()
    active = apply_test_overrides(
        s, {"SYSFS_PATH": "/tmp/sysfs", "UDEV_CONFIG_FILE": "/tmp/udev.conf"}
    )

    assert active is False
    assert s.sysfs_path == "/sys"
    assert s.config_path == UDEV_CONFIG_FILE


def test_test_mode_applies_both_overrides():
    s = UdevSettings.defaults()
    active = apply_test_overrides(
        s,
        {"UDEV_TEST": "", "SYSFS_PATH": "/tmp/sysfs", "UDEV_CONFIG_FILE": "/tmp/udev.conf"},
    )

    assert active is True
    assert s.sysfs_path == "/tmp/sysfs"
    assert s.config_path == "/tmp/udev.conf"


def test_test_mode_applies_only_present_overrides():
    s = UdevSettings.defaults()
    apply_test_overrides(s, {"UDEV_TEST": "1", "SYSFS_PATH": "/tmp/sysfs"})

    assert s.sysfs_path == "/tmp/sysfs"
    assert s.config_path == UDEV_CONFIG_FILE


def test_overrides_leave_file_settable_fields_alone():
    s = apply_env_overrides(
        UdevSettings.defaults(),
        {"UDEV_TEST": "1", "UDEV_NO_SLEEP": "1", "UDEV_CONFIG_FILE": "/x"},
    )

    expected = UdevSettings.defaults()
    expected.sleep_enabled = False
    expected.config_path = "/x"
    assert s == expected


def test_load_env_file_sets_variables(tmp_path, monkeypatch):
    """Test that a .env file feeds os.environ."""
    # Register the variable with monkeypatch so it is removed afterwards
    monkeypatch.setenv("UDEVCONF_PROBE", "placeholder")
    monkeypatch.delenv("UDEVCONF_PROBE")

    env_file = tmp_path / ".env"
    env_file.write_text("UDEVCONF_PROBE=/tmp/fixture.conf\n")

    assert load_env_file(env_file) is True
    assert os.environ["UDEVCONF_PROBE"] == "/tmp/fixture.conf"


def test_load_env_file_does_not_override_by_default(tmp_path, monkeypatch):
    monkeypatch.setenv("UDEVCONF_PROBE", "from-shell")

    env_file = tmp_path / ".env"
    env_file.write_text("UDEVCONF_PROBE=from-file\n")
    load_env_file(env_file)

    assert os.environ["UDEVCONF_PROBE"] == "from-shell"

    load_env_file(env_file, override=True)
    assert os.environ["UDEVCONF_PROBE"] == "from-file"
