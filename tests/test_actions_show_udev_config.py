"""
Tests for the show_udev_config action.

**Purpose**: Run the script's main() against temp config files and check
its output and exit codes. The real environment is scrubbed of the udev
variables so the host can't influence the result.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path so we can import actions module
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import actions.show_udev_config as show_udev_config
from actions.show_udev_config import build_environ, format_result, main
from udevconf.config.loader import LoadResult
from udevconf.config.settings import UdevSettings
from udevconf.parsing.errors import ConfigFileUnavailableError


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("UDEV_TEST", "UDEV_CONFIG_FILE", "SYSFS_PATH", "UDEV_NO_SLEEP"):
        monkeypatch.delenv(name, raising=False)
    # Keep the script from attaching console handlers during tests
    monkeypatch.setattr(show_udev_config, "get_logger", lambda **kwargs: None)


@pytest.fixture
def mounts_file(tmp_path):
    path = tmp_path / "mounts"
    path.write_text("sysfs /sys sysfs rw 0 0\n")
    return path


def test_build_environ_points_at_config():
    environ = build_environ("/tmp/fixture.conf")

    assert environ["UDEV_TEST"] == "1"
    assert environ["UDEV_CONFIG_FILE"] == "/tmp/fixture.conf"


def test_build_environ_without_config_is_a_copy():
    environ = build_environ()

    assert "UDEV_CONFIG_FILE" not in environ


def test_format_result_success():
    result = LoadResult(settings=UdevSettings.defaults(), ok=True, lines_read=4, pairs_applied=2)

    text = format_result(result)

    assert "root_path" in text
    assert "'/udev/'" in text
    assert text.endswith("OK: 2 setting(s) applied from 4 line(s)")


def test_format_result_failure():
    error = ConfigFileUnavailableError("/etc/udev/udev.conf", "No such file or directory")
    result = LoadResult(settings=UdevSettings.defaults(), ok=False, error=error)

    assert "FAILED: can't open '/etc/udev/udev.conf'" in format_result(result)


def test_main_prints_loaded_settings(write_config, mounts_file, capsys):
    path = write_config('udev_root="/dev/test"\nudev_log="no"\n')

    exit_code = main(["--config", str(path), "--mounts-file", str(mounts_file)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "'/dev/test'" in out
    assert "OK: 2 setting(s)" in out


def test_main_missing_config_exits_one(tmp_path, mounts_file, capsys):
    exit_code = main(
        ["--config", str(tmp_path / "absent.conf"), "--mounts-file", str(mounts_file)]
    )

    assert exit_code == 1
    assert "FAILED" in capsys.readouterr().out


def test_main_malformed_config_exits_one(write_config, mounts_file, capsys):
    path = write_config("udev_root=/dev\n")

    assert main(["--config", str(path), "--mounts-file", str(mounts_file)]) == 1


def test_main_strict_rejects_long_line(write_config, mounts_file):
    path = write_config("#" + "x" * 300 + "\n")

    assert main(["--config", str(path), "--mounts-file", str(mounts_file)]) == 0
    assert main(["--config", str(path), "--mounts-file", str(mounts_file), "--strict"]) == 1


def test_main_missing_env_file_exits_two(tmp_path, capsys):
    assert main(["--env-file", str(tmp_path / "nope.env")]) == 2
    assert "env file not found" in capsys.readouterr().out


def test_main_env_file_redirects_config(write_config, mounts_file, tmp_path, monkeypatch, capsys):
    path = write_config('default_owner="root"\n')
    env_file = tmp_path / ".env"
    env_file.write_text(f"UDEV_TEST=1\nUDEV_CONFIG_FILE={path}\nSYSFS_PATH=/tmp/sysfs\n")
    # Register with monkeypatch so variables loaded from the file are removed
    for name in ("UDEV_TEST", "UDEV_CONFIG_FILE", "SYSFS_PATH"):
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)

    exit_code = main(["--env-file", str(env_file), "--mounts-file", str(mounts_file)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "'root'" in out
    assert "'/tmp/sysfs'" in out
