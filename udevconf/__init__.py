"""
udevconf – configuration loading for the udev device manager.

Reads /etc/udev/udev.conf (variable="value" lines) and the test-harness
environment variables into a single UdevSettings value consumed by the rest
of the daemon.
"""
