"""
Generic helpers shared across modules.

Includes the memory-mapped file reader, sysfs mount discovery and logging
setup.
"""
