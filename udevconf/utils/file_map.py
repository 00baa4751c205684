"""
Map a file into memory for the duration of a parse.

map_file() is the loader's only I/O boundary: it opens the path read-only,
memory-maps it and guarantees the map and the descriptor are released
exactly once, whichever way the with-block is left.
"""

import logging
import mmap
import os
import stat
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

from udevconf.parsing.errors import ConfigFileUnavailableError

logger = logging.getLogger(__name__)


@contextmanager
def map_file(path: Union[str, Path]) -> Iterator[Union[mmap.mmap, bytes]]:
    """
    Yield a read-only view of the file at path.

    An empty file yields b"" (mmap refuses zero-length maps).

    Raises:
        ConfigFileUnavailableError: The file can't be opened or mapped.

    Example:
        >>> with map_file("/etc/udev/udev.conf") as buf:
        ...     first_newline = buf.find(b"\\n")
    """
    try:
        fd = os.open(os.fspath(path), os.O_RDONLY)
    except OSError as e:
        raise ConfigFileUnavailableError(str(path), e.strerror or str(e)) from e

    try:
        info = os.fstat(fd)
        if not stat.S_ISREG(info.st_mode):
            raise ConfigFileUnavailableError(str(path), "not a regular file")
        size = info.st_size
        if size == 0:
            buf = b""
        else:
            try:
                buf = mmap.mmap(fd, size, access=mmap.ACCESS_READ)
            except (OSError, ValueError) as e:
                raise ConfigFileUnavailableError(str(path), str(e)) from e
    except BaseException:
        os.close(fd)
        raise

    logger.debug("mapped '%s' (%d bytes)", path, size)
    try:
        yield buf
    finally:
        if isinstance(buf, mmap.mmap):
            buf.close()
        os.close(fd)
