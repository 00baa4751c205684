"""
Split a raw config buffer into lines.

**Conceptual**: The config file arrives as one block of bytes (a memory map).
The scanner walks it from a start offset, returning one line at a time
without copying the whole buffer. Lines are bounded: anything longer than
MAX_LINE_LENGTH bytes is truncated (default) or rejected (strict mode), so
a pathological file can't produce an unbounded line.

**Edge cases**:
  - A final line without a trailing newline is still yielded, exactly once.
  - A trailing "\\r" is dropped so files saved with CRLF endings parse.
  - An empty buffer yields nothing.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Tuple

from udevconf.parsing.errors import LineTooLongError

logger = logging.getLogger(__name__)

# Longest line the daemon ever accepted (255-byte buffer minus terminator)
MAX_LINE_LENGTH = 254

LINE_TERMINATOR = b"\n"


@dataclass(frozen=True)
class ScannedLine:
    """
    One line produced by scan_lines().

    Attributes:
        number: 1-based line number in the buffer.
        text: Line contents without the terminator, at most max_length bytes.
        truncated: True if the original line was longer and got cut.
    """
    number: int
    text: bytes
    truncated: bool = False


def next_line(buf, offset: int) -> Tuple[bytes, int]:
    """
    Return the line starting at offset and the offset of the following line.

    Args:
        buf: bytes-like buffer (bytes, bytearray, mmap).
        offset: Start of the line to read. Must be < len(buf).

    Returns:
        (line, next_offset). line excludes the terminator. If no terminator
        remains, line runs to the end of buf and next_offset == len(buf).
    """
    end = buf.find(LINE_TERMINATOR, offset)
    if end == -1:
        return bytes(buf[offset:]), len(buf)
    return bytes(buf[offset:end]), end + 1


def scan_lines(
    buf,
    max_length: int = MAX_LINE_LENGTH,
    strict: bool = False,
) -> Iterator[ScannedLine]:
    """
    Yield every line of buf as a ScannedLine.

    Args:
        buf: bytes-like buffer to scan.
        max_length: Longest line (in bytes) passed through unchanged.
        strict: If True, raise LineTooLongError on an overlong line instead
                of truncating it.

    Raises:
        LineTooLongError: strict mode only, on the first overlong line.
    """
    offset = 0
    number = 0
    size = len(buf)

    while offset < size:
        raw, offset = next_line(buf, offset)
        number += 1

        if raw.endswith(b"\r"):
            raw = raw[:-1]

        truncated = False
        if len(raw) > max_length:
            if strict:
                raise LineTooLongError(
                    line=raw[:max_length].decode("utf-8", errors="replace"),
                    column=max_length,
                    line_number=number,
                )
            logger.warning(
                "line %d is %d bytes long, truncating to %d", number, len(raw), max_length
            )
            raw = raw[:max_length]
            truncated = True

        yield ScannedLine(number=number, text=raw, truncated=truncated)
