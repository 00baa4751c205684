"""
Extract variable="value" pairs from a single config line.

**Grammar** (one directive):
    [whitespace | ","]*  variable  [whitespace]* "=" [whitespace]* '"' value '"'

  - variable: everything before the first "=", trailing whitespace trimmed.
  - value: everything between the opening quote and the next quote. There is
    no escape mechanism, so a value can never contain '"'.
  - Anything after the closing quote is returned as the pair's remainder.
    Rule-style lines carry several comma-separated pairs; iter_pairs() walks
    them all.

The parser is pure: it never looks at or changes settings.
"""

from dataclasses import dataclass
from typing import Iterator

from udevconf.parsing.errors import (
    MissingAssignmentError,
    MissingOpenQuoteError,
    MissingCloseQuoteError,
    EmptyValueError,
)

QUOTE = '"'
ASSIGN = "="
PAIR_SEPARATOR = ","


@dataclass(frozen=True)
class KeyValuePair:
    """
    One parsed directive.

    Attributes:
        variable: Name as written in the file (case preserved).
        value: Text between the quotes (never empty).
        remainder: Unparsed text following the closing quote.
    """
    variable: str
    value: str
    remainder: str = ""


def _skip_separators(text: str, pos: int) -> int:
    while pos < len(text) and (text[pos].isspace() or text[pos] == PAIR_SEPARATOR):
        pos += 1
    return pos


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def parse_pair(text: str) -> KeyValuePair:
    """
    Parse the first variable="value" pair in text.

    Args:
        text: One line (or the remainder of one) from the config file.

    Returns:
        KeyValuePair with the variable, value and the unparsed remainder.

    Raises:
        MissingAssignmentError: No "=" in the text.
        MissingOpenQuoteError: The value does not start with '"'.
        MissingCloseQuoteError: The value's closing '"' is missing.
        EmptyValueError: The value is "" or missing after "=" entirely.

    Example:
        >>> parse_pair('  udev_root = "/dev/"')
        KeyValuePair(variable='udev_root', value='/dev/', remainder='')
    """
    pos = _skip_separators(text, 0)

    assign = text.find(ASSIGN, pos)
    if assign == -1:
        raise MissingAssignmentError(line=text, column=len(text))
    variable = text[pos:assign].rstrip()

    pos = _skip_whitespace(text, assign + 1)
    if pos >= len(text):
        # Nothing at all after "=" counts as an empty value
        raise EmptyValueError(line=text, column=pos)
    if text[pos] != QUOTE:
        raise MissingOpenQuoteError(line=text, column=pos)
    pos += 1

    close = text.find(QUOTE, pos)
    if close == -1:
        raise MissingCloseQuoteError(line=text, column=len(text))
    value = text[pos:close]
    if not value:
        raise EmptyValueError(line=text, column=close)

    return KeyValuePair(variable=variable, value=value, remainder=text[close + 1:])


def iter_pairs(text: str) -> Iterator[KeyValuePair]:
    """
    Yield every pair on a line, e.g. 'BUS="usb", SYSFS_serial="W09090207"'.

    Stops when only whitespace and commas are left. Raises the same errors as
    parse_pair() for the first pair that is malformed; pairs yielded before
    that point are unaffected.
    """
    rest = text
    while _skip_separators(rest, 0) < len(rest):
        pair = parse_pair(rest)
        yield pair
        rest = pair.remainder
