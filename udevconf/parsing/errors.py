"""
Exceptions raised while reading and parsing udev.conf.

**Conceptual**: Every failure the loader can run into has its own exception
class, all rooted at UdevConfigError. Callers that only care "did the config
load?" catch the base class; tests and diagnostics can catch the precise
subclass (MissingOpenQuoteError, EmptyValueError, ...).

**Where these are raised vs. handled**:
  - parse_pair() and scan_lines() raise ConfigParseError subclasses.
  - map_file() raises ConfigFileUnavailableError.
  - load_config() catches all of them and reports a LoadResult instead,
    so a broken or missing file never takes the daemon down.
"""

from typing import Optional


class UdevConfigError(Exception):
    """
    Base exception for udev configuration errors.

    Catch this to handle every configuration-related failure in one place.
    """
    pass


class ConfigFileUnavailableError(UdevConfigError):
    """
    Raised when the config file cannot be opened or mapped.

    **Recovery**: None needed. Built-in defaults (and any environment
    overrides) stay in effect.
    """

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"can't open '{path}' as config file"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ConfigParseError(UdevConfigError):
    """
    Base class for a malformed directive line.

    Attributes:
        line: Text of the offending line (may be None if not yet known).
        line_number: 1-based line number in the file, filled in by the loader.
        column: 0-based offset into the line where parsing gave up.
    """

    reason = "malformed line"

    def __init__(
        self,
        line: Optional[str] = None,
        column: int = 0,
        line_number: Optional[int] = None,
    ):
        self.line = line
        self.column = column
        self.line_number = line_number
        super().__init__(self.reason)

    def __str__(self) -> str:
        where = f"line {self.line_number}" if self.line_number is not None else "line ?"
        return f"{where}:{self.column}: {self.reason} in '{self.line}'"


class MissingAssignmentError(ConfigParseError):
    """The line has no '=' separating variable and value."""

    reason = "missing '='"


class MissingOpenQuoteError(ConfigParseError):
    """The value after '=' does not start with a double quote."""

    reason = "value must start with '\"'"


class MissingCloseQuoteError(ConfigParseError):
    """The quoted value is never closed."""

    reason = "missing closing '\"'"


class EmptyValueError(ConfigParseError):
    """The quoted value is empty (variable="")."""

    reason = "empty value"


class LineTooLongError(ConfigParseError):
    """
    Raised in strict scanning mode when a line exceeds the maximum length.

    In the default (lenient) mode the scanner truncates instead of raising.
    """

    reason = "line too long"
