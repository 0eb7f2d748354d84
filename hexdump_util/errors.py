"""Exception hierarchy and exit statuses for hexdump_util."""

from __future__ import annotations

from enum import IntEnum


class ExitStatus(IntEnum):
    SUCCESS = 0
    FAILURE = 1


class HexdumpError(Exception):
    """Base class for errors that end the program with a message."""

    exit_status: ExitStatus = ExitStatus.FAILURE
    prefix: str = "Error:"

    def format_message(self) -> str:
        """The line printed to standard error for this error."""
        return f"{self.prefix} {self}"


class UsageError(HexdumpError):
    """Bad or missing command-line arguments."""


class MissingFileError(UsageError):
    """No FILE argument was given; the message is the usage line."""

    prefix = "Error!"

    def __init__(self, prog: str, usage: str) -> None:
        super().__init__(f"Use the format: {prog} {usage}")


class FileOpenError(HexdumpError):
    """The input file could not be opened for reading.

    Parameters
    ----------
    path : str
        The path as given on the command line.
    reason : OSError, optional
        The underlying error from ``os.open()``.
    """

    def __init__(self, path: str, reason: OSError | None = None) -> None:
        super().__init__(f"Could not open file {path}")
        self.path = path
        self.reason = reason
