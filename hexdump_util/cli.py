#!/usr/bin/env python3
"""
Command-line entry point.

    hexdump-util [-n LEN] [-v] FILE

Dumps FILE (or its first LEN bytes) to standard output.  Argument and
file-open errors print a message to standard error and exit with status 1.
If FILE is given more than once, the last one is dumped.
"""

from __future__ import annotations

import argparse
import io
import os
import sys
from typing import BinaryIO, Optional, Sequence

import argcomplete

from hexdump_util import __version__
from hexdump_util.errors import (
    ExitStatus,
    FileOpenError,
    HexdumpError,
    MissingFileError,
    UsageError,
)
from hexdump_util.reader import DumpResult, dump_stream

USAGE_LINE = "[-n LEN] FILE"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


class DescriptorReader(io.RawIOBase):
    """Unbuffered binary reader over an ``os.open`` descriptor.

    Unlike ``open()``, this accepts descriptors that refer to directories;
    the failure then surfaces from ``readinto`` and ends the dump like end
    of file.
    """

    def __init__(self, fd: int) -> None:
        super().__init__()
        self._fd = fd

    def readable(self) -> bool:
        return True

    def fileno(self) -> int:
        return self._fd

    def readinto(self, b) -> int:
        data = os.read(self._fd, len(b))
        n = len(data)
        b[:n] = data
        return n

    def close(self) -> None:
        if not self.closed:
            try:
                os.close(self._fd)
            finally:
                super().close()


def byte_count(value: str) -> int:
    """argparse type for ``-n``: a non-negative decimal integer.

    Only ASCII digits with an optional single leading ``+`` are accepted;
    whitespace, underscores and non-ASCII digits are rejected.
    """
    digits = value[1:] if value.startswith("+") else value
    if not (digits.isascii() and digits.isdigit()):
        raise argparse.ArgumentTypeError(
            f"-n requires a non-negative integer length, got {value!r}"
        )
    return int(digits)


def get_arg_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=prog,
        description="Print a hexadecimal dump of a binary file, 16 bytes per line.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-n",
        "--length",
        dest="length",
        metavar="LEN",
        type=byte_count,
        default=None,
        help="🔢 Dump at most LEN bytes from the start of FILE (whole file if omitted)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="📢 Print progress notes to standard error",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "files",
        metavar="FILE",
        nargs="*",
        help="📁 Path of the file to dump (the last one wins if repeated)",
    )
    return parser


def parse_args(args: Optional[Sequence[str]] = None, prog: Optional[str] = None) -> argparse.Namespace:
    """Parse the command line, raising UsageError on any argument problem."""
    parser = get_arg_parser(prog)

    # Enable tab-completion BEFORE parsing
    argcomplete.autocomplete(parser)

    # Intermixed so that paths before and after -n are all collected
    parsed_args = parser.parse_intermixed_args(args)

    if not parsed_args.files:
        raise MissingFileError(parser.prog, USAGE_LINE)
    parsed_args.file = parsed_args.files[-1]

    return parsed_args


def open_input(path: str) -> BinaryIO:
    """Open *path* for binary reading, wrapping failures in FileOpenError.

    A directory opens successfully on POSIX systems; reading it then fails,
    which the read loop treats as end of file.
    """
    try:
        fd = os.open(path, os.O_RDONLY | getattr(os, "O_BINARY", 0))
    except OSError as exc:
        raise FileOpenError(path, exc) from exc
    return DescriptorReader(fd)  # type: ignore[return-value]


def _note(message: str) -> None:
    print(f"[hexdump] {message}", file=sys.stderr)


def _report(path: str, result: DumpResult) -> None:
    _note(f"Dumped {result.bytes_dumped} bytes from {path}")
    if result.budget_reached:
        _note("Stopped at the -n byte limit")
    if result.read_error is not None:
        # Exit status stays 0; the dump simply ends here.
        _note(f"⚠️ Read error ended the dump early: {result.read_error}")


def main(argv: Optional[Sequence[str]] = None, prog: Optional[str] = None) -> int:
    try:
        args = parse_args(argv, prog)
        stream = open_input(args.file)
    except HexdumpError as exc:
        print(exc.format_message(), file=sys.stderr)
        return int(exc.exit_status)

    if args.verbose:
        _note(f"Opened {args.file}")

    with stream:
        result = dump_stream(stream, sys.stdout, args.length)

    if args.verbose:
        _report(args.file, result)

    return int(ExitStatus.SUCCESS)


if __name__ == "__main__":
    sys.exit(main())
