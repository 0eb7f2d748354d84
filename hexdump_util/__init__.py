"""
hexdump_util — fixed-format hexadecimal dumps of binary files
=============================================================

Renders bytes as lines of 16, grouped in pairs, each line prefixed by an
8-digit hexadecimal offset.

Quick start::

    import hexdump_util

    # Format an in-memory buffer
    for line in hexdump_util.format_hexdump(b"hello world", 11):
        print(line, end="")

    # Dump a file to stdout, stopping after 64 bytes
    result = hexdump_util.dump_file("firmware.bin", max_bytes=64)
    print(result.bytes_dumped)

Command line::

    hexdump-util [-n LEN] FILE
    python -m hexdump_util [-n LEN] FILE
"""

from __future__ import annotations

__version__ = "1.0.0"  # keep in sync with pyproject.toml

__all__ = [
    # Formatting
    "format_hexdump",
    "iter_hexdump",
    "write_hexdump",
    # Read loop
    "dump_stream",
    "dump_file",
    "read_step",
    "DumpState",
    "DumpResult",
    # Errors
    "HexdumpError",
    "UsageError",
    "MissingFileError",
    "FileOpenError",
    "ExitStatus",
    # Constants
    "BYTES_PER_LINE",
    "BYTES_PER_GROUP",
    "BUFFER_SIZE",
    # Version
    "__version__",
]

from hexdump_util.errors import (
    ExitStatus,
    FileOpenError,
    HexdumpError,
    MissingFileError,
    UsageError,
)
from hexdump_util.formatter import (
    BYTES_PER_GROUP,
    BYTES_PER_LINE,
    format_hexdump,
    iter_hexdump,
    write_hexdump,
)
from hexdump_util.reader import (
    BUFFER_SIZE,
    DumpResult,
    DumpState,
    dump_file,
    dump_stream,
    read_step,
)
