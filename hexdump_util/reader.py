"""Chunked read loop that feeds the formatter.

The loop reads the input into one reusable staging buffer, clamps each fill
against the optional byte budget, formats the clamped span and advances the
running offset.  It stops at end of file, when the budget is used up, or on
the first read error.  A read error ends the dump exactly like end of file
does: nothing is raised, and output already written stands.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import BinaryIO, TextIO

from hexdump_util.formatter import write_hexdump

BUFFER_SIZE = 2048


@dataclass
class DumpState:
    """Loop-owned state carried from one read to the next."""

    buffer: bytearray = field(default_factory=lambda: bytearray(BUFFER_SIZE))
    offset: int = 0
    done: bool = False
    read_error: OSError | None = None


@dataclass(frozen=True)
class DumpResult:
    """Outcome of a completed dump.

    Attributes
    ----------
    bytes_dumped : int
        Total bytes rendered (the final running offset).
    budget_reached : bool
        True when the loop stopped because the byte budget was used up.
    read_error : OSError or None
        The error that ended the dump early, if any.  It is recorded here
        only; the loop treats it as end of file.
    """

    bytes_dumped: int
    budget_reached: bool
    read_error: OSError | None = None


def _clamp(bytes_read: int, offset: int, max_bytes: int | None) -> int:
    if max_bytes is None:
        return bytes_read
    return min(bytes_read, max_bytes - offset)


def read_step(
    stream: BinaryIO,
    state: DumpState,
    max_bytes: int | None,
    out: TextIO | None = None,
) -> None:
    """Perform one read-and-format step, updating *state* in place."""
    if state.done:
        return

    try:
        bytes_read = stream.readinto(state.buffer)
    except OSError as exc:
        state.read_error = exc
        state.done = True
        return

    if not bytes_read:
        state.done = True
        return

    bytes_to_print = _clamp(bytes_read, state.offset, max_bytes)
    write_hexdump(state.buffer, bytes_to_print, state.offset, out)
    state.offset += bytes_to_print

    if max_bytes is not None and state.offset >= max_bytes:
        state.done = True


def dump_stream(
    stream: BinaryIO,
    out: TextIO | None = None,
    max_bytes: int | None = None,
    *,
    buffer_size: int = BUFFER_SIZE,
) -> DumpResult:
    """Dump a binary stream until end of file or until *max_bytes* are shown.

    Parameters
    ----------
    stream : binary file object
        Must provide ``readinto``.
    out : text stream, optional
        Destination for the dump lines (standard output by default).
    max_bytes : int or None
        Byte budget.  ``None`` dumps the whole stream.
    buffer_size : int, default 2048
        Capacity of the staging buffer.  Changes how the input is chunked,
        never what is printed.

    Returns
    -------
    DumpResult
    """
    if max_bytes is not None and max_bytes < 0:
        raise ValueError(f"max_bytes must be non-negative, got {max_bytes}")
    if buffer_size < 1:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")

    state = DumpState(buffer=bytearray(buffer_size))
    while not state.done:
        read_step(stream, state, max_bytes, out)

    budget_reached = max_bytes is not None and state.offset >= max_bytes
    return DumpResult(state.offset, budget_reached, state.read_error)


def dump_file(
    path: str | os.PathLike[str],
    out: TextIO | None = None,
    max_bytes: int | None = None,
) -> DumpResult:
    """Open *path* in binary mode and dump it (see :func:`dump_stream`).

    ``OSError`` from opening the file propagates to the caller.
    """
    with open(path, "rb") as stream:
        return dump_stream(stream, out, max_bytes)
