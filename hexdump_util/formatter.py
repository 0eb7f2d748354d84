"""Line formatting for hex dumps.

Each line covers 16 logical byte positions::

    00000000 0001 0203 0405 0607 0809 0a0b 0c0d 0e0f

Bytes are printed in pairs; a complete pair is followed by one space, a
pair holding only its first byte is not, and pair slots past the end of the
data are filled with five spaces so every line keeps its column layout.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, Iterator, TextIO, Union

if TYPE_CHECKING:
    import numpy as np

# ---------------------------------------------------------------------------
# Layout constants
# ---------------------------------------------------------------------------

BYTES_PER_LINE = 16
BYTES_PER_GROUP = 2
OFFSET_WIDTH = 8
BLANK_GROUP = " " * 5

BufferLike = Union[bytes, bytearray, memoryview, "np.ndarray", Any]
"""Any object that supports the Python buffer protocol."""


def _as_byte_view(buffer: BufferLike) -> memoryview:
    """Return a flat, unsigned-byte memoryview over *buffer*."""
    view = memoryview(buffer)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def _check_span(view: memoryview, length: int, start_offset: int) -> None:
    if length < 0 or length > len(view):
        raise ValueError(
            f"length must be between 0 and {len(view)}, got {length}"
        )
    if start_offset < 0:
        raise ValueError(f"start_offset must be non-negative, got {start_offset}")


def _format_line(view: memoryview, line_start: int, length: int, label: int) -> str:
    parts = [f"{label:0{OFFSET_WIDTH}x} "]
    for j in range(0, BYTES_PER_LINE, BYTES_PER_GROUP):
        first = line_start + j
        if first < length:
            parts.append(f"{view[first]:02x}")
            if first + 1 < length:
                parts.append(f"{view[first + 1]:02x} ")
        else:
            parts.append(BLANK_GROUP)
    parts.append("\n")
    return "".join(parts)


def iter_hexdump(
    buffer: BufferLike, length: int, start_offset: int = 0
) -> Iterator[str]:
    """Yield the dump lines for the first *length* bytes of *buffer*.

    Parameters
    ----------
    buffer : bytes, bytearray, memoryview or numpy.ndarray
        Source bytes.  Only the first ``length`` bytes are read.
    length : int
        Number of valid bytes to render (``0 <= length <= len(buffer)``).
    start_offset : int, default 0
        Offset label for the first byte.  Used for display only, never for
        indexing into ``buffer``.

    Yields
    ------
    str
        One newline-terminated line per 16 bytes; the last line may be
        partial and is padded to full width.

    Raises
    ------
    ValueError
        If ``length`` or ``start_offset`` is out of range.
    """
    view = _as_byte_view(buffer)
    _check_span(view, length, start_offset)
    for i in range(0, length, BYTES_PER_LINE):
        yield _format_line(view, i, length, start_offset + i)


def format_hexdump(
    buffer: BufferLike, length: int, start_offset: int = 0
) -> list[str]:
    """Return the dump lines for *buffer* as a list (see :func:`iter_hexdump`)."""
    return list(iter_hexdump(buffer, length, start_offset))


def write_hexdump(
    buffer: BufferLike,
    length: int,
    start_offset: int = 0,
    out: TextIO | None = None,
) -> None:
    """Write the dump lines for *buffer* to *out* (standard output by default)."""
    if out is None:
        out = sys.stdout
    for line in iter_hexdump(buffer, length, start_offset):
        out.write(line)
