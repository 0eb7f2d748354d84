"""Shared pytest fixtures and skip markers for hexdump_util tests."""

from __future__ import annotations

import io
import random
from pathlib import Path
from typing import Callable

import pytest

# ---------------------------------------------------------------------------
# Skip markers
# ---------------------------------------------------------------------------

try:
    import numpy as np  # noqa: F401

    _HAS_NUMPY = True
except ImportError:
    _HAS_NUMPY = False

requires_numpy = pytest.mark.skipif(
    not _HAS_NUMPY,
    reason="NumPy is not installed",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def parse_dump(text: str) -> bytes:
    """Recover the dumped bytes from hex dump output, ignoring offsets."""
    data = bytearray()
    for line in text.splitlines():
        _, _, body = line.partition(" ")
        data.extend(bytes.fromhex("".join(body.split())))
    return bytes(data)


class FailingStream(io.RawIOBase):
    """Serves *data* once, then raises OSError on the next read."""

    def __init__(self, data: bytes) -> None:
        super().__init__()
        self._data = data
        self._served = False

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        if self._served:
            raise OSError(5, "Input/output error")
        self._served = True
        n = len(self._data)
        b[:n] = self._data
        return n


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def counting_data() -> bytes:
    """The 16 bytes 0x00..0x0f."""
    return bytes(range(16))


@pytest.fixture()
def random_data() -> bytes:
    """~5 KB of seeded random bytes, spanning several staging buffers."""
    rng = random.Random(42)
    return bytes(rng.getrandbits(8) for _ in range(5000))


@pytest.fixture()
def write_file(tmp_path: Path) -> Callable[[bytes], Path]:
    """Return a helper that writes *data* to a fresh temp file."""
    counter = iter(range(1_000_000))

    def _write(data: bytes) -> Path:
        path = tmp_path / f"input_{next(counter)}.bin"
        path.write_bytes(data)
        return path

    return _write
