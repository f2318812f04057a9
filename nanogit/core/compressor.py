"""Deflate compression wrapper for persisted object bytes.

Every object on disk is a zlib stream of its framed bytes; no object type
is stored uncompressed.
"""

from __future__ import annotations

import zlib

from nanogit.errors import CorruptObjectError

DEFAULT_LEVEL = zlib.Z_DEFAULT_COMPRESSION


def compress(data: bytes, level: int = DEFAULT_LEVEL) -> bytes:
    """Compress ``data`` into a zlib stream."""
    return zlib.compress(data, level)


def decompress(data: bytes) -> bytes:
    """Inflate a zlib stream.

    Raises
    ------
    CorruptObjectError
        If ``data`` is not a complete, valid zlib stream.
    """
    try:
        return zlib.decompress(data)
    except zlib.error as exc:
        raise CorruptObjectError(f"Invalid compressed stream: {exc}") from exc
