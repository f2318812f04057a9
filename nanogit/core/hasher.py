"""Content hashing for framed objects.

The hash is always computed over the uncompressed framed bytes, so two
objects with identical type and payload share one address.
"""

from __future__ import annotations

import hashlib

from nanogit.models.hashes import ObjectHash


def sha1_digest(data: bytes) -> bytes:
    """Return the raw 20-byte SHA-1 digest of ``data``."""
    return hashlib.sha1(data).digest()


def hash_framed(framed: bytes) -> ObjectHash:
    """Content-address a framed object."""
    return ObjectHash.from_bytes(sha1_digest(framed))
