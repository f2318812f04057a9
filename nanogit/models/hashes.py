"""Object hash value type.

An ``ObjectHash`` is the 20-byte SHA-1 digest of an object's framed bytes.
It is immutable, compares byte-wise, and round-trips through its canonical
lowercase hex form.
"""

from __future__ import annotations

import binascii

from pydantic import BaseModel, ConfigDict, field_validator

from nanogit.errors import DecodeError

HASH_SIZE = 20
HEX_SIZE = HASH_SIZE * 2

_HEX_DIGITS = frozenset("0123456789abcdef")


class ObjectHash(BaseModel):
    """A 20-byte content address."""

    model_config = ConfigDict(frozen=True)

    digest: bytes

    @field_validator("digest")
    @classmethod
    def check_size(cls, value: bytes) -> bytes:
        if len(value) != HASH_SIZE:
            raise ValueError(
                f"hash digest must be {HASH_SIZE} bytes, got {len(value)}"
            )
        return value

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_bytes(cls, digest: bytes) -> ObjectHash:
        """Wrap exactly 20 raw digest bytes."""
        if len(digest) != HASH_SIZE:
            raise DecodeError(
                f"hash digest must be {HASH_SIZE} bytes, got {len(digest)}"
            )
        return cls(digest=bytes(digest))

    @classmethod
    def from_hex(cls, text: str) -> ObjectHash:
        """Parse a 40-character hex string.

        Parsing is strict: only the lowercase form ``to_hex`` produces is
        accepted. Callers reading text files must strip whitespace first.
        """
        if len(text) != HEX_SIZE:
            raise DecodeError(
                f"hash must be {HEX_SIZE} hex characters, got {len(text)}: {text!r}"
            )
        if not _HEX_DIGITS.issuperset(text):
            raise DecodeError(f"hash is not valid hex: {text!r}")
        try:
            return cls(digest=binascii.unhexlify(text))
        except binascii.Error as exc:
            raise DecodeError(f"hash is not valid hex: {text!r}") from exc

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------

    def to_hex(self) -> str:
        """Return the 40-character lowercase hex form."""
        return self.digest.hex()

    def short(self, length: int = 7) -> str:
        return self.to_hex()[:length]

    def startswith(self, prefix: str) -> bool:
        """Whether the hex form starts with ``prefix`` (case-insensitive)."""
        return self.to_hex().startswith(prefix.lower())

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"ObjectHash({self.to_hex()!r})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ObjectHash):
            return NotImplemented
        return self.digest < other.digest

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ObjectHash):
            return NotImplemented
        return self.digest <= other.digest

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ObjectHash):
            return NotImplemented
        return self.digest > other.digest

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ObjectHash):
            return NotImplemented
        return self.digest >= other.digest
