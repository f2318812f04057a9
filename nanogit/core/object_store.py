"""Content-addressed, immutable object store.

Storage layout: {root}/objects/{hex[0:2]}/{hex[2:40]}
Each file holds the zlib-compressed framed object. There is no update or
delete method: objects are immutable once stored.
"""

from __future__ import annotations

import logging
from pathlib import Path

from nanogit.core import codec, compressor
from nanogit.core.hasher import hash_framed
from nanogit.errors import CorruptObjectError, ObjectNotFoundError, WrongObjectTypeError
from nanogit.models.hashes import ObjectHash
from nanogit.models.objects import ObjectType

logger = logging.getLogger(__name__)

OBJECTS_DIR = "objects"


class ObjectStore:
    """SHA-1 keyed object store under ``{root}/objects``.

    Writing the same content twice yields the same hash and rewrites the
    same bytes to the same path, which is harmless.

    Parameters
    ----------
    root:
        Repository storage root (the directory holding ``HEAD``).
    compression_level:
        zlib level used for new objects; ``-1`` is the zlib default.
    """

    def __init__(self, root: Path, compression_level: int = compressor.DEFAULT_LEVEL) -> None:
        self._root = Path(root)
        self._objects = self._root / OBJECTS_DIR
        self._level = compression_level

    @property
    def objects_dir(self) -> Path:
        return self._objects

    def object_path(self, hash: ObjectHash) -> Path:
        """Compute the storage path for a hash.

        Layout: {root}/objects/{hex[0:2]}/{hex[2:]}
        """
        hex_digest = hash.to_hex()
        return self._objects / hex_digest[:2] / hex_digest[2:]

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def write(self, object_type: ObjectType | str, payload: bytes) -> ObjectHash:
        """Frame, hash, compress and persist a payload; return its hash."""
        framed = codec.frame(object_type, payload)
        hash = hash_framed(framed)
        path = self.object_path(hash)

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(compressor.compress(framed, self._level))
        logger.debug(
            "Wrote %s %s (%d payload bytes)",
            ObjectType(object_type).value, hash.short(), len(payload),
        )
        return hash

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def read_object(self, hash: ObjectHash) -> tuple[ObjectType, bytes]:
        """Read any object and return its type tag and payload.

        Raises
        ------
        ObjectNotFoundError
            If nothing is stored under ``hash``.
        CorruptObjectError
            If the stored bytes do not decompress or unframe.
        """
        path = self.object_path(hash)
        if not path.is_file():
            raise ObjectNotFoundError(hash)
        raw = path.read_bytes()
        try:
            return codec.unframe(compressor.decompress(raw))
        except CorruptObjectError as exc:
            raise CorruptObjectError(str(exc), hash=hash) from exc

    def read(self, expected_type: ObjectType | str, hash: ObjectHash) -> bytes:
        """Read an object's payload, verifying its type tag.

        Raises
        ------
        WrongObjectTypeError
            If the stored object is not of ``expected_type``.
        """
        expected = ObjectType(expected_type)
        object_type, payload = self.read_object(hash)
        if object_type is not expected:
            raise WrongObjectTypeError(hash, expected.value, object_type.value)
        logger.debug("Read %s %s", expected.value, hash.short())
        return payload

    # ------------------------------------------------------------------
    # Check and verify
    # ------------------------------------------------------------------

    def exists(self, hash: ObjectHash) -> bool:
        """Check if an object is stored under ``hash``."""
        return self.object_path(hash).is_file()

    def verify(self, hash: ObjectHash) -> bool:
        """Re-hash the stored object and compare it against its address.

        Returns False for a missing object or one whose decompressed bytes
        hash to something else. Undecompressable bytes raise
        ``CorruptObjectError``.
        """
        path = self.object_path(hash)
        if not path.is_file():
            return False
        try:
            framed = compressor.decompress(path.read_bytes())
        except CorruptObjectError as exc:
            raise CorruptObjectError(str(exc), hash=hash) from exc
        return hash_framed(framed) == hash
