"""nanogit data models — all Pydantic v2, all frozen (immutable)."""

from nanogit.models.hashes import HASH_SIZE, HEX_SIZE, ObjectHash
from nanogit.models.objects import (
    REGULAR_FILE_MODE,
    CheckoutFile,
    Commit,
    ObjectType,
    Signature,
    TreeEntry,
)

__all__ = [
    # hashes
    "HASH_SIZE",
    "HEX_SIZE",
    "ObjectHash",
    # objects
    "REGULAR_FILE_MODE",
    "ObjectType",
    "TreeEntry",
    "Signature",
    "Commit",
    "CheckoutFile",
]
