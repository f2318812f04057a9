"""nanogit: a minimal content-addressed object store.

Immutable blobs, trees and commits are stored zlib-compressed under the
SHA-1 of their framed bytes, with a single branch ref tracking the newest
commit:
  - Bit-exact ``"<type> <length>\\0<payload>"`` framing
  - Sharded ``objects/<hh>/<38-hex>`` layout
  - Singly-linked commit history walked by ``log``
"""

__version__ = "0.1.0"
__description__ = "Minimal content-addressed object store with single-branch history"

from nanogit.config import NanogitConfig
from nanogit.core.object_store import ObjectStore
from nanogit.core.ref_store import RefStore
from nanogit.core.repository import Repository
from nanogit.models import CheckoutFile, Commit, ObjectHash, ObjectType, TreeEntry

__all__ = [
    "Repository",
    "ObjectStore",
    "RefStore",
    "NanogitConfig",
    "ObjectHash",
    "ObjectType",
    "TreeEntry",
    "Commit",
    "CheckoutFile",
    "__version__",
]
