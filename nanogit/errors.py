"""Error taxonomy for the object store.

Filesystem failures are not wrapped: ``OSError`` propagates verbatim.
Everything raised by nanogit itself derives from ``NanogitError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nanogit.models.hashes import ObjectHash


class NanogitError(RuntimeError):
    """Base class for all object store errors."""


class DecodeError(NanogitError, ValueError):
    """Raised when hex text does not decode to a 20-byte hash."""


class CorruptObjectError(NanogitError):
    """Raised when a stored object cannot be decompressed or unframed."""

    def __init__(self, message: str, *, hash: ObjectHash | None = None) -> None:
        self.hash = hash
        if hash is not None:
            message = f"{message} (object {hash})"
        super().__init__(message)


class WrongObjectTypeError(NanogitError):
    """Raised when an object's type tag differs from the one requested."""

    def __init__(self, hash: ObjectHash, expected: str, actual: str) -> None:
        self.hash = hash
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Object {hash} is a {actual!r}, expected {expected!r}"
        )


class MalformedTreeError(NanogitError):
    """Raised when a tree payload is structurally invalid."""


class MalformedCommitError(NanogitError):
    """Raised when a commit payload is structurally invalid."""


class ObjectNotFoundError(NanogitError, LookupError):
    """Raised when no object is stored under a hash."""

    def __init__(self, hash: ObjectHash) -> None:
        self.hash = hash
        super().__init__(f"Object not found: {hash}")


class NoCommitsYetError(NanogitError):
    """Raised when the branch ref does not exist yet.

    This is the legitimate state of a repository before its first commit,
    distinct from a ref file that exists but is corrupt (``DecodeError``).
    """

    def __init__(self, branch: str) -> None:
        self.branch = branch
        super().__init__(f"Branch {branch!r} has no commits yet")


class UnknownCommitError(NanogitError, LookupError):
    """Raised when no commit in history matches a hash prefix."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        super().__init__(f"Unknown commit hash {prefix!r}")
