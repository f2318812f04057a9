"""Repository facade — the entry point the command-line layer calls.

The Repository wires an ObjectStore and a RefStore for one storage root and
exposes the write path (blob -> tree -> commit -> ref) and the read path
(log, checkout).

``add_commit`` is not transactional: if the process dies after the commit
object is written but before the ref is updated, the commit is left
unreferenced in the object store.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from nanogit.config import NanogitConfig
from nanogit.core import codec
from nanogit.core.object_store import ObjectStore
from nanogit.core.ref_store import RefStore
from nanogit.errors import (
    CorruptObjectError,
    MalformedCommitError,
    NoCommitsYetError,
    UnknownCommitError,
)
from nanogit.models.hashes import ObjectHash
from nanogit.models.objects import (
    CheckoutFile,
    Commit,
    ObjectType,
    Signature,
    TreeEntry,
)

logger = logging.getLogger(__name__)


def _unix_now() -> int:
    return int(time.time())


class Repository:
    """Single-branch content-addressed repository.

    Parameters
    ----------
    root:
        Storage root (``<root>/HEAD``, ``<root>/objects``, ``<root>/refs``).
    branch:
        The branch HEAD points at.
    author:
        Name written into author and committer lines.
    email:
        Email written into author and committer lines.
    clock:
        Returns the commit timestamp in Unix seconds.
    compression_level:
        zlib level for newly written objects.
    """

    def __init__(
        self,
        root: Path,
        branch: str = "master",
        *,
        author: str = "nanogit",
        email: str = "someemail@nanogitexample.com",
        clock: Callable[[], int] | None = None,
        compression_level: int = -1,
    ) -> None:
        self.root = Path(root)
        self.author = author
        self.email = email
        self._clock = clock or _unix_now
        self.objects = ObjectStore(self.root, compression_level=compression_level)
        self.refs = RefStore(self.root, branch)

    @classmethod
    def from_config(
        cls,
        config: NanogitConfig | None = None,
        *,
        clock: Callable[[], int] | None = None,
    ) -> Repository:
        """Build a Repository from environment-driven settings."""
        config = config or NanogitConfig()
        return cls(
            config.root,
            config.branch,
            author=config.user_name,
            email=config.user_email,
            clock=clock,
            compression_level=config.compression_level,
        )

    @property
    def branch(self) -> str:
        return self.refs.branch

    def init(self) -> None:
        """Create the on-disk skeleton and the symbolic HEAD."""
        self.refs.init()

    # ------------------------------------------------------------------
    # Write path
    # ------------------------------------------------------------------

    def add_blob(self, data: bytes) -> ObjectHash:
        return self.objects.write(ObjectType.BLOB, data)

    def add_tree(self, entries: Iterable[TreeEntry]) -> ObjectHash:
        """Write a tree of already-stored blobs, in the order given."""
        return self.objects.write(ObjectType.TREE, codec.tree_payload(entries))

    def add_commit(
        self,
        filename: str,
        data: bytes,
        parent: ObjectHash | None,
        message: str,
    ) -> ObjectHash:
        """Commit one file and move the branch to the new commit.

        Writes blob, then a single-entry tree naming it ``filename``, then
        the commit, then updates the branch ref.
        """
        signature = Signature(name=self.author, email=self.email, timestamp=self._clock())
        blob = self.add_blob(data)
        tree = self.add_tree([TreeEntry(name=filename, hash=blob)])

        payload = codec.commit_payload(tree, parent, signature, signature, message)
        commit = self.objects.write(ObjectType.COMMIT, payload)

        self.refs.write_head(commit)
        logger.info(
            "Committed %s on %s (parent %s)",
            commit.short(), self.branch, parent.short() if parent else "none",
        )
        return commit

    def commit_file(self, filename: str, data: bytes, message: str) -> ObjectHash:
        """Commit on top of the current head, or as the first commit."""
        try:
            parent: ObjectHash | None = self.head()
        except NoCommitsYetError:
            parent = None
        return self.add_commit(filename, data, parent, message)

    # ------------------------------------------------------------------
    # Typed readers
    # ------------------------------------------------------------------

    def head(self) -> ObjectHash:
        """Return the commit the branch points at."""
        return self.refs.read_head()

    def read_blob(self, hash: ObjectHash) -> bytes:
        return codec.decode_blob(self.objects.read(ObjectType.BLOB, hash))

    def read_tree(self, hash: ObjectHash) -> list[TreeEntry]:
        return codec.decode_tree(self.objects.read(ObjectType.TREE, hash))

    def read_commit(self, hash: ObjectHash) -> Commit:
        return codec.decode_commit(self.objects.read(ObjectType.COMMIT, hash), hash=hash)

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def iter_log(self) -> Iterator[Commit]:
        """Yield commits from the branch head back to the first commit.

        Raises
        ------
        NoCommitsYetError
            If the branch has no commits.
        CorruptObjectError
            If the parent chain loops back on itself.
        """
        current: ObjectHash | None = self.head()
        seen: set[ObjectHash] = set()
        while current is not None:
            if current in seen:
                raise CorruptObjectError("Commit history contains a cycle", hash=current)
            seen.add(current)
            commit = self.read_commit(current)
            yield commit
            current = commit.parent

    def log(self) -> list[Commit]:
        """Return the full history, newest first."""
        return list(self.iter_log())

    def checkout(self, prefix: str) -> list[CheckoutFile]:
        """Return the files of the newest commit whose hash starts with ``prefix``.

        Raises
        ------
        UnknownCommitError
            If no commit in history matches.
        MalformedCommitError
            If the matching commit has no tree.
        """
        for commit in self.iter_log():
            if not commit.hash.startswith(prefix):
                continue
            if commit.tree is None:
                raise MalformedCommitError(f"Commit {commit.hash} has no tree")
            files = [
                CheckoutFile(name=entry.name, content=self.read_blob(entry.hash))
                for entry in self.read_tree(commit.tree)
            ]
            logger.debug("Checked out %s (%d files)", commit.hash.short(), len(files))
            return files
        raise UnknownCommitError(prefix)
