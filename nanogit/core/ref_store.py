"""Branch ref and symbolic HEAD storage.

Layout:
    {root}/HEAD                  "ref: refs/heads/<branch>"
    {root}/refs/heads/<branch>   40-char lowercase hex commit hash

There is no locking: two processes updating the same ref concurrently can
lose an update.
"""

from __future__ import annotations

import logging
from pathlib import Path

from nanogit.core.object_store import OBJECTS_DIR
from nanogit.errors import DecodeError, NoCommitsYetError
from nanogit.models.hashes import ObjectHash

logger = logging.getLogger(__name__)

HEAD_FILE = "HEAD"
HEADS_DIR = Path("refs") / "heads"
SYMREF_PREFIX = "ref: "


class RefStore:
    """Reads and writes the branch pointer for one repository root.

    Parameters
    ----------
    root:
        Repository storage root.
    branch:
        The branch HEAD points at. Fixed for the lifetime of the store.
    """

    def __init__(self, root: Path, branch: str = "master") -> None:
        self._root = Path(root)
        self.branch = branch

    @property
    def head_path(self) -> Path:
        return self._root / HEAD_FILE

    def ref_path(self, branch: str | None = None) -> Path:
        return self._root / HEADS_DIR / (branch or self.branch)

    # ------------------------------------------------------------------
    # Skeleton
    # ------------------------------------------------------------------

    def init(self) -> None:
        """Create objects/ and refs/heads/ and point HEAD at the branch.

        Filesystem errors propagate as ``OSError``.
        """
        (self._root / OBJECTS_DIR).mkdir(parents=True, exist_ok=True)
        (self._root / HEADS_DIR).mkdir(parents=True, exist_ok=True)
        self.head_path.write_text(
            f"{SYMREF_PREFIX}{HEADS_DIR.as_posix()}/{self.branch}", encoding="utf-8"
        )
        logger.info("Initialized repository at %s on branch %s", self._root, self.branch)

    def read_symbolic_head(self) -> str:
        """Return the branch name HEAD points at.

        Raises
        ------
        DecodeError
            If HEAD is not a ``ref: refs/heads/<branch>`` line.
        """
        try:
            text = self.head_path.read_text(encoding="utf-8").strip()
        except UnicodeDecodeError as exc:
            raise DecodeError(f"HEAD is not valid UTF-8: {exc}") from exc
        prefix = f"{SYMREF_PREFIX}{HEADS_DIR.as_posix()}/"
        if not text.startswith(prefix) or len(text) == len(prefix):
            raise DecodeError(f"HEAD is not a symbolic branch ref: {text!r}")
        return text[len(prefix):]

    # ------------------------------------------------------------------
    # Branch pointer
    # ------------------------------------------------------------------

    def read_head(self, branch: str | None = None) -> ObjectHash:
        """Return the commit hash the branch points at.

        Raises
        ------
        NoCommitsYetError
            If the branch ref file does not exist yet.
        DecodeError
            If the ref file exists but does not hold a valid hash.
        """
        branch = branch or self.branch
        path = self.ref_path(branch)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise NoCommitsYetError(branch) from None
        except UnicodeDecodeError as exc:
            raise DecodeError(f"ref {branch!r} is not valid UTF-8: {exc}") from exc
        return ObjectHash.from_hex(text.strip())

    def write_head(self, hash: ObjectHash, branch: str | None = None) -> None:
        """Point the branch at ``hash``, overwriting the previous value."""
        path = self.ref_path(branch)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(hash.to_hex(), encoding="utf-8")
        logger.debug("Updated %s -> %s", path.name, hash.short())
