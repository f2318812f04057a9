"""Canonical object encoding — framing plus the blob, tree and commit codecs.

Pure byte transforms, no I/O. The formats are bit-exact:

- Frame:  ``b"<type> <decimal-length>\\0" + payload``
- Tree:   repeated ``b"<mode> <name>\\0" + <20 raw hash bytes>``, no separator
- Commit: ``tree``/``parent``/``author``/``committer`` header lines, one blank
  line, then the message followed by ``\\n``
"""

from __future__ import annotations

from collections.abc import Iterable

from nanogit.errors import (
    CorruptObjectError,
    DecodeError,
    MalformedCommitError,
    MalformedTreeError,
)
from nanogit.models.hashes import HASH_SIZE, ObjectHash
from nanogit.models.objects import Commit, ObjectType, Signature, TreeEntry

NUL = b"\x00"


# ---------------------------------------------------------------------------
# Framing
# ---------------------------------------------------------------------------


def frame(object_type: ObjectType | str, payload: bytes) -> bytes:
    """Wrap ``payload`` in its ``"<type> <length>\\0"`` header."""
    tag = ObjectType(object_type).value
    return f"{tag} {len(payload)}".encode("ascii") + NUL + payload


def unframe(framed: bytes) -> tuple[ObjectType, bytes]:
    """Split framed bytes into their type tag and payload.

    Raises
    ------
    CorruptObjectError
        If the header is missing, names an unknown type, or declares a
        length that is zero-padded or does not match the payload.
    """
    nul = framed.find(NUL)
    if nul == -1:
        raise CorruptObjectError("Object frame has no header terminator")
    header = framed[:nul]
    tag, sep, length_text = header.partition(b" ")
    if not sep:
        raise CorruptObjectError(f"Object frame header is malformed: {header!r}")
    try:
        object_type = ObjectType(tag.decode("ascii"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise CorruptObjectError(f"Unknown object type tag: {tag!r}") from exc
    if not length_text.isdigit():
        raise CorruptObjectError(f"Object frame length is not decimal: {length_text!r}")
    if length_text != b"%d" % int(length_text):
        raise CorruptObjectError(f"Object frame length is not canonical: {length_text!r}")

    payload = framed[nul + 1:]
    if int(length_text) != len(payload):
        raise CorruptObjectError(
            f"Object frame declares {int(length_text)} bytes, found {len(payload)}"
        )
    return object_type, payload


# ---------------------------------------------------------------------------
# Blob
# ---------------------------------------------------------------------------


def encode_blob(data: bytes) -> bytes:
    return frame(ObjectType.BLOB, data)


def decode_blob(payload: bytes) -> bytes:
    return bytes(payload)


# ---------------------------------------------------------------------------
# Tree
# ---------------------------------------------------------------------------


def tree_payload(entries: Iterable[TreeEntry]) -> bytes:
    """Concatenate tree entries in the order given (no sorting)."""
    parts: list[bytes] = []
    for entry in entries:
        parts.append(f"{entry.mode} {entry.name}".encode("utf-8"))
        parts.append(NUL)
        parts.append(entry.hash.digest)
    return b"".join(parts)


def encode_tree(entries: Iterable[TreeEntry]) -> bytes:
    return frame(ObjectType.TREE, tree_payload(entries))


def decode_tree(payload: bytes) -> list[TreeEntry]:
    """Parse a tree payload into its ordered entries.

    Walks the buffer with an explicit offset: each entry is the text up to
    the next NUL (``"<mode> <name>"``) followed by exactly 20 raw hash bytes.
    An empty payload is an empty tree.

    Raises
    ------
    MalformedTreeError
        If an entry has no NUL terminator, no mode/name separator, invalid
        UTF-8, or fewer than 20 bytes where a hash is expected.
    """
    entries: list[TreeEntry] = []
    offset = 0
    end = len(payload)

    while offset < end:
        nul = payload.find(NUL, offset)
        if nul == -1:
            raise MalformedTreeError(
                f"Tree entry at offset {offset} has no NUL terminator"
            )
        mode, sep, name = payload[offset:nul].partition(b" ")
        if not sep or not mode or not name:
            raise MalformedTreeError(
                f"Tree entry at offset {offset} is not '<mode> <name>'"
            )

        hash_start = nul + 1
        hash_end = hash_start + HASH_SIZE
        if hash_end > end:
            raise MalformedTreeError(
                f"Tree entry at offset {offset} is truncated: expected "
                f"{HASH_SIZE} hash bytes, found {end - hash_start}"
            )

        try:
            entry = TreeEntry(
                mode=mode.decode("ascii"),
                name=name.decode("utf-8"),
                hash=ObjectHash.from_bytes(payload[hash_start:hash_end]),
            )
        except (UnicodeDecodeError, ValueError) as exc:
            raise MalformedTreeError(
                f"Tree entry at offset {offset} is invalid: {exc}"
            ) from exc
        entries.append(entry)
        offset = hash_end

    return entries


# ---------------------------------------------------------------------------
# Commit
# ---------------------------------------------------------------------------


def commit_payload(
    tree: ObjectHash,
    parent: ObjectHash | None,
    author: Signature,
    committer: Signature,
    message: str,
) -> bytes:
    """Render the line-oriented commit text."""
    lines = [f"tree {tree.to_hex()}\n"]
    if parent is not None:
        lines.append(f"parent {parent.to_hex()}\n")
    lines.append(f"author {author.render()}\n")
    lines.append(f"committer {committer.render()}\n")
    lines.append("\n")
    lines.append(f"{message}\n")
    return "".join(lines).encode("utf-8")


def encode_commit(
    tree: ObjectHash,
    parent: ObjectHash | None,
    author: str,
    email: str,
    timestamp: int,
    message: str,
) -> bytes:
    """Frame a commit whose author and committer are the same identity."""
    signature = Signature(name=author, email=email, timestamp=timestamp)
    return frame(
        ObjectType.COMMIT,
        commit_payload(tree, parent, signature, signature, message),
    )


def decode_commit(payload: bytes, hash: ObjectHash | None = None) -> Commit:
    """Parse a commit payload.

    Header lines before the first blank line are ``"<key> <value>"``. Only
    ``tree`` and ``parent`` are interpreted; other keys (``author``,
    ``committer``, ...) are skipped. Everything after the blank line is the
    message, kept verbatim including its trailing newline.

    Raises
    ------
    MalformedCommitError
        If the payload is not UTF-8, has no blank-line terminator, has a
        header line without a value, repeats ``tree``/``parent``, or carries
        a hash that is not valid hex.
    """
    try:
        text = payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedCommitError(f"Commit is not valid UTF-8: {exc}") from exc

    if text.startswith("\n"):
        header, message = "", text[1:]
    else:
        split_at = text.find("\n\n")
        if split_at == -1:
            raise MalformedCommitError("Commit has no blank line after its headers")
        header, message = text[:split_at], text[split_at + 2:]

    fields: dict[str, ObjectHash] = {}
    for line in header.split("\n") if header else []:
        key, sep, value = line.partition(" ")
        if not sep:
            raise MalformedCommitError(f"Commit header line has no value: {line!r}")
        if key not in ("tree", "parent"):
            continue
        if key in fields:
            raise MalformedCommitError(f"Commit repeats the {key!r} header")
        try:
            fields[key] = ObjectHash.from_hex(value)
        except DecodeError as exc:
            raise MalformedCommitError(f"Commit {key!r} is not a hash: {exc}") from exc

    return Commit(
        hash=hash,
        tree=fields.get("tree"),
        parent=fields.get("parent"),
        message=message,
    )
