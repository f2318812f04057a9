"""Tests for the object codec — framing, tree and commit formats."""

from __future__ import annotations

import pytest

from nanogit.core import codec
from nanogit.errors import CorruptObjectError, MalformedCommitError, MalformedTreeError
from nanogit.models import ObjectHash, ObjectType, Signature, TreeEntry


# ---------------------------------------------------------------------------
# Framing
# ---------------------------------------------------------------------------


class TestFraming:
    def test_frame_layout(self):
        assert codec.frame(ObjectType.BLOB, b"hello") == b"blob 5\x00hello"
        assert codec.frame("tree", b"") == b"tree 0\x00"

    def test_frame_unknown_type(self):
        with pytest.raises(ValueError):
            codec.frame("tag", b"x")

    def test_unframe(self):
        object_type, payload = codec.unframe(b"commit 3\x00abc")
        assert object_type is ObjectType.COMMIT
        assert payload == b"abc"

    def test_unframe_payload_may_contain_nul(self):
        _, payload = codec.unframe(b"blob 3\x00a\x00b")
        assert payload == b"a\x00b"

    @pytest.mark.parametrize(
        "framed",
        [
            b"blob 5hello",          # no NUL
            b"blob\x00hello",        # no length separator
            b"tag 5\x00hello",       # unknown type
            b"blob five\x00hello",   # non-decimal length
            b"blob 4\x00hello",      # length mismatch
            b"blob 6\x00hello",
            b"blob 05\x00hello",     # zero-padded length
            b"blob 00\x00",
            b"\xff\xfe 1\x00a",      # undecodable tag
        ],
    )
    def test_unframe_rejects(self, framed):
        with pytest.raises(CorruptObjectError):
            codec.unframe(framed)


# ---------------------------------------------------------------------------
# Blob
# ---------------------------------------------------------------------------


class TestBlob:
    def test_encode_blob(self):
        assert codec.encode_blob(b"hello") == b"blob 5\x00hello"

    def test_decode_blob_is_identity(self):
        assert codec.decode_blob(b"\x00\x01binary") == b"\x00\x01binary"


# ---------------------------------------------------------------------------
# Tree
# ---------------------------------------------------------------------------


class TestTree:
    def test_single_entry_layout(self, make_hash):
        h = make_hash(7)
        payload = codec.tree_payload([TreeEntry(name="file.txt", hash=h)])
        assert payload == b"100644 file.txt\x00" + h.digest

    def test_encode_tree_frames_payload(self, make_hash):
        h = make_hash(7)
        framed = codec.encode_tree([TreeEntry(name="a", hash=h)])
        assert framed == b"tree 29\x00100644 a\x00" + h.digest

    def test_decode_single_entry(self, make_hash):
        h = make_hash(3)
        entries = codec.decode_tree(b"100644 file.txt\x00" + h.digest)
        assert entries == [TreeEntry(mode="100644", name="file.txt", hash=h)]

    def test_multi_entry_round_trip_preserves_order(self, make_hash):
        entries = [
            TreeEntry(name="zeta.txt", hash=make_hash(1)),
            TreeEntry(name="alpha.txt", hash=make_hash(2)),
            TreeEntry(name="with space.txt", hash=make_hash(3)),
        ]
        assert codec.decode_tree(codec.tree_payload(entries)) == entries

    def test_hash_bytes_may_contain_nul_and_space(self):
        h = ObjectHash.from_bytes(b"\x00 " * 10)
        entries = [
            TreeEntry(name="a", hash=h),
            TreeEntry(name="b", hash=h),
        ]
        assert codec.decode_tree(codec.tree_payload(entries)) == entries

    def test_unicode_name(self, make_hash):
        entries = [TreeEntry(name="résumé.txt", hash=make_hash())]
        assert codec.decode_tree(codec.tree_payload(entries)) == entries

    def test_empty_payload_is_empty_tree(self):
        assert codec.decode_tree(b"") == []

    def test_missing_nul(self):
        with pytest.raises(MalformedTreeError, match="NUL"):
            codec.decode_tree(b"100644 file.txt")

    def test_truncated_hash(self, make_hash):
        payload = b"100644 file.txt\x00" + make_hash().digest[:19]
        with pytest.raises(MalformedTreeError, match="truncated"):
            codec.decode_tree(payload)

    def test_truncated_second_entry(self, make_hash):
        payload = b"100644 a\x00" + make_hash().digest + b"100644 b\x00\x01\x02"
        with pytest.raises(MalformedTreeError):
            codec.decode_tree(payload)

    def test_missing_mode_separator(self, make_hash):
        with pytest.raises(MalformedTreeError):
            codec.decode_tree(b"100644file\x00" + make_hash().digest)

    def test_invalid_utf8_name(self, make_hash):
        with pytest.raises(MalformedTreeError):
            codec.decode_tree(b"100644 \xff\xfe\x00" + make_hash().digest)


# ---------------------------------------------------------------------------
# Commit
# ---------------------------------------------------------------------------


class TestCommit:
    def test_encode_root_commit_layout(self, make_hash):
        tree = make_hash(1)
        framed = codec.encode_commit(tree, None, "Ann", "ann@example.com", 1700000000, "first")
        object_type, payload = codec.unframe(framed)
        assert object_type is ObjectType.COMMIT
        assert payload.decode() == (
            f"tree {tree.to_hex()}\n"
            "author Ann <ann@example.com> 1700000000 +0000\n"
            "committer Ann <ann@example.com> 1700000000 +0000\n"
            "\n"
            "first\n"
        )

    def test_encode_with_parent(self, make_hash):
        tree, parent = make_hash(1), make_hash(2)
        framed = codec.encode_commit(tree, parent, "Ann", "a@b", 5, "second")
        _, payload = codec.unframe(framed)
        lines = payload.decode().split("\n")
        assert lines[0] == f"tree {tree.to_hex()}"
        assert lines[1] == f"parent {parent.to_hex()}"

    def test_decode_round_trip(self, make_hash):
        tree, parent = make_hash(1), make_hash(2)
        sig = Signature(name="Ann", email="a@b", timestamp=5)
        payload = codec.commit_payload(tree, parent, sig, sig, "second")
        commit = codec.decode_commit(payload, hash=make_hash(9))
        assert commit.tree == tree
        assert commit.parent == parent
        assert commit.message == "second\n"
        assert commit.hash == make_hash(9)

    def test_decode_without_parent(self, make_hash):
        sig = Signature(name="Ann", email="a@b", timestamp=5)
        commit = codec.decode_commit(codec.commit_payload(make_hash(1), None, sig, sig, "m"))
        assert commit.parent is None

    def test_multiline_message_preserved(self, make_hash):
        sig = Signature(name="Ann", email="a@b", timestamp=5)
        message = "subject\n\nbody line one\nbody line two"
        commit = codec.decode_commit(codec.commit_payload(make_hash(1), None, sig, sig, message))
        assert commit.message == message + "\n"

    def test_unknown_headers_skipped(self, make_hash):
        payload = (
            f"tree {make_hash(1).to_hex()}\n"
            "encoding latin-1\n"
            "gpgsig something\n"
            "\n"
            "msg\n"
        ).encode()
        commit = codec.decode_commit(payload)
        assert commit.tree == make_hash(1)
        assert commit.message == "msg\n"

    def test_missing_tree_allowed_on_decode(self):
        commit = codec.decode_commit(b"author x <y> 1 +0000\n\nmsg\n")
        assert commit.tree is None

    def test_header_less_commit(self):
        commit = codec.decode_commit(b"\nonly message\n")
        assert commit.tree is None
        assert commit.message == "only message\n"

    def test_no_blank_line(self, make_hash):
        with pytest.raises(MalformedCommitError, match="blank line"):
            codec.decode_commit(f"tree {make_hash().to_hex()}\n".encode())

    def test_bad_tree_hex(self):
        with pytest.raises(MalformedCommitError):
            codec.decode_commit(b"tree nothex\n\nmsg\n")

    def test_bad_parent_hex(self, make_hash):
        payload = f"tree {make_hash().to_hex()}\nparent 1234\n\nmsg\n".encode()
        with pytest.raises(MalformedCommitError):
            codec.decode_commit(payload)

    def test_duplicate_parent_rejected(self, make_hash):
        payload = (
            f"tree {make_hash(1).to_hex()}\n"
            f"parent {make_hash(2).to_hex()}\n"
            f"parent {make_hash(3).to_hex()}\n"
            "\nmerge\n"
        ).encode()
        with pytest.raises(MalformedCommitError, match="repeats"):
            codec.decode_commit(payload)

    def test_header_without_value(self):
        with pytest.raises(MalformedCommitError):
            codec.decode_commit(b"tree\n\nmsg\n")

    def test_invalid_utf8(self):
        with pytest.raises(MalformedCommitError):
            codec.decode_commit(b"\xff\xfe\n\nmsg\n")
