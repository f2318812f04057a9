"""Object models — blob, tree and commit as frozen value types."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from nanogit.models.hashes import ObjectHash

REGULAR_FILE_MODE = "100644"


class ObjectType(str, Enum):
    """Type tag written into every object frame."""

    BLOB = "blob"
    TREE = "tree"
    COMMIT = "commit"


class TreeEntry(BaseModel):
    """One named entry in a tree, pointing at a blob by hash."""

    model_config = ConfigDict(frozen=True)

    mode: str = REGULAR_FILE_MODE
    name: str
    hash: ObjectHash

    @field_validator("mode")
    @classmethod
    def check_mode(cls, value: str) -> str:
        if not value or " " in value or "\x00" in value:
            raise ValueError(f"invalid tree entry mode: {value!r}")
        return value

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        if not value or "\x00" in value:
            raise ValueError(f"invalid tree entry name: {value!r}")
        return value


class Signature(BaseModel):
    """Author or committer identity with a timestamp.

    Rendered as ``name <email> timestamp offset``; the offset is always
    UTC in this store.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    timestamp: int
    offset: str = "+0000"

    @field_validator("name", "email")
    @classmethod
    def check_identity(cls, value: str) -> str:
        # Rendered inside a single header line, between angle brackets
        if any(ch in value for ch in "\n\r<>\x00"):
            raise ValueError(f"invalid signature identity: {value!r}")
        return value

    def render(self) -> str:
        return f"{self.name} <{self.email}> {self.timestamp} {self.offset}"


class Commit(BaseModel):
    """A decoded commit.

    ``hash`` is set when the commit was read back from the store. ``tree``
    is optional on decode so that a header-less commit can still be listed
    by ``log``; checkout rejects it.
    """

    model_config = ConfigDict(frozen=True)

    hash: ObjectHash | None = None
    tree: ObjectHash | None = None
    parent: ObjectHash | None = None
    message: str = ""


class CheckoutFile(BaseModel):
    """A file materialised from a commit's tree."""

    model_config = ConfigDict(frozen=True)

    name: str
    content: bytes
