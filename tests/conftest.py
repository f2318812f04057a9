"""Shared test fixtures for nanogit."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from nanogit.core.object_store import ObjectStore
from nanogit.core.ref_store import RefStore
from nanogit.core.repository import Repository
from nanogit.models.hashes import ObjectHash

FIXED_TIMESTAMP = 1_700_000_000


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """Provide the storage root for a test repository."""
    return tmp_path / ".git"


@pytest.fixture
def object_store(repo_root: Path) -> ObjectStore:
    """Provide an ObjectStore over an empty root."""
    return ObjectStore(repo_root)


@pytest.fixture
def ref_store(repo_root: Path) -> RefStore:
    """Provide an initialized RefStore on branch ``master``."""
    refs = RefStore(repo_root, "master")
    refs.init()
    return refs


@pytest.fixture
def clock() -> Callable[[], int]:
    """Deterministic commit clock: one second per call."""
    ticks = iter(range(FIXED_TIMESTAMP, FIXED_TIMESTAMP + 10_000))
    return lambda: next(ticks)


@pytest.fixture
def repository(repo_root: Path, clock: Callable[[], int]) -> Repository:
    """Provide an initialized Repository with a deterministic clock."""
    repo = Repository(
        repo_root,
        "master",
        author="Test User",
        email="test@example.com",
        clock=clock,
    )
    repo.init()
    return repo


# ---------------------------------------------------------------------------
# Hash factories — shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_hash() -> Callable[[int], ObjectHash]:
    """Factory fixture: a distinct, deterministic hash per integer seed."""

    def _factory(seed: int = 0) -> ObjectHash:
        return ObjectHash.from_bytes(bytes((seed + i) % 256 for i in range(20)))

    return _factory
