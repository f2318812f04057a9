"""Repository configuration — env-driven.

Settings come from NANOGIT_* environment variables or a .env file, with
the defaults below.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class NanogitConfig(BaseSettings):
    """Storage root, branch and identity settings.

    Examples
    --------
    Override via environment::

        export NANOGIT_ROOT=/srv/data/.git
        export NANOGIT_BRANCH=main
        export NANOGIT_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="NANOGIT_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage
    root: Path = Path(".git")
    branch: str = "master"
    compression_level: int = -1

    # Identity written into author and committer lines
    user_name: str = "nanogit"
    user_email: str = "someemail@nanogitexample.com"

    # Observability
    log_level: str = "INFO"

    @field_validator("compression_level")
    @classmethod
    def check_level(cls, value: int) -> int:
        if not -1 <= value <= 9:
            raise ValueError(f"compression_level must be in -1..9, got {value}")
        return value

    @field_validator("branch")
    @classmethod
    def check_branch(cls, value: str) -> str:
        if not value or "/" in value or value.strip() != value:
            raise ValueError(f"invalid branch name: {value!r}")
        return value

    @field_validator("user_name", "user_email")
    @classmethod
    def check_identity(cls, value: str) -> str:
        if any(ch in value for ch in "\n\r<>\x00"):
            raise ValueError(f"invalid identity: {value!r}")
        return value
