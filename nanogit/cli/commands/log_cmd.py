"""``nanogit log`` — list commits from the branch head back to the first."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.text import Text

from nanogit.cli.commands._common import BranchOption, RootOption, fail, open_repository
from nanogit.errors import NanogitError

console = Console()


def log_cmd(
    root: Path = RootOption,
    branch: str = BranchOption,
) -> None:
    """Print one line per commit: full hash and message, newest first."""
    repo = open_repository(root, branch)
    try:
        for commit in repo.iter_log():
            console.print(
                Text.assemble((commit.hash.to_hex(), "yellow"), " ", commit.message.rstrip("\n")),
                soft_wrap=True,
            )
    except NanogitError as exc:
        raise fail(exc) from exc
