"""``nanogit init`` — create an empty repository skeleton."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from nanogit.cli.commands._common import BranchOption, RootOption, open_repository

console = Console()


def init_cmd(
    root: Path = RootOption,
    branch: str = BranchOption,
) -> None:
    """Create objects/, refs/heads/ and a HEAD pointing at the branch."""
    repo = open_repository(root, branch)
    repo.init()
    console.print(
        f"Initialized empty repository in [bold]{repo.root}[/bold] "
        f"on branch [cyan]{repo.branch}[/cyan]"
    )
