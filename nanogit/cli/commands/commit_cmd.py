"""``nanogit commit`` — commit stdin as a single file.

The new commit's parent is the current branch head, or none for the first
commit.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from nanogit.cli.commands._common import BranchOption, RootOption, fail, open_repository
from nanogit.errors import NanogitError

console = Console()


def commit_cmd(
    message: str = typer.Option(
        "fix",
        "--message",
        "-m",
        help="Commit message.",
    ),
    filename: str = typer.Option(
        "file.txt",
        "--name",
        "-n",
        help="Name of the file entry in the commit's tree.",
    ),
    root: Path = RootOption,
    branch: str = BranchOption,
) -> None:
    """Read file content from stdin and commit it."""
    repo = open_repository(root, branch)
    data = typer.get_binary_stream("stdin").read()
    try:
        commit = repo.commit_file(filename, data, message)
    except NanogitError as exc:
        raise fail(exc) from exc
    console.print(commit.to_hex(), highlight=False)
