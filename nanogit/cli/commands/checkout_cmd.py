"""``nanogit checkout PREFIX`` — write a commit's file contents to stdout."""

from __future__ import annotations

from pathlib import Path

import typer

from nanogit.cli.commands._common import BranchOption, RootOption, fail, open_repository
from nanogit.errors import NanogitError


def checkout_cmd(
    prefix: str = typer.Argument(
        ...,
        help="Leading hex characters of the commit hash.",
    ),
    root: Path = RootOption,
    branch: str = BranchOption,
) -> None:
    """Print the content of every file in the first matching commit."""
    repo = open_repository(root, branch)
    try:
        files = repo.checkout(prefix)
    except NanogitError as exc:
        raise fail(exc) from exc

    out = typer.get_binary_stream("stdout")
    for checkout_file in files:
        out.write(checkout_file.content)
        out.write(b"\n")
    out.flush()
