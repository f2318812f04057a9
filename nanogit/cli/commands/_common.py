"""Shared option handling for the nanogit commands."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from nanogit.config import NanogitConfig
from nanogit.core.repository import Repository
from nanogit.errors import NanogitError

err_console = Console(stderr=True)

RootOption = typer.Option(
    None,
    "--root",
    "-R",
    help="Repository storage root (default: NANOGIT_ROOT or .git).",
)
BranchOption = typer.Option(
    None,
    "--branch",
    "-b",
    help="Branch HEAD points at (default: NANOGIT_BRANCH or master).",
)


def open_repository(root: Path | None, branch: str | None) -> Repository:
    """Build a Repository from config, with command-line overrides applied."""
    overrides: dict[str, object] = {}
    if root is not None:
        overrides["root"] = root
    if branch is not None:
        overrides["branch"] = branch
    return Repository.from_config(NanogitConfig(**overrides))


def fail(exc: NanogitError) -> typer.Exit:
    """Report a domain error and return the exit to raise."""
    err_console.print(f"[bold red]error:[/bold red] {exc}", markup=True, highlight=False)
    return typer.Exit(code=1)
