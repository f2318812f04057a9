"""Main Typer application — imports and registers all CLI commands.

Entry point: ``nanogit`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import typer

from nanogit.cli.commands.cat_file import cat_file_cmd
from nanogit.cli.commands.checkout_cmd import checkout_cmd
from nanogit.cli.commands.commit_cmd import commit_cmd
from nanogit.cli.commands.init_cmd import init_cmd
from nanogit.cli.commands.log_cmd import log_cmd
from nanogit.config import NanogitConfig
from nanogit.logging_setup import configure_logging

app = typer.Typer(
    name="nanogit",
    help="nanogit: a minimal content-addressed object store.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Logging level (default: NANOGIT_LOG_LEVEL or INFO).",
    ),
) -> None:
    """nanogit: a minimal content-addressed object store."""
    configure_logging(log_level or NanogitConfig().log_level)


# Register subcommands
app.command(name="init", help="Create an empty repository.")(init_cmd)
app.command(name="log", help="List commits, newest first.")(log_cmd)
app.command(name="commit", help="Commit stdin as a single file.")(commit_cmd)
app.command(name="checkout", help="Print the files of a commit.")(checkout_cmd)
app.command(name="cat-file", help="Inspect a stored object.")(cat_file_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
