"""``nanogit cat-file HASH`` — inspect a stored object."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from nanogit.cli.commands._common import BranchOption, RootOption, fail, open_repository
from nanogit.core import codec
from nanogit.errors import NanogitError
from nanogit.models.hashes import ObjectHash
from nanogit.models.objects import ObjectType

console = Console()


def cat_file_cmd(
    object_hash: str = typer.Argument(
        ...,
        help="Full 40-character object hash.",
    ),
    root: Path = RootOption,
    branch: str = BranchOption,
) -> None:
    """Show an object's type and decoded content."""
    repo = open_repository(root, branch)
    try:
        hash = ObjectHash.from_hex(object_hash.strip())
        object_type, payload = repo.objects.read_object(hash)
        console.print(f"[bold]{object_type.value}[/bold] {len(payload)} bytes", highlight=False)

        if object_type is ObjectType.TREE:
            table = Table(title=f"tree {hash.short()}")
            table.add_column("Mode", style="green")
            table.add_column("Name", style="cyan")
            table.add_column("Blob")
            for entry in codec.decode_tree(payload):
                table.add_row(entry.mode, entry.name, entry.hash.to_hex())
            console.print(table)
        elif object_type is ObjectType.COMMIT:
            console.print(payload.decode("utf-8", errors="replace"), markup=False, highlight=False)
        else:
            out = typer.get_binary_stream("stdout")
            out.write(payload)
            out.flush()
    except NanogitError as exc:
        raise fail(exc) from exc
