"""nanogit CLI — Typer-based command-line interface.

A thin collaborator over ``Repository``: ``init``, ``log``, ``commit``,
``checkout`` and ``cat-file``. Status output uses Rich; file contents are
written to stdout as raw bytes.
"""
