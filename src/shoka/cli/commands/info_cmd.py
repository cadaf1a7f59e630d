# ABOUTME: The `shoka info` command for displaying one cataloged book.
# ABOUTME: Shows all metadata fields, location, and timestamps for a book id or id prefix.

from pathlib import Path

import click
from rich.console import Console

from shoka.cli.display import entry_table
from shoka.cli.options import db_option, open_book_catalog, resolve_entry

console = Console()


@click.command("info")
@click.argument("book_id")
@db_option
def info(book_id: str, db_path: Path | None) -> None:
    """Show detailed metadata for a book by id (or a unique id prefix)."""
    with open_book_catalog(db_path) as catalog:
        entry = resolve_entry(catalog, book_id, console)

    console.print(entry_table(entry))
