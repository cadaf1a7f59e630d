# ABOUTME: The `shoka edit` and `shoka rm` commands for changing cataloged books.
# ABOUTME: Edit updates selected fields and stamps updated_at; rm deletes after confirmation.

from pathlib import Path
from typing import Any

import click
from rich.console import Console

from shoka.cli.display import entry_table
from shoka.cli.options import (
    db_option,
    metadata_options,
    open_book_catalog,
    pop_metadata_fields,
    resolve_entry,
)

console = Console()


@click.command("edit")
@click.argument("book_id")
@click.option("-l", "--location", default=None, help="Move the book to this location.")
@metadata_options
@db_option
def edit(book_id: str, location: str | None, db_path: Path | None, **kwargs: Any) -> None:
    """Update fields of a cataloged book."""
    fields = pop_metadata_fields(kwargs)
    if location is not None:
        fields["location"] = location

    if not fields:
        console.print("[yellow]Nothing to update; pass at least one field option.[/yellow]")
        raise SystemExit(1)

    with open_book_catalog(db_path) as catalog:
        entry = resolve_entry(catalog, book_id, console)
        try:
            updated = catalog.update_book(entry.id, **fields)
        except ValueError as exc:
            console.print(f"[red]{exc}[/red]")
            raise SystemExit(1) from exc

    console.print(entry_table(updated))


@click.command("rm")
@click.argument("book_id")
@click.option("-y", "--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
@db_option
def rm(book_id: str, yes: bool, db_path: Path | None) -> None:
    """Remove a book from the catalog."""
    with open_book_catalog(db_path) as catalog:
        entry = resolve_entry(catalog, book_id, console)
        if not yes and not click.confirm(f"Remove '{entry.metadata.title}'?", default=False):
            console.print("Cancelled.")
            return
        catalog.delete_book(entry.id)

    console.print(f"Removed [bold]{entry.metadata.title}[/bold] from {entry.location}.")
