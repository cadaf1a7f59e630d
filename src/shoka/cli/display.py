# ABOUTME: Rich rendering helpers shared by Shoka CLI commands.
# ABOUTME: Field tables for single books and list tables for catalog entries.

from rich.table import Table

from shoka.db.mapping import CatalogEntry
from shoka.metadata.types import BookMetadata

SHORT_ID_LENGTH = 8


def short_id(book_id: str) -> str:
    return book_id[:SHORT_ID_LENGTH]


def metadata_table(meta: BookMetadata) -> Table:
    """Two-column field/value table for one book's metadata. Empty fields are omitted."""
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("Title", meta.title or "[dim]untitled[/dim]")
    table.add_row("Author", meta.author or "[dim]unknown[/dim]")
    rows = [
        ("Publisher", meta.publisher),
        ("Published", meta.publish_date),
        ("Pages", str(meta.pages) if meta.pages else None),
        ("Category", meta.category),
        ("ISBN", meta.isbn),
        ("Language", meta.language),
        ("Description", meta.description),
        ("Image", meta.image_url),
        ("Source", meta.source),
    ]
    for label, value in rows:
        if value:
            table.add_row(label, value)
    return table


def entry_table(entry: CatalogEntry) -> Table:
    """Field table for a cataloged book: metadata plus id, location and timestamps."""
    table = metadata_table(entry.metadata)
    table.add_row("ID", entry.id)
    table.add_row("Location", entry.location)
    table.add_row("Added", entry.added_at)
    if entry.updated_at:
        table.add_row("Updated", entry.updated_at)
    return table


def entries_table(entries: list[CatalogEntry]) -> Table:
    """One row per book with short id, title, author, location and ISBN."""
    table = Table()
    table.add_column("ID", style="dim", width=SHORT_ID_LENGTH, no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Location", style="cyan")
    table.add_column("ISBN", no_wrap=True)

    for entry in entries:
        table.add_row(
            short_id(entry.id),
            entry.metadata.title,
            entry.metadata.author or "[dim]unknown[/dim]",
            entry.location,
            entry.metadata.isbn or "",
        )
    return table
