# ABOUTME: The `shoka add` command for cataloging a book by barcode or by hand.
# ABOUTME: Looks up metadata when --code is given; explicit field options override it.

from pathlib import Path
from typing import Any

import click
from rich.console import Console

from shoka.cli.commands import lookup_cmd
from shoka.cli.display import entry_table, short_id
from shoka.cli.options import db_option, metadata_options, open_book_catalog, pop_metadata_fields
from shoka.codes.classify import CodeKind, classify, normalize_code
from shoka.metadata.types import BookMetadata

console = Console()


@click.command("add")
@click.option("--code", default=None, help="ISBN or JAN barcode to look up.")
@click.option("-l", "--location", required=True, help="Where the book is shelved.")
@metadata_options
@db_option
def add(code: str | None, location: str, db_path: Path | None, **kwargs: Any) -> None:
    """Add a book to the catalog.

    With --code, metadata is fetched from the lookup services first. If
    nothing is found, --title is needed to add the book by hand.
    """
    overrides = pop_metadata_fields(kwargs)
    metadata: BookMetadata | None = None

    if code:
        result = lookup_cmd._create_lookup_service().lookup(code)
        if result is not None:
            metadata = result.metadata
            console.print(f"Found [bold]{metadata.title}[/bold] via {result.provider}.")
        else:
            console.print(f"[yellow]No book information found for {code}.[/yellow]")
            normalized = normalize_code(code)
            if classify(normalized) is not CodeKind.UNKNOWN:
                overrides.setdefault("isbn", normalized)

    if metadata is None:
        if "title" not in overrides:
            console.print("[red]A title is required; pass --title to add the book by hand.[/red]")
            raise SystemExit(1)
        metadata = BookMetadata(title=overrides["title"])

    metadata = metadata.merged_with(overrides)

    with open_book_catalog(db_path) as catalog:
        existing = catalog.get_by_isbn(metadata.isbn) if metadata.isbn else None
        if existing is not None:
            console.print(
                f"[yellow]ISBN {metadata.isbn} is already cataloged at {existing.location} "
                f"({short_id(existing.id)}); adding another copy.[/yellow]"
            )
        try:
            entry = catalog.add_book(metadata, location)
        except ValueError as exc:
            console.print(f"[red]{exc}[/red]")
            raise SystemExit(1) from exc

    console.print(entry_table(entry))
    console.print(f"\n[green]Added to {entry.location}.[/green]")
