# ABOUTME: The `shoka search` command for searching the catalog.
# ABOUTME: Case-insensitive substring match on title, author, and ISBN.

from pathlib import Path

import click
from rich.console import Console

from shoka.cli.display import entries_table
from shoka.cli.options import db_option, open_book_catalog

console = Console()


@click.command("search")
@click.argument("query")
@db_option
def search(query: str, db_path: Path | None) -> None:
    """Search the catalog by title, author, or ISBN."""
    with open_book_catalog(db_path) as catalog:
        results = catalog.search(query)

    if not results:
        console.print("[yellow]No results found.[/yellow]")
        return

    console.print(entries_table(results))
    console.print(f"\n[dim]{len(results)} result(s)[/dim]")
