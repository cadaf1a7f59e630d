# ABOUTME: The `shoka ls`, `locations`, and `categories` commands for browsing the catalog.
# ABOUTME: Lists books with location/category filters and sort orders, and summarizes shelves.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from shoka.cli.display import entries_table
from shoka.cli.options import db_option, open_book_catalog
from shoka.db.catalog import SORT_ORDERS

console = Console()


@click.command("ls")
@db_option
@click.option("--location", "location_filter", default=None, help="Only books at this location.")
@click.option(
    "--category",
    "category_filter",
    default=None,
    help="Only books whose category contains this text.",
)
@click.option(
    "--sort",
    "sort_key",
    type=click.Choice(sorted(SORT_ORDERS)),
    default="added",
    show_default=True,
    help="Sort order (added = newest first).",
)
def ls(
    db_path: Path | None,
    location_filter: str | None,
    category_filter: str | None,
    sort_key: str,
) -> None:
    """List books in the catalog."""
    with open_book_catalog(db_path) as catalog:
        entries = catalog.list_all(
            sort=sort_key, location=location_filter, category=category_filter
        )

    if not entries:
        console.print("[yellow]No books in the catalog.[/yellow]")
        return

    console.print(entries_table(entries))
    console.print(f"\n[dim]{len(entries)} book(s)[/dim]")


@click.command("locations")
@db_option
def locations(db_path: Path | None) -> None:
    """List storage locations with book counts."""
    with open_book_catalog(db_path) as catalog:
        rows = catalog.list_locations()

    if not rows:
        console.print("[yellow]No books in the catalog.[/yellow]")
        return

    table = Table()
    table.add_column("Location", style="cyan")
    table.add_column("Books", style="dim", justify="right")
    for name, count in rows:
        table.add_row(name, str(count))
    console.print(table)


@click.command("categories")
@db_option
def categories(db_path: Path | None) -> None:
    """List the distinct categories used in the catalog."""
    with open_book_catalog(db_path) as catalog:
        names = catalog.list_categories()

    if not names:
        console.print("[yellow]No categories in the catalog.[/yellow]")
        return

    for name in names:
        console.print(name)
