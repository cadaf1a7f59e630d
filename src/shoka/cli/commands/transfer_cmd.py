# ABOUTME: The `shoka export` and `shoka import` commands for JSON/CSV backups.
# ABOUTME: Export writes the whole catalog; import adds books from a file with fresh ids.

from pathlib import Path

import click
from rich.console import Console

from shoka.cli.options import db_option, open_book_catalog
from shoka.core.importer import DEFAULT_IMPORT_LOCATION, save_imported
from shoka.core.transfer import (
    EXPORT_FORMATS,
    TransferError,
    default_export_name,
    export_books,
    import_books,
)

console = Console()


@click.command("export")
@db_option
@click.option(
    "-f", "--format", "fmt",
    type=click.Choice(EXPORT_FORMATS),
    default="json",
    show_default=True,
    help="Export file format.",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
    default=None,
    help="Output file, or - for stdout (default: books_export_<date>.<format>).",
)
def export(db_path: Path | None, fmt: str, output: Path | None) -> None:
    """Export the whole catalog as JSON or CSV."""
    with open_book_catalog(db_path) as catalog:
        entries = catalog.list_all()

    try:
        payload = export_books(entries, fmt)
    except TransferError as exc:
        console.print(f"[yellow]{exc}[/yellow]")
        raise SystemExit(1) from exc

    if output is not None and str(output) == "-":
        click.echo(payload)
        return

    target = output or Path(default_export_name(fmt))
    target.write_text(payload, encoding="utf-8")
    console.print(f"Exported [bold]{len(entries)}[/bold] book(s) to {target}")


@click.command("import")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@db_option
@click.option(
    "-f", "--format", "fmt",
    type=click.Choice(EXPORT_FORMATS),
    default=None,
    help="File format (default: from the file extension).",
)
@click.option(
    "-l", "--location",
    default=DEFAULT_IMPORT_LOCATION,
    show_default=True,
    help="Location for books that have none in the file.",
)
def import_command(path: Path, db_path: Path | None, fmt: str | None, location: str) -> None:
    """Import books from a JSON or CSV file."""
    fmt = fmt or path.suffix.lower().lstrip(".")
    if fmt not in EXPORT_FORMATS:
        console.print(f"[red]Cannot tell the format of {path.name}; pass --format.[/red]")
        raise SystemExit(1)

    try:
        books = import_books(path.read_text(encoding="utf-8"), fmt)
    except TransferError as exc:
        console.print(f"[red]Import failed:[/red] {exc}")
        raise SystemExit(1) from exc

    with open_book_catalog(db_path) as catalog:
        result = save_imported(books, catalog, default_location=location)

    parts = [f"[green]{result.added} added[/green]"]
    if result.errors:
        parts.append(f"[red]{result.errors} error(s)[/red]")
    console.print(", ".join(parts))

    for title, msg in result.error_details:
        console.print(f"  [dim]{title}:[/dim] {msg}")
