# ABOUTME: Shared Click options and helpers for Shoka CLI commands.
# ABOUTME: Provides the --db option, metadata field options, and a catalog context manager.

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import click
from rich.console import Console

from shoka.db.catalog import BookCatalog
from shoka.db.connection import DEFAULT_DB_PATH, open_catalog
from shoka.db.mapping import CatalogEntry

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    envvar="SHOKA_DB",
    default=None,
    help=f"Path to catalog database (default: {DEFAULT_DB_PATH}, env: SHOKA_DB)",
)

# (flag, parameter name, type, help) for every editable metadata field.
_METADATA_FIELDS: list[tuple[str, str, Any, str]] = [
    ("--title", "title", str, "Book title."),
    ("--author", "author", str, "Author(s), comma separated."),
    ("--publisher", "publisher", str, "Publisher."),
    ("--publish-date", "publish_date", str, "Publication date as printed by the source."),
    ("--pages", "pages", click.IntRange(min=1), "Page count."),
    ("--category", "category", str, "Category, comma separated."),
    ("--description", "description", str, "Description or summary."),
    ("--isbn", "isbn", str, "ISBN: 10-13 characters of digits and hyphens."),
    ("--image-url", "image_url", str, "Cover image URL."),
    ("--language", "language", str, "Language code, e.g. ja or en."),
]

METADATA_PARAM_NAMES: tuple[str, ...] = tuple(name for _, name, _, _ in _METADATA_FIELDS)


def metadata_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorate a command with one option per editable metadata field."""
    for flag, name, type_, help_text in reversed(_METADATA_FIELDS):
        func = click.option(flag, name, type=type_, default=None, help=help_text)(func)
    return func


def pop_metadata_fields(kwargs: dict[str, Any]) -> dict[str, Any]:
    """Remove metadata field options from ``kwargs``, returning only those set."""
    values = {name: kwargs.pop(name) for name in METADATA_PARAM_NAMES}
    return {name: value for name, value in values.items() if value is not None}


@contextmanager
def open_book_catalog(db_path: Path | None) -> Iterator[BookCatalog]:
    """Open the catalog database and close the connection when done."""
    conn = open_catalog(db_path or DEFAULT_DB_PATH)
    try:
        yield BookCatalog(conn)
    finally:
        conn.close()


def resolve_entry(catalog: BookCatalog, book_id: str, console: Console) -> CatalogEntry:
    """Find a book by full id or unique id prefix, exiting with status 1 if not found."""
    try:
        entry = catalog.find_by_id_prefix(book_id)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise SystemExit(1) from exc

    if entry is None:
        console.print(f"[red]Book {book_id} not found.[/red]")
        raise SystemExit(1)
    return entry
