# ABOUTME: Stores books read from an import file into the catalog.
# ABOUTME: Fills in a default location and records rows the catalog rejects.

from dataclasses import dataclass, field

from shoka.core.transfer import ImportedBook
from shoka.db.catalog import BookCatalog

DEFAULT_IMPORT_LOCATION = "unsorted"


@dataclass
class ImportResult:
    """Summary of an import operation."""

    added: int = 0
    errors: int = 0
    error_details: list[tuple[str, str]] = field(default_factory=list)


def save_imported(
    books: list[ImportedBook],
    catalog: BookCatalog,
    *,
    default_location: str = DEFAULT_IMPORT_LOCATION,
) -> ImportResult:
    """Add imported books to the catalog.

    Each book gets a fresh id and added_at. Books without a location are
    shelved under ``default_location``. A book the catalog rejects (for
    example an invalid ISBN field) is counted as an error and the rest of
    the import continues.

    Returns:
        ImportResult with counts of added and rejected books.
    """
    result = ImportResult()

    for book in books:
        try:
            catalog.add_book(book.metadata, book.location or default_location)
            result.added += 1
        except ValueError as exc:
            result.errors += 1
            result.error_details.append((book.metadata.title, str(exc)))

    return result
