# ABOUTME: Unit tests for saving imported books into the catalog.
# ABOUTME: Covers default locations and per-book rejection without aborting the import.

from shoka.core.importer import DEFAULT_IMPORT_LOCATION, save_imported
from shoka.core.transfer import ImportedBook
from shoka.db.catalog import BookCatalog
from shoka.metadata.types import BookMetadata


class TestSaveImported:
    """Tests for save_imported."""

    def test_adds_books_with_fresh_ids(self, catalog: BookCatalog) -> None:
        books = [
            ImportedBook(BookMetadata(title="Dune"), location="Study"),
            ImportedBook(BookMetadata(title="Emma")),
        ]
        result = save_imported(books, catalog)

        assert result.added == 2
        assert result.errors == 0
        assert catalog.list_locations() == [("Study", 1), (DEFAULT_IMPORT_LOCATION, 1)]

    def test_custom_default_location(self, catalog: BookCatalog) -> None:
        save_imported([ImportedBook(BookMetadata(title="Dune"))], catalog, default_location="Box 3")
        assert catalog.list_all()[0].location == "Box 3"

    def test_rejected_book_is_reported(self, catalog: BookCatalog) -> None:
        books = [
            ImportedBook(BookMetadata(title="Bad", isbn="not-an-isbn")),
            ImportedBook(BookMetadata(title="Good")),
        ]
        result = save_imported(books, catalog)

        assert result.added == 1
        assert result.errors == 1
        assert result.error_details[0][0] == "Bad"
        assert "invalid ISBN" in result.error_details[0][1]
