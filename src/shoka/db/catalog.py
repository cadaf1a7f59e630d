# ABOUTME: CRUD operations for the Shoka book catalog.
# ABOUTME: Add, query, filter, search, update, and delete books in the SQLite database.

import re
import sqlite3
import uuid

from shoka.db.mapping import METADATA_COLUMNS, CatalogEntry, metadata_to_row, row_to_entry
from shoka.metadata.types import BookMetadata

_ISBN_FIELD_RE = re.compile(r"[\d-]{10,13}", re.ASCII)

SORT_ORDERS: dict[str, str] = {
    "added": "added_at DESC, rowid DESC",
    "title": "title COLLATE NOCASE, rowid",
    "author": "author COLLATE NOCASE, title COLLATE NOCASE",
    "location": "location, title COLLATE NOCASE",
}

_UPDATABLE_COLUMNS = frozenset(METADATA_COLUMNS) | {"location"}


class BookNotFoundError(ValueError):
    """Raised when an operation targets a book id that is not in the catalog."""


def _like_pattern(text: str) -> str:
    """Build a LIKE pattern matching ``text`` anywhere, escaping wildcards."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _require_text(name: str, value: object) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} is required")


def _check_isbn(isbn: object) -> None:
    if isbn and not _ISBN_FIELD_RE.fullmatch(str(isbn)):
        raise ValueError(f"invalid ISBN: {isbn!r}")


class BookCatalog:
    """Wraps a sqlite3 connection and provides typed CRUD for the books table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def add_book(self, metadata: BookMetadata, location: str) -> CatalogEntry:
        """Add a book to the catalog under a fresh opaque id.

        Args:
            metadata: The book's metadata; title must not be blank.
            location: Where the book is shelved; must not be blank.

        Returns:
            The stored CatalogEntry, including its id and added_at.

        Raises:
            ValueError: If title or location is blank, or the ISBN field is
                not 10-13 digits and hyphens.
        """
        _require_text("title", metadata.title)
        _require_text("location", location)
        _check_isbn(metadata.isbn)

        book_id = str(uuid.uuid4())
        row = metadata_to_row(metadata, book_id, location.strip())
        columns = ", ".join(row.keys())
        placeholders = ", ".join("?" for _ in row)

        self._conn.execute(
            f"INSERT INTO books ({columns}) VALUES ({placeholders})",
            list(row.values()),
        )
        self._conn.commit()

        entry = self.get_by_id(book_id)
        assert entry is not None
        return entry

    def get_by_id(self, book_id: str) -> CatalogEntry | None:
        """Retrieve a book by its id."""
        cursor = self._conn.execute("SELECT * FROM books WHERE id = ?", (book_id,))
        row = cursor.fetchone()
        return row_to_entry(row) if row else None

    def find_by_id_prefix(self, prefix: str) -> CatalogEntry | None:
        """Retrieve a book by its full id or a unique leading part of it.

        Raises:
            ValueError: If the prefix matches more than one book.
        """
        entry = self.get_by_id(prefix)
        if entry is not None or not prefix:
            return entry

        cursor = self._conn.execute(
            "SELECT * FROM books WHERE substr(id, 1, ?) = ? LIMIT 2",
            (len(prefix), prefix),
        )
        rows = cursor.fetchall()
        if len(rows) > 1:
            raise ValueError(f"Id prefix {prefix!r} matches more than one book")
        return row_to_entry(rows[0]) if rows else None

    def get_by_isbn(self, isbn: str) -> CatalogEntry | None:
        """Retrieve the most recently added book with this ISBN."""
        cursor = self._conn.execute(
            "SELECT * FROM books WHERE isbn = ? ORDER BY added_at DESC, rowid DESC LIMIT 1",
            (isbn,),
        )
        row = cursor.fetchone()
        return row_to_entry(row) if row else None

    def list_all(
        self,
        *,
        sort: str = "added",
        location: str | None = None,
        category: str | None = None,
    ) -> list[CatalogEntry]:
        """Return books, optionally filtered by exact location and category substring.

        Sort keys: ``added`` (newest first), ``title``, ``author``,
        ``location`` (then title).

        Raises:
            ValueError: If ``sort`` is not a known sort key.
        """
        if sort not in SORT_ORDERS:
            raise ValueError(f"unknown sort key {sort!r}; expected one of {sorted(SORT_ORDERS)}")

        clauses: list[str] = []
        params: list[str] = []
        if location:
            clauses.append("location = ?")
            params.append(location)
        if category:
            clauses.append("category LIKE ? ESCAPE '\\'")
            params.append(_like_pattern(category))

        where = f"WHERE {' AND '.join(clauses)} " if clauses else ""
        cursor = self._conn.execute(
            f"SELECT * FROM books {where}ORDER BY {SORT_ORDERS[sort]}",
            params,
        )
        return [row_to_entry(row) for row in cursor.fetchall()]

    def search(self, query: str) -> list[CatalogEntry]:
        """Case-insensitive substring search over title, author, and ISBN.

        Results are ordered newest first. A blank query returns every book.
        """
        if not query.strip():
            return self.list_all()

        pattern = _like_pattern(query.strip())
        cursor = self._conn.execute(
            "SELECT * FROM books "
            "WHERE title LIKE ? ESCAPE '\\' "
            "OR author LIKE ? ESCAPE '\\' "
            "OR isbn LIKE ? ESCAPE '\\' "
            f"ORDER BY {SORT_ORDERS['added']}",
            (pattern, pattern, pattern),
        )
        return [row_to_entry(row) for row in cursor.fetchall()]

    def update_book(self, book_id: str, **fields: str | int | None) -> CatalogEntry:
        """Update one or more fields on a cataloged book and stamp updated_at.

        Accepts keyword arguments naming BookMetadata fields or ``location``.

        Returns:
            The updated CatalogEntry.

        Raises:
            BookNotFoundError: If the book_id does not exist.
            ValueError: On unknown field names, or a blank title/location.
        """
        unknown = set(fields) - _UPDATABLE_COLUMNS
        if unknown:
            raise ValueError(f"cannot update unknown field(s): {', '.join(sorted(unknown))}")

        if "title" in fields:
            _require_text("title", fields["title"])
        if "location" in fields:
            _require_text("location", fields["location"])
        _check_isbn(fields.get("isbn"))

        set_clause = ", ".join(f"{k} = ?" for k in fields)
        if set_clause:
            set_clause += ", "
        set_clause += "updated_at = strftime('%Y-%m-%dT%H:%M:%SZ', 'now')"
        values = [*fields.values(), book_id]

        cursor = self._conn.execute(f"UPDATE books SET {set_clause} WHERE id = ?", values)
        self._conn.commit()

        if cursor.rowcount == 0:
            raise BookNotFoundError(f"Book with id {book_id} not found")

        entry = self.get_by_id(book_id)
        assert entry is not None
        return entry

    def delete_book(self, book_id: str) -> None:
        """Delete a book from the catalog.

        Raises:
            BookNotFoundError: If the book_id does not exist.
        """
        cursor = self._conn.execute("DELETE FROM books WHERE id = ?", (book_id,))
        self._conn.commit()

        if cursor.rowcount == 0:
            raise BookNotFoundError(f"Book with id {book_id} not found")

    def list_locations(self) -> list[tuple[str, int]]:
        """List storage locations with their book counts, alphabetically sorted."""
        cursor = self._conn.execute(
            "SELECT location, COUNT(*) FROM books GROUP BY location ORDER BY location"
        )
        return [(row[0], row[1]) for row in cursor.fetchall()]

    def list_categories(self) -> list[str]:
        """Distinct categories across all books, splitting joined ", " lists."""
        cursor = self._conn.execute(
            "SELECT DISTINCT category FROM books WHERE category IS NOT NULL AND category != ''"
        )
        categories: set[str] = set()
        for (value,) in cursor.fetchall():
            categories.update(part.strip() for part in value.split(",") if part.strip())
        return sorted(categories)
