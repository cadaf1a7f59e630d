# ABOUTME: Converts between BookMetadata and SQLite rows for the books table.
# ABOUTME: CatalogEntry pairs metadata with its id, storage location, and timestamps.

from dataclasses import dataclass, fields
from typing import Any

from shoka.metadata.types import BookMetadata

METADATA_COLUMNS: tuple[str, ...] = tuple(f.name for f in fields(BookMetadata))


@dataclass
class CatalogEntry:
    """A cataloged book: BookMetadata plus where it is shelved and bookkeeping."""

    id: str
    metadata: BookMetadata
    location: str
    added_at: str
    updated_at: str | None = None


def metadata_to_row(metadata: BookMetadata, book_id: str, location: str) -> dict[str, Any]:
    """Convert a BookMetadata instance to a dict suitable for INSERT."""
    row = {"id": book_id}
    row.update(metadata.to_dict())
    row["location"] = location
    return row


def row_to_entry(row: Any) -> CatalogEntry:
    """Convert a full database row to a CatalogEntry."""
    return CatalogEntry(
        id=row["id"],
        metadata=BookMetadata(**{col: row[col] for col in METADATA_COLUMNS}),
        location=row["location"],
        added_at=row["added_at"],
        updated_at=row["updated_at"],
    )
