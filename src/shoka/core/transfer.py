# ABOUTME: JSON and CSV serialization of catalog entries for export and import.
# ABOUTME: Flat field mapping of BookMetadata plus location and bookkeeping timestamps.

import csv
import io
import json
from dataclasses import dataclass, fields
from datetime import date
from typing import Any

from shoka.db.mapping import CatalogEntry
from shoka.metadata.types import BookMetadata

EXPORT_FORMATS = ("json", "csv")

CSV_HEADERS = [
    "Title",
    "Author",
    "ISBN",
    "Publisher",
    "Publish Date",
    "Pages",
    "Category",
    "Description",
    "Location",
    "Added",
    "Updated",
]

# Column order of the metadata fields in CSV rows; Location follows them.
_CSV_FIELDS = [
    "title",
    "author",
    "isbn",
    "publisher",
    "publish_date",
    "pages",
    "category",
    "description",
]
_CSV_LOCATION_INDEX = len(_CSV_FIELDS)

_BOM = "\ufeff"

# camelCase keys written by browser-app backups.
_JSON_KEY_ALIASES = {"publishDate": "publish_date", "imageUrl": "image_url"}

_RECORD_FIELDS = frozenset(f.name for f in fields(BookMetadata)) | {"location"}


class TransferError(Exception):
    """Raised when an import file cannot be read as a list of books."""


@dataclass
class ImportedBook:
    """A book read from an import file, not yet stored in the catalog."""

    metadata: BookMetadata
    location: str | None = None


def _pages(value: Any) -> int | None:
    if value in (None, ""):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _date_only(timestamp: str | None) -> str:
    return timestamp[:10] if timestamp else ""


def entry_to_record(entry: CatalogEntry) -> dict[str, Any]:
    """Flatten a CatalogEntry into the JSON export record shape."""
    record: dict[str, Any] = {"id": entry.id}
    record.update(entry.metadata.to_dict())
    record["location"] = entry.location
    record["added_at"] = entry.added_at
    record["updated_at"] = entry.updated_at
    return record


def export_json(entries: list[CatalogEntry]) -> str:
    """Serialize entries as a pretty-printed JSON array, keeping non-ASCII text."""
    return json.dumps([entry_to_record(e) for e in entries], indent=2, ensure_ascii=False)


def export_csv(entries: list[CatalogEntry]) -> str:
    """Serialize entries as CSV with a header row.

    The output starts with a UTF-8 byte order mark so spreadsheet
    applications detect the encoding of Japanese titles correctly.

    Raises:
        TransferError: If there is nothing to export.
    """
    if not entries:
        raise TransferError("no books to export")

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for entry in entries:
        meta = entry.metadata.to_dict()
        row = ["" if meta[name] is None else meta[name] for name in _CSV_FIELDS]
        row += [entry.location, _date_only(entry.added_at), _date_only(entry.updated_at)]
        writer.writerow(row)
    return _BOM + buffer.getvalue()


def export_books(entries: list[CatalogEntry], fmt: str = "json") -> str:
    """Serialize entries in the named format ("json" or "csv")."""
    if fmt == "json":
        return export_json(entries)
    if fmt == "csv":
        return export_csv(entries)
    raise ValueError(f"Unsupported format: {fmt}")


def default_export_name(fmt: str, today: date | None = None) -> str:
    """File name for an export made today, e.g. ``books_export_2024-05-01.csv``."""
    day = today or date.today()
    return f"books_export_{day.isoformat()}.{fmt}"


def _normalize_record(item: dict[str, Any]) -> dict[str, Any]:
    record = dict(item)
    for alias, name in _JSON_KEY_ALIASES.items():
        if alias in record and record.get(name) is None:
            record[name] = record[alias]
    return record


def import_json(text: str) -> list[ImportedBook]:
    """Read books from a JSON array of records.

    Only ``title`` is required. Ids and timestamps in the file are ignored;
    the catalog assigns fresh ones on insert. The camelCase ``publishDate``
    and ``imageUrl`` keys of older backups are read as their snake_case
    fields when those are absent.

    Raises:
        TransferError: On invalid JSON, a non-array document, or an item
            without a title or with a list or object as a field value
            (items are numbered from 1).
    """
    try:
        data = json.loads(text.lstrip(_BOM))
    except json.JSONDecodeError as exc:
        raise TransferError(f"invalid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise TransferError("invalid JSON format: expected an array of books")

    books = []
    for index, item in enumerate(data, start=1):
        if not isinstance(item, dict) or not item.get("title"):
            raise TransferError(f"item {index}: title is required")
        item = _normalize_record(item)
        nested = sorted(k for k in _RECORD_FIELDS if isinstance(item.get(k), (dict, list)))
        if nested:
            raise TransferError(f"item {index}: {', '.join(nested)} must be plain values")
        metadata = BookMetadata.from_dict(item)
        metadata.pages = _pages(item.get("pages"))
        books.append(ImportedBook(metadata=metadata, location=item.get("location") or None))
    return books


def import_csv(text: str) -> list[ImportedBook]:
    """Read books from CSV text laid out like ``export_csv`` output.

    The first row is a header and is skipped; blank rows are ignored. The
    Location column is optional so older exports without it still import.

    Raises:
        TransferError: If there are no data rows, or a row has no title
            (reported by its line number in the file).
    """
    reader = csv.reader(io.StringIO(text.lstrip(_BOM)))
    rows = [(reader.line_num, row) for row in reader if any(cell.strip() for cell in row)]
    if len(rows) < 2:
        raise TransferError("CSV file contains no data rows")

    books = []
    for line_num, row in rows[1:]:
        if not row[0].strip():
            raise TransferError(f"line {line_num}: title is required")

        values: dict[str, Any] = {
            name: (row[i] if i < len(row) and row[i] != "" else None)
            for i, name in enumerate(_CSV_FIELDS)
        }
        values["pages"] = _pages(values["pages"])
        location = row[_CSV_LOCATION_INDEX] if len(row) > _CSV_LOCATION_INDEX else ""
        books.append(
            ImportedBook(metadata=BookMetadata(**values), location=location.strip() or None)
        )
    return books


def import_books(text: str, fmt: str) -> list[ImportedBook]:
    """Read books from text in the named format ("json" or "csv")."""
    if fmt == "json":
        return import_json(text)
    if fmt == "csv":
        return import_csv(text)
    raise ValueError(f"Unsupported format: {fmt}")
