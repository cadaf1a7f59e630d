# ABOUTME: Core metadata data structure returned by lookup providers and stored in the catalog.
# ABOUTME: BookMetadata is the interchange format between lookup, catalog, and export.

from dataclasses import asdict, dataclass, fields
from typing import Any


@dataclass
class BookMetadata:
    """Normalized bibliographic metadata for a single book.

    Every lookup provider maps its service's response into this shape.
    All fields are optional except title, which may still be empty when a
    service returns a record without one.
    """

    title: str
    author: str | None = None
    publisher: str | None = None
    publish_date: str | None = None
    pages: int | None = None
    description: str | None = None
    category: str | None = None
    isbn: str | None = None
    image_url: str | None = None
    language: str | None = None
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Plain dict of all fields, suitable for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BookMetadata":
        """Build from a dict, ignoring keys that are not metadata fields."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def merged_with(self, overrides: dict[str, Any]) -> "BookMetadata":
        """Return a copy with the non-None values of ``overrides`` applied."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return BookMetadata.from_dict(data)
