# ABOUTME: Parsing functions for Google Books, openBD, and NDL Search responses.
# ABOUTME: Converts each service's payload into BookMetadata, or None when it has no record.

import xml.etree.ElementTree as ET
from typing import Any

from shoka.metadata.types import BookMetadata

_DC_NS = "http://purl.org/dc/elements/1.1/"


def _joined(values: list[Any] | None) -> str | None:
    """Join a list of strings with ", ", or None if there is nothing to join."""
    items = [str(v) for v in values or [] if v]
    return ", ".join(items) if items else None


def _int_or_none(value: Any) -> int | None:
    try:
        return int(value) if value not in (None, "") else None
    except (TypeError, ValueError):
        return None


def parse_google_books_response(data: dict[str, Any], isbn: str) -> BookMetadata | None:
    """Parse a Google Books volumes search response.

    Only the first volume is used. Authors and categories are joined with
    ", "; the thumbnail image falls back to the small thumbnail. The isbn
    recorded is the one that was searched for.
    """
    items = data.get("items") or []
    if not data.get("totalItems") or not items:
        return None

    info = items[0].get("volumeInfo", {})
    images = info.get("imageLinks") or {}
    return BookMetadata(
        title=info.get("title", ""),
        author=_joined(info.get("authors")),
        publisher=info.get("publisher"),
        publish_date=info.get("publishedDate"),
        pages=_int_or_none(info.get("pageCount")),
        description=info.get("description"),
        category=_joined(info.get("categories")),
        isbn=isbn,
        image_url=images.get("thumbnail") or images.get("smallThumbnail"),
        language=info.get("language"),
        source="googlebooks",
    )


def parse_openbd_response(data: list[Any] | None, code: str) -> BookMetadata | None:
    """Parse an openBD ``/v1/get`` response.

    openBD answers with a list holding one entry per requested code; an
    unknown code yields ``[null]``. Categories come from the ONIX subject
    headings, and the record is always tagged as Japanese.
    """
    if not data or not data[0]:
        return None

    record = data[0]
    summary = record.get("summary") or {}
    detail = (record.get("onix") or {}).get("DescriptiveDetail") or {}
    subjects = [s.get("SubjectHeadingText") for s in detail.get("Subject") or []]

    return BookMetadata(
        title=summary.get("title", ""),
        author=summary.get("author") or None,
        publisher=summary.get("publisher") or None,
        publish_date=summary.get("pubdate") or None,
        pages=_int_or_none(summary.get("pages")),
        description=summary.get("description") or None,
        category=_joined(subjects),
        isbn=summary.get("isbn") or code,
        image_url=summary.get("cover") or None,
        language="ja",
        source="openBD",
    )


def parse_ndl_response(xml_text: str, isbn: str) -> BookMetadata | None:
    """Parse an NDL Search OpenSearch (RSS 2.0) response.

    Only the first ``<item>`` is used.

    Raises:
        xml.etree.ElementTree.ParseError: If the body is not well-formed XML.
    """
    root = ET.fromstring(xml_text)
    item = root.find(".//item")
    if item is None:
        return None

    def text(tag: str) -> str | None:
        element = item.find(tag)
        if element is None or not element.text:
            return None
        return element.text.strip()

    return BookMetadata(
        title=text("title") or "",
        author=text("author"),
        publisher=text(f"{{{_DC_NS}}}publisher"),
        publish_date=text("pubDate"),
        description=text("description"),
        isbn=isbn,
        source="ndl",
    )
