# ABOUTME: Shared pytest fixtures for Shoka tests.
# ABOUTME: Provides temporary catalogs and sample book metadata.

from collections.abc import Iterator
from pathlib import Path

import pytest

from shoka.db.catalog import BookCatalog
from shoka.db.connection import open_catalog
from shoka.metadata.types import BookMetadata


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path for a temporary catalog database."""
    return tmp_path / "catalog.db"


@pytest.fixture
def catalog(db_path: Path) -> Iterator[BookCatalog]:
    """A BookCatalog backed by a temporary database."""
    conn = open_catalog(db_path)
    yield BookCatalog(conn)
    conn.close()


@pytest.fixture
def rose_metadata() -> BookMetadata:
    """A fully-populated BookMetadata for testing."""
    return BookMetadata(
        title="The Name of the Rose",
        author="Umberto Eco",
        publisher="Harcourt",
        publish_date="1994-09-28",
        pages=536,
        description="A mystery set in a medieval monastery.",
        category="Fiction, Mystery",
        isbn="9780156001311",
        image_url="http://books.google.com/thumb.jpg",
        language="en",
        source="googlebooks",
    )


@pytest.fixture
def readable_code_metadata() -> BookMetadata:
    return BookMetadata(
        title="リーダブルコード",
        author="Dustin Boswell",
        publisher="オライリー・ジャパン",
        isbn="9784822283940",
        category="プログラミング",
        language="ja",
        source="openBD",
    )
