# ABOUTME: Public API for the Shoka catalog database layer.
# ABOUTME: Exports connection management, catalog operations, and data types.

from shoka.db.catalog import BookCatalog, BookNotFoundError
from shoka.db.connection import DEFAULT_DB_PATH, open_catalog
from shoka.db.mapping import CatalogEntry

__all__ = [
    "DEFAULT_DB_PATH",
    "BookCatalog",
    "BookNotFoundError",
    "CatalogEntry",
    "open_catalog",
]
