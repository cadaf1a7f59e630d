# ABOUTME: Metadata package for book lookup providers and the metadata record type.
# ABOUTME: Exports BookMetadata, the provider protocol, and the concrete providers.

from shoka.metadata.google_books import GoogleBooksProvider
from shoka.metadata.ndl import NDLProvider
from shoka.metadata.openbd import OpenBDProvider
from shoka.metadata.provider import LookupProvider
from shoka.metadata.types import BookMetadata

__all__ = [
    "BookMetadata",
    "GoogleBooksProvider",
    "LookupProvider",
    "NDLProvider",
    "OpenBDProvider",
]
