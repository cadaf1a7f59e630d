# ABOUTME: Google Books metadata provider, the primary ISBN lookup source.
# ABOUTME: Queries the volumes endpoint with an isbn: search and maps the first volume.

import logging
import re

from shoka.metadata.http import HttpClient, MetadataFetchError
from shoka.metadata.parsers import parse_google_books_response
from shoka.metadata.types import BookMetadata

logger = logging.getLogger(__name__)

_GOOGLE_BOOKS_URL = "https://www.googleapis.com/books/v1/volumes"


class GoogleBooksProvider:
    """Metadata provider backed by the Google Books API.

    Uses dependency-injected HttpClient for testability.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> str:
        return "googlebooks"

    def lookup(self, code: str) -> BookMetadata | None:
        """Look up a book by ISBN. Returns None when not found or on failure."""
        isbn = re.sub(r"-", "", code)
        try:
            data = self._http.get(_GOOGLE_BOOKS_URL, params={"q": f"isbn:{isbn}"})
        except MetadataFetchError as exc:
            logger.warning("Google Books lookup failed for %s: %s", code, exc)
            return None
        return parse_google_books_response(data, isbn)
