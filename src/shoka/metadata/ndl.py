# ABOUTME: National Diet Library (NDL Search) provider, the last-resort ISBN catalog.
# ABOUTME: Reads the OpenSearch RSS feed and maps its first item.

import logging
import re
import xml.etree.ElementTree as ET

from shoka.metadata.http import HttpClient, MetadataFetchError
from shoka.metadata.parsers import parse_ndl_response
from shoka.metadata.types import BookMetadata

logger = logging.getLogger(__name__)

_NDL_OPENSEARCH_URL = "https://iss.ndl.go.jp/api/opensearch"


class NDLProvider:
    """Metadata provider backed by NDL Search's OpenSearch endpoint."""

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> str:
        return "ndl"

    def lookup(self, code: str) -> BookMetadata | None:
        """Look up a book by ISBN in NDL Search.

        Returns None when the feed has no items, the request fails, or the
        response is not well-formed XML.
        """
        isbn = re.sub(r"-", "", code)
        try:
            xml_text = self._http.get_text(_NDL_OPENSEARCH_URL, params={"isbn": isbn})
        except MetadataFetchError as exc:
            logger.warning("NDL lookup failed for %s: %s", code, exc)
            return None

        try:
            return parse_ndl_response(xml_text, isbn)
        except ET.ParseError as exc:
            logger.warning("NDL returned malformed XML for %s: %s", code, exc)
            return None
