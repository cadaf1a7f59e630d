# ABOUTME: openBD metadata provider for Japanese publications.
# ABOUTME: Used first for JAN-shaped codes; openBD also answers for plain ISBNs.

import logging
import re

from shoka.metadata.http import HttpClient, MetadataFetchError
from shoka.metadata.parsers import parse_openbd_response
from shoka.metadata.types import BookMetadata

logger = logging.getLogger(__name__)

_OPENBD_URL = "https://api.openbd.jp/v1/get"


class OpenBDProvider:
    """Metadata provider backed by openBD, the Japanese book distribution database."""

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> str:
        return "openbd"

    def lookup(self, code: str) -> BookMetadata | None:
        clean = re.sub(r"-", "", code)
        try:
            data = self._http.get(_OPENBD_URL, params={"isbn": clean})
        except MetadataFetchError as exc:
            logger.warning("openBD lookup failed for %s: %s", code, exc)
            return None

        metadata = parse_openbd_response(data, clean)
        if metadata is None:
            logger.debug("openBD has no record for %s", clean)
        return metadata
