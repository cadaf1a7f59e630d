# ABOUTME: Executes a lookup plan against metadata providers, stopping at the first hit.
# ABOUTME: Wires the default providers (Google Books, openBD, NDL Search) to plan sources.

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from shoka.codes.classify import normalize_code
from shoka.lookup.plan import LookupAttempt, LookupSource, resolve_lookup_plan
from shoka.metadata.google_books import GoogleBooksProvider
from shoka.metadata.http import HttpClient, ShokaHttpClient
from shoka.metadata.ndl import NDLProvider
from shoka.metadata.openbd import OpenBDProvider
from shoka.metadata.provider import LookupProvider
from shoka.metadata.types import BookMetadata

logger = logging.getLogger(__name__)


@dataclass
class LookupResult:
    """Metadata found for a code, and how it was found."""

    metadata: BookMetadata
    attempt: LookupAttempt
    provider: str
    tried: list[LookupAttempt] = field(default_factory=list)


class LookupService:
    """Runs lookup plans sequentially against a provider per source.

    Attempts whose source has no registered provider are skipped. A
    provider returning None (not found or failed) moves execution on to
    the next attempt; the same attempt is never retried here.
    """

    def __init__(self, providers: Mapping[LookupSource, LookupProvider]) -> None:
        self._providers = dict(providers)

    def lookup(self, code: str) -> LookupResult | None:
        """Normalize ``code``, build its plan, and return the first result found."""
        plan = resolve_lookup_plan(normalize_code(code))
        tried: list[LookupAttempt] = []

        for attempt in plan:
            provider = self._providers.get(attempt.source)
            if provider is None:
                logger.debug("No provider for %s, skipping", attempt.source.value)
                continue

            tried.append(attempt)
            logger.debug("Trying %s for %s", provider.name, attempt.code)
            metadata = provider.lookup(attempt.code)
            if metadata is not None:
                return LookupResult(
                    metadata=metadata,
                    attempt=attempt,
                    provider=provider.name,
                    tried=tried,
                )

        logger.info("No metadata found for %s after %d attempt(s)", code, len(tried))
        return None


def default_lookup_service(http_client: HttpClient | None = None) -> LookupService:
    """Build a LookupService with the standard providers."""
    http = http_client or ShokaHttpClient()
    return LookupService(
        {
            LookupSource.ISBN: GoogleBooksProvider(http),
            LookupSource.JAN: OpenBDProvider(http),
            LookupSource.FALLBACK_ISBN: NDLProvider(http),
        }
    )
