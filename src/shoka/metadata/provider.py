# ABOUTME: LookupProvider protocol defining the contract for book metadata services.
# ABOUTME: Google Books, openBD, NDL Search, and test fakes all implement this.

from typing import Protocol, runtime_checkable

from shoka.metadata.types import BookMetadata


@runtime_checkable
class LookupProvider(Protocol):
    """Protocol for code-based metadata lookup services.

    ``lookup`` returns None both when the service has no record and when
    the request failed; callers move on to their next option either way.
    """

    @property
    def name(self) -> str: ...

    def lookup(self, code: str) -> BookMetadata | None: ...
