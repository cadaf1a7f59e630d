# ABOUTME: Builds the ordered list of metadata lookups to try for a scanned code.
# ABOUTME: Pure dispatch on the code's classification; performs no I/O and cannot fail.

import enum
from dataclasses import dataclass

from shoka.codes.classify import CodeKind, classify


class LookupSource(enum.Enum):
    """Which kind of external lookup an attempt calls."""

    JAN = "jan"
    ISBN = "isbn"
    FALLBACK_ISBN = "fallback_isbn"


@dataclass(frozen=True)
class LookupAttempt:
    """One step of a lookup plan: a source and the code to send it."""

    source: LookupSource
    code: str


LookupPlan = tuple[LookupAttempt, ...]


def resolve_lookup_plan(code: str) -> LookupPlan:
    """Decide which lookups to try for ``code``, in order.

    - Japanese-book JAN: JAN lookup, then generic ISBN lookup.
    - ISBN-13 / ISBN-10: ISBN lookup, then the fallback ISBN catalog.
    - Anything else: ISBN lookup, JAN lookup, then the fallback catalog.

    Every attempt uses the code exactly as given. JAN codes are not
    converted to ISBNs here; the fallback catalog is only consulted for
    codes that were not classified as JAN.
    """
    kind = classify(code)

    if kind is CodeKind.JAPANESE_JAN:
        sources = (LookupSource.JAN, LookupSource.ISBN)
    elif kind.is_isbn:
        sources = (LookupSource.ISBN, LookupSource.FALLBACK_ISBN)
    else:
        sources = (LookupSource.ISBN, LookupSource.JAN, LookupSource.FALLBACK_ISBN)

    return tuple(LookupAttempt(source, code) for source in sources)
