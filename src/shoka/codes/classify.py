# ABOUTME: Classification of scanned barcode strings into ISBN-13, ISBN-10, JAN or unknown.
# ABOUTME: Decided purely by length and three-digit prefix; never raises.

import enum
import re

ISBN13_PREFIXES: frozenset[str] = frozenset({"978", "979"})
JAN_PREFIXES: frozenset[str] = frozenset({"192", "198", "199", "491"})

_DIGITS_RE = re.compile(r"[0-9]+")
_SEPARATORS_RE = re.compile(r"[\s-]")


class CodeKind(enum.Enum):
    """What a scanned code looks like, judged by shape alone."""

    ISBN13 = "isbn13"
    ISBN10 = "isbn10"
    JAPANESE_JAN = "jan"
    UNKNOWN = "unknown"

    @property
    def is_isbn(self) -> bool:
        return self in (CodeKind.ISBN13, CodeKind.ISBN10)


def normalize_code(raw: str) -> str:
    """Strip whitespace and hyphens from user-entered or scanned input.

    ``"978-4-8222-8394-0"`` becomes ``"9784822283940"``. No other
    characters are touched, so non-digit input still classifies as unknown.
    """
    return _SEPARATORS_RE.sub("", raw)


def classify(code: str) -> CodeKind:
    """Classify a code string by length and prefix.

    Rules are checked in a fixed order: ISBN-13 prefixes, then ISBN-10
    length, then Japanese-book JAN prefixes. Anything that is not entirely
    ASCII digits, or not 10 or 13 characters long, is UNKNOWN.
    """
    if not _DIGITS_RE.fullmatch(code):
        return CodeKind.UNKNOWN

    prefix = code[:3]
    if len(code) == 13 and prefix in ISBN13_PREFIXES:
        return CodeKind.ISBN13
    if len(code) == 10:
        return CodeKind.ISBN10
    if len(code) == 13 and prefix in JAN_PREFIXES:
        return CodeKind.JAPANESE_JAN
    return CodeKind.UNKNOWN
