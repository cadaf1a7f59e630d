# ABOUTME: Heuristic recovery of an ISBN-13 from a Japanese-book JAN barcode.
# ABOUTME: Tries a fixed sequence of digit-offset and publisher-code hypotheses; first valid wins.

import logging
from collections.abc import Iterator

from shoka.codes.checksum import compute_check_digit, is_valid_isbn13

logger = logging.getLogger(__name__)

# Prefixes that also get the 979-before-978 hypothesis.
_ALTERNATE_PREFIX_JANS = frozenset({"192", "198", "199"})
_ELIGIBLE_PREFIXES = _ALTERNATE_PREFIX_JANS | {"491"}

# Publisher group digits in trial order; "4" (Japan) first.
PUBLISHER_DIGIT_ORDER = "4012356789"


def _with_check_digit(body: str) -> str | None:
    """Append the computed check digit to a 12-character body, if it is all digits."""
    try:
        return body + str(compute_check_digit(body))
    except ValueError:
        return None


def _hypotheses(jan: str) -> Iterator[tuple[str, str]]:
    """Yield (label, 12-character body) pairs in trial order for an eligible JAN."""
    prefix = jan[:3]
    yield "offset-3", "978" + jan[3:12]
    yield "offset-4", "978" + jan[4:13]
    if prefix in _ALTERNATE_PREFIX_JANS:
        yield "alternate-979", "979" + jan[3:12]
        yield "alternate-978", "978" + jan[3:12]
    for digit in PUBLISHER_DIGIT_ORDER:
        yield f"publisher-{digit}", "978" + digit + jan[4:12]


def convert_jan_to_isbn(jan: str) -> str | None:
    """Recover a plausible ISBN-13 from a 13-digit Japanese-book JAN code.

    The JAN drops the boundary between registration group and publisher
    code, so the ISBN cannot be computed directly. Candidates are built in
    a fixed order and the first whose checksum holds is returned:

    1. ``978`` + characters 3..11, with a computed check digit.
    2. ``978`` + characters 4..12, with a computed check digit.
    3. For 192/198/199 only: characters 3..11 with ``979``, then ``978``.
    4. ``978`` + publisher digit + characters 4..11, trying the digits
       4, 0, 1, 2, 3, 5, 6, 7, 8, 9.

    A checksum match is necessary but not sufficient evidence that the
    candidate is the true ISBN; the fixed order decides between several
    matches.

    Returns:
        A 13-digit string passing ``is_valid_isbn13``, or None if the code
        has the wrong length, an ineligible prefix, or no hypothesis
        validates.
    """
    if len(jan) != 13 or jan[:3] not in _ELIGIBLE_PREFIXES:
        return None

    for label, body in _hypotheses(jan):
        candidate = _with_check_digit(body)
        if candidate is None:
            logger.debug("JAN %s: hypothesis %s skipped (non-digit body)", jan, label)
            continue
        if is_valid_isbn13(candidate):
            logger.debug("JAN %s: hypothesis %s produced %s", jan, label, candidate)
            return candidate

    logger.debug("JAN %s: no hypothesis produced a valid ISBN-13", jan)
    return None
