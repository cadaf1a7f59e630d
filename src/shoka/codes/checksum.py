# ABOUTME: ISBN-13 check digit computation and validation.
# ABOUTME: Mod-10 checksum with alternating 1/3 weights, shared by JAN conversion and lookups.

import re

_TWELVE_DIGITS_RE = re.compile(r"[0-9]{12}")
_THIRTEEN_DIGITS_RE = re.compile(r"[0-9]{13}")


def compute_check_digit(twelve_digits: str) -> int:
    """Compute the ISBN-13 check digit for the first 12 digits of a code.

    Digits at even (0-based) positions carry weight 1, odd positions weight 3.
    The check digit is ``(10 - sum % 10) % 10``.

    Args:
        twelve_digits: Exactly 12 ASCII digits.

    Returns:
        The check digit as an int in 0-9.

    Raises:
        ValueError: If the input is not exactly 12 ASCII digits.
    """
    if not _TWELVE_DIGITS_RE.fullmatch(twelve_digits):
        raise ValueError(f"expected 12 ASCII digits, got {twelve_digits!r}")

    total = sum(int(ch) * (3 if i % 2 else 1) for i, ch in enumerate(twelve_digits))
    return (10 - total % 10) % 10


def is_valid_isbn13(candidate: str) -> bool:
    """Whether a string is a 13-digit code with a correct ISBN-13 check digit.

    Never raises: anything that is not 13 ASCII digits is simply invalid.
    """
    if not _THIRTEEN_DIGITS_RE.fullmatch(candidate):
        return False
    return compute_check_digit(candidate[:12]) == int(candidate[12])
