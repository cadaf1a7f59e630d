# ABOUTME: Pulls ISBN and JAN candidates out of text returned by an OCR service.
# ABOUTME: Picks the first usable ISBN, converting JAN matches where possible.

import re
from dataclasses import dataclass

from shoka.codes.jan import convert_jan_to_isbn

_SEPARATORS_RE = re.compile(r"[\s-]")
_ISBN13_RE = re.compile(r"(?:978|979)\d{10}", re.ASCII)
_ISBN10_RE = re.compile(r"\b\d{9}[\dX]\b", re.ASCII)
_JAN_RE = re.compile(r"(?:491|192)\d{10}", re.ASCII)


@dataclass(frozen=True)
class ExtractedCode:
    """A code found in recognized text, tagged "ISBN" or "JAN"."""

    type: str
    code: str


def extract_codes(text: str) -> list[ExtractedCode]:
    """Find ISBN-13, ISBN-10 and JAN codes in OCR output.

    Whitespace and hyphens are removed first, so codes split across lines
    or printed with separators are still found. Results are grouped by
    pattern: ISBN-13 matches, then ISBN-10, then JAN.
    """
    normalized = _SEPARATORS_RE.sub("", text)

    codes = [ExtractedCode("ISBN", m) for m in _ISBN13_RE.findall(normalized)]
    codes.extend(ExtractedCode("ISBN", m) for m in _ISBN10_RE.findall(normalized))
    codes.extend(ExtractedCode("JAN", m) for m in _JAN_RE.findall(normalized))
    return codes


def resolve_extracted(codes: list[ExtractedCode]) -> str | None:
    """Return the first code usable for an ISBN lookup.

    ISBN matches are used as-is; JAN matches count only if they convert.
    """
    for extracted in codes:
        if extracted.type == "ISBN":
            return extracted.code
        isbn = convert_jan_to_isbn(extracted.code)
        if isbn:
            return isbn
    return None
