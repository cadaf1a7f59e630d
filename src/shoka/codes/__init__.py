# ABOUTME: Barcode code handling: checksum, classification, JAN conversion, OCR extraction.
# ABOUTME: Pure functions with no I/O, safe to call on every keystroke.

from shoka.codes.checksum import compute_check_digit, is_valid_isbn13
from shoka.codes.classify import CodeKind, classify, normalize_code
from shoka.codes.extract import ExtractedCode, extract_codes, resolve_extracted
from shoka.codes.jan import convert_jan_to_isbn

__all__ = [
    "CodeKind",
    "ExtractedCode",
    "classify",
    "compute_check_digit",
    "convert_jan_to_isbn",
    "extract_codes",
    "is_valid_isbn13",
    "normalize_code",
    "resolve_extracted",
]
