# ABOUTME: Unit tests for barcode classification and input normalization.
# ABOUTME: Covers each CodeKind, boundary lengths, and non-digit input.

import pytest

from shoka.codes.classify import CodeKind, classify, normalize_code


class TestClassify:
    """Tests for classify."""

    def test_isbn13(self) -> None:
        assert classify("9784822283940") is CodeKind.ISBN13

    def test_isbn13_979_prefix(self) -> None:
        assert classify("9791234567896") is CodeKind.ISBN13

    def test_isbn10(self) -> None:
        assert classify("0123456789") is CodeKind.ISBN10

    @pytest.mark.parametrize("code", ["4910123456789", "1920123456789", "1980123456789", "1990123456789"])
    def test_japanese_jan(self, code: str) -> None:
        assert classify(code) is CodeKind.JAPANESE_JAN

    @pytest.mark.parametrize(
        "code",
        [
            "",
            "abc",
            "12345",
            "0000000000000",
            "97848222839401",
            "978482228394",
            "4900000000000",
            "123456789X",
            "978-4822283940",
            " 9784822283940",
            "９７８４８２２２８３９４０",
        ],
    )
    def test_unknown(self, code: str) -> None:
        assert classify(code) is CodeKind.UNKNOWN

    @pytest.mark.parametrize(
        "code",
        ["9784822283940", "0123456789", "4910123456789", "abc", "", "1234567890123"],
    )
    def test_known_kinds_are_all_digit_of_length_10_or_13(self, code: str) -> None:
        kind = classify(code)
        if kind is not CodeKind.UNKNOWN:
            assert code.isdigit()
            assert len(code) in (10, 13)

    def test_referentially_transparent(self) -> None:
        assert classify("4910123456789") is classify("4910123456789")

    def test_is_isbn(self) -> None:
        assert CodeKind.ISBN13.is_isbn
        assert CodeKind.ISBN10.is_isbn
        assert not CodeKind.JAPANESE_JAN.is_isbn
        assert not CodeKind.UNKNOWN.is_isbn


class TestNormalizeCode:
    """Tests for normalize_code."""

    def test_strips_hyphens(self) -> None:
        assert normalize_code("978-4-8222-8394-0") == "9784822283940"

    def test_strips_whitespace(self) -> None:
        assert normalize_code(" 978 4822 283940\n") == "9784822283940"

    def test_leaves_other_characters(self) -> None:
        assert normalize_code("ISBN 978-4") == "ISBN9784"
        assert classify(normalize_code("ISBN 978-4")) is CodeKind.UNKNOWN
