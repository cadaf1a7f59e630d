# ABOUTME: Unit tests for lookup plan construction.
# ABOUTME: Verifies attempt order per code kind and that codes pass through unchanged.

import pytest

from shoka.lookup.plan import LookupAttempt, LookupSource, resolve_lookup_plan


def _sources(code: str) -> list[LookupSource]:
    return [attempt.source for attempt in resolve_lookup_plan(code)]


class TestResolveLookupPlan:
    """Tests for resolve_lookup_plan."""

    def test_jan_tries_jan_lookup_first(self) -> None:
        assert _sources("4910123456789") == [LookupSource.JAN, LookupSource.ISBN]

    @pytest.mark.parametrize("code", ["1920123456789", "1980123456789", "1990123456789"])
    def test_jan_attempt_precedes_any_isbn_attempt(self, code: str) -> None:
        sources = _sources(code)
        assert sources.index(LookupSource.JAN) < sources.index(LookupSource.ISBN)
        assert LookupSource.FALLBACK_ISBN not in sources

    def test_isbn13_uses_isbn_then_fallback(self) -> None:
        assert _sources("9784822283940") == [LookupSource.ISBN, LookupSource.FALLBACK_ISBN]

    def test_isbn10_uses_isbn_then_fallback(self) -> None:
        assert _sources("4822283941") == [LookupSource.ISBN, LookupSource.FALLBACK_ISBN]

    def test_unknown_tries_everything(self) -> None:
        assert _sources("12345") == [
            LookupSource.ISBN,
            LookupSource.JAN,
            LookupSource.FALLBACK_ISBN,
        ]

    def test_jan_code_is_not_converted(self) -> None:
        plan = resolve_lookup_plan("4910123456789")
        assert plan == (
            LookupAttempt(LookupSource.JAN, "4910123456789"),
            LookupAttempt(LookupSource.ISBN, "4910123456789"),
        )

    @pytest.mark.parametrize("code", ["", "abc", "978-4-8222-8394-0"])
    def test_always_returns_a_plan(self, code: str) -> None:
        plan = resolve_lookup_plan(code)
        assert len(plan) >= 1
        assert all(attempt.code == code for attempt in plan)
