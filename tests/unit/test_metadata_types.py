# ABOUTME: Unit tests for the BookMetadata dataclass.
# ABOUTME: Covers dict conversion and applying field overrides.

from shoka.metadata.types import BookMetadata


class TestBookMetadata:
    """Tests for BookMetadata."""

    def test_only_title_required(self) -> None:
        meta = BookMetadata(title="Untitled")
        assert meta.author is None
        assert meta.pages is None

    def test_from_dict_ignores_unknown_keys(self) -> None:
        meta = BookMetadata.from_dict({"title": "Dune", "pages": 412, "id": "x", "location": "A"})
        assert meta == BookMetadata(title="Dune", pages=412)

    def test_to_dict_has_every_field(self) -> None:
        data = BookMetadata(title="Dune").to_dict()
        assert data["title"] == "Dune"
        assert set(data) >= {"author", "isbn", "image_url", "source"}

    def test_merged_with_skips_none(self, rose_metadata: BookMetadata) -> None:
        merged = rose_metadata.merged_with({"title": "Il nome della rosa", "author": None})
        assert merged.title == "Il nome della rosa"
        assert merged.author == "Umberto Eco"
        assert rose_metadata.title == "The Name of the Rose"
