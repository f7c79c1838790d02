"""Tests for schema models and configuration."""

from __future__ import annotations

import importlib
from pathlib import Path

import pytest
from pydantic import ValidationError

from outline2book.schemas import Book, Chapter, Link, Outline, SectionNumber, Separator, VirtualChapter


class TestSectionNumber:
    """Tests for SectionNumber model."""

    def test_renders_dot_terminated(self) -> None:
        """Numbers join with dots and end with one."""
        assert str(SectionNumber([1])) == "1."
        assert str(SectionNumber([2, 1, 3])) == "2.1.3."

    def test_depth(self) -> None:
        """Depth is the number of components."""
        assert SectionNumber([1, 2]).depth == 2

    def test_rejects_non_positive(self) -> None:
        """Components must be positive."""
        with pytest.raises(ValidationError):
            SectionNumber([1, 0])


class TestChapterDisplay:
    """Tests for chapter string rendering."""

    def test_numbered(self) -> None:
        """Numbered chapters show their number first."""
        chapter = Chapter(name="Intro", path=Path("intro.md"), number=SectionNumber([1, 2]))
        assert str(chapter) == "1.2. Intro"

    def test_unnumbered(self) -> None:
        """Affix chapters show just their name."""
        assert str(Chapter(name="Preface", path=Path("preface.md"))) == "Preface"
        assert str(VirtualChapter(name="Group")) == "Group"


class TestBookModels:
    """Tests for book and outline model behaviour."""

    def test_push_item_chains(self) -> None:
        """push_item appends and returns the book."""
        book = Book()
        result = book.push_item(Separator()).push_item(Chapter(name="A", path=Path("a.md")))

        assert result is book
        assert len(book.sections) == 2

    def test_items_validate_from_dicts(self) -> None:
        """The discriminator picks the right item type."""
        book = Book.model_validate(
            {
                "sections": [
                    {"kind": "chapter", "name": "A", "path": "a.md", "sub_items": [{"kind": "separator"}]},
                    {"kind": "virtual_chapter", "name": "V"},
                ]
            }
        )

        assert isinstance(book.sections[0], Chapter)
        assert isinstance(book.sections[0].sub_items[0], Separator)
        assert isinstance(book.sections[1], VirtualChapter)

    def test_outline_round_trips_through_json(self) -> None:
        """Outlines serialize with nested links intact."""
        outline = Outline(
            numbered_chapters=[
                Link(
                    name="A",
                    location=Path("a.md"),
                    number=SectionNumber([1]),
                    nested_items=[Link(name="B", location=Path("b.md"), number=SectionNumber([1, 1]))],
                )
            ]
        )

        assert Outline.model_validate_json(outline.model_dump_json()) == outline


class TestConfig:
    """Tests for environment-driven configuration."""

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables replace the defaults."""
        import outline2book.config as config

        monkeypatch.setenv("OUTLINE2BOOK_SPACES_PER_LEVEL", "2")
        monkeypatch.setenv("OUTLINE2BOOK_CREATE_MISSING", "no")
        monkeypatch.setenv("OUTLINE2BOOK_OUTLINE_FILENAME", "TOC.md")
        try:
            reloaded = importlib.reload(config)
            options = reloaded.BuildOptions()
            assert options.spaces_per_level == 2
            assert options.create_missing is False
            assert options.outline_filename == "TOC.md"
        finally:
            monkeypatch.undo()
            importlib.reload(config)

    def test_defaults(self) -> None:
        """Defaults match the documented values."""
        from outline2book.config import DEFAULT_OUTLINE_FILENAME, DEFAULT_SPACES_PER_LEVEL, env_flag

        assert DEFAULT_SPACES_PER_LEVEL == 4
        assert DEFAULT_OUTLINE_FILENAME == "SUMMARY.md"
        assert env_flag("OUTLINE2BOOK_UNSET_FLAG_FOR_TEST", True) is True

    @pytest.mark.parametrize("value", ["0", "-2", 0])
    def test_spaces_per_level_below_one_rejected(self, value: str | int) -> None:
        """Indentation widths under one space are refused."""
        from outline2book.config import parse_spaces_per_level

        with pytest.raises(ValueError, match="at least 1"):
            parse_spaces_per_level(value)

    def test_spaces_per_level_not_a_number(self) -> None:
        """Non-numeric widths get a clear message."""
        from outline2book.config import parse_spaces_per_level

        with pytest.raises(ValueError, match="must be an integer"):
            parse_spaces_per_level("four")

    def test_spaces_per_level_accepts_positive(self) -> None:
        """Positive widths pass through as ints."""
        from outline2book.config import parse_spaces_per_level

        assert parse_spaces_per_level("2") == 2
