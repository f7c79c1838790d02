"""Outline models produced by the outline parser."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Iterator, Literal, Union

from pydantic import BaseModel, Field

from outline2book.schemas.common import SectionNumber, Separator


class Link(BaseModel):
    """A reference to chapter content declared in the outline.

    Attributes:
        name: Display name, taken verbatim from between the brackets.
        location: Target path relative to the content root, or absolute.
        raw_location: Target exactly as written in the outline, before path
            normalization (keeps `./`, doubled slashes and fragments).
        number: Section number for numbered chapters; None for front and
            back matter.
        nested_items: Items indented below this link.
    """

    kind: Literal["link"] = "link"
    name: str
    location: Path
    raw_location: str | None = None
    number: SectionNumber | None = None
    nested_items: list[OutlineItem] = Field(default_factory=list)


OutlineItem = Annotated[Union[Link, Separator], Field(discriminator="kind")]


class Outline(BaseModel):
    """Validated outline split into front matter, numbered chapters and back matter."""

    prefix_chapters: list[OutlineItem] = Field(default_factory=list)
    numbered_chapters: list[OutlineItem] = Field(default_factory=list)
    suffix_chapters: list[OutlineItem] = Field(default_factory=list)

    def top_level_items(self) -> Iterator[Link | Separator]:
        """Yield root items in reading order."""
        yield from self.prefix_chapters
        yield from self.numbered_chapters
        yield from self.suffix_chapters


Link.model_rebuild()
