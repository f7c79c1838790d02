"""Book tree models produced by the resolver."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from outline2book.schemas.common import SectionNumber, Separator


class Chapter(BaseModel):
    """A chapter loaded from a file under the content root.

    Attributes:
        name: Display name from the outline.
        content: Raw file contents, passed through untouched.
        number: Section number, if the chapter is numbered.
        path: Location relative to the content root.
        parent_names: Names of every enclosing chapter, outermost first.
        sub_items: Nested book items.
    """

    kind: Literal["chapter"] = "chapter"
    name: str
    content: str = ""
    number: SectionNumber | None = None
    path: Path
    parent_names: list[str] = Field(default_factory=list)
    sub_items: list[BookItem] = Field(default_factory=list)

    def __str__(self) -> str:
        if self.number is not None:
            return f"{self.number} {self.name}"
        return self.name


class VirtualChapter(BaseModel):
    """A chapter that groups other items without a backing file."""

    kind: Literal["virtual_chapter"] = "virtual_chapter"
    name: str
    content: str = ""
    number: SectionNumber | None = None
    sub_items: list[BookItem] = Field(default_factory=list)

    def __str__(self) -> str:
        if self.number is not None:
            return f"{self.number} {self.name}"
        return self.name


BookItem = Annotated[Union[Chapter, VirtualChapter, Separator], Field(discriminator="kind")]


class Book(BaseModel):
    """Root of the book tree: top-level items in reading order."""

    sections: list[BookItem] = Field(default_factory=list)

    def push_item(self, item: Chapter | VirtualChapter | Separator) -> Book:
        """Append an item and return the book for chaining."""
        self.sections.append(item)
        return self


Chapter.model_rebuild()
VirtualChapter.model_rebuild()
Book.model_rebuild()
