"""Models shared by the outline and the book tree."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, PositiveInt, RootModel


class SectionNumber(RootModel[list[PositiveInt]]):
    """Hierarchical position of a numbered chapter, e.g. ``1.2.``."""

    @property
    def depth(self) -> int:
        return len(self.root)

    def __str__(self) -> str:
        return "".join(f"{part}." for part in self.root)


class Separator(BaseModel):
    """A structural break between groups of chapters."""

    kind: Literal["separator"] = "separator"
