"""Custom exceptions for outline2book."""


class Outline2bookError(Exception):
    """Base exception for outline2book operations."""


class ParseError(Outline2bookError):
    """Error while parsing an outline document."""


class OutlineIndentationError(ParseError):
    """Line indentation is not a whole number of levels."""

    def __init__(self, line: str, *, spaces_per_level: int, line_number: int | None = None) -> None:
        self.line = line
        self.spaces_per_level = spaces_per_level
        self.line_number = line_number
        where = f" {line_number}" if line_number is not None else ""
        super().__init__(
            f"Indentation error on line{where} (expected multiples of "
            f"{spaces_per_level} spaces or tabs):\n\n{line}"
        )


class StructureError(ParseError):
    """Outline items are nested or ordered in a way that is not allowed."""


class ResolveError(Outline2bookError):
    """Error while turning an outline into a book."""


class ContentNotFoundError(ResolveError):
    """A chapter's target could not be read."""


class PathEscapeError(ResolveError):
    """A chapter's location is not inside the content root."""
