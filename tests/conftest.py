"""Test setup for outline2book."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


DUMMY_SRC = """
# Dummy Chapter

this is some dummy text.

And here is some more text.
"""


@pytest.fixture
def book_dir(tmp_path: Path) -> Path:
    """Content root with a small nested book and its outline."""
    (tmp_path / "SUMMARY.md").write_text(
        "# Summary\n"
        "\n"
        "[Introduction](intro.md)\n"
        "\n"
        "- [First](first.md)\n"
        "    - [Nested](first/nested.md)\n"
        "- [Second](second.md)\n"
        "\n"
        "---\n"
        "\n"
        "[Appendix](appendix.md)\n"
    )
    (tmp_path / "intro.md").write_text("# Introduction\n")
    (tmp_path / "first.md").write_text(DUMMY_SRC)
    (tmp_path / "first").mkdir()
    (tmp_path / "first" / "nested.md").write_text("Hello World!")
    (tmp_path / "second.md").write_text("# Second\n")
    (tmp_path / "appendix.md").write_text("# Appendix\n")
    return tmp_path


@pytest.fixture
def dummy_src() -> str:
    """Body text used for sample chapter files."""
    return DUMMY_SRC
