"""Shared fixtures: small hand-built fonts."""

from __future__ import annotations

import pytest


def glyph_lines(art: list[str], end: str = "@") -> list[str]:
    """Append end marks to glyph rows, doubling the mark on the last row."""
    lines = [row + end for row in art]
    lines[-1] += end
    return lines


def make_font(
    height: int = 2,
    comments: list[str] | None = None,
    glyphs: dict[int, list[str]] | None = None,
    count: int = 102,
    tagged: list[tuple[str, list[str]]] | None = None,
    hardblank: str = "$",
) -> str:
    """
    Build font text with `count` required glyphs.

    Glyphs not listed in `glyphs` are drawn as `height` rows of their own
    character. `tagged` holds (code line, rows) pairs for the code-tagged block.
    """
    comments = comments or []
    glyphs = glyphs or {}
    codes = list(range(32, 127)) + [196, 214, 220, 228, 246, 252, 223]

    lines = [f"flf2a{hardblank} {height} {height} 10 -1 {len(comments)}"]
    lines.extend(comments)
    for code in codes[:count]:
        art = glyphs.get(code, [chr(code) * 2] * height)
        lines.extend(glyph_lines(art))
    for code_line, art in tagged or []:
        lines.append(code_line)
        lines.extend(glyph_lines(art))
    return "\n".join(lines) + "\n"


@pytest.fixture
def minimal_font_text() -> str:
    return make_font(
        height=2,
        comments=["tiny test font", "second comment"],
        glyphs={
            32: ["$$", "$$"],
            65: ["/\\", "||"],
            66: ["|)", "|)"],
        },
    )


@pytest.fixture
def font_factory():
    return make_font
