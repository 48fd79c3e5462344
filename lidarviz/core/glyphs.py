"""Bitmap digits used to stamp numeric labels onto the canvas.

Each glyph is a list of ``CHAR_HEIGHT`` rows; ``'#'`` marks a lit pixel.
Index 0-9 holds the digits, ``CHAR_DOT`` the decimal point.
"""
from __future__ import annotations
from typing import List, Sequence

CHAR_HEIGHT = 5
CHAR_DOT = 10

CHAR_MAT: List[List[str]] = [
    ["###", "# #", "# #", "# #", "###"],
    [" # ", "## ", " # ", " # ", "###"],
    ["###", "  #", "###", "#  ", "###"],
    ["###", "  #", "###", "  #", "###"],
    ["# #", "# #", "###", "  #", "  #"],
    ["###", "#  ", "###", "  #", "###"],
    ["###", "#  ", "###", "# #", "###"],
    ["###", "  #", "  #", "  #", "  #"],
    ["###", "# #", "###", "# #", "###"],
    ["###", "# #", "###", "  #", "###"],
    [" ", " ", " ", " ", "#"],
]


def glyph_index(ch: str) -> int:
    if ch == ".":
        return CHAR_DOT
    if not ch.isdigit():
        raise ValueError(f"No glyph for character {ch!r}")
    return int(ch)


def glyph(ch: str, table: Sequence[Sequence[str]] = CHAR_MAT) -> Sequence[str]:
    return table[glyph_index(ch)]
