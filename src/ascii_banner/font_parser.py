"""Parse banner definitions into glyph tables.

Banner format, version 1
------------------------
A banner file lists the 95 printable ASCII characters, space through tilde,
in code-point order. Each character is a block made of one empty separator
line followed by ``glyph_height`` rows of the glyph::

    <empty line>
    row 1
    ...
    row 8

so a complete file holds ``95 * (glyph_height + 1)`` lines. Lines may end in
``\\n`` or ``\\r\\n``. Rows of one glyph shorter than its widest row are padded
with spaces on the right.
"""

import logging
from typing import List

from .errors import MalformedBannerError
from .glyphs import CANONICAL_CHARSET, Glyph, GlyphTable

DEFAULT_GLYPH_HEIGHT = 8
DEFAULT_MAX_GLYPH_WIDTH = 64


def split_rows(raw: str) -> List[str]:
    """Split raw content into rows, trimming ``\\r`` left over from CRLF endings."""
    rows = raw.split("\n")
    # a trailing newline terminates the last row rather than starting a new one
    if rows and rows[-1] == "":
        rows.pop()
    return [r[:-1] if r.endswith("\r") else r for r in rows]


class FontParser:
    def __init__(
        self,
        glyph_height: int = DEFAULT_GLYPH_HEIGHT,
        max_glyph_width: int = DEFAULT_MAX_GLYPH_WIDTH,
    ):
        if glyph_height < 1:
            raise ValueError("glyph_height must be positive")
        if max_glyph_width < 1:
            raise ValueError("max_glyph_width must be positive")
        self.glyph_height = glyph_height
        self.max_glyph_width = max_glyph_width

    def __repr__(self):
        return (
            f"FontParser(glyph_height={self.glyph_height}, "
            f"max_glyph_width={self.max_glyph_width})"
        )

    def parse(self, raw: str) -> GlyphTable:
        logger = logging.getLogger(__name__)
        rows = split_rows(raw)
        block = self.glyph_height + 1

        if not rows or len(rows) % block:
            raise MalformedBannerError("row count mismatch")
        if len(rows) // block != len(CANONICAL_CHARSET):
            raise MalformedBannerError("character count mismatch")

        glyphs = []
        for start in range(0, len(rows), block):
            if rows[start].strip():
                raise MalformedBannerError("missing separator")
            glyph_rows = rows[start + 1 : start + block]
            width = max(len(r) for r in glyph_rows)
            if width > self.max_glyph_width:
                raise MalformedBannerError("row too wide")
            glyphs.append(Glyph(tuple(r.ljust(width) for r in glyph_rows)))

        table = GlyphTable(glyph_height=self.glyph_height, glyphs=tuple(glyphs))
        logger.debug(
            "Parsed banner: %d glyphs, height=%d, space width=%d",
            len(table),
            table.glyph_height,
            table.space_width,
        )
        return table
