"""Glyph data model shared by the parser and the renderer."""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

# Banner file format version understood by FontParser.
BANNER_FORMAT_VERSION = 1

FIRST_CHAR = 0x20  # space
LAST_CHAR = 0x7E  # tilde


def canonical_charset() -> str:
    """Printable ASCII, space through tilde, in the order banner files list it."""
    return "".join(chr(i) for i in range(FIRST_CHAR, LAST_CHAR + 1))


CANONICAL_CHARSET = canonical_charset()


@dataclass(frozen=True)
class Glyph:
    rows: Tuple[str, ...]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0


@dataclass(frozen=True)
class GlyphTable:
    """Immutable character -> glyph mapping for one banner.

    Glyphs are stored in canonical order, so the table for a given banner file
    compares equal to any other table parsed from the same content.
    """

    glyph_height: int
    glyphs: Tuple[Glyph, ...]

    def __post_init__(self):
        if len(self.glyphs) != len(CANONICAL_CHARSET):
            raise ValueError(
                f"expected {len(CANONICAL_CHARSET)} glyphs, got {len(self.glyphs)}"
            )
        for g in self.glyphs:
            if g.height != self.glyph_height:
                raise ValueError(
                    f"glyph height {g.height} differs from table height {self.glyph_height}"
                )

    @property
    def space_width(self) -> int:
        return self.glyphs[0].width

    def get(self, char: str) -> Optional[Glyph]:
        if len(char) != 1:
            return None
        idx = ord(char) - FIRST_CHAR
        if 0 <= idx < len(self.glyphs):
            return self.glyphs[idx]
        return None

    def __getitem__(self, char: str) -> Glyph:
        glyph = self.get(char)
        if glyph is None:
            raise KeyError(char)
        return glyph

    def __contains__(self, char) -> bool:
        return isinstance(char, str) and self.get(char) is not None

    def __len__(self) -> int:
        return len(self.glyphs)

    def __iter__(self) -> Iterator[str]:
        return iter(CANONICAL_CHARSET)
