"""Compose ASCII art from a glyph table."""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .errors import EmptyTextError, UnsupportedCharacterError
from .glyphs import Glyph, GlyphTable


@dataclass(frozen=True)
class RenderResult:
    lines: Tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def width(self) -> int:
        return max((len(ln) for ln in self.lines), default=0)

    def __str__(self):
        return self.text


def split_input_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(offset, line)`` for each ``\\n`` separated line of ``text``.

    ``offset`` is the index of the line's first character in ``text`` so
    positions reported for bad characters refer to the original input. A
    ``\\r`` directly before ``\\n`` belongs to the separator.
    """
    start = 0
    while True:
        end = text.find("\n", start)
        if end == -1:
            yield start, text[start:]
            return
        stop = end - 1 if end > start and text[end - 1] == "\r" else end
        yield start, text[start:stop]
        start = end + 1


class Renderer:
    def resolve(self, char: str, position: int, table: GlyphTable) -> Glyph:
        glyph = table.get(char)
        if glyph is not None:
            return glyph
        if char.isspace():
            return table[" "]
        raise UnsupportedCharacterError(char, position)

    def render_line(self, line: str, offset: int, table: GlyphTable) -> List[str]:
        glyphs = [self.resolve(ch, offset + i, table) for i, ch in enumerate(line)]
        return [
            "".join(g.rows[row] for g in glyphs) for row in range(table.glyph_height)
        ]

    def render(self, text: str, table: GlyphTable) -> RenderResult:
        """Render ``text`` with ``table``.

        Each input line becomes ``table.glyph_height`` output rows; blocks of
        consecutive input lines are separated by one blank line. Whitespace
        missing from the table renders as a space glyph. Any other character
        missing from the table fails the whole render.
        """
        if not text:
            raise EmptyTextError()

        blocks = [
            self.render_line(line, offset, table)
            for offset, line in split_input_lines(text)
        ]

        lines: List[str] = []
        for i, block in enumerate(blocks):
            if i:
                lines.append("")
            lines.extend(block)

        logging.getLogger(__name__).debug(
            "Rendered %d input line(s) into %d rows", len(blocks), len(lines)
        )
        return RenderResult(tuple(lines))
