"""Entry point used by front ends: text + banner name in, ASCII art out."""

import logging
import threading
from typing import Dict, List, Optional

from .errors import EmptyBannerError, EmptyTextError
from .font_parser import FontParser
from .font_source import FontSource, PackageFontSource, normalize_name
from .glyphs import GlyphTable
from .renderer import Renderer, RenderResult


class RenderService:
    """Load a banner, parse it and render text with it.

    The banner store, parser and renderer are collaborators passed in by the
    caller; tests substitute any of them without touching module state.

    With ``cache_tables=True`` parsed glyph tables are kept per banner name.
    Tables are immutable, so a cached table renders exactly what a fresh
    parse would.
    """

    def __init__(
        self,
        source: Optional[FontSource] = None,
        parser: Optional[FontParser] = None,
        renderer: Optional[Renderer] = None,
        cache_tables: bool = False,
    ):
        self.source = source if source is not None else PackageFontSource()
        self.parser = parser if parser is not None else FontParser()
        self.renderer = renderer if renderer is not None else Renderer()
        self.cache_tables = cache_tables
        self._cache: Dict[str, GlyphTable] = {}
        self._lock = threading.Lock()

    def load_table(self, banner_name: str) -> GlyphTable:
        logger = logging.getLogger(__name__)
        key = normalize_name(banner_name)

        if self.cache_tables:
            with self._lock:
                table = self._cache.get(key)
            if table is not None:
                logger.debug("Glyph table cache hit for %s", key)
                return table

        raw = self.source.load(banner_name)
        table = self.parser.parse(raw)

        if self.cache_tables:
            with self._lock:
                table = self._cache.setdefault(key, table)
        return table

    def render(self, text: str, banner_name: str) -> RenderResult:
        if not banner_name:
            raise EmptyBannerError()
        if not text:
            raise EmptyTextError()

        logging.getLogger(__name__).info(
            "Rendering %d character(s) with banner %s", len(text), banner_name
        )
        table = self.load_table(banner_name)
        return self.renderer.render(text, table)

    def banners(self) -> List[str]:
        return self.source.names()

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()
