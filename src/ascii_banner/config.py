"""Runtime settings shared by the command line tools."""

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

from .font_parser import DEFAULT_GLYPH_HEIGHT, DEFAULT_MAX_GLYPH_WIDTH, FontParser
from .font_source import DirectoryFontSource, PackageFontSource
from .service import RenderService

FONT_DIR_ENV = "ASCII_BANNER_FONT_DIR"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class Settings:
    font_dir: Optional[str] = None  # None => bundled banners
    glyph_height: int = DEFAULT_GLYPH_HEIGHT
    max_glyph_width: int = DEFAULT_MAX_GLYPH_WIDTH
    cache_tables: bool = False

    log_level: str = "WARNING"
    log_path: Optional[str] = None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Settings":
        return cls(
            font_dir=args.font_dir,
            glyph_height=args.glyph_height,
            max_glyph_width=args.max_glyph_width,
            cache_tables=getattr(args, "cache", False),
            log_level=args.log_level,
            log_path=args.log,
        )

    def build_service(self) -> RenderService:
        if self.font_dir:
            source = DirectoryFontSource(self.font_dir)
        else:
            source = PackageFontSource()
        parser = FontParser(
            glyph_height=self.glyph_height, max_glyph_width=self.max_glyph_width
        )
        return RenderService(source=source, parser=parser, cache_tables=self.cache_tables)


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--font-dir",
        default=os.environ.get(FONT_DIR_ENV),
        help=f"Directory of <banner>.txt files (default: ${FONT_DIR_ENV} or bundled banners)",
    )
    parser.add_argument(
        "--glyph-height",
        type=int,
        default=DEFAULT_GLYPH_HEIGHT,
        help="Rows per glyph in the banner files",
    )
    parser.add_argument(
        "--max-glyph-width",
        type=int,
        default=DEFAULT_MAX_GLYPH_WIDTH,
        help="Reject banners with glyph rows wider than this",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        help="Set the logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log",
        default=None,
        help="Also write DEBUG logs to this file",
    )


def setup_logging(level: str, log_path: str | None = None) -> None:
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    handlers[0].setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    handlers[0].setLevel(numeric_level)

    if log_path:
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
        handlers.append(fh)

    root_level = logging.DEBUG if log_path else numeric_level
    logging.basicConfig(level=root_level, handlers=handlers, force=True)
