#!/usr/bin/env python3
"""List available banners and optionally check that each one parses."""

import argparse
import sys
from typing import Optional, Sequence

from .config import Settings, add_common_arguments, setup_logging
from .errors import RenderError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ascii-banner fonts", description="List available banners"
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Parse every banner and report problems",
    )
    add_common_arguments(parser)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_args(args)
    setup_logging(settings.log_level, settings.log_path)

    service = settings.build_service()
    names = service.banners()
    if not names:
        print("No banners found", file=sys.stderr)
        return 1

    failed = 0
    for name in names:
        if not args.check:
            print(name)
            continue
        try:
            table = service.load_table(name)
        except RenderError as e:
            failed += 1
            print(f"{name}: {e}")
        else:
            print(f"{name}: ok (height={table.glyph_height}, space width={table.space_width})")

    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
