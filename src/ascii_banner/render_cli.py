#!/usr/bin/env python3
"""Render text as ASCII art with a named banner."""

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from .config import Settings, add_common_arguments, setup_logging
from .errors import RenderError
from .export import to_html, to_image, to_text

FORMATS = ("text", "html", "png")


def infer_format(out_path: Optional[str]) -> str:
    if out_path:
        ext = os.path.splitext(out_path)[1].lower()
        if ext in (".html", ".htm"):
            return "html"
        if ext == ".png":
            return "png"
    return "text"


def exit_code_for(error: RenderError) -> int:
    # bad input -> 1, broken or missing banner -> 2
    return 1 if error.http_status < 500 else 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ascii-banner render", description="Render text as ASCII art"
    )
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text to render (a literal \\n starts a new line)",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read text from standard input (supports piped input)",
    )
    parser.add_argument(
        "-b",
        "--banner",
        default="standard",
        help="Banner name (default: standard)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: inferred from the output extension, else text)",
    )
    parser.add_argument(
        "--font-size",
        type=int,
        default=14,
        help="Font size for png output",
    )
    parser.add_argument(
        "--cache",
        action="store_true",
        help="Cache parsed banners between renders",
    )
    add_common_arguments(parser)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = Settings.from_args(args)
    setup_logging(settings.log_level, settings.log_path)
    logger = logging.getLogger(__name__)

    if args.stdin:
        text = sys.stdin.read().rstrip("\n")
    elif args.text is not None:
        text = args.text.replace("\\n", "\n")
    else:
        print("Error: no text provided", file=sys.stderr)
        parser.print_help()
        return 1

    out_format = args.format or infer_format(args.output)
    if out_format == "png" and not args.output:
        print("Error: png output needs --output FILE", file=sys.stderr)
        return 1

    service = settings.build_service()
    try:
        result = service.render(text, args.banner)
    except RenderError as e:
        logger.debug("Render failed: %s", e.kind)
        print(f"Error: {e}", file=sys.stderr)
        return exit_code_for(e)

    logger.debug("Writing %s output to %s", out_format, args.output or "stdout")
    try:
        if out_format == "png":
            to_image(result, font_size=args.font_size).save(args.output, format="PNG")
            return 0

        if out_format == "html":
            title = os.path.basename(args.output) if args.output else "ASCII Banner"
            output = to_html(result, title=title)
        else:
            output = to_text(result)

        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(output)
        else:
            sys.stdout.write(output)
    except OSError as e:
        print(f"Error: cannot write {args.output}: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
