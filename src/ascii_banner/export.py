"""Serialize rendered banners as plain text, HTML or an image."""

import html
import logging
from typing import Optional, Sequence

from PIL import Image, ImageDraw, ImageFont

from .renderer import RenderResult

MONO_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/System/Library/Fonts/Monaco.ttf",
    "C:\\Windows\\Fonts\\consola.ttf",
]


def to_text(result: RenderResult) -> str:
    return result.text + "\n"


def wrap_html(pre_lines: Sequence[str], title="ASCII Banner", font_size_px=12, line_height_px=None):
    # Lock line-height in px so rows stay aligned across browsers.
    if line_height_px is None:
        line_height_px = font_size_px

    return (
        "<!doctype html>\n"
        "<html>\n<head>\n"
        '  <meta charset="utf-8">\n'
        '  <meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"  <title>{html.escape(title)}</title>\n"
        "  <style>\n"
        "    html, body { margin: 0; }\n"
        "    .wrap { padding: 16px; }\n"
        "    pre {\n"
        "      margin: 0;\n"
        "      white-space: pre;\n"
        "      overflow: auto;\n"
        '      font-family: "DejaVu Sans Mono", "Cascadia Mono", Consolas, monospace;\n'
        "      font-variant-ligatures: none;\n"
        f"      font-size: {font_size_px}px;\n"
        f"      line-height: {line_height_px}px;\n"
        "      letter-spacing: 0;\n"
        "    }\n"
        "  </style>\n"
        "</head>\n<body>\n"
        '  <div class="wrap">\n'
        "    <pre>\n" + "\n".join(pre_lines) + "\n    </pre>\n"
        "  </div>\n"
        "</body>\n</html>\n"
    )


def to_html(result: RenderResult, title: str = "ASCII Banner", font_size_px: int = 12) -> str:
    return wrap_html(
        [html.escape(ln) for ln in result.lines],
        title=title,
        font_size_px=font_size_px,
    )


def load_mono_font(font_path: Optional[str], font_size: int):
    logger = logging.getLogger(__name__)
    for path in [font_path] + MONO_FONT_CANDIDATES:
        if not path:
            continue
        try:
            font = ImageFont.truetype(path, font_size)
        except OSError:
            continue
        logger.debug("Using font %s (size=%d)", path, font_size)
        return font

    logger.debug("Using PIL default font (size=%d)", font_size)
    return ImageFont.load_default(size=font_size)


def to_image(
    result: RenderResult,
    font_size: int = 14,
    font_path: Optional[str] = None,
    bg_color: str = "white",
    text_color: str = "black",
    padding: int = 8,
) -> Image.Image:
    """Draw the rendered block onto a new RGB image."""
    font = load_mono_font(font_path, font_size)
    text = result.text

    # Measure on a scratch canvas first; textbbox needs a drawing context.
    scratch = ImageDraw.Draw(Image.new("L", (1, 1)))
    left, top, right, bottom = scratch.multiline_textbbox((0, 0), text, font=font)

    pad = max(0, padding)
    img_w = max(1, right - left + pad * 2)
    img_h = max(1, bottom - top + pad * 2)

    img = Image.new("RGB", (img_w, img_h), color=bg_color)
    draw = ImageDraw.Draw(img)
    draw.multiline_text((pad - left, pad - top), text, font=font, fill=text_color)
    logging.getLogger(__name__).debug("Drew banner image %dx%d", img_w, img_h)
    return img
