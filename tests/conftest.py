"""Shared fixtures for the banner tests."""

import logging

import pytest

from ascii_banner.font_parser import FontParser
from ascii_banner.glyphs import CANONICAL_CHARSET


def build_banner(height=3, chars=CANONICAL_CHARSET, row=None, newline="\n"):
    """Return banner file content with one block per character in ``chars``."""
    if row is None:
        row = lambda c, i: c * 2
    lines = []
    for c in chars:
        lines.append("")
        lines.extend(row(c, i) for i in range(height))
    return newline.join(lines) + newline


@pytest.fixture
def banner_factory():
    return build_banner


@pytest.fixture
def small_table():
    """Height-3 table where every glyph is its own character doubled."""
    return FontParser(glyph_height=3).parse(build_banner(height=3))


@pytest.fixture
def font_dir(tmp_path):
    """Directory holding a valid height-8 banner named ``tiny``."""
    (tmp_path / "tiny.txt").write_text(build_banner(height=8), encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)
