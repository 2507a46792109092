"""ASCII Banner - Render text as ASCII art with named banner fonts."""

__version__ = "0.2.0"

"""
Expose lightweight lazy wrappers to avoid importing submodules at package
import time, so `python -m ascii_banner.render_cli` runs without the module
already sitting in `sys.modules`. Wrappers import on-demand.
"""


def render(text: str, banner_name: str):
    """Render ``text`` with a bundled banner; returns a ``RenderResult``."""
    from .service import RenderService

    return RenderService().render(text, banner_name)


def render_main(*args, **kwargs):
    from .render_cli import main as _m

    return _m(*args, **kwargs)


def fonts_main(*args, **kwargs):
    from .fonts_cli import main as _m

    return _m(*args, **kwargs)


__all__ = [
    "render",
    "render_main",
    "fonts_main",
]
