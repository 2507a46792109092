"""Failures raised by the banner rendering engine."""


class RenderError(Exception):
    """Base class for every failure the rendering engine reports.

    ``http_status`` tells a web caller which status class the failure
    belongs to: 400 for bad input, 500 for a broken or missing banner.
    """

    http_status = 500

    @property
    def kind(self) -> str:
        return type(self).__name__.removesuffix("Error")


class EmptyTextError(RenderError):
    http_status = 400

    def __init__(self):
        super().__init__("text is empty")


class EmptyBannerError(RenderError):
    http_status = 400

    def __init__(self):
        super().__init__("banner name is empty")


class BannerNotFoundError(RenderError):
    def __init__(self, name: str):
        super().__init__(f"banner not found: {name}")
        self.name = name


class MalformedBannerError(RenderError):
    def __init__(self, reason: str):
        super().__init__(f"malformed banner: {reason}")
        self.reason = reason


class UnsupportedCharacterError(RenderError):
    http_status = 400

    def __init__(self, char: str, position: int):
        super().__init__(f"unsupported character {char!r} at position {position}")
        self.char = char
        self.position = position


__all__ = [
    "RenderError",
    "EmptyTextError",
    "EmptyBannerError",
    "BannerNotFoundError",
    "MalformedBannerError",
    "UnsupportedCharacterError",
]
