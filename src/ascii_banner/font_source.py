"""Banner stores: look up a banner definition by name and return its raw text."""

import logging
import os
from importlib import resources
from typing import List, Protocol

from .errors import BannerNotFoundError

BANNER_SUFFIX = ".txt"


def normalize_name(name: str) -> str:
    """Strip an optional ``.txt`` suffix; ``"shadow.txt"`` and ``"shadow"`` match."""
    if name.endswith(BANNER_SUFFIX):
        return name[: -len(BANNER_SUFFIX)]
    return name


def _is_safe_name(name: str) -> bool:
    if not name or name.startswith("."):
        return False
    if "/" in name or "\\" in name or os.sep in name:
        return False
    return ".." not in name


class FontSource(Protocol):
    def load(self, name: str) -> str: ...

    def names(self) -> List[str]: ...


class DirectoryFontSource:
    """Serve banners stored as ``<name>.txt`` files in one directory."""

    def __init__(self, path: str | os.PathLike):
        self.path = os.fspath(path)

    def __repr__(self):
        return f"DirectoryFontSource({self.path!r})"

    def load(self, name: str) -> str:
        logger = logging.getLogger(__name__)
        stem = normalize_name(name)
        if not _is_safe_name(stem):
            raise BannerNotFoundError(name)

        file_path = os.path.join(self.path, stem + BANNER_SUFFIX)
        try:
            with open(file_path, "r", encoding="utf-8", newline="") as f:
                raw = f.read()
        except (OSError, ValueError) as e:
            logger.debug("Cannot read banner %s from %s: %s", name, file_path, e)
            raise BannerNotFoundError(name) from e

        logger.debug("Loaded banner %s from %s (%d bytes)", stem, file_path, len(raw))
        return raw

    def names(self) -> List[str]:
        try:
            entries = os.listdir(self.path)
        except OSError:
            return []
        return sorted(
            normalize_name(e)
            for e in entries
            if e.endswith(BANNER_SUFFIX) and _is_safe_name(e)
        )


class PackageFontSource:
    """Serve the banners bundled with the package."""

    def __init__(self, package: str = "ascii_banner.banners"):
        self.package = package

    def __repr__(self):
        return f"PackageFontSource({self.package!r})"

    def _root(self):
        return resources.files(self.package)

    def load(self, name: str) -> str:
        logger = logging.getLogger(__name__)
        stem = normalize_name(name)
        if not _is_safe_name(stem):
            raise BannerNotFoundError(name)

        try:
            raw = self._root().joinpath(stem + BANNER_SUFFIX).read_bytes().decode("utf-8")
        except (OSError, ValueError, ModuleNotFoundError) as e:
            logger.debug("Cannot read bundled banner %s: %s", name, e)
            raise BannerNotFoundError(name) from e

        logger.debug("Loaded bundled banner %s (%d bytes)", stem, len(raw))
        return raw

    def names(self) -> List[str]:
        try:
            entries = list(self._root().iterdir())
        except (OSError, ModuleNotFoundError):
            return []
        return sorted(
            normalize_name(entry.name)
            for entry in entries
            if entry.name.endswith(BANNER_SUFFIX) and _is_safe_name(entry.name)
        )
