from __future__ import annotations

import logging
from pathlib import Path

import pygame

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = (".png", ".jpg", ".jpeg", ".bmp", ".gif")


class MissingBitmapError(KeyError):
    """Raised when a bitmap is requested that was never loaded."""


class AssetStore:
    """Owns loaded bitmaps; entities borrow them by name and never copy them."""

    def __init__(self) -> None:
        self._bitmaps: dict[str, pygame.Surface] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._bitmaps

    def __len__(self) -> int:
        return len(self._bitmaps)

    def add_bitmap(self, name: str, bitmap: pygame.Surface) -> bool:
        """Register ``bitmap`` under ``name``. Returns False if the name is taken."""
        if name in self._bitmaps:
            return False
        self._bitmaps[name] = bitmap
        logger.debug("registered bitmap %r (%dx%d)", name, bitmap.get_width(), bitmap.get_height())
        return True

    def load_bitmap(self, name: str, path: Path | str) -> bool:
        surface = pygame.image.load(str(path))
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        return self.add_bitmap(name, surface)

    def load_directory(self, directory: Path | str) -> int:
        """Load every image in ``directory`` keyed by file stem. Returns the count added."""
        added = 0
        for path in sorted(Path(directory).iterdir()):
            if path.suffix.lower() in IMAGE_SUFFIXES and self.load_bitmap(path.stem, path):
                added += 1
        logger.info("loaded %d bitmaps from %s", added, directory)
        return added

    def get_bitmap(self, name: str) -> pygame.Surface:
        try:
            return self._bitmaps[name]
        except KeyError:
            raise MissingBitmapError(name) from None
