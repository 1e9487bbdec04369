from __future__ import annotations

import pygame

from .geometry import PixelRect
from .renderer import DrawTransform


class PygameRenderTarget:
    """Applies a DrawTransform to a source sub-rect and blits onto a surface.

    ``pygame.transform.rotate`` is counter-clockwise positive, so the
    clockwise orientation is negated here. The rotated image is centred on
    where the transform maps the source rect's centre.
    """

    def __init__(self, surface: pygame.Surface, *, smooth: bool = True) -> None:
        self._surface = surface
        self._smooth = smooth
        self.submitted = 0

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    def draw_bitmap(self, bitmap: pygame.Surface, source: PixelRect, transform: DrawTransform) -> None:
        src = pygame.Rect(source.as_int_tuple()).clip(bitmap.get_rect())
        if src.w <= 0 or src.h <= 0:
            return

        # Sized from the unrounded source so a fractional rect still fills its destination.
        dest_w = int(round(source.width * transform.scale_x))
        dest_h = int(round(source.height * transform.scale_y))
        if dest_w <= 0 or dest_h <= 0:
            return

        # subsurface shares pixels with the asset; scaling returns a new surface.
        image = bitmap.subsurface(src)
        if self._smooth and image.get_bitsize() in (24, 32):
            image = pygame.transform.smoothscale(image, (dest_w, dest_h))
        else:
            image = pygame.transform.scale(image, (dest_w, dest_h))

        if transform.rotation_deg % 360.0 != 0.0:
            image = pygame.transform.rotate(image, -transform.rotation_deg)

        center = transform.apply(source.width / 2.0, source.height / 2.0)
        self._surface.blit(image, image.get_rect(center=(round(center[0]), round(center[1]))))
        self.submitted += 1
