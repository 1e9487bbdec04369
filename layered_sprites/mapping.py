"""Layer-space bound -> bitmap source rect + screen destination rect.

Both functions are pure: they only compute rectangles and return ``None`` when
the bound is not visible through the layer viewport, in which case the caller
skips drawing.
"""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import BoundingBox, PixelRect
from .viewport import LayerViewport, ScreenViewport, screen_scale


@dataclass(frozen=True, slots=True)
class MappedRects:
    source: PixelRect  # bitmap pixels
    screen: PixelRect  # device pixels


def source_and_screen_rect(
    bound: BoundingBox,
    bitmap_width: int,
    bitmap_height: int,
    layer_viewport: LayerViewport,
    screen_viewport: ScreenViewport,
) -> MappedRects | None:
    """Map the visible part of ``bound`` onto the bitmap and the screen.

    The source rect is the sub-region of the bitmap covering the overlap
    between ``bound`` and the layer viewport (the whole bitmap when the bound
    is fully visible). The screen rect is that overlap mapped linearly from
    the layer viewport into the screen viewport.
    """
    if bitmap_width <= 0 or bitmap_height <= 0:
        return None
    if not layer_viewport.intersects(bound):
        return None

    overlap_left = max(bound.left, layer_viewport.left)
    overlap_right = min(bound.right, layer_viewport.right)
    overlap_top = min(bound.top, layer_viewport.top)
    overlap_bottom = max(bound.bottom, layer_viewport.bottom)

    overlap_w = overlap_right - overlap_left
    overlap_h = overlap_top - overlap_bottom
    if overlap_w <= 0.0 or overlap_h <= 0.0:
        return None

    # Bitmap pixels per layer unit for this bound.
    src_sx = bitmap_width / bound.width
    src_sy = bitmap_height / bound.height
    source = PixelRect(
        left=(overlap_left - bound.left) * src_sx,
        top=(bound.top - overlap_top) * src_sy,
        width=overlap_w * src_sx,
        height=overlap_h * src_sy,
    )

    sx, sy = screen_scale(layer_viewport, screen_viewport)
    screen = PixelRect(
        left=screen_viewport.left + sx * (overlap_left - layer_viewport.left),
        top=screen_viewport.top + sy * (layer_viewport.top - overlap_top),
        width=overlap_w * sx,
        height=overlap_h * sy,
    )
    return MappedRects(source=source, screen=screen)


def full_source_and_screen_rect(
    bound: BoundingBox,
    bitmap_width: int,
    bitmap_height: int,
    layer_viewport: LayerViewport,
    screen_viewport: ScreenViewport,
) -> MappedRects | None:
    """Unclipped variant: whole bitmap, screen rect may spill past the viewport."""
    if bitmap_width <= 0 or bitmap_height <= 0:
        return None
    if not layer_viewport.intersects(bound):
        return None

    sx, sy = screen_scale(layer_viewport, screen_viewport)
    return MappedRects(
        source=PixelRect(0.0, 0.0, float(bitmap_width), float(bitmap_height)),
        screen=PixelRect(
            left=screen_viewport.left + sx * (bound.left - layer_viewport.left),
            top=screen_viewport.top + sy * (layer_viewport.top - bound.top),
            width=bound.width * sx,
            height=bound.height * sy,
        ),
    )
