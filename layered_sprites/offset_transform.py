from __future__ import annotations

from .geometry import BoundingBox, rotate_offset_about_centre


def rotated_anchor(
    position: tuple[float, float],
    orientation_deg: float,
    half_extent: tuple[float, float],
    offset: tuple[float, float],
) -> tuple[float, float]:
    """Layer-space centre of a sub-layer after rotating its offset with the entity.

    ``offset`` is a fraction of the entity's half-extent in the entity's
    unrotated frame, so (-1, -1) is the bottom-left corner at 0 degrees.
    """
    hw, hh = half_extent
    diff = (hw * offset[0], hh * offset[1])
    return rotate_offset_about_centre(position, diff, orientation_deg)


def layer_bound(
    position: tuple[float, float],
    orientation_deg: float,
    half_extent: tuple[float, float],
    offset: tuple[float, float],
    scale: tuple[float, float],
) -> BoundingBox:
    ax, ay = rotated_anchor(position, orientation_deg, half_extent, offset)
    hw, hh = half_extent
    return BoundingBox(ax, ay, hw * scale[0], hh * scale[1])
