"""Small value types shared by the mapping and rendering code.

Layer space is y-up (``top = y + half_height``); pixel space (bitmaps and the
screen) is y-down with a top-left origin.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(slots=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def set(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def add(self, x: float, y: float) -> None:
        self.x += x
        self.y += y

    def scale(self, factor: float) -> None:
        self.x *= factor
        self.y *= factor

    def normalise(self) -> None:
        n = self.length()
        if n > 0.0:
            self.x /= n
            self.y /= n


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned box in layer space, stored as centre + half-extents."""

    x: float
    y: float
    half_width: float
    half_height: float

    @property
    def width(self) -> float:
        return self.half_width * 2.0

    @property
    def height(self) -> float:
        return self.half_height * 2.0

    @property
    def left(self) -> float:
        return self.x - self.half_width

    @property
    def right(self) -> float:
        return self.x + self.half_width

    @property
    def top(self) -> float:
        return self.y + self.half_height

    @property
    def bottom(self) -> float:
        return self.y - self.half_height

    def contains(self, x: float, y: float) -> bool:
        return self.left < x < self.right and self.bottom < y < self.top

    def intersects(self, other: BoundingBox) -> bool:
        return (
            self.left < other.right
            and self.right > other.left
            and self.bottom < other.top
            and self.top > other.bottom
        )

    def __str__(self) -> str:
        return f"Pos[{self.x:.1f},{self.y:.1f}],Dim[{self.width:.1f}x{self.height:.1f}]"


@dataclass(frozen=True, slots=True)
class PixelRect:
    """Rectangle in pixel space (y-down). Float so the backend decides rounding."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def as_int_tuple(self) -> tuple[int, int, int, int]:
        left = int(round(self.left))
        top = int(round(self.top))
        return (
            left,
            top,
            max(0, int(round(self.right)) - left),
            max(0, int(round(self.bottom)) - top),
        )


def rotate_offset_about_centre(
    centre: tuple[float, float], offset: tuple[float, float], degrees: float
) -> tuple[float, float]:
    """Rotate ``offset`` (relative to ``centre``) by ``degrees``, clockwise positive.

    The angle is negated before rotating because layer space is y-up while
    orientation is measured clockwise on screen.
    """
    radians = math.radians(-degrees)
    c = math.cos(radians)
    s = math.sin(radians)
    ox, oy = offset
    return (centre[0] + (ox * c - oy * s), centre[1] + (ox * s + oy * c))


def rotate_point_about_centre(
    centre: tuple[float, float], point: tuple[float, float], degrees: float
) -> tuple[float, float]:
    return rotate_offset_about_centre(centre, (point[0] - centre[0], point[1] - centre[1]), degrees)
