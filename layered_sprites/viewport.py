"""Layer (world) and screen (pixel) viewports plus conversions between them."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import BoundingBox


def _check_extent(name: str, value: float) -> None:
    if not value > 0:
        raise ValueError(f"{name} must be > 0")


@dataclass(frozen=True, slots=True)
class LayerViewport:
    """Visible window into layer space: centre plus half-extents (y-up).

    Immutable; move or resize the view by building a new one.
    """

    x: float = 240.0
    y: float = 160.0
    half_width: float = 240.0
    half_height: float = 160.0

    def __post_init__(self) -> None:
        _check_extent("half_width", self.half_width)
        _check_extent("half_height", self.half_height)

    @classmethod
    def from_size(cls, center_x: float, center_y: float, width: float, height: float) -> LayerViewport:
        _check_extent("width", width)
        _check_extent("height", height)
        return cls(float(center_x), float(center_y), width / 2.0, height / 2.0)

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

    def intersects(self, bound: BoundingBox) -> bool:
        return (
            self.left < bound.right
            and self.right > bound.left
            and self.bottom < bound.top
            and self.top > bound.bottom
        )


@dataclass(frozen=True, slots=True)
class ScreenViewport:
    """Pixel rectangle (y-down) that the layer viewport is drawn into."""

    left: int = 0
    top: int = 0
    width: int = 480
    height: int = 320

    def __post_init__(self) -> None:
        _check_extent("width", self.width)
        _check_extent("height", self.height)

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height


def screen_scale(layer_viewport: LayerViewport, screen_viewport: ScreenViewport) -> tuple[float, float]:
    """Pixels per layer unit along x and y."""
    return (
        screen_viewport.width / layer_viewport.width,
        screen_viewport.height / layer_viewport.height,
    )


def layer_to_screen(
    layer_viewport: LayerViewport,
    x: float,
    y: float,
    screen_viewport: ScreenViewport,
) -> tuple[float, float]:
    sx, sy = screen_scale(layer_viewport, screen_viewport)
    return (
        screen_viewport.left + sx * (x - layer_viewport.left),
        screen_viewport.top + sy * (layer_viewport.top - y),
    )


def screen_to_layer(
    screen_viewport: ScreenViewport,
    x: float,
    y: float,
    layer_viewport: LayerViewport,
) -> tuple[float, float]:
    # Ratios in [-0.5, 0.5] across the screen viewport; y flips because layer space is y-up.
    x_ratio = (x - screen_viewport.left) / screen_viewport.width - 0.5
    y_ratio = (screen_viewport.bottom - y) / screen_viewport.height - 0.5
    return (
        layer_viewport.x + 2.0 * x_ratio * layer_viewport.half_width,
        layer_viewport.y + 2.0 * y_ratio * layer_viewport.half_height,
    )


def x_distance_to_screen(distance: float, layer_viewport: LayerViewport, screen_viewport: ScreenViewport) -> float:
    return distance * screen_scale(layer_viewport, screen_viewport)[0]


def y_distance_to_screen(distance: float, layer_viewport: LayerViewport, screen_viewport: ScreenViewport) -> float:
    return distance * screen_scale(layer_viewport, screen_viewport)[1]


def default_layer_viewport() -> LayerViewport:
    """480 x 320 window centred on (240, 160)."""
    return LayerViewport(240.0, 160.0, 240.0, 160.0)


def aspect_fit_screen_viewport(
    screen_width: int, screen_height: int, *, aspect_ratio: float = 1.5
) -> ScreenViewport:
    """Largest centred viewport of the given aspect (3:2 by default) inside the screen."""
    _check_extent("screen_width", screen_width)
    _check_extent("screen_height", screen_height)
    _check_extent("aspect_ratio", aspect_ratio)

    if screen_width / screen_height > aspect_ratio:
        view_width = int(screen_height * aspect_ratio)
        offset = (screen_width - view_width) // 2
        return ScreenViewport(offset, 0, view_width, screen_height)

    view_height = int(screen_width / aspect_ratio)
    offset = (screen_height - view_height) // 2
    return ScreenViewport(0, offset, screen_width, view_height)
