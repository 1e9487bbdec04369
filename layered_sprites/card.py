"""A playing card drawn as a stack of overlapping images.

The card body (base) is just another layer with offset (0, 0) and scale (1, 1);
the portrait sits underneath it and shows through the base's transparent window,
and two digit overlays for attack and health are painted on top.
"""

from __future__ import annotations

from .assets import AssetStore
from .clock import ElapsedTime
from .entity import Entity
from .layers import DIGIT_MAX, DIGIT_MIN, DigitBitmaps, Layer, check_digit
from .renderer import CompositeRenderer, RenderTarget
from .viewport import LayerViewport, ScreenViewport

DEFAULT_CARD_WIDTH = 180.0
DEFAULT_CARD_HEIGHT = 260.0

BASE_BITMAP = "CardBackground"
PORTRAIT_BITMAP = "CardPortrait"

# Offsets and scales are fractions of the card's half-extent.
PORTRAIT_OFFSET = (0.0, 0.3)
PORTRAIT_SCALE = (0.55, 0.55)
ATTACK_OFFSET = (-0.68, -0.84)
ATTACK_SCALE = (0.1, 0.1)
HEALTH_OFFSET = (0.72, -0.84)
HEALTH_SCALE = (0.1, 0.1)

DEFAULT_ATTACK = 1
DEFAULT_HEALTH = 2


def digit_bitmap_name(value: int) -> str:
    return str(value)


class Card(Entity):
    def __init__(
        self,
        x: float,
        y: float,
        assets: AssetStore,
        *,
        width: float = DEFAULT_CARD_WIDTH,
        height: float = DEFAULT_CARD_HEIGHT,
        renderer: CompositeRenderer | None = None,
    ) -> None:
        super().__init__(x, y, width, height)
        self._renderer = renderer or CompositeRenderer()

        # Any missing asset propagates as MissingBitmapError.
        base = assets.get_bitmap(BASE_BITMAP)
        portrait = assets.get_bitmap(PORTRAIT_BITMAP)
        self._digits = DigitBitmaps(
            [assets.get_bitmap(digit_bitmap_name(d)) for d in range(DIGIT_MIN, DIGIT_MAX + 1)]
        )

        self._attack = DEFAULT_ATTACK
        self._health = DEFAULT_HEALTH

        self._portrait_layer = Layer("portrait", portrait, PORTRAIT_OFFSET, PORTRAIT_SCALE)
        self._base_layer = Layer("base", base)
        self._attack_layer = Layer("attack", self._digits[self._attack], ATTACK_OFFSET, ATTACK_SCALE)
        self._health_layer = Layer("health", self._digits[self._health], HEALTH_OFFSET, HEALTH_SCALE)

    @property
    def layers(self) -> tuple[Layer, ...]:
        """Layers in paint order."""
        return (self._portrait_layer, self._base_layer, self._attack_layer, self._health_layer)

    @property
    def attack_value(self) -> int:
        return self._attack

    @property
    def health_value(self) -> int:
        return self._health

    def set_attack_value(self, value: int) -> None:
        self._attack = check_digit(value)
        self._attack_layer.bitmap = self._digits[self._attack]

    def set_health_value(self, value: int) -> None:
        self._health = check_digit(value)
        self._health_layer.bitmap = self._digits[self._health]

    def draw(
        self,
        elapsed: ElapsedTime,
        target: RenderTarget,
        layer_viewport: LayerViewport,
        screen_viewport: ScreenViewport,
    ) -> int:
        _ = elapsed
        return self._renderer.draw(self, self.layers, target, layer_viewport, screen_viewport)
