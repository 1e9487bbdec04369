"""Composite renderer: draws an entity's layers in order through a render target."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from .entity import Entity
from .geometry import PixelRect
from .layers import Bitmap, Layer
from .mapping import source_and_screen_rect
from .offset_transform import layer_bound
from .viewport import LayerViewport, ScreenViewport

logger = logging.getLogger(__name__)

Matrix3 = tuple[tuple[float, float, float], tuple[float, float, float], tuple[float, float, float]]


@dataclass(frozen=True, slots=True)
class DrawTransform:
    """Scale, then rotate about ``pivot``, then translate; all in screen pixels.

    Rotation is clockwise-positive on the y-down screen. The pivot is expressed
    in the scaled (pre-translation) frame, i.e. the centre of the scaled source.
    """

    scale_x: float
    scale_y: float
    rotation_deg: float
    pivot_x: float
    pivot_y: float
    translate_x: float
    translate_y: float

    def apply(self, x: float, y: float) -> tuple[float, float]:
        sx = x * self.scale_x - self.pivot_x
        sy = y * self.scale_y - self.pivot_y
        r = math.radians(self.rotation_deg)
        c = math.cos(r)
        s = math.sin(r)
        return (
            sx * c - sy * s + self.pivot_x + self.translate_x,
            sx * s + sy * c + self.pivot_y + self.translate_y,
        )

    def as_matrix(self) -> Matrix3:
        r = math.radians(self.rotation_deg)
        c = math.cos(r)
        s = math.sin(r)
        tx = self.pivot_x - c * self.pivot_x + s * self.pivot_y + self.translate_x
        ty = self.pivot_y - s * self.pivot_x - c * self.pivot_y + self.translate_y
        return (
            (c * self.scale_x, -s * self.scale_y, tx),
            (s * self.scale_x, c * self.scale_y, ty),
            (0.0, 0.0, 1.0),
        )


class RenderTarget(Protocol):
    def draw_bitmap(self, bitmap: Bitmap, source: PixelRect, transform: DrawTransform) -> None: ...


@dataclass(frozen=True, slots=True)
class DrawCommand:
    layer: str
    bitmap: Bitmap
    source: PixelRect
    screen: PixelRect
    transform: DrawTransform


def build_transform(source: PixelRect, screen: PixelRect, orientation_deg: float) -> DrawTransform:
    scale_x = screen.width / source.width
    scale_y = screen.height / source.height
    return DrawTransform(
        scale_x=scale_x,
        scale_y=scale_y,
        rotation_deg=orientation_deg,
        pivot_x=scale_x * source.width / 2.0,
        pivot_y=scale_y * source.height / 2.0,
        translate_x=screen.left,
        translate_y=screen.top,
    )


class CompositeRenderer:
    """Maps each layer of an entity to the screen and submits it in declared order."""

    def plan(
        self,
        entity: Entity,
        layers: Sequence[Layer],
        layer_viewport: LayerViewport,
        screen_viewport: ScreenViewport,
    ) -> list[DrawCommand]:
        position = (entity.position.x, entity.position.y)
        commands: list[DrawCommand] = []
        for layer in layers:
            bound = layer_bound(position, entity.orientation, entity.half_extent, layer.offset, layer.scale)
            mapped = source_and_screen_rect(
                bound,
                layer.bitmap.get_width(),
                layer.bitmap.get_height(),
                layer_viewport,
                screen_viewport,
            )
            if mapped is None:
                logger.debug("layer %s not visible at %s", layer.name, bound)
                continue
            commands.append(
                DrawCommand(
                    layer=layer.name,
                    bitmap=layer.bitmap,
                    source=mapped.source,
                    screen=mapped.screen,
                    transform=build_transform(mapped.source, mapped.screen, entity.orientation),
                )
            )
        return commands

    def draw(
        self,
        entity: Entity,
        layers: Sequence[Layer],
        target: RenderTarget,
        layer_viewport: LayerViewport,
        screen_viewport: ScreenViewport,
    ) -> int:
        """Submit every visible layer; return the number of submissions."""
        commands = self.plan(entity, layers, layer_viewport, screen_viewport)
        for cmd in commands:
            target.draw_bitmap(cmd.bitmap, cmd.source, cmd.transform)
        return len(commands)
