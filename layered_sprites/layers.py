from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol


class Bitmap(Protocol):
    """Read-only image handle. ``pygame.Surface`` satisfies this."""

    def get_width(self) -> int: ...
    def get_height(self) -> int: ...


DIGIT_MIN = 0
DIGIT_MAX = 9


@dataclass(slots=True)
class Layer:
    """One image in a composite entity's stack.

    ``offset`` and ``scale`` are fractions of the owning entity's half-extent.
    The bitmap is borrowed from the asset store; rebinding it is allowed,
    mutating its pixels is not.
    """

    name: str
    bitmap: Bitmap
    offset: tuple[float, float] = (0.0, 0.0)
    scale: tuple[float, float] = (1.0, 1.0)

    def __post_init__(self) -> None:
        if not self.scale[0] > 0 or not self.scale[1] > 0:
            raise ValueError("scale must be > 0")
        self.offset = (float(self.offset[0]), float(self.offset[1]))
        self.scale = (float(self.scale[0]), float(self.scale[1]))


def check_digit(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("digit value must be an int")
    if not (DIGIT_MIN <= value <= DIGIT_MAX):
        raise ValueError(f"digit value must be in [{DIGIT_MIN}, {DIGIT_MAX}]")
    return value


class DigitBitmaps:
    """The ten digit images, looked up by validated value."""

    def __init__(self, bitmaps: Sequence[Bitmap]) -> None:
        if len(bitmaps) != DIGIT_MAX - DIGIT_MIN + 1:
            raise ValueError("bitmaps must hold exactly 10 digit images")
        self._bitmaps = tuple(bitmaps)

    def __getitem__(self, value: int) -> Bitmap:
        return self._bitmaps[check_digit(value)]
