from __future__ import annotations

import math

from .clock import ElapsedTime
from .geometry import BoundingBox, Vector2


class Entity:
    """Physical anchor shared by every layer of a composite sprite.

    Position is the centre in layer units, orientation is in degrees with
    positive meaning clockwise on screen. ``update`` integrates velocity and
    angular velocity; a resting entity (all zero) never moves.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        *,
        orientation: float = 0.0,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self.position = Vector2(float(x), float(y))
        self.orientation = float(orientation)
        self.half_width = width / 2.0
        self.half_height = height / 2.0

        self.velocity = Vector2()
        self.acceleration = Vector2()
        self.max_velocity = math.inf
        self.max_acceleration = math.inf

        self.angular_velocity = 0.0
        self.angular_acceleration = 0.0
        self.max_angular_velocity = math.inf
        self.max_angular_acceleration = math.inf

    @property
    def half_extent(self) -> tuple[float, float]:
        return (self.half_width, self.half_height)

    @property
    def bound(self) -> BoundingBox:
        return BoundingBox(self.position.x, self.position.y, self.half_width, self.half_height)

    def update(self, elapsed: ElapsedTime) -> None:
        dt = elapsed.step_s

        if self.acceleration.length_squared() > self.max_acceleration**2:
            self.acceleration.normalise()
            self.acceleration.scale(self.max_acceleration)

        self.velocity.add(self.acceleration.x * dt, self.acceleration.y * dt)
        if self.velocity.length_squared() > self.max_velocity**2:
            self.velocity.normalise()
            self.velocity.scale(self.max_velocity)

        self.position.add(self.velocity.x * dt, self.velocity.y * dt)

        self.angular_acceleration = _clamp_abs(self.angular_acceleration, self.max_angular_acceleration)
        self.angular_velocity = _clamp_abs(
            self.angular_velocity + self.angular_acceleration * dt,
            self.max_angular_velocity,
        )
        self.orientation += self.angular_velocity * dt


def _clamp_abs(value: float, limit: float) -> float:
    if value > limit:
        return limit
    if value < -limit:
        return -limit
    return value
