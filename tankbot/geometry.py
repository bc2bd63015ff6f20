"""Board dimensions, 2D vectors, sprite transforms and angle helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

WIDTH = 1024
HEIGHT = 768
GROUND_WIDTH = 64
GROUND_HEIGHT = 64

FIELDS_WIDTH = WIDTH // GROUND_WIDTH
FIELDS_HEIGHT = HEIGHT // GROUND_HEIGHT

PI = 3.14159265358979311600

DEFAULT_PRECISION = 0.001


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def hypot(self) -> float:
        """Length of the vector."""
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    left: float
    top: float
    width: float
    height: float


@dataclass(frozen=True)
class MovementState:
    """Position and heading of a moving object."""

    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0


def _normalize_angle(angle: float) -> float:
    angle = math.fmod(angle, 360.0)
    if angle < 0:
        angle += 360.0
    return angle


class Sprite:
    """A rectangular textured object with origin, position, rotation and scale."""

    def __init__(
        self,
        width: float = 0.0,
        height: float = 0.0,
        *,
        origin: Vector2 | None = None,
        position: Vector2 | None = None,
        rotation: float = 0.0,
        scale: Vector2 | None = None,
    ) -> None:
        self.width = float(width)
        self.height = float(height)
        self.origin = origin if origin is not None else Vector2()
        self.position = position if position is not None else Vector2()
        self.scale = scale if scale is not None else Vector2(1.0, 1.0)
        self._rotation = _normalize_angle(rotation)

    @property
    def rotation(self) -> float:
        """Rotation in degrees, kept within [0, 360)."""
        return self._rotation

    @rotation.setter
    def rotation(self, angle: float) -> None:
        self._rotation = _normalize_angle(angle)

    def local_bounds(self) -> Rect:
        """Bounds of the sprite in its own, untransformed coordinates."""
        return Rect(0.0, 0.0, self.width, self.height)

    def transform_point(self, point: Vector2) -> Vector2:
        """Map a local point to board coordinates."""
        local_x = (point.x - self.origin.x) * self.scale.x
        local_y = (point.y - self.origin.y) * self.scale.y
        radians = math.radians(self._rotation)
        cos, sin = math.cos(radians), math.sin(radians)
        return Vector2(
            local_x * cos - local_y * sin + self.position.x,
            local_x * sin + local_y * cos + self.position.y,
        )

    def move(self, offset: Vector2) -> None:
        """Shift the sprite by an offset."""
        self.position = self.position + offset

    def rotate(self, angle: float) -> None:
        """Add an angle in degrees to the current rotation."""
        self.rotation = self._rotation + angle


def to_radians(degrees: float) -> float:
    return PI / 180.0 * degrees


def to_degrees(radians: float) -> float:
    return radians / PI * 180.0


def approx_equal(lhs: float, rhs: float, precision: float = DEFAULT_PRECISION) -> bool:
    return abs(lhs - rhs) < precision


def vectors_equal(lhs: Vector2, rhs: Vector2, precision: float = DEFAULT_PRECISION) -> bool:
    return approx_equal(lhs.x, rhs.x, precision) and approx_equal(lhs.y, rhs.y, precision)


def get_angle(vec: Vector2) -> float:
    """Heading of a vector in degrees, 0 pointing up and growing clockwise."""
    if vectors_equal(vec, Vector2(0.0, 0.0)):
        return 0.0
    degrees = to_degrees(math.atan2(vec.y, vec.x)) + 90.0
    if degrees < 0:
        return 360.0 + degrees
    return degrees


def get_opposite_angle(angle: float) -> float:
    opposite = angle - 180.0
    if opposite < 0.0:
        opposite += 360.0
    return opposite


def is_sprite_x_in_board(x: float, sprite: Sprite) -> bool:
    bounds = sprite.local_bounds()
    left_offset = abs(sprite.origin.x - bounds.left)
    right_offset = abs(sprite.origin.x - (bounds.left + bounds.width))
    return left_offset < x < WIDTH - right_offset


def is_sprite_y_in_board(y: float, sprite: Sprite) -> bool:
    bounds = sprite.local_bounds()
    top_offset = abs(sprite.origin.y - bounds.top)
    bottom_offset = abs(sprite.origin.y - (bounds.top + bounds.height))
    return top_offset < y < HEIGHT - bottom_offset