"""Basic value types shared by the game: vectors, rectangles, colours and flags."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntFlag


def sign(value: float) -> int:
    """Return -1, 0 or 1 following the sign of ``value``."""
    if value == 0:
        return 0
    return -1 if value < 0 else 1


@dataclass(frozen=True)
class Vector2:
    """A two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def scale(self, factor: float) -> Vector2:
        """Return the vector multiplied by ``factor``."""
        return Vector2(self.x * factor, self.y * factor)

    def dot(self, other: Vector2) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def normalize(self) -> Vector2:
        """Return a unit vector in the same direction; a zero vector stays zero."""
        length = math.hypot(self.x, self.y)
        if length > 0:
            return Vector2(self.x / length, self.y / length)
        return self

    def lerp(self, other: Vector2, amount: float) -> Vector2:
        """Interpolate linearly towards ``other``."""
        return Vector2(
            self.x + amount * (other.x - self.x),
            self.y + amount * (other.y - self.y),
        )


VECTOR2_ZERO = Vector2(0.0, 0.0)


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, other: Rectangle) -> bool:
        """Whether ``other`` lies entirely within this rectangle."""
        return (
            other.left >= self.left
            and other.right <= self.right
            and other.top >= self.top
            and other.bottom <= self.bottom
        )

    def intersects(self, other: Rectangle) -> bool:
        """Whether the two rectangles overlap; touching edges do not count."""
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )

    def overlap(self, other: Rectangle) -> Rectangle:
        """Return the shared region, or an empty rectangle if there is none."""
        if not self.intersects(other):
            return Rectangle()
        left = max(self.left, other.left)
        right = min(self.right, other.right)
        top = max(self.top, other.top)
        bottom = min(self.bottom, other.bottom)
        return Rectangle(left, top, right - left, bottom - top)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def multiply(self, alpha: float) -> Color:
        """Scale every channel, alpha included, by ``alpha``."""
        return Color(
            int(self.r * alpha),
            int(self.g * alpha),
            int(self.b * alpha),
            int(self.a * alpha),
        )


COLOR_TRANSPARENT = Color(0, 0, 0, 0)
COLOR_BLACK = Color(0, 0, 0, 255)
COLOR_WHITE = Color(255, 255, 255, 255)
COLOR_RED = Color(255, 0, 0, 255)
COLOR_GREEN = Color(0, 255, 0, 255)
COLOR_BLUE = Color(0, 0, 255, 255)


class Ordering(Enum):
    LESS = 0
    EQUAL = 1
    GREATER = 2


class Direction(IntFlag):
    NONE = 0
    LEFT = 1 << 0
    UP = 1 << 1
    RIGHT = 1 << 2
    DOWN = 1 << 3


class Reflection(IntFlag):
    NONE = 0
    REVERSE_X_AXIS = 1 << 0
    REVERSE_Y_AXIS = 1 << 1