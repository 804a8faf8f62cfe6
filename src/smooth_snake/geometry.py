"""Planar value types shared by the simulation: points and rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """A 2D point or vector in screen coordinates (y grows downward)."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vector2 | float) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        return Vector2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def length(self) -> float:
        """Return the Euclidean norm."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2:
        """Return the unit vector pointing the same way.

        Raises ``ValueError`` for a zero-length vector.
        """
        norm = self.length()
        if norm == 0.0:
            raise ValueError("Cannot normalize a zero-length vector.")
        return Vector2(self.x / norm, self.y / norm)

    def to_tuple(self) -> tuple[float, float]:
        return self.x, self.y


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle anchored at its top-left corner."""

    x: float
    y: float
    w: float
    h: float

    def __post_init__(self) -> None:
        if self.w < 0 or self.h < 0:
            raise ValueError("Rect width and height must be non-negative.")

    @classmethod
    def from_center(cls, center: Vector2, size: float) -> Rect:
        """Build a square of side *size* centered on *center*."""
        half = size / 2
        return cls(center.x - half, center.y - half, size, size)

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center(self) -> Vector2:
        return Vector2(self.x + self.w / 2, self.y + self.h / 2)

    def intersects(self, other: Rect) -> bool:
        """Strict overlap test; rectangles that only touch do not intersect."""
        return (
            self.left < other.right
            and self.right > other.left
            and self.top < other.bottom
            and self.bottom > other.top
        )

    def intersection_area(self, other: Rect) -> float:
        """Return the area shared with *other*, or 0.0 if there is none."""
        if not self.intersects(other):
            return 0.0
        width = min(self.right, other.right) - max(self.left, other.left)
        height = min(self.bottom, other.bottom) - max(self.top, other.top)
        return width * height

    def to_dict(self) -> dict:
        """Serialize rectangle to a dictionary."""
        return {"x": self.x, "y": self.y, "w": self.w, "h": self.h}
