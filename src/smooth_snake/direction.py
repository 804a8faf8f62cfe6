"""Compass directions the snake can travel in."""

from __future__ import annotations

import enum

from smooth_snake.geometry import Vector2


class Direction(enum.Enum):
    """Cardinal directions with (dx, dy) unit offsets in screen space."""

    UP = (0.0, -1.0)
    DOWN = (0.0, 1.0)
    LEFT = (-1.0, 0.0)
    RIGHT = (1.0, 0.0)

    def inverse(self) -> Direction:
        """Return the direction pointing the opposite way."""
        return _INVERSES[self]

    def is_colinear(self, other: Direction) -> bool:
        """Check whether *other* lies on the same axis."""
        return other is self or other is _INVERSES[self]

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)

    def as_vector(self) -> Vector2:
        """Return the unit vector for this direction."""
        dx, dy = self.value
        return Vector2(dx, dy)


_INVERSES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}
