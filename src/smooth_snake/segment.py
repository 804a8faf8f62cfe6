"""Straight and curved pieces the snake body is built from."""

from __future__ import annotations

import abc
import enum
import math
from dataclasses import dataclass, field

from smooth_snake.config import DEFAULT_CONFIG, GameConfig
from smooth_snake.direction import Direction
from smooth_snake.geometry import Rect, Vector2

# Tolerance for the straightness check on Line endpoints.
_AXIS_TOLERANCE = 1e-6


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def _check_distance(distance: float) -> None:
    if distance < 0:
        raise ValueError("Segment distances must be non-negative.")


class TurnType(enum.Enum):
    """Which quarter of a circle a 90° turn occupies."""

    UP_RIGHT = "up_right"
    UP_LEFT = "up_left"
    DOWN_RIGHT = "down_right"
    DOWN_LEFT = "down_left"

    @classmethod
    def from_dirs(cls, in_dir: Direction, out_dir: Direction) -> TurnType:
        """Derive the quadrant from the entry and exit directions."""
        try:
            return _TURN_TYPES[(in_dir, out_dir)]
        except KeyError:
            raise ValueError(
                f"{in_dir.name} -> {out_dir.name} is not a 90° turn."
            ) from None

    def arc_bounds(self) -> tuple[float, float]:
        """Return the (start, end) angles of the arc, in degrees."""
        start = _ARC_START[self]
        return start, start + 90.0

    def arc_translation(self) -> Vector2:
        """Offset of the arc centre, in units of the outer radius."""
        return _ARC_TRANSLATION[self]


_TURN_TYPES: dict[tuple[Direction, Direction], TurnType] = {
    (Direction.LEFT, Direction.UP): TurnType.DOWN_RIGHT,
    (Direction.DOWN, Direction.RIGHT): TurnType.DOWN_RIGHT,
    (Direction.DOWN, Direction.LEFT): TurnType.DOWN_LEFT,
    (Direction.RIGHT, Direction.UP): TurnType.DOWN_LEFT,
    (Direction.RIGHT, Direction.DOWN): TurnType.UP_LEFT,
    (Direction.UP, Direction.LEFT): TurnType.UP_LEFT,
    (Direction.UP, Direction.RIGHT): TurnType.UP_RIGHT,
    (Direction.LEFT, Direction.DOWN): TurnType.UP_RIGHT,
}

_ARC_START: dict[TurnType, float] = {
    TurnType.DOWN_LEFT: 0.0,
    TurnType.DOWN_RIGHT: 90.0,
    TurnType.UP_RIGHT: 180.0,
    TurnType.UP_LEFT: 270.0,
}

_ARC_TRANSLATION: dict[TurnType, Vector2] = {
    TurnType.DOWN_RIGHT: Vector2(0.5, -0.5),
    TurnType.DOWN_LEFT: Vector2(-0.5, -0.5),
    TurnType.UP_LEFT: Vector2(-0.5, 0.5),
    TurnType.UP_RIGHT: Vector2(0.5, 0.5),
}


class Segment(abc.ABC):
    """Common contract of every body piece.

    ``grow`` extends the head end, ``shrink`` retracts the tail end; both
    return the distance they could not absorb so the caller can pass it on
    to the neighbouring segment.
    """

    config: GameConfig

    @abc.abstractmethod
    def grow(self, distance: float) -> float:
        """Extend the head end and return the unabsorbed distance."""

    @abc.abstractmethod
    def shrink(self, distance: float) -> float:
        """Retract the tail end and return the unabsorbed distance."""

    @abc.abstractmethod
    def end(self) -> Vector2:
        """Point where the next grown segment attaches."""

    @abc.abstractmethod
    def direction(self) -> Direction:
        """Direction a segment attached at :meth:`end` continues in."""

    @abc.abstractmethod
    def bounding_box(self) -> Rect:
        """Axis-aligned footprint used for drawing and collisions."""

    @abc.abstractmethod
    def length(self) -> float:
        """Traversable length currently covered by the segment."""

    @abc.abstractmethod
    def to_dict(self) -> dict:
        """Serialize segment state to a dictionary."""

    def overlaps(self, other: Rect) -> bool:
        """Check for a collision with *other*.

        Touching edges and slivers below ``collision_area_margin`` do not
        count.
        """
        area = self.bounding_box().intersection_area(other)
        return area > 0.0 and area >= self.config.collision_area_margin


@dataclass
class Line(Segment):
    """Straight segment running from ``beg`` (tail side) to ``end``."""

    beg: Vector2
    end_pos: Vector2
    dir: Direction
    config: GameConfig = field(default=DEFAULT_CONFIG, repr=False, compare=False)

    def __post_init__(self) -> None:
        delta = self.end_pos - self.beg
        across = delta.x if self.dir.is_vertical else delta.y
        if not math.isclose(across, 0.0, abs_tol=_AXIS_TOLERANCE):
            raise ValueError("Line endpoints must share the cross-axis coordinate.")
        unit = self.dir.as_vector()
        along = delta.x * unit.x + delta.y * unit.y
        if along < -_AXIS_TOLERANCE:
            raise ValueError("Line end must lie ahead of its beginning.")

    @classmethod
    def starting_at(
        cls, pos: Vector2, dir: Direction, config: GameConfig = DEFAULT_CONFIG,
    ) -> Line:
        """Create a zero-length line at *pos* pointing in *dir*."""
        return cls(pos, pos, dir, config)

    def size(self) -> float:
        """Return the current length along the line's axis."""
        if self.dir.is_vertical:
            return abs(self.end_pos.y - self.beg.y)
        return abs(self.end_pos.x - self.beg.x)

    def grow(self, distance: float) -> float:
        _check_distance(distance)
        self.end_pos = self.end_pos + self.dir.as_vector() * distance
        return 0.0

    def shrink(self, distance: float) -> float:
        _check_distance(distance)
        size = self.size()
        absorbed = min(distance, size)
        self.beg = self.beg + self.dir.as_vector() * absorbed
        return _clamp(distance - size, 0.0, distance)

    def end(self) -> Vector2:
        return self.end_pos

    def direction(self) -> Direction:
        return self.dir

    def length(self) -> float:
        return self.size()

    def bounding_box(self) -> Rect:
        half = self.config.half_width
        width = self.config.segment_width
        size = self.size()
        if self.dir is Direction.UP:
            return Rect(self.end_pos.x - half, self.end_pos.y, width, size)
        if self.dir is Direction.DOWN:
            return Rect(self.end_pos.x - half, self.beg.y, width, size)
        if self.dir is Direction.LEFT:
            return Rect(self.end_pos.x, self.end_pos.y - half, size, width)
        return Rect(self.beg.x, self.end_pos.y - half, size, width)

    def to_dict(self) -> dict:
        return {
            "kind": "line",
            "beg": list(self.beg.to_tuple()),
            "end": list(self.end_pos.to_tuple()),
            "dir": self.dir.name,
        }


@dataclass
class Turn(Segment):
    """Quarter-circle segment joining two perpendicular lines.

    ``pos`` is the end point of the segment it grew out of. ``percentage``
    tracks how much of the arc is covered: it rises while the head grows
    through the turn and falls again once the tail retracts over it.
    """

    pos: Vector2
    in_dir: Direction
    out_dir: Direction
    percentage: float = 0.0
    is_growing: bool = True
    config: GameConfig = field(default=DEFAULT_CONFIG, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.in_dir.is_colinear(self.out_dir):
            raise ValueError(
                f"Turn directions must be perpendicular, got "
                f"{self.in_dir.name} and {self.out_dir.name}."
            )
        if not 0.0 <= self.percentage <= 1.0:
            raise ValueError("Turn percentage must lie in [0, 1].")

    @property
    def turn_type(self) -> TurnType:
        return TurnType.from_dirs(self.in_dir, self.out_dir)

    def grow(self, distance: float) -> float:
        _check_distance(distance)
        if not self.is_growing or self.percentage >= 1.0:
            return distance

        width = self.config.segment_width
        leftover = _clamp(distance - (1.0 - self.percentage) * width, 0.0, distance)
        self.percentage = _clamp(self.percentage + distance / width, 0.0, 1.0)
        self.is_growing = self.percentage < 1.0
        return leftover

    def shrink(self, distance: float) -> float:
        _check_distance(distance)
        if self.percentage <= 0.0:
            return distance

        width = self.config.segment_width
        leftover = _clamp(distance - self.percentage * width, 0.0, distance)
        self.percentage = _clamp(self.percentage - distance / width, 0.0, 1.0)
        return leftover

    def end(self) -> Vector2:
        half = self.config.half_width
        return (
            self.pos
            + self.in_dir.as_vector() * half
            + self.out_dir.as_vector() * half
        )

    def direction(self) -> Direction:
        return self.out_dir

    def length(self) -> float:
        return self.percentage * self.config.segment_width

    def bounding_box(self) -> Rect:
        half = self.config.half_width
        width = self.config.segment_width
        if self.in_dir is Direction.UP:
            x, y = self.pos.x - half, self.pos.y - width
        elif self.in_dir is Direction.DOWN:
            x, y = self.pos.x - half, self.pos.y
        elif self.in_dir is Direction.LEFT:
            x, y = self.pos.x - width, self.pos.y - half
        else:
            x, y = self.pos.x, self.pos.y - half
        return Rect(x, y, width, width)

    def to_dict(self) -> dict:
        return {
            "kind": "turn",
            "pos": list(self.pos.to_tuple()),
            "in_dir": self.in_dir.name,
            "out_dir": self.out_dir.name,
            "percentage": self.percentage,
            "is_growing": self.is_growing,
        }
