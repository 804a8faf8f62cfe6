"""Snake body: an ordered run of segments and the movement algorithm."""

from __future__ import annotations

from collections import deque
from itertools import islice

from smooth_snake.config import DEFAULT_CONFIG, GameConfig
from smooth_snake.direction import Direction
from smooth_snake.geometry import Rect, Vector2
from smooth_snake.segment import Line, Segment, Turn


class BodyInvariantError(RuntimeError):
    """Raised when a move would leave the body without any segment."""


class Body:
    """A snake made of straight and curved segments.

    The head is ``segments[0]``; the tail is ``segments[-1]``. Moving grows
    the head first and then shrinks the tail by the same distance, so the
    total length stays constant and the body never disconnects.
    """

    def __init__(
        self,
        origin: Vector2,
        config: GameConfig = DEFAULT_CONFIG,
    ) -> None:
        self.config = config
        half = config.start_height / 2
        self.segments: deque[Segment] = deque([
            Line(
                Vector2(origin.x, origin.y - half),
                Vector2(origin.x, origin.y + half),
                Direction.DOWN,
                config,
            ),
        ])
        self.heading = Direction.DOWN

    @property
    def head(self) -> Segment:
        """Return the front segment."""
        return self.segments[0]

    @property
    def tail(self) -> Segment:
        """Return the back segment."""
        return self.segments[-1]

    def set_heading(self, direction: Direction) -> None:
        """Change the heading; the matching Turn is added on the next grow."""
        self.heading = direction

    def length(self) -> float:
        """Total traversable length of all segments."""
        return sum(segment.length() for segment in self.segments)

    def move(self, distance: float) -> None:
        """Move forward by *distance* without changing the length."""
        self.grow(distance)
        self.shrink(distance)

    def grow(self, distance: float) -> None:
        """Extend the head by *distance*.

        A Turn is inserted when the heading differs from the front
        segment's direction, and a fresh Line follows whenever the front
        segment cannot absorb the remaining distance.
        """
        front = self.head
        if front.direction() != self.heading:
            front = Turn(front.end(), front.direction(), self.heading, config=self.config)
            self.segments.appendleft(front)

        leftover = front.grow(distance)
        while leftover > 0:
            front = Line.starting_at(front.end(), front.direction(), self.config)
            self.segments.appendleft(front)
            leftover = front.grow(leftover)

    def shrink(self, distance: float) -> None:
        """Retract the tail by *distance*, dropping exhausted segments."""
        leftover = self.tail.shrink(distance)
        while leftover > 0:
            if len(self.segments) == 1:
                raise BodyInvariantError(
                    f"Shrinking by {distance} would consume the whole body."
                )
            self.segments.pop()
            leftover = self.tail.shrink(leftover)

    def collides_with(self, rect: Rect) -> bool:
        """Check whether any segment overlaps *rect*."""
        return any(segment.overlaps(rect) for segment in self.segments)

    def head_collides_with_wall(self, bounds: Rect | None = None) -> bool:
        """Check whether the head left *bounds* by more than the wall margin."""
        if bounds is None:
            bounds = self.config.field_rect
        margin = self.config.wall_margin
        head = self.head.bounding_box()
        return (
            head.left < bounds.left - margin
            or head.top < bounds.top - margin
            or head.bottom > bounds.bottom + margin
            or head.right > bounds.right + margin
        )

    def self_collides(self) -> bool:
        """Check whether the head overlaps any other segment."""
        head = self.head
        return any(
            head.overlaps(segment.bounding_box())
            for segment in islice(self.segments, 1, None)
        )

    def to_dict(self) -> dict:
        """Serialize body state to a dictionary."""
        return {
            "heading": self.heading.name,
            "length": self.length(),
            "segments": [segment.to_dict() for segment in self.segments],
        }
