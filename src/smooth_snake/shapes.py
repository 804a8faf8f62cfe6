"""Polygon outlines for drawing body segments.

Front-ends call these to turn segment geometry into vertex arrays; nothing
here depends on a window or graphics context. Every polygon is an
``(N, 2)`` float array of screen coordinates.
"""

from __future__ import annotations

import math

import numpy as np

from smooth_snake.body import Body
from smooth_snake.direction import Direction
from smooth_snake.segment import Line, Segment, Turn, TurnType

# Quadrant-specific centre nudge and the exit direction drawn in reverse.
_TURN_LAYOUT: dict[TurnType, tuple[tuple[float, float], Direction]] = {
    TurnType.DOWN_RIGHT: ((1.0, -1.0), Direction.UP),
    TurnType.DOWN_LEFT: ((-1.0, -1.0), Direction.LEFT),
    TurnType.UP_LEFT: ((-1.0, 1.0), Direction.DOWN),
    TurnType.UP_RIGHT: ((1.0, 1.0), Direction.RIGHT),
}


def line_polygon(line: Line) -> np.ndarray:
    """Return the four corners of a line's bounding box, clockwise."""
    box = line.bounding_box()
    return np.array([
        [box.left, box.top],
        [box.right, box.top],
        [box.right, box.bottom],
        [box.left, box.bottom],
    ], dtype=np.float64)


def arc_points(
    center: np.ndarray,
    radius: float,
    start_deg: float,
    end_deg: float,
    step_deg: float = 1.0,
) -> np.ndarray:
    """Sample a circular arc from *start_deg* to *end_deg* inclusive."""
    count = max(2, math.ceil(abs(end_deg - start_deg) / step_deg) + 1)
    angles = np.radians(np.linspace(start_deg, end_deg, count))
    return center + radius * np.column_stack((np.cos(angles), np.sin(angles)))


def turn_polygon(turn: Turn, step_deg: float = 1.0) -> np.ndarray:
    """Build the quarter-annulus outline covering ``turn.percentage`` of the arc.

    Raises ``ValueError`` for a turn that has not started growing, since
    its arc would be empty.
    """
    if turn.percentage <= 0.0:
        raise ValueError("Cannot build a mesh for a turn with zero coverage.")

    config = turn.config
    turn_type = turn.turn_type
    (mx, my), reversed_dir = _TURN_LAYOUT[turn_type]
    reversed_arc = (turn.out_dir is reversed_dir) != turn.is_growing

    outer_r = config.segment_width + config.turn_margin
    inner_r = config.turn_margin
    pos = turn.pos + turn.in_dir.as_vector() * config.half_width
    translation = turn_type.arc_translation()
    center = np.array([
        pos.x + mx * config.half_turn_margin + translation.x * outer_r,
        pos.y + my * config.half_turn_margin + translation.y * outer_r,
    ])

    start, end = turn_type.arc_bounds()
    sweep = 90.0 * turn.percentage
    if reversed_arc:
        start = end - sweep
    else:
        end = start + sweep

    outer = arc_points(center, outer_r, start, end, step_deg)
    inner = arc_points(center, inner_r, start, end, step_deg)
    return np.concatenate([outer, inner[::-1]])


def eye_positions(
    first: np.ndarray, last: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """Place two eyes along the chord from *first* to *last*.

    The eyes sit a quarter of the chord length to the right of it, at one
    and three quarters of its span.
    """
    first = np.asarray(first, dtype=np.float64)
    chord = np.asarray(last, dtype=np.float64) - first
    length = float(np.hypot(*chord))
    if length == 0.0:
        raise ValueError("Cannot place eyes on a zero-length chord.")
    norm = chord / length
    perpendicular = np.array([norm[1], -norm[0]])
    offset = perpendicular * 0.25 * length
    return first + chord * 0.25 + offset, first + chord * 0.75 + offset


def segment_polygon(segment: Segment) -> np.ndarray | None:
    """Outline for any segment, or ``None`` when there is nothing to draw."""
    if isinstance(segment, Turn):
        if segment.percentage <= 0.0:
            return None
        return turn_polygon(segment)
    if isinstance(segment, Line):
        return line_polygon(segment)
    raise TypeError(f"Unsupported segment type: {type(segment).__name__}")


def body_shapes(body: Body) -> list[np.ndarray]:
    """Outlines for every drawable segment, head first."""
    shapes = []
    for segment in body.segments:
        polygon = segment_polygon(segment)
        if polygon is not None:
            shapes.append(polygon)
    return shapes


def head_eyes(body: Body) -> tuple[np.ndarray, np.ndarray] | None:
    """Eye positions for the head segment, if it is drawable."""
    head = body.head
    if isinstance(head, Turn):
        if head.percentage <= 0.0:
            return None
        polygon = turn_polygon(head)
        return eye_positions(polygon[0], polygon[-1])

    corners = line_polygon(head)
    top_left, top_right, bottom_right, bottom_left = corners
    # Leading edge, ordered so the eyes land inside the box.
    chords = {
        Direction.DOWN: (bottom_left, bottom_right),
        Direction.UP: (top_right, top_left),
        Direction.LEFT: (top_left, bottom_left),
        Direction.RIGHT: (bottom_right, top_right),
    }
    first, last = chords[head.direction()]
    return eye_positions(first, last)
