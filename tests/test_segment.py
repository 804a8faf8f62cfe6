"""Tests for Line and Turn segments."""

import pytest

from smooth_snake.direction import Direction
from smooth_snake.geometry import Rect, Vector2
from smooth_snake.segment import Line, Turn, TurnType


class TestTurnType:
    @pytest.mark.parametrize(("in_dir", "out_dir", "expected"), [
        (Direction.DOWN, Direction.RIGHT, TurnType.DOWN_RIGHT),
        (Direction.LEFT, Direction.UP, TurnType.DOWN_RIGHT),
        (Direction.DOWN, Direction.LEFT, TurnType.DOWN_LEFT),
        (Direction.RIGHT, Direction.UP, TurnType.DOWN_LEFT),
        (Direction.RIGHT, Direction.DOWN, TurnType.UP_LEFT),
        (Direction.UP, Direction.LEFT, TurnType.UP_LEFT),
        (Direction.UP, Direction.RIGHT, TurnType.UP_RIGHT),
        (Direction.LEFT, Direction.DOWN, TurnType.UP_RIGHT),
    ])
    def test_from_dirs(self, in_dir, out_dir, expected):
        assert TurnType.from_dirs(in_dir, out_dir) is expected

    def test_from_dirs_rejects_straight_pairs(self):
        with pytest.raises(ValueError, match="not a 90"):
            TurnType.from_dirs(Direction.UP, Direction.DOWN)

    def test_arc_bounds(self):
        assert TurnType.DOWN_LEFT.arc_bounds() == (0.0, 90.0)
        assert TurnType.UP_LEFT.arc_bounds() == (270.0, 360.0)


class TestLine:
    def test_starting_at_is_empty(self):
        line = Line.starting_at(Vector2(5, 5), Direction.RIGHT)
        assert line.size() == 0
        assert line.end() == Vector2(5, 5)

    def test_grow_absorbs_everything(self):
        line = Line.starting_at(Vector2(0, 0), Direction.UP)
        assert line.grow(12) == 0
        assert line.end() == Vector2(0, -12)
        assert line.size() == 12

    def test_shrink_within_size(self):
        line = Line(Vector2(0, 0), Vector2(10, 0), Direction.RIGHT)
        assert line.shrink(4) == 0
        assert line.beg == Vector2(4, 0)
        assert line.size() == 6

    def test_shrink_beyond_size_returns_leftover(self):
        line = Line(Vector2(0, 0), Vector2(0, 5), Direction.DOWN)
        assert line.shrink(15) == 10
        assert line.size() == 0

    def test_negative_distance_rejected(self):
        line = Line.starting_at(Vector2(0, 0), Direction.UP)
        with pytest.raises(ValueError, match="non-negative"):
            line.grow(-1)
        with pytest.raises(ValueError, match="non-negative"):
            line.shrink(-1)

    def test_diagonal_line_rejected(self):
        with pytest.raises(ValueError, match="cross-axis"):
            Line(Vector2(0, 0), Vector2(3, 4), Direction.DOWN)

    def test_backwards_line_rejected(self):
        with pytest.raises(ValueError, match="ahead"):
            Line(Vector2(0, 10), Vector2(0, 0), Direction.DOWN)

    @pytest.mark.parametrize(("beg", "end", "direction", "expected"), [
        (Vector2(100, 100), Vector2(100, 140), Direction.DOWN, Rect(90, 100, 20, 40)),
        (Vector2(100, 140), Vector2(100, 100), Direction.UP, Rect(90, 100, 20, 40)),
        (Vector2(140, 100), Vector2(100, 100), Direction.LEFT, Rect(100, 90, 40, 20)),
        (Vector2(100, 100), Vector2(140, 100), Direction.RIGHT, Rect(100, 90, 40, 20)),
    ])
    def test_bounding_box(self, beg, end, direction, expected):
        assert Line(beg, end, direction).bounding_box() == expected


class TestTurnGrowth:
    def test_grow_advances_percentage(self):
        turn = Turn(Vector2(0, 0), Direction.DOWN, Direction.LEFT)
        assert turn.grow(5) == 0
        assert turn.percentage == 0.25
        assert turn.is_growing

    def test_grow_past_completion_returns_leftover(self):
        turn = Turn(Vector2(0, 0), Direction.DOWN, Direction.LEFT, percentage=0.75)
        assert turn.grow(10) == 5
        assert turn.percentage == 1.0
        assert not turn.is_growing

    def test_completed_turn_absorbs_nothing(self):
        turn = Turn(Vector2(0, 0), Direction.DOWN, Direction.LEFT)
        turn.grow(20)
        assert turn.grow(7) == 7
        assert turn.percentage == 1.0

    def test_percentage_is_monotonic(self):
        turn = Turn(Vector2(0, 0), Direction.UP, Direction.RIGHT)
        previous = turn.percentage
        for _ in range(10):
            turn.grow(3)
            assert previous <= turn.percentage <= 1.0
            previous = turn.percentage
        assert turn.percentage == 1.0
        assert not turn.is_growing

    def test_length_tracks_percentage(self):
        turn = Turn(Vector2(0, 0), Direction.UP, Direction.RIGHT, percentage=0.5)
        assert turn.length() == 10


class TestTurnShrink:
    def test_shrink_within_coverage(self):
        turn = Turn(Vector2(0, 0), Direction.DOWN, Direction.LEFT,
                    percentage=1.0, is_growing=False)
        assert turn.shrink(5) == 0
        assert turn.percentage == 0.75

    def test_shrink_beyond_coverage(self):
        turn = Turn(Vector2(0, 0), Direction.DOWN, Direction.LEFT,
                    percentage=0.75, is_growing=False)
        assert turn.shrink(20) == 5
        assert turn.percentage == 0.0

    def test_empty_turn_passes_everything_on(self):
        turn = Turn(Vector2(0, 0), Direction.DOWN, Direction.LEFT)
        assert turn.shrink(4) == 4


class TestTurnGeometry:
    def test_rejects_colinear_directions(self):
        with pytest.raises(ValueError, match="perpendicular"):
            Turn(Vector2(0, 0), Direction.UP, Direction.UP)
        with pytest.raises(ValueError, match="perpendicular"):
            Turn(Vector2(0, 0), Direction.LEFT, Direction.RIGHT)

    def test_rejects_out_of_range_percentage(self):
        with pytest.raises(ValueError, match="percentage"):
            Turn(Vector2(0, 0), Direction.UP, Direction.LEFT, percentage=1.5)

    def test_end_is_outer_attachment_point(self):
        turn = Turn(Vector2(100, 100), Direction.DOWN, Direction.LEFT)
        assert turn.end() == Vector2(90, 110)
        assert turn.direction() is Direction.LEFT

    @pytest.mark.parametrize(("in_dir", "out_dir", "expected"), [
        (Direction.UP, Direction.LEFT, Rect(90, 80, 20, 20)),
        (Direction.DOWN, Direction.LEFT, Rect(90, 100, 20, 20)),
        (Direction.LEFT, Direction.UP, Rect(80, 90, 20, 20)),
        (Direction.RIGHT, Direction.UP, Rect(100, 90, 20, 20)),
    ])
    def test_bounding_box(self, in_dir, out_dir, expected):
        assert Turn(Vector2(100, 100), in_dir, out_dir).bounding_box() == expected

    def test_turn_type_property(self):
        turn = Turn(Vector2(0, 0), Direction.DOWN, Direction.RIGHT)
        assert turn.turn_type is TurnType.DOWN_RIGHT


class TestOverlaps:
    def setup_method(self):
        # Bounding box: Rect(90, 100, 20, 40).
        self.line = Line(Vector2(100, 100), Vector2(100, 140), Direction.DOWN)

    def test_shared_edge_is_not_a_collision(self):
        assert not self.line.overlaps(Rect(110, 100, 10, 10))

    def test_threshold_area_collides(self):
        assert self.line.overlaps(Rect(109, 100, 1, 1))

    def test_below_threshold_does_not_collide(self):
        assert not self.line.overlaps(Rect(109.5, 100, 0.5, 1))

    def test_deep_overlap(self):
        assert self.line.overlaps(Rect(95, 110, 10, 10))
