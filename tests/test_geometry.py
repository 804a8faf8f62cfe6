"""Tests for the geometry module."""

import pytest

from smooth_snake.geometry import Rect, Vector2


class TestVector2:
    def test_add_and_subtract(self):
        assert Vector2(1, 2) + Vector2(3, 4) == Vector2(4, 6)
        assert Vector2(1, 2) - Vector2(3, 4) == Vector2(-2, -2)

    def test_componentwise_multiply(self):
        assert Vector2(2, 3) * Vector2(4, -1) == Vector2(8, -3)

    def test_scalar_multiply_both_sides(self):
        assert Vector2(2, 3) * 2 == Vector2(4, 6)
        assert 0.5 * Vector2(2, 3) == Vector2(1, 1.5)

    def test_length_and_normalized(self):
        v = Vector2(3, 4)
        assert v.length() == 5
        assert v.normalized() == Vector2(0.6, 0.8)

    def test_normalize_zero_raises(self):
        with pytest.raises(ValueError, match="zero-length"):
            Vector2(0, 0).normalized()


class TestRect:
    def test_edges(self):
        rect = Rect(10, 20, 30, 40)
        assert rect.left == 10
        assert rect.right == 40
        assert rect.top == 20
        assert rect.bottom == 60
        assert rect.center == Vector2(25, 40)

    def test_from_center(self):
        assert Rect.from_center(Vector2(50, 50), 20) == Rect(40, 40, 20, 20)

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            Rect(0, 0, -1, 5)

    def test_intersection_area(self):
        a = Rect(0, 0, 10, 10)
        b = Rect(5, 5, 10, 10)
        assert a.intersection_area(b) == 25
        assert b.intersection_area(a) == 25

    def test_touching_edges_do_not_intersect(self):
        a = Rect(0, 0, 10, 10)
        b = Rect(10, 0, 10, 10)
        assert not a.intersects(b)
        assert a.intersection_area(b) == 0.0

    def test_disjoint(self):
        assert Rect(0, 0, 1, 1).intersection_area(Rect(5, 5, 1, 1)) == 0.0
