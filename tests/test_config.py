"""Tests for GameConfig."""

import dataclasses

import pytest

from smooth_snake.config import DEFAULT_CONFIG, GameConfig
from smooth_snake.geometry import Rect, Vector2


class TestGameConfigDefaults:
    def test_derived_values(self):
        cfg = GameConfig()
        assert cfg.half_width == 10
        assert cfg.speed == 300
        assert cfg.wall_margin == 10
        assert cfg.turn_margin == pytest.approx(3.0)
        assert cfg.food_size == 20
        assert cfg.start_height == 160
        assert cfg.secs_per_input_update == pytest.approx(23 / 300)

    def test_field_geometry(self):
        assert DEFAULT_CONFIG.center == Vector2(400, 400)
        assert DEFAULT_CONFIG.field_rect == Rect(0, 0, 800, 800)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.field_size = 10  # type: ignore[misc]


class TestGameConfigValidation:
    def test_non_positive_width(self):
        with pytest.raises(ValueError, match="segment_width"):
            GameConfig(segment_width=0)

    def test_snake_must_fit(self):
        with pytest.raises(ValueError, match="does not fit"):
            GameConfig(field_size=100, start_length=8)

    def test_negative_margin(self):
        with pytest.raises(ValueError, match="non-negative"):
            GameConfig(wall_margin_factor=-0.1)


class TestGameConfigSerialization:
    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(field_size=600, speed_factor=10)
        path = tmp_path / "nested" / "config.json"
        cfg.save(path)
        assert GameConfig.load(path) == cfg
