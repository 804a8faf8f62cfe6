"""Tunable game parameters and the constants derived from them."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from smooth_snake.geometry import Rect, Vector2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Immutable game configuration.

    Only the field size, segment width and a handful of ratios are stored;
    every other distance (wall margin, turn margin, speed, input debounce
    interval) is derived from them. Supports JSON serialization.
    """

    # Play field
    field_size: float = 800.0

    # Snake geometry
    segment_width: float = 20.0
    start_length: int = 8
    speed_factor: float = 15.0

    # Tolerances, as fractions of the segment width
    wall_margin_factor: float = 0.5
    turn_margin_factor: float = 0.15

    # Minimum shared area (px²) for two boxes to count as colliding.
    collision_area_margin: float = 1.0

    max_food_attempts: int = 10_000

    def __post_init__(self) -> None:
        if self.field_size <= 0:
            raise ValueError("field_size must be positive.")
        if self.segment_width <= 0:
            raise ValueError("segment_width must be positive.")
        if self.start_length < 1:
            raise ValueError("start_length must be at least 1.")
        if self.speed_factor <= 0:
            raise ValueError("speed_factor must be positive.")
        if self.wall_margin_factor < 0 or self.turn_margin_factor < 0:
            raise ValueError("Margin factors must be non-negative.")
        if self.collision_area_margin < 0:
            raise ValueError("collision_area_margin must be non-negative.")
        if self.max_food_attempts < 1:
            raise ValueError("max_food_attempts must be at least 1.")
        if self.start_height >= self.field_size:
            raise ValueError("The starting snake does not fit the play field.")
        if self.field_size <= 2 * self.food_size:
            raise ValueError("field_size leaves no room for food placement.")

    @property
    def half_width(self) -> float:
        return self.segment_width / 2

    @property
    def speed(self) -> float:
        """Travel speed in pixels per second."""
        return self.segment_width * self.speed_factor

    @property
    def wall_margin(self) -> float:
        return self.segment_width * self.wall_margin_factor

    @property
    def turn_margin(self) -> float:
        return self.segment_width * self.turn_margin_factor

    @property
    def half_turn_margin(self) -> float:
        return self.turn_margin / 2

    @property
    def food_size(self) -> float:
        return self.segment_width

    @property
    def food_half_size(self) -> float:
        return self.food_size / 2

    @property
    def start_height(self) -> float:
        return self.segment_width * self.start_length

    @property
    def secs_per_input_update(self) -> float:
        """Time needed to travel one segment width plus the turn margin."""
        return (self.segment_width + self.turn_margin) / self.speed

    @property
    def center(self) -> Vector2:
        return Vector2(self.field_size / 2, self.field_size / 2)

    @property
    def field_rect(self) -> Rect:
        return Rect(0.0, 0.0, self.field_size, self.field_size)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)


DEFAULT_CONFIG = GameConfig()
