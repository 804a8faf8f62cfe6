"""Food placement."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from smooth_snake.config import DEFAULT_CONFIG, GameConfig
from smooth_snake.geometry import Rect, Vector2


@dataclass(frozen=True)
class Food:
    """A square piece of food the snake can eat."""

    bbox: Rect

    @property
    def center(self) -> Vector2:
        return self.bbox.center

    @classmethod
    def at(cls, center: Vector2, config: GameConfig = DEFAULT_CONFIG) -> Food:
        """Place food centered on *center*."""
        return cls(Rect.from_center(center, config.food_size))

    @classmethod
    def random_within(
        cls,
        bound: float,
        rng: np.random.Generator,
        config: GameConfig = DEFAULT_CONFIG,
    ) -> Food:
        """Sample a food position uniformly inside a square field.

        Both coordinates are drawn from ``[food_size, bound - food_size]``
        so the food never touches the walls.
        """
        low = config.food_size
        high = bound - config.food_size
        if high < low:
            raise ValueError("Field is too small to place food.")
        x, y = rng.uniform(low, high, size=2)
        return cls.at(Vector2(float(x), float(y)), config)

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {"bbox": self.bbox.to_dict()}
