"""Real-time game engine composing body, food, and input handling."""

from __future__ import annotations

import enum
import logging

import numpy as np

from smooth_snake.body import Body
from smooth_snake.config import DEFAULT_CONFIG, GameConfig
from smooth_snake.direction import Direction
from smooth_snake.food import Food
from smooth_snake.inputs import InputQueue

logger = logging.getLogger(__name__)

PREGAME_TEXT = "Press SPACE to start the game"
SCORE_FORMAT = "Score: {}"


class GameState(enum.Enum):
    """Top-level game phase."""

    PREGAME = "pregame"
    GAME = "game"


class GameEngine:
    """Single-snake, time-based game engine.

    The engine owns the body, food, input queue, and score. Each call to
    :meth:`update` advances the simulation by the elapsed wall-clock time;
    key events are fed in between updates through :meth:`press_direction`
    and :meth:`press_start`.
    """

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.state = GameState.PREGAME
        self.inputs = InputQueue(config)
        self.body = Body(config.center, config)
        self.food = self._place_food()
        self.score = 0
        self.tick = 0

    def press_direction(self, direction: Direction) -> None:
        """Queue a direction key press."""
        self.inputs.push(direction)

    def press_start(self) -> None:
        """Handle the start key: leave the pre-game screen."""
        if self.state is GameState.PREGAME:
            self.state = GameState.GAME
            logger.info("Game started.")
        self.inputs.clear()

    def update(self, dt: float) -> None:
        """Advance the game by *dt* seconds.

        Eating takes priority over dying, and both replace ordinary
        movement for the tick.
        """
        if dt < 0:
            raise ValueError("Elapsed time must be non-negative.")
        if self.state is not GameState.GAME:
            return

        self.tick += 1
        heading = self.inputs.update(dt, self.body.heading)
        if heading is not None:
            self.body.set_heading(heading)

        if self.body.collides_with(self.food.bbox):
            self.body.grow(self.config.food_size)
            self.score += 1
            logger.debug("Food eaten at tick %d, score %d.", self.tick, self.score)
            self.food = self._place_food()
        elif self.body.self_collides() or self.body.head_collides_with_wall(
            self.config.field_rect,
        ):
            logger.info("Snake died at tick %d with score %d.", self.tick, self.score)
            self.reset()
        else:
            self.body.move(dt * self.config.speed)

    def reset(self) -> None:
        """Start over from the pre-game screen with a fresh snake."""
        self.body = Body(self.config.center, self.config)
        self.food = self._place_food()
        self.inputs.clear()
        self.score = 0
        self.tick = 0
        self.state = GameState.PREGAME

    def score_text(self) -> str:
        """Return the score line shown during play."""
        return SCORE_FORMAT.format(self.score)

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "state": self.state.value,
            "tick": self.tick,
            "score": self.score,
            "body": self.body.to_dict(),
            "food": self.food.to_dict(),
            "inputs": self.inputs.to_list(),
        }

    def _place_food(self) -> Food:
        """Sample food positions until one does not touch the body."""
        for attempt in range(1, self.config.max_food_attempts + 1):
            food = Food.random_within(self.config.field_size, self.rng, self.config)
            if not self.body.collides_with(food.bbox):
                logger.debug("Food placed after %d attempt(s).", attempt)
                return food
        raise RuntimeError(
            f"No free food position found in {self.config.max_food_attempts} attempts."
        )
