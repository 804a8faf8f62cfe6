"""Headless play-throughs for smoke testing and throughput measurement."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from smooth_snake.config import DEFAULT_CONFIG, GameConfig
from smooth_snake.direction import Direction
from smooth_snake.engine import GameEngine, GameState

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class SimulationResult:
    """Outcome of a headless run."""

    ticks: int
    deaths: int
    food_eaten: int
    best_score: int
    wall_time_seconds: float

    @property
    def ticks_per_second(self) -> float:
        if self.wall_time_seconds <= 0:
            return 0.0
        return self.ticks / self.wall_time_seconds

    def summary(self) -> str:
        return (
            f"Simulation: {self.ticks} ticks, {self.deaths} deaths, "
            f"{self.food_eaten} food eaten, best score {self.best_score} in "
            f"{self.wall_time_seconds:.2f}s | "
            f"{self.ticks_per_second:.1f} ticks/s"
        )


def run_headless(
    *,
    ticks: int = 1_000,
    dt: float = 1 / 60,
    seed: int | None = None,
    config: GameConfig = DEFAULT_CONFIG,
    turn_probability: float = 0.05,
) -> SimulationResult:
    """Play *ticks* fixed-length frames with random key presses.

    The game is restarted immediately after every death.
    """
    if ticks < 0:
        raise ValueError("ticks must be non-negative.")
    if dt <= 0:
        raise ValueError("dt must be positive.")
    if not 0.0 <= turn_probability <= 1.0:
        raise ValueError("turn_probability must lie in [0, 1].")

    rng = np.random.default_rng(seed)
    engine = GameEngine(config, rng=rng)
    engine.press_start()

    deaths = 0
    food_eaten = 0
    best_score = 0
    start = time.perf_counter()
    for _ in range(ticks):
        if rng.random() < turn_probability:
            engine.press_direction(_DIRECTIONS[rng.integers(len(_DIRECTIONS))])

        score_before = engine.score
        engine.update(dt)
        if engine.state is GameState.PREGAME:
            deaths += 1
            engine.press_start()
        elif engine.score > score_before:
            food_eaten += 1
            best_score = max(best_score, engine.score)

    elapsed = time.perf_counter() - start
    result = SimulationResult(
        ticks=ticks,
        deaths=deaths,
        food_eaten=food_eaten,
        best_score=best_score,
        wall_time_seconds=elapsed,
    )
    logger.info(result.summary())
    return result
