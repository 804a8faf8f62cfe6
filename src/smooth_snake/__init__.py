"""Smooth Snake — real-time snake simulation core."""

from smooth_snake.body import Body, BodyInvariantError
from smooth_snake.config import DEFAULT_CONFIG, GameConfig
from smooth_snake.direction import Direction
from smooth_snake.engine import GameEngine, GameState
from smooth_snake.food import Food
from smooth_snake.geometry import Rect, Vector2
from smooth_snake.inputs import InputQueue
from smooth_snake.segment import Line, Segment, Turn, TurnType

__all__ = [
    "DEFAULT_CONFIG",
    "Body",
    "BodyInvariantError",
    "Direction",
    "Food",
    "GameConfig",
    "GameEngine",
    "GameState",
    "InputQueue",
    "Line",
    "Rect",
    "Segment",
    "Turn",
    "TurnType",
    "Vector2",
]
