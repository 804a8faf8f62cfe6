"""pygame window that drives the engine from keyboard input."""

from __future__ import annotations

import logging

import pygame

from smooth_snake import shapes
from smooth_snake.config import DEFAULT_CONFIG, GameConfig
from smooth_snake.direction import Direction
from smooth_snake.engine import PREGAME_TEXT, GameEngine, GameState
from smooth_snake.geometry import Rect

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Smooth Snake"

KEY_BINDINGS: dict[int, Direction] = {
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}
START_KEY = pygame.K_SPACE

PALETTE = {
    "background": (34, 110, 52),
    "snake": (255, 255, 0),
    "eyes": (0, 0, 0),
    "food": (220, 40, 40),
    "text": (255, 255, 255),
    "outline": (0, 0, 0),
}
EYE_RADIUS = 3


class GameWindow:
    """Owns the display surface and forwards events to a :class:`GameEngine`."""

    def __init__(self, engine: GameEngine, surface: pygame.Surface) -> None:
        self.engine = engine
        self.surface = surface
        self.score_font = pygame.font.Font(None, 32)
        self.title_font = pygame.font.Font(None, 56)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply one event; return False when the window should close."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key in KEY_BINDINGS:
                self.engine.press_direction(KEY_BINDINGS[event.key])
            elif event.key == START_KEY:
                self.engine.press_start()
            elif event.key == pygame.K_ESCAPE:
                return False
        return True

    def draw(self) -> None:
        """Render the current engine state onto the surface."""
        self.surface.fill(PALETTE["background"])
        pygame.draw.rect(
            self.surface, PALETTE["food"], self._to_pygame_rect(self.engine.food.bbox),
        )
        for polygon in shapes.body_shapes(self.engine.body):
            pygame.draw.polygon(self.surface, PALETTE["snake"], polygon.tolist())
        eyes = shapes.head_eyes(self.engine.body)
        if eyes is not None:
            for eye in eyes:
                pygame.draw.circle(
                    self.surface, PALETTE["eyes"], eye.tolist(), EYE_RADIUS,
                )

        if self.engine.state is GameState.PREGAME:
            self._draw_text(self.title_font, PREGAME_TEXT, centered=True)
        else:
            self._draw_text(self.score_font, self.engine.score_text(), centered=False)

    def _draw_text(self, font: pygame.font.Font, text: str, centered: bool) -> None:
        """Draw *text* with a one-colour outline."""
        fill = font.render(text, True, PALETTE["text"])
        outline = font.render(text, True, PALETTE["outline"])
        if centered:
            rect = fill.get_rect(center=self.surface.get_rect().center)
            x, y = rect.topleft
        else:
            x, y = 10, 10
        for dx in (-2, 0, 2):
            for dy in (-2, 0, 2):
                self.surface.blit(outline, (x + dx, y + dy))
        self.surface.blit(fill, (x, y))

    @staticmethod
    def _to_pygame_rect(rect: Rect) -> pygame.Rect:
        return pygame.Rect(round(rect.x), round(rect.y), round(rect.w), round(rect.h))


def run(
    config: GameConfig = DEFAULT_CONFIG,
    seed: int | None = None,
    fps: int = 0,
) -> int:
    """Open the window and run until it is closed.

    ``fps=0`` leaves the frame rate uncapped; movement always scales with
    the measured frame time.
    """
    pygame.init()
    try:
        size = round(config.field_size)
        surface = pygame.display.set_mode((size, size))
        pygame.display.set_caption(WINDOW_TITLE)
        window = GameWindow(GameEngine(config, seed=seed), surface)
        clock = pygame.time.Clock()

        running = True
        while running:
            dt = clock.tick(fps) / 1000.0
            for event in pygame.event.get():
                if not window.handle_event(event):
                    running = False
                    break
            window.engine.update(dt)
            window.draw()
            pygame.display.flip()
    finally:
        pygame.quit()
    logger.info("Window closed.")
    return 0
