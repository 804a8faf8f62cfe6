"""Buffered direction changes with debounce and reversal rejection."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator

from smooth_snake.config import DEFAULT_CONFIG, GameConfig
from smooth_snake.direction import Direction

logger = logging.getLogger(__name__)


class InputQueue:
    """Pending direction changes in key-press order.

    At most one change is consumed per ``secs_per_input_update``, which is
    the time the head needs to travel one segment width plus the turn
    margin. That keeps consecutive turns from overlapping.
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.pending: deque[Direction] = deque()
        self.timer = 0.0

    def __len__(self) -> int:
        return len(self.pending)

    def __iter__(self) -> Iterator[Direction]:
        return iter(self.pending)

    def push(self, direction: Direction) -> None:
        """Queue *direction* unless it repeats the newest entry."""
        if self.pending and self.pending[-1] is direction:
            return
        self.pending.append(direction)

    def clear(self) -> None:
        """Drop every pending entry."""
        self.pending.clear()

    def update(self, elapsed: float, heading: Direction) -> Direction | None:
        """Advance the debounce timer and maybe yield a new heading.

        Entries equal to *heading* or reversing it are discarded together
        with everything queued before the first usable entry.
        """
        self.timer += elapsed
        if self.timer < self.config.secs_per_input_update:
            return None

        for idx, direction in enumerate(self.pending):
            if direction is heading or direction is heading.inverse():
                continue
            for _ in range(idx + 1):
                self.pending.popleft()
            self.timer = 0.0
            logger.debug("Heading changed %s -> %s", heading.name, direction.name)
            return direction

        self.pending.clear()
        return None

    def to_list(self) -> list[str]:
        """Serialize pending entries as direction names."""
        return [direction.name for direction in self.pending]
