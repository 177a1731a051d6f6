"""
pipe_spawner.py: Time-based creation of pipe pairs.
"""

import math
import random
from typing import List, Optional

from .constants import (
    PIPE_SPAWN_INTERVAL_MS, PIPE_WIDTH, PIPE_HEIGHT, PIPE_GAP, SCREEN_WIDTH
)
from .data_models import GameState, Pipe


class PipeSpawner:
    """
    Spawns a top/bottom pipe pair every interval of accumulated wall-clock time.
    Checked once per tick instead of running on its own timer.
    """

    def __init__(self, interval_ms: float = PIPE_SPAWN_INTERVAL_MS,
                 rng: Optional[random.Random] = None,
                 pipe_width: float = PIPE_WIDTH, pipe_height: float = PIPE_HEIGHT,
                 gap: float = PIPE_GAP, spawn_x: float = SCREEN_WIDTH):
        self.interval_ms = interval_ms
        self.rng = rng or random.Random()
        self.pipe_width = pipe_width
        self.pipe_height = pipe_height
        self.gap = gap
        self.spawn_x = spawn_x
        self.elapsed_ms = 0.0

    def reset(self):
        """Restarts the cadence from zero."""
        self.elapsed_ms = 0.0

    def advance(self, state: GameState, elapsed_ms: float) -> List[Pipe]:
        """
        Adds elapsed time and spawns one pair per full interval crossed.
        The cadence keeps running while the game is over, but nothing spawns.
        """
        spawned = []
        self.elapsed_ms += elapsed_ms
        while self.elapsed_ms >= self.interval_ms:
            self.elapsed_ms -= self.interval_ms
            if not state.game_over:
                spawned.extend(self.spawn(state))
        return spawned

    def spawn(self, state: GameState) -> List[Pipe]:
        """Appends one pipe pair at the right edge of the field."""
        height = self.pipe_height
        top_y = math.floor(-height / 4 - self.rng.random() * (height / 2))

        # The gap is not checked against the field edges
        top = Pipe(x=self.spawn_x, y=top_y, width=self.pipe_width,
                   height=height, asset="top_pipe")
        bottom = Pipe(x=self.spawn_x, y=top.y + height + self.gap,
                      width=self.pipe_width, height=height, asset="bottom_pipe")
        state.pipes.extend((top, bottom))
        return [top, bottom]
