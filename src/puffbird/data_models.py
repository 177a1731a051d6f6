"""
data_models.py: Data structures for the game state.
"""

import math
from dataclasses import dataclass, field
from typing import List

from .constants import (
    BIRD_X, BIRD_WIDTH, BIRD_HEIGHT, SPAWN_Y, RESPAWN_Y,
    PIPE_WIDTH, PIPE_HEIGHT
)

@dataclass
class Bird:
    """The player's bird. Only y and velocity change after creation."""
    x: float = BIRD_X
    y: float = SPAWN_Y
    width: float = BIRD_WIDTH
    height: float = BIRD_HEIGHT
    velocity: float = 0.0

    def reset(self):
        self.y = RESPAWN_Y
        self.velocity = 0.0

@dataclass
class Pipe:
    """One half of a pipe pair."""
    x: float
    y: float
    width: float = PIPE_WIDTH
    height: float = PIPE_HEIGHT
    passed: bool = False
    asset: str = "top_pipe"    # Image name in the AssetStore

    @property
    def right(self) -> float:
        return self.x + self.width

@dataclass
class GameState:
    """Everything the physics step mutates and the renderer reads."""
    bird: Bird = field(default_factory=Bird)
    pipes: List[Pipe] = field(default_factory=list)
    score: float = 0.0
    game_over: bool = False

    @property
    def display_score(self) -> int:
        return math.floor(self.score)

    def reset(self):
        """Back to a fresh round. Safe to call repeatedly."""
        self.bird.reset()
        self.pipes = []
        self.score = 0.0
        self.game_over = False
