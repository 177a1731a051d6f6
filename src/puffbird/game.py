"""
game.py: The game state machine (Playing <-> GameOver) tying physics,
spawning and player input together.
"""

import logging
from typing import Callable, Optional

from .constants import EFFECT_DURATION_MS
from .data_models import GameState
from .physics_core import PhysicsCore
from .pipe_spawner import PipeSpawner

logger = logging.getLogger(__name__)


class Game:
    """
    Owns the single GameState. Every mutation goes through tick(), jump()
    or reset(), all called from the loop's thread.
    """

    def __init__(self, physics: Optional[PhysicsCore] = None,
                 spawner: Optional[PipeSpawner] = None,
                 state: Optional[GameState] = None,
                 effect_duration_ms: float = EFFECT_DURATION_MS,
                 on_jump: Optional[Callable[[], None]] = None):
        self.physics = physics or PhysicsCore()
        self.spawner = spawner or PipeSpawner()
        self.state = state or GameState()
        self.effect_duration_ms = effect_duration_ms
        self.on_jump = on_jump

        self.show_effect = False
        self.effect_start_ms = 0.0

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    @property
    def status_text(self) -> str:
        if self.state.game_over:
            return f"Game Over: {self.state.display_score}"
        return str(self.state.display_score)

    def tick(self, delta_ms: float):
        """One frame of simulation: spawner check first, then physics."""
        self.spawner.advance(self.state, delta_ms)
        self.physics.step(self.state, delta_ms)

    def reset(self):
        self.state.reset()
        self.spawner.reset()
        logger.debug("Game reset")

    def jump(self, now_ms: float) -> bool:
        """
        Applies the jump impulse, resetting first if the game is over.
        Returns True when a reset happened.
        """
        was_over = self.state.game_over
        if was_over:
            self.reset()

        self.state.bird.velocity = self.physics.flap()

        self.show_effect = True
        self.effect_start_ms = now_ms

        if self.on_jump:
            self.on_jump()
        return was_over

    def effect_visible(self, now_ms: float) -> bool:
        if self.show_effect and now_ms - self.effect_start_ms < self.effect_duration_ms:
            return True
        self.show_effect = False
        return False
