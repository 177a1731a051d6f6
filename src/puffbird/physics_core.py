"""
physics_core.py: Deterministic per-tick kinematics, scoring and collision logic.
"""

import logging
from typing import Optional

from .constants import (
    GRAVITY, JUMP_VELOCITY, PIPE_VELOCITY_X, SCREEN_HEIGHT,
    PIPE_CULL_X, SCORE_PER_PIPE
)
from .data_models import GameState

logger = logging.getLogger(__name__)


def collides(a, b) -> bool:
    """
    Axis-aligned bounding-box overlap between two objects with
    x, y, width and height. Boxes that only share an edge do not collide.
    """
    return (a.x < b.x + b.width and
            a.x + a.width > b.x and
            a.y < b.y + b.height and
            a.y + a.height > b.y)


class PhysicsCore:
    """
    Single-tick simulation of the bird and the pipes.
    Velocities are per tick; elapsed time is accepted but not used for scaling.
    """

    def __init__(self, gravity: float = GRAVITY, jump_velocity: float = JUMP_VELOCITY,
                 pipe_velocity: float = PIPE_VELOCITY_X, field_height: float = SCREEN_HEIGHT,
                 cull_x: float = PIPE_CULL_X, score_per_pipe: float = SCORE_PER_PIPE):
        self.gravity = gravity
        self.jump_velocity = jump_velocity
        self.pipe_velocity = pipe_velocity
        self.field_height = field_height
        self.cull_x = cull_x
        self.score_per_pipe = score_per_pipe

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float]:
        """
        Explicit Euler step. The ceiling clamps y but leaves velocity alone.
        """
        velocity += self.gravity
        y += velocity
        if y < 0:
            y = 0
        return y, velocity

    def flap(self) -> float:
        """Returns the instantaneous velocity after a flap."""
        return self.jump_velocity

    def step(self, state: GameState, delta_ms: Optional[float] = None):
        """
        Advances the world by one tick. Mutates state; does nothing once
        the game is over.
        """
        if state.game_over:
            return

        bird = state.bird

        # 1. Gravity, movement and ceiling
        bird.y, bird.velocity = self.apply_gravity_and_movement(bird.y, bird.velocity)

        # 2. Floor: falling off the field ends the game
        if bird.y > self.field_height:
            self._end(state, "fell off the field")

        # 3. Pipes: move, score, collide
        for pipe in state.pipes:
            pipe.x += self.pipe_velocity

            if not pipe.passed and bird.x > pipe.right:
                state.score += self.score_per_pipe
                pipe.passed = True

            if collides(bird, pipe):
                self._end(state, "hit a pipe")

        # 4. Cull pipes that have scrolled off the left edge
        state.pipes = [p for p in state.pipes if p.right > self.cull_x]

    def _end(self, state: GameState, reason: str):
        if not state.game_over:
            logger.info("Game over (%s). Score: %d", reason, state.display_score)
        state.game_over = True
