import os

# Headless pygame for the whole session
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from puffbird.data_models import GameState, Pipe
from puffbird.physics_core import PhysicsCore


class FixedRandom:
    """Stands in for random.Random with a constant draw."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def physics():
    return PhysicsCore()


@pytest.fixture
def state():
    """A live round with the bird mid-field and at rest."""
    s = GameState()
    s.bird.y = 300.0
    s.bird.velocity = 0.0
    return s


@pytest.fixture
def far_pipe():
    """Builds a pipe well above the field so it never touches the bird."""
    def make(x, width=64):
        return Pipe(x=x, y=-2000, width=width, height=512)
    return make


@pytest.fixture
def font():
    pygame.font.init()
    yield pygame.font.Font(None, 32)
