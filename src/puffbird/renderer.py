"""
renderer.py: Draws one frame of the game onto a pygame surface.
"""

from typing import Dict, Optional, Tuple

import pygame

from .assets import AssetStore
from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, BACKGROUND_COLOR, BIRD_COLOR, PIPE_COLOR,
    TEXT_COLOR, LOADING_TEXT_COLOR, FONT_NAME, FONT_SIZE, TEXT_POS,
    EFFECT_SIZE, EFFECT_POS
)
from .game import Game


class Renderer:
    """
    Draw order: background, bird, pipes, jump effect, status text.
    A missing image is replaced by a solid rectangle of the same box.
    """

    def __init__(self, surface: pygame.Surface, assets: AssetStore,
                 font: Optional[pygame.font.Font] = None):
        self.surface = surface
        self.assets = assets
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        self.font = font
        self._scaled: Dict[Tuple[str, int, int], pygame.Surface] = {}

    def _image(self, name: str, width: float, height: float) -> Optional[pygame.Surface]:
        image = self.assets.get(name)
        if image is None:
            return None
        size = (int(width), int(height))
        key = (name,) + size
        if key not in self._scaled:
            scaled = pygame.transform.scale(image, size)
            # Match the display format once a window exists
            if pygame.display.get_init() and pygame.display.get_surface() is not None:
                scaled = scaled.convert_alpha()
            self._scaled[key] = scaled
        return self._scaled[key]

    def _draw_box(self, name: str, x: float, y: float, width: float, height: float, color):
        image = self._image(name, width, height)
        if image is not None:
            self.surface.blit(image, (x, y))
        else:
            pygame.draw.rect(self.surface, color, pygame.Rect(x, y, width, height))

    def _draw_text(self, text: str, pos: Tuple[float, float], color):
        rendered = self.font.render(text, True, color)
        x, baseline = pos
        self.surface.blit(rendered, (x, baseline - self.font.get_ascent()))

    def draw(self, game: Game, now_ms: float):
        state = game.state
        bird = state.bird

        self._draw_box("background", 0, 0, SCREEN_WIDTH, SCREEN_HEIGHT, BACKGROUND_COLOR)
        self._draw_box("bird", bird.x, bird.y, bird.width, bird.height, BIRD_COLOR)
        for pipe in state.pipes:
            self._draw_box(pipe.asset, pipe.x, pipe.y, pipe.width, pipe.height, PIPE_COLOR)

        # The effect has no fallback shape
        if game.effect_visible(now_ms):
            effect = self._image("effect", EFFECT_SIZE, EFFECT_SIZE)
            if effect is not None:
                self.surface.blit(effect, EFFECT_POS)

        self._draw_text(game.status_text, TEXT_POS, TEXT_COLOR)

    def draw_loading(self):
        self.surface.fill(BACKGROUND_COLOR)
        self._draw_text("Loading...", TEXT_POS, LOADING_TEXT_COLOR)
