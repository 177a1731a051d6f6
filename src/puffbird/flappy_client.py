"""
flappy_client.py: The pygame window and per-frame loop.

Loads assets, then once per display refresh: input, simulation tick, render.
"""

import logging
from typing import Optional

import pygame

from .assets import AssetStore
from .audio import JumpSound
from .constants import ASSET_DIR, SCREEN_WIDTH, SCREEN_HEIGHT, RENDER_FPS
from .game import Game
from .input_handler import Action, InputHandler
from .renderer import Renderer

logger = logging.getLogger(__name__)


class FlappyClient:
    def __init__(self, asset_dir: str = ASSET_DIR):
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), vsync=1)
        except pygame.error:
            # vsync is only a request; some drivers refuse it outright
            self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Puffbird")

        self.assets = AssetStore(asset_dir=asset_dir, on_ready=self._start)
        self.audio = JumpSound()
        self.game = Game(on_jump=self.audio.play)
        self.renderer = Renderer(self.screen, self.assets)
        self.input = InputHandler()

        self.clock = pygame.time.Clock()
        self.started = False
        self.running = False

    def run(self):
        """The main client execution loop."""
        self.assets.start()
        self.running = True

        while self.running:
            delta_ms = self.clock.tick(RENDER_FPS)
            self.assets.poll()

            # on_ready starts the game when every image loads; this covers failures
            if not self.started and self.assets.settled:
                self._start()

            self._handle_events()
            if not self.running:
                break

            if self.started:
                self.game.tick(delta_ms)
                self.renderer.draw(self.game, pygame.time.get_ticks())
            else:
                self.renderer.draw_loading()

            pygame.display.flip()

        logger.info("Main loop stopped.")
        pygame.quit()

    def _start(self):
        if self.started:
            return
        if self.assets.failed:
            logger.warning("Starting with missing images: %s",
                           ", ".join(sorted(self.assets.failed)))
        logger.info("Starting main loop, enabling pipe placement.")
        self.started = True

    def _handle_events(self):
        for event in pygame.event.get():
            action: Optional[Action] = self.input.translate(event)
            if action is Action.QUIT:
                self.running = False
            elif action is Action.JUMP:
                if self.started:
                    self.game.jump(pygame.time.get_ticks())
                else:
                    self.audio.ensure_unlocked()
