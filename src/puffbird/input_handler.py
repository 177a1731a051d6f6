"""
input_handler.py: Maps pygame events to game actions.
"""

import enum
from typing import Optional

import pygame


class Action(enum.Enum):
    JUMP = "jump"
    QUIT = "quit"


class InputHandler:
    """Tap, click and space all mean jump. No debouncing."""

    jump_key = pygame.K_SPACE
    quit_key = pygame.K_ESCAPE

    def translate(self, event) -> Optional[Action]:
        if event.type == pygame.QUIT:
            return Action.QUIT

        if event.type == pygame.KEYDOWN:
            if event.key == self.jump_key:
                return Action.JUMP
            if event.key == self.quit_key:
                return Action.QUIT
            return None

        if event.type == pygame.FINGERDOWN:
            return Action.JUMP

        if event.type == pygame.MOUSEBUTTONDOWN:
            # SDL mirrors touches as mouse clicks; the FINGERDOWN already counted
            if getattr(event, "touch", False):
                return None
            # Wheel notches arrive as buttons 4 and up
            if getattr(event, "button", 1) > 3:
                return None
            return Action.JUMP

        return None
