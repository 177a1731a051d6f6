"""
audio.py: The jump sound cue, unlocked lazily on the first player gesture.
"""

import logging
from typing import Any, Optional

import pygame

from .constants import ASSET_DIR, JUMP_SOUND_FILE
from .assets import resolve_asset_path

logger = logging.getLogger(__name__)


class JumpSound:
    """
    Short cue played on every jump. Audio stays off until the first gesture
    calls ensure_unlocked(); any failure leaves the game silent.
    """

    def __init__(self, path: Optional[str] = None, mixer: Any = None):
        self.path = path or resolve_asset_path(JUMP_SOUND_FILE, ASSET_DIR)
        self.mixer = mixer if mixer is not None else pygame.mixer
        self.unlocked = False
        self.sound = None

    def ensure_unlocked(self):
        """Initializes the mixer and primes the sound once. Idempotent."""
        if self.unlocked:
            return
        self.unlocked = True
        try:
            if not self.mixer.get_init():
                self.mixer.init()
            sound = self.mixer.Sound(self.path)
            # Silent play/stop cycle
            volume = sound.get_volume()
            sound.set_volume(0)
            sound.play()
            sound.stop()
            sound.set_volume(volume)
            self.sound = sound
            logger.debug("Audio unlocked")
        except (pygame.error, OSError) as e:
            logger.debug("Audio unavailable, continuing silently: %s", e)

    def play(self):
        self.ensure_unlocked()
        if self.sound is None:
            return
        try:
            self.sound.stop()
            self.sound.play()
        except pygame.error as e:
            logger.debug("Jump sound play error: %s", e)
