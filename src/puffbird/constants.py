"""
constants.py: Centralized configuration for the game world, physics and assets.
"""

import os

# -------- Screen & Timing Config --------
SCREEN_WIDTH = 360
SCREEN_HEIGHT = 640
RENDER_FPS = 60                 # Upper bound; vsync paces the loop when available

# -------- Bird Config --------
BIRD_X = SCREEN_WIDTH / 5       # Fixed bird X position
BIRD_WIDTH = 80
BIRD_HEIGHT = 80
SPAWN_Y = SCREEN_HEIGHT         # Launch position: first tick lands past the floor
RESPAWN_Y = SCREEN_HEIGHT / 2   # Position after a reset

# -------- Physics Config (pixels / tick) --------
# Applied once per frame, not scaled by elapsed time
GRAVITY = 0.45
JUMP_VELOCITY = -6.5
PIPE_VELOCITY_X = -2.5

# -------- Pipe Config --------
PIPE_WIDTH = 64
PIPE_HEIGHT = 512
PIPE_GAP = SCREEN_HEIGHT // 4
PIPE_SPAWN_INTERVAL_MS = 1500
PIPE_CULL_X = -50               # Pipes are kept while their right edge is past this

# -------- Scoring --------
SCORE_PER_PIPE = 0.5            # Top and bottom pipe each score, a pair is 1.0

# -------- Jump Effect --------
EFFECT_DURATION_MS = 120
EFFECT_SIZE = 60
EFFECT_POS = (SCREEN_WIDTH - 80, SCREEN_HEIGHT - 80)

# -------- Assets --------
ASSET_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")

IMAGE_FILES = {
    "background": "flappybirdbg.png",
    "bird": "bird.png",
    "top_pipe": "toppipe.png",
    "bottom_pipe": "bottompipe.png",
}
OPTIONAL_IMAGE_FILES = {
    "effect": "fart.png",
}
JUMP_SOUND_FILE = "fart.mp3"

# -------- Colors & HUD --------
BACKGROUND_COLOR = (0, 0, 0)
BIRD_COLOR = (255, 255, 0)
PIPE_COLOR = (0, 128, 0)
TEXT_COLOR = (255, 255, 255)
LOADING_TEXT_COLOR = (200, 200, 200)
FONT_NAME = "arial"
FONT_SIZE = 32
TEXT_POS = (10, 40)             # Baseline of the score text

# -------- Debug --------
DEBUG = os.environ.get("PUFFBIRD_DEBUG", "1") != "0"
