"""Shared configuration for Dodge Race."""
from pathlib import Path

from game_engine import GAME_DURATION, OBS_MIN_INTERVAL, OBS_MAX_INTERVAL

PROJECT_DIR = Path(__file__).parent

# Window settings (logical pixels; the playfield follows the window on resize)
WIDTH, HEIGHT = 800, 400
FPS = 60
CAPTION = "Dodge Race"
HUD_H = 56  # control strip under the playfield while a round runs

# Random seed for obstacle placement (None = fresh every run)
SEED = None

# Game settings come from the canonical headless engine constants to avoid drift.
DURATION_MS = GAME_DURATION
SPAWN_INTERVAL_MS = (OBS_MIN_INTERVAL, OBS_MAX_INTERVAL)

# Headless simulation settings
SIM_ROUNDS = 5
SIM_FRAME_MS = 1000 / FPS
SIM_JITTER_MS = 4.0  # +/- random frame-time wobble
SIM_MAX_TICKS = 60_000
