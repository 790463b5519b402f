from __future__ import annotations

import config as legacy_config
from game_engine import Tuning

from .schema import Display, Settings


def from_legacy_config() -> Settings:
    display = Display(
        width=int(legacy_config.WIDTH),
        height=int(legacy_config.HEIGHT),
        fps=int(legacy_config.FPS),
        caption=str(getattr(legacy_config, "CAPTION", "Dodge Race")),
    )
    min_ms, max_ms = getattr(legacy_config, "SPAWN_INTERVAL_MS", (600, 1300))
    tuning = Tuning(
        duration_ms=float(getattr(legacy_config, "DURATION_MS", 50_000)),
        min_interval_ms=float(min_ms),
        max_interval_ms=float(max_ms),
    )
    seed = getattr(legacy_config, "SEED", None)
    return Settings(
        display=display,
        tuning=tuning,
        seed=None if seed is None else int(seed),
        sim_rounds=int(getattr(legacy_config, "SIM_ROUNDS", 5)),
        sim_frame_ms=float(getattr(legacy_config, "SIM_FRAME_MS", 1000 / display.fps)),
        sim_jitter_ms=float(getattr(legacy_config, "SIM_JITTER_MS", 0.0)),
        sim_max_ticks=int(getattr(legacy_config, "SIM_MAX_TICKS", 60_000)),
    )
