from __future__ import annotations

from dataclasses import replace

from .defaults import from_legacy_config
from .schema import Settings


def load_settings(
    *,
    width: int | None = None,
    height: int | None = None,
    fps: int | None = None,
    seed: int | None = None,
    duration_ms: float | None = None,
) -> Settings:
    """Load runtime settings, defaulting to values from the legacy config module."""
    settings = from_legacy_config()
    display_overrides = {
        k: v for k, v in (("width", width), ("height", height), ("fps", fps)) if v is not None
    }
    if display_overrides:
        settings = settings.with_overrides(display=replace(settings.display, **display_overrides))
        if fps is not None:
            settings = settings.with_overrides(sim_frame_ms=1000 / fps)
    if seed is not None:
        settings = settings.with_overrides(seed=seed)
    if duration_ms is not None:
        settings = settings.with_overrides(tuning=replace(settings.tuning, duration_ms=duration_ms))
    return settings
