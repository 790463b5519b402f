from __future__ import annotations

from dataclasses import dataclass, field, replace

from game_engine import DEFAULT_TUNING, Tuning


@dataclass(frozen=True)
class Display:
    width: int
    height: int
    fps: int
    caption: str = "Dodge Race"

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"window size must be positive, got {self.width}x{self.height}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")


@dataclass(frozen=True)
class Settings:
    display: Display
    tuning: Tuning = field(default=DEFAULT_TUNING)
    seed: int | None = None

    sim_rounds: int = 5
    sim_frame_ms: float = 1000 / 60
    sim_jitter_ms: float = 0.0
    sim_max_ticks: int = 60_000

    def with_overrides(self, **kwargs) -> "Settings":
        return replace(self, **kwargs)
