from __future__ import annotations

import importlib.util
from dataclasses import dataclass

from config import HUD_H
from dodgerace.config.schema import Settings


@dataclass(frozen=True)
class Check:
    name: str
    ok: bool
    detail: str


def _has_module(name: str) -> bool:
    return importlib.util.find_spec(name) is not None


def run_doctor(settings: Settings) -> list[Check]:
    checks: list[Check] = []
    checks.append(Check("pygame", _has_module("pygame"), "required for the game window"))

    display = settings.display
    tuning = settings.tuning
    field_h = display.height - HUD_H
    checks.append(Check(
        "window",
        field_h > tuning.car_h and field_h > tuning.obs_h,
        f"{display.width}x{display.height} @ {display.fps} fps ({field_h} px playfield)",
    ))
    checks.append(Check(
        "spawn_interval",
        tuning.min_interval_ms <= tuning.max_interval_ms,
        f"{tuning.min_interval_ms:.0f}-{tuning.max_interval_ms:.0f} ms",
    ))
    checks.append(Check("duration", tuning.duration_ms > 0, f"{tuning.duration_ms / 1000:.1f} s"))
    return checks
