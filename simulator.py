#!/usr/bin/env python3
"""Headless game simulator — runs rounds with scripted pilots, records replay data."""

from __future__ import annotations

import random

import config
from game_engine import DEFAULT_TUNING, GameState, RunState, UP, DOWN, IDLE

# Safety limit: stop if a round exceeds this many ticks
MAX_TICKS = config.SIM_MAX_TICKS


class StayPilot:
    """Never touches the controls."""

    def decide(self, game, width, height):
        return IDLE


class DodgePilot:
    """Steers away from the nearest obstacle coming down its row.

    Holds a decision for ``min_hold`` ticks before switching, so frame-to-frame
    noise in the nearest-obstacle pick does not make it wobble.
    """

    def __init__(self, lookahead=260, margin=6, min_hold=3):
        self.lookahead = lookahead
        self.margin = margin
        self.min_hold = min_hold
        self.current = IDLE
        self.hold_counter = 0

    def _threat(self, game):
        car_x, car_y, car_w, car_h = game.car.rect()
        nearest = None
        for o in game.obstacles:
            ox, oy, ow, oh = o.rect()
            if ox + ow < car_x or ox - (car_x + car_w) > self.lookahead:
                continue
            if oy > car_y + car_h + self.margin or oy + oh < car_y - self.margin:
                continue
            if nearest is None or ox < nearest.x:
                nearest = o
        return nearest

    def decide(self, game, width, height):
        threat = self._threat(game)
        if threat is None:
            raw = IDLE
        else:
            car_mid = game.car.y + game.tuning.car_h / 2
            obs_mid = threat.y + game.tuning.obs_h / 2
            room_above = threat.y
            room_below = height - (threat.y + game.tuning.obs_h)
            if car_mid < obs_mid:
                raw = UP if room_above >= game.tuning.car_h + self.margin else DOWN
            else:
                raw = DOWN if room_below >= game.tuning.car_h + self.margin else UP

        if raw != self.current:
            self.hold_counter += 1
            if self.hold_counter >= self.min_hold or self.current == IDLE:
                self.current = raw
                self.hold_counter = 0
        else:
            self.hold_counter = 0
        return self.current


def apply_decision(game, decision):
    """Feed a pilot decision through the press/release interface."""
    if decision == IDLE:
        game.intent.release_all()
    else:
        game.intent.press(decision)


def simulate(pilot, seed=0, frame_ms=config.SIM_FRAME_MS, width=config.WIDTH,
             height=config.HEIGHT, tuning=DEFAULT_TUNING, jitter_ms=0.0,
             max_ticks=MAX_TICKS, record=True):
    """
    Run one headless round.

    Args:
        pilot: object with ``decide(game, width, height) -> -1 | 0 | 1``
        seed: random seed for obstacle placement and frame jitter
        frame_ms: nominal frame duration in milliseconds
        jitter_ms: frames last ``frame_ms +/- jitter_ms`` (never below 0)

    Returns:
        dict: {
            'outcome': 'won' | 'lost' | 'running' (hit max_ticks),
            'elapsed_ms': float,
            'ticks': int,
            'seed': int,
            'frames': list of GameState.encode() dicts plus 'decision'
        }
    """
    game = GameState(seed=seed, tuning=tuning)
    clock_rng = random.Random(seed)
    frames = []

    game.start(width, height)
    ticks = 0
    while game.running and ticks < max_ticks:
        decision = pilot.decide(game, width, height)
        apply_decision(game, decision)
        dt = max(0.0, frame_ms + clock_rng.uniform(-jitter_ms, jitter_ms)) if jitter_ms else frame_ms
        game.tick(dt, width, height)
        ticks += 1
        if record:
            frame = game.encode()
            frame["decision"] = decision
            frames.append(frame)

    return {
        "outcome": game.run_state.value,
        "elapsed_ms": game.elapsed,
        "ticks": ticks,
        "seed": seed,
        "frames": frames,
    }


def summarize(results):
    won = sum(1 for r in results if r["outcome"] == RunState.WON.value)
    lost = sum(1 for r in results if r["outcome"] == RunState.LOST.value)
    avg = sum(r["elapsed_ms"] for r in results) / len(results) if results else 0.0
    return {"rounds": len(results), "won": won, "lost": lost, "avg_elapsed_ms": avg}


if __name__ == "__main__":
    result = simulate(DodgePilot(), seed=0, jitter_ms=config.SIM_JITTER_MS)
    print(f"Outcome: {result['outcome']} after {result['elapsed_ms'] / 1000:.1f} sec")
    print(f"Frames recorded: {len(result['frames'])}")
