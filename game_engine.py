"""
Pure game logic for DODGE RACE — no pygame dependency.
Used by the pygame app, the frame loop, and the headless simulator.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

# ─────────────────────────────────────────
# Constants
# ─────────────────────────────────────────
GAME_DURATION = 50_000  # ms

CAR_X = 60
CAR_W, CAR_H = 60, 30
CAR_SPEED = 300  # px/s vertical

OBS_W, OBS_H = 40, 40
OBS_SPEED = 300  # px/s horizontal
OBS_MIN_INTERVAL = 600  # ms
OBS_MAX_INTERVAL = 1300  # ms

UP, IDLE, DOWN = -1, 0, 1


@dataclass(frozen=True)
class Tuning:
    duration_ms: float = GAME_DURATION
    car_x: float = CAR_X
    car_w: float = CAR_W
    car_h: float = CAR_H
    car_speed: float = CAR_SPEED
    obs_w: float = OBS_W
    obs_h: float = OBS_H
    obs_speed: float = OBS_SPEED
    min_interval_ms: float = OBS_MIN_INTERVAL
    max_interval_ms: float = OBS_MAX_INTERVAL

    def __post_init__(self):
        for name in ("duration_ms", "car_w", "car_h", "obs_w", "obs_h"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        for name in ("car_speed", "obs_speed", "min_interval_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)}")
        if self.min_interval_ms > self.max_interval_ms:
            raise ValueError(
                f"min_interval_ms ({self.min_interval_ms}) > max_interval_ms ({self.max_interval_ms})"
            )


DEFAULT_TUNING = Tuning()


# ─────────────────────────────────────────
# Run state
# ─────────────────────────────────────────

class RunState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    WON = "won"
    LOST = "lost"


class RunEvent(Enum):
    START = "start"
    COLLIDE = "collide"
    TIME_UP = "time_up"
    MENU = "menu"


class InvalidTransition(ValueError):
    pass


def transition(state: RunState, event: RunEvent) -> RunState:
    """Return the run state reached from ``state`` on ``event``.

    START restarts from anywhere and MENU returns to the title from anywhere.
    COLLIDE and TIME_UP only end a running round.
    """
    if event is RunEvent.START:
        return RunState.RUNNING
    if event is RunEvent.MENU:
        return RunState.NOT_STARTED
    if state is not RunState.RUNNING:
        raise InvalidTransition(f"{event.value} is not possible while {state.value}")
    return RunState.LOST if event is RunEvent.COLLIDE else RunState.WON


# ─────────────────────────────────────────
# Game objects
# ─────────────────────────────────────────

def rects_overlap(a, b) -> bool:
    """Inclusive AABB test on (x, y, w, h) tuples. Touching edges overlap."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return not (ax > bx + bw or ax + aw < bx or ay > by + bh or ay + ah < by)


class InputIntent:
    """Currently held direction: -1 up, 0 idle, +1 down."""

    def __init__(self):
        self.value = IDLE

    def press(self, direction):
        if direction not in (UP, DOWN):
            raise ValueError(f"direction must be -1 or 1, got {direction!r}")
        self.value = direction

    def release(self, direction):
        """Clear the intent only if ``direction`` is the active one."""
        if self.value == direction:
            self.value = IDLE

    def release_all(self):
        self.value = IDLE


class Car:
    def __init__(self, y=0.0, tuning=DEFAULT_TUNING):
        self.tuning = tuning
        self.x = float(tuning.car_x)
        self.y = float(y)

    @classmethod
    def centered(cls, height, tuning=DEFAULT_TUNING):
        return cls(max(0.0, (height - tuning.car_h) / 2), tuning)

    def update(self, direction, dt_ms, height):
        self.y += direction * self.tuning.car_speed * dt_ms / 1000
        max_y = max(0.0, height - self.tuning.car_h)
        if self.y < 0:
            self.y = 0.0
        if self.y > max_y:
            self.y = max_y

    def rect(self):
        """Return (x, y, w, h) tuple for collision detection."""
        return (self.x, self.y, self.tuning.car_w, self.tuning.car_h)


class Obstacle:
    def __init__(self, x, y, tuning=DEFAULT_TUNING):
        self.tuning = tuning
        self.x = float(x)
        self.y = float(y)

    def update(self, dt_ms):
        self.x -= self.tuning.obs_speed * dt_ms / 1000

    def gone(self):
        return self.x + self.tuning.obs_w <= 0

    def rect(self):
        """Return (x, y, w, h) tuple for collision detection."""
        return (self.x, self.y, self.tuning.obs_w, self.tuning.obs_h)


class GameState:
    def __init__(self, seed=None, tuning=DEFAULT_TUNING):
        self.rng = random.Random(seed)
        self.tuning = tuning
        self.run_state = RunState.NOT_STARTED
        self.intent = InputIntent()
        self.car = Car(tuning=tuning)
        self.obstacles = []
        self.elapsed = 0.0
        self.next_obstacle_in = 0.0
        self._listeners = []

    # ── run state ───────────────────────
    def subscribe(self, listener):
        """Register ``listener(old, new)`` for run-state changes."""
        self._listeners.append(listener)

    def _apply(self, event):
        old = self.run_state
        self.run_state = transition(old, event)
        for listener in list(self._listeners):
            listener(old, self.run_state)

    @property
    def running(self):
        return self.run_state is RunState.RUNNING

    @property
    def remaining_ms(self):
        return max(0.0, self.tuning.duration_ms - self.elapsed)

    def remaining_text(self):
        """Remaining time in seconds with one decimal, e.g. '49.8'."""
        return f"{self.remaining_ms / 1000:.1f}"

    def _roll_interval(self):
        return self.rng.uniform(self.tuning.min_interval_ms, self.tuning.max_interval_ms)

    def start(self, width, height):
        self.elapsed = 0.0
        self.obstacles = []
        self.next_obstacle_in = self._roll_interval()
        self.car = Car.centered(height, self.tuning)
        self._apply(RunEvent.START)

    def return_to_menu(self):
        self._apply(RunEvent.MENU)

    # ── per-frame update ────────────────
    def spawn_obstacle(self, width, height):
        max_y = max(0.0, height - self.tuning.obs_h)
        o = Obstacle(width + self.tuning.obs_w, self.rng.random() * max_y, self.tuning)
        self.obstacles.append(o)
        return o

    def tick(self, dt_ms, width, height):
        """Advance the round by ``dt_ms`` milliseconds on a width x height playfield."""
        if not self.running:
            return
        dt_ms = max(0.0, dt_ms)

        self.elapsed += dt_ms

        self.car.update(self.intent.value, dt_ms, height)

        # Spawn obstacles
        self.next_obstacle_in -= dt_ms
        if self.next_obstacle_in <= 0:
            self.spawn_obstacle(width, height)
            self.next_obstacle_in = self._roll_interval()

        # Update obstacles
        for o in self.obstacles:
            o.update(dt_ms)
        self.obstacles = [o for o in self.obstacles if not o.gone()]

        # Check collisions
        if self._check_collision():
            self._apply(RunEvent.COLLIDE)
            return

        if self.elapsed >= self.tuning.duration_ms:
            self._apply(RunEvent.TIME_UP)

    def _check_collision(self):
        car = self.car.rect()
        for o in self.obstacles:
            if rects_overlap(car, o.rect()):
                return True
        return False

    def encode(self):
        """Encode current state as dict for the simulator and replays."""
        return {
            "state": self.run_state.value,
            "elapsed": self.elapsed,
            "remaining": self.remaining_ms,
            "car_y": self.car.y,
            "intent": self.intent.value,
            "obs": [[o.x, o.y] for o in self.obstacles],
        }
