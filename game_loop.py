"""Frame driver — turns display-refresh timestamps into tick + render calls."""

from __future__ import annotations

from game_engine import GameState


class GameLoop:
    """Owns a GameState and drives it from an external frame clock.

    ``render`` is called as ``render(state, width, height)`` after every tick,
    including the frame on which the round ended, so the final frame stays on
    screen. ``size`` is a callable returning the current playfield (w, h); it is
    queried every frame so window resizes are picked up.
    """

    def __init__(self, state: GameState, size, render=None):
        self.state = state
        self.size = size
        self.render = render
        self.last_time = 0.0
        self.generation = 0

    def start(self, now_ms) -> int:
        """Begin a round. Returns the token the next frame callback must carry."""
        w, h = self.size()
        self.state.start(w, h)
        self.last_time = now_ms
        self.generation += 1
        return self.generation

    def cancel(self):
        """Invalidate any frame callback that is already scheduled."""
        self.generation += 1

    def on_frame(self, timestamp_ms, token=None) -> bool:
        """Run one frame. Returns True if another frame should be requested."""
        if token is not None and token != self.generation:
            return False
        if not self.state.running:
            return False
        dt = timestamp_ms - self.last_time
        self.last_time = timestamp_ms
        w, h = self.size()
        self.state.tick(dt, w, h)
        if self.render is not None:
            self.render(self.state, w, h)
        return self.state.running
