from __future__ import annotations

"""Screen shell: mirrors the run state onto one of four panels and owns the buttons."""

from enum import Enum

import pygame

from config import HUD_H
from game_engine import GameState, RunState, UP, DOWN
from dodgerace.render import C_BUTTON, C_BUTTON_HOT, C_DIM, C_PANEL, C_WHITE, C_CAR, C_OBS

BUTTON_W, BUTTON_H = 160, 44
ARROW_W = 72


class Panel(Enum):
    START = "start"
    GAME = "game"
    WIN = "win"
    GAME_OVER = "game_over"


PANEL_FOR_STATE = {
    RunState.NOT_STARTED: Panel.START,
    RunState.RUNNING: Panel.GAME,
    RunState.WON: Panel.WIN,
    RunState.LOST: Panel.GAME_OVER,
}

TITLES = {
    Panel.START: ("DODGE RACE", "dodge the blocks for 50 seconds"),
    Panel.WIN: ("YOU WIN!", "you survived the whole race"),
    Panel.GAME_OVER: ("GAME OVER", "you hit an obstacle"),
}

# Button ids
START, RESTART = "start", "restart"
BUTTON_DIRECTIONS = {"up": UP, "down": DOWN}


class ScreenShell:
    """Keeps the visible panel in step with ``state`` via a run-state listener."""

    def __init__(self, state: GameState):
        self.state = state
        self.panel = PANEL_FOR_STATE[state.run_state]
        self.time_text = f"{state.tuning.duration_ms / 1000:.1f}"
        state.subscribe(self.on_run_state)

    def on_run_state(self, old, new):
        self.panel = PANEL_FOR_STATE[new]

    def round_size(self, width, height):
        """Playfield a round is played in: the window minus the HUD strip."""
        return width, max(0, height - HUD_H)

    def playfield_size(self, width, height):
        """Area the playfield is drawn in for the current panel."""
        if self.panel is Panel.GAME:
            return self.round_size(width, height)
        return width, height

    def refresh_time(self):
        self.time_text = self.state.remaining_text()

    def buttons(self, width, height) -> dict[str, pygame.Rect]:
        if self.panel is Panel.GAME:
            top = height - HUD_H + (HUD_H - BUTTON_H) // 2
            return {
                "up": pygame.Rect(width - 2 * ARROW_W - 24, top, ARROW_W, BUTTON_H),
                "down": pygame.Rect(width - ARROW_W - 12, top, ARROW_W, BUTTON_H),
            }
        rect = pygame.Rect(0, 0, BUTTON_W, BUTTON_H)
        rect.center = (width // 2, height // 2 + 60)
        return {START if self.panel is Panel.START else RESTART: rect}

    def hit(self, pos, width, height):
        """Return the id of the button under ``pos`` or None."""
        for name, rect in self.buttons(width, height).items():
            if rect.collidepoint(pos):
                return name
        return None

    # ── drawing ─────────────────────────
    def _draw_button(self, surf, font, rect, label, hot=False):
        pygame.draw.rect(surf, C_BUTTON_HOT if hot else C_BUTTON, rect, border_radius=8)
        t = font.render(label, True, C_WHITE)
        surf.blit(t, t.get_rect(center=rect.center))

    def draw_hud(self, surf, fonts, width, height):
        pygame.draw.rect(surf, C_PANEL, (0, height - HUD_H, width, HUD_H))
        t = fonts["hud"].render(f"TIME {self.time_text}", True, C_WHITE)
        surf.blit(t, (16, height - HUD_H + (HUD_H - t.get_height()) // 2))
        held = self.state.intent.value
        for name, rect in self.buttons(width, height).items():
            label = "▲" if name == "up" else "▼"
            self._draw_button(surf, fonts["hud"], rect, label, hot=BUTTON_DIRECTIONS[name] == held)

    def draw_panel(self, surf, fonts, width, height):
        dim = pygame.Surface((width, height), pygame.SRCALPHA)
        dim.fill((0, 0, 0, 155))
        surf.blit(dim, (0, 0))

        title, sub = TITLES[self.panel]
        color = C_CAR if self.panel is Panel.GAME_OVER else C_OBS
        t = fonts["title"].render(title, True, color)
        surf.blit(t, (width // 2 - t.get_width() // 2, height // 2 - 90))
        s = fonts["sub"].render(sub, True, C_DIM)
        surf.blit(s, (width // 2 - s.get_width() // 2, height // 2 - 30))

        for name, rect in self.buttons(width, height).items():
            self._draw_button(surf, fonts["sub"], rect, "START" if name == START else "PLAY AGAIN")

        if self.panel is Panel.START:
            ctrl = fonts["sub"].render("↑ ↓  or  W S  to steer", True, C_DIM)
            surf.blit(ctrl, (width // 2 - ctrl.get_width() // 2, height // 2 + 100))

    def draw(self, surf, fonts, width, height):
        """Draw the chrome for the current panel over an already rendered playfield."""
        if self.panel is Panel.GAME:
            self.draw_hud(surf, fonts, width, height)
        else:
            self.draw_panel(surf, fonts, width, height)
