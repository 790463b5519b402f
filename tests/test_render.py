"""Tests for dodgerace/render.py and dodgerace/screens.py — off-screen drawing and panels."""

import os
import sys
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pygame
import pytest

from game_engine import GameState, Obstacle, RunState, Tuning
from dodgerace.render import C_CAR, C_DIVIDER, C_OBS, C_ROAD, C_WHEEL, render
from dodgerace.screens import HUD_H, Panel, RESTART, START, ScreenShell

W, H = 800, 400


def rgb(surf, pos):
    return tuple(surf.get_at(pos))[:3]


@pytest.fixture
def surf():
    return pygame.Surface((W, H))


class TestRender:
    def test_playfield(self, surf):
        gs = GameState(seed=1)
        gs.start(W, H)
        gs.obstacles.append(Obstacle(500, 100))
        render(surf, gs, W, H)
        assert rgb(surf, (1, 1)) == C_ROAD
        assert rgb(surf, (W // 2, 10)) == C_DIVIDER
        assert rgb(surf, (W // 2, 30)) == C_ROAD
        assert rgb(surf, (90, 200)) == C_CAR
        assert rgb(surf, (66, 183)) == C_WHEEL
        assert rgb(surf, (66, 216)) == C_WHEEL
        assert rgb(surf, (520, 120)) == C_OBS

    def test_render_does_not_mutate(self, surf):
        gs = GameState(seed=1)
        gs.start(W, H)
        gs.tick(700, W, H)
        before = gs.encode()
        render(surf, gs, W, H)
        assert gs.encode() == before

    def test_render_outside_running(self, surf):
        """Final frozen frame and title screen both render, with or without obstacles."""
        gs = GameState(seed=1)
        render(surf, gs, W, H)
        gs.start(W, H)
        gs.obstacles.append(Obstacle(gs.car.x, gs.car.y))
        gs.tick(0, W, H)
        assert gs.run_state is RunState.LOST
        render(surf, gs, W, H)
        assert rgb(surf, (90, 200)) in (C_CAR, C_OBS)


class TestScreenShell:
    def test_panel_mirrors_run_state(self):
        gs = GameState(seed=1, tuning=Tuning(duration_ms=100))
        shell = ScreenShell(gs)
        assert shell.panel is Panel.START
        gs.start(W, H)
        assert shell.panel is Panel.GAME
        gs.tick(100, W, H)
        assert shell.panel is Panel.WIN
        gs.return_to_menu()
        assert shell.panel is Panel.START

    def test_game_over_panel(self):
        gs = GameState(seed=1)
        shell = ScreenShell(gs)
        gs.start(W, H)
        gs.obstacles.append(Obstacle(gs.car.x, gs.car.y))
        gs.tick(0, W, H)
        assert shell.panel is Panel.GAME_OVER

    def test_time_text(self):
        gs = GameState(seed=1)
        shell = ScreenShell(gs)
        assert shell.time_text == "50.0"
        gs.start(W, H)
        gs.tick(200, W, H)
        shell.refresh_time()
        assert shell.time_text == "49.8"

    def test_playfield_excludes_hud_in_game(self):
        gs = GameState(seed=1)
        shell = ScreenShell(gs)
        assert shell.playfield_size(W, H + HUD_H) == (W, H + HUD_H)
        gs.start(W, H)
        assert shell.playfield_size(W, H + HUD_H) == (W, H)

    def test_button_hits(self):
        gs = GameState(seed=1)
        shell = ScreenShell(gs)
        start = shell.buttons(W, H)[START]
        assert shell.hit(start.center, W, H) == START
        assert shell.hit((1, 1), W, H) is None

        gs.start(W, H)
        buttons = shell.buttons(W, H)
        assert set(buttons) == {"up", "down"}
        assert shell.hit(buttons["down"].center, W, H) == "down"

        gs.obstacles.append(Obstacle(gs.car.x, gs.car.y))
        gs.tick(0, W, H)
        assert RESTART in shell.buttons(W, H)

    def test_draw_every_panel(self, surf):
        pygame.font.init()
        fonts = {k: pygame.font.SysFont(None, 20) for k in ("hud", "title", "sub")}
        gs = GameState(seed=1, tuning=Tuning(duration_ms=100))
        shell = ScreenShell(gs)
        shell.draw(surf, fonts, W, H)
        gs.start(W, H)
        gs.intent.press(-1)
        shell.draw(surf, fonts, W, H)
        gs.tick(100, W, H)
        shell.draw(surf, fonts, W, H)
        assert shell.panel is Panel.WIN
