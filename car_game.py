#!/usr/bin/env python3
"""
DODGE RACE — 2D car dodge game
Steer up and down, dodge the blocks until the clock runs out.

Requirements:
    pip install pygame
"""

from __future__ import annotations

import sys

import pygame

from game_engine import GameState, UP, DOWN
from game_loop import GameLoop
from dodgerace.config.loader import load_settings
from dodgerace.config.schema import Settings
from dodgerace.render import render
from dodgerace.screens import BUTTON_DIRECTIONS, Panel, RESTART, START, ScreenShell

KEY_DIRECTIONS = {
    pygame.K_UP: UP, pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
}


def load_fonts():
    try:
        return {
            "hud": pygame.font.SysFont("Courier New", 24, bold=True),
            "title": pygame.font.SysFont("Courier New", 52, bold=True),
            "sub": pygame.font.SysFont("Courier New", 18),
        }
    except Exception:
        return {
            "hud": pygame.font.SysFont(None, 24),
            "title": pygame.font.SysFont(None, 52),
            "sub": pygame.font.SysFont(None, 18),
        }


# ─────────────────────────────────────────
# Main
# ─────────────────────────────────────────

def main(settings: Settings | None = None):
    settings = settings or load_settings()
    display = settings.display

    pygame.init()
    screen = pygame.display.set_mode((display.width, display.height), pygame.RESIZABLE)
    pygame.display.set_caption(display.caption)
    clock = pygame.time.Clock()
    fonts = load_fonts()

    state = GameState(seed=settings.seed, tuning=settings.tuning)
    shell = ScreenShell(state)
    state.subscribe(lambda old, new: print(f"[game] {old.value} -> {new.value}"))

    loop = GameLoop(state, size=lambda: shell.round_size(*screen.get_size()))
    token = None  # frame token while a round is being driven

    def start_round():
        nonlocal token
        token = loop.start(pygame.time.get_ticks())

    def back_to_menu():
        nonlocal token
        loop.cancel()
        token = None
        state.return_to_menu()

    while True:
        clock.tick(display.fps)
        w, h = screen.get_size()

        # ── Events ──────────────────────
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                w, h = screen.get_size()
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key in KEY_DIRECTIONS:
                    state.intent.press(KEY_DIRECTIONS[event.key])
                elif event.key in (pygame.K_RETURN, pygame.K_SPACE):
                    if shell.panel is Panel.START:
                        start_round()
                    elif shell.panel in (Panel.WIN, Panel.GAME_OVER):
                        back_to_menu()
            if event.type == pygame.KEYUP and event.key in KEY_DIRECTIONS:
                state.intent.release(KEY_DIRECTIONS[event.key])
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                name = shell.hit(event.pos, w, h)
                if name in BUTTON_DIRECTIONS:
                    state.intent.press(BUTTON_DIRECTIONS[name])
                elif name == START:
                    start_round()
                elif name == RESTART:
                    back_to_menu()
            if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                state.intent.release_all()

        # ── Update ──────────────────────
        if token is not None and not loop.on_frame(pygame.time.get_ticks(), token):
            token = None
        shell.refresh_time()

        # ── Draw ────────────────────────
        pw, ph = shell.playfield_size(w, h)
        render(screen, state, pw, ph)
        shell.draw(screen, fonts, w, h)

        pygame.display.flip()


if __name__ == "__main__":
    main()
