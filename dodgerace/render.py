from __future__ import annotations

"""Shared pygame rendering primitives for the Dodge Race playfield."""

import pygame

from game_engine import GameState

# Palette
C_ROAD = (48, 48, 48)       # #303030
C_DIVIDER = (85, 85, 85)    # #555
C_CAR = (255, 0, 76)        # #ff004c
C_WHEEL = (0, 0, 0)
C_OBS = (0, 216, 255)       # #00d8ff
C_WHITE = (255, 255, 255)
C_DIM = (160, 160, 180)
C_PANEL = (20, 20, 30)
C_BUTTON = (60, 60, 80)
C_BUTTON_HOT = (90, 90, 120)

DIVIDER_WIDTH = 4
DASH = (20, 20)  # on, off

WHEEL_W, WHEEL_H = 10, 4
WHEEL_INSET = 5


def draw_dashed_vline(surf, color, x, y0, y1, width=DIVIDER_WIDTH, dash=DASH):
    on, off = dash
    y = y0
    while y < y1:
        seg = min(on, y1 - y)
        pygame.draw.line(surf, color, (x, y), (x, y + seg), width)
        y += on + off


def draw_road_background(surf, width, height) -> None:
    """Road fill plus the centred dashed divider."""
    surf.fill(C_ROAD, pygame.Rect(0, 0, width, height))
    draw_dashed_vline(surf, C_DIVIDER, width // 2, 0, height)


def draw_car(surf, x, y, w, h) -> None:
    """Car body with four wheel accents, two above and two below."""
    pygame.draw.rect(surf, C_CAR, (round(x), round(y), round(w), round(h)))
    left = round(x + WHEEL_INSET)
    right = round(x + w - WHEEL_INSET - WHEEL_W)
    top = round(y - WHEEL_H)
    bottom = round(y + h)
    for wx, wy in ((left, top), (right, top), (left, bottom), (right, bottom)):
        pygame.draw.rect(surf, C_WHEEL, (wx, wy, WHEEL_W, WHEEL_H))


def draw_obstacles(surf, obstacles) -> None:
    for o in obstacles:
        x, y, w, h = o.rect()
        pygame.draw.rect(surf, C_OBS, (round(x), round(y), round(w), round(h)))


def render(surf, state: GameState, width, height) -> None:
    """Draw the playfield for ``state``. Never mutates the state."""
    draw_road_background(surf, width, height)
    x, y, w, h = state.car.rect()
    draw_car(surf, x, y, w, h)
    draw_obstacles(surf, state.obstacles)
