# gridsnake/viz/keyboard.py
from __future__ import annotations
from typing import Optional, Union
import pygame as pg
from gridsnake.core.grid import Direction

Command = Union[Direction, str]   # Direction, "quit", "restart", "save" or "any"

ARROWS = {
    pg.K_UP: Direction.UP,
    pg.K_DOWN: Direction.DOWN,
    pg.K_LEFT: Direction.LEFT,
    pg.K_RIGHT: Direction.RIGHT,
}

class Keyboard:
    """Maps pygame events to commands for the game loop."""

    def translate(self, e: pg.event.Event) -> Optional[Command]:
        if e.type == pg.QUIT:
            return "quit"
        if e.type != pg.KEYDOWN:
            return None
        if e.key == pg.K_ESCAPE:
            return "quit"
        if e.key in ARROWS:
            return ARROWS[e.key]
        if e.key in (pg.K_r, pg.K_RETURN, pg.K_KP_ENTER):
            return "restart"
        if e.key == pg.K_s:
            return "save"
        return "any"

