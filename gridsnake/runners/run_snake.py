# gridsnake/runners/run_snake.py
from __future__ import annotations
import logging
import os
from typing import Callable, Optional
import pygame as pg

from gridsnake.config import AppConfig
from gridsnake.core.checkpointing import CheckpointManager
from gridsnake.core.engine import SnakeEngine
from gridsnake.core.grid import Direction
from gridsnake.core.interfaces import Phase, Snapshot, game_over_message
from gridsnake.tracking.game_log import CSVLogger, GAME_KEYS, make_game_logger
from gridsnake.viz.keyboard import Keyboard
from gridsnake.viz.render_iface import Renderer
from gridsnake.viz.renderer_pygame import PygameRenderer

logger = logging.getLogger(__name__)

TICK_EVENT = pg.USEREVENT + 1
START_TEXT = "Use the arrow keys to steer the snake to the food.\nPress any key to start."
RESUME_TEXT = "Game restored.\nPress any key to continue."
RESTART_HINT = "Press R to restart, Esc to quit."


class GameSession:
    """
    Turns pygame events into engine calls for one window.

    Owns the repeating tick timer and the start / game-over overlays. A game
    is recorded once, on the tick that moves it from Running to Ended; tick
    events still queued after the timer is cancelled are no-ops.
    """

    def __init__(
        self,
        cfg: AppConfig,
        engine: SnakeEngine,
        rend: Renderer,
        on_game_end: Optional[Callable[[int, Snapshot], object]] = None,
        ckpt: Optional[CheckpointManager] = None,
    ):
        self.cfg = cfg
        self.engine = engine
        self.rend = rend
        self.kbd = Keyboard()
        self.on_game_end = on_game_end
        self.ckpt = ckpt
        self.games = 0
        self.timer_armed = False

        snap = engine.snapshot()
        if snap.phase is Phase.ENDED:
            rend.set_overlay(f"{game_over_message(snap)}\n{RESTART_HINT}")
        elif snap.phase is Phase.RUNNING:
            rend.set_overlay(RESUME_TEXT)
        else:
            rend.set_overlay(START_TEXT)

    def arm_timer(self, on: bool) -> None:
        # period 0 cancels; cancelling twice is harmless
        pg.time.set_timer(TICK_EVENT, self.cfg.tick_ms if on else 0)
        self.timer_armed = on

    def on_tick(self) -> None:
        was = self.engine.snapshot().phase
        self.engine.tick()
        snap = self.engine.snapshot()
        if was is Phase.RUNNING and snap.phase is Phase.ENDED:
            self.arm_timer(False)
            self.games += 1
            if self.on_game_end:
                self.on_game_end(self.games, snap)
            self.rend.set_overlay(f"{game_over_message(snap)}\n{RESTART_HINT}")
        self.rend.draw(snap)

    def save(self) -> Optional[str]:
        if self.ckpt is None:
            return None
        path = self.ckpt.save(self.cfg.resume or "latest", {"engine": self.engine})
        logger.info("saved checkpoint %s", path)
        return path

    def handle(self, e: pg.event.Event) -> bool:
        """Processes one event; False means the window should close."""
        if e.type == TICK_EVENT:
            self.on_tick()
            return True

        cmd = self.kbd.translate(e)
        if cmd is None:
            return True
        if cmd == "quit":
            return False
        if cmd == "save":
            self.save()
            return True

        phase = self.engine.snapshot().phase
        if phase is Phase.ENDED:
            if cmd == "restart":
                self.engine.reset()
                self.rend.set_overlay(None)
                self.arm_timer(True)
        elif not self.timer_armed:
            # first key of a new or restored game
            self.engine.start()
            self.rend.set_overlay(None)
            self.arm_timer(True)
        if isinstance(cmd, Direction):
            self.engine.request_direction(cmd)
        self.rend.draw(self.engine.snapshot())
        return True


def main(cfg: AppConfig) -> GameSession:
    engine = SnakeEngine.from_config(cfg)
    ckpt = CheckpointManager(cfg.checkpoint_dir) if cfg.checkpoint_dir else None
    if cfg.resume:
        if ckpt is None:
            raise ValueError("resume needs a checkpoint_dir")
        ckpt.load(cfg.resume, {"engine": engine})
        logger.info("resumed %s", ckpt.path_for(cfg.resume))

    rend = PygameRenderer()
    rend.open(cfg)
    csv_log = CSVLogger(os.path.join(cfg.log_dir, "games.csv"), GAME_KEYS) if cfg.log_dir else None
    session = GameSession(
        cfg, engine, rend,
        on_game_end=make_game_logger(csv_log) if csv_log else None,
        ckpt=ckpt,
    )

    rend.draw(engine.snapshot())
    clock = pg.time.Clock()
    running = True
    try:
        while running:
            for e in pg.event.get():
                if not session.handle(e):
                    running = False
                    break
            clock.tick(60)
    finally:
        session.arm_timer(False)
        rend.close()
        if csv_log:
            csv_log.close()
    logger.info("quit after %d finished game(s)", session.games)
    return session
