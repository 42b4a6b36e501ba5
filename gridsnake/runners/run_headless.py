# gridsnake/runners/run_headless.py
from __future__ import annotations
import logging
import os
import random
import threading
from typing import List, Optional

from gridsnake.config import AppConfig
from gridsnake.core.checkpointing import CheckpointManager
from gridsnake.core.engine import SnakeEngine
from gridsnake.core.grid import Direction, translate
from gridsnake.core.interfaces import Phase, Snapshot, game_over_message
from gridsnake.runners.ticker import IntervalTicker
from gridsnake.tracking.game_log import CSVLogger, GAME_KEYS, make_game_logger
from gridsnake.viz.render_iface import Renderer
from gridsnake.viz.renderer_headless import HeadlessRenderer

logger = logging.getLogger(__name__)


def safe_directions(snap: Snapshot) -> List[Direction]:
    """Directions that neither reverse nor collide on the next tick."""
    occupied = set(snap.body)
    out = []
    for d in Direction:
        if d is snap.direction.opposite:
            continue
        x, y = translate(snap.head, d)
        if not (0 <= x < snap.grid_size and 0 <= y < snap.grid_size):
            continue
        if (x, y) in occupied:
            continue
        out.append(d)
    return out


def play_game(engine: SnakeEngine, cfg: AppConfig, rend: Renderer, rng: random.Random) -> Snapshot:
    """Runs one game to the end: the ticker thread advances, this thread steers."""
    done = threading.Event()

    def on_tick() -> None:
        engine.tick()
        snap = engine.snapshot()
        rend.draw(snap)
        if snap.phase is Phase.ENDED:
            done.set()
            ticker.stop()

    ticker = IntervalTicker(on_tick, cfg.tick_seconds, name="snake-ticker")
    ticker.start()
    try:
        while not done.wait(1.0 / cfg.input_hz):
            if not ticker.running and not done.is_set():
                raise RuntimeError("ticker stopped before the game ended")
            choices = safe_directions(engine.snapshot())
            if choices:
                engine.request_direction(rng.choice(choices))
    finally:
        ticker.stop()
    return engine.snapshot()


def main(cfg: AppConfig, rend: Optional[Renderer] = None) -> List[Snapshot]:
    engine = SnakeEngine.from_config(cfg)
    if cfg.resume:
        CheckpointManager(cfg.checkpoint_dir).load(cfg.resume, {"engine": engine})
        logger.info("resumed checkpoint %s", cfg.resume)
    input_rng = random.Random(None if cfg.seed is None else cfg.seed + 1)
    rend = rend or HeadlessRenderer()
    rend.open(cfg)

    csv_log = CSVLogger(os.path.join(cfg.log_dir, "games.csv"), GAME_KEYS) if cfg.log_dir else None
    on_game_end = make_game_logger(csv_log) if csv_log else None

    results: List[Snapshot] = []
    try:
        for game in range(1, cfg.games + 1):
            phase = engine.snapshot().phase
            if phase is Phase.NOT_STARTED:
                engine.start()
            elif phase is Phase.ENDED:
                engine.reset()
            snap = play_game(engine, cfg, rend, input_rng)
            results.append(snap)
            rend.set_overlay(game_over_message(snap))
            if on_game_end:
                stats = on_game_end(game, snap)
                logger.info("[game %d] score=%d reason=%s mean=%.2f best=%d",
                            game, snap.score, snap.reason, stats["score_mean100"], stats["score_best"])
            else:
                logger.info("[game %d] score=%d reason=%s", game, snap.score, snap.reason)
    finally:
        rend.close()
        if csv_log:
            csv_log.close()
    return results
