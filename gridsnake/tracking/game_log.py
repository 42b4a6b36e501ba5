# gridsnake/tracking/game_log.py
from __future__ import annotations
import csv, os
from typing import Any, Callable, Dict, Optional, Protocol

from gridsnake.core.interfaces import Snapshot
from gridsnake.tracking.metrics import EMA, WindowedStat

GAME_KEYS = [
    "game",
    "score", "length", "ticks",
    "death_wall", "death_self",
    "score_ema", "score_mean100", "score_best",
]


class Logger(Protocol):
    def log(self, game: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, game: int, scalars: Dict[str, Any]) -> None:
        row = {"game": game, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(row.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(row)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> "CSVLogger":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class ScoreTracker:
    """Running score statistics across games: EMA, last-N mean, best."""
    def __init__(self, alpha: float = 0.05, window: int = 100):
        self.ema = EMA(alpha)
        self.window = WindowedStat(window)

    def update(self, score: int) -> Dict[str, float]:
        ema = self.ema.update(score)
        self.window.add(score)
        s = self.window.summary()
        return {
            "score_ema": ema,
            "score_mean100": s["mean"],
            "score_best": int(s["best"]),
        }


def make_game_logger(
    logger: Logger,
    tracker: Optional[ScoreTracker] = None,
) -> Callable[[int, Snapshot], Dict[str, Any]]:
    """
    Returns a function(game: int, snap: Snapshot) -> scalars that records one
    finished game. Call it with the snapshot taken after the game ended.
    """
    tracker = tracker or ScoreTracker()

    def _on_game_end(game: int, snap: Snapshot) -> Dict[str, Any]:
        scalars: Dict[str, Any] = {
            "score": snap.score,
            "length": snap.length,
            "ticks": snap.tick_count,
            "death_wall": 1 if snap.reason == "wall" else 0,
            "death_self": 1 if snap.reason == "self" else 0,
        }
        scalars.update(tracker.update(snap.score))
        logger.log(game, scalars)
        logger.flush()
        return scalars

    return _on_game_end
