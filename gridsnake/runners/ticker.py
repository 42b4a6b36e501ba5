# gridsnake/runners/ticker.py
from __future__ import annotations
import logging
import threading
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class IntervalTicker:
    """Calls ``callback`` every ``period_s`` seconds on a daemon thread.

    ``start`` and ``stop`` are idempotent. ``stop`` only halts the timer; it
    never touches whatever the callback drives, and it is safe to call from
    inside the callback itself.
    """

    def __init__(self, callback: Callable[[], None], period_s: float, name: str = "IntervalTicker"):
        if period_s <= 0:
            raise ValueError(f"period must be > 0, got {period_s}")
        self._callback = callback
        self._period = float(period_s)
        self._name = name
        self._stop = threading.Event()
        self._t: Optional[threading.Thread] = None
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self._t is not None and self._t.is_alive() and not self._stop.is_set()

    def start(self) -> None:
        if self.running:
            return
        old = self._t
        if old is threading.current_thread():
            # restarted from inside the callback: keep the current loop going
            self._stop.clear()
            return
        if old is not None:
            old.join()
        self._stop.clear()
        self._t = threading.Thread(target=self._run, name=self._name, daemon=True)
        self._t.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        t = self._t
        if t is not None and t is not threading.current_thread():
            t.join(timeout)

    def _run(self) -> None:
        next_at = time.perf_counter() + self._period
        while not self._stop.wait(max(0.0, next_at - time.perf_counter())):
            try:
                self._callback()
            except Exception:
                logger.exception("tick callback failed; stopping %s", self._name)
                self._stop.set()
                break
            self.ticks += 1
            next_at += self._period
            now = time.perf_counter()
            if next_at < now:
                # fell behind; skip missed ticks instead of bursting
                next_at = now + self._period
