# gridsnake/viz/renderer_headless.py
from __future__ import annotations
import sys
from typing import Optional, TextIO
from gridsnake.config import AppConfig
from gridsnake.core.interfaces import Snapshot

class HeadlessRenderer:
    """Renderer without a window. Counts frames, optionally prints text boards."""
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.frames = 0
        self.last: Optional[Snapshot] = None
        self.overlay: Optional[str] = None
        self._print = False

    def open(self, cfg: AppConfig) -> None:
        self._print = cfg.print_board
        self.frames = 0

    def set_overlay(self, text: Optional[str]) -> None:
        self.overlay = text or None
        if self.overlay and self._print:
            print(self.overlay, file=self.stream or sys.stdout)

    def draw(self, snap: Snapshot) -> None:
        self.frames += 1
        self.last = snap
        if self._print:
            out = self.stream or sys.stdout
            print(f"tick {snap.tick_count}  score {snap.score}", file=out)
            print(snap.print_board(), file=out)

    def close(self) -> None:
        pass
