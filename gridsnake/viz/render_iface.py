# gridsnake/viz/render_iface.py
from __future__ import annotations
from typing import Optional, Protocol
from gridsnake.config import AppConfig
from gridsnake.core.interfaces import Snapshot

class Renderer(Protocol):
    def open(self, cfg: AppConfig) -> None: ...
    def set_overlay(self, text: Optional[str]) -> None: ...
    def draw(self, snap: Snapshot) -> None: ...
    def close(self) -> None: ...
