# gridsnake/config.py
from dataclasses import dataclass, replace
from typing import Optional, Tuple

@dataclass(frozen=True, slots=True)
class AppConfig:
    # shared / global
    grid_size: int = 30
    seed: Optional[int] = None
    origin: Tuple[int, int] = (0, 0)

    # gameplay
    tick_ms: int = 200
    food_max_rejections: int = 32

    # render
    render_cell: int = 20
    render_title: str = "Snake"
    render_grid_lines: bool = False
    render_show_hud: bool = True
    render_record_dir: Optional[str] = None

    # headless
    games: int = 1
    print_board: bool = False
    input_hz: float = 20.0

    # checkpoints
    checkpoint_dir: str = "checkpoints"
    resume: Optional[str] = None     # tag to load before the first game

    # logging
    log_dir: Optional[str] = "logs"
    log_level: str = "INFO"

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
