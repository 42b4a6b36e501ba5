# gridsnake/tracking/metrics.py
from __future__ import annotations
from collections import deque
from typing import Deque, Dict, Optional

class EMA:
    """Exponential moving average; the first sample seeds it."""
    def __init__(self, alpha: float):
        if not 0.0 < alpha <= 1.0:
            raise ValueError(f"alpha must be in (0, 1], got {alpha}")
        self.alpha = alpha
        self.value: Optional[float] = None

    def update(self, x: float) -> float:
        x = float(x)
        self.value = x if self.value is None else self.alpha * x + (1.0 - self.alpha) * self.value
        return self.value

class WindowedStat:
    """Mean/min/max over the last ``window`` samples, plus an all-time best."""
    def __init__(self, window: int):
        self.buf: Deque[float] = deque(maxlen=max(1, window))
        self.best: Optional[float] = None
        self.count = 0

    def add(self, x: float) -> None:
        x = float(x)
        self.buf.append(x)
        self.count += 1
        self.best = x if self.best is None else max(self.best, x)

    def summary(self) -> Dict[str, float]:
        if not self.buf:
            return {"mean": 0.0, "min": 0.0, "max": 0.0, "best": 0.0}
        b = list(self.buf)
        return {"mean": sum(b) / len(b), "min": min(b), "max": max(b), "best": self.best}
