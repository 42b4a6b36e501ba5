# gridsnake/core/engine.py  (pure rules, no pygame)
from __future__ import annotations
import logging
import random
import threading
from typing import Any, Dict, List, Optional, Union

from gridsnake.config import AppConfig

from .grid import Cell, Direction, Grid, translate
from .interfaces import Phase, Snapshot

logger = logging.getLogger(__name__)

DEFAULT_DIRECTION = Direction.RIGHT


class SnakeEngine:
    """
    Owns the game state and every transition on it.

    The engine never schedules itself: a driver calls ``tick()`` at a fixed
    period and an input source calls ``request_direction()`` in between.
    All public methods take the same lock, so each call is one atomic step
    even when the driver and the input source live on different threads.
    """

    def __init__(
        self,
        grid_size: int,
        rng: Optional[random.Random] = None,
        *,
        origin: Cell = Cell(0, 0),
        food_max_rejections: int = 32,
    ):
        self.grid = Grid(grid_size)
        if not self.grid.contains(origin):
            raise ValueError(f"origin {tuple(origin)} is outside a {grid_size}x{grid_size} grid")
        self.rng = rng if rng is not None else random.Random()
        self.origin = Cell(*origin)
        self.food_max_rejections = max(0, food_max_rejections)
        self._lock = threading.RLock()
        self._reset_state()
        self.phase = Phase.NOT_STARTED

    @classmethod
    def from_config(cls, cfg: AppConfig) -> "SnakeEngine":
        return cls(
            cfg.grid_size,
            random.Random(cfg.seed),
            origin=Cell(*cfg.origin),
            food_max_rejections=cfg.food_max_rejections,
        )

    # ---- lifecycle ----
    def start(self) -> None:
        with self._lock:
            if self.phase is not Phase.NOT_STARTED:
                logger.debug("start() ignored in phase %s", self.phase.value)
                return
            self.phase = Phase.RUNNING
            logger.info("game started on %dx%d grid", self.grid.size, self.grid.size)

    def reset(self) -> None:
        with self._lock:
            self._reset_state()
            self.phase = Phase.RUNNING
            logger.info("game reset")

    def _reset_state(self) -> None:
        self.body: List[Cell] = [self.origin]
        self.direction = DEFAULT_DIRECTION
        self.pending_direction = DEFAULT_DIRECTION
        self.score = 0
        self.tick_count = 0
        self.reason: Optional[str] = None
        self.food = self._place_food()

    # ---- input ----
    def request_direction(self, d: Union[Direction, str]) -> None:
        with self._lock:
            if self.phase is not Phase.RUNNING:
                return
            if not isinstance(d, Direction):
                try:
                    d = Direction.parse(d)
                except ValueError:
                    logger.debug("ignoring unknown direction %r", d)
                    return
            # checked against the committed direction, not an earlier pending one
            if d is self.direction.opposite:
                logger.debug("ignoring reversal %s while moving %s", d.name, self.direction.name)
                return
            self.pending_direction = d

    # ---- simulation ----
    def tick(self) -> None:
        with self._lock:
            if self.phase is not Phase.RUNNING:
                return
            self.direction = self.pending_direction
            new_head = translate(self.body[-1], self.direction)

            # collisions; the colliding head is never appended
            if not self.grid.contains(new_head):
                self._end("wall")
                return
            if new_head in self.body:
                self._end("self")
                return

            self.body.append(new_head)
            self.tick_count += 1
            if new_head == self.food:
                self.score += 1
                self.food = self._place_food()
            else:
                self.body.pop(0)

    def _end(self, reason: str) -> None:
        self.phase = Phase.ENDED
        self.reason = reason
        logger.info("game over (%s) score=%d length=%d ticks=%d",
                    reason, self.score, len(self.body), self.tick_count)

    def _place_food(self) -> Optional[Cell]:
        occ = set(self.body)
        # cheap draws while the board is sparse, then the exact free set
        for _ in range(self.food_max_rejections):
            cell = self.grid.random_cell(self.rng)
            if cell not in occ:
                return cell
        free = self.grid.free_cells(occ)
        if not free:
            logger.info("no free cell left for food")
            return None
        return self.rng.choice(free)

    # ---- read side ----
    def snapshot(self) -> Snapshot:
        with self._lock:
            return Snapshot(
                body=tuple(self.body),
                food=self.food,
                direction=self.direction,
                pending_direction=self.pending_direction,
                score=self.score,
                phase=self.phase,
                tick_count=self.tick_count,
                reason=self.reason,
                grid_size=self.grid.size,
            )

    # ---- checkpointing hooks (pure-Python) ----
    def get_state(self) -> Dict[str, Any]:
        """Pure-Python, JSON-serializable state (plus RNG)."""
        with self._lock:
            return {
                "grid_size": self.grid.size,
                "body": [list(c) for c in self.body],
                "food": list(self.food) if self.food is not None else None,
                "direction": self.direction.name,
                "pending_direction": self.pending_direction.name,
                "score": self.score,
                "phase": self.phase.value,
                "tick_count": self.tick_count,
                "reason": self.reason,
                "rng_state": _rng_state_to_json(self.rng.getstate()),
            }

    def set_state(self, state: Dict[str, Any]) -> None:
        """Restore exact internal state (including RNG). Raises ValueError on a corrupt payload."""
        try:
            grid_size = int(state["grid_size"])
            body = [Cell(int(x), int(y)) for x, y in state["body"]]
            food = Cell(*map(int, state["food"])) if state["food"] is not None else None
            direction = Direction[state["direction"]]
            pending = Direction[state.get("pending_direction", state["direction"])]
            score = int(state["score"])
            phase = Phase(state["phase"])
            tick_count = int(state.get("tick_count", 0))
            reason = state.get("reason")
            rng = None
            if state.get("rng_state") is not None:
                # decode into a scratch generator so a bad state never half-applies
                rng = random.Random()
                rng.setstate(_rng_state_from_json(state["rng_state"]))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"malformed engine state: {e}") from e

        with self._lock:
            if grid_size != self.grid.size:
                raise ValueError(f"state is for a {grid_size} grid, engine has {self.grid.size}")
            _validate(self.grid, body, food, score)
            if pending is direction.opposite:
                raise ValueError(f"pending direction {pending.name} reverses {direction.name}")
            self.body = body
            self.food = food
            self.direction = direction
            self.pending_direction = pending
            self.score = score
            self.phase = phase
            self.tick_count = tick_count
            self.reason = reason
            if rng is not None:
                self.rng.setstate(rng.getstate())


def _validate(grid: Grid, body: List[Cell], food: Optional[Cell], score: int) -> None:
    if not body:
        raise ValueError("snake body must not be empty")
    if len(set(body)) != len(body):
        raise ValueError("snake body overlaps itself")
    for c in body:
        if not grid.contains(c):
            raise ValueError(f"body cell {tuple(c)} is out of bounds")
    if food is None:
        if len(body) < grid.area:
            raise ValueError("food missing while free cells remain")
    else:
        if not grid.contains(food):
            raise ValueError(f"food {tuple(food)} is out of bounds")
        if food in body:
            raise ValueError("food is inside the snake body")
    if score < 0:
        raise ValueError("score must be >= 0")


def _rng_state_to_json(st):
    version, internal, gauss = st
    return [version, list(internal), gauss]


def _rng_state_from_json(st):
    version, internal, gauss = st
    return (version, tuple(internal), gauss)
