# tests/conftest.py
import os
import random
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable when running from a plain checkout
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

from gridsnake.core import Direction, Phase, SnakeEngine


@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def pygame_session():
    # a window runner may have called pg.quit(); init is idempotent
    pg.init()
    return pg

@pytest.fixture
def screen(pygame_session):
    # Plain Surface is fine for draw tests (no need for display mode)
    return pygame_session.Surface((100, 100), pygame_session.SRCALPHA)

@pytest.fixture
def engine_factory():
    def make(grid_size=5, seed=0, **kwargs):
        return SnakeEngine(grid_size, random.Random(seed), **kwargs)
    return make

@pytest.fixture
def place():
    """Puts an engine into an exact Running position."""
    def _place(engine, body, food, direction=Direction.RIGHT, score=0, phase=Phase.RUNNING):
        state = engine.get_state()
        state.update(
            body=[list(c) for c in body],
            food=list(food) if food is not None else None,
            direction=direction.name,
            pending_direction=direction.name,
            score=score,
            phase=phase.value,
            reason=None,
        )
        engine.set_state(state)
        return engine
    return _place
