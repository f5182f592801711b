import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from tetris_config import CONFIG
from tetris_engine import GameEngine
from tetris_rng import SequenceRandom


@pytest.fixture
def make_engine():
    """Engine fed by a fixed piece sequence (indices into PIECES)."""
    def make(*indices):
        return GameEngine(SequenceRandom(indices or [3]))
    return make


@pytest.fixture
def config():
    saved = dict(CONFIG)
    yield CONFIG
    CONFIG.clear()
    CONFIG.update(saved)
