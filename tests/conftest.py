import random

import pytest

from torpedo.config import CFG, RIGHT
from torpedo.game import GameState


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_state():
    """Build a GameState from explicit cells, bypassing new_game_state."""
    def _make(body, heading=RIGHT, item=(15, 15), score=0, cfg=CFG, seed=1):
        return GameState(
            body=list(body),
            heading=heading,
            pending=heading,
            item=item,
            score=score,
            level=score // cfg.items_per_level + 1,
            cfg=cfg,
            rng=random.Random(seed),
        )
    return _make
