# game.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import random

from .collision import Collision, resolve
from .config import CFG, Config, RIGHT
from .grid import Cell, Heading, is_opposite, step
from .progression import level_for, tick_interval_for
from .spawn import spawn_item


class Event(Enum):
    STARTED = "started"
    MOVED = "moved"
    ATE = "ate"
    DIED = "died"
    PAUSED = "paused"
    RESUMED = "resumed"
    RESET = "reset"


# ---------- State ----------
@dataclass
class GameState:
    body: List[Cell]               # head at index 0
    heading: Heading
    pending: Heading               # applied at the start of the next tick
    item: Optional[Cell]
    score: int = 0
    level: int = 1
    interval_ms: int = CFG.initial_interval_ms
    cfg: Config = CFG
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @property
    def head(self) -> Cell:
        return self.body[0]


def new_game_state(cfg: Config = CFG, rng: Optional[random.Random] = None) -> GameState:
    rng = rng if rng is not None else random.Random(cfg.seed)
    n = cfg.grid_size
    start = (n // 2, n // 2)
    body = [start]

    item: Optional[Cell] = (3 * n // 4, 3 * n // 4)
    if item == start:
        item = spawn_item(body, rng, n, cfg.spawn_attempts)

    return GameState(
        body=body,
        heading=RIGHT,
        pending=RIGHT,
        item=item,
        score=0,
        level=1,
        interval_ms=cfg.initial_interval_ms,
        cfg=cfg,
        rng=rng,
    )


# ---------- Input / Update ----------
def request_heading(state: GameState, heading: Heading) -> bool:
    """Queue a heading for the next tick; a 180° turn is ignored."""
    if is_opposite(heading, state.heading):
        return False
    state.pending = heading
    return True


def step_game(state: GameState) -> Event:
    """
    Advance the game by exactly one grid step.
    Returns Event.MOVED, Event.ATE or Event.DIED. A fatal move leaves the
    body, item and score untouched.
    """
    cfg = state.cfg
    state.heading = state.pending

    candidate = step(state.head, state.heading)
    pickup = candidate == state.item

    if resolve(candidate, state.body, pickup, cfg.grid_size) is not Collision.FREE:
        return Event.DIED

    state.body.insert(0, candidate)
    if not pickup:
        state.body.pop()
        return Event.MOVED

    state.score += 1
    state.item = spawn_item(state.body, state.rng, cfg.grid_size, cfg.spawn_attempts)
    state.level = level_for(state.score, cfg.items_per_level)
    state.interval_ms = tick_interval_for(
        state.level,
        cfg.initial_interval_ms,
        cfg.interval_step_ms,
        cfg.min_interval_ms,
    )
    return Event.ATE
