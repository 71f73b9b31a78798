# src/autopilot/env.py
from __future__ import annotations
from dataclasses import dataclass, field
import random

import numpy as np  # type: ignore
import pygame       # type: ignore

from torpedo.collision import Collision, resolve
from torpedo.config import CFG, Config, CELL_SIZE, HUD_H, UP, DOWN, LEFT, RIGHT
from torpedo.game import Event
from torpedo.grid import Heading, step
from torpedo.render import draw_frame
from torpedo.session import Phase, Session, Snapshot
from torpedo.store import MemoryScoreStore

# -----------------------------------------------------------------------------
# Actions: integers -> grid headings (dx, dy)
# -----------------------------------------------------------------------------
ACTIONS = {
    0: UP,
    1: DOWN,
    2: LEFT,
    3: RIGHT,
}

# -----------------------------------------------------------------------------
# Small geometry helpers
# -----------------------------------------------------------------------------
def left_of(heading: Heading) -> Heading:
    """Rotate a heading 90° counter-clockwise (screen coordinates)."""
    dx, dy = heading
    return (dy, -dx)

def right_of(heading: Heading) -> Heading:
    """Rotate a heading 90° clockwise (screen coordinates)."""
    dx, dy = heading
    return (-dy, dx)

def would_die(snap: Snapshot, heading: Heading, size: int) -> bool:
    """True if moving one cell along `heading` is fatal this tick."""
    cand = step(snap.body[0], heading)
    return resolve(cand, snap.body, cand == snap.item, size) is not Collision.FREE

def manhattan(a, b) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])

# -----------------------------------------------------------------------------
# Observation function
# -----------------------------------------------------------------------------
def observe(snap: Snapshot, size: int) -> np.ndarray:
    """
    Compact 9-D observation:
      0-1: head x, y normalized to [0, 1]
      2-3: item x, y normalized to [0, 1] (the head position if no item)
      4-5: heading dx, dy in {-1, 0, 1}
      6-8: danger ahead / left / right, 1.0 if that move is fatal
    """
    hx, hy = snap.body[0]
    fx, fy = snap.item if snap.item is not None else snap.body[0]
    denom = max(size - 1, 1)
    dx, dy = snap.heading

    return np.array(
        [
            hx / denom, hy / denom, fx / denom, fy / denom,
            float(dx), float(dy),
            float(would_die(snap, snap.heading, size)),
            float(would_die(snap, left_of(snap.heading), size)),
            float(would_die(snap, right_of(snap.heading), size)),
        ],
        dtype=np.float32,
    )

# -----------------------------------------------------------------------------
# Headless environment
# -----------------------------------------------------------------------------
@dataclass
class TorpedoEnv:
    """
    Gym-like wrapper that drives a Session one tick per step, with no
    clock gating.

    Rewards:
      + eat_reward  when the item is eaten
      + shaping_coef * (d_before - d_after) per step (closer -> positive)
      + step_penalty per step
      + death_reward on death
    """
    step_penalty: float = -0.001
    eat_reward: float   = 1.0
    death_reward: float = -1.0
    shaping_coef: float = 0.01
    seed_value: int     = CFG.seed
    cfg: Config         = field(default_factory=lambda: CFG)
    render_enabled: bool = False

    def __post_init__(self):
        self.rng = random.Random(self.seed_value)
        self.np_rng = np.random.default_rng(self.seed_value)
        self.store = MemoryScoreStore()
        self.session: Session | None = None

        self.screen = None
        self.clock = None
        self.font = None
        if self.render_enabled:
            pygame.init()
            px = self.cfg.grid_size * CELL_SIZE
            self.screen = pygame.display.set_mode((px, px + HUD_H))
            pygame.display.set_caption("Torpedo autopilot")
            self.clock = pygame.time.Clock()
            self.font = pygame.font.SysFont(None, 24)

    # Gym-like API -------------------------------------------------------------
    def reset(self, seed: int | None = None) -> np.ndarray:
        """Start a new episode and return the first observation."""
        if seed is not None:
            self.rng.seed(seed)
            self.np_rng = np.random.default_rng(seed)

        # keep the best score across episodes of this env
        self.session = Session(self.cfg, store=self.store, rng=self.rng, clock=lambda: 0.0)
        self.session.start()
        return observe(self.session.snapshot(), self.cfg.grid_size)

    def step(self, action: int):
        """
        Apply an action (0..3), advance exactly one tick, and return
        (obs, reward, terminated, info).
        """
        if self.session is None:
            raise RuntimeError("Call reset() first.")
        if action not in ACTIONS:
            raise ValueError(f"Invalid action {action}")
        if self.session.phase is Phase.GAME_OVER:
            raise RuntimeError("Episode is over; call reset().")

        before = self.session.snapshot()
        self.session.request_heading(ACTIONS[action])
        event = self.session.tick()
        after = self.session.snapshot()
        size = self.cfg.grid_size

        if event is Event.DIED:
            info = {"reason": "death", "score": after.score}
            return observe(after, size), self.death_reward, True, info

        reward = self.step_penalty
        if event is Event.ATE:
            reward += self.eat_reward
        elif before.item is not None:
            d_before = manhattan(before.body[0], before.item)
            d_after = manhattan(after.body[0], before.item)
            reward += self.shaping_coef * (d_before - d_after)

        return observe(after, size), reward, False, {"score": after.score}

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------
    def render(self) -> None:
        """Draw the current frame; a no-op unless render_enabled=True."""
        if not self.render_enabled or self.session is None or self.screen is None:
            return

        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                pygame.quit()
                raise SystemExit

        draw_frame(self.screen, self.font, self.session.snapshot(), self.cfg, pygame.time.get_ticks())
        pygame.display.flip()
        if self.clock is not None:
            self.clock.tick(15)

    def close(self) -> None:
        if self.render_enabled:
            pygame.quit()

    @property
    def action_space_n(self) -> int:
        return len(ACTIONS)

    @property
    def observation_space_shape(self):
        return (9,)
