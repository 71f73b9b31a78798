# src/autopilot/policies/greedy.py
from typing import List

import numpy as np # type: ignore

from autopilot.env import ACTIONS, would_die
from torpedo.config import UP, DOWN, LEFT, RIGHT
from torpedo.grid import Cell, Heading, is_opposite


def best_moves_toward(head: Cell, target: Cell) -> List[Heading]:
    """
    Headings ordered by preference: the ones that shrink the Manhattan
    distance first, then the rest. Collisions are not considered here.
    """
    hx, hy = head
    tx, ty = target
    prefs: List[Heading] = []
    if tx < hx:
        prefs.append(LEFT)
    elif tx > hx:
        prefs.append(RIGHT)
    if ty < hy:
        prefs.append(UP)
    elif ty > hy:
        prefs.append(DOWN)
    for d in (UP, DOWN, LEFT, RIGHT):
        if d not in prefs:
            prefs.append(d)
    return prefs


def heading_to_action(heading: Heading) -> int:
    """Map (dx, dy) to the env action id."""
    for a, d in ACTIONS.items():
        if d == heading:
            return a
    raise ValueError(f"Not a heading: {heading}")


def policy_greedy(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """
    Chase the item while avoiding fatal moves:
    - prefer headings that reduce the distance to the item
    - skip any heading that would die this tick
    - if every heading is fatal, keep going straight
    """
    snap = env.session.snapshot()
    size = env.cfg.grid_size
    head = snap.body[0]
    target = snap.item if snap.item is not None else head

    for heading in best_moves_toward(head, target):
        if is_opposite(heading, snap.heading):
            continue
        if not would_die(snap, heading, size):
            return heading_to_action(heading)

    return heading_to_action(snap.heading)
