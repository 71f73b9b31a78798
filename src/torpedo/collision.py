# collision.py
from enum import Enum
from typing import Sequence

from .grid import Cell, in_bounds


class Collision(Enum):
    WALL = "wall"
    SELF = "self"
    FREE = "free"


def resolve(candidate: Cell, body: Sequence[Cell], grows: bool, size: int) -> Collision:
    """
    Classify a candidate head position.

    The tail cell is vacated on a plain move, so it only counts as an
    obstacle when this move also grows the body (pickup tick).
    """
    if not in_bounds(candidate, size):
        return Collision.WALL

    occupied = body if grows else body[:-1]
    if candidate in occupied:
        return Collision.SELF
    return Collision.FREE
