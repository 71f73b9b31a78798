# spawn.py
import logging
import random
from typing import Optional, Sequence

from .grid import Cell, all_cells

logger = logging.getLogger(__name__)


def spawn_item(
    body: Sequence[Cell],
    rng: random.Random,
    size: int,
    max_attempts: int = 1000,
) -> Optional[Cell]:
    """
    Pick a uniformly random free cell by rejection sampling.

    Falls back to a row-major scan after `max_attempts` misses, and returns
    None only when every cell is occupied.
    """
    occupied = set(body)
    for _ in range(max_attempts):
        cell = (rng.randrange(size), rng.randrange(size))
        if cell not in occupied:
            return cell

    for cell in all_cells(size):
        if cell not in occupied:
            logger.debug("Rejection sampling exhausted, scanned to %s", cell)
            return cell

    logger.warning("No free cell left on a %dx%d board", size, size)
    return None
