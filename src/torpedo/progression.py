# progression.py
from .config import CFG


def level_for(score: int, per_level: int = CFG.items_per_level) -> int:
    return score // per_level + 1


def tick_interval_for(
    level: int,
    initial: int = CFG.initial_interval_ms,
    step: int = CFG.interval_step_ms,
    minimum: int = CFG.min_interval_ms,
) -> int:
    """Linear speed ramp: `step` ms faster per level, never below `minimum`."""
    return max(minimum, initial - (level - 1) * step)


def moves_per_second(interval_ms: int) -> float:
    return round(1000 / interval_ms, 1)


def speed_fraction(
    interval_ms: int,
    initial: int = CFG.initial_interval_ms,
    minimum: int = CFG.min_interval_ms,
) -> float:
    """How far along the ramp we are, 0.0 at the start and 1.0 at full speed."""
    if initial <= minimum:
        return 1.0
    return min(1.0, max(0.0, (initial - interval_ms) / (initial - minimum)))
