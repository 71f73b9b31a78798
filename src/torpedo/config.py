# config.py
from dataclasses import dataclass, field
from pathlib import Path

# ----- Grid & window -----
GRID_SIZE = 20
CELL_SIZE = 20
HUD_H = 56

# ----- Colors -----
BG        = (26, 26, 26)
GRID_LINE = (42, 42, 42)
HEAD      = (59, 130, 246)
HEAD_EDGE = (30, 58, 138)
NOSE      = (15, 23, 42)
LIGHTS    = (0, 255, 136)
SEGMENT   = (96, 165, 250)
ITEM      = (0, 255, 255)
ITEM_CORE = (255, 255, 255)
TEXT      = (220, 220, 230)
ACCENT    = (250, 204, 21)
DANGER    = (248, 113, 113)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
HEADINGS = (UP, DOWN, LEFT, RIGHT)

BEST_SCORE_KEY = "bestScore"


# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    seed: int = 0
    grid_size: int = GRID_SIZE
    initial_interval_ms: int = 150
    interval_step_ms: int = 10
    min_interval_ms: int = 50
    items_per_level: int = 5
    spawn_attempts: int = 1000
    best_score_path: Path = field(
        default_factory=lambda: Path.home() / ".torpedo" / "best_score.json"
    )

CFG = Config()
