# store.py
import json
import logging
from pathlib import Path
from typing import Protocol, Union

from .config import BEST_SCORE_KEY

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    def load(self) -> int: ...

    def save(self, value: int) -> None: ...


class JsonScoreStore:
    """Best score kept as a single key in a small JSON file.

    Read or write failures never reach the game: they are logged and the
    caller keeps whatever value it has in memory.
    """

    def __init__(self, path: Union[str, Path], key: str = BEST_SCORE_KEY):
        self.path = Path(path)
        self.key = key

    def load(self) -> int:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return max(0, int(data.get(self.key, 0)))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError, TypeError, AttributeError, OverflowError) as exc:
            logger.warning("Could not read best score from %s: %s", self.path, exc)
            return 0

    def save(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({self.key: int(value)}), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not write best score to %s: %s", self.path, exc)


class MemoryScoreStore:
    def __init__(self, value: int = 0):
        self.value = value

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = value
