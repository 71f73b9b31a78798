# session.py
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple
import logging
import random
import time

from .config import CFG, Config
from .game import Event, GameState, new_game_state, request_heading, step_game
from .grid import Cell, Heading
from .progression import moves_per_second
from .store import MemoryScoreStore, ScoreStore

logger = logging.getLogger(__name__)


class Phase(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


@dataclass(frozen=True)
class Snapshot:
    phase: Phase
    body: Tuple[Cell, ...]
    item: Optional[Cell]
    heading: Heading
    score: int
    best_score: int
    level: int
    interval_ms: int
    new_best: bool

    @property
    def length(self) -> int:
        return len(self.body)

    @property
    def moves_per_second(self) -> float:
        return moves_per_second(self.interval_ms)


Listener = Callable[[Event, Snapshot], None]


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class Session:
    """
    Menu -> Playing <-> Paused -> GameOver -> Playing.

    Owns the GameState and decides when it may advance. All mutation happens
    synchronously inside the command methods and `tick()`.
    """

    def __init__(
        self,
        cfg: Config = CFG,
        store: Optional[ScoreStore] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = monotonic_ms,
    ):
        self.cfg = cfg
        self.store = store if store is not None else MemoryScoreStore()
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.clock = clock

        self.phase = Phase.MENU
        self.state: GameState = new_game_state(cfg, self.rng)
        self.best_score = self.store.load()
        self.new_best = False
        self.last_tick_ms = 0.0
        self._listeners: List[Listener] = []

    # ----- Subscribers -----
    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: Event) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(event, snap)
            except Exception:
                logger.exception("Listener %r failed on %s", listener, event.value)

    # ----- Commands -----
    def _new_round(self) -> None:
        self.state = new_game_state(self.cfg, self.rng)
        self.new_best = False
        self.phase = Phase.PLAYING
        self.last_tick_ms = self.clock()

    def start(self) -> bool:
        if self.phase is not Phase.MENU:
            logger.debug("start ignored in %s", self.phase.value)
            return False
        self._new_round()
        logger.info("Session started")
        self._emit(Event.STARTED)
        return True

    def pause(self) -> bool:
        if self.phase is not Phase.PLAYING:
            logger.debug("pause ignored in %s", self.phase.value)
            return False
        self.phase = Phase.PAUSED
        self._emit(Event.PAUSED)
        return True

    def resume(self) -> bool:
        if self.phase is not Phase.PAUSED:
            logger.debug("resume ignored in %s", self.phase.value)
            return False
        self.phase = Phase.PLAYING
        self.last_tick_ms = self.clock()
        self._emit(Event.RESUMED)
        return True

    def toggle_pause(self) -> bool:
        if self.phase is Phase.PLAYING:
            return self.pause()
        return self.resume()

    def restart(self) -> bool:
        if self.phase is Phase.MENU:
            logger.debug("restart ignored in menu")
            return False
        self._new_round()
        self._emit(Event.RESET)
        return True

    def request_heading(self, heading: Heading) -> bool:
        if self.phase not in (Phase.PLAYING, Phase.PAUSED):
            return False
        return request_heading(self.state, heading)

    # ----- Simulation -----
    def tick(self) -> Optional[Event]:
        """Advance one step if playing; returns the step event or None."""
        if self.phase is not Phase.PLAYING:
            return None

        event = step_game(self.state)
        if event is Event.DIED:
            self._game_over()
        self._emit(event)
        return event

    def update(self, now_ms: Optional[float] = None) -> Optional[Event]:
        """
        Driver entry point. Ticks at most once per call once the current
        interval has elapsed; any extra elapsed time is dropped.
        """
        if self.phase is not Phase.PLAYING:
            return None
        now = self.clock() if now_ms is None else now_ms
        if now - self.last_tick_ms < self.state.interval_ms:
            return None
        self.last_tick_ms = now
        return self.tick()

    def _game_over(self) -> None:
        self.phase = Phase.GAME_OVER
        score = self.state.score
        if score > self.best_score:
            self.best_score = score
            self.new_best = True
            self.store.save(score)
        logger.info(
            "Game over: score=%d level=%d length=%d best=%d",
            score, self.state.level, len(self.state.body), self.best_score,
        )

    # ----- Observation -----
    def snapshot(self) -> Snapshot:
        s = self.state
        return Snapshot(
            phase=self.phase,
            body=tuple(s.body),
            item=s.item,
            heading=s.heading,
            score=s.score,
            best_score=self.best_score,
            level=s.level,
            interval_ms=s.interval_ms,
            new_best=self.new_best,
        )
