import json
import random

import pytest

from torpedo.config import CFG, LEFT, RIGHT, UP
from torpedo.game import Event, GameState
from torpedo.session import Phase, Session
from torpedo.store import JsonScoreStore, MemoryScoreStore


@pytest.fixture
def session(clock):
    return Session(CFG, store=MemoryScoreStore(), rng=random.Random(0), clock=clock)


@pytest.fixture
def events(session):
    seen = []
    session.subscribe(lambda event, snap: seen.append((event, snap.phase)))
    return seen


def place(session, body, heading, item, score=0):
    session.state = GameState(
        body=list(body), heading=heading, pending=heading, item=item,
        score=score, cfg=session.cfg, rng=session.rng,
    )


def test_menu_accepts_only_start(session):
    assert session.phase is Phase.MENU
    assert session.tick() is None
    assert session.update(10_000) is None
    assert not session.request_heading(UP)
    assert not session.pause()
    assert not session.resume()
    assert not session.restart()
    assert session.phase is Phase.MENU


def test_start_resets_and_plays(session, events):
    assert session.start()
    assert session.phase is Phase.PLAYING
    assert events == [(Event.STARTED, Phase.PLAYING)]
    assert session.snapshot().body == ((10, 10),)
    assert not session.start()


def test_pause_resume_toggle(session, events):
    session.start()
    assert session.toggle_pause()
    assert session.phase is Phase.PAUSED
    assert session.tick() is None
    assert session.toggle_pause()
    assert session.phase is Phase.PLAYING
    assert [e for e, _ in events] == [Event.STARTED, Event.PAUSED, Event.RESUMED]


def test_heading_queued_while_paused(session):
    session.start()
    session.pause()
    assert session.request_heading(UP)
    assert session.tick() is None
    assert session.snapshot().body == ((10, 10),)
    session.resume()
    assert session.tick() is Event.MOVED
    assert session.snapshot().body == ((10, 9),)


def test_update_ticks_once_per_interval(session, clock):
    clock.now = 1000
    session.start()
    assert session.update(1100) is None
    assert session.update(1150) is Event.MOVED
    # a long stall still yields a single step
    assert session.update(5000) is Event.MOVED
    assert session.update(5000) is None
    assert session.snapshot().body == ((12, 10),)


def test_update_uses_clock_when_no_time_given(session, clock):
    session.start()
    clock.now = 149
    assert session.update() is None
    clock.now = 150
    assert session.update() is Event.MOVED


def test_resume_rearms_the_timer(session, clock):
    session.start()
    session.pause()
    clock.now = 10_000
    session.resume()
    assert session.update() is None
    clock.now = 10_150
    assert session.update() is Event.MOVED


def test_wall_death_ends_session(session, events):
    session.start()
    place(session, [(0, 5)], LEFT, (10, 10))
    assert session.tick() is Event.DIED
    assert session.phase is Phase.GAME_OVER
    assert events[-1] == (Event.DIED, Phase.GAME_OVER)
    assert session.tick() is None
    assert not session.request_heading(UP)
    assert not session.pause()


def test_new_best_score_is_persisted(clock):
    store = MemoryScoreStore(7)
    session = Session(CFG, store=store, rng=random.Random(0), clock=clock)
    assert session.best_score == 7
    session.start()
    place(session, [(0, 5)], LEFT, (10, 10), score=12)
    session.tick()
    assert session.best_score == 12
    assert store.value == 12
    assert session.snapshot().new_best


def test_new_best_score_is_written_to_disk(tmp_path, clock):
    path = tmp_path / "best.json"
    path.write_text(json.dumps({"bestScore": 7}))
    session = Session(CFG, store=JsonScoreStore(path), rng=random.Random(0), clock=clock)
    assert session.best_score == 7
    session.start()
    place(session, [(0, 5)], LEFT, (10, 10), score=12)
    assert session.tick() is Event.DIED
    assert json.loads(path.read_text()) == {"bestScore": 12}


def test_corrupt_best_score_file_does_not_block_startup(tmp_path, clock):
    path = tmp_path / "best.json"
    path.write_text('{"bestScore": Infinity}')
    session = Session(CFG, store=JsonScoreStore(path), rng=random.Random(0), clock=clock)
    assert session.best_score == 0
    assert session.start()


def test_lower_score_keeps_best(clock):
    store = MemoryScoreStore(20)
    session = Session(CFG, store=store, rng=random.Random(0), clock=clock)
    session.start()
    place(session, [(0, 5)], LEFT, (10, 10), score=12)
    session.tick()
    assert session.best_score == 20
    assert store.value == 20
    assert not session.snapshot().new_best


def test_restart_from_game_over_and_active_phases(session, events):
    session.start()
    place(session, [(0, 5)], LEFT, (10, 10), score=3)
    session.tick()
    assert session.restart()
    assert session.phase is Phase.PLAYING
    assert session.snapshot().score == 0
    assert events[-1] == (Event.RESET, Phase.PLAYING)

    session.pause()
    assert session.restart()
    assert session.phase is Phase.PLAYING

    session.tick()
    assert session.restart()
    assert session.snapshot().body == ((10, 10),)


def test_eat_event_and_snapshot(session, events):
    session.start()
    place(session, [(5, 5)], RIGHT, (6, 5), score=4)
    assert session.tick() is Event.ATE
    snap = session.snapshot()
    assert snap.score == 5
    assert snap.level == 2
    assert snap.interval_ms == 140
    assert snap.length == 2
    assert snap.item not in snap.body
    assert snap.moves_per_second == 7.1


def test_failing_listener_does_not_break_engine(session, caplog):
    def boom(event, snap):
        raise RuntimeError("speaker on fire")

    session.subscribe(boom)
    assert session.start()
    assert session.tick() is Event.MOVED
    assert "speaker on fire" in caplog.text


def test_unsubscribe(session):
    seen = []
    listener = lambda event, snap: seen.append(event)
    session.subscribe(listener)
    session.unsubscribe(listener)
    session.unsubscribe(listener)
    session.start()
    assert seen == []
