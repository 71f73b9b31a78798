import random

import pygame # type: ignore
import pytest

from torpedo.config import CFG, UP
from torpedo.controls import COMMANDS, dispatch
from torpedo.session import Phase, Session


@pytest.fixture
def session(clock):
    return Session(CFG, rng=random.Random(0), clock=clock)


def test_wasd_and_arrows_share_headings():
    assert COMMANDS[pygame.K_UP] == COMMANDS[pygame.K_w] == UP
    assert COMMANDS[pygame.K_LEFT] == COMMANDS[pygame.K_a]


def test_menu_starts_on_space_or_enter(session):
    assert not dispatch(session, pygame.K_UP)
    assert not dispatch(session, pygame.K_r)
    assert dispatch(session, pygame.K_RETURN)
    assert session.phase is Phase.PLAYING


def test_space_toggles_pause(session):
    dispatch(session, pygame.K_SPACE)
    assert dispatch(session, pygame.K_SPACE)
    assert session.phase is Phase.PAUSED
    assert dispatch(session, pygame.K_SPACE)
    assert session.phase is Phase.PLAYING


def test_direction_keys_steer(session):
    session.start()
    assert dispatch(session, pygame.K_w)
    assert session.state.pending == UP
    # reversal of the current heading (RIGHT)
    assert not dispatch(session, pygame.K_LEFT)


def test_game_over_only_accepts_restart(session):
    session.start()
    session.phase = Phase.GAME_OVER
    assert not dispatch(session, pygame.K_SPACE)
    assert not dispatch(session, pygame.K_UP)
    assert dispatch(session, pygame.K_r)
    assert session.phase is Phase.PLAYING


def test_unmapped_key_is_ignored(session):
    assert not dispatch(session, pygame.K_F1)
