"""Torpedo: a grid arcade game engine with a pygame front end."""

from .game import Event, GameState, new_game_state, request_heading, step_game
from .session import Phase, Session, Snapshot

__all__ = [
    "Event",
    "GameState",
    "new_game_state",
    "request_heading",
    "step_game",
    "Phase",
    "Session",
    "Snapshot",
]
