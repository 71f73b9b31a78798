# controls.py
from typing import Dict, Tuple, Union

import pygame # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .session import Phase, Session

Command = Union[str, Tuple[int, int]]

COMMANDS: Dict[int, Command] = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
    pygame.K_SPACE: "space",
    pygame.K_RETURN: "enter",
    pygame.K_KP_ENTER: "enter",
    pygame.K_r: "restart",
}


def dispatch(session: Session, key: int) -> bool:
    """Apply one key press. Returns True if the session accepted it."""
    cmd = COMMANDS.get(key)
    if cmd is None:
        return False

    if session.phase is Phase.MENU:
        return cmd in ("space", "enter") and session.start()

    if session.phase is Phase.GAME_OVER:
        return cmd == "restart" and session.restart()

    # Playing / Paused
    if cmd == "space":
        return session.toggle_pause()
    if cmd == "restart":
        return session.restart()
    if isinstance(cmd, tuple):
        return session.request_heading(cmd)
    return False


def handle_input(session: Session) -> bool:
    """Drain the pygame event queue. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            dispatch(session, event.key)
    return True
