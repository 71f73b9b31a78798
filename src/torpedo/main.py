# main.py
import argparse
import dataclasses
import logging
import random
from pathlib import Path
from typing import List, Optional

import pygame # type: ignore

from .audio import SoundCues
from .config import CFG, CELL_SIZE, HUD_H, Config
from .controls import handle_input
from .render import draw_frame
from .session import Session
from .store import JsonScoreStore

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Torpedo: grid arcade game")
    parser.add_argument("--grid", type=int, default=CFG.grid_size, help="board is GRID x GRID cells")
    parser.add_argument("--seed", type=int, default=None, help="seed item placement (default: random)")
    parser.add_argument("--mute", action="store_true", help="disable sound cues")
    parser.add_argument(
        "--best-score-file",
        type=Path,
        default=CFG.best_score_path,
        help="where the best score is kept",
    )
    parser.add_argument("--log-level", default="WARNING", help="DEBUG, INFO, WARNING, ...")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    if args.grid < 2:
        raise SystemExit("--grid must be at least 2")
    overrides = {"grid_size": args.grid, "best_score_path": args.best_score_file}
    if args.seed is not None:
        overrides["seed"] = args.seed
    return dataclasses.replace(CFG, **overrides)


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = build_config(args)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    px = cfg.grid_size * CELL_SIZE
    screen = pygame.display.set_mode((px, px + HUD_H))
    pygame.display.set_caption("Torpedo")
    clock = pygame.time.Clock()

    rng = random.Random(cfg.seed) if args.seed is not None else random.Random()
    session = Session(cfg, store=JsonScoreStore(cfg.best_score_path), rng=rng)
    session.subscribe(SoundCues(enabled=not args.mute))
    logger.info("Best score so far: %d", session.best_score)

    running = True
    while running:
        # 1) input
        running = handle_input(session)
        if not running:
            break

        # 2) update, at most one step per frame
        session.update()

        # 3) render
        draw_frame(screen, font, session.snapshot(), cfg, pygame.time.get_ticks())
        pygame.display.flip()
        clock.tick(60)  # high FPS; movement gated inside Session.update

    pygame.quit()

if __name__ == "__main__":
    main()
