# src/autopilot/run.py
from __future__ import annotations
import argparse
import csv
import dataclasses
import logging
import os
import time
from typing import List, Optional, Tuple

from autopilot.env import TorpedoEnv
from autopilot.policies import POLICIES
from torpedo.config import CFG

logger = logging.getLogger(__name__)

MAX_STEPS = 10_000


# --------------------------
# Episode loop
# --------------------------
def run_episode(
    env: TorpedoEnv,
    policy: str,
    epsilon: float,
    render_delay: float = 0.0,
) -> Tuple[int, float, int]:
    """
    Play one episode with a scripted policy.

    Returns:
        steps: number of ticks taken
        total: total return (sum of rewards)
        score: final score
    """
    try:
        act = POLICIES[policy]
    except KeyError:
        raise ValueError(f"Unknown policy: {policy}") from None

    obs = env.reset()
    total = 0.0
    steps = 0
    score = 0

    while True:
        a = act(obs, env, epsilon)
        obs, r, done, info = env.step(a)
        total += r
        steps += 1
        score = info.get("score", score)

        if env.render_enabled:
            env.render()
            if render_delay:
                time.sleep(render_delay)

        if done or steps >= MAX_STEPS:
            break

    return steps, total, score


def run_batch(env: TorpedoEnv, episodes: int, policy: str, epsilon: float, out_csv: str) -> List[tuple]:
    rows: List[tuple] = [("ep", "steps", "return", "score")]
    print("ep,steps,return,score")
    for ep in range(1, episodes + 1):
        steps, ret, score = run_episode(env, policy, epsilon, render_delay=0.05 if env.render_enabled else 0.0)
        print(f"{ep},{steps},{ret:.3f},{score}")
        rows.append((ep, steps, float(f"{ret:.6f}"), score))

    with open(out_csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(rows)
    logger.info("Saved %d episode(s) to %s (best score %d)", episodes, out_csv, env.store.value)
    return rows


# --------------------------
# Main
# --------------------------
def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Run the torpedo game headless with a scripted policy")
    parser.add_argument("--episodes", type=int, default=50)
    parser.add_argument("--policy", type=str, default="greedy", choices=sorted(POLICIES))
    parser.add_argument(
        "--epsilon",
        type=float,
        default=0.1,
        help="epsilon for eps-greedy (ignored otherwise)",
    )
    parser.add_argument("--seed", type=int, default=CFG.seed)
    parser.add_argument("--grid", type=int, default=CFG.grid_size)
    parser.add_argument(
        "--outdir",
        type=str,
        default="data/runs",
        help="CSV is written here",
    )
    parser.add_argument("--render", action="store_true", help="watch the episodes in a pygame window")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    os.makedirs(args.outdir, exist_ok=True)
    out_csv = os.path.join(args.outdir, f"autopilot_{args.policy}.csv")

    cfg = dataclasses.replace(CFG, seed=args.seed, grid_size=args.grid)
    env = TorpedoEnv(seed_value=args.seed, cfg=cfg, render_enabled=args.render)
    logger.info("Running %d episode(s) with policy=%s eps=%s", args.episodes, args.policy, args.epsilon)
    try:
        run_batch(env, args.episodes, args.policy, args.epsilon, out_csv)
    finally:
        env.close()


if __name__ == "__main__":
    main()
