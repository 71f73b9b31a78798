# src/autopilot/policies/random.py
import numpy as np # type: ignore


def policy_random(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """Uniformly random action; reversals are simply ignored by the session."""
    return int(env.np_rng.integers(env.action_space_n))
