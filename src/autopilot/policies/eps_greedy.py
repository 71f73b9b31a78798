# src/autopilot/policies/eps_greedy.py
import numpy as np # type: ignore
from autopilot.policies.random import policy_random
from autopilot.policies.greedy import policy_greedy


def policy_eps_greedy(obs: np.ndarray, env, epsilon: float = 0.1) -> int:
    """With probability epsilon act randomly, otherwise greedily."""
    if env.np_rng.random() < epsilon:
        return policy_random(obs, env)
    return policy_greedy(obs, env)
