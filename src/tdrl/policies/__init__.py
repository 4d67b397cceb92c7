"""Action-selection policies.

Usage::

    from tdrl.policies import EpsilonGreedy, Greedy, Random

    policy = EpsilonGreedy(Greedy(q_func), Random(n_actions), 0.1)
    action = policy.sample(key, state)
"""

from tdrl.policies.base import FinitePolicy, Policy
from tdrl.policies.epsilon_greedy import EpsilonGreedy
from tdrl.policies.greedy import Greedy, argmax
from tdrl.policies.random import Random
from tdrl.policies.softmax import Softmax

__all__ = [
    "EpsilonGreedy",
    "FinitePolicy",
    "Greedy",
    "Policy",
    "Random",
    "Softmax",
    "argmax",
]
