"""Online TD control: action-value learners with a behaviour policy."""

from tdrl.algorithms.control.base import TDController
from tdrl.algorithms.control.expected_sarsa import ExpectedSARSA
from tdrl.algorithms.control.q_learning import QLearning
from tdrl.algorithms.control.sarsa import SARSA
from tdrl.algorithms.control.sarsa_lambda import SARSALambda

__all__ = ["ExpectedSARSA", "QLearning", "SARSA", "SARSALambda", "TDController"]
