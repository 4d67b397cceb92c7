from tdrl.algorithms.control import SARSA, ExpectedSARSA, QLearning, SARSALambda, TDController
from tdrl.algorithms.prediction import GTD2, TD

__all__ = [
    "ExpectedSARSA",
    "GTD2",
    "QLearning",
    "SARSA",
    "SARSALambda",
    "TD",
    "TDController",
]
