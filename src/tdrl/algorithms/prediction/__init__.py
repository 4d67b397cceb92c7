"""Online TD prediction: state-value estimation for a fixed policy."""

from tdrl.algorithms.prediction.gtd2 import GTD2
from tdrl.algorithms.prediction.td import TD

__all__ = ["GTD2", "TD"]
