"""Linear function approximation: projectors and the LFA."""

from tdrl.fa.fourier import Fourier
from tdrl.fa.linear import LFA
from tdrl.fa.projection import DenseProjection, Projection, Projector, SparseProjection
from tdrl.fa.uniform_grid import UniformGrid

__all__ = [
    "DenseProjection",
    "Fourier",
    "LFA",
    "Projection",
    "Projector",
    "SparseProjection",
    "UniformGrid",
]
