"""Tests for eligibility traces."""

import numpy as np
import pytest

from tdrl.errors import FeatureIndexError
from tdrl.fa import LFA, DenseProjection, SparseProjection
from tdrl.traces import Accumulating, Replacing

RATE = 0.5  # lambda * gamma


def _phi(i: int, size: int = 4) -> SparseProjection:
    return SparseProjection.of([i], size)


class TestTrace:
    def test_zeros_shape(self):
        assert Replacing.zeros(4).shape == (4, 1)
        assert Accumulating.zeros((4, 3)).shape == (4, 3)

    def test_replacing_decays_geometrically(self):
        trace = Replacing.zeros(4)
        trace.visit(_phi(2))
        for _ in range(3):
            trace.decay(RATE)
        assert trace.values[2, 0] == 0.125

    def test_accumulating_vs_replacing(self):
        acc, rep = Accumulating.zeros(4), Replacing.zeros(4)
        for trace in (acc, rep):
            trace.visit(_phi(1))
            trace.decay(RATE)
            trace.visit(_phi(1))
            trace.decay(RATE)
        assert acc.values[1, 0] == 0.75
        assert rep.values[1, 0] == 0.5

    def test_visit_column(self):
        trace = Accumulating.zeros((4, 2))
        trace.visit(_phi(3), column=1)
        np.testing.assert_array_equal(trace.values[:, 1], [0, 0, 0, 1])
        assert np.all(trace.values[:, 0] == 0.0)

    def test_dense_visit(self):
        acc, rep = Accumulating.zeros(3), Replacing.zeros(3)
        phi = DenseProjection.of([0.5, 0.0, -1.0])
        for trace in (acc, rep):
            trace.visit(phi)
            trace.visit(phi)
        np.testing.assert_array_equal(acc.values[:, 0], [1.0, 0.0, -2.0])
        np.testing.assert_array_equal(rep.values[:, 0], [0.5, 0.0, -1.0])

    def test_update_adds_scaled_trace(self, grid_1d):
        fa = LFA.scalar(grid_1d)
        trace = Replacing.zeros(fa.weights_dim)
        trace.visit(grid_1d.project([0.5]))
        trace.decay(RATE)
        trace.visit(grid_1d.project([3.5]))
        trace.update(fa, error=2.0, learning_rate=0.1)
        assert fa.predict_index([0.5], 0) == pytest.approx(0.1)
        assert fa.predict_index([3.5], 0) == pytest.approx(0.2)
        assert fa.predict_index([5.5], 0) == 0.0

    def test_reset(self):
        trace = Accumulating.zeros(4)
        trace.visit(_phi(0))
        trace.reset()
        assert np.all(trace.values == 0.0)

    def test_values_read_only(self):
        trace = Replacing.zeros(4)
        with pytest.raises(ValueError):
            trace.values[0, 0] = 1.0

    def test_out_of_range_visit(self):
        trace = Replacing.zeros(4)
        with pytest.raises(FeatureIndexError):
            trace.visit(_phi(4, size=5))
        with pytest.raises(FeatureIndexError):
            trace.visit(DenseProjection.of([1.0, 2.0]))
        assert np.all(trace.values == 0.0)
