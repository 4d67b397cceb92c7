"""Tests for projection containers."""

import numpy as np
import pytest

from tdrl.errors import ConfigurationError
from tdrl.fa import DenseProjection, SparseProjection


class TestSparseProjection:
    def test_expanded(self):
        phi = SparseProjection.of([1, 3], 5)
        np.testing.assert_array_equal(phi.expanded(), [0, 1, 0, 1, 0])
        assert phi.activation == 2
        assert phi.z == 2.0

    def test_subtract_gives_dense(self):
        delta = SparseProjection.of([0], 3) - 0.5 * SparseProjection.of([1], 3)
        assert isinstance(delta, DenseProjection)
        np.testing.assert_allclose(delta.values, [1.0, -0.5, 0.0])

    def test_mixed_sizes_rejected(self):
        with pytest.raises(ConfigurationError):
            SparseProjection.of([0], 3) - SparseProjection.of([0], 4)


class TestDenseProjection:
    def test_z_is_squared_norm(self):
        assert DenseProjection.of([3.0, 4.0]).z == 25.0

    def test_add(self):
        total = DenseProjection.of([1.0, 2.0]) + SparseProjection.of([1], 2)
        np.testing.assert_allclose(total.values, [1.0, 3.0])

    def test_activation_counts_nonzero(self):
        assert DenseProjection.of([0.0, 0.2, -1.0]).activation == 2
