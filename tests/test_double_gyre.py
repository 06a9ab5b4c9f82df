"""
Double Gyre Tests

Validates the analytic velocity gradient against finite differences of the
velocity field and runs the per-time-step strain rate workflow.
"""

import pytest
import numpy as np
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from flowpost.flows import double_gyre_velocity, double_gyre_velocity_gradient
from flowpost.strain_rate import compute_strain_rate, compute_strain_rate_fast
from flowpost.invariants import strain_rate_trace
from flowpost.tensors import VelocityGradient2D


A = 0.1
EPSILON = 0.25
OMEGA = 2.0 * np.pi / 10.0


class TestDoubleGyre:
    """Validate the analytic double gyre fields."""

    @pytest.fixture
    def grid(self):
        x = np.linspace(0.0, 2.0, 401)
        y = np.linspace(0.0, 1.0, 201)
        return x, y

    @pytest.mark.parametrize("t", [0.0, 1.3, 7.5])
    def test_gradient_matches_finite_differences(self, grid, t):
        """Analytic gradient agrees with central differences in the interior."""
        x, y = grid
        u, v = double_gyre_velocity(x, y, t, A, EPSILON, OMEGA)
        vgt = double_gyre_velocity_gradient(x, y, t, A, EPSILON, OMEGA)[0]

        dudy, dudx = np.gradient(u, y, x)
        dvdy, dvdx = np.gradient(v, y, x)

        interior = (slice(1, -1), slice(1, -1))
        np.testing.assert_allclose(vgt.UX[interior], dudx[interior], atol=1e-3)
        np.testing.assert_allclose(vgt.UY[interior], dudy[interior], atol=1e-3)
        np.testing.assert_allclose(vgt.VX[interior], dvdx[interior], atol=1e-3)
        np.testing.assert_allclose(vgt.VY[interior], dvdy[interior], atol=1e-3)

    def test_one_record_per_time(self):
        x = np.linspace(0.0, 2.0, 201)
        y = np.linspace(0.0, 1.0, 101)
        t = np.linspace(0.0, 20.0, 21)

        vgt = double_gyre_velocity_gradient(x, y, t, A, EPSILON, OMEGA)

        assert len(vgt) == 21
        assert all(isinstance(g, VelocityGradient2D) for g in vgt)
        assert vgt[0].shape == (101, 201)

    def test_scalar_time(self):
        vgt = double_gyre_velocity_gradient(np.linspace(0, 2, 5), np.linspace(0, 1, 3), 0.5)

        assert len(vgt) == 1
        assert vgt[0].shape == (3, 5)


class TestDoubleGyreStrainRate:
    """Strain rate over a time series, looped by the caller."""

    @pytest.fixture
    def series(self):
        x = np.linspace(0.0, 2.0, 201)
        y = np.linspace(0.0, 1.0, 101)
        t = np.linspace(0.0, 20.0, 21)
        return double_gyre_velocity_gradient(x, y, t, A, EPSILON, OMEGA)

    def test_incompressible(self, series):
        """Trace of S vanishes for the divergence-free double gyre."""
        for vgt in series:
            sr = compute_strain_rate(vgt)
            np.testing.assert_allclose(strain_rate_trace(sr), 0.0, atol=1e-12)

    def test_per_step_results_independent(self, series):
        """Each step is computed from its own gradient only."""
        all_at_once = [compute_strain_rate(vgt) for vgt in series]
        single = compute_strain_rate(series[7])

        np.testing.assert_array_equal(all_at_once[7].xy, single.xy)

    def test_fast_matches_standard(self, series):
        for vgt in series[:3]:
            np.testing.assert_array_equal(compute_strain_rate_fast(vgt).yx,
                                          compute_strain_rate(vgt).yx)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
