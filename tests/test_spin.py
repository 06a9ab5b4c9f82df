"""
Tests for the spin tensor and vorticity.

Validates antisymmetry and the decomposition L = S + W.
"""

import pytest
import numpy as np
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from flowpost.components import VGT_COMPONENTS_2D, VGT_COMPONENTS_3D
from flowpost.tensors import SpinTensor2D, SpinTensor3D, velocity_gradient
from flowpost.strain_rate import compute_strain_rate
from flowpost.spin import compute_spin_tensor, compute_vorticity


@pytest.fixture
def vgt_2d():
    rng = np.random.default_rng(10)
    return velocity_gradient({name: rng.standard_normal((20, 30)) for name in VGT_COMPONENTS_2D})


@pytest.fixture
def vgt_3d():
    rng = np.random.default_rng(11)
    return velocity_gradient({name: rng.standard_normal((6, 7, 8)) for name in VGT_COMPONENTS_3D})


class TestSpinTensor:
    """Test spin tensor computation."""

    def test_solid_body_rotation(self):
        """u = -W*y, v = W*x: spin xy = -W, vorticity 2W."""
        omega = 0.75
        vgt = {"UX": 0.0, "UY": -omega, "VX": omega, "VY": 0.0}

        spin = compute_spin_tensor(vgt)

        assert isinstance(spin, SpinTensor2D)
        assert spin.xy == -omega
        assert spin.yx == omega
        assert compute_vorticity(vgt) == 2.0 * omega

    def test_zero_diagonal(self, vgt_3d):
        spin = compute_spin_tensor(vgt_3d)

        assert isinstance(spin, SpinTensor3D)
        for name in ("xx", "yy", "zz"):
            np.testing.assert_array_equal(getattr(spin, name), np.zeros(vgt_3d.shape))

    def test_antisymmetry(self, vgt_3d):
        m = compute_spin_tensor(vgt_3d).as_matrix()

        np.testing.assert_array_equal(m, -np.swapaxes(m, -1, -2))

    def test_decomposition_2d(self, vgt_2d):
        """Strain rate plus spin rebuilds the velocity gradient."""
        L = compute_strain_rate(vgt_2d).as_matrix() + compute_spin_tensor(vgt_2d).as_matrix()

        np.testing.assert_allclose(L, vgt_2d.as_matrix(), rtol=1e-14, atol=1e-14)

    def test_decomposition_3d(self, vgt_3d):
        L = compute_strain_rate(vgt_3d).as_matrix() + compute_spin_tensor(vgt_3d).as_matrix()

        np.testing.assert_allclose(L, vgt_3d.as_matrix(), rtol=1e-14, atol=1e-14)

    def test_pure_strain_has_no_spin(self):
        """Symmetric gradient gives zero spin."""
        vgt = {"UX": 1.0, "UY": 0.4, "VX": 0.4, "VY": -1.0}

        spin = compute_spin_tensor(vgt)

        assert spin.xy == 0.0
        assert spin.yx == 0.0


class TestVorticity:
    """Test vorticity computation."""

    def test_vorticity_2d(self, vgt_2d):
        omega = compute_vorticity(vgt_2d)

        assert omega.shape == vgt_2d.shape
        np.testing.assert_allclose(omega, -2.0 * compute_spin_tensor(vgt_2d).xy, rtol=1e-15)

    def test_vorticity_3d(self, vgt_3d):
        omega_x, omega_y, omega_z = compute_vorticity(vgt_3d)

        np.testing.assert_array_equal(omega_x, vgt_3d.WY - vgt_3d.VZ)
        np.testing.assert_array_equal(omega_y, vgt_3d.UZ - vgt_3d.WX)
        np.testing.assert_array_equal(omega_z, vgt_3d.VX - vgt_3d.UY)

    def test_vorticity_axial_vector(self, vgt_3d):
        """omega_i = -eps_ijk W_jk."""
        spin = compute_spin_tensor(vgt_3d)
        omega_x, omega_y, omega_z = compute_vorticity(vgt_3d)

        np.testing.assert_allclose(omega_x, -2.0 * spin.yz, rtol=1e-14, atol=1e-14)
        np.testing.assert_allclose(omega_y, 2.0 * spin.xz, rtol=1e-14, atol=1e-14)
        np.testing.assert_allclose(omega_z, -2.0 * spin.xy, rtol=1e-14, atol=1e-14)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
