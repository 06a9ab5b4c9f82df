"""
Spin Tensor and Vorticity

Antisymmetric (rigid rotation) part of the velocity gradient tensor.

    W = 0.5 * (L - L^T),    L_ij = du_i/dx_j

so that L = S + W, with S the strain rate tensor. Off-diagonal entries:
    W_xy = 0.5 * (du/dy - dv/dx) = -W_yx
    W_xz = 0.5 * (du/dz - dw/dx) = -W_zx
    W_yz = 0.5 * (dv/dz - dw/dy) = -W_zy
Diagonal entries vanish.

Vorticity is twice the axial vector of W:
    omega = (dw/dy - dv/dz, du/dz - dw/dx, dv/dx - du/dy)
"""

import numpy as np

from .tensors import SpinTensor2D, SpinTensor3D, VelocityGradient2D, velocity_gradient


def compute_spin_tensor(vgt):
    """
    Compute the spin (rotation rate) tensor.

    Parameters
    ----------
    vgt : VelocityGradient2D, VelocityGradient3D or mapping
        Velocity gradient tensor

    Returns
    -------
    spin : SpinTensor2D or SpinTensor3D
        Antisymmetric tensor with zero diagonal, same shape as the input.
    """
    vgt = velocity_gradient(vgt)
    zero = np.zeros(vgt.shape, dtype=np.float64)

    xy = 0.5 * (vgt.UY - vgt.VX)

    if isinstance(vgt, VelocityGradient2D):
        return SpinTensor2D(xx=zero, xy=xy, yx=-xy, yy=zero)

    xz = 0.5 * (vgt.UZ - vgt.WX)
    yz = 0.5 * (vgt.VZ - vgt.WY)

    return SpinTensor3D(
        xx=zero, xy=xy, xz=xz,
        yx=-xy, yy=zero, yz=yz,
        zx=-xz, zy=-yz, zz=zero,
    )


def compute_vorticity(vgt):
    """
    Compute vorticity from the velocity gradient tensor.

    Parameters
    ----------
    vgt : VelocityGradient2D, VelocityGradient3D or mapping
        Velocity gradient tensor

    Returns
    -------
    vorticity : ndarray or tuple of ndarray
        2D: out-of-plane vorticity dv/dx - du/dy.
        3D: (omega_x, omega_y, omega_z).
    """
    vgt = velocity_gradient(vgt)
    omega_z = vgt.VX - vgt.UY

    if isinstance(vgt, VelocityGradient2D):
        return omega_z

    return vgt.WY - vgt.VZ, vgt.UZ - vgt.WX, omega_z
