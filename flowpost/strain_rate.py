"""
Strain Rate Tensor

Symmetric part of the velocity gradient tensor.

    S = 0.5 * (L + L^T),    L_ij = du_i/dx_j

In 2D:
    S_xx = du/dx
    S_xy = S_yx = 0.5 * (du/dy + dv/dx)
    S_yy = dv/dy

In 3D the xz and yz shears follow the same pattern:
    S_xz = S_zx = 0.5 * (du/dz + dw/dx)
    S_yz = S_zy = 0.5 * (dv/dz + dw/dy)
    S_zz = dw/dz

Diagonal entries are the normal strain rates, off-diagonal entries the
averaged shear strain rates. The mapping is pointwise: every sample of the
input fields is independent, so any array shape (including scalars) works.
Each off-diagonal pair is computed once and mirrored.
"""

import numpy as np
from numba import njit, prange

from .tensors import StrainRate2D, StrainRate3D, VelocityGradient2D, velocity_gradient


def compute_strain_rate(vgt):
    """
    Compute the strain rate tensor from a velocity gradient tensor.

    Parameters
    ----------
    vgt : VelocityGradient2D, VelocityGradient3D or mapping
        Velocity gradient with components UX, UY, VX, VY (2D) or
        UX ... WZ (3D). Mappings and attribute objects are converted
        with ``velocity_gradient``.

    Returns
    -------
    sr : StrainRate2D or StrainRate3D
        Same dimension and per-component shape as the input.

    Raises
    ------
    InvalidInputShape, MissingComponent, ShapeMismatch
        See ``velocity_gradient``.
    """
    vgt = velocity_gradient(vgt)

    xy = 0.5 * (vgt.UY + vgt.VX)

    if isinstance(vgt, VelocityGradient2D):
        return StrainRate2D(xx=vgt.UX, xy=xy, yx=xy, yy=vgt.VY)

    xz = 0.5 * (vgt.UZ + vgt.WX)
    yz = 0.5 * (vgt.VZ + vgt.WY)

    return StrainRate3D(
        xx=vgt.UX, xy=xy, xz=xz,
        yx=xy, yy=vgt.VY, yz=yz,
        zx=xz, zy=yz, zz=vgt.WZ,
    )


@njit(parallel=True, cache=True)
def strain_rate_2d_numba(uy, vx, xy):
    """
    Numba-accelerated 2D shear strain rate.

    Parameters
    ----------
    uy, vx : ndarray
        Flattened du/dy and dv/dx, shape (n,)
    xy : ndarray
        Output shear strain rate, shape (n,)
    """
    n = xy.shape[0]

    for k in prange(n):
        xy[k] = 0.5 * (uy[k] + vx[k])


@njit(parallel=True, cache=True)
def strain_rate_3d_numba(uy, uz, vx, vz, wx, wy, xy, xz, yz):
    """
    Numba-accelerated 3D shear strain rates.

    Parameters
    ----------
    uy, uz, vx, vz, wx, wy : ndarray
        Flattened off-diagonal gradient components, shape (n,)
    xy, xz, yz : ndarray
        Output shear strain rates, shape (n,)
    """
    n = xy.shape[0]

    for k in prange(n):
        xy[k] = 0.5 * (uy[k] + vx[k])
        xz[k] = 0.5 * (uz[k] + wx[k])
        yz[k] = 0.5 * (vz[k] + wy[k])


def _flat(field):
    return np.ascontiguousarray(field).reshape(-1)


def compute_strain_rate_fast(vgt):
    """
    Fast strain rate computation using Numba.

    Same contract and bit-identical results as ``compute_strain_rate``.

    Parameters
    ----------
    vgt : VelocityGradient2D, VelocityGradient3D or mapping
        Velocity gradient tensor

    Returns
    -------
    sr : StrainRate2D or StrainRate3D
    """
    vgt = velocity_gradient(vgt)
    shape = vgt.shape
    n = int(np.prod(shape))

    xy = np.empty(n, dtype=np.float64)

    if isinstance(vgt, VelocityGradient2D):
        strain_rate_2d_numba(_flat(vgt.UY), _flat(vgt.VX), xy)
        xy = xy.reshape(shape)
        return StrainRate2D(xx=vgt.UX, xy=xy, yx=xy, yy=vgt.VY)

    xz = np.empty(n, dtype=np.float64)
    yz = np.empty(n, dtype=np.float64)

    strain_rate_3d_numba(
        _flat(vgt.UY), _flat(vgt.UZ),
        _flat(vgt.VX), _flat(vgt.VZ),
        _flat(vgt.WX), _flat(vgt.WY),
        xy, xz, yz,
    )
    xy = xy.reshape(shape)
    xz = xz.reshape(shape)
    yz = yz.reshape(shape)

    return StrainRate3D(
        xx=vgt.UX, xy=xy, xz=xz,
        yx=xy, yy=vgt.VY, yz=yz,
        zx=xz, zy=yz, zz=vgt.WZ,
    )
