"""
Strain Rate Invariants

Scalar measures derived from a strain rate tensor field.

    |S| = sqrt(2 * S_ij * S_ij)     strain rate magnitude
    tr(S) = S_xx + S_yy (+ S_zz)    equals the velocity divergence
    eig(S)                          principal strain rates
"""

import numpy as np


def strain_rate_magnitude(sr):
    """
    Compute strain rate magnitude.

    |S| = sqrt(2 * S_ij * S_ij)

    Parameters
    ----------
    sr : StrainRate2D or StrainRate3D
        Strain rate tensor

    Returns
    -------
    magnitude : ndarray
        Strain rate magnitude, same shape as the components
    """
    s_ij_s_ij = sum(component * component for component in sr.as_dict().values())
    return np.sqrt(2.0 * s_ij_s_ij)


def strain_rate_trace(sr):
    """Trace of the strain rate tensor (local volumetric dilatation rate)."""
    trace = sr.xx + sr.yy
    if sr.dim == 3:
        trace = trace + sr.zz
    return trace


def principal_strain_rates(sr):
    """
    Principal strain rates (eigenvalues of S) at every sample.

    Parameters
    ----------
    sr : StrainRate2D or StrainRate3D
        Strain rate tensor

    Returns
    -------
    rates : ndarray
        Shape ``sr.shape + (dim,)``, sorted ascending along the last axis.
    """
    return np.linalg.eigvalsh(sr.as_matrix())
