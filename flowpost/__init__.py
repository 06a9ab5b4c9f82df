"""
flowpost: velocity gradient post-processing for PIV and CFD fields.

Strain rate and spin tensors from a precomputed velocity gradient tensor,
in 2D or 3D, evaluated pointwise over arrays of any shape.
"""

from .errors import StrainRateError, InvalidInputShape, MissingComponent, ShapeMismatch
from .tensors import (
    VelocityGradient2D,
    VelocityGradient3D,
    StrainRate2D,
    StrainRate3D,
    SpinTensor2D,
    SpinTensor3D,
    velocity_gradient,
    velocity_gradient_from_matrix,
)
from .strain_rate import compute_strain_rate, compute_strain_rate_fast
from .spin import compute_spin_tensor, compute_vorticity
from .invariants import strain_rate_magnitude, strain_rate_trace, principal_strain_rates

__version__ = "0.1.0"

__all__ = [
    'StrainRateError',
    'InvalidInputShape',
    'MissingComponent',
    'ShapeMismatch',
    'VelocityGradient2D',
    'VelocityGradient3D',
    'StrainRate2D',
    'StrainRate3D',
    'SpinTensor2D',
    'SpinTensor3D',
    'velocity_gradient',
    'velocity_gradient_from_matrix',
    'compute_strain_rate',
    'compute_strain_rate_fast',
    'compute_spin_tensor',
    'compute_vorticity',
    'strain_rate_magnitude',
    'strain_rate_trace',
    'principal_strain_rates',
]
