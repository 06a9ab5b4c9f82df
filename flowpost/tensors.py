"""
Tensor Records

Immutable containers for the velocity gradient tensor and the tensors
derived from it.

The 2D and 3D cases are separate record types chosen when the record is
built, so a 2D gradient can never be mistaken for a partially filled 3D
one. Every component is stored as a read-only float64 ndarray; scalar
inputs become 0-d arrays. All components of one record share one shape.

Derived records (strain rate, spin) are built in a single step from fully
computed fields. Mirrored off-diagonal entries are the *same* array object
as their counterpart (strain rate) so symmetry holds bit for bit.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import ClassVar

import numpy as np

from .components import dimension_from_count, vgt_components
from .errors import MissingComponent, ShapeMismatch, StrainRateError


def _readonly(value, copy=False):
    """Return a read-only float64 array for ``value``."""
    if copy:
        arr = np.array(value, dtype=np.float64)
    else:
        arr = np.asarray(value, dtype=np.float64)
        if arr.flags.writeable:
            # Freeze a view so the caller's own array keeps its flags
            arr = arr.view()
    arr.setflags(write=False)
    return arr


class _TensorRecord:
    """Shared behaviour for all component records."""

    dim: ClassVar[int]
    _copy_inputs: ClassVar[bool] = False

    def __post_init__(self):
        originals = [(f.name, getattr(self, f.name)) for f in fields(self)]
        converted = {}
        for name, value in originals:
            # Keep aliased inputs aliased (xy passed as yx stays one object)
            if id(value) not in converted:
                converted[id(value)] = _readonly(value, copy=self._copy_inputs)
            object.__setattr__(self, name, converted[id(value)])

        shapes = {name: getattr(self, name).shape for name in self.components()}
        if len(set(shapes.values())) > 1:
            raise ShapeMismatch(shapes)

    @classmethod
    def components(cls):
        """Component names in row-major order."""
        return tuple(f.name for f in fields(cls))

    @property
    def shape(self):
        """Shape shared by every component field."""
        return getattr(self, self.components()[0]).shape

    def as_dict(self):
        """Return the components as an ordered ``{name: array}`` dict."""
        return {name: getattr(self, name) for name in self.components()}

    def as_matrix(self):
        """
        Stack the components into a matrix field.

        Returns
        -------
        matrix : ndarray
            Shape ``shape + (dim, dim)``; entry ``[..., i, j]`` is the
            (i, j) tensor component at each sample.
        """
        stacked = np.stack([getattr(self, name) for name in self.components()], axis=-1)
        return stacked.reshape(self.shape + (self.dim, self.dim))


# ---------------------------------------------------------------------------
# Velocity gradient tensor (input)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class VelocityGradient2D(_TensorRecord):
    """Planar velocity gradient: UX = du/dx, UY = du/dy, VX = dv/dx, VY = dv/dy."""

    UX: np.ndarray
    UY: np.ndarray
    VX: np.ndarray
    VY: np.ndarray

    dim: ClassVar[int] = 2
    _copy_inputs: ClassVar[bool] = True


@dataclass(frozen=True, eq=False)
class VelocityGradient3D(_TensorRecord):
    """Full 3x3 Jacobian of (u, v, w) with respect to (x, y, z)."""

    UX: np.ndarray
    UY: np.ndarray
    UZ: np.ndarray
    VX: np.ndarray
    VY: np.ndarray
    VZ: np.ndarray
    WX: np.ndarray
    WY: np.ndarray
    WZ: np.ndarray

    dim: ClassVar[int] = 3
    _copy_inputs: ClassVar[bool] = True


VELOCITY_GRADIENT_TYPES = (VelocityGradient2D, VelocityGradient3D)


def velocity_gradient(source):
    """
    Build a velocity gradient record from named components.

    The number of components decides the variant: four gives a 2D record,
    nine a 3D record.

    Parameters
    ----------
    source : Mapping, object or VelocityGradient2D/3D
        Either a mapping of component name -> array, or any object holding
        the components as attributes (e.g. ``types.SimpleNamespace``).
        An existing record is returned unchanged.

    Returns
    -------
    vgt : VelocityGradient2D or VelocityGradient3D

    Raises
    ------
    InvalidInputShape
        Component count is not 4 or 9.
    MissingComponent
        A component required for the detected dimension is absent.
    ShapeMismatch
        Components do not share one shape.
    """
    if isinstance(source, VELOCITY_GRADIENT_TYPES):
        return source

    if isinstance(source, Mapping):
        named = dict(source)
    elif hasattr(source, "__dict__"):
        named = vars(source)
    else:
        raise TypeError(
            f"expected a mapping or an object with named components, "
            f"got {type(source).__name__}"
        )

    dim = dimension_from_count(len(named))
    names = vgt_components(dim)
    for name in names:
        if name not in named:
            raise MissingComponent(name, dim)

    cls = VelocityGradient2D if dim == 2 else VelocityGradient3D
    return cls(**{name: named[name] for name in names})


def velocity_gradient_from_matrix(matrix):
    """
    Build a velocity gradient record from a stacked Jacobian field.

    Parameters
    ----------
    matrix : array_like
        Shape ``(..., d, d)`` with d = 2 or 3, entry ``[..., i, j]`` being
        d(u_i)/d(x_j).

    Returns
    -------
    vgt : VelocityGradient2D or VelocityGradient3D
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.ndim < 2:
        raise StrainRateError(
            f"gradient matrix needs at least 2 dimensions, got shape {matrix.shape}"
        )
    rows, cols = matrix.shape[-2:]
    dim = dimension_from_count(rows * cols)
    if rows != cols:
        raise StrainRateError(f"gradient matrix must be square, got {rows}x{cols}")

    flat = matrix.reshape(matrix.shape[:-2] + (dim * dim,))
    names = vgt_components(dim)
    return velocity_gradient({name: flat[..., k] for k, name in enumerate(names)})


# ---------------------------------------------------------------------------
# Derived tensors (output)
# ---------------------------------------------------------------------------

MIRROR_PAIRS_2D = (("xy", "yx"),)
MIRROR_PAIRS_3D = (("xy", "yx"), ("xz", "zx"), ("yz", "zy"))


class _SymmetricRecord(_TensorRecord):
    """Symmetric tensor: each lower entry equals its upper mirror."""

    _mirror_pairs: ClassVar[tuple]

    def __post_init__(self):
        super().__post_init__()
        for upper, lower in self._mirror_pairs:
            a = getattr(self, upper)
            b = getattr(self, lower)
            if a is not b and not np.array_equal(a, b, equal_nan=True):
                raise StrainRateError(f"strain rate tensor is not symmetric: {lower} != {upper}")


class _AntisymmetricRecord(_TensorRecord):
    """Antisymmetric tensor: zero diagonal, each lower entry negates its mirror."""

    _mirror_pairs: ClassVar[tuple]

    def __post_init__(self):
        super().__post_init__()
        for name in self.components()[:: self.dim + 1]:
            if np.any(getattr(self, name) != 0.0):
                raise StrainRateError(f"spin tensor diagonal entry {name} is not zero")
        for upper, lower in self._mirror_pairs:
            if not np.array_equal(getattr(self, lower), -getattr(self, upper), equal_nan=True):
                raise StrainRateError(f"spin tensor is not antisymmetric: {lower} != -{upper}")


@dataclass(frozen=True, eq=False)
class StrainRate2D(_SymmetricRecord):
    """Symmetric part of a 2D velocity gradient; ``yx`` is ``xy``."""

    xx: np.ndarray
    xy: np.ndarray
    yx: np.ndarray
    yy: np.ndarray

    dim: ClassVar[int] = 2
    _mirror_pairs: ClassVar[tuple] = MIRROR_PAIRS_2D


@dataclass(frozen=True, eq=False)
class StrainRate3D(_SymmetricRecord):
    """Symmetric part of a 3D velocity gradient; lower entries mirror upper ones."""

    xx: np.ndarray
    xy: np.ndarray
    xz: np.ndarray
    yx: np.ndarray
    yy: np.ndarray
    yz: np.ndarray
    zx: np.ndarray
    zy: np.ndarray
    zz: np.ndarray

    dim: ClassVar[int] = 3
    _mirror_pairs: ClassVar[tuple] = MIRROR_PAIRS_3D


@dataclass(frozen=True, eq=False)
class SpinTensor2D(_AntisymmetricRecord):
    """Antisymmetric (rotation) part of a 2D velocity gradient."""

    xx: np.ndarray
    xy: np.ndarray
    yx: np.ndarray
    yy: np.ndarray

    dim: ClassVar[int] = 2
    _mirror_pairs: ClassVar[tuple] = MIRROR_PAIRS_2D


@dataclass(frozen=True, eq=False)
class SpinTensor3D(_AntisymmetricRecord):
    """Antisymmetric (rotation) part of a 3D velocity gradient."""

    xx: np.ndarray
    xy: np.ndarray
    xz: np.ndarray
    yx: np.ndarray
    yy: np.ndarray
    yz: np.ndarray
    zx: np.ndarray
    zy: np.ndarray
    zz: np.ndarray

    dim: ClassVar[int] = 3
    _mirror_pairs: ClassVar[tuple] = MIRROR_PAIRS_3D

