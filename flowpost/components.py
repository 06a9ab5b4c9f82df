"""
Tensor Component Names

Named components of the velocity gradient tensor and of the derived
second-order tensors (strain rate, spin).

Velocity gradient components follow the convention
    <velocity component><coordinate>, e.g. UY = du/dy
so entry (i, j) of the Jacobian is d(u_i)/d(x_j):

        | UX  UY  UZ |
    L = | VX  VY  VZ |
        | WX  WY  WZ |
"""
from .errors import InvalidInputShape

# Velocity gradient tensor components
VGT_COMPONENTS_2D = ("UX", "UY", "VX", "VY")
VGT_COMPONENTS_3D = ("UX", "UY", "UZ", "VX", "VY", "VZ", "WX", "WY", "WZ")

# Derived tensor components (row-major)
TENSOR_COMPONENTS_2D = ("xx", "xy", "yx", "yy")
TENSOR_COMPONENTS_3D = ("xx", "xy", "xz", "yx", "yy", "yz", "zx", "zy", "zz")

# 2D -> 4 components, 3D -> 9 components
VALID_COMPONENT_COUNTS = (4, 9)


def dimension_from_count(count):
    """
    Map a component count to the spatial dimension.

    Parameters
    ----------
    count : int
        Number of named components present

    Returns
    -------
    dim : int
        2 for four components, 3 for nine
    """
    if count == 4:
        return 2
    if count == 9:
        return 3
    raise InvalidInputShape(count)


def vgt_components(dim):
    """Velocity gradient component names for a 2D or 3D field."""
    return VGT_COMPONENTS_2D if dim == 2 else VGT_COMPONENTS_3D


def tensor_components(dim):
    """Derived tensor component names for a 2D or 3D field."""
    return TENSOR_COMPONENTS_2D if dim == 2 else TENSOR_COMPONENTS_3D
