"""
Input Validation Errors

All failures are detected when a velocity gradient tensor is built and are
raised straight to the caller. Each subclasses ValueError so callers that
already guard numerical routines with ``except ValueError`` keep working.
"""


class StrainRateError(ValueError):
    """Base class for invalid velocity gradient input."""


class InvalidInputShape(StrainRateError):
    """Component count is neither 4 (2D) nor 9 (3D)."""

    def __init__(self, count):
        self.count = count
        super().__init__(
            f"velocity gradient tensor must have 4 (2D) or 9 (3D) components, "
            f"got {count}"
        )


class MissingComponent(StrainRateError):
    """A component required for the detected dimension is absent."""

    def __init__(self, name, dim):
        self.name = name
        self.dim = dim
        super().__init__(f"{dim}D velocity gradient tensor is missing component '{name}'")


class ShapeMismatch(StrainRateError):
    """Component fields do not share one array shape."""

    def __init__(self, shapes):
        self.shapes = dict(shapes)
        listing = ", ".join(f"{name}={shape}" for name, shape in self.shapes.items())
        super().__init__(f"velocity gradient components differ in shape: {listing}")
