"""
Analytic Flow Fields

Closed-form velocity and velocity gradient fields for examples and
validation.

Time-dependent double gyre (Shadden et al., 2005) on [0, 2] x [0, 1]:

    f(x, t) = a(t) x^2 + b(t) x
    a(t) = epsilon * sin(omega t)
    b(t) = 1 - 2 epsilon * sin(omega t)

    u = -pi A sin(pi f) cos(pi y)
    v =  pi A cos(pi f) sin(pi y) df/dx

The flow is incompressible, so du/dx + dv/dy = 0 everywhere.
"""

import numpy as np

from .tensors import VelocityGradient2D


def _forcing(x, t, epsilon, omega):
    a = epsilon * np.sin(omega * t)
    b = 1.0 - 2.0 * epsilon * np.sin(omega * t)
    f = a * x * x + b * x
    dfdx = 2.0 * a * x + b
    return a, f, dfdx


def double_gyre_velocity(x, y, t, A=0.1, epsilon=0.25, omega=2.0 * np.pi / 10.0):
    """
    Double gyre velocity at a single time.

    Parameters
    ----------
    x : ndarray
        Grid x-coordinates, shape (nx,)
    y : ndarray
        Grid y-coordinates, shape (ny,)
    t : float
        Time
    A : float
        Velocity amplitude
    epsilon : float
        Amplitude of the gyre separation oscillation
    omega : float
        Angular frequency of the oscillation

    Returns
    -------
    u : ndarray
        X-velocity field, shape (ny, nx)
    v : ndarray
        Y-velocity field, shape (ny, nx)
    """
    X, Y = np.meshgrid(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))
    _, f, dfdx = _forcing(X, t, epsilon, omega)

    u = -np.pi * A * np.sin(np.pi * f) * np.cos(np.pi * Y)
    v = np.pi * A * np.cos(np.pi * f) * np.sin(np.pi * Y) * dfdx
    return u, v


def double_gyre_velocity_gradient(x, y, t, A=0.1, epsilon=0.25, omega=2.0 * np.pi / 10.0):
    """
    Analytic velocity gradient tensor of the double gyre.

    Parameters
    ----------
    x : ndarray
        Grid x-coordinates, shape (nx,)
    y : ndarray
        Grid y-coordinates, shape (ny,)
    t : array_like
        Time values, one gradient field per entry
    A, epsilon, omega : float
        Flow parameters (see ``double_gyre_velocity``)

    Returns
    -------
    vgt : list of VelocityGradient2D
        One record per time value, components of shape (ny, nx)
    """
    X, Y = np.meshgrid(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))
    sin_y = np.sin(np.pi * Y)
    cos_y = np.cos(np.pi * Y)

    fields = []
    for t_k in np.atleast_1d(t):
        a, f, dfdx = _forcing(X, t_k, epsilon, omega)
        sin_f = np.sin(np.pi * f)
        cos_f = np.cos(np.pi * f)

        ux = -np.pi**2 * A * cos_f * dfdx * cos_y
        uy = np.pi**2 * A * sin_f * sin_y
        vx = np.pi * A * sin_y * (2.0 * a * cos_f - np.pi * sin_f * dfdx * dfdx)
        vy = np.pi**2 * A * cos_f * cos_y * dfdx

        fields.append(VelocityGradient2D(UX=ux, UY=uy, VX=vx, VY=vy))

    return fields
