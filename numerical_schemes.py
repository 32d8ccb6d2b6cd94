"""
Implements the numerical scheme for the 1D damped wave equation.

    d^2 rho / dt^2 = c^2 d^2 rho / dx^2 - (1/tau) d rho / dt

The equation is advanced with an explicit leap-frog variant: the field at
t + dt is computed from the fields at t and t - dt.
"""

from typing import Optional

import numpy as np

import wave_utils
from wave_parameters import DerivedParameters


def leap_frog_step(
    rho: np.ndarray,
    rho_prev: np.ndarray,
    params: DerivedParameters,
    out: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Perform one time step using the leap-frog scheme with linear friction.

    For each interior point i:
        laplacian     = (c/dx)^2 * (rho_{i+1} + rho_{i-1} - 2 rho_i)
        friction      = (rho_i - rho_prev_i) / tau
        rho_next_i    = 2 rho_i - rho_prev_i + dt * (laplacian * dt - friction)
    The boundary points of the result are zero.

    As part of applying the boundary conditions, rho[0] and rho[-1] are set
    to zero before the update.

    Parameters
    ----------
    rho : np.ndarray
        Field at time t. Its end points are overwritten with zero.
    rho_prev : np.ndarray
        Field at time t - dt.
    params : DerivedParameters
        Simulation parameters (c, tau, dx, dt are used).
    out : Optional[np.ndarray]
        Buffer receiving the field at t + dt. Must not share memory with
        'rho' or 'rho_prev'. A new array is allocated if omitted.

    Returns
    -------
    np.ndarray
        The field at time t + dt ('out' if given).
    """
    if rho.shape != rho_prev.shape:
        raise ValueError(f"Field shapes differ: {rho.shape} and {rho_prev.shape}")
    if out is None:
        out = np.zeros_like(rho)
    elif out.shape != rho.shape:
        raise ValueError(f"Output buffer shape {out.shape} does not match field shape {rho.shape}")
    elif np.shares_memory(out, rho) or np.shares_memory(out, rho_prev):
        raise ValueError("Output buffer must not overlap the input fields")

    # Set zero Dirichlet boundary conditions
    wave_utils.apply_boundary_conditions(rho)

    rho_mid = rho[1:-1]
    rho_prev_mid = rho_prev[1:-1]
    laplacian = (params.c / params.dx)**2 * (rho[2:] + rho[:-2] - 2 * rho_mid)
    friction = (rho_mid - rho_prev_mid) / params.tau
    out[1:-1] = 2 * rho_mid - rho_prev_mid + params.dt * (laplacian * params.dt - friction)

    return wave_utils.apply_boundary_conditions(out)
