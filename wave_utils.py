"""
Module for core wave-simulation utility functions.

Provides functions for:
- Deriving the grid size, timestep, step count and snapshot interval.
- Applying the zero Dirichlet boundary conditions.
"""

import logging
from dataclasses import fields

import numpy as np

import simulation_constants as constants
from wave_parameters import DerivedParameters, ParameterError, WaveParameters

logger = logging.getLogger(__name__)


def calculate_dt(dx: float, c: float) -> float:
    """
    Calculate the timestep dt from the grid spacing and wave speed.

    dt = CFL_FACTOR * dx / c
    """
    return constants.CFL_FACTOR * dx / c

def derive_parameters(params: WaveParameters) -> DerivedParameters:
    """
    Compute the derived grid and stepping constants of a parameter set.

    All counts are truncated, not rounded:
        ngrid  = int((x2 - x1) / dx)
        dt     = 0.5 * dx / c
        nsteps = int(runtime / dt)
        nper   = int(outtime / dt)

    Parameters
    ----------
    params : WaveParameters
        Validated user parameters.

    Returns
    -------
    DerivedParameters
        A new record holding the user parameters and the derived values.

    Raises
    ------
    ParameterError
        If fewer than two grid points result, or if outtime is shorter than
        one timestep (which would make nper zero).
    """
    ngrid = int((params.x2 - params.x1) / params.dx)
    dt = calculate_dt(params.dx, params.c)
    nsteps = int(params.runtime / dt)
    nper = int(params.outtime / dt)

    errors = []
    if ngrid < constants.MIN_GRID_POINTS:
        errors.append(f"dx={params.dx:g} yields ngrid={ngrid}; at least "
                      f"{constants.MIN_GRID_POINTS} grid points are needed")
    if nper == 0:
        errors.append(f"outtime={params.outtime:g} is shorter than one timestep dt={dt:g}")
    if errors:
        raise ParameterError(errors)

    logger.debug("Derived ngrid=%d dt=%g nsteps=%d nper=%d", ngrid, dt, nsteps, nper)
    user_values = {field.name: getattr(params, field.name) for field in fields(WaveParameters)}
    return DerivedParameters(**user_values, ngrid=ngrid, dt=dt, nsteps=nsteps, nper=nper)

def apply_boundary_conditions(rho: np.ndarray) -> np.ndarray:
    """
    Pin both end points of the field to the Dirichlet boundary value.

    Modifies 'rho' in-place.

    Parameters
    ----------
    rho : np.ndarray
        Field values on the full grid, boundary points included.

    Returns
    -------
    np.ndarray
        The same array, with rho[0] and rho[-1] set to the boundary value.
    """
    rho[0] = constants.BOUNDARY_VALUE
    rho[-1] = constants.BOUNDARY_VALUE
    return rho
