"""
Module for setting up the simulation problem.

This module is responsible for:
- Loading the simulation parameters from a parameter file.
- Applying command-line overrides to these parameters.
- Generating the computational grid.
- Calculating the initial field (a triangular pulse) on the grid.
"""

import argparse
from typing import Tuple

import numpy as np

import config_loader
import simulation_constants as constants
from wave_parameters import DerivedParameters, WaveParameters

def get_simulation_parameters(args: argparse.Namespace) -> WaveParameters:
    """
    Load the simulation parameters from the parameter file and apply
    command-line overrides.

    Overrides are applied before validation, so an invalid file value that
    is overridden does not cause an error.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments, which include the path to the parameter
        file and any command-line overrides (None when not given).

    Returns
    -------
    WaveParameters
        The final, validated parameters.
    """
    raw_values = config_loader.read_parameter_file(args.param_file)

    for key in constants.PARAMETER_ORDER:
        override = getattr(args, key, None)
        if override is not None:
            raw_values[key] = str(override)

    return config_loader.parse_parameters(raw_values, source=args.param_file)

def initialize_x(params: DerivedParameters) -> np.ndarray:
    """
    Build the uniform grid of ngrid points from x1 to x2 (both included).

    x[i] = x1 + (i * (x2 - x1)) / (ngrid - 1)
    """
    # Evaluated in this order (rather than with np.linspace) to keep the
    # coordinates bit-identical to earlier output files.
    i = np.arange(params.ngrid, dtype=float)
    return params.x1 + (i * (params.x2 - params.x1)) / (params.ngrid - 1)

def initialize_rho(params: DerivedParameters, x: np.ndarray) -> np.ndarray:
    """
    Calculate the initial triangular pulse on the grid.

    The pulse is centered at xmid = (x1 + x2)/2 with peak value 0.25 and
    falls linearly to zero at x1 + 0.25 L and x1 + 0.75 L (L = x2 - x1).
    Outside that span the field is exactly zero.

    Parameters
    ----------
    params : DerivedParameters
        Simulation parameters (x1, x2 are used).
    x : np.ndarray
        Grid coordinates.

    Returns
    -------
    np.ndarray
        Initial field values, index-aligned with 'x'.
    """
    length = params.x2 - params.x1
    xstart = constants.PULSE_START_FRACTION * length + params.x1
    xmid = 0.5 * (params.x2 + params.x1)
    xfinish = constants.PULSE_END_FRACTION * length + params.x1

    outside = (x < xstart) | (x > xfinish)
    triangle = constants.PULSE_PEAK - np.abs(x - xmid) / length
    return np.where(outside, 0.0, triangle)

def setup_grid_and_initial_state(params: DerivedParameters) -> Tuple[np.ndarray, np.ndarray]:
    """
    Set up the computational grid and the initial field.

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        - x (np.ndarray): Grid coordinates.
        - rho_initial (np.ndarray): Initial field values.
    """
    x = initialize_x(params)
    rho_initial = initialize_rho(params, x)
    return x, rho_initial
